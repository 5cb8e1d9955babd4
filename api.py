"""
Breeding Engine - Flask REST API
HTTP endpoints for breeding previews, litters and pedigree queries

Run: flask --app api run --debug
 or: python api.py
"""

import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from breeding_engine import (
    Kennel,
    PuppyGenerator,
    BreedingPreviewGenerator,
    BreedingValidator,
    SizeProfile,
    Sex,
    HYBRID_REGISTRY,
    check_size_compatibility,
    calculate_coi,
    build_pedigree_tree,
    record_breeding,
    __version__,
)


logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)

preview_generator = BreedingPreviewGenerator()
validator = BreedingValidator()


class NotFound(Exception):
    pass


def _error(message, status):
    return jsonify({'success': False, 'error': message}), status


def _load_pair(data):
    """(kennel, sire, dam) from a request body"""
    kennel = Kennel.from_dict(data['kennel'])
    sire = kennel.get_member(data['sire_id'])
    dam = kennel.get_member(data['dam_id'])
    if sire is None:
        raise NotFound(f"unknown dog: {data['sire_id']}")
    if dam is None:
        raise NotFound(f"unknown dog: {data['dam_id']}")
    return kennel, sire, dam


@app.errorhandler(NotFound)
def handle_not_found(e):
    return _error(str(e), 404)


@app.errorhandler(KeyError)
def handle_missing_field(e):
    return _error(f"missing field: {e.args[0]}", 400)


@app.errorhandler(ValueError)
def handle_bad_value(e):
    return _error(str(e), 400)


@app.errorhandler(Exception)
def handle_unexpected(e):
    if isinstance(e, HTTPException):
        return _error(e.description, e.code)
    logger.exception("unhandled error")
    return _error(str(e), 500)


@app.route('/')
def index():
    """API info"""
    return jsonify({
        'name': 'Breeding Engine API',
        'version': __version__,
        'description': 'Kennel breeding and genetics engine',
        'endpoints': {
            '/hybrids': 'GET - recognized designer breeds',
            '/compatibility': 'POST - size compatibility of two dogs',
            '/eligibility': 'POST - breeding eligibility check',
            '/preview': 'POST - preview a pairing',
            '/breed': 'POST - generate a litter',
            '/coi': 'POST - coefficient of inbreeding and pedigree'
        }
    })


@app.route('/hybrids', methods=['GET'])
def get_hybrids():
    return jsonify({'hybrids': [h.to_dict() for h in HYBRID_REGISTRY]})


@app.route('/compatibility', methods=['POST'])
def size_compatibility():
    """
    Request Body:
    {
        "sire": {"weight": 72, "sex": "male"},
        "dam": {"weight": 50, "sex": "female"}
    }
    """
    data = request.get_json() or {}
    sire = SizeProfile(float(data['sire']['weight']), Sex(data['sire']['sex']))
    dam = SizeProfile(float(data['dam']['weight']), Sex(data['dam']['sex']))

    verdict = check_size_compatibility(sire, dam)
    return jsonify({'success': True, 'compatibility': verdict.to_dict()})


@app.route('/eligibility', methods=['POST'])
def eligibility():
    """
    Request Body:
    {
        "kennel": {"dogs": [...]},
        "sire_id": "...",
        "dam_id": "..."
    }
    """
    data = request.get_json() or {}
    kennel, sire, dam = _load_pair(data)

    report = validator.validate_pairing(sire, dam, kennel)
    return jsonify({'success': True, 'eligibility': report.to_dict()})


@app.route('/preview', methods=['POST'])
def preview():
    """Same body as /eligibility"""
    data = request.get_json() or {}
    kennel, sire, dam = _load_pair(data)

    result = preview_generator.generate_preview(sire, dam, kennel)
    return jsonify({'success': True, 'preview': result.to_dict()})


@app.route('/breed', methods=['POST'])
def breed():
    """
    Request Body:
    {
        "kennel": {"dogs": [...]},
        "sire_id": "...",
        "dam_id": "...",
        "litter_size": null,   // optional, random if omitted
        "seed": null           // optional
    }
    """
    data = request.get_json() or {}
    kennel, sire, dam = _load_pair(data)

    report = validator.validate_pairing(sire, dam, kennel)
    if not report.is_valid:
        return jsonify({
            'success': False,
            'error': 'pairing not eligible',
            'reasons': report.reasons
        }), 422

    generator = PuppyGenerator(seed=data.get('seed'))
    litter_size = data.get('litter_size')
    litter = generator.generate_litter(
        sire, dam, kennel,
        int(litter_size) if litter_size is not None else None
    )

    due = record_breeding(sire, dam)

    return jsonify({
        'success': True,
        'litter': [puppy.to_dict() for puppy in litter],
        'due_date': due.isoformat(),
        'parents': [sire.to_dict(), dam.to_dict()]
    })


@app.route('/coi', methods=['POST'])
def coi():
    """
    Request Body:
    {
        "kennel": {"dogs": [...]},
        "dog_id": "...",
        "generations": 3       // optional pedigree depth
    }
    """
    data = request.get_json() or {}
    kennel = Kennel.from_dict(data['kennel'])
    dog = kennel.get_member(data['dog_id'])
    if dog is None:
        raise NotFound(f"unknown dog: {data['dog_id']}")

    generations = int(data.get('generations', 3))
    return jsonify({
        'success': True,
        'dog_id': dog.id,
        'coi': calculate_coi(dog, kennel),
        'pedigree': build_pedigree_tree(dog, kennel, generations).to_dict()
    })


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    print("=" * 50)
    print("Breeding Engine API Server")
    print("=" * 50)
    print("Server starting at http://localhost:5000")
    print()
    app.run(debug=True, host='0.0.0.0', port=5000)
