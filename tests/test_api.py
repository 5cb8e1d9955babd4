import pytest

from api import app
from breeding_engine import HYBRID_REGISTRY


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def pairing(sample_data, sire_id, dam_id, **extra):
    return dict(kennel=sample_data, sire_id=sire_id, dam_id=dam_id, **extra)


def test_index(client):
    response = client.get('/')
    assert response.status_code == 200
    assert '/breed' in response.get_json()['endpoints']


def test_hybrids(client):
    data = client.get('/hybrids').get_json()
    assert len(data['hybrids']) == len(HYBRID_REGISTRY)
    assert data['hybrids'][0]['id'] == 'labradoodle'


class TestCompatibility:
    def test_blocked(self, client):
        response = client.post('/compatibility', json={
            'sire': {'weight': 150, 'sex': 'male'},
            'dam': {'weight': 6, 'sex': 'female'},
        })
        assert response.status_code == 200
        assert response.get_json()['compatibility']['severity'] == 'blocked'

    def test_bad_sex(self, client):
        response = client.post('/compatibility', json={
            'sire': {'weight': 70, 'sex': 'other'},
            'dam': {'weight': 60, 'sex': 'female'},
        })
        assert response.status_code == 400
        assert response.get_json()['success'] is False

    def test_missing_dam(self, client):
        response = client.post('/compatibility', json={'sire': {'weight': 70, 'sex': 'male'}})
        assert response.status_code == 400
        assert 'dam' in response.get_json()['error']


class TestPairings:
    def test_preview(self, client, sample_data):
        response = client.post('/preview', json=pairing(sample_data, 'lab-max', 'poodle-bella'))
        assert response.status_code == 200
        preview = response.get_json()['preview']
        assert preview['breed_name'] == 'Labradoodle'
        assert preview['hybrid_vigor_bonus'] == 8

    def test_eligibility(self, client, sample_data):
        data = client.post('/eligibility', json=pairing(sample_data, 'dane-titan', 'chi-pepper')).get_json()
        assert data['success'] is True
        assert data['eligibility']['can_breed'] is False

    def test_breed_seeded(self, client, sample_data):
        body = pairing(sample_data, 'lab-max', 'poodle-bella', seed=10, litter_size=2)
        first = client.post('/breed', json=body).get_json()
        second = client.post('/breed', json=body).get_json()
        assert len(first['litter']) == 2
        assert first['litter'] == second['litter']
        assert first['litter'][0]['composition']['hybrid_id'] == 'labradoodle'

    def test_breed_records_pregnancy(self, client, sample_data):
        data = client.post('/breed', json=pairing(sample_data, 'lab-max', 'poodle-bella', seed=3)).get_json()
        sire, dam = data['parents']
        assert data['due_date'] == dam['pregnancy_due']
        assert dam['is_pregnant'] is True
        assert sire['last_bred'] == dam['last_bred']

    def test_utc_last_bred(self, client, sample_data):
        for dog in sample_data['dogs']:
            if dog['id'] == 'poodle-bella':
                dog['last_bred'] = '2020-01-01T00:00:00.000Z'
        body = pairing(sample_data, 'lab-max', 'poodle-bella', seed=1)
        response = client.post('/eligibility', json=body)
        assert response.status_code == 200
        assert response.get_json()['eligibility']['can_breed'] is True
        response = client.post('/breed', json=body)
        assert response.status_code == 200
        assert response.get_json()['litter']

    def test_breed_rejected(self, client, sample_data):
        response = client.post('/breed', json=pairing(sample_data, 'dane-titan', 'chi-pepper'))
        assert response.status_code == 422
        assert response.get_json()['reasons']

    def test_unknown_dog(self, client, sample_data):
        response = client.post('/preview', json=pairing(sample_data, 'lab-max', 'nobody'))
        assert response.status_code == 404
        assert response.get_json() == {'success': False, 'error': 'unknown dog: nobody'}

    def test_missing_kennel(self, client):
        response = client.post('/breed', json={'sire_id': 'a', 'dam_id': 'b'})
        assert response.status_code == 400
        assert response.get_json()['error'] == 'missing field: kennel'


def test_coi(client, sample_data):
    response = client.post('/coi', json={'kennel': sample_data, 'dog_id': 'lab-max'})
    data = response.get_json()
    assert data['coi'] == 0
    assert data['pedigree']['sire']['id'] == 'lab-duke'
    assert data['pedigree']['dam']['name'] == 'Daisy'


def test_unknown_route(client):
    response = client.get('/nowhere')
    assert response.status_code == 404
    assert response.get_json()['success'] is False


def test_coi_cyclic_records(client, sample_data):
    dogs = {dog['id']: dog for dog in sample_data['dogs']}
    dogs['lab-duke']['parent1_id'] = 'lab-max'
    response = client.post('/coi', json={'kennel': sample_data, 'dog_id': 'lab-max', 'generations': 100000})
    assert response.status_code == 200
    pedigree = response.get_json()['pedigree']
    assert pedigree['sire']['id'] == 'lab-duke'
    assert pedigree['sire']['sire'] is None
