"""
Breeding Engine - kennel breeding simulator
Command line entry point

Usage:
    python main.py --sire lab-max --dam poodle-bella             # breed a litter
    python main.py --sire lab-max --dam lab-luna --preview-only  # preview only
    python main.py --sire lab-max --dam poodle-bella --seed 7 --save
"""

import argparse
import json
import logging
import os
import sys
from datetime import datetime
from typing import Optional

from breeding_engine import (
    Kennel,
    BreedingConfig,
    PuppyGenerator,
    BreedingPreviewGenerator,
    BreedingValidator,
    calculate_coi,
    composition_summary,
    record_breeding,
)


logger = logging.getLogger("breeding_engine.cli")


class KennelEngine:
    """
    Breeding session over one kennel snapshot
    """

    def __init__(self, kennel: Kennel, seed: Optional[int] = None,
                 config: Optional[BreedingConfig] = None):
        """
        Args:
            kennel: every known dog
            seed: random seed (reproducible litters)
            config: breeding rules
        """
        self.kennel = kennel
        self.config = config or BreedingConfig()
        self.generator = PuppyGenerator(seed=seed, config=self.config)
        self.preview_generator = BreedingPreviewGenerator(self.config)
        self.validator = BreedingValidator(self.config)

    def breed(self, sire_id: str, dam_id: str,
              litter_size: Optional[int] = None,
              preview_only: bool = False) -> dict:
        """
        Check, preview and (optionally) breed a pairing

        Returns:
            result dictionary
        """
        sire = self.kennel.get_member(sire_id)
        dam = self.kennel.get_member(dam_id)
        if not sire or not dam:
            missing = sire_id if not sire else dam_id
            return {'success': False, 'error': f"unknown dog: {missing}"}

        report = self.validator.validate_pairing(sire, dam, self.kennel)
        preview = self.preview_generator.generate_preview(sire, dam, self.kennel)

        result = {
            'success': True,
            'timestamp': datetime.now().isoformat(),
            'eligibility': report.to_dict(),
            'preview': preview.to_dict(),
            'preview_markdown': preview.to_markdown(),
            'litter': [],
        }

        if preview_only:
            return result

        if not report.is_valid:
            logger.info("pairing %s x %s rejected: %s", sire_id, dam_id, report.reasons)
            result['success'] = False
            result['error'] = 'pairing not eligible'
            return result

        litter = self.generator.generate_litter(sire, dam, self.kennel, litter_size)
        result['litter'] = [puppy.to_dict() for puppy in litter]
        result['summary'] = self.generator.breed_summary(sire, dam, litter)
        result['due_date'] = record_breeding(sire, dam, config=self.config).isoformat()
        return result

    def display(self, result: dict):
        """Print a result to the console"""
        if 'preview' not in result:
            print(f"Error: {result.get('error')}")
            return

        preview = result['preview']
        eligibility = result['eligibility']

        print("\n" + "=" * 60)
        print(f"Pairing: {preview['sire_id']} x {preview['dam_id']}")
        print("=" * 60)

        print(f"\n[Expected breed] {preview['breed_name']}")
        if preview['hybrid_vigor_bonus']:
            print(f"  hybrid vigor +{preview['hybrid_vigor_bonus']}%")

        inbreeding = preview['inbreeding']
        if inbreeding['is_related']:
            print(f"\n[Kinship] {inbreeding['relationship'] or 'related'} - "
                  f"coefficient {inbreeding['coefficient']:.2f}, "
                  f"penalty {inbreeding['penalty']}%")

        size = preview['size_compatibility']
        print(f"\n[Size] {size['severity']} (risk {size['risk_factor']}) - {size['message']}")

        print("\n[Stat ranges]")
        print(result['preview_markdown'])

        print("\n[Appearance]")
        for trait, outcomes in preview['appearance'].items():
            print(f"  {trait}: {', '.join(outcomes)}")

        if not eligibility['can_breed']:
            print("\n[Not eligible]")
            for reason in eligibility['reasons']:
                print(f"  - {reason}")

        if result.get('litter'):
            print(f"\n[Litter of {len(result['litter'])}]")
            for puppy in result['summary']['puppies']:
                stats = ", ".join(f"{k} {v}" for k, v in puppy['stats'].items())
                print(f"  {puppy['name']} ({puppy['sex']}, {puppy['weight']} lbs) - {stats}")
            print(f"\n[Due date] {result['due_date']}")

    def describe_dog(self, dog_id: str):
        dog = self.kennel.get_member(dog_id)
        if not dog:
            print(f"Error: unknown dog {dog_id}")
            return
        composition = dog.composition
        summary = composition_summary(composition) if composition else f"Purebred {dog.breed_name}"
        print(f"{dog.name} ({dog.id}): {summary}, COI {calculate_coi(dog, self.kennel):.3f}")

    def save(self, result: dict, output_dir: str = "output") -> Optional[str]:
        """Write a result as JSON"""
        if not result.get('litter'):
            print("Nothing to save.")
            return None

        os.makedirs(output_dir, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        json_path = os.path.join(output_dir, f"litter_{timestamp}.json")
        with open(json_path, 'w', encoding='utf-8') as f:
            json.dump(result, f, ensure_ascii=False, indent=2)
        print(f"Saved: {json_path}")
        return json_path


def load_kennel(path: str) -> Kennel:
    with open(path, 'r', encoding='utf-8') as f:
        return Kennel.from_dict(json.load(f))


def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Breeding Engine - kennel breeding simulator"
    )

    parser.add_argument(
        '--population', '-p',
        type=str,
        default='sample_kennel.json',
        help="kennel JSON file (default: sample_kennel.json)"
    )

    parser.add_argument('--sire', type=str, required=True, help="sire id")
    parser.add_argument('--dam', type=str, required=True, help="dam id")

    parser.add_argument(
        '--litter', '-l',
        type=int,
        default=None,
        help="litter size (default: random within the configured range)"
    )

    parser.add_argument(
        '--seed', '-s',
        type=int,
        default=None,
        help="random seed (reproducible litters)"
    )

    parser.add_argument(
        '--preview-only',
        action='store_true',
        help="show the preview without breeding"
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        default='output',
        help="output directory (default: output)"
    )

    parser.add_argument('--save', action='store_true', help="save the litter as JSON")
    parser.add_argument('--no-display', action='store_true', help="skip console output")
    parser.add_argument('--verbose', '-v', action='store_true', help="debug logging")

    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Entry point"""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        kennel = load_kennel(args.population)
    except (OSError, KeyError, ValueError) as e:
        logger.error("cannot load kennel %s: %s", args.population, e)
        return 1

    engine = KennelEngine(kennel, seed=args.seed)
    result = engine.breed(
        args.sire,
        args.dam,
        litter_size=args.litter,
        preview_only=args.preview_only
    )

    if not args.no_display:
        engine.display(result)
        for dog_id in (args.sire, args.dam):
            engine.describe_dog(dog_id)

    if args.save:
        engine.save(result, args.output)

    return 0 if result.get('success') else 1


if __name__ == "__main__":
    sys.exit(main())
