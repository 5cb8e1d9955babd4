"""
Breeding Engine - usage examples
Breeding scenarios over the sample kennel
"""

import json

from breeding_engine import (
    Kennel,
    PuppyGenerator,
    BreedingPreviewGenerator,
    BreedingValidator,
    calculate_coi,
    build_pedigree_tree,
    composition_summary,
    record_breeding,
    weeks_remaining,
)


def load_sample_kennel() -> Kennel:
    with open('sample_kennel.json', 'r', encoding='utf-8') as f:
        return Kennel.from_dict(json.load(f))


def example_1_labradoodle():
    """
    Example 1: designer breed
    - Labrador Retriever x Poodle gives an F1 Labradoodle with hybrid vigor
    """
    print("\n" + "=" * 60)
    print("Example 1: Labrador Retriever x Poodle")
    print("=" * 60)

    kennel = load_sample_kennel()
    sire = kennel.get_member('lab-max')
    dam = kennel.get_member('poodle-bella')

    preview = BreedingPreviewGenerator().generate_preview(sire, dam, kennel)
    print(f"\nExpected breed: {preview.breed_name} (+{preview.hybrid_vigor_bonus}% vigor)")
    print(preview.to_markdown())

    generator = PuppyGenerator(seed=42)
    litter = generator.generate_litter(sire, dam, kennel, litter_size=3)

    print("\n[Litter]")
    for puppy in litter:
        kennel.add_member(puppy)
        print(f"  {puppy.name}: {composition_summary(puppy.composition)}, "
              f"speed {puppy.stat('speed')}, coat {puppy.coat_color}/{puppy.coat_length}")

    return litter


def example_2_full_siblings():
    """
    Example 2: full siblings
    - lab-max and lab-luna share both parents: coefficient 0.9, 45% penalty
    """
    print("\n" + "=" * 60)
    print("Example 2: full siblings")
    print("=" * 60)

    kennel = load_sample_kennel()
    sire = kennel.get_member('lab-max')
    dam = kennel.get_member('lab-luna')

    report = BreedingValidator().validate_pairing(sire, dam, kennel)
    print(report)

    preview = BreedingPreviewGenerator().generate_preview(sire, dam, kennel)
    analysis = preview.inbreeding
    print(f"\nRelationship: {analysis.relationship}")
    print(f"Coefficient: {analysis.coefficient}, penalty: {analysis.penalty}%")
    print(f"Common ancestors: {', '.join(analysis.common_ancestors)}")

    speed = preview.get_range('speed')
    print(f"Puppy speed range: {speed.minimum}-{speed.maximum}")


def example_3_blocked_size():
    """
    Example 3: extreme size mismatch
    - Great Dane x Chihuahua is blocked
    """
    print("\n" + "=" * 60)
    print("Example 3: Great Dane x Chihuahua")
    print("=" * 60)

    kennel = load_sample_kennel()
    sire = kennel.get_member('dane-titan')
    dam = kennel.get_member('chi-pepper')

    report = BreedingValidator().validate_pairing(sire, dam, kennel)
    print(report)
    print(f"\nCan breed: {report.is_valid}")


def example_4_pedigree():
    """
    Example 4: inbred puppy
    - breed full siblings, then inspect the puppy's COI and pedigree
    """
    print("\n" + "=" * 60)
    print("Example 4: coefficient of inbreeding")
    print("=" * 60)

    kennel = load_sample_kennel()
    sire = kennel.get_member('lab-max')
    dam = kennel.get_member('lab-luna')

    puppy = PuppyGenerator(seed=7).generate_puppy(sire, dam, kennel, name="Scout")
    kennel.add_member(puppy)

    print(f"\n{puppy.name} COI: {calculate_coi(puppy, kennel):.3f}")
    tree = build_pedigree_tree(puppy, kennel, generations=2)
    print(json.dumps(tree.to_dict(), indent=2, ensure_ascii=False))



def example_5_pregnancy():
    """
    Example 5: after the litter
    - recording a pairing starts both cooldowns and the dam's pregnancy
    """
    print("\n" + "=" * 60)
    print("Example 5: pregnancy and cooldown")
    print("=" * 60)

    kennel = load_sample_kennel()
    sire = kennel.get_member('lab-max')
    dam = kennel.get_member('poodle-bella')

    due = record_breeding(sire, dam)
    print(f"\n{dam.name} is due {due:%Y-%m-%d} ({weeks_remaining(due)} weeks)")

    report = BreedingValidator().validate_pairing(sire, dam, kennel)
    for reason in report.reasons:
        print(f"  - {reason}")


if __name__ == "__main__":
    print("Breeding Engine - examples")
    print("=" * 60)

    example_1_labradoodle()
    example_2_full_siblings()
    example_3_blocked_size()
    example_4_pedigree()
    example_5_pregnancy()

    print("\n" + "=" * 60)
    print("All examples finished.")
    print("=" * 60)
