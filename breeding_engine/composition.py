"""
composition.py - breed composition tracking
Breed percentages across generations; purebred / F1 / designer breed detection
"""

import math
from typing import Dict, List, Optional

from .models import BreedComposition, BreedPortion, HybridBreed, Dog
from .hybrids import find_hybrid


def _is_close(value: float, target: float) -> bool:
    return math.isclose(value, target, abs_tol=1e-9)


def create_purebred_composition(breed_id: int, breed_name: str) -> BreedComposition:
    """Composition of a purebred dog: a single 100% portion"""
    return BreedComposition(
        portions=(BreedPortion(breed_id, breed_name, 100.0),),
        is_purebred=True,
        is_first_generation=False,
        is_hybrid=False,
        display_name=breed_name
    )


def composition_for(dog: Dog) -> BreedComposition:
    """Stored composition, or purebred in the dog's own breed"""
    if dog.composition is not None:
        return dog.composition
    return create_purebred_composition(dog.breed_id, dog.breed_name)


def calculate_offspring_composition(
    sire_composition: BreedComposition,
    dam_composition: BreedComposition
) -> BreedComposition:
    """
    Breed composition of a puppy.

    Each parent passes on half of every breed it carries; shared breeds add up.
    A 50/50 split only counts as F1 when both parents were purebred.
    """
    combined: Dict[int, BreedPortion] = {}

    for parent in (sire_composition, dam_composition):
        for portion in parent.portions:
            contribution = portion.percentage * 0.5
            existing = combined.get(portion.breed_id)
            if existing:
                combined[portion.breed_id] = BreedPortion(
                    existing.breed_id,
                    existing.breed_name,
                    existing.percentage + contribution
                )
            else:
                combined[portion.breed_id] = BreedPortion(
                    portion.breed_id,
                    portion.breed_name,
                    contribution
                )

    portions = sorted(
        combined.values(),
        key=lambda p: (-p.percentage, p.breed_name)
    )

    is_purebred = len(portions) == 1 and _is_close(portions[0].percentage, 100)

    is_first_generation = (
        len(portions) == 2
        and _is_close(portions[0].percentage, 50)
        and _is_close(portions[1].percentage, 50)
        and sire_composition.is_purebred
        and dam_composition.is_purebred
    )

    hybrid = None
    if is_first_generation:
        hybrid = find_hybrid(portions[0].breed_name, portions[1].breed_name)

    generation: Optional[int] = None
    if not is_purebred:
        if is_first_generation:
            generation = 1
        else:
            generation = max(sire_composition.generation or 0,
                             dam_composition.generation or 0) + 1

    display_name = generate_display_name(
        portions,
        is_purebred,
        is_first_generation,
        hybrid,
        generation
    )

    return BreedComposition(
        portions=tuple(portions),
        is_purebred=is_purebred,
        is_first_generation=is_first_generation,
        is_hybrid=hybrid is not None,
        display_name=display_name,
        hybrid=hybrid,
        generation=generation
    )


def generate_display_name(
    portions: List[BreedPortion],
    is_purebred: bool,
    is_first_generation: bool,
    hybrid: Optional[HybridBreed] = None,
    generation: Optional[int] = None
) -> str:
    """Name shown for a composition"""
    if is_purebred:
        return portions[0].breed_name

    if hybrid is not None:
        if generation and generation > 1:
            return f"{hybrid.name} (F{generation})"
        return hybrid.name

    if is_first_generation and len(portions) == 2:
        return f"{portions[0].breed_name} × {portions[1].breed_name} Mix"

    if len(portions) == 1:
        return portions[0].breed_name

    dominant, secondary = portions[0], portions[1]

    if len(portions) == 2:
        if dominant.percentage >= 75:
            return f"{dominant.breed_name} Mix"
        gen = f" (F{generation})" if generation else ""
        return f"{dominant.breed_name} × {secondary.breed_name} Mix{gen}"

    # 3+ breeds
    if dominant.percentage >= 50:
        return f"{dominant.breed_name} Mix"
    return f"{dominant.breed_name} × {secondary.breed_name} Mix"


def composition_summary(composition: BreedComposition) -> str:
    """Human-readable one-line summary"""
    if composition.is_purebred:
        return f"Purebred {composition.portions[0].breed_name}"

    if composition.is_hybrid and composition.hybrid:
        gen = f" (Generation {composition.generation})" if composition.generation else ""
        return f"{composition.hybrid.name} designer breed{gen}"

    percentages = ", ".join(
        f"{round(p.percentage)}% {p.breed_name}" for p in composition.portions
    )
    gen = f" (F{composition.generation})" if composition.generation else ""
    return f"Mixed breed: {percentages}{gen}"


def simplified_composition(composition: BreedComposition) -> List[BreedPortion]:
    """Portions rounded to the nearest 5%"""
    return [
        BreedPortion(p.breed_id, p.breed_name, math.floor(p.percentage / 5 + 0.5) * 5)
        for p in composition.portions
    ]


def primary_breed(composition: BreedComposition) -> BreedPortion:
    return composition.portions[0]


def has_breed_in_ancestry(composition: BreedComposition, breed_id: int) -> bool:
    return any(p.breed_id == breed_id for p in composition.portions)


def breed_percentage(composition: BreedComposition, breed_id: int) -> float:
    return next(
        (p.percentage for p in composition.portions if p.breed_id == breed_id),
        0.0
    )


def has_same_composition(
    comp1: BreedComposition,
    comp2: BreedComposition,
    tolerance: float = 5
) -> bool:
    """Same breeds, each within `tolerance` percentage points"""
    if len(comp1.portions) != len(comp2.portions):
        return False

    for portion in comp1.portions:
        other = next((p for p in comp2.portions if p.breed_id == portion.breed_id), None)
        if other is None:
            return False
        if abs(portion.percentage - other.percentage) > tolerance:
            return False

    return True
