"""
preview.py - breeding preview generator
What a pairing can produce: stat ranges, appearance outcomes, litter size, kinship
"""

from typing import List, Dict, Optional, Any
from dataclasses import dataclass, field

from .models import Dog, Kennel, PERFORMANCE_TRAITS, CATEGORICAL_TRAITS
from .genetics import GeneticsEngine
from .composition import calculate_offspring_composition, composition_for
from .pedigree import InbreedingAnalysis, analyze_inbreeding
from .size_compatibility import SizeCompatibility, check_size_compatibility, expected_puppy_weight
from .generator import BreedingConfig, clamp_stat


@dataclass
class TraitRange:
    """Possible values of one performance trait"""
    trait: str
    minimum: int
    maximum: int

    def to_dict(self) -> Dict[str, Any]:
        return {'min': self.minimum, 'max': self.maximum}


@dataclass
class BreedingPreview:
    """Everything a breeder sees before committing to a pairing"""
    sire_id: str
    dam_id: str
    stat_ranges: List[TraitRange] = field(default_factory=list)
    appearance: Dict[str, List[str]] = field(default_factory=dict)
    litter_size: Dict[str, int] = field(default_factory=dict)
    inbreeding: Optional[InbreedingAnalysis] = None
    size: Optional[SizeCompatibility] = None
    breed_name: str = ""
    hybrid_vigor_bonus: int = 0
    weight_range: Dict[str, int] = field(default_factory=dict)

    def get_range(self, trait: str) -> Optional[TraitRange]:
        return next((r for r in self.stat_ranges if r.trait == trait), None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sire_id': self.sire_id,
            'dam_id': self.dam_id,
            'breed_name': self.breed_name,
            'hybrid_vigor_bonus': self.hybrid_vigor_bonus,
            'stat_ranges': {r.trait: r.to_dict() for r in self.stat_ranges},
            'appearance': {k: list(v) for k, v in self.appearance.items()},
            'litter_size': dict(self.litter_size),
            'weight_range': dict(self.weight_range),
            'inbreeding': self.inbreeding.to_dict() if self.inbreeding else None,
            'size_compatibility': self.size.to_dict() if self.size else None,
        }

    def to_markdown(self) -> str:
        """Stat range table in markdown"""
        if not self.stat_ranges:
            return ""

        header_line = "| Trait | Min | Max |"
        separator = "|---|---|---|"
        data_lines = [
            f"| {r.trait} | {r.minimum} | {r.maximum} |"
            for r in self.stat_ranges
        ]
        return "\n".join([header_line, separator] + data_lines)


class BreedingPreviewGenerator:
    """
    Breeding preview builder.
    Deterministic: no randomness, bounds cover every possible puppy.
    """

    def __init__(self, config: Optional[BreedingConfig] = None):
        self.config = config or BreedingConfig()

    def generate_preview(self, sire: Dog, dam: Dog, kennel: Kennel) -> BreedingPreview:
        """
        Preview a pairing

        Args:
            sire: father candidate
            dam: mother candidate
            kennel: every known dog, for ancestor lookup

        Returns:
            BreedingPreview
        """
        cfg = self.config

        inbreeding = analyze_inbreeding(sire, dam, kennel, cfg.pedigree_depth)
        composition = calculate_offspring_composition(
            composition_for(sire), composition_for(dam)
        )
        hybrid_vigor = 1 + composition.hybrid_vigor_bonus / 100

        sire_genetics = GeneticsEngine.genetics_for(sire)
        dam_genetics = GeneticsEngine.genetics_for(dam)

        preview = BreedingPreview(
            sire_id=sire.id,
            dam_id=dam.id,
            inbreeding=inbreeding,
            size=check_size_compatibility(sire, dam),
            breed_name=composition.display_name,
            hybrid_vigor_bonus=composition.hybrid_vigor_bonus,
            litter_size={'min': cfg.litter_size_min, 'max': cfg.litter_size_max},
        )

        # === performance ranges ===
        for trait in PERFORMANCE_TRAITS:
            average = (sire.stat(trait) + dam.stat(trait)) / 2
            variance = average * cfg.stat_variance
            low_mod, high_mod = GeneticsEngine.possible_modifiers(
                sire_genetics.get(trait), dam_genetics.get(trait)
            )
            scale = hybrid_vigor * inbreeding.penalty_multiplier

            preview.stat_ranges.append(TraitRange(
                trait=trait,
                minimum=clamp_stat((average - variance) * low_mod * scale),
                maximum=clamp_stat((average + variance) * high_mod * scale)
            ))

        # === appearance outcomes ===
        for trait in CATEGORICAL_TRAITS:
            preview.appearance[trait] = GeneticsEngine.possible_phenotypes(
                sire_genetics.get(trait), dam_genetics.get(trait)
            )

        min_weight, max_weight, _ = expected_puppy_weight(sire.weight, dam.weight)
        preview.weight_range = {'min': min_weight, 'max': max_weight}

        return preview
