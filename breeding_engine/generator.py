"""
generator.py - puppy generation engine
PuppyGenerator class
"""

import logging
import random
import uuid
from typing import List, Dict, Optional, Any

from .models import Dog, Kennel, Sex, PERFORMANCE_TRAITS, CATEGORICAL_TRAITS
from .genetics import GeneticsEngine
from .composition import calculate_offspring_composition, composition_for
from .pedigree import analyze_inbreeding
from .size_compatibility import Severity, check_size_compatibility, expected_puppy_weight


logger = logging.getLogger(__name__)


class BreedingConfig:
    """Breeding rules and tuning constants"""

    def __init__(
        self,
        stat_variance: float = 0.10,      # +/- share of the parent average
        litter_size_min: int = 3,
        litter_size_max: int = 7,
        pedigree_depth: int = 5,
        puppy_bond_level: int = 1,        # born into the kennel; bought adults start at 2
        min_breeding_age: int = 52,       # weeks
        min_bond_level: int = 5,
        min_health: int = 80,
        female_cooldown_weeks: int = 16,
        male_cooldown_weeks: int = 4,
        pregnancy_weeks: int = 9
    ):
        if litter_size_min > litter_size_max:
            raise ValueError("litter_size_min must not exceed litter_size_max")

        self.stat_variance = stat_variance
        self.litter_size_min = litter_size_min
        self.litter_size_max = litter_size_max
        self.pedigree_depth = pedigree_depth
        self.puppy_bond_level = puppy_bond_level
        self.min_breeding_age = min_breeding_age
        self.min_bond_level = min_bond_level
        self.min_health = min_health
        self.female_cooldown_weeks = female_cooldown_weeks
        self.male_cooldown_weeks = male_cooldown_weeks
        self.pregnancy_weeks = pregnancy_weeks


def clamp_stat(value: float) -> int:
    return int(round(min(100.0, max(1.0, value))))


class PuppyGenerator:
    """
    Builds puppy records from two parents.

    No validation happens here: the caller has already checked age, health,
    bond, cooldown and size gates. Given two parent records this always
    produces a puppy.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        config: Optional[BreedingConfig] = None
    ):
        self.rng = rng if rng is not None else random.Random(seed)
        self.config = config or BreedingConfig()

    def generate_puppy(
        self,
        sire: Dog,
        dam: Dog,
        kennel: Kennel,
        name: Optional[str] = None
    ) -> Dog:
        """
        Generate a single puppy

        Args:
            sire: father
            dam: mother
            kennel: every known dog, for ancestor lookup
            name: puppy name (random placeholder if omitted)

        Returns:
            new Dog record; the caller adds it to its store
        """
        rng = self.rng
        cfg = self.config

        # Step 1: size gate (blocking is the caller's call)
        size_check = check_size_compatibility(sire, dam)
        if size_check.severity == Severity.BLOCKED:
            logger.warning("generating puppy from blocked pairing %s x %s", sire.id, dam.id)

        # Step 2: inbreeding penalty
        inbreeding = analyze_inbreeding(sire, dam, kennel, cfg.pedigree_depth)
        penalty_multiplier = inbreeding.penalty_multiplier

        # Step 3: composition and hybrid vigor
        composition = calculate_offspring_composition(
            composition_for(sire), composition_for(dam)
        )
        hybrid_vigor = 1 + composition.hybrid_vigor_bonus / 100

        sex = Sex.MALE if rng.random() < 0.5 else Sex.FEMALE

        # Step 4: genes, then performance stats
        sire_genetics = GeneticsEngine.genetics_for(sire)
        dam_genetics = GeneticsEngine.genetics_for(dam)
        genetics = GeneticsEngine.inherit_genetics(sire_genetics, dam_genetics, rng)

        stats = {}
        for trait in PERFORMANCE_TRAITS:
            gene = genetics.get(trait)
            stats[trait] = self._inherit_stat(
                sire.stat(trait),
                dam.stat(trait),
                GeneticsEngine.stat_modifier(gene.allele1, gene.allele2),
                hybrid_vigor,
                penalty_multiplier
            )

        # Step 5: appearance
        appearance = GeneticsEngine.express_appearance(genetics, rng)

        min_weight, max_weight, _ = expected_puppy_weight(sire.weight, dam.weight)
        weight = round(rng.uniform(min_weight, max_weight), 1)

        puppy_id = str(uuid.UUID(int=rng.getrandbits(128), version=4))
        primary = composition.portions[0]

        # Step 6: fresh puppy state
        puppy = Dog(
            id=puppy_id,
            name=name or f"Puppy {puppy_id[:4]}",
            sex=sex,
            breed_id=primary.breed_id,
            breed_name=composition.display_name,
            weight=weight,
            stats=stats,
            genetics=genetics,
            composition=composition,
            parent1_id=sire.id,
            parent2_id=dam.id,
            bond_level=cfg.puppy_bond_level,
            age_weeks=0,
            **appearance
        )

        logger.debug(
            "puppy %s: %s, vigor x%.2f, penalty %d%%",
            puppy.id, composition.display_name, hybrid_vigor, inbreeding.penalty
        )
        return puppy

    def _inherit_stat(
        self,
        sire_value: int,
        dam_value: int,
        gene_modifier: float,
        hybrid_vigor: float,
        penalty_multiplier: float
    ) -> int:
        """base -> gene modifier -> hybrid vigor -> inbreeding penalty -> clamp"""
        average = (sire_value + dam_value) / 2
        variance = average * self.config.stat_variance
        base = self.rng.uniform(average - variance, average + variance)

        value = base * gene_modifier
        value *= hybrid_vigor
        value *= penalty_multiplier
        return clamp_stat(value)

    def roll_litter_size(self) -> int:
        return self.rng.randint(self.config.litter_size_min, self.config.litter_size_max)

    def generate_litter(
        self,
        sire: Dog,
        dam: Dog,
        kennel: Kennel,
        litter_size: Optional[int] = None
    ) -> List[Dog]:
        """A litter of independent puppies"""
        if litter_size is None:
            litter_size = self.roll_litter_size()

        litter = [self.generate_puppy(sire, dam, kennel) for _ in range(litter_size)]
        logger.info("litter of %d from %s x %s", len(litter), sire.id, dam.id)
        return litter

    def breed_summary(self, sire: Dog, dam: Dog, litter: List[Dog]) -> Dict[str, Any]:
        """Plain-data summary of a litter"""
        return {
            'sire': {'id': sire.id, 'name': sire.name},
            'dam': {'id': dam.id, 'name': dam.name},
            'litter_size': len(litter),
            'puppies': [
                {
                    'id': puppy.id,
                    'name': puppy.name,
                    'sex': puppy.sex.value,
                    'breed': puppy.breed_name,
                    'weight': puppy.weight,
                    'stats': dict(puppy.stats),
                    'appearance': {trait: getattr(puppy, trait) for trait in CATEGORICAL_TRAITS},
                }
                for puppy in litter
            ],
        }
