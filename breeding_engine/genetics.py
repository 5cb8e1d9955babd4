"""
genetics.py - trait inheritance rules
Allele dominance tables, phenotype/performance expression, gene inheritance
"""

import random
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple, Union

from .models import Gene, Genetics, Dog, PERFORMANCE_TRAITS, CATEGORICAL_TRAITS


DOMINANT = 'dominant'
RECESSIVE = 'recessive'

# Allele dominance charts (appearance)
COAT_COLOR_DOMINANCE: Mapping[str, str] = MappingProxyType({
    'black': DOMINANT,
    'brown': RECESSIVE,
    'red': RECESSIVE,
    'cream': RECESSIVE,
    'white': RECESSIVE,
    'tan': RECESSIVE,
    'fawn': RECESSIVE,
    'blue': RECESSIVE,
})

COAT_PATTERN_DOMINANCE: Mapping[str, str] = MappingProxyType({
    'solid': DOMINANT,
    'brindle': DOMINANT,
    'merle': DOMINANT,
    'spotted': RECESSIVE,
    'patched': RECESSIVE,
    'sable': RECESSIVE,
})

EYE_COLOR_DOMINANCE: Mapping[str, str] = MappingProxyType({
    'brown': DOMINANT,
    'amber': RECESSIVE,
    'blue': RECESSIVE,
    'green': RECESSIVE,
    'heterochromia': RECESSIVE,
})

COAT_LENGTH_DOMINANCE: Mapping[str, str] = MappingProxyType({
    'short': DOMINANT,
    'medium': RECESSIVE,
    'long': RECESSIVE,
})

# Performance alleles, strongest first
PERFORMANCE_ALLELES: Tuple[str, ...] = ('S+', 'S', 'N', 'W', 'W-')

PERFORMANCE_DOMINANCE: Mapping[str, int] = MappingProxyType({
    'S+': 5,
    'S': 4,
    'N': 3,   # neutral
    'W': 2,
    'W-': 1,
})

NEUTRAL_RANK = 3

SIZE_DOMINANCE: Mapping[str, int] = MappingProxyType({})

# coat type as shown on a dog -> coat length allele
COAT_LENGTH_MAP: Mapping[str, str] = MappingProxyType({
    'smooth': 'short',
    'short': 'short',
    'medium': 'medium',
    'long': 'long',
    'wire': 'short',
    'curly': 'medium',
})

_TRAIT_DOMINANCE: Mapping[str, Mapping[str, Union[str, int]]] = MappingProxyType({
    'coat_color': COAT_COLOR_DOMINANCE,
    'coat_pattern': COAT_PATTERN_DOMINANCE,
    'coat_length': COAT_LENGTH_DOMINANCE,
    'eye_color': EYE_COLOR_DOMINANCE,
    'size': SIZE_DOMINANCE,
    **{trait: PERFORMANCE_DOMINANCE for trait in PERFORMANCE_TRAITS},
})


def dominance_for(trait: str) -> Mapping[str, Union[str, int]]:
    """Dominance table used by a trait"""
    try:
        return _TRAIT_DOMINANCE[trait]
    except KeyError:
        raise ValueError(f"unknown trait: {trait}") from None


class GeneticsEngine:
    """Dominance-based genetics engine"""

    @staticmethod
    def express_trait(
        allele1: str,
        allele2: str,
        dominance: Mapping[str, str],
        rng: random.Random
    ) -> str:
        """
        Expressed appearance allele.
        Exactly one dominant allele wins; otherwise the pick is a coin flip.
        Alleles missing from the table count as recessive.
        """
        dom1 = dominance.get(allele1, RECESSIVE) == DOMINANT
        dom2 = dominance.get(allele2, RECESSIVE) == DOMINANT

        if dom1 and not dom2:
            return allele1
        if dom2 and not dom1:
            return allele2

        # both dominant or both recessive
        return allele1 if rng.random() < 0.5 else allele2

    @staticmethod
    def allele_rank(allele: str) -> int:
        return PERFORMANCE_DOMINANCE.get(allele, NEUTRAL_RANK)

    @staticmethod
    def express_performance_trait(allele1: str, allele2: str, rng: random.Random) -> str:
        """
        Stronger allele is more likely to express, in proportion to its rank.
        Weak alleles still express now and then.
        """
        strength1 = GeneticsEngine.allele_rank(allele1)
        strength2 = GeneticsEngine.allele_rank(allele2)

        chance1 = strength1 / (strength1 + strength2)
        return allele1 if rng.random() < chance1 else allele2

    @staticmethod
    def stat_modifier(allele1: str, allele2: str) -> float:
        """Stat multiplier from gene quality, 0.82 (W-/W-) to 1.3 (S+/S+)"""
        average = (GeneticsEngine.allele_rank(allele1) + GeneticsEngine.allele_rank(allele2)) / 2
        return 0.7 + (average / 5) * 0.6

    @staticmethod
    def infer_allele(stat_value: float) -> str:
        """Performance allele bucket for an observed 0-100 stat"""
        if stat_value >= 90:
            return 'S+'
        if stat_value >= 70:
            return 'S'
        if stat_value >= 50:
            return 'N'
        if stat_value >= 30:
            return 'W'
        return 'W-'

    @staticmethod
    def create_genetics_from_phenotype(
        coat_color: str,
        coat_pattern: str,
        eye_color: str,
        coat_type: str,
        stats: Dict[str, int]
    ) -> Genetics:
        """
        Genetics for a dog with no tracked ancestry.
        Every gene is homozygous for the observed (or inferred) allele.
        """
        coat_length = COAT_LENGTH_MAP.get(coat_type, 'short')

        def homozygous(trait: str, allele: str) -> Gene:
            return Gene(trait=trait, allele1=allele, allele2=allele,
                        dominance=dominance_for(trait))

        genes = {
            'coat_color': homozygous('coat_color', coat_color),
            'coat_pattern': homozygous('coat_pattern', coat_pattern),
            'coat_length': homozygous('coat_length', coat_length),
            'eye_color': homozygous('eye_color', eye_color),
            'size': homozygous('size', 'N'),
        }
        for trait in PERFORMANCE_TRAITS:
            allele = GeneticsEngine.infer_allele(stats.get(trait, 50))
            genes[trait] = homozygous(trait, allele)

        return Genetics(**genes)

    @staticmethod
    def genetics_for(dog: Dog) -> Genetics:
        """Stored genetics, or genetics synthesized from the visible phenotype"""
        if dog.genetics is not None:
            return dog.genetics
        return GeneticsEngine.create_genetics_from_phenotype(
            dog.coat_color,
            dog.coat_pattern,
            dog.eye_color,
            dog.coat_length,
            dog.stats
        )

    @staticmethod
    def random_allele(gene: Gene, rng: random.Random) -> str:
        """Allele passed on to an offspring"""
        return gene.allele1 if rng.random() < 0.5 else gene.allele2

    @staticmethod
    def inherit_gene(sire_gene: Gene, dam_gene: Gene, rng: random.Random) -> Gene:
        """New gene: one random allele from each parent"""
        return Gene(
            trait=sire_gene.trait,
            allele1=GeneticsEngine.random_allele(sire_gene, rng),
            allele2=GeneticsEngine.random_allele(dam_gene, rng),
            dominance=sire_gene.dominance
        )

    @staticmethod
    def inherit_genetics(
        sire_genetics: Genetics,
        dam_genetics: Genetics,
        rng: random.Random
    ) -> Genetics:
        return Genetics(**{
            name: GeneticsEngine.inherit_gene(gene, dam_genetics.get(name), rng)
            for name, gene in sire_genetics.items()
        })

    @staticmethod
    def possible_phenotypes(sire_gene: Gene, dam_gene: Gene) -> List[str]:
        """Every appearance a puppy could show for this gene pair"""
        dominance = sire_gene.dominance
        outcomes = set()

        for a in set(sire_gene.alleles):
            for b in set(dam_gene.alleles):
                dom_a = dominance.get(a, RECESSIVE) == DOMINANT
                dom_b = dominance.get(b, RECESSIVE) == DOMINANT
                if dom_a and not dom_b:
                    outcomes.add(a)
                elif dom_b and not dom_a:
                    outcomes.add(b)
                else:
                    outcomes.update((a, b))

        return sorted(outcomes)

    @staticmethod
    def possible_modifiers(sire_gene: Gene, dam_gene: Gene) -> Tuple[float, float]:
        """(lowest, highest) stat modifier a puppy could inherit"""
        modifiers = [
            GeneticsEngine.stat_modifier(a, b)
            for a in sire_gene.alleles
            for b in dam_gene.alleles
        ]
        return min(modifiers), max(modifiers)

    @staticmethod
    def express_appearance(genetics: Genetics, rng: random.Random) -> Dict[str, str]:
        """Expressed appearance for every categorical gene"""
        return {
            trait: GeneticsEngine.express_trait(
                genetics.get(trait).allele1,
                genetics.get(trait).allele2,
                genetics.get(trait).dominance,
                rng
            )
            for trait in CATEGORICAL_TRAITS
        }
