import random

import pytest

from breeding_engine import (
    BreedingConfig,
    PuppyGenerator,
    Sex,
    PERFORMANCE_TRAITS,
    CATEGORICAL_TRAITS,
    expected_puppy_weight,
)
from breeding_engine.generator import clamp_stat


def clone(dog, new_id, breed_id=None, breed_name=None):
    """Same phenotype as `dog`, no recorded parents"""
    return type(dog)(
        id=new_id,
        name=dog.name,
        sex=dog.sex,
        breed_id=breed_id if breed_id is not None else dog.breed_id,
        breed_name=breed_name or dog.breed_name,
        weight=dog.weight,
        stats=dict(dog.stats),
        coat_color=dog.coat_color,
        coat_pattern=dog.coat_pattern,
        coat_length=dog.coat_length,
        eye_color=dog.eye_color,
        age_weeks=dog.age_weeks,
        bond_level=dog.bond_level,
    )


@pytest.mark.parametrize('value, expected', [
    (-20, 1), (0.4, 1), (1, 1), (55.5, 56), (99.6, 100), (140, 100),
])
def test_clamp_stat(value, expected):
    assert clamp_stat(value) == expected


def test_config_rejects_inverted_litter_range():
    with pytest.raises(ValueError):
        BreedingConfig(litter_size_min=8, litter_size_max=3)


class TestPuppy:
    def test_fresh_puppy_state(self, kennel, generator):
        sire, dam = kennel.get_member('lab-max'), kennel.get_member('poodle-bella')
        puppy = generator.generate_puppy(sire, dam, kennel, name='Biscuit')

        assert puppy.name == 'Biscuit'
        assert puppy.parent1_id == 'lab-max'
        assert puppy.parent2_id == 'poodle-bella'
        assert puppy.age_weeks == 0
        assert puppy.bond_level == 1
        assert puppy.sex in (Sex.MALE, Sex.FEMALE)
        assert puppy.genetics is not None
        assert puppy.id not in kennel

    def test_labradoodle(self, kennel, generator):
        puppy = generator.generate_puppy(
            kennel.get_member('lab-max'), kennel.get_member('poodle-bella'), kennel
        )
        assert puppy.composition.is_hybrid
        assert puppy.composition.hybrid.id == 'labradoodle'
        assert puppy.breed_name == 'Labradoodle'

    def test_weight_in_expected_range(self, kennel, generator):
        sire, dam = kennel.get_member('lab-max'), kennel.get_member('poodle-bella')
        low, high, _ = expected_puppy_weight(sire.weight, dam.weight)
        for puppy in generator.generate_litter(sire, dam, kennel, litter_size=10):
            assert low <= puppy.weight <= high

    def test_appearance_comes_from_parent_alleles(self, kennel, generator):
        sire, dam = kennel.get_member('lab-max'), kennel.get_member('poodle-bella')
        for puppy in generator.generate_litter(sire, dam, kennel, litter_size=10):
            # black coat and brown eyes are dominant and homozygous in the sire
            assert puppy.coat_color == 'black'
            assert puppy.eye_color == 'brown'
            assert puppy.coat_pattern == 'solid'
            for trait in CATEGORICAL_TRAITS:
                gene = puppy.genetics.get(trait)
                assert getattr(puppy, trait) in gene.alleles


class TestStats:
    def test_always_in_bounds(self, make_dog):
        top_sire = make_dog('top', stats={t: 100 for t in PERFORMANCE_TRAITS})
        top_dam = make_dog('topdam', sex=Sex.FEMALE, stats={t: 100 for t in PERFORMANCE_TRAITS})
        low_sire = make_dog('low', stats={t: 1 for t in PERFORMANCE_TRAITS})
        low_dam = make_dog('lowdam', sex=Sex.FEMALE, stats={t: 1 for t in PERFORMANCE_TRAITS})

        from breeding_engine import Kennel
        kennel = Kennel.from_dogs([top_sire, top_dam, low_sire, low_dam])
        generator = PuppyGenerator(seed=99)

        for sire, dam in ((top_sire, top_dam), (low_sire, low_dam), (top_sire, low_dam)):
            for puppy in generator.generate_litter(sire, dam, kennel, litter_size=20):
                for trait in PERFORMANCE_TRAITS:
                    assert 1 <= puppy.stat(trait) <= 100

        puppy = generator.generate_puppy(top_sire, top_dam, kennel)
        assert all(puppy.stat(t) == 100 for t in PERFORMANCE_TRAITS)

    def test_hybrid_vigor_boost(self, kennel):
        sire, dam = kennel.get_member('lab-max'), kennel.get_member('poodle-bella')
        plain_dam = clone(dam, 'whippet-bella', breed_id=999, breed_name='Whippet')

        boosted = PuppyGenerator(seed=21).generate_puppy(sire, dam, kennel)
        plain = PuppyGenerator(seed=21).generate_puppy(sire, plain_dam, kennel)

        assert plain.composition.hybrid_vigor_bonus == 0
        for trait in PERFORMANCE_TRAITS:
            assert boosted.stat(trait) >= plain.stat(trait)
        # speed S/S x N/N never reaches the cap
        assert boosted.stat('speed') > plain.stat('speed')

    def test_full_sibling_penalty(self, kennel):
        sire, dam = kennel.get_member('lab-max'), kennel.get_member('lab-luna')
        unrelated_sire = clone(sire, 'max-twin')
        unrelated_dam = clone(dam, 'luna-twin')
        kennel.add_member(unrelated_sire)
        kennel.add_member(unrelated_dam)

        inbred = PuppyGenerator(seed=8).generate_puppy(sire, dam, kennel)
        outbred = PuppyGenerator(seed=8).generate_puppy(unrelated_sire, unrelated_dam, kennel)

        checked = 0
        for trait in PERFORMANCE_TRAITS:
            if outbred.stat(trait) < 100:
                assert abs(inbred.stat(trait) - outbred.stat(trait) * 0.55) <= 1
                checked += 1
        assert checked > 0


class TestLitter:
    def test_seed_reproducible(self, kennel):
        sire, dam = kennel.get_member('lab-max'), kennel.get_member('poodle-bella')
        first = PuppyGenerator(seed=5).generate_litter(sire, dam, kennel)
        second = PuppyGenerator(seed=5).generate_litter(sire, dam, kennel)
        assert [p.to_dict() for p in first] == [p.to_dict() for p in second]

    def test_injected_rng(self, kennel):
        sire, dam = kennel.get_member('lab-max'), kennel.get_member('poodle-bella')
        first = PuppyGenerator(rng=random.Random(5)).generate_puppy(sire, dam, kennel)
        second = PuppyGenerator(seed=5).generate_puppy(sire, dam, kennel)
        assert first.to_dict() == second.to_dict()

    def test_litter_size(self, kennel, generator):
        sire, dam = kennel.get_member('lab-max'), kennel.get_member('poodle-bella')
        for _ in range(10):
            litter = generator.generate_litter(sire, dam, kennel)
            assert 3 <= len(litter) <= 7
        assert len(generator.generate_litter(sire, dam, kennel, litter_size=2)) == 2

    def test_configured_litter_size(self, kennel):
        generator = PuppyGenerator(seed=1, config=BreedingConfig(litter_size_min=4, litter_size_max=4))
        litter = generator.generate_litter(kennel.get_member('lab-max'), kennel.get_member('poodle-bella'), kennel)
        assert len(litter) == 4

    def test_unique_ids(self, kennel, generator):
        litter = generator.generate_litter(
            kennel.get_member('lab-max'), kennel.get_member('poodle-bella'), kennel, litter_size=7
        )
        assert len({p.id for p in litter}) == 7

    def test_blocked_pairing_still_generates(self, kennel, generator):
        puppy = generator.generate_puppy(kennel.get_member('dane-titan'), kennel.get_member('chi-pepper'), kennel)
        assert puppy.parent1_id == 'dane-titan'

    def test_summary(self, kennel, generator):
        sire, dam = kennel.get_member('lab-max'), kennel.get_member('poodle-bella')
        litter = generator.generate_litter(sire, dam, kennel, litter_size=3)
        summary = generator.breed_summary(sire, dam, litter)
        assert summary['litter_size'] == 3
        assert summary['sire']['id'] == 'lab-max'
        assert summary['puppies'][0]['breed'] == 'Labradoodle'
        assert set(summary['puppies'][0]['appearance']) == set(CATEGORICAL_TRAITS)
