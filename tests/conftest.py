import json

import pytest

from breeding_engine import Dog, Kennel, Sex, PuppyGenerator, PERFORMANCE_TRAITS

from . import SAMPLE_KENNEL_PATH


def _make_dog(id, sex=Sex.MALE, breed_id=101, breed_name='Labrador Retriever',
              weight=70.0, stats=None, **kwargs):
    kwargs.setdefault('age_weeks', 104)
    kwargs.setdefault('bond_level', 5)
    return Dog(
        id=id,
        name=id.title(),
        sex=sex,
        breed_id=breed_id,
        breed_name=breed_name,
        weight=weight,
        stats=dict(stats) if stats else {trait: 60 for trait in PERFORMANCE_TRAITS},
        **kwargs
    )


@pytest.fixture
def make_dog():
    """Factory for breedable adult dogs"""
    return _make_dog


@pytest.fixture
def sample_data():
    with open(SAMPLE_KENNEL_PATH, 'r', encoding='utf-8') as f:
        return json.load(f)


@pytest.fixture
def kennel(sample_data):
    return Kennel.from_dict(sample_data)


@pytest.fixture
def generator():
    return PuppyGenerator(seed=1234)
