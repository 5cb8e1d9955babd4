"""
models.py - core data models
Dog, Gene, Genetics, BreedComposition, Kennel classes
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Optional, List, Dict, Tuple, Mapping, Any, Union


PERFORMANCE_TRAITS: Tuple[str, ...] = (
    'speed',
    'agility',
    'strength',
    'endurance',
    'intelligence',
    'friendliness',
    'energy',
    'trainability',
)

CATEGORICAL_TRAITS: Tuple[str, ...] = (
    'coat_color',
    'coat_pattern',
    'coat_length',
    'eye_color',
)


class Sex(Enum):
    """Sex of a dog"""
    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True)
class Gene:
    """
    One inheritable trait unit
    - trait: trait name (e.g. 'coat_color', 'speed')
    - allele1: allele contributed by the sire
    - allele2: allele contributed by the dam
    - dominance: allele -> 'dominant'/'recessive' (appearance)
                 or allele -> rank 1..5 (performance)
    """
    trait: str
    allele1: str
    allele2: str
    dominance: Mapping[str, Union[str, int]] = field(
        default_factory=dict, compare=False, hash=False, repr=False
    )

    def __post_init__(self):
        # dominance tables are shared and must stay read-only
        if not isinstance(self.dominance, MappingProxyType):
            object.__setattr__(self, 'dominance', MappingProxyType(dict(self.dominance)))

    @property
    def alleles(self) -> Tuple[str, str]:
        return (self.allele1, self.allele2)

    @property
    def is_homozygous(self) -> bool:
        return self.allele1 == self.allele2

    @property
    def genotype(self) -> str:
        return f"{self.allele1}/{self.allele2}"

    def to_dict(self) -> Dict[str, str]:
        return {
            'trait': self.trait,
            'allele1': self.allele1,
            'allele2': self.allele2,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Gene':
        from .genetics import dominance_for

        trait = data['trait']
        return cls(
            trait=trait,
            allele1=str(data['allele1']),
            allele2=str(data['allele2']),
            dominance=dominance_for(trait)
        )


@dataclass(frozen=True)
class Genetics:
    """
    Complete gene bundle of one dog.
    Created once (purchase, rescue or birth) and never mutated afterwards.
    """
    coat_color: Gene
    coat_pattern: Gene
    coat_length: Gene
    eye_color: Gene
    size: Gene
    speed: Gene
    agility: Gene
    strength: Gene
    endurance: Gene
    intelligence: Gene
    friendliness: Gene
    energy: Gene
    trainability: Gene

    GENE_FIELDS = CATEGORICAL_TRAITS + ('size',) + PERFORMANCE_TRAITS

    def get(self, trait: str) -> Gene:
        """Gene for a trait name"""
        if trait not in self.GENE_FIELDS:
            raise KeyError(trait)
        return getattr(self, trait)

    def items(self) -> List[Tuple[str, Gene]]:
        return [(name, getattr(self, name)) for name in self.GENE_FIELDS]

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {name: gene.to_dict() for name, gene in self.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Genetics':
        return cls(**{
            name: Gene.from_dict(data[name]) for name in cls.GENE_FIELDS
        })


@dataclass(frozen=True)
class BreedPortion:
    """One breed's share of a dog's ancestry"""
    breed_id: int
    breed_name: str
    percentage: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'breed_id': self.breed_id,
            'breed_name': self.breed_name,
            'percentage': self.percentage,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BreedPortion':
        return cls(
            breed_id=int(data['breed_id']),
            breed_name=data['breed_name'],
            percentage=float(data['percentage'])
        )


@dataclass(frozen=True)
class HybridBreed:
    """Recognized two-breed cross (designer breed)"""
    id: str
    name: str
    parent1_name: str
    parent2_name: str
    description: str
    hybrid_vigor_bonus: int  # percent
    popularity: str
    price_multiplier: float
    parent1_id: Optional[int] = None
    parent2_id: Optional[int] = None
    recognized_by_kennel_clubs: bool = False
    characteristics: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'parent1_name': self.parent1_name,
            'parent2_name': self.parent2_name,
            'parent1_id': self.parent1_id,
            'parent2_id': self.parent2_id,
            'description': self.description,
            'hybrid_vigor_bonus': self.hybrid_vigor_bonus,
            'popularity': self.popularity,
            'price_multiplier': self.price_multiplier,
            'recognized_by_kennel_clubs': self.recognized_by_kennel_clubs,
            'characteristics': list(self.characteristics),
        }


@dataclass(frozen=True)
class BreedComposition:
    """
    Percentage breakdown of a dog's ancestry across breeds.
    portions are sorted descending by percentage and sum to 100.
    """
    portions: Tuple[BreedPortion, ...]
    is_purebred: bool
    is_first_generation: bool
    is_hybrid: bool
    display_name: str
    hybrid: Optional[HybridBreed] = None
    generation: Optional[int] = None  # F1, F2, ... (crosses only)

    @property
    def total_percentage(self) -> float:
        return sum(p.percentage for p in self.portions)

    @property
    def hybrid_vigor_bonus(self) -> int:
        return self.hybrid.hybrid_vigor_bonus if self.is_hybrid and self.hybrid else 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'portions': [p.to_dict() for p in self.portions],
            'is_purebred': self.is_purebred,
            'is_first_generation': self.is_first_generation,
            'is_hybrid': self.is_hybrid,
            'hybrid_id': self.hybrid.id if self.hybrid else None,
            'display_name': self.display_name,
            'generation': self.generation,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BreedComposition':
        from .hybrids import get_hybrid

        hybrid_id = data.get('hybrid_id')
        hybrid = get_hybrid(hybrid_id) if hybrid_id else None
        if hybrid_id and hybrid is None:
            raise ValueError(f"unknown hybrid id: {hybrid_id}")

        return cls(
            portions=tuple(BreedPortion.from_dict(p) for p in data['portions']),
            is_purebred=bool(data['is_purebred']),
            is_first_generation=bool(data['is_first_generation']),
            is_hybrid=bool(data['is_hybrid']),
            display_name=data['display_name'],
            hybrid=hybrid,
            generation=data.get('generation')
        )


def _parse_time(value: Optional[str]) -> Optional[datetime]:
    """ISO 8601 timestamp; a trailing Z is read as UTC"""
    if not value:
        return None
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    return datetime.fromisoformat(value)


def _default_stats() -> Dict[str, int]:
    return {trait: 50 for trait in PERFORMANCE_TRAITS}


def _default_training() -> Dict[str, int]:
    return {name: 0 for name in ('speed', 'agility', 'strength', 'endurance', 'obedience')}


@dataclass
class Dog:
    """
    A dog in the kennel - the unit that is bred and tracked.
    parent1_id (sire) / parent2_id (dam) are weak references by id.
    """
    id: str
    name: str
    sex: Sex
    breed_id: int
    breed_name: str
    weight: float  # lbs
    stats: Dict[str, int] = field(default_factory=_default_stats)

    # appearance
    coat_color: str = 'black'
    coat_pattern: str = 'solid'
    coat_length: str = 'short'
    eye_color: str = 'brown'

    # inheritance payloads
    genetics: Optional[Genetics] = None
    composition: Optional[BreedComposition] = None
    parent1_id: Optional[str] = None
    parent2_id: Optional[str] = None

    # care
    hunger: int = 100
    happiness: int = 100
    energy_level: int = 100
    health: int = 100

    # training and bond
    trained: Dict[str, int] = field(default_factory=_default_training)
    bond_level: int = 2
    bond_xp: int = 0

    # breeding
    age_weeks: int = 52
    is_rescue: bool = False
    is_pregnant: bool = False
    last_bred: Optional[datetime] = None
    pregnancy_due: Optional[datetime] = None

    def stat(self, trait: str) -> int:
        return self.stats.get(trait, 0)

    @property
    def parent_ids(self) -> Tuple[Optional[str], Optional[str]]:
        return (self.parent1_id, self.parent2_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'sex': self.sex.value,
            'breed_id': self.breed_id,
            'breed_name': self.breed_name,
            'weight': self.weight,
            'stats': dict(self.stats),
            'coat_color': self.coat_color,
            'coat_pattern': self.coat_pattern,
            'coat_length': self.coat_length,
            'eye_color': self.eye_color,
            'genetics': self.genetics.to_dict() if self.genetics else None,
            'composition': self.composition.to_dict() if self.composition else None,
            'parent1_id': self.parent1_id,
            'parent2_id': self.parent2_id,
            'hunger': self.hunger,
            'happiness': self.happiness,
            'energy_level': self.energy_level,
            'health': self.health,
            'trained': dict(self.trained),
            'bond_level': self.bond_level,
            'bond_xp': self.bond_xp,
            'age_weeks': self.age_weeks,
            'is_rescue': self.is_rescue,
            'is_pregnant': self.is_pregnant,
            'last_bred': self.last_bred.isoformat() if self.last_bred else None,
            'pregnancy_due': self.pregnancy_due.isoformat() if self.pregnancy_due else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Dog':
        genetics = data.get('genetics')
        composition = data.get('composition')

        optional = {
            key: data[key]
            for key in ('coat_color', 'coat_pattern', 'coat_length', 'eye_color',
                        'hunger', 'happiness', 'energy_level', 'health',
                        'bond_level', 'bond_xp', 'age_weeks', 'is_rescue',
                        'is_pregnant', 'parent1_id', 'parent2_id')
            if key in data
        }
        if 'stats' in data:
            optional['stats'] = {k: int(v) for k, v in data['stats'].items()}
        if 'trained' in data:
            optional['trained'] = {k: int(v) for k, v in data['trained'].items()}

        return cls(
            id=str(data['id']),
            name=data.get('name', str(data['id'])),
            sex=Sex(data['sex']),
            breed_id=int(data['breed_id']),
            breed_name=data['breed_name'],
            weight=float(data['weight']),
            genetics=Genetics.from_dict(genetics) if genetics else None,
            composition=BreedComposition.from_dict(composition) if composition else None,
            last_bred=_parse_time(data.get('last_bred')),
            pregnancy_due=_parse_time(data.get('pregnancy_due')),
            **optional
        )

    def __repr__(self):
        return (f"Dog({self.id}, {self.name}, {self.sex.name}, "
                f"{self.breed_name}, {self.weight}lb)")


@dataclass
class PedigreeNode:
    """
    One ancestor found while answering a kinship query.
    Ephemeral - rebuilt for every query, never persisted.
    """
    dog: Dog
    generation: int
    relationship: str
    occurrences: int = 1


@dataclass
class Kennel:
    """
    Flat snapshot of every known dog, queried by id for ancestry lookups.
    """
    members: Dict[str, Dog] = field(default_factory=dict)

    def add_member(self, dog: Dog):
        self.members[dog.id] = dog

    def get_member(self, dog_id: Optional[str]) -> Optional[Dog]:
        if not dog_id:
            return None
        return self.members.get(dog_id)

    @property
    def all_members(self) -> List[Dog]:
        return list(self.members.values())

    def to_dict(self) -> Dict[str, Any]:
        return {'dogs': [dog.to_dict() for dog in self.all_members]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Kennel':
        kennel = cls()
        for entry in data.get('dogs', []):
            kennel.add_member(Dog.from_dict(entry))
        return kennel

    @classmethod
    def from_dogs(cls, dogs: List[Dog]) -> 'Kennel':
        kennel = cls()
        for dog in dogs:
            kennel.add_member(dog)
        return kennel

    def __len__(self):
        return len(self.members)

    def __contains__(self, dog_id):
        return dog_id in self.members

    def __repr__(self):
        return f"Kennel(members={len(self.members)})"
