"""
pedigree.py - ancestry traversal and inbreeding analysis
Ancestry trees, kinship classification, pairwise penalty coefficient, COI
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Any

from .models import Dog, Kennel, PedigreeNode


logger = logging.getLogger(__name__)

MAX_PEDIGREE_DEPTH = 5
MAX_PENALTY = 50  # percent

PARENT_CHILD = 'parent-child'
FULL_SIBLINGS = 'full siblings'
HALF_SIBLINGS = 'half siblings'
GRANDPARENT_OR_AUNT_UNCLE = 'grandparent-grandchild or aunt/uncle-niece/nephew'
COUSINS = 'cousins'
SECOND_COUSINS = 'second cousins'
RELATED = 'related'

DIRECT_COEFFICIENTS: Dict[str, float] = {
    PARENT_CHILD: 1.0,
    FULL_SIBLINGS: 0.9,
    HALF_SIBLINGS: 0.7,
}

DEPTH_RELATIONSHIPS: Dict[int, str] = {
    2: GRANDPARENT_OR_AUNT_UNCLE,
    3: COUSINS,
    4: SECOND_COUSINS,
}


@dataclass
class InbreedingAnalysis:
    """Kinship of two breeding candidates"""
    is_related: bool
    coefficient: float  # 0-1
    relationship: Optional[str]
    common_ancestors: List[str] = field(default_factory=list)
    penalty: int = 0  # stat reduction percent

    @property
    def penalty_multiplier(self) -> float:
        return 1 - self.penalty / 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            'is_related': self.is_related,
            'coefficient': self.coefficient,
            'relationship': self.relationship,
            'common_ancestors': list(self.common_ancestors),
            'penalty': self.penalty,
        }


@dataclass
class PedigreeTree:
    """Nested sire/dam pedigree for display"""
    dog: Dog
    sire: Optional['PedigreeTree'] = None
    dam: Optional['PedigreeTree'] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.dog.id,
            'name': self.dog.name,
            'breed': (self.dog.composition.display_name
                      if self.dog.composition else self.dog.breed_name),
            'sire': self.sire.to_dict() if self.sire else None,
            'dam': self.dam.to_dict() if self.dam else None,
        }


def relationship_label(generation: int) -> str:
    """Label of an ancestor relative to the query dog"""
    if generation == 0:
        return 'self'
    if generation == 1:
        return 'parent'
    if generation == 2:
        return 'grandparent'
    return 'great-' * (generation - 2) + 'grandparent'


def build_ancestry_tree(
    dog: Dog,
    kennel: Kennel,
    max_depth: int = MAX_PEDIGREE_DEPTH
) -> Dict[str, PedigreeNode]:
    """
    Ancestors of a dog up to max_depth generations, including the dog itself.

    Each node keeps the shallowest generation it was found at and the number
    of distinct paths that reach it. Parent links are followed by id through
    the kennel; unknown ids are skipped and a dog already on the current path
    is never revisited, so malformed (cyclic) records cannot loop.
    """
    tree: Dict[str, PedigreeNode] = {}

    def traverse(current: Dog, generation: int, path: FrozenSet[str]):
        if generation > max_depth or current.id in path:
            return

        node = tree.get(current.id)
        if node is None:
            tree[current.id] = PedigreeNode(
                dog=current,
                generation=generation,
                relationship=relationship_label(generation)
            )
        else:
            node.occurrences += 1
            if generation < node.generation:
                node.generation = generation
                node.relationship = relationship_label(generation)

        path = path | {current.id}
        for parent_id in current.parent_ids:
            parent = kennel.get_member(parent_id)
            if parent is not None:
                traverse(parent, generation + 1, path)

    traverse(dog, 0, frozenset())
    return tree


def classify_direct_relationship(dog1: Dog, dog2: Dog) -> Optional[str]:
    """parent-child / full siblings / half siblings from the parent links alone"""
    if dog2.id in dog1.parent_ids or dog1.id in dog2.parent_ids:
        return PARENT_CHILD

    parents1 = {p for p in dog1.parent_ids if p}
    parents2 = {p for p in dog2.parent_ids if p}
    shared = parents1 & parents2

    if len(parents1) == 2 and parents1 == parents2:
        return FULL_SIBLINGS
    if len(shared) == 1:
        return HALF_SIBLINGS
    return None


def analyze_inbreeding(
    dog1: Dog,
    dog2: Dog,
    kennel: Kennel,
    max_depth: int = MAX_PEDIGREE_DEPTH
) -> InbreedingAnalysis:
    """
    How closely related two breeding candidates are.

    Returns:
        InbreedingAnalysis - coefficient 0-1 and a stat penalty of up to 50%
    """
    tree1 = build_ancestry_tree(dog1, kennel, max_depth)
    tree2 = build_ancestry_tree(dog2, kennel, max_depth)

    excluded = {dog1.id, dog2.id}
    common_ancestors = sorted((set(tree1) & set(tree2)) - excluded)

    closest_generation = min(
        (min(tree1[a].generation, tree2[a].generation) for a in common_ancestors),
        default=None
    )

    relationship = classify_direct_relationship(dog1, dog2)
    if relationship is None and closest_generation is not None:
        relationship = DEPTH_RELATIONSHIPS.get(closest_generation)
    if relationship is None and common_ancestors:
        # shared ancestry outside the named patterns (e.g. aunt x niece)
        relationship = RELATED

    if relationship in DIRECT_COEFFICIENTS:
        coefficient = DIRECT_COEFFICIENTS[relationship]
    elif common_ancestors:
        # more shared ancestors, closer up the tree -> higher coefficient
        coefficient = min(1.0, (len(common_ancestors) / 10) * (1 / closest_generation))
    else:
        coefficient = 0.0

    penalty = math.floor(round(coefficient * MAX_PENALTY, 9))

    analysis = InbreedingAnalysis(
        is_related=bool(common_ancestors) or relationship is not None,
        coefficient=coefficient,
        relationship=relationship,
        common_ancestors=common_ancestors,
        penalty=penalty
    )
    logger.debug("inbreeding %s x %s: %s", dog1.id, dog2.id, analysis)
    return analysis


def calculate_coi(dog: Dog, kennel: Kennel, max_depth: int = MAX_PEDIGREE_DEPTH) -> float:
    """
    Coefficient of inbreeding of a single dog (display metric).

    Every ancestor reached by more than one path adds
    (occurrences - 1) / 2^generation. Capped at 1.

    Distinct from analyze_inbreeding(), which rates a pair for the breeding
    penalty; the two are not expected to agree.
    """
    tree = build_ancestry_tree(dog, kennel, max_depth)

    coi = 0.0
    for node in tree.values():
        if node.generation > 0 and node.occurrences > 1:
            coi += (node.occurrences - 1) * (2 ** -node.generation)

    return min(coi, 1.0)


def build_pedigree_tree(dog: Dog, kennel: Kennel, generations: int = 3) -> PedigreeTree:
    """
    Sire/dam tree for display, `generations` levels above the dog.

    Depth is capped at MAX_PEDIGREE_DEPTH. A parent already on the branch
    (malformed, cyclic records) ends that branch.
    """
    def branch(current: Dog, remaining: int, path: FrozenSet[str]) -> PedigreeTree:
        node = PedigreeTree(dog=current)
        # a record naming the same dog twice is treated as unknown parentage
        if remaining <= 0 or current.parent1_id == current.parent2_id:
            return node

        path = path | {current.id}
        sire = kennel.get_member(current.parent1_id)
        dam = kennel.get_member(current.parent2_id)
        if sire is not None and sire.id not in path:
            node.sire = branch(sire, remaining - 1, path)
        if dam is not None and dam.id not in path:
            node.dam = branch(dam, remaining - 1, path)
        return node

    return branch(dog, min(generations, MAX_PEDIGREE_DEPTH), frozenset())
