import pytest

from breeding_engine import (
    Kennel,
    Sex,
    build_ancestry_tree,
    analyze_inbreeding,
    calculate_coi,
    build_pedigree_tree,
)
from breeding_engine.pedigree import (
    relationship_label,
    classify_direct_relationship,
    FULL_SIBLINGS,
    HALF_SIBLINGS,
    PARENT_CHILD,
    GRANDPARENT_OR_AUNT_UNCLE,
    RELATED,
    MAX_PEDIGREE_DEPTH,
)


@pytest.fixture
def cousins(make_dog):
    """Two grandparents, two sibling children with outside mates, one grandchild each"""
    dogs = [
        make_dog('g1'),
        make_dog('g2', sex=Sex.FEMALE),
        make_dog('a', parent1_id='g1', parent2_id='g2'),
        make_dog('b', sex=Sex.FEMALE, parent1_id='g1', parent2_id='g2'),
        make_dog('x', sex=Sex.FEMALE),
        make_dog('y'),
        make_dog('c', parent1_id='a', parent2_id='x'),
        make_dog('d', sex=Sex.FEMALE, parent1_id='y', parent2_id='b'),
    ]
    return Kennel.from_dogs(dogs)


def test_relationship_label():
    assert relationship_label(0) == 'self'
    assert relationship_label(1) == 'parent'
    assert relationship_label(2) == 'grandparent'
    assert relationship_label(4) == 'great-great-grandparent'


class TestAncestryTree:
    def test_founder(self, kennel):
        tree = build_ancestry_tree(kennel.get_member('lab-duke'), kennel)
        assert list(tree) == ['lab-duke']
        assert tree['lab-duke'].generation == 0

    def test_parents(self, kennel):
        tree = build_ancestry_tree(kennel.get_member('lab-max'), kennel)
        assert set(tree) == {'lab-max', 'lab-duke', 'lab-daisy'}
        assert tree['lab-duke'].generation == 1
        assert tree['lab-duke'].relationship == 'parent'

    def test_depth_limit(self, cousins):
        tree = build_ancestry_tree(cousins.get_member('c'), cousins, max_depth=1)
        assert set(tree) == {'c', 'a', 'x'}

    def test_unknown_parent_skipped(self, make_dog):
        orphan = make_dog('orphan', parent1_id='ghost', parent2_id=None)
        tree = build_ancestry_tree(orphan, Kennel.from_dogs([orphan]))
        assert list(tree) == ['orphan']

    def test_cycle_terminates(self, make_dog):
        a = make_dog('a', parent1_id='b')
        b = make_dog('b', sex=Sex.FEMALE, parent1_id='a')
        tree = build_ancestry_tree(a, Kennel.from_dogs([a, b]))
        assert set(tree) == {'a', 'b'}

    def test_repeated_ancestor_counted(self, kennel, make_dog):
        inbred = make_dog('inbred', parent1_id='lab-max', parent2_id='lab-luna')
        kennel.add_member(inbred)
        tree = build_ancestry_tree(inbred, kennel)
        assert tree['lab-duke'].generation == 2
        assert tree['lab-duke'].occurrences == 2
        assert tree['lab-max'].occurrences == 1


class TestDirectRelationship:
    def test_classification(self, kennel, make_dog):
        duke, max_, luna = (kennel.get_member(i) for i in ('lab-duke', 'lab-max', 'lab-luna'))
        assert classify_direct_relationship(duke, luna) == PARENT_CHILD
        assert classify_direct_relationship(max_, luna) == FULL_SIBLINGS

        half = make_dog('half', sex=Sex.FEMALE, parent1_id='lab-duke', parent2_id='poodle-bella')
        assert classify_direct_relationship(max_, half) == HALF_SIBLINGS
        assert classify_direct_relationship(duke, kennel.get_member('poodle-bella')) is None

    def test_single_known_parent_is_not_full_sibling(self, make_dog):
        a = make_dog('a', parent1_id='p')
        b = make_dog('b', sex=Sex.FEMALE, parent1_id='p')
        assert classify_direct_relationship(a, b) == HALF_SIBLINGS


class TestInbreeding:
    def test_unrelated(self, kennel):
        analysis = analyze_inbreeding(kennel.get_member('lab-max'), kennel.get_member('poodle-bella'), kennel)
        assert not analysis.is_related
        assert analysis.coefficient == 0
        assert analysis.penalty == 0
        assert analysis.relationship is None
        assert analysis.penalty_multiplier == 1

    def test_parent_child(self, kennel):
        analysis = analyze_inbreeding(kennel.get_member('lab-duke'), kennel.get_member('lab-luna'), kennel)
        assert analysis.is_related
        assert analysis.relationship == PARENT_CHILD
        assert analysis.coefficient == 1.0
        assert analysis.penalty == 50

    def test_full_siblings(self, kennel):
        analysis = analyze_inbreeding(kennel.get_member('lab-max'), kennel.get_member('lab-luna'), kennel)
        assert analysis.relationship == FULL_SIBLINGS
        assert analysis.coefficient == 0.9
        assert analysis.penalty == 45
        assert analysis.penalty_multiplier == pytest.approx(0.55)
        assert analysis.common_ancestors == ['lab-daisy', 'lab-duke']

    def test_shared_grandparents(self, cousins):
        analysis = analyze_inbreeding(cousins.get_member('c'), cousins.get_member('d'), cousins)
        assert analysis.is_related
        assert analysis.common_ancestors == ['g1', 'g2']
        assert analysis.relationship == GRANDPARENT_OR_AUNT_UNCLE
        # 2 shared ancestors, closest at generation 2
        assert analysis.coefficient == pytest.approx(0.1)
        assert analysis.penalty == 5

    def test_aunt_and_niece(self, cousins):
        analysis = analyze_inbreeding(cousins.get_member('a'), cousins.get_member('d'), cousins)
        assert analysis.relationship == RELATED
        assert analysis.common_ancestors == ['g1', 'g2']
        assert analysis.coefficient == pytest.approx(0.2)
        assert analysis.penalty == 10

    def test_beyond_depth_is_unrelated(self, cousins):
        analysis = analyze_inbreeding(cousins.get_member('c'), cousins.get_member('d'), cousins, max_depth=1)
        assert not analysis.is_related

    def test_symmetric(self, cousins):
        c, d = cousins.get_member('c'), cousins.get_member('d')
        assert analyze_inbreeding(c, d, cousins) == analyze_inbreeding(d, c, cousins)


class TestCoi:
    def test_founder_is_zero(self, kennel):
        assert calculate_coi(kennel.get_member('lab-duke'), kennel) == 0
        assert calculate_coi(kennel.get_member('lab-max'), kennel) == 0

    def test_sibling_offspring(self, kennel, make_dog):
        inbred = make_dog('inbred', parent1_id='lab-max', parent2_id='lab-luna')
        kennel.add_member(inbred)
        # duke and daisy each reached twice at generation 2
        assert calculate_coi(inbred, kennel) == pytest.approx(0.5)


class TestPedigreeTree:
    def test_nested(self, kennel):
        tree = build_pedigree_tree(kennel.get_member('lab-max'), kennel).to_dict()
        assert tree['id'] == 'lab-max'
        assert tree['sire']['id'] == 'lab-duke'
        assert tree['dam']['id'] == 'lab-daisy'
        assert tree['sire']['sire'] is None

    def test_generation_limit(self, cousins):
        tree = build_pedigree_tree(cousins.get_member('c'), cousins, generations=1).to_dict()
        assert tree['sire']['id'] == 'a'
        assert tree['sire']['sire'] is None

    def test_cycle_terminates(self, make_dog):
        a = make_dog('a', parent1_id='b', parent2_id='b2')
        b = make_dog('b', parent1_id='a', parent2_id='b2')
        b2 = make_dog('b2', sex=Sex.FEMALE, parent1_id='a', parent2_id='b')
        kennel = Kennel.from_dogs([a, b, b2])
        tree = build_pedigree_tree(a, kennel, generations=100000).to_dict()
        assert tree['sire']['id'] == 'b'
        # a is already on the branch
        assert tree['sire']['sire'] is None
        assert tree['sire']['dam']['id'] == 'b2'
        assert tree['sire']['dam']['sire'] is None
        assert tree['sire']['dam']['dam'] is None

    def test_depth_capped(self, make_dog):
        dogs = [make_dog('gen0')]
        for i in range(1, 10):
            dogs.append(make_dog(f'gen{i}', parent1_id=f'gen{i - 1}'))
        kennel = Kennel.from_dogs(dogs)
        node = build_pedigree_tree(dogs[-1], kennel, generations=100).to_dict()
        depth = 0
        while node['sire'] is not None:
            node = node['sire']
            depth += 1
        assert depth == MAX_PEDIGREE_DEPTH
        assert node['id'] == 'gen4'
