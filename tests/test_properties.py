from collections import Counter

from hypothesis import given, strategies as st

from rbmset import RedBlackTree, check_invariants

keys = st.integers(min_value=-50, max_value=50)
operations = st.lists(st.tuples(st.booleans(), keys), max_size=200)


def apply(tree, ops, reference=None):
    for is_insert, key in ops:
        if is_insert:
            tree.insert(key)
            if reference is not None:
                reference[key] += 1
        else:
            removed = tree.remove(key)
            if reference is not None:
                assert removed == (reference[key] > 0)
                if removed:
                    reference[key] -= 1
        assert check_invariants(tree) == []


@given(operations)
def test_matches_counter(ops):
    tree = RedBlackTree()
    reference = Counter()

    apply(tree, ops, reference)

    expected = sorted(reference.elements())
    assert tree.in_order_visit() == expected
    assert tree.get_size() == len(expected)
    assert tree.get_number_of_nodes() == len(+reference)
    for key in range(-50, 51):
        assert tree.get_count(key) == reference[key]
        assert tree.contains(key) == (tree.get_count(key) > 0)


@given(st.lists(keys, max_size=100), keys)
def test_insert_then_remove_is_identity(values, key):
    tree = RedBlackTree()
    for value in values:
        tree.insert(value)
    before = tree.in_order_visit()
    nodes = tree.get_number_of_nodes()

    tree.insert(key)
    assert tree.remove(key)

    assert tree.in_order_visit() == before
    assert tree.get_number_of_nodes() == nodes
    assert check_invariants(tree) == []


@given(st.lists(keys, max_size=60).flatmap(
    lambda values: st.tuples(st.just(values), st.permutations(values))))
def test_insert_order_does_not_matter(pair):
    first, second = RedBlackTree(), RedBlackTree()
    for value in pair[0]:
        first.insert(value)
    for value in pair[1]:
        second.insert(value)

    assert first.in_order_visit() == second.in_order_visit()


@given(st.lists(keys, min_size=1, max_size=100, unique=True))
def test_neighbours(values):
    tree = RedBlackTree()
    for value in values:
        tree.insert(value)
    ordered = sorted(values)

    for i, value in enumerate(ordered):
        expected_pred = ordered[i - 1] if i > 0 else None
        expected_succ = ordered[i + 1] if i + 1 < len(ordered) else None
        assert tree.get_predecessor(value) == expected_pred
        assert tree.get_successor(value) == expected_succ
