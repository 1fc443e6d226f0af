import random

import pytest

from rbmset import RedBlackTree

SIZE = 10_000


@pytest.fixture(scope="module")
def shuffled():
    values = list(range(SIZE))
    random.Random(1234).shuffle(values)
    return values


def fill(values):
    tree = RedBlackTree()
    for value in values:
        tree.insert(value)
    return tree


@pytest.mark.benchmark
def test_insert_ascending(benchmark):
    benchmark(fill, range(SIZE))


@pytest.mark.benchmark
def test_insert_shuffled(benchmark, shuffled):
    benchmark(fill, shuffled)


@pytest.mark.benchmark
def test_remove_all(benchmark, shuffled):
    def remove_all(tree):
        for value in shuffled:
            tree.remove(value)

    benchmark.pedantic(remove_all, setup=lambda: ((fill(shuffled),), {}), rounds=5)


@pytest.mark.benchmark
def test_comparisons_are_logarithmic(shuffled):
    tree = fill(shuffled)

    worst = max(tree.insert(value) for value in shuffled)

    assert worst <= tree.height() + 1
