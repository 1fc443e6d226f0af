from pathlib import Path

import pytest

from rbmset import RedBlackTree


def pytest_addoption(parser):
    parser.addoption("--benchmark", action="store_true", default=False, help="run benchmark tests")


def pytest_configure(config):
    config.addinivalue_line("markers", "benchmark: mark benchmark tests")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--benchmark"):
        return
    benchmark_skip_marker = pytest.mark.skip(reason="use --benchmark marker to run")
    for item in items:
        filename = Path(str(item.fspath)).name
        if "benchmark" in item.keywords or filename.startswith('test_benchmark'):
            item.add_marker(benchmark_skip_marker)


@pytest.fixture
def tree():
    yield RedBlackTree(check_invariants=True)


@pytest.fixture
def build():
    def _build(values):
        t = RedBlackTree(check_invariants=True)
        for value in values:
            t.insert(value)
        return t
    return _build
