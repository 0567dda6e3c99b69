"""
Pytest configuration and shared fixtures
"""

import os
import random

import pytest

from hopgraph.analysis.graph import Graph
from hopgraph.common.utils import Logger


@pytest.fixture
def logger():
    """Provide a verbose logger for tests"""
    return Logger(verbose=True)


@pytest.fixture
def graph(logger):
    """Empty Graph wired with the test logger"""
    return Graph(logger=logger)


@pytest.fixture
def edge_list_file(tmp_path):
    """
    Return a callable that writes an edge list and returns its path

    Usage:
        path = edge_list_file("0 1\n1 2\n")
    """

    def _write(content, name="edges.txt"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


def pytest_configure(config):
    os.environ.setdefault("TZ", "UTC")
    random.seed(1337)
