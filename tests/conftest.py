"""
Shared test fixtures and utilities for the treebuilder test suite.
"""

import pytest

from treebuilder import TestElement, TreeBuilder


class Autonumber:
    """Appends a running sequence number to every configured element's name."""

    def __init__(self, start: int = 1):
        self.seq = start

    def __call__(self, element: TestElement, parent: TestElement | None) -> None:
        element.name = f"{element.name} {self.seq}"
        self.seq += 1


@pytest.fixture
def builder():
    """Fresh builder with default configuration."""
    return TreeBuilder()


@pytest.fixture
def autonumber():
    return Autonumber()
