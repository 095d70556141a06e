"""
Core tree builder components.

This package provides the fundamental building blocks: the TestElement base
model and the callable types used by configuration actions and bodies.
"""

from treebuilder.core.element import TestElement
from treebuilder.core.types import Action, Body, ElementFactory

__all__ = [
    "TestElement",
    "Action",
    "Body",
    "ElementFactory",
]
