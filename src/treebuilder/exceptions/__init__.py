"""
Tree builder exception classes.

This package provides all exception types raised by the tree builder
for consistent error handling and reporting.
"""

from treebuilder.exceptions.core import (
    ActionRegistrationError,
    BuilderStateError,
    ElementTypeError,
    NodeInstantiationError,
    TreeBuilderError,
    TreeDepthError,
)

__all__ = [
    "TreeBuilderError",
    "ActionRegistrationError",
    "BuilderStateError",
    "ElementTypeError",
    "NodeInstantiationError",
    "TreeDepthError",
]
