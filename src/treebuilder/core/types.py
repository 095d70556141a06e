"""
Core type definitions for the tree builder.

This module contains the callable protocols and type aliases shared by the
registry, the builder and user code extending the DSL.
"""

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


class Action(Protocol[T_contra]):
    """Configuration logic applied to every element of a declared type.

    Called after the settings the element's body makes before its first
    child, and before any child is configured. Receives the element and
    its parent, or for a bare insertion the builder's parent (None at the
    top level). Stateful actions are ordinary classes that implement
    __call__.
    """

    def __call__(self, element: T_contra, parent: Any | None, /) -> None: ...


Body = Callable[[T], None]

ElementFactory = Callable[[type[T]], T]
