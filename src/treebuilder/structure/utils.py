"""
Utility functions for element construction.

This module contains helper functions used by the builder and registry
that don't have circular import dependencies.
"""

from typing import TypeVar

from treebuilder.exceptions import ElementTypeError, NodeInstantiationError

T = TypeVar("T")


def describe_type(kind: object) -> str:
    """Readable name of a type for log records and error messages."""
    if isinstance(kind, type):
        if kind.__module__ == "builtins":
            return kind.__qualname__
        return f"{kind.__module__}.{kind.__qualname__}"
    return type(kind).__qualname__


def instantiate_element(kind: type[T]) -> T:
    """
    Create a default instance of an element type.

    This is the default element factory of the builder. Element types are
    expected to be constructible without arguments, which holds for pydantic
    models whose fields all have defaults.

    Params:
        kind: The element class to instantiate

    Returns:
        A new instance of kind

    Raises:
        ElementTypeError: When kind is not a class
        NodeInstantiationError: When the constructor raises
    """
    if not isinstance(kind, type):
        raise ElementTypeError("type", describe_type(kind))

    try:
        return kind()
    except Exception as e:
        raise NodeInstantiationError(kind.__qualname__, str(e)) from e
