"""
Tree structure classes for built element trees.

This module contains the node class that records an element's place in the
tree and the TestTree view used to query a finished (or in-progress) tree
level by level.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar

from treebuilder.exceptions import ElementTypeError
from treebuilder.structure.utils import describe_type

T = TypeVar("T")


@dataclass(eq=False)
class ElementNode:
    """Node in the element tree wrapping one constructed element."""

    element: Any
    parent: ElementNode | None = None
    children: list[ElementNode] = field(default_factory=list)

    @property
    def depth(self) -> int:
        """Nesting depth, 1 for top-level nodes."""
        depth = 1
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    @property
    def parent_element(self) -> Any | None:
        return self.parent.element if self.parent is not None else None

    def subtree(self) -> TestTree:
        return TestTree(self.children)

    def __repr__(self) -> str:
        return (
            f"ElementNode({describe_type(type(self.element))}, "
            f"children={len(self.children)})"
        )


class TestTree:
    """Read-only, ordered view over one level of an element tree.

    The top-level view lists the elements created outside any other element;
    the view returned for a node lists that node's children. Views share the
    underlying node lists, so a view taken while building reflects elements
    added later at the same level.

    Query methods never fail on missing data: empty levels yield empty lists
    and lookups of unknown elements yield an empty tree.
    """

    # Not a pytest test case despite the name
    __test__ = False

    def __init__(self, nodes: Sequence[ElementNode] = ()):
        self._nodes = nodes

    @property
    def nodes(self) -> tuple[ElementNode, ...]:
        return tuple(self._nodes)

    def list(self) -> list[Any]:
        """Elements at this level in creation order."""
        return [node.element for node in self._nodes]

    @property
    def values(self) -> list[TestTree]:
        """Sub-tree views, one per element at this level, in creation order."""
        return [node.subtree() for node in self._nodes]

    def items(self) -> list[tuple[Any, TestTree]]:
        """Ordered pairs of element and the sub-tree rooted at it."""
        return [(node.element, node.subtree()) for node in self._nodes]

    def get(self, element: Any) -> TestTree:
        """
        Get the sub-tree rooted at an element of this level.

        Elements are matched by identity, since two distinct elements may
        compare equal field by field.

        Params:
            element: An element previously returned by list()

        Returns:
            The element's sub-tree, or an empty tree if the element is not
            at this level
        """
        for node in self._nodes:
            if node.element is element:
                return node.subtree()
        return TestTree()

    def first(self, kind: type[T] | None = None) -> T | None:
        """
        Get the first element of this level.

        Params:
            kind: Expected type of the element, checked when given

        Returns:
            The first element, or None if the level is empty

        Raises:
            ElementTypeError: If kind is given and the element is not an
                instance of it
        """
        if not self._nodes:
            return None
        element = self._nodes[0].element
        if kind is not None and not isinstance(element, kind):
            raise ElementTypeError(describe_type(kind), describe_type(type(element)))
        return element

    def filter(self, kind: type[T]) -> list[T]:
        """Elements of this level that are instances of kind."""
        return [node.element for node in self._nodes if isinstance(node.element, kind)]

    def walk(self) -> Iterator[ElementNode]:
        """Depth-first, pre-order traversal of every node below this view."""
        stack = list(reversed(self._nodes))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find(self, kind: type[T]) -> list[T]:
        """All elements of the given type anywhere below this view, depth-first."""
        return [node.element for node in self.walk() if isinstance(node.element, kind)]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.list())

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return len(self._nodes) > 0

    def __contains__(self, element: object) -> bool:
        return any(node.element is element for node in self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TestTree):
            return NotImplemented
        return len(self._nodes) == len(other._nodes) and all(
            a is b for a, b in zip(self._nodes, other._nodes)
        )

    __hash__ = None

    def __repr__(self) -> str:
        names = ", ".join(describe_type(type(element)) for element in self.list())
        return f"TestTree([{names}])"
