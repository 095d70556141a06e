"""
Tree builder for assembling configured element trees.

This module contains the TreeBuilder construction context and the
build_tree entry point. A builder creates elements, attaches them under the
element whose body is running, lets the caller's body configure them and add
nested children, and applies every matching configure_each action once the
element's own settings are in place.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar, overload

from treebuilder.config import DEFAULT_CONFIG, BuilderConfig
from treebuilder.core.types import Action, Body, ElementFactory
from treebuilder.exceptions import BuilderStateError, TreeDepthError
from treebuilder.structure.registry import ActionRegistry
from treebuilder.structure.tree import ElementNode, TestTree
from treebuilder.structure.utils import describe_type, instantiate_element

logger = logging.getLogger(__name__)

T = TypeVar("T")
A = TypeVar("A", bound=Callable[..., None])


class TreeBuilder:
    """Construction context for one element tree.

    Elements are created in document order and attached under the element
    whose body is currently running. An element created with a body (the
    block of element(), or the callable passed to add()) becomes the current
    element while that body runs, so nested creation calls make its children.

    The configure_each actions that match an element run in registration
    order once the element's own settings are in place: at the first nested
    creation call inside its body, or when the body returns if it creates no
    children. Actions therefore see everything the body set before its first
    child, and a parent is always configured before any of its children, so
    elements are configured in creation order.

    Bare insertion, add() without a body, opens no scope of its own: the
    element is attached and its actions run right away, inside the scope of
    the enclosing element.

    Actions are called as action(element, parent). For an element with a
    body, parent is the element it is attached to. For a bare insertion it is
    the builder's parent property at that moment, the parent of the enclosing
    element.

    Exceptions from actions, bodies or element constructors stop the pass and
    reach the caller. Elements attached before the failure stay in the tree;
    an element whose body raised before creating a child is left without its
    actions applied.

    Helper functions can extend the DSL by taking the builder as their first
    argument and calling add() or element():

        def thread_group(builder, name, num_threads=1, body=None):
            def configure(group):
                group.name = name
                group.num_threads = num_threads
                builder.add(Summariser)
                if body:
                    body(group)

            return builder.add(ThreadGroup, configure)
    """

    def __init__(
        self,
        config: BuilderConfig | None = None,
        factory: ElementFactory | None = None,
        registry: ActionRegistry | None = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self._factory = factory or instantiate_element
        # Registrations made through this builder stay private to it
        self._registry = (
            registry.snapshot() if registry is not None else ActionRegistry()
        )
        self._roots: list[ElementNode] = []
        self._stack: list[ElementNode] = []
        self._pending: ElementNode | None = None
        self._closed = False

    @property
    def registry(self) -> ActionRegistry:
        """Actions of this construction pass, seeded from the given registry."""
        return self._registry

    @property
    def current(self) -> Any | None:
        """Element whose body is running, None at the top level."""
        return self._stack[-1].element if self._stack else None

    @property
    def parent(self) -> Any | None:
        """Parent of the element whose body is running."""
        if not self._stack:
            return None
        return self._stack[-1].parent_element

    @property
    def depth(self) -> int:
        """Number of element bodies currently running."""
        return len(self._stack)

    @property
    def tree(self) -> TestTree:
        """Live view of the top-level elements built so far."""
        return TestTree(self._roots)

    @property
    def closed(self) -> bool:
        return self._closed

    @overload
    def configure_each(self, kind: type[T], action: Action[T]) -> Action[T]: ...

    @overload
    def configure_each(self, kind: type[T]) -> Callable[[A], A]: ...

    def configure_each(self, kind, action=None):
        """
        Register configuration applied to every later element of a type.

        Usable directly or as a decorator:

            builder.configure_each(TestElement, autonumber)

            @builder.configure_each(TestElement)
            def rename(element, parent):
                element.name = "sample name"

        Params:
            kind: Type, abstract base class or runtime-checkable protocol the
                element must satisfy
            action: Callable invoked as action(element, parent); when
                omitted a decorator is returned

        Returns:
            The registered action, or a decorator registering its argument

        Raises:
            BuilderStateError: If the tree has already been built
            ActionRegistrationError: If kind or action is unusable
        """
        self._ensure_open()
        if action is None:

            def decorator(func: A) -> A:
                self._registry.register(kind, func)
                return func

            return decorator

        self._registry.register(kind, action)
        return action

    @contextmanager
    def element(self, kind: type[T] | T) -> Iterator[T]:
        """
        Create an element whose body is the enclosed block.

        The element is attached before the block starts. The registered
        actions configure it at its first nested creation call, or when the
        block completes if it creates no children:

            with builder.element(TestPlan) as plan:
                plan.name = "Test Plan"
                builder.add(ThreadGroup)

        Params:
            kind: Element class to instantiate through the factory, or an
                already constructed element

        Yields:
            The new element

        Raises:
            BuilderStateError: If the tree has already been built
            TreeDepthError: If the element would exceed config.max_depth
            NodeInstantiationError: If the factory cannot create the element
        """
        node, configure = self._create_node(kind)
        self._stack.append(node)
        if configure:
            self._pending = node
        try:
            yield node.element
            self._configure_pending()
        finally:
            if self._pending is node:
                self._pending = None
            self._stack.pop()

    def add(self, kind: type[T] | T, body: Body[T] | None = None) -> T:
        """
        Create an element, optionally with a body.

        Without a body this is the bare insertion form: the element only
        receives the configuration registered with configure_each.

        Params:
            kind: Element class to instantiate through the factory, or an
                already constructed element
            body: Callable receiving the element; add()/element() calls made
                from it create children of the element

        Returns:
            The created element

        Raises:
            BuilderStateError: If the tree has already been built
            TreeDepthError: If the element would exceed config.max_depth
            NodeInstantiationError: If the factory cannot create the element
        """
        if body is not None:
            with self.element(kind) as element:
                body(element)
            return element

        node, configure = self._create_node(kind)
        if configure:
            self._apply_actions(node.element, self.parent)
        return node.element

    def build(self) -> TestTree:
        """
        Finish construction and return the tree.

        Returns:
            View of the top-level elements

        Raises:
            BuilderStateError: If an element body is still running
        """
        if self._stack:
            raise BuilderStateError(
                f"Cannot build tree while {describe_type(type(self.current))} "
                "is still being configured"
            )
        if not self._closed:
            self._closed = True
            logger.debug("Built tree with %d top-level elements", len(self._roots))
        return self.tree

    def _ensure_open(self) -> None:
        if self._closed:
            raise BuilderStateError("Tree has already been built")

    def _create_node(self, kind: Any) -> tuple[ElementNode, bool]:
        """Instantiate and attach one element.

        The element whose body is running gets its actions first, so a
        parent is configured before any of its children. Returns the node
        and whether configure_each actions apply to it.
        """
        self._ensure_open()

        depth = len(self._stack) + 1
        max_depth = self.config.max_depth
        if max_depth is not None and depth > max_depth:
            raise TreeDepthError(depth, max_depth)

        self._configure_pending()

        if isinstance(kind, type):
            element = self._factory(kind)
            configure = True
        else:
            element = kind
            configure = self.config.configure_instances

        parent = self._stack[-1] if self._stack else None
        node = ElementNode(element=element, parent=parent)
        siblings = parent.children if parent is not None else self._roots
        siblings.append(node)
        logger.debug("Created %s at depth %d", describe_type(type(element)), depth)
        return node, configure

    def _configure_pending(self) -> None:
        """Apply the actions of the element whose body is running, if still due."""
        node = self._pending
        if node is None:
            return
        self._pending = None
        self._apply_actions(node.element, node.parent_element)

    def _apply_actions(self, element: Any, parent: Any | None) -> None:
        for action in self._registry.applicable(element):
            if self.config.log_actions:
                logger.debug("Applying %r to %s", action, describe_type(type(element)))
            action(element, parent)


def build_tree(
    body: Callable[[TreeBuilder], None],
    *,
    config: BuilderConfig | None = None,
    factory: ElementFactory | None = None,
) -> TestTree:
    """
    Run one construction pass and return the finished tree.

    Every call uses a fresh builder, so actions registered through
    configure_each in one call never affect another.

        tree = build_tree(lambda b: b.add(TestPlan))

    Params:
        body: Callable receiving the builder that registers actions and
            creates the top-level elements
        config: Options for the construction pass
        factory: Callable creating a default instance of an element class

    Returns:
        The built tree
    """
    builder = TreeBuilder(config=config, factory=factory)
    body(builder)
    return builder.build()
