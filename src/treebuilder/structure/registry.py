"""
Registry of type-scoped configuration actions.

This module contains the ordered store of (declared type, action) bindings
accumulated by configure_each during one tree construction pass.
"""

import logging
from collections.abc import Iterator
from typing import Any

from attrs import frozen

from treebuilder.core.types import Action
from treebuilder.exceptions import ActionRegistrationError
from treebuilder.structure.utils import describe_type

logger = logging.getLogger(__name__)


@frozen
class ConfiguredAction:
    """An action bound to the type whose instances it configures."""

    kind: type
    action: Action[Any]

    def matches(self, element: object) -> bool:
        return isinstance(element, self.kind)

    def __str__(self) -> str:
        return f"{describe_type(self.kind)} -> {self.action!r}"


class ActionRegistry:
    """Append-only, ordered registry of configuration actions.

    Registration order is application order. Several actions may target the
    same type, or overlapping types, and all of them run; a general action
    registered before a specific one runs first, and a specific action
    registered before a general one runs first too. Specificity plays no role.

    A declared type matches every element that is an instance of it, so
    actions bound to a base class, an abstract base class or a
    runtime-checkable protocol apply to all satisfying element types.
    """

    def __init__(self, entries: tuple[ConfiguredAction, ...] = ()):
        self._entries: list[ConfiguredAction] = list(entries)

    def register(self, kind: type, action: Action[Any]) -> ConfiguredAction:
        """
        Append an action for a declared type.

        Params:
            kind: Class, abstract base class or runtime-checkable protocol
                that elements must satisfy for the action to apply
            action: Callable invoked as action(element, parent)

        Returns:
            The stored registry entry

        Raises:
            ActionRegistrationError: If kind is not usable for isinstance
                checks or action is not callable
        """
        if not isinstance(kind, type):
            raise ActionRegistrationError(kind, "declared type must be a class")
        try:
            isinstance(None, kind)
        except TypeError as e:
            raise ActionRegistrationError(kind, str(e)) from e
        if not callable(action):
            raise ActionRegistrationError(kind, "action must be callable")

        entry = ConfiguredAction(kind=kind, action=action)
        self._entries.append(entry)
        logger.debug(
            "Registered action #%d for %s", len(self._entries), describe_type(kind)
        )
        return entry

    def applicable(self, element: object) -> list[Action[Any]]:
        """
        Get the actions that apply to an element, in registration order.

        Params:
            element: The element about to be configured

        Returns:
            Every action whose declared type the element satisfies
        """
        return [entry.action for entry in self._entries if entry.matches(element)]

    def applicable_to_type(self, node_type: type) -> list[Action[Any]]:
        """
        Get the actions that would apply to instances of a type.

        Protocols with data members cannot be checked against a class and
        are left out of the result; use applicable() with an instance for
        those.

        Params:
            node_type: The element type to check

        Returns:
            Every action whose declared type is node_type or one of its
            supertypes, in registration order
        """
        actions = []
        for entry in self._entries:
            try:
                if issubclass(node_type, entry.kind):
                    actions.append(entry.action)
            except TypeError:
                logger.debug(
                    "Skipped %s for class lookup of %s",
                    describe_type(entry.kind),
                    describe_type(node_type),
                )
                continue
        return actions

    @property
    def entries(self) -> tuple[ConfiguredAction, ...]:
        return tuple(self._entries)

    def snapshot(self) -> "ActionRegistry":
        """Independent copy; later registrations on either side are not shared."""
        return ActionRegistry(self.entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ConfiguredAction]:
        return iter(self.entries)
