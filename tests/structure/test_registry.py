"""
Tests for registry module functionality.

This module tests the configuration action registry:
- ActionRegistry: Registration, ordering and type-scoped lookup
- ConfiguredAction: Matching of elements against declared types
- Rejection of unusable declared types and actions
"""

import logging
from abc import ABC
from typing import Protocol, runtime_checkable

import pytest
from sample_elements import Summariser, TestPlan, ThreadGroup

from treebuilder import TestElement
from treebuilder.exceptions import ActionRegistrationError
from treebuilder.structure import ActionRegistry, ConfiguredAction


def rename(element, parent):
    element.name = "renamed"


def disable(element, parent):
    element.enabled = False


@runtime_checkable
class HasThreads(Protocol):
    num_threads: int


class Named(Protocol):
    name: str


class Sampler(ABC):
    pass


Sampler.register(Summariser)


class TestActionRegistration:
    """Test adding actions to the registry."""

    def test_register_appends_in_order(self):
        """Test that entries keep registration order."""
        registry = ActionRegistry()
        first = registry.register(TestElement, rename)
        second = registry.register(ThreadGroup, disable)

        assert registry.entries == (first, second)
        assert len(registry) == 2
        assert list(registry) == [first, second]

    def test_register_returns_entry(self):
        """Test that register returns the stored binding."""
        registry = ActionRegistry()
        entry = registry.register(TestPlan, rename)

        assert isinstance(entry, ConfiguredAction)
        assert entry.kind is TestPlan
        assert entry.action is rename

    def test_duplicate_registrations_are_kept(self):
        """Test that the same binding may be registered repeatedly."""
        registry = ActionRegistry()
        registry.register(TestPlan, rename)
        registry.register(TestPlan, rename)

        assert registry.applicable(TestPlan()) == [rename, rename]

    def test_non_class_kind_rejected(self):
        """Test that declared types must be classes."""
        registry = ActionRegistry()

        with pytest.raises(ActionRegistrationError, match="must be a class"):
            registry.register("TestPlan", rename)
        assert len(registry) == 0

    def test_non_runtime_protocol_rejected(self):
        """Test that protocols need runtime_checkable to be usable."""
        registry = ActionRegistry()

        with pytest.raises(ActionRegistrationError) as exc_info:
            registry.register(Named, rename)
        assert exc_info.value.kind is Named

    def test_non_callable_action_rejected(self):
        """Test that actions must be callable."""
        registry = ActionRegistry()

        with pytest.raises(ActionRegistrationError, match="must be callable"):
            registry.register(TestPlan, "rename")


class TestApplicableActions:
    """Test type-scoped lookup of actions."""

    def setup_method(self):
        """Create a registry with general and specific bindings."""
        self.registry = ActionRegistry()
        self.registry.register(ThreadGroup, disable)
        self.registry.register(TestElement, rename)

    def test_general_type_matches_subtypes(self):
        """Test that a TestElement binding applies to every element type."""
        assert self.registry.applicable(TestPlan()) == [rename]
        assert self.registry.applicable(Summariser()) == [rename]

    def test_registration_order_not_specificity(self):
        """Test that a specific binding registered first is returned first."""
        assert self.registry.applicable(ThreadGroup()) == [disable, rename]

    def test_unrelated_objects_match_nothing(self):
        """Test that non-element objects receive no actions."""
        assert self.registry.applicable(object()) == []

    def test_runtime_protocol_matches_structurally(self):
        """Test that runtime-checkable protocols act as capabilities."""
        registry = ActionRegistry()
        registry.register(HasThreads, disable)

        assert registry.applicable(ThreadGroup()) == [disable]
        assert registry.applicable(TestPlan()) == []

    def test_abstract_base_class_matches_registered_types(self):
        """Test that virtual subclasses of an ABC are matched."""
        registry = ActionRegistry()
        registry.register(Sampler, disable)

        assert registry.applicable(Summariser()) == [disable]
        assert registry.applicable(TestPlan()) == []

    def test_applicable_to_type(self):
        """Test lookup by element class instead of instance."""
        assert self.registry.applicable_to_type(ThreadGroup) == [disable, rename]
        assert self.registry.applicable_to_type(TestPlan) == [rename]
        assert self.registry.applicable_to_type(int) == []

    def test_applicable_to_type_skips_data_protocols(self):
        """Test that protocols with data members are left out of class lookups."""
        registry = ActionRegistry()
        registry.register(HasThreads, disable)
        registry.register(TestElement, rename)

        assert registry.applicable_to_type(ThreadGroup) == [rename]

    def test_skipped_protocol_is_logged(self, caplog):
        """Test that a kind left out of a class lookup emits a debug record."""
        registry = ActionRegistry()
        registry.register(HasThreads, disable)

        with caplog.at_level(logging.DEBUG, logger="treebuilder"):
            assert registry.applicable_to_type(ThreadGroup) == []

        skipped = [r for r in caplog.records if "Skipped" in r.getMessage()]
        assert len(skipped) == 1
        assert "HasThreads" in skipped[0].getMessage()
        assert "ThreadGroup" in skipped[0].getMessage()


class TestRegistrySnapshot:
    """Test independent copies of a registry."""

    def test_snapshot_is_independent(self):
        """Test that later registrations are not shared with a snapshot."""
        registry = ActionRegistry()
        registry.register(TestElement, rename)
        snapshot = registry.snapshot()

        registry.register(TestPlan, disable)
        snapshot.register(ThreadGroup, disable)

        assert len(registry) == 2
        assert len(snapshot) == 2
        assert snapshot.applicable(TestPlan()) == [rename]

    def test_entries_are_immutable(self):
        """Test that registry entries cannot be altered."""
        registry = ActionRegistry()
        entry = registry.register(TestElement, rename)

        with pytest.raises(AttributeError):
            entry.kind = TestPlan
