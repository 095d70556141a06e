"""
Tree builder structure components.

This package provides the construction context, the configuration action
registry and the tree classes produced by a construction pass.
"""

from treebuilder.structure.builder import TreeBuilder, build_tree
from treebuilder.structure.registry import ActionRegistry, ConfiguredAction
from treebuilder.structure.tree import ElementNode, TestTree
from treebuilder.structure.utils import describe_type, instantiate_element

__all__ = [
    "TreeBuilder",
    "build_tree",
    "ActionRegistry",
    "ConfiguredAction",
    "ElementNode",
    "TestTree",
    "describe_type",
    "instantiate_element",
]
