"""
treebuilder - declarative construction of configured test element trees

treebuilder provides a small DSL for assembling test elements into a tree,
with type-scoped default configuration applied to every matching element.
"""

from importlib.metadata import version

from treebuilder.config import BuilderConfig
from treebuilder.core import Action, TestElement
from treebuilder.structure import TestTree, TreeBuilder, build_tree

__version__ = version("treebuilder")

__all__ = [
    "__version__",
    "Action",
    "BuilderConfig",
    "TestElement",
    "TestTree",
    "TreeBuilder",
    "build_tree",
]
