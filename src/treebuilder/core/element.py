"""
Core TestElement base class for the tree builder.

This module contains the TestElement model that serves as the base for
all configuration objects assembled into a test tree.
"""

from pydantic import BaseModel, ConfigDict


class TestElement(BaseModel):
    """
    Base class for all test element types.

    Every element carries a mutable name so that configuration actions can
    derive names from their position in the tree. Subclasses add their own
    domain fields; assignments are validated against the declared types.
    """

    # Not a pytest test case despite the name
    __test__ = False

    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    comment: str = ""
    enabled: bool = True
