"""
Exception classes for tree construction.

This module defines specific exception types for the error conditions the
builder itself detects. Exceptions raised by user-supplied configuration
actions or element bodies are never wrapped and reach the caller unchanged.
"""


class TreeBuilderError(Exception):
    """Base exception for all tree builder errors."""

    pass


class NodeInstantiationError(TreeBuilderError):
    """Raised when an element cannot be instantiated from its type."""

    def __init__(self, type_name: str, reason: str):
        """
        Initialize the exception.

        Params:
            type_name: Name of the element type that failed to instantiate
            reason: The underlying reason for the failure
        """
        self.type_name = type_name
        self.reason = reason
        super().__init__(f"Cannot instantiate element '{type_name}': {reason}")


class ElementTypeError(TreeBuilderError, TypeError):
    """Raised when an element is not of the type a caller asked for."""

    def __init__(self, expected: str, actual: str):
        """
        Initialize the exception.

        Params:
            expected: Name of the requested type
            actual: Name of the type that was found instead
        """
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected element of type '{expected}', got '{actual}'")


class ActionRegistrationError(TreeBuilderError):
    """Raised when a configuration action cannot be registered."""

    def __init__(self, kind: object, reason: str):
        """
        Initialize the exception.

        Params:
            kind: The declared type the action was registered against
            reason: Why the registration was rejected
        """
        self.kind = kind
        self.reason = reason
        super().__init__(f"Cannot register action for {kind!r}: {reason}")


class BuilderStateError(TreeBuilderError):
    """Raised when the builder is used outside of its construction pass."""

    def __init__(self, message: str):
        """
        Initialize the exception.

        Params:
            message: Description of the invalid builder operation
        """
        super().__init__(message)


class TreeDepthError(TreeBuilderError):
    """Raised when nesting exceeds the configured maximum depth."""

    def __init__(self, depth: int, max_depth: int):
        """
        Initialize the exception.

        Params:
            depth: Depth the rejected element would have had
            max_depth: The configured maximum depth
        """
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Element at depth {depth} exceeds maximum tree depth of {max_depth}"
        )
