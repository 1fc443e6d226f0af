class RedBlackTreeError(Exception):
    """Base class for errors raised by rbmset"""


class InvalidInputError(RedBlackTreeError, ValueError):
    """None was passed where a key is required"""

    def __init__(self, operation: str):
        super().__init__(f"{operation}() does not accept None as a key")
        self.operation = operation


class ElementNotFoundError(RedBlackTreeError, KeyError):
    """The key is not stored in the tree"""

    def __init__(self, key):
        super().__init__(key)
        self.key = key

    def __str__(self):
        return f"{self.key!r} is not in the tree"


class InvariantViolationError(RedBlackTreeError, RuntimeError):
    """A red-black invariant does not hold; always a bug in the tree itself"""
