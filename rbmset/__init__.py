from .errors import (
    ElementNotFoundError,
    InvalidInputError,
    InvariantViolationError,
    RedBlackTreeError,
)
from .graph import to_digraph
from .invariants import assert_invariants, check_invariants
from .node import Colour, Direction, Node
from .rbtree import RedBlackTree

__all__ = [
    "Colour",
    "Direction",
    "ElementNotFoundError",
    "InvalidInputError",
    "InvariantViolationError",
    "Node",
    "RedBlackTree",
    "RedBlackTreeError",
    "assert_invariants",
    "check_invariants",
    "to_digraph",
]
