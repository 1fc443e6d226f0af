import enum
from typing import Any, Optional


class Direction(enum.IntEnum):
    ROOT = -1
    LEFT = 0
    RIGHT = 1

    @property
    def opposite(self) -> "Direction":
        if self == Direction.ROOT:
            raise ValueError("the root has no opposite side")
        return Direction(1 - self)


class Colour(enum.Enum):
    BLACK = 0
    RED = 1


class Node:
    """A tree node holding one distinct key and its multiplicity.

    Links are never None inside a tree: an absent child or the parent of the
    root is the tree's sentinel, a keyless black node (see ``is_nil``).
    """

    def __init__(self, key: Any, nil: Optional["Node"] = None):
        self.key = key
        self.count = 1
        self.colour = Colour.RED
        self.parent = nil
        self.left = nil
        self.right = nil

    @classmethod
    def sentinel(cls) -> "Node":
        nil = cls(None)
        nil.count = 0
        nil.colour = Colour.BLACK
        nil.parent = nil.left = nil.right = nil
        return nil

    @property
    def is_nil(self) -> bool:
        return self.key is None

    @property
    def is_red(self) -> bool:
        return self.colour is Colour.RED

    @property
    def is_black(self) -> bool:
        return self.colour is Colour.BLACK

    def get_child(self, direction: Direction) -> "Node":
        if direction == Direction.LEFT:
            return self.left
        return self.right

    def set_child(self, direction: Direction, node: "Node"):
        if direction == Direction.LEFT:
            self.left = node
        else:
            self.right = node

    def get_direction(self) -> Direction:
        if self.parent.is_nil:
            return Direction.ROOT
        return Direction.LEFT if self is self.parent.left else Direction.RIGHT

    def minimum(self) -> "Node":
        node = self
        while not node.left.is_nil:
            node = node.left
        return node

    def maximum(self) -> "Node":
        node = self
        while not node.right.is_nil:
            node = node.right
        return node

    def successor(self) -> "Node":
        """Returns the next node in key order, or the sentinel for the maximum"""
        if not self.right.is_nil:
            return self.right.minimum()
        node, parent = self, self.parent
        while not parent.is_nil and node is parent.right:
            node, parent = parent, parent.parent
        return parent

    def predecessor(self) -> "Node":
        """Returns the previous node in key order, or the sentinel for the minimum"""
        if not self.left.is_nil:
            return self.left.maximum()
        node, parent = self, self.parent
        while not parent.is_nil and node is parent.left:
            node, parent = parent, parent.parent
        return parent

    def __repr__(self):
        if self.is_nil:
            return "<nil>"
        return f"<{self.colour.name[0]} {self.key!r} x{self.count}>"
