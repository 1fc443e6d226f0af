import logging
from typing import Any, Iterator, List, Optional

from .errors import ElementNotFoundError, InvalidInputError, InvariantViolationError
from .invariants import assert_invariants
from .node import Colour, Direction, Node

logger = logging.getLogger(__name__)

_EMPTY = object()


def compare(a, b) -> int:
    """Three-way comparison under natural ordering; only the sign is meaningful"""
    return (a > b) - (a < b)


class RedBlackTree:
    """An ordered multiset kept balanced by the red-black discipline.

    Equal keys share a single node whose ``count`` records how many times the
    key was inserted, so lookups, insertions and removals are O(log n) in the
    number of distinct keys. ``None`` is never a valid key.
    """

    def __init__(self, element: Any = _EMPTY, *, check_invariants: bool = False):
        # one sentinel per tree: its parent link is borrowed during removal
        self._nil = Node.sentinel()
        self._root = self._nil
        self._size = 0
        self._number_of_nodes = 0
        self._check_invariants = check_invariants

        if element is not _EMPTY:
            self.insert(element)

    @property
    def root(self) -> Optional[Node]:
        return None if self.is_empty() else self._root

    @property
    def sentinel(self) -> Node:
        return self._nil

    @property
    def size(self) -> int:
        return self._size

    @property
    def number_of_nodes(self) -> int:
        return self._number_of_nodes

    def get_size(self) -> int:
        return self._size

    def get_number_of_nodes(self) -> int:
        return self._number_of_nodes

    def is_empty(self) -> bool:
        return self._root is self._nil

    def clear(self):
        self._root = self._nil
        self._nil.parent = self._nil
        self._size = 0
        self._number_of_nodes = 0

    def __len__(self):
        return self._size

    def __bool__(self):
        return not self.is_empty()

    def __contains__(self, key):
        return self.contains(key)

    def __iter__(self) -> Iterator[Any]:
        stack: List[Node] = []
        node = self._root
        while stack or node is not self._nil:
            while node is not self._nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            for _ in range(node.count):
                yield node.key
            node = node.right

    # queries

    def _require_key(self, key, operation: str):
        if key is None:
            raise InvalidInputError(operation)

    def search(self, key) -> Optional[Node]:
        """Returns the node holding key, or None if key is not stored"""
        self._require_key(key, "search")
        node = self._root
        while node is not self._nil:
            order = compare(key, node.key)
            if order == 0:
                return node
            node = node.left if order < 0 else node.right
        return None

    def contains(self, key) -> bool:
        self._require_key(key, "contains")
        return self.search(key) is not None

    def get_count(self, key) -> int:
        self._require_key(key, "get_count")
        node = self.search(key)
        return 0 if node is None else node.count

    def get_minimum(self):
        if self.is_empty():
            return None
        return self._root.minimum().key

    def get_maximum(self):
        if self.is_empty():
            return None
        return self._root.maximum().key

    def get_successor(self, key):
        """Returns the smallest stored key greater than key, None for the maximum"""
        self._require_key(key, "get_successor")
        node = self.search(key)
        if node is None:
            raise ElementNotFoundError(key)
        return node.successor().key

    def get_predecessor(self, key):
        """Returns the largest stored key smaller than key, None for the minimum"""
        self._require_key(key, "get_predecessor")
        node = self.search(key)
        if node is None:
            raise ElementNotFoundError(key)
        return node.predecessor().key

    def in_order_visit(self) -> List[Any]:
        return list(self)

    def get_black_height(self) -> int:
        """Black nodes on every root-to-leaf path, or -1 if empty or unbalanced"""
        if self.is_empty():
            return -1
        return self._black_height(self._root)

    def _black_height(self, node: Node) -> int:
        if node is self._nil:
            return 0
        left = self._black_height(node.left)
        right = self._black_height(node.right)
        if left == -1 or left != right:
            return -1
        return left + 1 if node.is_black else left

    def height(self, node: Node = None) -> int:
        """Edges on the longest downward path, -1 for an empty subtree"""
        if node is None:
            node = self._root
        if node is self._nil:
            return -1
        return 1 + max(self.height(node.left), self.height(node.right))

    # mutation

    def insert(self, key) -> int:
        """Adds one occurrence of key; returns the key comparisons it took"""
        self._require_key(key, "insert")

        comparisons = 0
        parent = self._nil
        direction = Direction.ROOT
        node = self._root
        while node is not self._nil:
            comparisons += 1
            order = compare(key, node.key)
            if order == 0:
                node.count += 1
                self._size += 1
                self._after_mutation()
                return comparisons
            parent = node
            direction = Direction.LEFT if order < 0 else Direction.RIGHT
            node = node.get_child(direction)

        node = Node(key, self._nil)
        node.parent = parent
        if parent is self._nil:
            self._root = node
        else:
            parent.set_child(direction, node)
        logger.debug("created node %r under %r", node, parent)

        self._insert_fixup(node)
        self._root.colour = Colour.BLACK

        self._size += 1
        self._number_of_nodes += 1
        self._after_mutation()
        return comparisons

    def _insert_fixup(self, node: Node):
        while node.parent.is_red:
            parent = node.parent
            # a red parent is never the root, so the grandparent is real
            grandparent = parent.parent
            direction = parent.get_direction()
            uncle = grandparent.get_child(direction.opposite)

            if uncle.is_red:
                logger.debug("insert fixup: red uncle of %r, recolouring", node)
                parent.colour = Colour.BLACK
                uncle.colour = Colour.BLACK
                grandparent.colour = Colour.RED
                node = grandparent
                continue

            # inner grandchild: rotate it into the outer position first
            if node is parent.get_child(direction.opposite):
                logger.debug("insert fixup: %r is an inner grandchild", node)
                self._rotate_subtree(parent, direction)
                node = parent
                parent = node.parent

            logger.debug("insert fixup: %r is an outer grandchild", node)
            parent.colour = Colour.BLACK
            grandparent.colour = Colour.RED
            self._rotate_subtree(grandparent, direction.opposite)

    def remove(self, key) -> bool:
        """Removes one occurrence of key; returns False if it was not stored"""
        self._require_key(key, "remove")

        node = self.search(key)
        if node is None:
            return False

        if node.count > 1:
            node.count -= 1
            self._size -= 1
            self._after_mutation()
            return True

        if self._number_of_nodes == 1:
            logger.debug("removed last node %r", node)
            self.clear()
            self._after_mutation()
            return True

        removed_colour = node.colour
        if node.left is self._nil:
            replacement = node.right
            self._transplant(node, node.right)
        elif node.right is self._nil:
            replacement = node.left
            self._transplant(node, node.left)
        else:
            # the successor has no left child, so it can be spliced out
            # and then moved into node's position
            successor = node.right.minimum()
            removed_colour = successor.colour
            replacement = successor.right
            if successor.parent is node:
                replacement.parent = successor
            else:
                self._transplant(successor, successor.right)
                successor.right = node.right
                successor.right.parent = successor
            self._transplant(node, successor)
            successor.left = node.left
            successor.left.parent = successor
            successor.colour = node.colour
        logger.debug("removed node %r", node)

        if removed_colour is Colour.BLACK:
            self._remove_fixup(replacement)
        self._nil.parent = self._nil

        self._size -= 1
        self._number_of_nodes -= 1
        self._after_mutation()
        return True

    def _remove_fixup(self, node: Node):
        # node carries an extra black; it may be the sentinel, whose parent
        # was set by the splice above
        while node is not self._root and node.is_black:
            parent = node.parent
            direction = Direction.LEFT if node is parent.left else Direction.RIGHT
            sibling = parent.get_child(direction.opposite)

            if sibling.is_red:
                logger.debug("remove fixup: red sibling %r", sibling)
                sibling.colour = Colour.BLACK
                parent.colour = Colour.RED
                self._rotate_subtree(parent, direction)
                sibling = parent.get_child(direction.opposite)

            near = sibling.get_child(direction)
            far = sibling.get_child(direction.opposite)

            if near.is_black and far.is_black:
                logger.debug("remove fixup: black nephews under %r", sibling)
                sibling.colour = Colour.RED
                node = parent
                continue

            if far.is_black:
                logger.debug("remove fixup: red near nephew %r", near)
                near.colour = Colour.BLACK
                sibling.colour = Colour.RED
                self._rotate_subtree(sibling, direction.opposite)
                sibling = parent.get_child(direction.opposite)

            logger.debug("remove fixup: red far nephew under %r", sibling)
            sibling.colour = parent.colour
            parent.colour = Colour.BLACK
            sibling.get_child(direction.opposite).colour = Colour.BLACK
            self._rotate_subtree(parent, direction)
            node = self._root
        node.colour = Colour.BLACK

    # structure

    def rotate_left(self, node: Node) -> Node:
        return self._rotate_subtree(node, Direction.LEFT)

    def rotate_right(self, node: Node) -> Node:
        return self._rotate_subtree(node, Direction.RIGHT)

    def _rotate_subtree(self, sub: Node, direction: Direction) -> Node:
        """Moves sub down towards direction, promoting its other child"""
        new_root = sub.get_child(direction.opposite)
        if new_root is self._nil:
            raise InvariantViolationError(
                f"cannot rotate {direction.name.lower()} at {sub!r}: "
                f"its {direction.opposite.name.lower()} child is nil")

        sub_parent = sub.parent
        sub_direction = sub.get_direction()
        new_child = new_root.get_child(direction)

        sub.set_child(direction.opposite, new_child)
        if new_child is not self._nil:
            new_child.parent = sub

        new_root.set_child(direction, sub)
        new_root.parent = sub_parent
        sub.parent = new_root
        if sub_direction == Direction.ROOT:
            self._root = new_root
        else:
            sub_parent.set_child(sub_direction, new_root)

        logger.debug("rotated %s at %r", direction.name.lower(), sub)
        return new_root

    def _transplant(self, old: Node, new: Node):
        """Puts the subtree rooted at new where old hangs; new may be the sentinel"""
        direction = old.get_direction()
        if direction == Direction.ROOT:
            self._root = new
        else:
            old.parent.set_child(direction, new)
        new.parent = old.parent

    def _after_mutation(self):
        if self._check_invariants:
            assert_invariants(self)

    # representation

    def pprint(self, node: Node = None, depth=0) -> str:
        if node is None:
            node = self._root
        if node is self._nil:
            return "\t" * depth + "|_ null\n"
        # recursively draw a tree
        direction = node.get_direction()
        return ("\t" * depth
                + f"|_ {direction.name} | {node.key!r} x{node.count}: {node.colour.name}\n"
                + self.pprint(node.left, depth + 1)
                + self.pprint(node.right, depth + 1))

    def __str__(self):
        root = None if self.is_empty() else self._root.key
        header = (f"RedBlackTree [root={root!r}, size={self._size}, "
                  f"numberOfNodes={self._number_of_nodes}]\n")
        if self.is_empty():
            return header
        return header + self.pprint()

    def __repr__(self):
        return f"RedBlackTree({self.in_order_visit()!r})"
