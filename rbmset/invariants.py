"""Full red-black multiset invariant audit.

Unlike ``RedBlackTree.get_black_height`` this walks the whole tree and
reports every broken invariant, so it is meant for tests and for the
``check_invariants`` debugging mode rather than for hot paths.
"""
from typing import List

from .errors import InvariantViolationError
from .node import Node


def check_invariants(tree) -> List[str]:
    """Returns a description of every violated invariant, empty if healthy"""
    problems = []
    nil = tree.sentinel

    if not nil.is_black:
        problems.append("sentinel is not black")

    root = tree.root
    if root is None:
        if tree.size != 0 or tree.number_of_nodes != 0:
            problems.append(
                f"empty tree reports size={tree.size}, "
                f"number_of_nodes={tree.number_of_nodes}")
        return problems

    if not root.is_black:
        problems.append(f"root {root!r} is not black")
    if root.parent is not nil:
        problems.append(f"root {root!r} has parent {root.parent!r}")

    totals = {"size": 0, "nodes": 0}
    previous: List[Node] = []

    def visit(node: Node) -> int:
        if node is nil:
            return 0

        left_height = visit(node.left)

        totals["size"] += node.count
        totals["nodes"] += 1
        if node.count < 1:
            problems.append(f"{node!r} has count {node.count}")
        if previous and not previous[0].key < node.key:
            problems.append(f"{previous[0]!r} precedes {node!r} in order")
        previous[:] = [node]

        right_height = visit(node.right)

        for child in (node.left, node.right):
            if child is not nil and child.parent is not node:
                problems.append(f"{child!r} does not link back to {node!r}")
            if node.is_red and child.is_red:
                problems.append(f"red {node!r} has red child {child!r}")

        if left_height != right_height:
            problems.append(
                f"{node!r} has black heights {left_height} and {right_height}")
        return left_height + (1 if node.is_black else 0)

    visit(root)

    if totals["size"] != tree.size:
        problems.append(f"size is {tree.size}, counts sum to {totals['size']}")
    if totals["nodes"] != tree.number_of_nodes:
        problems.append(
            f"number_of_nodes is {tree.number_of_nodes}, "
            f"found {totals['nodes']} nodes")
    return problems


def assert_invariants(tree):
    problems = check_invariants(tree)
    if problems:
        raise InvariantViolationError("; ".join(problems))
