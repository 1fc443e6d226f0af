import networkx as nx

from .node import Direction


def to_digraph(tree) -> nx.DiGraph:
    """Builds a parent -> child graph of the tree's distinct keys.

    Nodes carry ``colour`` and ``count`` attributes, edges a ``direction``
    attribute. The sentinel is left out, so leaves have out-degree zero.
    """
    G = nx.DiGraph()
    root = tree.root
    if root is None:
        return G

    stack = [root]
    while stack:
        node = stack.pop()
        G.add_node(node.key, colour=node.colour.name, count=node.count)
        for direction in (Direction.LEFT, Direction.RIGHT):
            child = node.get_child(direction)
            if child.is_nil:
                continue
            G.add_edge(node.key, child.key, direction=direction.name)
            stack.append(child)
    G.graph["root"] = root.key
    return G
