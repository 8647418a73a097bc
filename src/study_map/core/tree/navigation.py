"""Tree navigation: path resolution and breadcrumbs."""

from collections.abc import Sequence

from study_map.errors import PathOutOfRangeError
from study_map.models.node import TreeNode


def node_at(root: TreeNode, path: Sequence[int]) -> TreeNode | None:
    """Resolve a path of child indices to a node.

    Returns None as soon as an index is out of range. Never raises.
    """
    node = root
    for index in path:
        if index < 0 or index >= len(node.children):
            return None
        node = node.children[index]
    return node


def is_valid_path(root: TreeNode, path: Sequence[int]) -> bool:
    return node_at(root, path) is not None


def breadcrumb_for(root: TreeNode, path: Sequence[int]) -> tuple[TreeNode, ...]:
    """Get every node along a path, from the root to the node itself.

    The path must already be known to be valid; the navigation controller is responsible
    for that. An out-of-range index raises PathOutOfRangeError.
    """
    crumbs = [root]
    node = root
    for depth, index in enumerate(path):
        if index < 0 or index >= len(node.children):
            count = len(node.children)
            msg = f"Index {index} at depth {depth} is out of range for {count} children"
            raise PathOutOfRangeError(msg)
        node = node.children[index]
        crumbs.append(node)
    return tuple(crumbs)


def count_nodes(root: TreeNode) -> int:
    """Count every node in the tree, the root included."""
    total = 0
    todo = [root]
    while todo:
        node = todo.pop()
        total += 1
        todo.extend(node.children)
    return total


def tree_depth(root: TreeNode) -> int:
    """Length of the longest path from the root. A lone root has depth 0."""
    deepest = 0
    todo: list[tuple[TreeNode, int]] = [(root, 0)]
    while todo:
        node, depth = todo.pop()
        deepest = max(deepest, depth)
        todo.extend((child, depth + 1) for child in node.children)
    return deepest
