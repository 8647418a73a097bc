"""Text helpers for the viewer: labels, teasers and hints."""

from study_map.models.node import TreeNode

ELLIPSIS = "…"


def truncate_summary(summary: str, limit: int) -> str:
    """Cut a summary to ``limit`` characters, marking the cut with an ellipsis."""
    if len(summary) <= limit:
        return summary
    return summary[:limit].rstrip() + ELLIPSIS


def depth_label(depth: int) -> str:
    return "root" if depth == 0 else f"depth {depth}"


def card_kind_label(node: TreeNode) -> str:
    """Short kind marker for a child card: the leaf glyph or the branch count."""
    if node.is_leaf:
        return "✦ leaf"
    count = len(node.children)
    return f"{count} branch{'es' if count != 1 else ''}"


def detail_kind_label(node: TreeNode) -> str:
    return "✦ leaf node" if node.is_leaf else "branch node"


def hint_line(depth: int) -> str:
    hints = ["click to zoom in", "right click for summary"]
    if depth > 0:
        hints.append("[b] to go back")
    return "    ".join(hints)
