"""Render a tree as an indented markdown outline."""

import io

from study_map.models.node import TreeNode


def render_outline(
    root: TreeNode,
    *,
    max_depth: int | None = None,
    include_summaries: bool = True,
) -> str:
    """Render a node and its descendants as indented markdown.

    Args:
        root: The node to start rendering from.
        max_depth: Max levels below the start node to include (None = unlimited).
        include_summaries: Whether to include node summaries.

    Returns:
        Markdown string with bullet-list hierarchy.
    """
    out = io.StringIO()
    todo: list[tuple[TreeNode, int]] = [(root, 0)]
    while todo:
        node, depth = todo.pop()
        indent = "    " * depth
        out.write(f"{indent}- {node.title}\n")

        if include_summaries and node.summary:
            for summary_line in node.summary.split("\n"):
                out.write(f"{indent}  > {summary_line}\n")

        # Truncation indicator when children are cut off by max_depth
        if max_depth is not None and depth == max_depth:
            if node.children:
                child_indent = "    " * (depth + 1)
                count = len(node.children)
                noun = "child" if count == 1 else "children"
                out.write(f"{child_indent}- ... ({count} more {noun}, id={node.id})\n")
            continue

        # Reversed so that the stack pops children in document order
        todo.extend((child, depth + 1) for child in reversed(node.children))

    return out.getvalue()
