"""Tests for viewer text helpers."""

from study_map.models.node import TreeNode
from study_map.tui.formatting import (
    card_kind_label,
    depth_label,
    detail_kind_label,
    hint_line,
    truncate_summary,
)

LEAF = TreeNode(id="l", title="Leaf")


def test_truncate_summary_keeps_short_text() -> None:
    assert truncate_summary("short", 80) == "short"
    assert truncate_summary("", 80) == ""


def test_truncate_summary_adds_ellipsis() -> None:
    assert truncate_summary("abcdefghij", 4) == "abcd…"


def test_depth_label() -> None:
    assert depth_label(0) == "root"
    assert depth_label(3) == "depth 3"


def test_card_kind_label() -> None:
    assert card_kind_label(LEAF) == "✦ leaf"
    assert card_kind_label(TreeNode(id="b", title="B", children=(LEAF,))) == "1 branch"
    two = TreeNode(id="b", title="B", children=(LEAF, TreeNode(id="m", title="M")))
    assert card_kind_label(two) == "2 branches"


def test_detail_kind_label() -> None:
    assert detail_kind_label(LEAF) == "✦ leaf node"
    assert detail_kind_label(TreeNode(id="b", title="B", children=(LEAF,))) == "branch node"


def test_hint_line_mentions_back_only_below_root() -> None:
    assert "[b] to go back" not in hint_line(0)
    assert "[b] to go back" in hint_line(1)


def test_hint_line_names_pointer_actions() -> None:
    line = hint_line(0)
    assert line.startswith("click to zoom in")
    assert "right click for summary" in line
    assert hint_line(2).endswith("[b] to go back")
