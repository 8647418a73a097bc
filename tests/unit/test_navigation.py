"""Tests for tree navigation (path resolution, breadcrumbs)."""

import pytest

from study_map.core.tree.navigation import (
    breadcrumb_for,
    count_nodes,
    is_valid_path,
    node_at,
    tree_depth,
)
from study_map.errors import PathOutOfRangeError
from study_map.models.node import Document, TreeNode


def _all_valid_paths(node: TreeNode, prefix: tuple[int, ...] = ()) -> list[tuple[int, ...]]:
    paths = [prefix]
    for i, child in enumerate(node.children):
        paths.extend(_all_valid_paths(child, (*prefix, i)))
    return paths


def test_node_at_empty_path_is_root(nested_doc: Document) -> None:
    assert node_at(nested_doc.root, ()) is nested_doc.root


def test_node_at_resolves_nested_path(nested_doc: Document) -> None:
    node = node_at(nested_doc.root, (0, 0, 1))
    assert node is not None
    assert node.id == "ribo"


@pytest.mark.parametrize("path", [(3,), (0, 2), (0, 0, 0, 0), (-1,), (2, 0)])
def test_node_at_returns_none_for_invalid_path(nested_doc: Document, path: tuple[int, ...]) -> None:
    assert node_at(nested_doc.root, path) is None
    assert not is_valid_path(nested_doc.root, path)


def test_node_at_resolves_every_valid_path(nested_doc: Document) -> None:
    paths = _all_valid_paths(nested_doc.root)
    assert len(paths) == count_nodes(nested_doc.root)
    for path in paths:
        assert node_at(nested_doc.root, path) is not None


def test_breadcrumb_length_and_last_element(nested_doc: Document) -> None:
    for path in _all_valid_paths(nested_doc.root):
        crumbs = breadcrumb_for(nested_doc.root, path)
        assert len(crumbs) == len(path) + 1
        assert crumbs[0] is nested_doc.root
        assert crumbs[-1] == node_at(nested_doc.root, path)


def test_breadcrumb_titles_for_nested_node(nested_doc: Document) -> None:
    crumbs = breadcrumb_for(nested_doc.root, (0, 0, 0))
    assert [c.title for c in crumbs] == ["Biology", "Cell biology", "Organelles", "Mitochondria"]


def test_breadcrumb_rejects_invalid_path(nested_doc: Document) -> None:
    with pytest.raises(PathOutOfRangeError):
        breadcrumb_for(nested_doc.root, (1, 5))


def test_count_nodes_and_depth(nested_doc: Document) -> None:
    assert count_nodes(nested_doc.root) == 9
    assert tree_depth(nested_doc.root) == 3


def test_depth_of_lone_root() -> None:
    root = TreeNode(id="r", title="Root")
    assert tree_depth(root) == 0
    assert count_nodes(root) == 1
