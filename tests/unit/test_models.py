"""Tests for domain models."""

import pytest

from study_map.models.node import Document, NodeKind, TreeNode


def test_tree_node_is_frozen() -> None:
    node = TreeNode(id="a", title="A")
    with pytest.raises(AttributeError):
        node.title = "changed"  # type: ignore[misc]


def test_kind_is_derived_from_children() -> None:
    leaf = TreeNode(id="leaf", title="Leaf")
    branch = TreeNode(id="branch", title="Branch", children=(leaf,))
    assert leaf.kind is NodeKind.LEAF
    assert leaf.is_leaf
    assert branch.kind is NodeKind.BRANCH
    assert not branch.is_leaf


def test_document_metadata_defaults_to_empty() -> None:
    doc = Document(root=TreeNode(id="r", title="Root"))
    assert dict(doc.metadata) == {}
    assert doc.source is None
