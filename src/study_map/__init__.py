"""Study Map: zoomable viewer for hierarchical study-note trees."""

from study_map.core.importer.json_reader import load_document, parse_document_data
from study_map.core.importer.loader import read_document_file
from study_map.core.navigation.controller import NavigationController
from study_map.core.tree.navigation import breadcrumb_for, node_at
from study_map.models.node import Document, TreeNode
from study_map.session import Session

__all__ = [
    "Document",
    "NavigationController",
    "Session",
    "TreeNode",
    "breadcrumb_for",
    "load_document",
    "node_at",
    "parse_document_data",
    "read_document_file",
]
