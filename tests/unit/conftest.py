"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from study_map.core.importer.json_reader import parse_document_data
from study_map.core.navigation.controller import NavigationController
from study_map.models.node import Document
from tests.unit.documents import NESTED_SOURCE, SIMPLE_SOURCE
from tests.unit.fakes import FakeScheduler

DELAY = 0.6


@pytest.fixture
def simple_doc() -> Document:
    return parse_document_data(SIMPLE_SOURCE)


@pytest.fixture
def nested_doc() -> Document:
    return parse_document_data(NESTED_SOURCE)


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def controller(simple_doc: Document, scheduler: FakeScheduler) -> NavigationController:
    """Controller over the two-child document with a manual clock."""
    return NavigationController(simple_doc, scheduler, delay=DELAY)


@pytest.fixture
def nested_controller(nested_doc: Document, scheduler: FakeScheduler) -> NavigationController:
    return NavigationController(nested_doc, scheduler, delay=DELAY)


@pytest.fixture
def ktree_file(tmp_path: Path) -> Path:
    """A well-formed .ktree file on disk."""
    path = tmp_path / "biology.ktree"
    path.write_text(json.dumps(NESTED_SOURCE), encoding="utf-8")
    return path
