"""Tests for the session lifecycle."""

import json
from pathlib import Path

import pytest

from study_map.core.navigation.controller import Idle
from study_map.errors import InvalidFormatError, UnsupportedFileError
from study_map.session import Session
from tests.unit.documents import SIMPLE_SOURCE
from tests.unit.fakes import FakeScheduler


def test_new_session_is_not_loaded(scheduler: FakeScheduler) -> None:
    session = Session(scheduler)
    assert not session.is_loaded
    assert session.document is None
    assert session.controller is None


def test_load_bytes_starts_at_root(scheduler: FakeScheduler) -> None:
    session = Session(scheduler, delay=0.1)
    controller = session.load_bytes(json.dumps(SIMPLE_SOURCE).encode(), source="simple.ktree")
    assert session.is_loaded
    assert controller.path == ()
    assert controller.delay == 0.1
    assert session.document is not None
    assert session.document.source == "simple.ktree"


def test_invalid_load_leaves_empty_session_untouched(scheduler: FakeScheduler) -> None:
    session = Session(scheduler)
    with pytest.raises(InvalidFormatError):
        session.load_bytes(b"this is not a tree")
    assert not session.is_loaded


def test_invalid_load_keeps_existing_document(scheduler: FakeScheduler, tmp_path: Path) -> None:
    session = Session(scheduler)
    controller = session.load_bytes(json.dumps(SIMPLE_SOURCE).encode())
    controller.enter_child(0)
    scheduler.run_all()

    with pytest.raises(InvalidFormatError):
        session.load_bytes(b"{}")
    with pytest.raises(UnsupportedFileError):
        session.open_path(tmp_path / "notes.txt")

    assert session.controller is controller
    assert controller.path == (0,)


def test_open_path(scheduler: FakeScheduler, ktree_file: Path) -> None:
    session = Session(scheduler)
    controller = session.open_path(ktree_file)
    assert controller.current_node.title == "Biology"


def test_reset_discards_document_and_pending_zoom(scheduler: FakeScheduler) -> None:
    session = Session(scheduler)
    controller = session.load_bytes(json.dumps(SIMPLE_SOURCE).encode())
    controller.enter_child(1)

    session.reset()
    assert not session.is_loaded
    assert isinstance(controller.transition, Idle)
    scheduler.run_all()
    assert controller.path == ()


def test_reset_without_document_is_noop(scheduler: FakeScheduler) -> None:
    session = Session(scheduler)
    session.reset()
    assert not session.is_loaded
