"""Viewing session: the pre-load / loaded lifecycle around one document."""

from pathlib import Path

from loguru import logger

from study_map.config import TRANSITION_DELAY_SECONDS
from study_map.core.importer.json_reader import load_document
from study_map.core.importer.loader import read_document_file
from study_map.core.navigation.controller import NavigationController
from study_map.models.node import Document
from study_map.protocols import SchedulerProtocol


class Session:
    """Holds at most one loaded document and the controller navigating it.

    Loading is failure-atomic: the document is fully parsed before any state is replaced,
    so a failed load leaves the session exactly as it was.
    """

    def __init__(
        self, scheduler: SchedulerProtocol, *, delay: float = TRANSITION_DELAY_SECONDS
    ) -> None:
        self._scheduler = scheduler
        self._delay = delay
        self._controller: NavigationController | None = None

    @property
    def is_loaded(self) -> bool:
        return self._controller is not None

    @property
    def controller(self) -> NavigationController | None:
        return self._controller

    @property
    def document(self) -> Document | None:
        return self._controller.document if self._controller else None

    def load_bytes(self, raw: bytes, *, source: str | None = None) -> NavigationController:
        """Parse raw .ktree content and start navigating it.

        Raises:
            InvalidFormatError: If the content is not a valid document.
        """
        return self._start(load_document(raw, source=source))

    def open_path(self, path: Path) -> NavigationController:
        """Read a .ktree file and start navigating it.

        Raises:
            UnsupportedFileError: If the file does not carry the .ktree suffix.
            InvalidFormatError: If the file cannot be read or parsed.
        """
        return self._start(read_document_file(path))

    def reset(self) -> None:
        """Discard the document and return to the pre-load state."""
        if self._controller is None:
            return
        self._controller.cancel_pending()
        logger.info("Closed {}", self._controller.document.source or "document")
        self._controller = None

    def _start(self, document: Document) -> NavigationController:
        self.reset()
        self._controller = NavigationController(document, self._scheduler, delay=self._delay)
        logger.debug("Session started for {!r}", document.root.title)
        return self._controller
