"""Textual application: start screen and the document session."""

from pathlib import Path

from loguru import logger
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Input, OptionList, Static
from textual.widgets.option_list import Option

from study_map.config import DOCUMENT_SUFFIX, TRANSITION_DELAY_SECONDS
from study_map.core.importer.loader import find_document_files
from study_map.errors import InvalidFormatError, UnsupportedFileError
from study_map.session import Session
from study_map.tui.detail import NoticeScreen
from study_map.tui.scheduler import TextualScheduler
from study_map.tui.viewer import ViewerScreen


class StudyMapApp(App[None]):
    """Open a .ktree file, then explore it by zooming through its levels."""

    TITLE = "Study Map"

    CSS = """
    Screen {
        background: #F5F0E8;
        color: #2C2C2C;
    }

    #start {
        align: center middle;
    }

    #start-panel {
        width: 64;
        height: auto;
        padding: 1 3;
        border: dashed #C8C0B0;
    }

    #start-panel:focus-within {
        border: dashed #6B7C4A;
    }

    #start-title {
        width: 100%;
        content-align: center middle;
        text-style: bold;
    }

    #start-prompt {
        width: 100%;
        content-align: center middle;
        color: #888888;
        padding-bottom: 1;
    }

    #start-files {
        height: auto;
        max-height: 10;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+w", "close_document", "Close"),
    ]

    def __init__(
        self,
        initial_path: Path | None = None,
        *,
        delay: float = TRANSITION_DELAY_SECONDS,
        search_dir: Path | None = None,
    ) -> None:
        super().__init__()
        self.session = Session(TextualScheduler(self), delay=delay)
        self._initial_path = initial_path
        self._search_dir = search_dir or Path.cwd()

    def compose(self) -> ComposeResult:
        with Vertical(id="start"):
            with Vertical(id="start-panel"):
                yield Static("🌿 Study Map", id="start-title")
                yield Static(f"Open a {DOCUMENT_SUFFIX} file to begin", id="start-prompt")
                yield Input(placeholder=f"path/to/notes{DOCUMENT_SUFFIX}", id="start-path")
                yield OptionList(id="start-files")
        yield Footer()

    def on_mount(self) -> None:
        self._list_documents()
        if self._initial_path is not None:
            self.open_document(self._initial_path)

    def _list_documents(self) -> None:
        files = self.query_one("#start-files", OptionList)
        files.clear_options()
        found = find_document_files(self._search_dir)
        files.add_options([Option(p.name, id=str(p)) for p in found])
        files.display = bool(found)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        value = event.value.strip()
        if value:
            self.open_document(Path(value).expanduser())

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option_id:
            self.open_document(Path(event.option_id))

    def open_document(self, path: Path) -> bool:
        """Load a document and show the viewer. Returns False if the load failed."""
        try:
            controller = self.session.open_path(path)
        except UnsupportedFileError as e:
            logger.info("Ignoring {}: {}", path, e)
            self.notify(str(e), severity="warning")
            return False
        except InvalidFormatError as e:
            logger.warning("Invalid document {}: {}", path, e)
            self.push_screen(NoticeScreen(f"Invalid {DOCUMENT_SUFFIX} file", str(e)))
            return False

        self.push_screen(ViewerScreen(controller, on_close=self.action_close_document))
        return True

    def action_close_document(self) -> None:
        """Discard the loaded document and return to the start screen."""
        if not self.session.is_loaded:
            return
        self.session.reset()
        while len(self.screen_stack) > 1:
            self.pop_screen()
        self.query_one("#start-path", Input).value = ""
        self._list_documents()
