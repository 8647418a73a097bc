"""Modal screens: the detail overlay and the blocking load-error notice."""

from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Rule, Static

from study_map.core.navigation.controller import NavigationController
from study_map.core.navigation.keys import dispatch_key
from study_map.models.node import TreeNode
from study_map.tui.formatting import detail_kind_label


class DetailPanel(Vertical):
    """Content box of the overlay. Clicks inside it do not dismiss."""

    def on_click(self, event: events.Click) -> None:
        event.stop()


class DetailScreen(ModalScreen[None]):
    """Full view of a single node, shown on top of the viewer.

    The screen never closes itself: every way out goes through the controller, and the
    viewer pops this screen when the controller reports the overlay as dismissed.
    """

    DEFAULT_CSS = """
    DetailScreen {
        align: center middle;
        background: #F5F0E8 90%;
    }

    #detail-panel {
        width: 80;
        max-width: 90%;
        height: auto;
        padding: 1 2;
        background: #FAFAF7;
        border: round #E0D8CC;
    }

    #detail-kind {
        color: #6B7C4A;
        text-style: bold;
        padding-bottom: 1;
    }

    #detail-kind.leaf {
        color: #C4A55A;
    }

    #detail-title {
        color: #2C2C2C;
        text-style: bold;
    }

    #detail-rule {
        color: #6B7C4A;
        width: 8;
    }

    #detail-summary {
        color: #444444;
    }

    #detail-close {
        margin-top: 1;
    }
    """

    def __init__(self, controller: NavigationController, node: TreeNode) -> None:
        super().__init__()
        self.controller = controller
        self.node = node

    def compose(self) -> ComposeResult:
        with DetailPanel(id="detail-panel"):
            kind = Static(detail_kind_label(self.node), id="detail-kind")
            if self.node.is_leaf:
                kind.add_class("leaf")
            yield kind
            yield Static(self.node.title, id="detail-title")
            yield Rule(id="detail-rule")
            yield Static(self.node.summary, id="detail-summary")
            yield Button("close [esc]", id="detail-close")

    def on_key(self, event: events.Key) -> None:
        key = event.character if event.is_printable and event.character else event.key
        if dispatch_key(self.controller, key):
            event.stop()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.controller.dismiss_detail()

    def on_click(self, event: events.Click) -> None:
        self.controller.dismiss_detail()


class NoticeScreen(ModalScreen[None]):
    """Blocking notice for a failed load. Closed with Enter, Escape or the button."""

    DEFAULT_CSS = """
    NoticeScreen {
        align: center middle;
    }

    #notice-panel {
        width: 60;
        max-width: 90%;
        height: auto;
        padding: 1 2;
        background: $panel;
        border: round $error;
    }

    #notice-title {
        text-style: bold;
        padding-bottom: 1;
    }
    """

    def __init__(self, title: str, message: str) -> None:
        super().__init__()
        self._title = title
        self._message = message

    def compose(self) -> ComposeResult:
        with Vertical(id="notice-panel"):
            yield Static(self._title, id="notice-title")
            yield Static(self._message, id="notice-message")
            yield Button("OK", id="notice-ok", variant="error")

    def on_mount(self) -> None:
        self.query_one("#notice-ok", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(None)

    def on_key(self, event: events.Key) -> None:
        if event.key == "escape":
            event.stop()
            self.dismiss(None)
