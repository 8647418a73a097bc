"""Viewer screen: breadcrumb bar, the current node and its children."""

from collections.abc import Callable

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.screen import Screen
from textual.widgets import Button, Footer, Rule, Static

from study_map.config import CARD_SUMMARY_PREVIEW, ROOT_SUMMARY_PREVIEW
from study_map.core.navigation.controller import (
    Idle,
    NavigationController,
    NavigationState,
    TransitionState,
    ZoomingIn,
)
from study_map.core.navigation.keys import dispatch_key
from study_map.models.node import NavigationPath, TreeNode
from study_map.tui.detail import DetailScreen
from study_map.tui.formatting import card_kind_label, depth_label, hint_line, truncate_summary

# Fade-in after a committed zoom, in seconds.
_REVEAL_SECONDS = 0.15

# Keys 1-9 enter the matching child directly.
_CHILD_KEYS = ("1", "2", "3", "4", "5", "6", "7", "8", "9")


class ChildCard(Vertical):
    """One child of the current node. Primary activation zooms in, secondary opens detail."""

    can_focus = True

    class Activated(Message):
        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    class DetailRequested(Message):
        def __init__(self, node: TreeNode) -> None:
            super().__init__()
            self.node = node

    def __init__(self, node: TreeNode, index: int) -> None:
        super().__init__(classes="leaf" if node.is_leaf else "branch")
        self.node = node
        self.index = index

    def compose(self) -> ComposeResult:
        yield Static(card_kind_label(self.node), classes="card-kind")
        yield Static(self.node.title, classes="card-title")
        summary = truncate_summary(self.node.summary, CARD_SUMMARY_PREVIEW)
        yield Static(summary, classes="card-summary")
        yield Static("↓", classes="card-arrow")

    def on_click(self, event: events.Click) -> None:
        event.stop()
        if event.button == 3:
            self.post_message(self.DetailRequested(self.node))
        else:
            self.post_message(self.Activated(self.index))


class ViewerScreen(Screen[None]):
    """Renders the controller's state and turns user input into intents.

    The screen subscribes to the controller when mounted and unsubscribes when unmounted,
    so keyboard handling and change notifications live exactly as long as the session view.
    """

    AUTO_FOCUS = "ChildCard"

    DEFAULT_CSS = """
    ViewerScreen {
        background: #F5F0E8;
        color: #2C2C2C;
    }

    #topbar {
        height: 3;
        padding: 0 2;
        border-bottom: solid #E0D8CC;
    }

    #breadcrumb {
        width: 1fr;
        height: 3;
    }

    #breadcrumb Button, #topbar Button {
        min-width: 0;
        height: 3;
        border: none;
        background: transparent;
        color: #9A9080;
    }

    #breadcrumb Button.current {
        color: #2C2C2C;
        text-style: bold;
    }

    .crumb-separator {
        width: auto;
        height: 3;
        content-align: center middle;
        color: #9A9080;
    }

    #scene {
        align: center middle;
        padding: 1 4;
    }

    #depth-label {
        width: 100%;
        content-align: center middle;
        color: #9A9080;
        text-style: bold;
    }

    #node-title {
        width: 100%;
        content-align: center middle;
        color: #9A9080;
    }

    #node-title.root {
        color: #2C2C2C;
        text-style: bold;
    }

    #teaser {
        width: 100%;
        content-align: center middle;
        color: #9A9080;
        text-style: italic;
    }

    #cards {
        height: auto;
        align: center middle;
        margin-top: 1;
    }

    ChildCard {
        width: 32;
        height: auto;
        margin: 0 2;
        padding: 1 2;
        background: #FAFAF7;
        border: round #E0D8CC;
    }

    ChildCard:hover, ChildCard:focus {
        border: round #6B7C4A;
    }

    ChildCard.zoom-target {
        border: heavy #6B7C4A;
        text-style: bold;
    }

    .card-kind {
        color: #6B7C4A;
    }

    ChildCard.leaf .card-kind {
        color: #C4A55A;
    }

    .card-summary {
        color: #9A9080;
        max-height: 5;
    }

    .card-arrow {
        width: 100%;
        content-align: center middle;
        color: #E0D8CC;
    }

    #leaf {
        max-width: 80;
        height: auto;
        margin-top: 1;
    }

    #leaf-kind {
        color: #C4A55A;
    }

    #leaf-rule {
        color: #6B7C4A;
        width: 8;
    }

    #hint {
        dock: bottom;
        width: 100%;
        content-align: center middle;
        color: #9A9080;
    }
    """

    def __init__(self, controller: NavigationController, *, on_close: Callable[[], None]) -> None:
        super().__init__()
        self.controller = controller
        self._on_close = on_close
        self._unsubscribe: Callable[[], None] | None = None
        self._rendered_path: NavigationPath | None = None
        self._rendered_transition: TransitionState = Idle()
        self._detail_screen: DetailScreen | None = None

    def compose(self) -> ComposeResult:
        with Horizontal(id="topbar"):
            yield Horizontal(id="breadcrumb")
            yield Button("[b] back", id="back")
            yield Button("close", id="close")
        with Vertical(id="scene"):
            yield Static(id="depth-label")
            yield Static(id="node-title")
            yield Static(id="teaser")
            yield Horizontal(id="cards")
            yield VerticalScroll(id="leaf")
            yield Static(id="hint")
        yield Footer()

    async def on_mount(self) -> None:
        self._unsubscribe = self.controller.subscribe(self._on_state_change)
        await self._refresh_view()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_state_change(self, _state: NavigationState) -> None:
        # Commits arrive from timers, possibly while the detail screen is on top. The app
        # pump is always active, and the refresh renders the latest state, not this one.
        self.app.call_later(self._refresh_view)

    async def _refresh_view(self) -> None:
        if self._unsubscribe is None:
            return
        state = self.controller.state
        if state.path != self._rendered_path:
            await self._rebuild(state)
        if state.transition != self._rendered_transition:
            self._play_transition(state)
        self._sync_detail(state)

    async def _rebuild(self, state: NavigationState) -> None:
        node = self.controller.current_node
        depth = state.depth

        breadcrumb = self.query_one("#breadcrumb", Horizontal)
        await breadcrumb.remove_children()
        crumbs = self.controller.breadcrumb
        widgets: list[Static | Button] = []
        for level, crumb in enumerate(crumbs):
            is_current = level == len(crumbs) - 1
            button = Button(crumb.title, name=str(level), classes="crumb")
            if is_current:
                button.add_class("current")
                button.disabled = True
            widgets.append(button)
            if not is_current:
                widgets.append(Static("›", classes="crumb-separator"))
        await breadcrumb.mount(*widgets)

        self.query_one("#back", Button).display = depth > 0
        self.query_one("#depth-label", Static).update(depth_label(depth).upper())
        title = self.query_one("#node-title", Static)
        title.update(node.title)
        title.set_class(depth == 0, "root")
        teaser = self.query_one("#teaser", Static)
        teaser.update(truncate_summary(node.summary, ROOT_SUMMARY_PREVIEW))
        teaser.display = depth == 0 and bool(node.summary)

        cards = self.query_one("#cards", Horizontal)
        leaf = self.query_one("#leaf", VerticalScroll)
        await cards.remove_children()
        await leaf.remove_children()
        if node.children:
            cards.display = True
            leaf.display = False
            await cards.mount(*(ChildCard(child, i) for i, child in enumerate(node.children)))
            cards.query(ChildCard).first().focus()
        else:
            cards.display = False
            leaf.display = True
            await leaf.mount(
                Static("✦ leaf node", id="leaf-kind"),
                Static(node.title, id="leaf-title"),
                Rule(id="leaf-rule"),
                Static(node.summary, id="leaf-summary"),
            )

        hint = self.query_one("#hint", Static)
        hint.update(hint_line(depth))
        hint.display = bool(node.children)

        self._rendered_path = state.path

    def _play_transition(self, state: NavigationState) -> None:
        scene = self.query_one("#scene", Vertical)
        transition = state.transition
        if isinstance(transition, ZoomingIn):
            for card in self.query(ChildCard):
                card.set_class(card.index == transition.target_child_index, "zoom-target")
            self._fade(scene, 0.0, self.controller.delay)
        elif isinstance(transition, Idle):
            for card in self.query(ChildCard):
                card.remove_class("zoom-target")
            self._fade(scene, 1.0, _REVEAL_SECONDS)
        else:
            self._fade(scene, 0.0, self.controller.delay)
        self._rendered_transition = transition

    def _fade(self, scene: Vertical, opacity: float, duration: float) -> None:
        if duration > 0:
            scene.styles.animate("opacity", value=opacity, duration=duration)
        else:
            scene.styles.opacity = opacity

    def _sync_detail(self, state: NavigationState) -> None:
        current = self._detail_screen
        if current is not None and current.node != state.detail:
            if self.app.screen is current:
                self.app.pop_screen()
            self._detail_screen = None
        if state.detail is not None and self._detail_screen is None:
            self._detail_screen = DetailScreen(self.controller, state.detail)
            self.app.push_screen(self._detail_screen)

    # --- Input ---

    def on_key(self, event: events.Key) -> None:
        key = event.character if event.is_printable and event.character else event.key
        if dispatch_key(self.controller, key):
            event.stop()
            return
        if key in _CHILD_KEYS:
            event.stop()
            self.controller.enter_child(int(key) - 1)
            return

        focused = self.focused
        if not isinstance(focused, ChildCard):
            return
        if key == "enter":
            event.stop()
            self.controller.enter_child(focused.index)
        elif key == "d":
            event.stop()
            self.controller.show_detail(focused.node)

    def on_child_card_activated(self, message: ChildCard.Activated) -> None:
        self.controller.enter_child(message.index)

    def on_child_card_detail_requested(self, message: ChildCard.DetailRequested) -> None:
        self.controller.show_detail(message.node)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        button = event.button
        if button.has_class("crumb") and button.name is not None:
            self.controller.jump_to_breadcrumb(int(button.name))
        elif button.id == "back":
            self.controller.go_back()
        elif button.id == "close":
            self._on_close()
