"""Navigation state machine: current path, zoom transitions and the detail overlay.

Zoom intents use a two-phase commit. ``enter_child`` and ``go_back`` only move the
controller into a transition state and schedule a commit; the path itself changes when
the commit runs after the transition delay. While a transition is pending, further zoom
intents are ignored, so a rapid double intent advances the path by one level only.

``jump_to_breadcrumb`` is immediate. If a zoom is pending it supersedes it: every
scheduled commit carries the generation it was scheduled in, and a jump bumps the
generation so the stale commit is dropped when its timer fires.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

from study_map.config import TRANSITION_DELAY_SECONDS
from study_map.core.tree.navigation import breadcrumb_for, node_at
from study_map.errors import NavigationDesyncError, PathOutOfRangeError
from study_map.models.node import Document, NavigationPath, TreeNode
from study_map.protocols import SchedulerProtocol


@dataclass(frozen=True)
class Idle:
    """No transition in flight. The only state that accepts zoom intents."""


@dataclass(frozen=True)
class ZoomingIn:
    """Zooming into the child at ``target_child_index`` of the current node."""

    target_child_index: int


@dataclass(frozen=True)
class ZoomingOut:
    """Zooming out of ``departing_path``. Used for animation only."""

    departing_path: NavigationPath


TransitionState = Idle | ZoomingIn | ZoomingOut

IDLE = Idle()


@dataclass(frozen=True)
class NavigationState:
    """Snapshot of the controller, handed to the presentation layer."""

    path: NavigationPath
    transition: TransitionState
    detail: TreeNode | None

    @property
    def is_idle(self) -> bool:
        return isinstance(self.transition, Idle)

    @property
    def depth(self) -> int:
        return len(self.path)


Listener = Callable[[NavigationState], None]


class NavigationController:
    """Owns the navigation path of one viewing session.

    Only this class assigns to the path. Presentation code reads ``state`` snapshots and
    changes them through the intent methods, each of which returns True when it had an
    effect and False when it was ignored.
    """

    def __init__(
        self,
        document: Document,
        scheduler: SchedulerProtocol,
        *,
        delay: float = TRANSITION_DELAY_SECONDS,
    ) -> None:
        self._document = document
        self._scheduler = scheduler
        self._delay = delay
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []

        self._path: NavigationPath = ()
        self._transition: TransitionState = IDLE
        self._detail: TreeNode | None = None
        # Bumped whenever a pending commit must be discarded.
        self._generation = 0

    @property
    def document(self) -> Document:
        return self._document

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def state(self) -> NavigationState:
        with self._lock:
            return NavigationState(
                path=self._path, transition=self._transition, detail=self._detail
            )

    @property
    def path(self) -> NavigationPath:
        return self._path

    @property
    def transition(self) -> TransitionState:
        return self._transition

    @property
    def detail(self) -> TreeNode | None:
        return self._detail

    @property
    def current_node(self) -> TreeNode:
        """The node at the committed path.

        Raises:
            NavigationDesyncError: If the committed path does not resolve.
        """
        node = node_at(self._document.root, self._path)
        if node is None:
            logger.error("Committed path {} does not resolve against the document", self._path)
            msg = f"Committed path {self._path!r} does not resolve"
            raise NavigationDesyncError(msg)
        return node

    @property
    def breadcrumb(self) -> tuple[TreeNode, ...]:
        try:
            return breadcrumb_for(self._document.root, self._path)
        except PathOutOfRangeError as e:
            logger.error("Committed path {} does not resolve against the document", self._path)
            msg = f"Committed path {self._path!r} does not resolve"
            raise NavigationDesyncError(msg) from e

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with the new state after every change.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Intents ---

    def enter_child(self, index: int) -> bool:
        """Start zooming into the child at ``index`` of the current node."""
        with self._lock:
            if not isinstance(self._transition, Idle):
                logger.debug("Ignoring enter_child({}): transition in flight", index)
                return False
            try:
                target = self._child_path(index)
            except PathOutOfRangeError as e:
                logger.debug("Ignoring enter_child({}): {}", index, e)
                return False

            self._transition = ZoomingIn(target_child_index=index)
            self._schedule_commit(target)
            state = self.state
        self._notify(state)
        return True

    def go_back(self) -> bool:
        """Start zooming out to the parent of the current node."""
        with self._lock:
            if not isinstance(self._transition, Idle):
                logger.debug("Ignoring go_back(): transition in flight")
                return False
            if not self._path:
                logger.debug("Ignoring go_back(): already at the root")
                return False

            self._transition = ZoomingOut(departing_path=self._path)
            self._schedule_commit(self._path[:-1])
            state = self.state
        self._notify(state)
        return True

    def jump_to_breadcrumb(self, level: int) -> bool:
        """Move to the ancestor at ``level`` immediately, superseding any pending zoom."""
        with self._lock:
            if level < 0 or level >= len(self._path):
                logger.debug(
                    "Ignoring jump_to_breadcrumb({}): path depth is {}", level, len(self._path)
                )
                return False

            if not isinstance(self._transition, Idle):
                logger.debug("Breadcrumb jump supersedes pending {}", self._transition)
            self._generation += 1
            self._path = self._path[:level]
            self._transition = IDLE
            state = self.state
        logger.debug("Jumped to {}", state.path)
        self._notify(state)
        return True

    def show_detail(self, node: TreeNode) -> bool:
        """Open the detail overlay for ``node``, replacing any open one."""
        with self._lock:
            self._detail = node
            state = self.state
        self._notify(state)
        return True

    def dismiss_detail(self) -> bool:
        with self._lock:
            if self._detail is None:
                return False
            self._detail = None
            state = self.state
        self._notify(state)
        return True

    def back_or_dismiss(self) -> bool:
        """Dismiss the detail overlay if it is open, otherwise go back.

        The overlay shadows back navigation: a single "back" press never does both.
        """
        with self._lock:
            dismissed = self._detail is not None
            if dismissed:
                self._detail = None
                state = self.state
        if dismissed:
            self._notify(state)
            return True
        return self.go_back()

    def cancel_pending(self) -> bool:
        """Drop a pending zoom without committing it. Used when the session ends."""
        with self._lock:
            if isinstance(self._transition, Idle):
                return False
            self._generation += 1
            self._transition = IDLE
            state = self.state
        self._notify(state)
        return True

    # --- Internals ---

    def _child_path(self, index: int) -> NavigationPath:
        children = self.current_node.children
        if index < 0 or index >= len(children):
            msg = f"child index {index} out of range for {len(children)} children"
            raise PathOutOfRangeError(msg)
        return (*self._path, index)

    def _schedule_commit(self, target: NavigationPath) -> None:
        generation = self._generation
        self._scheduler.call_later(self._delay, lambda: self._commit(generation, target))

    def _commit(self, generation: int, target: NavigationPath) -> None:
        with self._lock:
            if generation != self._generation:
                logger.debug("Dropping stale commit to {}", target)
                return
            if node_at(self._document.root, target) is None:
                logger.error("Pending commit target {} does not resolve", target)
                msg = f"Commit target {target!r} does not resolve"
                raise NavigationDesyncError(msg)

            self._path = target
            self._transition = IDLE
            state = self.state
        logger.debug("Committed path {}", target)
        self._notify(state)

    def _notify(self, state: NavigationState) -> None:
        for listener in list(self._listeners):
            listener(state)
