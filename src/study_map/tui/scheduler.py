"""Scheduler backed by Textual timers."""

from collections.abc import Callable

from textual.message_pump import MessagePump


class TextualScheduler:
    """Runs navigation commits on the Textual event loop via ``set_timer``."""

    def __init__(self, pump: MessagePump) -> None:
        self._pump = pump

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        self._pump.set_timer(delay, callback, name="navigation-commit")
