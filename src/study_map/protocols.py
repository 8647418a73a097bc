"""Protocols for dependency injection in the navigation core."""

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class SchedulerProtocol(Protocol):
    """Runs a callback once after a delay, on the same thread that dispatches intents."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        """Schedule ``callback`` to run after ``delay`` seconds."""
        ...
