"""Configuration constants for study-map."""

import os
from pathlib import Path

from loguru import logger

# Only files carrying this suffix are offered to the loader.
DOCUMENT_SUFFIX: str = ".ktree"

# Duration of the zoom-in / zoom-out transitions. The path is committed when it elapses.
TRANSITION_DELAY_SECONDS: float = 0.6

# Environment override for the transition delay, in milliseconds.
TRANSITION_DELAY_ENV: str = "STUDY_MAP_TRANSITION_MS"

# Summary teaser lengths (characters) before the ellipsis.
ROOT_SUMMARY_PREVIEW: int = 80
CARD_SUMMARY_PREVIEW: int = 220

# Keyboard contract. Back dismisses the detail overlay first, dismiss only closes it.
BACK_KEYS: tuple[str, ...] = ("b", "B")
DISMISS_KEYS: tuple[str, ...] = ("escape",)

# Log file location for the viewer. First candidate whose directory can be created is used.
LOG_FILE_CANDIDATES: list[Path] = [
    Path("~/.local/state/study-map/study-map.log").expanduser(),
    Path("~/.cache/study-map/study-map.log").expanduser(),
    Path("/tmp/study-map/study-map.log"),
]


def resolve_transition_delay() -> float:
    """Return the transition delay in seconds, honouring the environment override."""
    raw = os.environ.get(TRANSITION_DELAY_ENV)
    if raw is None:
        return TRANSITION_DELAY_SECONDS
    try:
        millis = int(raw)
    except ValueError:
        logger.warning("Ignoring {}={!r}: not an integer", TRANSITION_DELAY_ENV, raw)
        return TRANSITION_DELAY_SECONDS
    if millis < 0:
        logger.warning("Ignoring {}={!r}: negative delay", TRANSITION_DELAY_ENV, raw)
        return TRANSITION_DELAY_SECONDS
    return millis / 1000


def resolve_log_file() -> Path | None:
    """Return the first usable log file location, or None if none is writable."""
    for candidate in LOG_FILE_CANDIDATES:
        try:
            candidate.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            continue
        return candidate
    return None
