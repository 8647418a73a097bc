"""Keyboard contract for the viewer."""

from study_map.config import BACK_KEYS, DISMISS_KEYS
from study_map.core.navigation.controller import NavigationController


def dispatch_key(controller: NavigationController, key: str) -> bool:
    """Route a key press to the controller.

    The back key dismisses an open detail overlay instead of navigating; the dismiss key
    only ever closes the overlay.

    Returns:
        True if the key is part of the contract (whether or not the intent had an effect).
    """
    if key in BACK_KEYS:
        controller.back_or_dismiss()
        return True
    if key in DISMISS_KEYS:
        controller.dismiss_detail()
        return True
    return False
