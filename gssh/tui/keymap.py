"""Global keyboard shortcuts of the picker.

Global shortcuts apply regardless of the focused panel, except while the
instance panel is taking filter text: then every key but ``escape`` and
``ctrl+c`` belongs to the filter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from gssh.tui.layout import PanelFocus


class GlobalAction(str, Enum):
    """Root coordinator actions bound to keys."""

    NEXT_PANEL = "next_panel"
    PREVIOUS_PANEL = "previous_panel"
    START_FILTER = "start_filter"
    RELOAD = "reload"
    CLEAR_HISTORY = "clear_history"
    SPEED_DIAL = "speed_dial"
    QUIT = "quit"


@dataclass(frozen=True)
class KeyRoute:
    """Resolved global action and its argument."""

    action: GlobalAction
    argument: int | None = None


GLOBAL_KEYS: dict[str, GlobalAction] = {
    "tab": GlobalAction.NEXT_PANEL,
    "shift+tab": GlobalAction.PREVIOUS_PANEL,
    "slash": GlobalAction.START_FILTER,
    "r": GlobalAction.RELOAD,
    "c": GlobalAction.CLEAR_HISTORY,
    "q": GlobalAction.QUIT,
    "ctrl+c": GlobalAction.QUIT,
}

ALWAYS_ACTIVE_KEYS = frozenset({"ctrl+c"})
SWALLOWED_WHILE_FILTERING = frozenset({"tab", "shift+tab"})


def resolve_global_key(key: str, *, filtering: bool, focus: PanelFocus) -> KeyRoute | None:
    """Resolve a key to a global action.

    Parameters
    ----------
    key : str
        Textual key name (``tab``, ``slash``, ``3``, ...)
    filtering : bool
        Whether the instance panel is taking filter text
    focus : PanelFocus
        Currently focused panel

    Returns
    -------
    KeyRoute | None
        Global action to run, or None if the key belongs to the focused panel
    """
    if key in ALWAYS_ACTIVE_KEYS:
        return KeyRoute(GLOBAL_KEYS[key])

    if filtering and focus is PanelFocus.INSTANCES:
        return None

    if len(key) == 1 and key.isdigit():
        return KeyRoute(GlobalAction.SPEED_DIAL, int(key))

    action = GLOBAL_KEYS.get(key)
    if action is None:
        return None

    return KeyRoute(action)


def is_swallowed_while_filtering(key: str) -> bool:
    """Check whether a key is dropped instead of typed while filtering."""
    return key in SWALLOWED_WHILE_FILTERING
