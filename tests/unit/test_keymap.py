"""Unit tests for global key resolution."""

import pytest

from gssh.tui.keymap import GlobalAction, KeyRoute, is_swallowed_while_filtering, resolve_global_key
from gssh.tui.layout import PanelFocus


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("tab", KeyRoute(GlobalAction.NEXT_PANEL)),
        ("shift+tab", KeyRoute(GlobalAction.PREVIOUS_PANEL)),
        ("slash", KeyRoute(GlobalAction.START_FILTER)),
        ("r", KeyRoute(GlobalAction.RELOAD)),
        ("c", KeyRoute(GlobalAction.CLEAR_HISTORY)),
        ("q", KeyRoute(GlobalAction.QUIT)),
        ("ctrl+c", KeyRoute(GlobalAction.QUIT)),
        ("0", KeyRoute(GlobalAction.SPEED_DIAL, 0)),
        ("7", KeyRoute(GlobalAction.SPEED_DIAL, 7)),
    ],
)
def test_global_keys_when_not_filtering(key: str, expected: KeyRoute) -> None:
    assert resolve_global_key(key, filtering=False, focus=PanelFocus.HISTORY) == expected


@pytest.mark.parametrize("key", ["up", "down", "enter", "escape", "j", "x"])
def test_panel_keys_are_not_global(key: str) -> None:
    assert resolve_global_key(key, filtering=False, focus=PanelFocus.INSTANCES) is None


@pytest.mark.parametrize("key", ["3", "r", "c", "q", "slash", "tab", "shift+tab"])
def test_keys_belong_to_filter_while_filtering(key: str) -> None:
    assert resolve_global_key(key, filtering=True, focus=PanelFocus.INSTANCES) is None


def test_ctrl_c_quits_while_filtering() -> None:
    route = resolve_global_key("ctrl+c", filtering=True, focus=PanelFocus.INSTANCES)

    assert route == KeyRoute(GlobalAction.QUIT)


def test_panel_switch_keys_are_swallowed_while_filtering() -> None:
    assert is_swallowed_while_filtering("tab")
    assert is_swallowed_while_filtering("shift+tab")
    assert not is_swallowed_while_filtering("q")
