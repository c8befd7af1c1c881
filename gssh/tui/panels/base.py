"""Shared state and rendering of the picker panels."""

from __future__ import annotations

from typing import ClassVar

from rich.console import Group, RenderableType
from rich.text import Text
from textual.widget import Widget

from gssh.core.models import Displayable
from gssh.tui.layout import PanelFocus, Region
from gssh.tui.widgets.selectable_list import SelectableList

FRAME_HEIGHT = 2
HEADER_HEIGHT = 2
ITEM_HEIGHT = 3

HIGHLIGHT_COLOR = "#ee6ff8"
DESCRIPTION_COLOR = "#777777"
ERROR_COLOR = "color(202)"


class Panel(Widget):
    """A focusable region of the picker owning a selectable list.

    Panels never take focus themselves: the root coordinator calls
    ``focus_panel``/``blur_panel`` and forwards key presses to
    ``press_key`` of the focused panel.

    Attributes
    ----------
    selection : SelectableList
        Items, cursor, filter and scroll window
    is_focused : bool
        Whether the coordinator focused this panel
    is_loading : bool
        Whether a background load is pending
    error : Exception | None
        Last load error, rendered instead of the list
    panel_region : Region | None
        Outer size assigned by the layout manager
    """

    PANEL_FOCUS: ClassVar[PanelFocus]
    FOOTER_HEIGHT: ClassVar[int] = 0

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self.selection: SelectableList[Displayable] = SelectableList()
        self.is_focused = False
        self.is_loading = False
        self.error: Exception | None = None
        self.panel_region: Region | None = None

    def focus_panel(self) -> None:
        self.is_focused = True
        self.set_class(True, "-focused")
        self.refresh()

    def blur_panel(self) -> None:
        self.is_focused = False
        self.set_class(False, "-focused")
        self.refresh()

    def apply_region(self, region: Region) -> None:
        """Resize the panel and recompute how many items fit.

        Parameters
        ----------
        region : Region
            Outer size including border and padding
        """
        self.panel_region = region
        self.styles.width = region.width
        self.styles.height = region.height

        list_height = region.height - FRAME_HEIGHT - HEADER_HEIGHT - self.FOOTER_HEIGHT
        self.selection.set_per_page(list_height // ITEM_HEIGHT)
        self.refresh()

    def show_error(self, error: Exception) -> None:
        self.is_loading = False
        self.error = error
        self.refresh()

    def press_key(self, key: str, character: str | None = None) -> bool:
        """Handle a key press routed by the coordinator.

        Parameters
        ----------
        key : str
            Textual key name
        character : str | None
            Printable character of the key, if any

        Returns
        -------
        bool
            True if the key was consumed
        """
        previous = self.selection.highlighted

        if key in ("up", "k"):
            self.selection.move(-1)
        elif key in ("down", "j"):
            self.selection.move(1)
        elif key == "pageup":
            self.selection.page(-1)
        elif key == "pagedown":
            self.selection.page(1)
        elif key == "home":
            self.selection.home()
        elif key == "end":
            self.selection.end()
        elif key == "enter":
            self.select_highlighted()
            return True
        else:
            return False

        if self.selection.highlighted != previous:
            self.highlight_changed()

        self.refresh()
        return True

    def select_highlighted(self) -> None:
        """React to ``enter`` on the highlighted item."""

    def highlight_changed(self) -> None:
        """React to the cursor moving to a different item."""

    def replace_items(self, items: list[Displayable]) -> None:
        self.is_loading = False
        self.error = None
        self.selection.set_items(items)
        self.refresh()

    def render_header(self) -> Text:
        return Text("")

    def render_footer(self) -> RenderableType | None:
        return None

    def render_placeholder(self) -> RenderableType | None:
        """Return content replacing the list, or None to show the list."""
        if self.error is not None:
            return Text(str(self.error), style=ERROR_COLOR, justify="center")
        return None

    def render_items(self) -> RenderableType:
        lines: list[Text] = []
        highlighted = self.selection.cursor

        for index, item in self.selection.window():
            marker = "│ " if index == highlighted else "  "
            title_style = "bold" if index == highlighted else ""
            description_style = DESCRIPTION_COLOR

            if index == highlighted and self.is_focused:
                title_style = f"bold {HIGHLIGHT_COLOR}"
                description_style = HIGHLIGHT_COLOR

            lines.append(Text.assemble((marker, title_style), (item.title, title_style)))
            lines.append(
                Text.assemble((marker, description_style), (item.description, description_style))
            )
            lines.append(Text(""))

        if not lines:
            lines.append(Text("No items.", style=DESCRIPTION_COLOR))

        return Group(*lines)

    def render(self) -> RenderableType:
        body = self.render_placeholder()
        if body is None:
            body = self.render_items()

        parts: list[RenderableType] = [self.render_header(), Text(""), body]

        footer = self.render_footer()
        if footer is not None:
            parts.append(footer)

        return Group(*parts)
