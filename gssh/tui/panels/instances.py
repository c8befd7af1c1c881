"""Instance panel: running instances of the selected configuration."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from rich.console import RenderableType
from rich.text import Text

from gssh.core.models import Instance
from gssh.providers.exceptions import ProviderError
from gssh.tui.layout import PanelFocus
from gssh.tui.messages import (
    FetchFailed,
    FilteringStateChanged,
    InstanceSelected,
    InstancesFetched,
    RefreshInstances,
)
from gssh.tui.panels.base import DESCRIPTION_COLOR, ERROR_COLOR, Panel
from gssh.utils import format_timestamp

if TYPE_CHECKING:
    from gssh.core.cache import InventoryCache

logger = logging.getLogger(__name__)

FILTER_BADGE_STYLE = "bold #ffffff on #baa000"
CONFIGURATION_STYLE = "#ee6ff8"
LOADING_NAME_STYLE = "#7275ff"


class InstancePanel(Panel):
    """Lists the running instances of a configuration and filters them by name.

    Parameters
    ----------
    cache : InventoryCache
        Source of instance lists

    Attributes
    ----------
    cache : InventoryCache
        Source of instance lists
    configuration_name : str | None
        Configuration the panel shows or is loading
    loaded_configuration : str | None
        Configuration the current items belong to
    instances : list[Instance]
        Last fetched instances, every status included
    last_update : datetime | None
        Fetch time of the current items
    """

    PANEL_FOCUS = PanelFocus.INSTANCES
    FOOTER_HEIGHT = 2

    def __init__(self, cache: InventoryCache, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self.cache = cache
        self.configuration_name: str | None = None
        self.loaded_configuration: str | None = None
        self.instances: list[Instance] = []
        self.last_update: datetime | None = None
        self.is_loading = True

    @property
    def is_filtering(self) -> bool:
        return self.selection.is_filtering

    def on_refresh_instances(self, message: RefreshInstances) -> None:
        self.refresh_instances(message.configuration_name, message.force_invalidate)

    def refresh_instances(self, configuration_name: str, force_invalidate: bool = False) -> None:
        """Start a background load of a configuration's instances.

        Parameters
        ----------
        configuration_name : str
            Configuration to load
        force_invalidate : bool
            Drop the cached snapshot before loading
        """
        self.is_loading = True
        self.configuration_name = configuration_name
        self.refresh()

        self.run_worker(
            lambda: self._fetch_instances(configuration_name, force_invalidate),
            name=f"instances:{configuration_name}",
            group="instances",
            thread=True,
            exit_on_error=False,
        )

    def _fetch_instances(self, configuration_name: str, force_invalidate: bool) -> None:
        """Load instances in a worker thread and post the outcome."""
        try:
            instances, last_update = self.cache.refresh(configuration_name, force_invalidate)
        except ProviderError as e:
            logger.debug("Failed to list instances for %s: %s", configuration_name, e)
            self.post_message(FetchFailed(e))
            return

        self.post_message(InstancesFetched(configuration_name, instances, last_update))

    def on_instances_fetched(self, message: InstancesFetched) -> None:
        self.apply_instances(message.configuration_name, message.instances, message.last_update)

    def apply_instances(
        self, configuration_name: str, instances: list[Instance], last_update: datetime
    ) -> None:
        """Replace the list with the running instances of a fetch result."""
        self.instances = list(instances)
        self.last_update = last_update
        self.loaded_configuration = configuration_name
        self.replace_items([instance for instance in instances if instance.is_running])

    def on_fetch_failed(self, message: FetchFailed) -> None:
        self.show_error(message.error)

    def start_filtering(self) -> None:
        self.selection.start_filtering()
        self.refresh()

    def press_key(self, key: str, character: str | None = None) -> bool:
        """Handle navigation, selection and filter entry keys.

        While filtering, printable characters go to the filter text and only
        ``enter``, ``escape`` and ``backspace`` have special meaning.
        """
        if self.is_filtering:
            return self._press_filter_key(key, character)

        if key == "escape":
            if not self.selection.filter_text:
                return False
            self.selection.reset_filter()
            self.refresh()
            return True

        return super().press_key(key, character)

    def _press_filter_key(self, key: str, character: str | None) -> bool:
        if key == "escape":
            self.selection.reset_filter()
            self.post_message(FilteringStateChanged(False))
        elif key == "enter":
            self.selection.accept_filter()
            self.post_message(FilteringStateChanged(False))
        elif key in ("up", "down"):
            self.selection.move(-1 if key == "up" else 1)
        elif key == "backspace":
            self.selection.backspace()
        elif character is not None and character.isprintable():
            self.selection.type_character(character)
        else:
            return False

        self.refresh()
        return True

    def select_highlighted(self) -> None:
        """Select the highlighted instance under the configuration it was listed for.

        Nothing is selected while an error or loading placeholder hides the
        list, since the remaining items may belong to another configuration.
        """
        instance = self.selection.highlighted
        if instance is None or self.loaded_configuration is None:
            return
        if self.render_placeholder() is not None:
            return
        self.post_message(InstanceSelected(self.loaded_configuration, instance))

    def render_header(self) -> Text:
        title = Text.assemble(
            " Select a GCP instance in ",
            (f"[{self.configuration_name or '...'}]", CONFIGURATION_STYLE),
            " ",
        )

        if self.selection.filter_text or self.is_filtering:
            cursor = "▏" if self.is_filtering else ""
            title.append(" ")
            title.append(f' 🔍 "{self.selection.filter_text}{cursor}" ', style=FILTER_BADGE_STYLE)

        return title

    def render_placeholder(self) -> RenderableType | None:
        if self.error is not None:
            return Text(
                f"Error fetching instances for [{self.configuration_name}]\n{self.error}",
                style=ERROR_COLOR,
                justify="center",
            )

        if self.is_loading and self.loaded_configuration != self.configuration_name:
            return Text.assemble(
                "Fetching instances for ",
                (self.configuration_name or "...", LOADING_NAME_STYLE),
                "...",
                justify="center",
            )

        return None

    def render_footer(self) -> RenderableType | None:
        return Text.assemble(
            "\n",
            ("Last update: ", "color(62)"),
            (format_timestamp(self.last_update), DESCRIPTION_COLOR),
            justify="right",
        )
