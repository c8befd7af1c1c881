"""Configuration panel: gcloud named configurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import RenderableType
from rich.text import Text

from gssh.core.models import Configuration
from gssh.providers.exceptions import ProviderError
from gssh.tui.layout import PanelFocus
from gssh.tui.messages import (
    ConfigurationSelected,
    ConfigurationsFetched,
    FetchFailed,
    RefreshConfigurations,
)
from gssh.tui.panels.base import ERROR_COLOR, Panel

if TYPE_CHECKING:
    from gssh.core.interfaces import InventoryProvider

logger = logging.getLogger(__name__)


class ConfigurationPanel(Panel):
    """Lists configurations and activates the highlighted one on ``enter``.

    Every change of the highlighted configuration is announced with
    ``ConfigurationSelected`` so the instance panel follows the cursor.

    Parameters
    ----------
    provider : InventoryProvider
        Source of configurations
    """

    PANEL_FOCUS = PanelFocus.CONFIGURATIONS

    def __init__(self, provider: InventoryProvider, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self.provider = provider
        self.is_loading = True

    def on_mount(self) -> None:
        self.reload()

    def on_refresh_configurations(self, message: RefreshConfigurations) -> None:
        self.reload()

    def reload(self, activate: str | None = None) -> None:
        """Load configurations in a worker, optionally activating one first.

        Parameters
        ----------
        activate : str | None
            Configuration to activate before listing
        """
        self.is_loading = True
        self.refresh()

        self.run_worker(
            lambda: self._fetch_configurations(activate),
            name="configurations",
            group="configurations",
            thread=True,
            exit_on_error=False,
        )

    def _fetch_configurations(self, activate: str | None) -> None:
        try:
            if activate is not None:
                self.provider.activate_configuration(activate)
            configurations = self.provider.list_configurations()
        except ProviderError as e:
            logger.debug("Failed to load configurations: %s", e)
            self.post_message(FetchFailed(e))
            return

        self.post_message(ConfigurationsFetched(configurations))

    def on_configurations_fetched(self, message: ConfigurationsFetched) -> None:
        self.apply_configurations(message.configurations)

    def on_fetch_failed(self, message: FetchFailed) -> None:
        self.show_error(message.error)

    def apply_configurations(self, configurations: list[Configuration]) -> None:
        """Replace the list and highlight the active configuration."""
        previous = self.selection.highlighted
        self.replace_items(configurations)

        for index, configuration in enumerate(configurations):
            if configuration.active:
                self.selection.select(index)
                break

        highlighted = self.selection.highlighted
        if highlighted is not None and (
            previous is None or highlighted.name != previous.name
        ):
            self.highlight_changed()

    def highlight_changed(self) -> None:
        configuration = self.selection.highlighted
        if configuration is not None:
            self.post_message(ConfigurationSelected(configuration))

    def select_highlighted(self) -> None:
        configuration = self.selection.highlighted
        if configuration is None:
            return
        self.reload(activate=configuration.name)

    def render_header(self) -> Text:
        return Text(" Select a GCP configuration: ")

    def render_placeholder(self) -> RenderableType | None:
        if self.error is not None:
            return Text(
                f"Error listing configurations\n{self.error}", style=ERROR_COLOR, justify="center"
            )

        if self.is_loading and not self.selection.items:
            return Text("Loading configurations...", justify="center")

        return None
