"""Textual TUI application for gssh: the root coordinator of the picker."""

from __future__ import annotations

import logging

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal

from gssh.constants import REFRESH_INTERVAL_SECONDS, SPEED_DIAL_DELAY_SECONDS
from gssh.core.cache import InventoryCache
from gssh.core.history import HistoryLog
from gssh.core.interfaces import InventoryProvider
from gssh.core.models import ConnectionTarget
from gssh.logging import ConsoleFormatter, TuiLogHandler, TuiLogMessage
from gssh.tui.keymap import GlobalAction, KeyRoute, is_swallowed_while_filtering, resolve_global_key
from gssh.tui.layout import LayoutManager, LayoutRegions, PanelFocus
from gssh.tui.messages import (
    ClearHistory,
    ConfigurationSelected,
    ConnectionSelected,
    FilteringStateChanged,
    InstanceSelected,
    LayoutComputed,
    RefreshHistory,
    RefreshInstances,
    SpeedDial,
)
from gssh.tui.panels import ConfigurationPanel, HistoryPanel, InstancePanel, Panel
from gssh.tui.status_bar import StatusBar
from gssh.tui.styling import TUI_CSS

logger = logging.getLogger(__name__)


class GsshTUI(App[ConnectionTarget | None]):
    """Three-panel picker ending with a configuration and instance to SSH into.

    The app owns the panel focus, mirrors the instance panel's filter entry
    state so global shortcuts can be suppressed, and routes every key press.
    It exits with a ``ConnectionTarget`` once an instance or history entry is
    chosen, or with None when the user quits.

    Parameters
    ----------
    provider : InventoryProvider
        Source of configurations
    cache : InventoryCache
        Source of instance lists
    history : HistoryLog
        Connection log
    refresh_interval : float
        Seconds between automatic refreshes
    speed_dial_delay : float
        Seconds between a speed-dial highlight and the connection

    Attributes
    ----------
    active_panel : PanelFocus
        Focused panel
    filtering : bool
        Whether the instance panel is taking filter text
    selected_configuration : str | None
        Configuration highlighted in the configuration panel
    exited : bool
        Whether the user quit the picker
    target : ConnectionTarget | None
        Chosen connection, set when the picker ends with a selection
    """

    CSS = TUI_CSS
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("tab", "global_key('tab')", "Next panel", show=False, priority=True),
        Binding("shift+tab", "global_key('shift+tab')", "Previous panel", show=False, priority=True),
        Binding("ctrl+c", "global_key('ctrl+c')", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        provider: InventoryProvider,
        cache: InventoryCache,
        history: HistoryLog,
        refresh_interval: float = REFRESH_INTERVAL_SECONDS,
        speed_dial_delay: float = SPEED_DIAL_DELAY_SECONDS,
    ) -> None:
        super().__init__()
        self.provider = provider
        self.cache = cache
        self.history_log = history
        self.refresh_interval = refresh_interval
        self.layout_manager = LayoutManager()
        self.original_handlers: list[logging.Handler] = []

        self.active_panel = PanelFocus.CONFIGURATIONS
        self.filtering = False
        self.selected_configuration: str | None = None
        self.exited = False
        self.target: ConnectionTarget | None = None

        self.configuration_panel = ConfigurationPanel(provider, id="configurations")
        self.instance_panel = InstancePanel(cache, id="instances")
        self.history_panel = HistoryPanel(history, speed_dial_delay, id="history")
        self.status_bar = StatusBar(id="status-bar")

        self.panels: dict[PanelFocus, Panel] = {
            PanelFocus.CONFIGURATIONS: self.configuration_panel,
            PanelFocus.INSTANCES: self.instance_panel,
            PanelFocus.HISTORY: self.history_panel,
        }

    def compose(self) -> ComposeResult:
        """Compose the picker layout.

        Yields
        ------
        Horizontal
            Top row with the configuration and instance panels
        HistoryPanel
            Full-width history panel
        StatusBar
            Shortcut legend docked to the bottom line
        """
        with Horizontal(id="top-row"):
            yield self.configuration_panel
            yield self.instance_panel
        yield self.history_panel
        yield self.status_bar

    def on_mount(self) -> None:
        """Handle mount event - route logging, focus the first panel, start the timer."""
        root_logger = logging.getLogger()
        self.original_handlers = root_logger.handlers[:]

        tui_handler = TuiLogHandler(self)
        tui_handler.setFormatter(ConsoleFormatter("%(message)s"))
        root_logger.handlers = [tui_handler]

        self.switch_focus(self.active_panel)
        self.post_message(
            LayoutComputed(self.layout_manager.compute(self.size.width, self.size.height))
        )
        self.set_interval(self.refresh_interval, self.tick, name="refresh-timer")

    def on_unmount(self) -> None:
        """Handle unmount event - restore logging."""
        logging.getLogger().handlers = self.original_handlers

    async def on_tui_log_message(self, message: TuiLogMessage) -> None:
        """Show log records emitted from worker threads as notifications."""
        self.notify(message.text, severity=message.severity)

    def on_resize(self, event: events.Resize) -> None:
        regions = self.layout_manager.compute(event.size.width, event.size.height)
        self.post_message(LayoutComputed(regions))

    def on_layout_computed(self, message: LayoutComputed) -> None:
        self.apply_layout(message.regions)

    def apply_layout(self, regions: LayoutRegions) -> None:
        """Hand each panel and the status bar its region."""
        try:
            self.query_one("#top-row").styles.height = regions.configurations.height
        except Exception as e:
            logger.debug("Failed to size top row: %s", e)

        for focus, panel in self.panels.items():
            panel.apply_region(regions.for_panel(focus))
        self.status_bar.apply_region(regions.status_bar)

    def tick(self) -> None:
        """Keep the instance and history lists live unless the user is filtering.

        A non-forcing instance refresh is normally served from the snapshot.
        It is skipped while a load of the same configuration is still
        pending so a slow first fetch is not started again every second.
        """
        if self.filtering:
            return

        configuration = self.selected_configuration
        pending = (
            self.instance_panel.is_loading
            and self.instance_panel.configuration_name == configuration
        )

        if configuration is not None and not pending:
            self.instance_panel.post_message(RefreshInstances(configuration))

        self.history_panel.post_message(RefreshHistory())

    def on_key(self, event: events.Key) -> None:
        """Route every key press not consumed by a priority binding.

        Parameters
        ----------
        event : events.Key
            Key event
        """
        event.stop()
        event.prevent_default()
        self.route_key(event.key, event.character)

    def action_global_key(self, key: str) -> None:
        self.route_key(key)

    def route_key(self, key: str, character: str | None = None) -> None:
        """Run a global shortcut or forward the key to the focused panel.

        Parameters
        ----------
        key : str
            Textual key name
        character : str | None
            Printable character of the key, if any
        """
        route = resolve_global_key(key, filtering=self.filtering, focus=self.active_panel)

        if route is None:
            if self.filtering and is_swallowed_while_filtering(key):
                return
            self.panels[self.active_panel].press_key(key, character)
            return

        self.run_global_action(route)

    def run_global_action(self, route: KeyRoute) -> None:
        action = route.action

        if action is GlobalAction.NEXT_PANEL:
            self.switch_focus(self.active_panel.next())
        elif action is GlobalAction.PREVIOUS_PANEL:
            self.switch_focus(self.active_panel.previous())
        elif action is GlobalAction.START_FILTER:
            self.start_filtering()
        elif action is GlobalAction.RELOAD:
            self.reload_instances()
        elif action is GlobalAction.CLEAR_HISTORY:
            self.history_panel.post_message(ClearHistory())
        elif action is GlobalAction.SPEED_DIAL:
            self.history_panel.post_message(SpeedDial(route.argument))
        elif action is GlobalAction.QUIT:
            self.quit_picker()

    def switch_focus(self, focus: PanelFocus) -> None:
        """Focus one panel, blur the others and update the status bar."""
        self.active_panel = focus

        for panel_focus, panel in self.panels.items():
            if panel_focus is focus:
                panel.focus_panel()
            else:
                panel.blur_panel()

        self.status_bar.set_active_panel(focus)

    def start_filtering(self) -> None:
        self.switch_focus(PanelFocus.INSTANCES)
        self.filtering = True
        self.instance_panel.start_filtering()

    def reload_instances(self) -> None:
        """Force a snapshot-invalidating refresh of the selected configuration."""
        if self.selected_configuration is None:
            return
        self.instance_panel.post_message(
            RefreshInstances(self.selected_configuration, force_invalidate=True)
        )

    def quit_picker(self) -> None:
        self.exited = True
        self.exit(None)

    def on_configuration_selected(self, message: ConfigurationSelected) -> None:
        self.selected_configuration = message.configuration.name
        self.instance_panel.post_message(RefreshInstances(message.configuration.name))

    def on_filtering_state_changed(self, message: FilteringStateChanged) -> None:
        self.filtering = message.filtering

    def on_instance_selected(self, message: InstanceSelected) -> None:
        self.finish(ConnectionTarget(message.configuration_name, message.instance))

    def on_connection_selected(self, message: ConnectionSelected) -> None:
        connection = message.connection
        self.finish(ConnectionTarget(connection.configuration_name, connection.instance))

    def finish(self, target: ConnectionTarget) -> None:
        """End the picker with a connection target; later selections are ignored."""
        if self.target is not None or self.exited:
            return
        self.target = target
        self.exit(target)
