"""gssh session loop: pick an instance, record it, open a shell, repeat."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from gssh.constants import EXIT_SUCCESS, HISTORY_FILE_NAME
from gssh.core.cache import InventoryCache
from gssh.core.config import ConfigLoader, GsshConfig
from gssh.core.history import HistoryLog
from gssh.core.interfaces import InventoryProvider, ShellLauncher
from gssh.providers.gcloud import GcloudProvider, GcloudShellLauncher
from gssh.tui import GsshTUI
from gssh.utils import get_state_dir

logger = logging.getLogger(__name__)


class Gssh:
    """Interactive GCP instance picker and SSH launcher.

    Parameters
    ----------
    provider_factory : Callable[[], InventoryProvider] | None
        Builds the inventory provider. Defaults to ``GcloudProvider``
    launcher_factory : Callable[[str], ShellLauncher] | None
        Builds the shell launcher from the SSH user name. Defaults to
        ``GcloudShellLauncher``
    app_factory : Callable[..., GsshTUI] | None
        Builds the picker app from provider, cache and history. Defaults to
        ``GsshTUI``
    config_path : str | None
        Configuration file path, see ``ConfigLoader.get_config_path``
    state_dir : Path | None
        Directory for cache and history files, see ``get_state_dir``
    """

    def __init__(
        self,
        provider_factory: Callable[[], InventoryProvider] | None = None,
        launcher_factory: Callable[[str], ShellLauncher] | None = None,
        app_factory: Callable[..., GsshTUI] | None = None,
        config_path: str | None = None,
        state_dir: Path | None = None,
    ) -> None:
        self._config_loader = ConfigLoader()
        self._provider_factory = provider_factory or GcloudProvider
        self._launcher_factory = launcher_factory or GcloudShellLauncher
        self._app_factory = app_factory or GsshTUI
        self._config_path = config_path
        self._state_dir = state_dir

    def load_config(self) -> GsshConfig:
        """Load the user configuration, creating it with defaults if absent.

        Raises
        ------
        ValueError
            If the file is not valid YAML or has wrong types
        RuntimeError
            If the file cannot be created or read
        """
        return self._config_loader.load(self._config_path)

    def pick(self) -> int:
        """Run the picker until the user quits.

        Every selected connection is recorded in history before the shell
        opens, so failed launches are listed too. A successful session
        brings the picker back.

        Returns
        -------
        int
            Process exit code, ``EXIT_SUCCESS`` once the user quits

        Raises
        ------
        LaunchError
            If the shell session cannot start or exits with an error
        """
        config = self.load_config()
        state_dir = self._state_dir or get_state_dir()

        provider = self._provider_factory()
        cache = InventoryCache(provider, state_dir, config.exclusions)
        history = HistoryLog(state_dir / HISTORY_FILE_NAME)
        launcher = self._launcher_factory(config.ssh_username)

        while True:
            app = self._app_factory(provider, cache, history)
            target = app.run()

            if app.exited or target is None:
                return EXIT_SUCCESS

            history.append(target.configuration_name, target.instance)
            logger.debug("Recorded connection to %s in history", target.instance.name)
            launcher.open_shell(target.configuration_name, target.instance)
