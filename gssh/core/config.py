"""User configuration loading."""

import copy
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from gssh.constants import CONFIG_FILE_NAME, DEFAULT_EXCLUSIONS, DEFAULT_SSH_USERNAME
from gssh.core.exclusions import normalize_exclusions
from gssh.utils import get_state_dir

logger = logging.getLogger(__name__)

CONFIG_TEMPLATE = """\
# gssh configuration

ssh:
  # Remote user passed to `gcloud compute ssh <user>@<instance>`
  user_name: {user_name}

instances:
  # Instances whose name contains any of these substrings are never listed
  exclusions:
{exclusions}
"""


@dataclass(frozen=True)
class GsshConfig:
    """Validated user configuration.

    Attributes
    ----------
    ssh_username : str
        Login identity used for shell sessions
    exclusions : tuple[str, ...]
        Non-blank instance name substrings to hide
    """

    ssh_username: str
    exclusions: tuple[str, ...]


def render_default_config() -> str:
    """Render the configuration file written on first start."""
    exclusions = "\n".join(f'    - "{entry}"' for entry in DEFAULT_EXCLUSIONS)
    return CONFIG_TEMPLATE.format(user_name=DEFAULT_SSH_USERNAME, exclusions=exclusions)


class ConfigLoader:
    """Load, create and validate the gssh YAML configuration."""

    def __init__(self) -> None:
        """Initialize ConfigLoader with built-in defaults."""
        self.BUILT_IN_DEFAULTS = {
            "ssh": {"user_name": DEFAULT_SSH_USERNAME},
            "instances": {"exclusions": list(DEFAULT_EXCLUSIONS)},
        }

    def get_config_path(self, config_path: str | None = None) -> Path:
        """Resolve the configuration file path.

        Parameters
        ----------
        config_path : str | None
            Explicit path. If None, checks the GSSH_CONFIG env var, then falls
            back to config.yaml in the state directory

        Returns
        -------
        Path
            Configuration file path
        """
        if config_path is None:
            config_path = os.environ.get("GSSH_CONFIG")

        if config_path:
            return Path(config_path).expanduser()

        return get_state_dir() / CONFIG_FILE_NAME

    def ensure_config_file(self, config_file: Path) -> None:
        """Create the configuration file with documented defaults if absent.

        Parameters
        ----------
        config_file : Path
            Configuration file path

        Raises
        ------
        RuntimeError
            If the file does not exist and cannot be created
        """
        if config_file.exists():
            return

        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            config_file.write_text(render_default_config())
        except OSError as e:
            logger.error("Failed to create config file %s: %s", config_file, e)
            raise RuntimeError(f"Failed to create config file {config_file}: {e}") from e

        logger.debug("Created default configuration at %s", config_file)

    def load_config(self, config_path: str | None = None) -> dict[str, Any]:
        """Load the configuration file merged over built-in defaults.

        Parameters
        ----------
        config_path : str | None
            Path to YAML config file, see ``get_config_path``

        Returns
        -------
        dict[str, Any]
            Merged configuration

        Raises
        ------
        ValueError
            If the file is not valid YAML
        RuntimeError
            If the file cannot be created or read
        """
        config_file = self.get_config_path(config_path)
        self.ensure_config_file(config_file)

        try:
            with open(config_file) as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("Failed to parse YAML config file %s: %s", config_file, e)
            raise ValueError(f"Invalid YAML in {config_file}: {e}") from e
        except OSError as e:
            logger.error("Failed to read config file %s: %s", config_file, e)
            raise RuntimeError(f"Failed to read config file {config_file}: {e}") from e

        merged = copy.deepcopy(self.BUILT_IN_DEFAULTS)

        if not isinstance(loaded, dict):
            return merged

        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(merged.get(section), dict):
                merged[section].update(values)
            else:
                merged[section] = values

        return merged

    def validate_config(self, config: dict[str, Any]) -> None:
        """Validate section and field types.

        Parameters
        ----------
        config : dict[str, Any]
            Merged configuration

        Raises
        ------
        ValueError
            If configuration is invalid
        """
        for section in ("ssh", "instances"):
            if not isinstance(config.get(section), dict):
                raise ValueError(f"{section} must be a mapping")

        user_name = config["ssh"].get("user_name")
        if not isinstance(user_name, str) or not user_name.strip():
            raise ValueError("ssh.user_name must be a non-empty string")

        exclusions = config["instances"].get("exclusions")
        if exclusions is None:
            return

        if not isinstance(exclusions, list):
            raise ValueError("instances.exclusions must be a list")

        for entry in exclusions:
            if not isinstance(entry, str):
                raise ValueError("instances.exclusions entries must be strings")

    def load(self, config_path: str | None = None) -> GsshConfig:
        """Load, validate and convert the configuration.

        Returns
        -------
        GsshConfig
            Validated configuration
        """
        config = self.load_config(config_path)
        self.validate_config(config)

        return GsshConfig(
            ssh_username=config["ssh"]["user_name"].strip(),
            exclusions=normalize_exclusions(config["instances"].get("exclusions") or []),
        )
