"""Inventory provider and shell launcher implementations."""

from gssh.providers.exceptions import (
    LaunchError,
    ProviderCommandError,
    ProviderError,
    ProviderNotInstalledError,
    ProviderResponseError,
)

__all__ = [
    "LaunchError",
    "ProviderCommandError",
    "ProviderError",
    "ProviderNotInstalledError",
    "ProviderResponseError",
]
