"""Pytest configuration and fixtures for gssh unit tests."""

import os
from collections.abc import Generator
from pathlib import Path

import pytest

from gssh.core.cache import InventoryCache
from gssh.core.history import HistoryLog
from gssh.core.models import Configuration, Instance
from tests.unit.fakes.fake_inventory_provider import FakeInventoryProvider


@pytest.fixture(autouse=True)
def isolated_state_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Point GSSH_HOME at a temporary directory and drop GSSH_CONFIG.

    Yields
    ------
    Path
        Temporary state directory

    Notes
    -----
    Keeps tests from reading or writing the real ``~/.gssh`` directory.
    """
    state_dir = tmp_path / "gssh-home"
    saved = {name: os.environ.get(name) for name in ("GSSH_HOME", "GSSH_CONFIG", "GSSH_DEBUG")}

    os.environ["GSSH_HOME"] = str(state_dir)
    os.environ.pop("GSSH_CONFIG", None)
    os.environ.pop("GSSH_DEBUG", None)

    yield state_dir

    for name, value in saved.items():
        if value is None:
            os.environ.pop(name, None)
        else:
            os.environ[name] = value


@pytest.fixture
def configurations() -> list[Configuration]:
    return [
        Configuration("dev", "dev@example.com", "dev-project", active=False),
        Configuration("prod", "ops@example.com", "prod-project", active=True),
    ]


@pytest.fixture
def prod_instances() -> list[Instance]:
    return [
        Instance("A", "europe-west1-b", "RUNNING"),
        Instance("B", "europe-west1-b", "STOPPED"),
        Instance("gke-x", "europe-west1-c", "RUNNING"),
    ]


@pytest.fixture
def provider(configurations, prod_instances) -> FakeInventoryProvider:
    return FakeInventoryProvider(
        configurations=configurations,
        instances={
            "prod": prod_instances,
            "dev": [Instance("dev-box", "us-central1-a", "RUNNING")],
        },
    )


@pytest.fixture
def cache(provider, isolated_state_dir) -> InventoryCache:
    return InventoryCache(provider, isolated_state_dir, exclusions=("gke-",))


@pytest.fixture
def history(isolated_state_dir) -> HistoryLog:
    return HistoryLog(isolated_state_dir / "history.json")
