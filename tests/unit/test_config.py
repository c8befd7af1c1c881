"""Unit tests for ConfigLoader."""

import pytest
import yaml

from gssh.core.config import ConfigLoader, GsshConfig, render_default_config


@pytest.fixture
def loader() -> ConfigLoader:
    return ConfigLoader()


def write_config(path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data))


def test_default_config_path_is_in_state_dir(loader, isolated_state_dir) -> None:
    assert loader.get_config_path() == isolated_state_dir / "config.yaml"


def test_config_path_from_env(loader, tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("GSSH_CONFIG", str(tmp_path / "custom.yaml"))

    assert loader.get_config_path() == tmp_path / "custom.yaml"


def test_explicit_config_path_wins_over_env(loader, tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("GSSH_CONFIG", str(tmp_path / "env.yaml"))

    assert loader.get_config_path(str(tmp_path / "explicit.yaml")) == tmp_path / "explicit.yaml"


def test_load_creates_default_file(loader, isolated_state_dir) -> None:
    config = loader.load()

    config_file = isolated_state_dir / "config.yaml"
    assert config_file.read_text() == render_default_config()
    assert config == GsshConfig(ssh_username="conductor", exclusions=("gke-",))


def test_default_file_is_valid_yaml() -> None:
    data = yaml.safe_load(render_default_config())

    assert data == {"ssh": {"user_name": "conductor"}, "instances": {"exclusions": ["gke-"]}}


def test_existing_file_is_not_overwritten(loader, tmp_path) -> None:
    config_file = tmp_path / "config.yaml"
    write_config(config_file, {"ssh": {"user_name": "alice"}, "instances": {"exclusions": []}})

    config = loader.load(str(config_file))

    assert config == GsshConfig(ssh_username="alice", exclusions=())
    assert "alice" in config_file.read_text()


def test_missing_sections_fall_back_to_defaults(loader, tmp_path) -> None:
    config_file = tmp_path / "config.yaml"
    write_config(config_file, {"ssh": {"user_name": "bob"}})

    config = loader.load(str(config_file))

    assert config.ssh_username == "bob"
    assert config.exclusions == ("gke-",)


def test_empty_file_uses_defaults(loader, tmp_path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text("")

    assert loader.load(str(config_file)) == GsshConfig("conductor", ("gke-",))


def test_blank_exclusions_are_dropped(loader, tmp_path) -> None:
    config_file = tmp_path / "config.yaml"
    write_config(config_file, {"instances": {"exclusions": ["", "tmp-", "  "]}})

    assert loader.load(str(config_file)).exclusions == ("tmp-",)


def test_invalid_yaml_raises_value_error(loader, tmp_path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text("ssh: [unclosed\n")

    with pytest.raises(ValueError, match="Invalid YAML"):
        loader.load(str(config_file))


@pytest.mark.parametrize(
    ("data", "message"),
    [
        ({"ssh": "conductor"}, "ssh must be a mapping"),
        ({"instances": None}, "instances must be a mapping"),
        ({"ssh": {"user_name": ""}}, "ssh.user_name"),
        ({"ssh": {"user_name": 42}}, "ssh.user_name"),
        ({"instances": {"exclusions": "gke-"}}, "must be a list"),
        ({"instances": {"exclusions": ["gke-", 3]}}, "entries must be strings"),
    ],
)
def test_invalid_types_raise_value_error(loader, tmp_path, data, message) -> None:
    config_file = tmp_path / "config.yaml"
    write_config(config_file, data)

    with pytest.raises(ValueError, match=message):
        loader.load(str(config_file))


def test_unwritable_config_location_raises_runtime_error(loader, tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    with pytest.raises(RuntimeError, match="Failed to create config file"):
        loader.load(str(blocker / "config.yaml"))
