"""Tests for run configuration."""

import pytest
from pydantic import ValidationError
from svseeds_collector.config import CollectorConfig
from svseeds_collector.config import Mode
from svseeds_collector.config import build_config
from svseeds_collector.errors import PreconditionFailed


def build(**overrides):
    args = {"components": (), "select_all": False, "update": False, "remove": False, "uninstall": False}
    args.update(overrides)
    return build_config(**args)


@pytest.mark.parametrize(
    ("flags", "mode"),
    [
        ({}, Mode.COPY),
        ({"update": True}, Mode.UPDATE),
        ({"remove": True}, Mode.REMOVE),
        ({"uninstall": True}, Mode.UNINSTALL),
    ],
)
def test_mode_from_flags(flags, mode):
    assert build(**flags).mode is mode


@pytest.mark.parametrize(
    "flags",
    [
        {"update": True, "remove": True},
        {"remove": True, "uninstall": True},
        {"update": True, "remove": True, "uninstall": True},
    ],
)
def test_conflicting_mode_flags(flags):
    with pytest.raises(PreconditionFailed, match="mutually exclusive"):
        build(**flags)


def test_defaults():
    config = build()

    assert config.directory == "src/lib/_svseeds"
    assert config.is_default_directory
    assert config.confirm is True
    assert config.overwrite is True
    assert config.style is True
    assert config.package == "@scirexs/svseeds-ui"


def test_settings_fill_unset_options():
    config = build(settings={"dir": "src/lib/ui", "style": False, "registry": "https://npm.example"})

    assert config.directory == "src/lib/ui"
    assert not config.is_default_directory
    assert config.style is False
    assert config.registry_url == "https://npm.example"


def test_cli_options_beat_settings():
    config = build(directory="components", style=True, confirm=False, settings={"dir": "src/lib/ui", "style": False})

    assert config.directory == "components"
    assert config.style is True
    assert config.confirm is False


def test_components_become_tuple():
    assert build(components=["button", "icon"]).components == ("button", "icon")


def test_config_is_frozen():
    config = CollectorConfig()

    with pytest.raises(ValidationError):
        config.style = False
