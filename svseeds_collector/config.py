"""Run configuration - built once at startup, immutable afterwards."""

from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from .errors import PreconditionFailed
from .layout import DEFAULT_DIR
from .layout import DEFAULT_REGISTRY
from .layout import PACKAGE_NAME

# Config field -> key in the settings.yaml ``collector`` section
SETTINGS_KEYS = {
    "directory": "dir",
    "confirm": "confirm",
    "overwrite": "overwrite",
    "style": "style",
    "package": "package",
    "registry_url": "registry",
}


class Mode(str, Enum):
    """What the run does to the destination directory."""

    COPY = "copy"
    UPDATE = "update"
    REMOVE = "remove"
    UNINSTALL = "uninstall"

    @classmethod
    def from_flags(cls, update: bool, remove: bool, uninstall: bool) -> "Mode":
        """Pick the mode from CLI flags; no flag means copy.

        Raises:
            PreconditionFailed: More than one mode flag was given
        """
        chosen = [mode for mode, flag in ((cls.UPDATE, update), (cls.REMOVE, remove), (cls.UNINSTALL, uninstall)) if flag]
        if len(chosen) > 1:
            raise PreconditionFailed("options --update, --remove and --uninstall are mutually exclusive")
        return chosen[0] if chosen else cls.COPY


class CollectorConfig(BaseModel):
    """Everything a run needs to know about the user's request."""

    model_config = ConfigDict(frozen=True)

    components: tuple[str, ...] = Field(default=(), description="Component names given on the command line")
    directory: str = Field(default=DEFAULT_DIR, description="Destination, relative to the project root")
    select_all: bool = Field(default=False, description="Act on every available component")
    mode: Mode = Field(default=Mode.COPY, description="Operating mode")
    confirm: bool = Field(default=True, description="Allow interactive prompts")
    overwrite: bool = Field(default=True, description="Replace existing files in copy mode")
    style: bool = Field(default=True, description="Copy the style support file")
    package: str = Field(default=PACKAGE_NAME, description="npm package to collect from")
    registry_url: str = Field(default=DEFAULT_REGISTRY, description="npm registry base URL")

    @property
    def is_default_directory(self) -> bool:
        return self.directory == DEFAULT_DIR


def build_config(
    components: tuple[str, ...],
    select_all: bool,
    update: bool,
    remove: bool,
    uninstall: bool,
    directory: str | None = None,
    confirm: bool | None = None,
    overwrite: bool | None = None,
    style: bool | None = None,
    settings: dict[str, Any] | None = None,
) -> CollectorConfig:
    """
    Merge CLI options over settings over built-in defaults.

    ``None`` means "not given on the command line".

    Args:
        components: Positional component names
        select_all: --all
        update: --update
        remove: --remove
        uninstall: --uninstall
        directory: --dir
        confirm: --confirm/--no-confirm
        overwrite: --overwrite/--no-overwrite
        style: --style/--no-style
        settings: Merged ``collector`` settings section

    Returns:
        Frozen CollectorConfig

    Raises:
        PreconditionFailed: Conflicting mode flags
    """
    settings = settings or {}
    values: dict[str, Any] = {
        "components": tuple(components),
        "select_all": select_all,
        "mode": Mode.from_flags(update, remove, uninstall),
    }

    cli_values = {
        "directory": directory,
        "confirm": confirm,
        "overwrite": overwrite,
        "style": style,
    }
    for field_name, settings_key in SETTINGS_KEYS.items():
        cli_value = cli_values.get(field_name)
        if cli_value is not None:
            values[field_name] = cli_value
        elif settings.get(settings_key) is not None:
            values[field_name] = settings[settings_key]

    return CollectorConfig(**values)
