"""Settings manager for collector settings.yaml files.

Manages a two-scope settings system:
- User global (~/.svseeds/settings.yaml)
- Project (<project>/.svseeds/settings.yaml)

Settings live under a ``collector`` section:

    collector:
      dir: src/lib/_svseeds
      confirm: true
      overwrite: true
      style: true
      package: "@scirexs/svseeds-ui"
      registry: https://registry.npmjs.org
"""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

SETTINGS_DIR = ".svseeds"
SETTINGS_FILE = "settings.yaml"
SECTION = "collector"
KNOWN_KEYS = ("dir", "confirm", "overwrite", "style", "package", "registry")


class SettingsManager:
    """Reads collector defaults from user and project settings."""

    def __init__(self, project_root: Path, user_dir: Path | None = None):
        """Initialize settings manager with standard paths.

        Args:
            project_root: Root of the Svelte project
            user_dir: Base directory for user settings (for testing).
                      If None, uses ~/.svseeds.
        """
        if user_dir is None:
            user_dir = Path.home() / SETTINGS_DIR

        self.user_settings_file = user_dir / SETTINGS_FILE
        self.project_settings_file = project_root / SETTINGS_DIR / SETTINGS_FILE

    def get_collector_settings(self) -> dict[str, Any]:
        """Get collector settings merged from all scopes.

        Merge order (later overrides earlier):
        1. User settings
        2. Project settings

        Unknown keys are ignored with a warning.

        Returns:
            Dict of setting name -> value
        """
        merged: dict[str, Any] = {}
        for path in (self.user_settings_file, self.project_settings_file):
            section = self._read_settings(path).get(SECTION) or {}
            if not isinstance(section, dict):
                logger.warning(f"Ignoring malformed '{SECTION}' section in {path}")
                continue
            for key, value in section.items():
                if key not in KNOWN_KEYS:
                    logger.warning(f"Unknown setting '{SECTION}.{key}' in {path}")
                    continue
                merged[key] = value
        return merged

    def _read_settings(self, path: Path) -> dict[str, Any]:
        """Read settings from a YAML file.

        Returns:
            Settings dict (empty if the file is missing or invalid)
        """
        if not path.exists():
            return {}

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to read settings from {path}: {e}")
            return {}

        if not isinstance(data, dict):
            return {}
        return data
