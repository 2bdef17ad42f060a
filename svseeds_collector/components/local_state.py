"""Inspection of the destination directory."""

import logging
from pathlib import Path

from ..layout import SUPPORT_FILES

logger = logging.getLogger(__name__)


def find_local(dest_dir: Path, avails: dict[str, str]) -> frozenset[str]:
    """
    Find the tracked files already present in the destination directory.

    Tracked files are every file in the availability map plus the two
    support files. Anything else in the directory is ignored.

    Args:
        dest_dir: Destination directory
        avails: Component name -> file name map

    Returns:
        Tracked file names that exist in ``dest_dir``

    Raises:
        FileNotFoundError: ``dest_dir`` does not exist
    """
    tracked = set(avails.values())
    tracked.update(SUPPORT_FILES)

    local = frozenset(entry.name for entry in dest_dir.iterdir() if entry.name in tracked)
    logger.debug(f"Found {len(local)} tracked files in {dest_dir}")
    return local
