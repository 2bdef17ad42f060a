"""Availability index built from the extracted remote package."""

import logging
from collections.abc import Collection
from pathlib import Path

from ..layout import COMPONENT_EXT
from ..layout import INTERNAL_PREFIX

logger = logging.getLogger(__name__)


def index_available(remote_dir: Path) -> dict[str, str]:
    """
    Map every component name in the remote directory to its file name.

    Internal files (``_icon.svelte``) are registered twice, under the
    prefixed name and under the bare alias, so both ``_icon`` and ``icon``
    resolve to the same file.

    Args:
        remote_dir: Directory holding the package's component files

    Returns:
        Dict of component name -> file name

    Example:
        >>> index_available(Path("package/_svseeds"))
        {'button': 'button.svelte', 'icon': '_icon.svelte', '_icon': '_icon.svelte'}
    """
    avails: dict[str, str] = {}
    for entry in sorted(remote_dir.iterdir()):
        file = entry.name
        if not file.endswith(COMPONENT_EXT):
            continue
        name = file[: -len(COMPONENT_EXT)]
        if name.startswith(INTERNAL_PREFIX):
            avails[name[len(INTERNAL_PREFIX) :]] = file
        avails[name] = file

    logger.debug(f"Indexed {len(set(avails.values()))} component files in {remote_dir}")
    return avails


def component_name(file: str) -> str:
    """Return the importable name of a component file (``_icon.svelte`` -> ``icon``)."""
    name = file.removesuffix(COMPONENT_EXT)
    return name.removeprefix(INTERNAL_PREFIX)


def filter_to_local(avails: dict[str, str], local_files: Collection[str]) -> dict[str, str]:
    """
    Restrict the availability map to files that already exist locally.

    An empty local set means filtering does not apply (copy mode) and the
    map is returned unchanged. Aliases share their file name, so an internal
    component's two entries are always kept or dropped together.

    Args:
        avails: Component name -> file name map
        local_files: File names present in the destination

    Returns:
        A new, filtered map
    """
    if not local_files:
        return dict(avails)
    return {name: file for name, file in avails.items() if file in local_files}
