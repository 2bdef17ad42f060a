"""Project and destination path resolution."""

import logging
import os
from pathlib import Path

from .errors import PreconditionFailed

logger = logging.getLogger(__name__)

# Markers that make a directory the npm project root
PROJECT_MARKERS = ("package.json", "node_modules")


def get_project_root(start: Path | None = None) -> Path:
    """Find the project root the way ``npm root`` does.

    Walks up from ``start`` to the nearest directory holding ``package.json``
    or ``node_modules``; falls back to ``start`` itself.

    Args:
        start: Directory to start from (default: current directory)

    Returns:
        Absolute project root

    Raises:
        PreconditionFailed: The resolved root is the filesystem root
    """
    start = (start or Path.cwd()).resolve()

    root = start
    for candidate in (start, *start.parents):
        if any((candidate / marker).exists() for marker in PROJECT_MARKERS):
            root = candidate
            break

    if root == Path(root.anchor):
        raise PreconditionFailed("current directory seems to be root")

    logger.debug(f"Project root: {root}")
    return root


def resolve_destination(project_root: Path, directory: str) -> Path:
    """Join the configured directory onto the project root and normalize it.

    The directory is always taken as project-relative; an absolute path
    has its anchor dropped. Symlinks are not followed.
    """
    relative = Path(directory)
    if relative.anchor:
        relative = relative.relative_to(relative.anchor)
    return Path(os.path.normpath(project_root / relative))


def import_path(directory: str, file: str) -> str:
    """Build the ``$lib`` import specifier for a file in the destination directory.

    ``src/lib/_svseeds`` + ``button.svelte`` -> ``$lib/_svseeds/button.svelte``.
    Directories outside ``src/lib`` are used as given, relative to the project.
    """
    path = Path(directory)
    if path.anchor:
        path = path.relative_to(path.anchor)
    if path.parts[:2] == ("src", "lib"):
        return "/".join(("$lib", *path.parts[2:], file))
    return (path / file).as_posix()
