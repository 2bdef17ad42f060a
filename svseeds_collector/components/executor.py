"""Mode executors - the only code that mutates the destination directory.

Every filesystem error propagates. Work already done is not rolled back.
"""

import logging
import shutil
from collections.abc import Collection
from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path

from ..layout import CORE_FILE
from ..layout import STYLE_FILE

logger = logging.getLogger(__name__)


@dataclass
class CopyReport:
    """Result of a copy run."""

    copied: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


@dataclass
class UninstallReport:
    """Result of an uninstall run."""

    removed: list[str] = field(default_factory=list)
    directory_removed: bool = False


def copy_files(src: Path, dest: Path, files: Sequence[str], overwrite: bool, style: bool) -> CopyReport:
    """
    Copy selected component files plus support files into the destination.

    ``__core.ts`` is always copied; ``__style.ts`` only when ``style`` is set.
    The destination is created (with parents) if missing.

    Args:
        src: Extracted component directory
        dest: Destination directory
        files: Selected component file names
        overwrite: Replace files that already exist in ``dest``
        style: Include the style support file

    Returns:
        CopyReport with copied and skipped file names
    """
    targets = [*files, CORE_FILE, STYLE_FILE] if style else [*files, CORE_FILE]
    dest.mkdir(parents=True, exist_ok=True)

    report = CopyReport()
    for file in targets:
        target = dest / file
        if not overwrite and target.exists():
            logger.debug(f"Skipping existing file: {target}")
            report.skipped.append(file)
            continue
        shutil.copy2(src / file, target)
        report.copied.append(file)

    logger.info(f"Copied {len(report.copied)} files to {dest} (skipped {len(report.skipped)})")
    return report


def update_files(src: Path, dest: Path, files: Sequence[str], local_files: Collection[str]) -> list[str]:
    """
    Overwrite the selected files that are already present locally.

    Args:
        src: Extracted component directory
        dest: Destination directory
        files: Selected file names
        local_files: Tracked files present in ``dest``

    Returns:
        File names that were updated
    """
    targets = [file for file in files if file in local_files]
    for file in targets:
        shutil.copy2(src / file, dest / file)

    logger.info(f"Updated {len(targets)} files in {dest}")
    return targets


def remove_files(dest: Path, files: Sequence[str], local_files: Collection[str]) -> list[str]:
    """
    Delete the selected files that are present locally.

    Args:
        dest: Destination directory
        files: Selected file names
        local_files: Tracked files present in ``dest``

    Returns:
        File names that were removed
    """
    targets = [file for file in files if file in local_files]
    for file in targets:
        (dest / file).unlink()

    logger.info(f"Removed {len(targets)} files from {dest}")
    return targets


def uninstall_files(dest: Path, local_files: Collection[str]) -> UninstallReport:
    """
    Delete every tracked file, then the directory itself if nothing else is left.

    Args:
        dest: Destination directory
        local_files: Tracked files present in ``dest``

    Returns:
        UninstallReport
    """
    report = UninstallReport()
    for file in sorted(local_files):
        (dest / file).unlink()
        report.removed.append(file)

    if not any(dest.iterdir()):
        dest.rmdir()
        report.directory_removed = True
    else:
        logger.info(f"Keeping {dest}: it still contains untracked files")

    logger.info(f"Uninstalled {len(report.removed)} files from {dest}")
    return report
