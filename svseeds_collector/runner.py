"""One collector run: fetch, index, select, then apply the mode.

The run returns a RunOutcome instead of raising, so the CLI only has to
map it to an exit code. The scratch directory is removed on every path.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .components import component_name
from .components import copy_files
from .components import filter_to_local
from .components import find_local
from .components import index_available
from .components import remove_files
from .components import select_files
from .components import uninstall_files
from .components import update_files
from .config import CollectorConfig
from .config import Mode
from .errors import CollectorError
from .errors import PreconditionFailed
from .layout import SCRATCH_PREFIX
from .paths import import_path
from .paths import resolve_destination
from .prompts import CANCELLED
from .prompts import Prompter
from .source import PackageSource
from .ui import Reporter
from .ui import StepMessages
from .utils.error_format import format_error_message

logger = logging.getLogger(__name__)

PREPARE = StepMessages("Preparing", "Ready.", "Process failed")
COPY = StepMessages("Start to copy files", "Copy done.", "Copy failed.")
UPDATE = StepMessages("Start to update", "Update done.", "Update failed.")
REMOVE = StepMessages("Start to remove", "Remove done.", "Remove failed.")
UNINSTALL = StepMessages("Start to uninstall", "Uninstall done.", "Uninstall failed.")


@dataclass(frozen=True)
class RunOutcome:
    """How a run ended: ok, cancelled by the user, or failed with a message."""

    status: Literal["ok", "cancelled", "failed"]
    message: str = ""

    @classmethod
    def ok(cls) -> RunOutcome:
        return cls("ok")

    @classmethod
    def cancelled(cls) -> RunOutcome:
        return cls("cancelled")

    @classmethod
    def failed(cls, message: str) -> RunOutcome:
        return cls("failed", message)

    @property
    def exit_code(self) -> int:
        return 1 if self.status == "failed" else 0


def run_collector(
    config: CollectorConfig,
    project_root: Path,
    source: PackageSource,
    prompter: Prompter,
    reporter: Reporter,
) -> RunOutcome:
    """
    Execute one collector run.

    Args:
        config: Frozen run configuration
        project_root: Root of the Svelte project
        source: Where the component files come from
        prompter: Interactive prompts (only used when config.confirm is set)
        reporter: Output sink

    Returns:
        RunOutcome
    """
    scratch: Path | None = None
    try:
        dest = resolve_destination(project_root, config.directory)
        if config.confirm and not config.is_default_directory:
            answer = prompter.confirm(f"Target directory: {dest}")
            if answer is CANCELLED or not answer:
                return _cancel(reporter)

        if config.mode is not Mode.COPY and not dest.is_dir():
            raise PreconditionFailed("target directory does not exist")

        scratch = _make_scratch_dir()
        with reporter.step(PREPARE):
            src = source.fetch(scratch)

        avails = index_available(src)
        local_files = frozenset() if config.mode is Mode.COPY else find_local(dest, avails)
        avails = filter_to_local(avails, local_files)

        files: list[str] = []
        if config.mode is not Mode.UNINSTALL:
            selected = select_files(config.components, config.select_all, config.confirm, avails, prompter, reporter)
            if selected is CANCELLED:
                return _cancel(reporter)
            files = selected
            if not files:
                raise PreconditionFailed("no components specified")

        _execute(config, src, dest, files, local_files, reporter)
        return RunOutcome.ok()

    except (CollectorError, OSError) as e:
        message = format_error_message(e, include_type=False)
        logger.error(f"Run failed: {message}", exc_info=not isinstance(e, CollectorError))
        reporter.error(message)
        return RunOutcome.failed(message)

    finally:
        if scratch is not None:
            shutil.rmtree(scratch, ignore_errors=True)
            logger.debug(f"Removed scratch directory {scratch}")


def _execute(
    config: CollectorConfig,
    src: Path,
    dest: Path,
    files: list[str],
    local_files: frozenset[str],
    reporter: Reporter,
) -> None:
    """Apply the configured mode to the destination and report the result."""
    logger.info(f"Running {config.mode.value} on {dest} with {len(files)} selected files")

    if config.mode is Mode.UPDATE:
        with reporter.step(UPDATE):
            update_files(src, dest, files, local_files)
        reporter.success("Components successfully updated.")

    elif config.mode is Mode.REMOVE:
        with reporter.step(REMOVE):
            remove_files(dest, files, local_files)
        reporter.success("Components successfully removed.")

    elif config.mode is Mode.UNINSTALL:
        with reporter.step(UNINSTALL):
            uninstall_files(dest, local_files)
        reporter.success("SvSeeds successfully uninstalled.")

    else:
        with reporter.step(COPY):
            report = copy_files(src, dest, files, config.overwrite, config.style)
        if report.skipped:
            reporter.info(f"Skipped {len(report.skipped)} files.")
        reporter.success("Components successfully copied.")
        first = files[0]
        reporter.note(
            f"import {component_name(first)} from '{import_path(config.directory, first)}';",
            "Usage Example",
        )
        reporter.outro("Import svelte file as usual.")


def _make_scratch_dir() -> Path:
    try:
        return Path(tempfile.mkdtemp(prefix=SCRATCH_PREFIX))
    except OSError as e:
        raise PreconditionFailed("failed to create temporary directory") from e


def _cancel(reporter: Reporter) -> RunOutcome:
    reporter.cancelled()
    return RunOutcome.cancelled()
