"""Resolve which component files an operation acts on."""

import logging
from collections.abc import Sequence

from ..layout import INTERNAL_PREFIX
from ..prompts import Cancelled
from ..prompts import Prompter
from ..ui.reporter import Reporter

logger = logging.getLogger(__name__)


def select_files(
    requested: Sequence[str],
    select_all: bool,
    interactive: bool,
    avails: dict[str, str],
    prompter: Prompter,
    reporter: Reporter,
) -> list[str] | Cancelled:
    """
    Turn the user's request into an ordered, duplicate-free list of files.

    Precedence:
    1. ``select_all`` - every file in the map
    2. explicit names - unknown names are warned about once and skipped
    3. no interaction allowed - nothing
    4. interactive multi-select over the non-internal names

    Args:
        requested: Component names given on the command line
        select_all: Select every available file
        interactive: Whether prompting is allowed
        avails: Component name -> file name map (already filtered)
        prompter: Source of interactive answers
        reporter: Where unknown-name warnings go

    Returns:
        File names in first-occurrence order, or CANCELLED
    """
    if select_all:
        return list(dict.fromkeys(avails.values()))

    if requested:
        return _resolve_requested(requested, avails, reporter)

    if not interactive:
        return []

    options = [(file, name) for name, file in avails.items() if not name.startswith(INTERNAL_PREFIX)]
    return prompter.multiselect("Select components.", options)


def _resolve_requested(names: Sequence[str], avails: dict[str, str], reporter: Reporter) -> list[str]:
    """Map known names to files; warn once about the unknown ones."""
    unknown = [name for name in names if name not in avails]
    if unknown:
        logger.warning(f"Unknown components requested: {unknown}")
        reporter.warn(f"components does not exist: {', '.join(unknown)}")

    # Distinct names may share a file (icon / _icon)
    return list(dict.fromkeys(avails[name] for name in names if name in avails))
