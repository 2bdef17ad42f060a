"""Shared fixtures for collector tests."""

import io
import shutil
from pathlib import Path

import pytest
from rich.console import Console

from svseeds_collector.console import THEME
from svseeds_collector.prompts import CANCELLED
from svseeds_collector.ui import Reporter

REMOTE_FILES = ("button.svelte", "_icon.svelte", "__core.ts", "__style.ts")


class FakeSource:
    """Package source that copies a prepared directory into the scratch dir."""

    def __init__(self, remote_dir: Path):
        self.remote_dir = remote_dir
        self.scratch_dirs: list[Path] = []

    def fetch(self, scratch_dir: Path) -> Path:
        self.scratch_dirs.append(scratch_dir)
        target = scratch_dir / "package" / "_svseeds"
        shutil.copytree(self.remote_dir, target)
        return target


class FakePrompter:
    """Prompter with canned answers that records what it was asked."""

    def __init__(self, confirm_answer=True, selection=None):
        self.confirm_answer = confirm_answer
        self.selection = selection
        self.confirm_calls: list[str] = []
        self.multiselect_calls: list[tuple[str, list[tuple[str, str]]]] = []

    def confirm(self, message):
        self.confirm_calls.append(message)
        return self.confirm_answer

    def multiselect(self, message, options):
        self.multiselect_calls.append((message, options))
        if self.selection is None:
            return CANCELLED
        return self.selection


def write_files(directory: Path, names, content: str = "remote") -> Path:
    """Create ``names`` in ``directory`` with content '<content> <name>'."""
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        (directory / name).write_text(f"{content} {name}")
    return directory


@pytest.fixture
def remote_dir(tmp_path):
    """Remote component directory with one plain and one internal component."""
    return write_files(tmp_path / "remote", REMOTE_FILES)


@pytest.fixture
def source(remote_dir):
    return FakeSource(remote_dir)


@pytest.fixture
def prompter():
    return FakePrompter()


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def reporter(output):
    """Reporter writing plain text into ``output``."""
    return Reporter(Console(file=output, theme=THEME, width=200, color_system=None))


@pytest.fixture
def project_root(tmp_path):
    """Svelte project root (contains package.json)."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "package.json").write_text("{}")
    return root


@pytest.fixture
def make_prompter():
    """Factory for FakePrompter with custom answers."""
    return FakePrompter


@pytest.fixture
def make_files():
    """Factory that writes files into a directory."""
    return write_files
