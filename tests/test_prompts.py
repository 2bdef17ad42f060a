"""Tests for the terminal prompter."""

from unittest.mock import MagicMock
from unittest.mock import patch

import pytest
from svseeds_collector.prompts import CANCELLED
from svseeds_collector.prompts import TerminalPrompter

OPTIONS = [("button.svelte", "button"), ("_icon.svelte", "icon")]


@pytest.fixture
def prompter(reporter):
    return TerminalPrompter(console=reporter.console)


def dialog_returning(*answers):
    """checkboxlist_dialog stand-in whose run() yields the given answers in turn."""
    dialog = MagicMock()
    dialog.return_value.run.side_effect = list(answers)
    return dialog


@pytest.mark.parametrize("answer", [True, False])
def test_confirm_answer(prompter, answer):
    with patch("svseeds_collector.prompts.Confirm.ask", return_value=answer):
        assert prompter.confirm("Target directory: /x") is answer


@pytest.mark.parametrize("error", [KeyboardInterrupt, EOFError])
def test_confirm_interrupted_is_cancel(prompter, error):
    with patch("svseeds_collector.prompts.Confirm.ask", side_effect=error):
        assert prompter.confirm("Target directory: /x") is CANCELLED


def test_multiselect_returns_selection(prompter):
    dialog = dialog_returning(["_icon.svelte"])

    with patch("svseeds_collector.prompts.checkboxlist_dialog", dialog):
        assert prompter.multiselect("Select components.", OPTIONS) == ["_icon.svelte"]

    dialog.assert_called_once_with(title="SvSeeds Collector", text="Select components.", values=OPTIONS)


def test_multiselect_cancel(prompter):
    with patch("svseeds_collector.prompts.checkboxlist_dialog", dialog_returning(None)):
        assert prompter.multiselect("Select components.", OPTIONS) is CANCELLED


def test_multiselect_requires_one_item(prompter, output):
    dialog = dialog_returning([], ["button.svelte"])

    with patch("svseeds_collector.prompts.checkboxlist_dialog", dialog):
        assert prompter.multiselect("Select components.", OPTIONS) == ["button.svelte"]

    assert dialog.call_count == 2
    assert "Select at least one item." in output.getvalue()
