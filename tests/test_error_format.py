"""Tests for error message formatting."""

import pytest
from svseeds_collector.errors import PreconditionFailed
from svseeds_collector.utils.error_format import escape_markup
from svseeds_collector.utils.error_format import format_error_message


def test_message_with_type():
    assert format_error_message(ValueError("bad")) == "ValueError: bad"


def test_message_without_type():
    assert format_error_message(PreconditionFailed("no components specified"), include_type=False) == (
        "no components specified"
    )


def test_os_error_uses_strerror_and_filename():
    error = FileNotFoundError(2, "No such file or directory", "/tmp/x/__core.ts")

    assert format_error_message(error, include_type=False) == "No such file or directory: /tmp/x/__core.ts"


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (TimeoutError(), "TimeoutError: Request timed out. Check your network connection."),
        (PermissionError(), "PermissionError: Permission denied."),
        (RuntimeError(), "RuntimeError: (no additional details)"),
    ],
)
def test_empty_messages_get_fallback(error, expected):
    assert format_error_message(error) == expected


def test_empty_message_without_type():
    assert format_error_message(PermissionError(), include_type=False) == "Permission denied."


def test_escape_markup():
    assert escape_markup("[bold]x[/bold]") == "\\[bold]x\\[/bold]"
