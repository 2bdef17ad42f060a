"""Safe error message formatting utilities.

Ensures exceptions always have useful display messages, even when
their str() representation is empty (e.g., TimeoutError, PermissionError
raised without arguments).
"""

from __future__ import annotations

from rich.markup import escape as _escape_markup

# Friendly messages for exception types that often arrive without text
FRIENDLY_MESSAGES: dict[type, str] = {
    TimeoutError: "Request timed out. Check your network connection.",
    PermissionError: "Permission denied.",
    FileNotFoundError: "No such file or directory.",
    IsADirectoryError: "Expected a file but found a directory.",
    KeyboardInterrupt: "Operation interrupted by user.",
}


def format_error_message(e: BaseException, *, include_type: bool = True) -> str:
    """Format an exception into a useful display message.

    OSError subclasses carrying ``strerror``/``filename`` are rendered as
    ``<strerror>: <filename>`` rather than the errno-prefixed default.

    Args:
        e: The exception to format
        include_type: Whether to include the exception type name

    Returns:
        A non-empty, user-friendly error message

    Examples:
        >>> format_error_message(ValueError("invalid input"))
        'ValueError: invalid input'

        >>> format_error_message(ValueError("invalid input"), include_type=False)
        'invalid input'

        >>> format_error_message(FileNotFoundError(2, "No such file or directory", "a.svelte"), include_type=False)
        'No such file or directory: a.svelte'
    """
    error_type = type(e).__name__

    if isinstance(e, OSError) and e.strerror:
        error_str = f"{e.strerror}: {e.filename}" if e.filename else e.strerror
    else:
        error_str = str(e)

    # If we have a message, use it
    if error_str:
        if include_type and error_type not in error_str:
            return f"{error_type}: {error_str}"
        return error_str

    # No message - check for friendly fallback
    for exc_type, friendly_msg in FRIENDLY_MESSAGES.items():
        if isinstance(e, exc_type):
            return f"{error_type}: {friendly_msg}" if include_type else friendly_msg

    # Last resort: just the type name with indicator
    return f"{error_type}: (no additional details)"


def escape_markup(value: object) -> str:
    """Escape a value for safe interpolation into Rich markup strings.

    Args:
        value: Any value to escape (will be converted to str)

    Returns:
        String safe for interpolation into Rich markup f-strings
    """
    return _escape_markup(str(value))
