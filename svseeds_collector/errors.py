"""Error types raised by the collector.

Cancellation is not an error: prompts return the
``CANCELLED`` sentinel and the runner reports it as a clean exit.
"""


class CollectorError(Exception):
    """Base class for errors reported to the user as a single line."""


class PreconditionFailed(CollectorError):
    """A condition required before touching the destination was not met."""


class PackageNotFoundError(PreconditionFailed):
    """The remote package (or its component directory) could not be found."""


class FetchError(CollectorError):
    """Downloading or unpacking the remote package failed."""
