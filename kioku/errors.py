"""Error types raised by kioku.

WHY: Every failure in a kioku run is terminal: a bad word list, an
unusable count, a missing revision (when required) or an unwritable
metadata file. Giving each a distinct type lets the CLI report a clear
message and lets tests assert on exactly what went wrong.

HOW: A single KiokuError base class with one subclass per failure kind.
Subclasses carry the context needed to build a human-readable message
(paths, line numbers, offending values) as attributes.

RULES:
- The CLI catches KiokuError, prints "Error: <message>" to stderr, exits 1
- Low-level OSErrors are wrapped with ``raise ... from exc``
- No error is retried or recovered from automatically
"""

from __future__ import annotations

from pathlib import Path


class KiokuError(Exception):
    """Base class for all kioku failures."""


class SourceUnavailableError(KiokuError):
    """The word list file is missing or cannot be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__("Failed to read wordlist file {}: {}".format(path, reason))


class InvalidWordListError(KiokuError):
    """The word list is empty or contains a malformed line.

    ``line_number`` is 1-based and is None when the problem concerns the
    list as a whole (for example, no words at all).
    """

    def __init__(
        self,
        source: str,
        reason: str,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        self.source = source
        self.reason = reason
        self.line_number = line_number
        self.line = line
        if line_number is None:
            message = "Invalid wordlist {}: {}".format(source, reason)
        else:
            message = "Invalid wordlist {} (line {}: {!r}): {}".format(
                source, line_number, line, reason
            )
        super().__init__(message)


class InvalidCountError(KiokuError, ValueError):
    """The requested number of words is not a positive integer."""

    def __init__(self, count: object) -> None:
        self.count = count
        super().__init__(
            "Name length must be a positive integer, got {!r}".format(count)
        )


class RevisionUnavailableError(KiokuError):
    """No source-control revision could be determined."""


class WriteError(KiokuError):
    """The metadata file could not be written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__("Failed to write metadata file {}: {}".format(path, reason))
