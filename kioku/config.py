"""Configuration constants, defaults, and .env loading.

WHY: Centralizes every tunable value so it is easy to find and override.
Teams that run many experiments from the same checkout typically want
the same word list and label length every time; a .env file next to the
project lets them set that once instead of repeating CLI flags.

HOW: python-dotenv loads the .env file on import. Fixed constants are
module-level values. Values that can be overridden from the environment
are read through small functions, so changes to os.environ (tests,
wrappers) are picked up at call time.

RULES:
- CLI flags always win over environment values
- KIOKU_DEFAULT_LENGTH must be an integer (ValueError otherwise)
- KIOKU_WORDLIST unset or empty means the built-in list
- Boolean variables accept "1", "true", "yes", "on" (case-insensitive)
- Never read os.environ for these settings outside this module
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the directory kioku is run from
load_dotenv()

# ---------------------------------------------------------------------------
# Fixed constants
# ---------------------------------------------------------------------------

DEFAULT_LENGTH = 3
"""Number of words in a label when neither -l nor KIOKU_DEFAULT_LENGTH is given."""

SEPARATOR = "-"

PREFIX_LENGTH = 3
"""Every built-in word is uniquely identified by this many leading letters."""

DEFAULT_WORDLIST_SOURCE = "default"

DEFAULT_WORDLIST_PATH = Path(__file__).resolve().parent / "assets" / "wordlist.txt"

JSON_EXTENSION = ".json"
JSONL_EXTENSION = ".jsonl"

_TRUE_VALUES = {"1", "true", "yes", "on"}


# ---------------------------------------------------------------------------
# Environment overrides
# ---------------------------------------------------------------------------


def default_length() -> int:
    """Return the default label length.

    RULES:
    - Reads KIOKU_DEFAULT_LENGTH, falling back to DEFAULT_LENGTH
    - Raises ValueError if the value is not an integer
    - Positivity is checked by the generator, not here
    """
    raw = os.getenv("KIOKU_DEFAULT_LENGTH", "").strip()
    if not raw:
        return DEFAULT_LENGTH
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            "KIOKU_DEFAULT_LENGTH must be an integer, got {!r}".format(raw)
        ) from None


def default_wordlist() -> str | None:
    """Return the word list path configured in KIOKU_WORDLIST, or None."""
    raw = os.getenv("KIOKU_WORDLIST", "").strip()
    return raw or None


def require_revision() -> bool:
    """Whether a missing revision should abort the metadata write."""
    return os.getenv("KIOKU_REQUIRE_REVISION", "").strip().lower() in _TRUE_VALUES


def revision_override() -> str | None:
    """A fixed revision string to record instead of asking git.

    Useful in CI where the checkout is a tarball without .git.
    """
    raw = os.getenv("KIOKU_REVISION", "").strip()
    return raw or None


def log_level() -> str:
    return os.getenv("KIOKU_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"


def git_executable() -> str:
    """The git executable used for revision lookup (KIOKU_GIT, default "git")."""
    return os.getenv("KIOKU_GIT", "").strip() or "git"
