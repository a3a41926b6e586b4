"""Shared test fixtures for the kioku test suite.

WHY: Several modules need the same deterministic collaborators: a
revision resolver that never shells out to git, a seeded random source,
and small word list files on disk.

HOW: Stub resolver classes are defined here and exposed as fixtures.
Word list files are written into pytest's tmp_path.

RULES:
- No test may depend on the repository kioku is run from having a git
  history; use the stub resolvers instead
- All file I/O happens under tmp_path
"""

import random

import pytest

from kioku.errors import RevisionUnavailableError

FIXED_REVISION = "0123456789abcdef0123456789abcdef01234567"
FIXED_NS = 1_700_000_000_123_456_789
FIXED_TIMESTAMP = "2023-11-14T22:13:20.123456789+00:00"


class StubRevisionResolver:
    """Returns a fixed revision and counts calls."""

    def __init__(self, revision=FIXED_REVISION):
        self.revision = revision
        self.calls = 0

    def resolve(self):
        self.calls += 1
        return self.revision


class UnavailableRevisionResolver:
    """Behaves like a directory outside any git repository."""

    def __init__(self):
        self.calls = 0

    def resolve(self):
        self.calls += 1
        raise RevisionUnavailableError("No git revision available: not a git repository")


@pytest.fixture
def stub_resolver():
    return StubRevisionResolver()


@pytest.fixture
def unavailable_resolver():
    return UnavailableRevisionResolver()


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every KIOKU_* variable so .env files cannot leak into tests."""
    for name in (
        "KIOKU_DEFAULT_LENGTH",
        "KIOKU_WORDLIST",
        "KIOKU_REQUIRE_REVISION",
        "KIOKU_REVISION",
        "KIOKU_LOG_LEVEL",
        "KIOKU_GIT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_wordlist(tmp_path):
    """Factory: write ``content`` to a word list file and return its path."""

    def _write(content, name="words.txt", encoding="utf-8"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding=encoding)
        return path

    return _write
