"""Word list loading and validation.

WHY: Labels are only as good as the vocabulary they are drawn from. The
built-in list is curated so that every word is lowercase ASCII and is
uniquely identified by its first three letters (typing "gen<TAB>" in a
shell is enough to complete "gene-..."). Custom lists supplied with -w
are checked strictly so that a stray digit or punctuation mark never ends
up inside a label.

HOW: load_wordlist() dispatches to the built-in list or to a file.
read_wordlist_file() does the I/O and maps OS errors to kioku errors.
parse_wordlist_lines() applies the validation rule line by line and
fails fast on the first bad line.

RULES:
- One word per line; trailing ASCII whitespace (space, tab, CR, LF, FF,
  VT) is stripped, leading is NOT
- Non-ASCII whitespace such as U+00A0 is not stripped and is rejected
- Blank lines (after stripping) are skipped
- Custom words may only contain ASCII letters a-z and A-Z
- The first offending line aborts the whole load (no line skipping)
- A list with zero words is invalid
- Built-in words are lowercased; prefix uniqueness is a curation
  invariant checked by the test suite, not at runtime
"""

from __future__ import annotations

import logging
import re
from collections import defaultdict
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable

from kioku.config import DEFAULT_WORDLIST_PATH, DEFAULT_WORDLIST_SOURCE, PREFIX_LENGTH
from kioku.errors import InvalidWordListError, SourceUnavailableError

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"[A-Za-z]+")
_TRAILING_WHITESPACE = " \t\r\n\f\v"


@dataclass(frozen=True)
class WordList:
    """An immutable, non-empty vocabulary.

    Attributes:
        words: The words in file order. Duplicates are kept; a word listed
               twice is simply twice as likely to be drawn.
        source: "default" for the built-in list, otherwise the file path.
    """

    words: tuple[str, ...]
    source: str

    def __post_init__(self) -> None:
        if not self.words:
            raise InvalidWordListError(self.source, "wordlist contains no words")

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    def __getitem__(self, index: int) -> str:
        return self.words[index]

    @property
    def is_default(self) -> bool:
        return self.source == DEFAULT_WORDLIST_SOURCE


def _describe_violation(word: str) -> str:
    """Explain why a stripped line is not a valid word."""
    if word[0].isspace():
        return "leading whitespace is not allowed"
    for char in word:
        if char.isascii() and char.isalpha():
            continue
        if char.isdigit():
            return "digit {!r} is not allowed".format(char)
        if not char.isascii():
            return "non-ASCII character {!r} is not allowed".format(char)
        if char.isspace():
            return "words may not contain whitespace"
        return "character {!r} is not allowed".format(char)
    return "only uppercase and lowercase ASCII letters may be used"


def parse_wordlist_lines(lines: Iterable[str], source: str) -> WordList:
    """Validate raw lines and build a WordList.

    Args:
        lines: Lines of the word list, with or without line endings.
        source: Human-readable origin used in error messages.

    Returns:
        A WordList with the accepted words in input order.

    Raises:
        InvalidWordListError: On the first line containing anything other
            than ASCII letters, or if no words remain.
    """
    words: list[str] = []
    for line_number, line in enumerate(lines, start=1):
        word = line.rstrip(_TRAILING_WHITESPACE)
        if not word:
            continue
        if not _WORD_RE.fullmatch(word):
            raise InvalidWordListError(
                source,
                _describe_violation(word),
                line_number=line_number,
                line=word,
            )
        words.append(word)

    # WordList rejects an empty tuple
    return WordList(words=tuple(words), source=source)


def read_wordlist_file(path: str | Path) -> list[str]:
    """Read a word list file as UTF-8 text and split it into lines.

    Raises:
        SourceUnavailableError: The file is missing, is a directory, or
            cannot be opened.
        InvalidWordListError: The file is not valid UTF-8.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidWordListError(
            str(path), "file is not valid UTF-8 text ({})".format(exc.reason)
        ) from exc
    except OSError as exc:
        raise SourceUnavailableError(path, exc.strerror or str(exc)) from exc
    return text.split("\n")


@lru_cache(maxsize=None)
def load_default_wordlist() -> WordList:
    """Load the built-in word list shipped in kioku/assets, once per process."""
    text = DEFAULT_WORDLIST_PATH.read_text(encoding="utf-8")
    words = tuple(word.lower() for word in text.split())
    logger.debug("Loaded %d built-in words", len(words))
    return WordList(words=words, source=DEFAULT_WORDLIST_SOURCE)


def load_wordlist(source: str | Path | None = None) -> WordList:
    """Load the built-in list or a custom word list file.

    Args:
        source: None or "default" for the built-in list, otherwise a path
                to a text file with one word per line.

    Returns:
        A validated WordList.
    """
    if source is None or source == DEFAULT_WORDLIST_SOURCE:
        return load_default_wordlist()

    lines = read_wordlist_file(source)
    wordlist = parse_wordlist_lines(lines, str(source))
    logger.info("Loaded %d words from %s", len(wordlist), source)
    return wordlist


def find_prefix_collisions(
    words: Iterable[str],
    length: int = PREFIX_LENGTH,
) -> dict[str, list[str]]:
    """Group words that share a (lowercased) prefix.

    Returns only the prefixes used by more than one distinct word, so an
    empty dict means every word is identified by its first ``length``
    letters.
    """
    groups: dict[str, list[str]] = defaultdict(list)
    for word in words:
        lowered = word.lower()
        bucket = groups[lowered[:length]]
        if lowered not in bucket:
            bucket.append(lowered)
    return {prefix: group for prefix, group in groups.items() if len(group) > 1}
