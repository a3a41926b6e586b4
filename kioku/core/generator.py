"""Random label generation.

WHY: A label like "gene-ruin-note" is easier to say, remember and type
than a hash or a timestamp. Collisions only need to be unlikely within a
team's experiment history, not cryptographically impossible.

HOW: Draw ``count`` words independently and uniformly at random from the
word list (with replacement) and join them with the separator.

RULES:
- count must be an int >= 1, otherwise InvalidCountError
- Draws are with replacement; the same word may appear more than once
- Word order in the label is draw order
- The default RNG is seeded from OS entropy once per process; there is
  no reproducibility across runs
"""

from __future__ import annotations

import random

from kioku.config import SEPARATOR
from kioku.core.wordlist import WordList
from kioku.errors import InvalidCountError

_RNG = random.Random()


def generate_name(
    wordlist: WordList,
    count: int,
    rng: random.Random | None = None,
    separator: str = SEPARATOR,
) -> str:
    """Generate a label of ``count`` words.

    Args:
        wordlist: Vocabulary to draw from.
        count: Number of words in the label.
        rng: Optional random source, for tests. Defaults to a process-wide
             generator seeded from OS entropy.
        separator: String placed between words.

    Returns:
        The joined label, e.g. "gene-ruin-note".

    Raises:
        InvalidCountError: If count is not a positive integer.
    """
    # bool is an int subclass; "-l True" is never meant as one word
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidCountError(count)

    rng = rng or _RNG
    words = wordlist.words
    return separator.join(rng.choice(words) for _ in range(count))
