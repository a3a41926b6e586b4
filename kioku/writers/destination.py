"""Resolve where and how a metadata record is written.

WHY: The output file's extension decides whether kioku overwrites a
single record or appends to a log. Deciding that once, up front, keeps
suffix checks out of the write path.

HOW: resolve_destination() maps a path to a Destination with one of
three kinds. Unsupported extensions keep the long-standing kioku
behaviour: ".json" is appended to the name and the record is written
in overwrite mode.

RULES:
- "*.json"  → OVERWRITE, path unchanged
- "*.jsonl" → APPEND, path unchanged
- anything else → UNSUPPORTED, path + ".json", written like OVERWRITE
- Matching is on the literal suffix and is case-sensitive
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from kioku.config import JSON_EXTENSION, JSONL_EXTENSION

logger = logging.getLogger(__name__)


class DestinationKind(Enum):
    OVERWRITE = "overwrite"
    APPEND = "append"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class Destination:
    """A resolved metadata target.

    Attributes:
        kind: How the record is written.
        path: The file actually written (may differ from the requested
              path for UNSUPPORTED destinations).
        requested: The path as given by the user.
    """

    kind: DestinationKind
    path: Path
    requested: Path


def resolve_destination(path: str | Path) -> Destination:
    requested = Path(path)
    name = str(path)

    if name.endswith(JSONL_EXTENSION):
        return Destination(DestinationKind.APPEND, requested, requested)
    if name.endswith(JSON_EXTENSION):
        return Destination(DestinationKind.OVERWRITE, requested, requested)

    fallback = Path(name + JSON_EXTENSION)
    logger.warning(
        "Output %s has neither a %s nor a %s extension; writing %s instead",
        name,
        JSON_EXTENSION,
        JSONL_EXTENSION,
        fallback,
    )
    return Destination(DestinationKind.UNSUPPORTED, fallback, requested)
