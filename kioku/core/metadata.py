"""Metadata record for one label generation.

WHY: When -o is given, kioku records which label was generated, from
which revision, and when. Experiment logs can later be joined on the
label to recover the commit that produced a result.

HOW: MetadataRecord is a frozen dataclass. create() stamps it with the
current UTC time at nanosecond precision. Two serializations exist: a
pretty-printed object for single-record .json files and a compact single
line for .jsonl logs.

RULES:
- Keys are always emitted in the order label, revision, timestamp
- revision is None (JSON null) when no revision could be determined
- timestamp format: YYYY-MM-DDTHH:MM:SS.fffffffff+00:00 (UTC, 9 digits)
- to_json_line() never contains a newline
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

_NS_PER_SECOND = 1_000_000_000


def format_timestamp(ns: int) -> str:
    """Format a POSIX timestamp in nanoseconds as ISO-8601 UTC.

    >>> format_timestamp(0)
    '1970-01-01T00:00:00.000000000+00:00'
    """
    seconds, fraction = divmod(ns, _NS_PER_SECOND)
    moment = datetime.fromtimestamp(seconds, tz=timezone.utc)
    return "{}.{:09d}+00:00".format(moment.strftime("%Y-%m-%dT%H:%M:%S"), fraction)


@dataclass(frozen=True)
class MetadataRecord:
    """One {label, revision, timestamp} entry."""

    label: str
    revision: str | None
    timestamp: str

    @classmethod
    def create(
        cls,
        label: str,
        revision: str | None,
        now_ns: int | None = None,
    ) -> MetadataRecord:
        """Build a record stamped with ``now_ns`` (default: the current time)."""
        if now_ns is None:
            now_ns = time.time_ns()
        return cls(label=label, revision=revision, timestamp=format_timestamp(now_ns))

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "revision": self.revision,
            "timestamp": self.timestamp,
        }

    def to_pretty_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    def to_json_line(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))
