"""Metadata writer registry.

WHY: The CLI only knows an output path. A central mapping from
DestinationKind to writer class keeps the dispatch in one place.

HOW: WRITERS maps each DestinationKind to a MetadataWriter *class*.
write_metadata() resolves the destination from the path, instantiates
the matching writer and writes the record.

RULES:
- Every DestinationKind has exactly one entry
- UNSUPPORTED destinations use the overwrite writer on the fallback path
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from kioku.core.metadata import MetadataRecord
from kioku.writers.append import AppendWriter
from kioku.writers.destination import Destination, DestinationKind, resolve_destination
from kioku.writers.overwrite import OverwriteWriter

if TYPE_CHECKING:
    from kioku.writers.base import MetadataWriter

WRITERS: dict[DestinationKind, type[MetadataWriter]] = {
    DestinationKind.OVERWRITE: OverwriteWriter,
    DestinationKind.APPEND: AppendWriter,
    DestinationKind.UNSUPPORTED: OverwriteWriter,
}


def writer_for(destination: Destination) -> MetadataWriter:
    return WRITERS[destination.kind](destination)


def write_metadata(record: MetadataRecord, path: str | Path) -> Path:
    """Write ``record`` to ``path`` using the mode implied by its extension.

    Returns:
        The path actually written.
    """
    return writer_for(resolve_destination(path)).write(record)


__all__ = [
    "WRITERS",
    "Destination",
    "DestinationKind",
    "resolve_destination",
    "write_metadata",
    "writer_for",
]
