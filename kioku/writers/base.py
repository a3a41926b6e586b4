"""Abstract base metadata writer.

WHY: Overwrite and append destinations differ only in how bytes reach
the disk. Both must emit the same validated record, so validation and
error wrapping live here and subclasses only implement the write itself.

HOW: MetadataWriter is an ABC bound to one Destination. write() validates
the record against metadata.schema.json with jsonschema, then calls the
subclass's ``_write()`` and converts any OSError into WriteError.

RULES:
- Subclasses MUST implement ``name`` and ``_write()``
- Schema validation happens before the file is touched
- Parent directories are never created
- Every OSError surfaces as WriteError naming the target path

To add a new destination kind:
1. Add a member to DestinationKind in destination.py
2. Subclass MetadataWriter in a new module
3. Register it in WRITERS in writers/__init__.py
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema

from kioku.core.metadata import MetadataRecord
from kioku.errors import WriteError
from kioku.writers.destination import Destination

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).resolve().parent / "metadata.schema.json"


@lru_cache(maxsize=None)
def _get_schema() -> dict[str, Any]:
    """Load the metadata record JSON schema from disk, once per process."""
    with open(_SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


def validate_record(record: MetadataRecord) -> None:
    """Check a record against the metadata schema.

    Raises:
        jsonschema.ValidationError: If the record does not conform.
    """
    jsonschema.validate(instance=record.to_dict(), schema=_get_schema())


class MetadataWriter(ABC):
    """Write metadata records to one destination."""

    def __init__(self, destination: Destination) -> None:
        self.destination = destination

    @property
    def path(self) -> Path:
        return self.destination.path

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable mode name, e.g. 'append'."""

    @abstractmethod
    def _write(self, record: MetadataRecord) -> None:
        """Persist ``record``; may raise OSError."""

    def write(self, record: MetadataRecord) -> Path:
        """Validate and persist one record.

        Returns:
            The path that was written.

        Raises:
            jsonschema.ValidationError: If the record is malformed.
            WriteError: If the file cannot be opened or written.
        """
        validate_record(record)
        try:
            self._write(record)
        except OSError as exc:
            raise WriteError(self.path, exc.strerror or str(exc)) from exc
        logger.info("Wrote metadata (%s) to %s", self.name, self.path)
        return self.path
