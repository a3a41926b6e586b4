"""Single-record .json writer.

Replaces the whole file with one pretty-printed record, so the file
always describes the most recent run only.
"""

from __future__ import annotations

from kioku.core.metadata import MetadataRecord
from kioku.writers.base import MetadataWriter


class OverwriteWriter(MetadataWriter):
    @property
    def name(self) -> str:
        return "overwrite"

    def _write(self, record: MetadataRecord) -> None:
        # "w" truncates; a missing parent directory raises FileNotFoundError
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(record.to_pretty_json())
            f.write("\n")
