"""Append-only .jsonl log writer.

WHY: Parallel experiment runs often share one log file. Each run must
add exactly one intact line, and earlier lines must never be touched.

HOW: The file is opened with O_APPEND (created if absent) and the whole
record plus its newline goes out in a single os.write() call. With
O_APPEND the kernel positions every write at the current end of file,
so concurrent writers do not overwrite each other's lines.

RULES:
- One record per line, compact JSON, newline-terminated
- Exactly one write() per record; short writes are reported as errors
- Existing content is preserved byte for byte
- No locking: the order of lines from concurrent processes is undefined
"""

from __future__ import annotations

import os

from kioku.core.metadata import MetadataRecord
from kioku.writers.base import MetadataWriter

_APPEND_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_APPEND


class AppendWriter(MetadataWriter):
    @property
    def name(self) -> str:
        return "append"

    def _write(self, record: MetadataRecord) -> None:
        data = (record.to_json_line() + "\n").encode("utf-8")
        fd = os.open(self.path, _APPEND_FLAGS, 0o666)
        try:
            written = os.write(fd, data)
        finally:
            os.close(fd)
        if written != len(data):
            raise OSError(
                "short write ({} of {} bytes); the log may contain a partial line".format(
                    written, len(data)
                )
            )
