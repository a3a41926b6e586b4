"""kioku: memorable experiment labels with optional metadata logging.

WHY: Experiment runs need names people can say out loud and find again
("gene-ruin-note"), plus a record of which commit produced them.

HOW: Three stages: load a word list (core.wordlist), draw a label
(core.generator), and optionally persist a {label, revision, timestamp}
record (core.metadata, writers). The CLI wires them together.

RULES:
- stdout carries only the label; everything else goes to stderr
- A .json output holds the latest record; a .jsonl output is an
  append-only log
"""

__version__ = "0.1.0"
