"""Core word list, generation and metadata modules.

WHY: These modules carry the invariants of kioku: vocabulary rules,
label shape, and the metadata record format. They have no knowledge of
the CLI and can be used as a library.

HOW: wordlist.py loads and validates vocabularies, generator.py draws
labels, revision.py looks up the current commit, metadata.py builds and
serializes records.

RULES:
- No module here writes to stdout or stderr directly; use logging
- File output lives in kioku.writers, not here
"""
