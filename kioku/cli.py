"""Command-line interface for kioku.

WHY: kioku is meant to be called from shell scripts and experiment
launchers: ``RUN=$(kioku -o runs.jsonl)``. The CLI wires the word list,
generator, revision lookup and metadata writer together behind one
command whose stdout is nothing but the label.

HOW: argparse parses -l/-o/-w and a few extras. Defaults that are not
given on the command line come from kioku.config (and therefore from
.env). The label is printed first; the metadata record, if requested,
is written afterwards.

RULES:
- stdout receives exactly one line: the label
- Logging and error messages go to stderr
- Exit 0 on success, 1 on any kioku error, 2 on usage errors (argparse)
- Exit 141 silently when stdout is a closed pipe (e.g. ``kioku | head -c0``)
- The label is printed even if writing the metadata file later fails
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

import jsonschema

from kioku import __version__, config
from kioku.core.generator import generate_name
from kioku.core.metadata import MetadataRecord
from kioku.core.revision import (
    GitRevisionResolver,
    RevisionResolver,
    StaticRevisionResolver,
    resolve_revision,
)
from kioku.core.wordlist import load_wordlist
from kioku.errors import KiokuError
from kioku.writers import write_metadata

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BROKEN_PIPE = 141


def _error(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr, flush=True)


def _configure_logging(verbose: bool) -> None:
    level = logging.INFO if verbose else getattr(logging, config.log_level(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _default_resolver() -> RevisionResolver:
    override = config.revision_override()
    if override:
        logger.info("Using revision from KIOKU_REVISION")
        return StaticRevisionResolver(override)
    return GitRevisionResolver()


def _emit_label(label: str) -> bool:
    """Print the label. Returns False if stdout is a closed pipe."""
    try:
        print(label, flush=True)
    except BrokenPipeError:
        # Keep the interpreter from raising again while flushing at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return False
    return True


def run(args: argparse.Namespace, resolver: Optional[RevisionResolver] = None) -> int:
    """Generate a label and optionally record metadata.

    Args:
        args: Parsed command-line arguments.
        resolver: Revision source; defaults to git (or KIOKU_REVISION).

    Returns:
        The process exit code.
    """
    length = args.length if args.length is not None else config.default_length()
    words_source = args.words if args.words is not None else config.default_wordlist()
    required = args.require_revision or config.require_revision()

    wordlist = load_wordlist(words_source)
    label = generate_name(wordlist, length)

    if not _emit_label(label):
        return EXIT_BROKEN_PIPE

    if args.output is None:
        return EXIT_OK

    if resolver is None:
        resolver = _default_resolver()
    revision = resolve_revision(resolver, required=required)
    record = MetadataRecord.create(label, revision)
    write_metadata(record, args.output)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - -l/--length: words per label (default: KIOKU_DEFAULT_LENGTH or 3)
    - -o/--output: metadata file; .json overwrites, .jsonl appends
    - -w/--words: custom word list (default: KIOKU_WORDLIST or built-in)
    - --require-revision: fail instead of recording a null revision
    """
    parser = argparse.ArgumentParser(
        prog="kioku",
        description="Generate random human-readable strings for naming "
                    "experiments and log associated metadata.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    parser.add_argument(
        "-l", "--length",
        type=int,
        default=None,
        metavar="LENGTH",
        help="Length of the generated name in words (default: {}).".format(
            config.DEFAULT_LENGTH
        ),
    )

    parser.add_argument(
        "-o", "--output",
        default=None,
        metavar="FILE",
        help="Write metadata to FILE. A .json file is overwritten with one "
             "record; a .jsonl file gets one record appended per run.",
    )

    parser.add_argument(
        "-w", "--words",
        default=None,
        metavar="WORDLIST",
        help="Word list to use, one word per line, or \"default\" for the "
             "built-in list (default: built-in list).",
    )

    parser.add_argument(
        "--require-revision",
        action="store_true",
        default=False,
        help="Fail instead of recording a null revision when no git "
             "revision is available.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Log progress to stderr.",
    )

    return parser


def main(
    argv: Optional[List[str]] = None,
    resolver: Optional[RevisionResolver] = None,
) -> int:
    """Entry point for the ``kioku`` console script.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv and resolver are for testing
    - Returns the exit code; the console-script wrapper passes it to sys.exit
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        return run(args, resolver=resolver)
    except KiokuError as e:
        _error(str(e))
        return EXIT_FAILURE
    except ValueError as e:
        # Config errors (bad KIOKU_DEFAULT_LENGTH, etc.)
        _error(str(e))
        return EXIT_FAILURE
    except jsonschema.ValidationError as e:
        _error("metadata record failed validation: {}".format(e.message))
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
