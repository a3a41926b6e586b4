"""Source-control revision lookup.

WHY: A metadata record is most useful when it says which commit the
experiment ran from. The lookup depends on the ambient working directory
and on git being installed, so it is modelled as a small injectable
capability that tests can replace with a fixed value.

HOW: Anything with a ``resolve() -> str`` method is a RevisionResolver.
GitRevisionResolver asks ``git rev-parse HEAD``; StaticRevisionResolver
returns a fixed string. resolve_revision() applies the policy for a
missing revision.

RULES:
- resolve() either returns a non-empty revision or raises
  RevisionUnavailableError (git missing, not a repository, no commits)
- By default a missing revision is recorded as null and a warning is
  logged; with required=True the error propagates and nothing is written
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from kioku import config
from kioku.errors import RevisionUnavailableError

logger = logging.getLogger(__name__)


class RevisionResolver(Protocol):
    def resolve(self) -> str:
        ...


class GitRevisionResolver:
    """Resolve the commit hash of HEAD in a git working tree.

    Args:
        cwd: Directory to run git in. Defaults to the current directory;
             git walks up to find the enclosing repository.
        git: The git executable to call. Defaults to KIOKU_GIT or "git".
    """

    def __init__(self, cwd: str | Path | None = None, git: str | None = None) -> None:
        self.cwd = Path(cwd) if cwd is not None else None
        self.git = git or config.git_executable()

    def resolve(self) -> str:
        try:
            result = subprocess.run(
                [self.git, "rev-parse", "--verify", "HEAD"],
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise RevisionUnavailableError(
                "Could not run {!r}: {}".format(self.git, exc.strerror or exc)
            ) from exc

        revision = result.stdout.strip()
        if result.returncode != 0 or not revision:
            detail = result.stderr.strip().splitlines()
            raise RevisionUnavailableError(
                "No git revision available{}".format(
                    ": {}".format(detail[-1]) if detail else ""
                )
            )
        return revision


class StaticRevisionResolver:
    """Always return the same revision string."""

    def __init__(self, revision: str) -> None:
        if not revision:
            raise ValueError("revision must be a non-empty string")
        self.revision = revision

    def resolve(self) -> str:
        return self.revision


def resolve_revision(resolver: RevisionResolver, required: bool = False) -> str | None:
    """Ask ``resolver`` for a revision and apply the missing-revision policy.

    Returns:
        The revision string, or None when it is unavailable and not required.

    Raises:
        RevisionUnavailableError: If the revision is unavailable and
            ``required`` is true.
    """
    try:
        return resolver.resolve()
    except RevisionUnavailableError as exc:
        if required:
            raise
        logger.warning("%s; recording revision as null", exc)
        return None
