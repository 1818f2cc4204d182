from __future__ import annotations

from typing import List, Sequence

from .errors import NoBranchesFoundError
from .models import BranchSelection


def parse_remote_branches(listing: str, *, remote: str, prefix: str) -> List[str]:
    """Return branch names under ``<remote>/<prefix>`` in listing order.

    ``listing`` is the raw output of ``git branch -r`` (or ``for-each-ref`` with
    short ref names). Symbolic ``HEAD`` entries are ignored and the leading
    ``<remote>/`` is stripped from every match.
    """

    marker = f"{remote}/{prefix}"
    branches: List[str] = []
    for line in listing.splitlines():
        entry = line.strip()
        if not entry or "HEAD" in entry:
            continue
        if not entry.startswith(marker):
            continue
        name = entry[len(remote) + 1 :]
        if name not in branches:
            branches.append(name)
    return branches


def select_branch(candidates: Sequence[str], *, remote: str = "origin", prefix: str = "claude/") -> BranchSelection:
    if not candidates:
        raise NoBranchesFoundError(remote, prefix)
    if len(candidates) == 1:
        return BranchSelection(branch=candidates[0], candidates=list(candidates), reason="single")
    # The last listed entry counts as the most recent.
    return BranchSelection(branch=candidates[-1], candidates=list(candidates), reason="most_recent")


def format_numbered(branches: Sequence[str]) -> List[str]:
    """Number branches the way ``nl`` does."""

    return [f"{index:>6}\t{branch}" for index, branch in enumerate(branches, start=1)]


__all__ = ["format_numbered", "parse_remote_branches", "select_branch"]
