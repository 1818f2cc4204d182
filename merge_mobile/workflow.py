"""Fetch, select, merge and push the latest Mobile branch."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .branches import format_numbered, parse_remote_branches, select_branch
from .config import MergeConfig
from .errors import NoBranchesFoundError
from .git import GitRunner
from .models import MergeResult

logger = logging.getLogger(__name__)

Echo = Callable[[str], None]
Prompt = Callable[[], str]


def read_reply() -> str:
    """Read one line from stdin; end of input counts as an empty reply."""

    try:
        return input()
    except EOFError:
        return ""


def discover_branches(config: MergeConfig, runner: GitRunner) -> List[str]:
    if config.order == "committerdate":
        listing = runner.list_remote_branches_by_date(config.remote, config.prefix)
    else:
        listing = runner.list_remote_branches()
    return parse_remote_branches(listing, remote=config.remote, prefix=config.prefix)


def merge_latest_branch(
    config: MergeConfig,
    *,
    runner: Optional[GitRunner] = None,
    prompt: Optional[Prompt] = None,
    echo: Optional[Echo] = None,
    dry_run: bool = False,
) -> MergeResult:
    """Merge the most recent ``<remote>/<prefix>*`` branch into the trunk and push it.

    Every git step runs in order and the first failure propagates as
    :class:`~merge_mobile.errors.GitCommandError`; nothing after it runs.
    Raises :class:`~merge_mobile.errors.NoBranchesFoundError` when no branch
    matches.
    """

    git = runner or GitRunner(config.repo)
    ask = prompt or read_reply
    logs: List[str] = []

    def say(line: str = "") -> None:
        logs.append(line)
        (echo or print)(line)

    say(f"🔄 Fetching from {config.remote}...")
    git.fetch(config.remote)

    candidates = discover_branches(config, git)
    if not candidates:
        say(f"❌ No Mobile branches found (looking for {config.pattern}*)")
        raise NoBranchesFoundError(config.remote, config.prefix)

    say("")
    say("📱 Found Mobile branch(es):")
    for line in format_numbered(candidates):
        say(line)
    say("")

    selection = select_branch(candidates, remote=config.remote, prefix=config.prefix)
    if selection.reason == "single":
        say(f"📱 Using: {selection.branch}")
    else:
        say(f"📱 Multiple branches found, using most recent: {selection.branch}")
    say("")
    logger.debug("selected %s from %d candidate(s)", selection.branch, len(candidates))

    result = MergeResult(
        status="dry_run",
        branch=selection.branch,
        remote=config.remote,
        trunk=config.trunk,
        candidates=selection.candidates,
        reason=selection.reason,
        logs=logs,
    )
    if dry_run:
        return result

    git.checkout(config.trunk)
    git.pull(config.remote, config.trunk)

    say("🔀 Merging Mobile's changes...")
    git.merge(f"{config.remote}/{selection.branch}")
    result.commit = git.head_commit()

    git.push(config.remote, config.trunk)
    result.pushed = True
    result.status = "merged"
    say(f"✅ Merged and pushed to {config.trunk}")
    say("")

    if config.delete == "ask":
        say(f"🧹 Delete remote branch '{selection.branch}'? (y/n)")
        should_delete = ask().strip() == "y"
    else:
        should_delete = config.delete == "yes"

    if should_delete:
        git.delete_remote_branch(config.remote, selection.branch)
        result.deleted = True
        say("✅ Remote branch deleted")
    else:
        say("ℹ️  Branch kept (you can delete later)")

    return result


__all__ = ["discover_branches", "merge_latest_branch", "read_reply"]
