"""Thin wrapper around the git executable."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from .errors import GitCommandError

logger = logging.getLogger(__name__)


@dataclass
class GitRunner:
    """Run git commands inside ``cwd``, aborting on the first failure."""

    cwd: Path
    executable: str = "git"
    quiet: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.cwd, Path):
            self.cwd = Path(str(self.cwd))
        self.cwd = self.cwd.expanduser()

    def run(self, args: Sequence[str], *, capture_output: bool = False) -> subprocess.CompletedProcess:
        command: List[str] = [self.executable, *args]
        logger.debug("running %s in %s", " ".join(command), self.cwd)
        if not self.cwd.is_dir():
            raise GitCommandError(command, 1, stderr=f"Working directory not found: {self.cwd}")
        try:
            return subprocess.run(
                command,
                cwd=str(self.cwd),
                check=True,
                text=True,
                capture_output=capture_output or self.quiet,
            )
        except FileNotFoundError as exc:
            logger.warning("git executable not found: %s", self.executable)
            raise GitCommandError(command, 127, stderr=str(exc)) from exc
        except subprocess.CalledProcessError as exc:
            logger.warning("%s failed with status %s", " ".join(command), exc.returncode)
            raise GitCommandError(
                command,
                exc.returncode,
                stderr=exc.stderr or "",
                stdout=exc.stdout or "",
            ) from exc

    def fetch(self, remote: str) -> None:
        self.run(["fetch", remote])

    def list_remote_branches(self) -> str:
        return self.run(["branch", "-r"], capture_output=True).stdout

    def list_remote_branches_by_date(self, remote: str, prefix: str) -> str:
        pattern = f"refs/remotes/{remote}/{prefix.rstrip('/')}"
        proc = self.run(
            ["for-each-ref", "--sort=committerdate", "--format=%(refname:short)", pattern],
            capture_output=True,
        )
        return proc.stdout

    def checkout(self, branch: str) -> None:
        self.run(["checkout", branch])

    def pull(self, remote: str, branch: str) -> None:
        self.run(["pull", remote, branch])

    def merge(self, ref: str) -> None:
        self.run(["merge", ref, "--no-edit"])

    def push(self, remote: str, branch: str) -> None:
        self.run(["push", remote, branch])

    def delete_remote_branch(self, remote: str, branch: str) -> None:
        self.run(["push", remote, "--delete", branch])

    def head_commit(self) -> str:
        return self.run(["rev-parse", "HEAD"], capture_output=True).stdout.strip()


__all__ = ["GitRunner"]
