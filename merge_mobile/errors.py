from __future__ import annotations

from typing import Sequence


class MergeMobileError(RuntimeError):
    """Base class for merge-mobile failures."""


class NoBranchesFoundError(MergeMobileError):
    """Raised when no remote branch matches the configured prefix."""

    def __init__(self, remote: str, prefix: str) -> None:
        self.remote = remote
        self.prefix = prefix
        super().__init__(f"No Mobile branches found (looking for {remote}/{prefix}*)")


class GitCommandError(MergeMobileError):
    """Raised when a git invocation exits non-zero or cannot be started."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        *,
        stderr: str = "",
        stdout: str = "",
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr or ""
        self.stdout = stdout or ""
        detail = self.stderr.strip() or self.stdout.strip()
        message = f"`{' '.join(self.command)}` exited with status {returncode}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
