from __future__ import annotations

import os
import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")


def git(cwd: Path, *args: str, date: Optional[str] = None) -> str:
    env = None
    if date:
        env = {**os.environ, "GIT_AUTHOR_DATE": date, "GIT_COMMITTER_DATE": date}
    proc = subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        check=True,
        text=True,
        capture_output=True,
        env=env,
    )
    return proc.stdout.strip()


def commit_file(repo: Path, name: str, content: str, message: str, *, date: Optional[str] = None) -> str:
    (repo / name).write_text(content, encoding="utf-8")
    git(repo, "add", name)
    git(repo, "commit", "-m", message, date=date)
    return git(repo, "rev-parse", "HEAD")


@dataclass
class Fork:
    """A bare remote plus the Desktop and Mobile clones of it."""

    remote: Path
    desktop: Path
    mobile: Path

    def push_mobile_branch(
        self,
        branch: str,
        *,
        filename: str = "mobile.txt",
        content: str = "from mobile\n",
        date: Optional[str] = None,
    ) -> str:
        git(self.mobile, "checkout", "main")
        git(self.mobile, "checkout", "-b", branch)
        sha = commit_file(self.mobile, filename, content, f"mobile work on {branch}", date=date)
        git(self.mobile, "push", "origin", branch)
        return sha

    def remote_heads(self) -> list[str]:
        output = git(self.remote, "for-each-ref", "--format=%(refname:short)", "refs/heads")
        return output.splitlines()

    def remote_rev(self, ref: str) -> str:
        return git(self.remote, "rev-parse", ref)


@pytest.fixture(autouse=True)
def clean_merge_env(monkeypatch: pytest.MonkeyPatch):
    for key in list(os.environ):
        if key.startswith("MERGE_MOBILE_"):
            monkeypatch.delenv(key)
    yield
    # load_dotenv writes straight into os.environ
    for key in list(os.environ):
        if key.startswith("MERGE_MOBILE_"):
            os.environ.pop(key, None)


@pytest.fixture()
def fork(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Fork:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Desktop")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "desktop@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Desktop")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "desktop@example.com")

    remote = tmp_path / "fork.git"
    git(tmp_path, "init", "--bare", "-b", "main", str(remote))

    seed = tmp_path / "seed"
    git(tmp_path, "init", "-b", "main", str(seed))
    commit_file(seed, "README.md", "shared fork\n", "initial commit", date="2024-01-01T00:00:00")
    git(seed, "remote", "add", "origin", str(remote))
    git(seed, "push", "origin", "main")

    desktop = tmp_path / "desktop"
    mobile = tmp_path / "mobile"
    git(tmp_path, "clone", str(remote), str(desktop))
    git(tmp_path, "clone", str(remote), str(mobile))
    return Fork(remote=remote, desktop=desktop, mobile=mobile)
