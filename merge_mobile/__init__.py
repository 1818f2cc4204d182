"""Find the latest Mobile branch on a shared fork and merge it into the trunk."""

from .branches import format_numbered, parse_remote_branches, select_branch
from .config import MergeConfig
from .errors import GitCommandError, MergeMobileError, NoBranchesFoundError
from .git import GitRunner
from .models import BranchSelection, MergeResult
from .workflow import discover_branches, merge_latest_branch

__version__ = "0.1.0"

__all__ = [
    "BranchSelection",
    "GitCommandError",
    "GitRunner",
    "MergeConfig",
    "MergeMobileError",
    "MergeResult",
    "NoBranchesFoundError",
    "discover_branches",
    "format_numbered",
    "merge_latest_branch",
    "parse_remote_branches",
    "select_branch",
]
