from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(slots=True)
class BranchSelection:
    branch: str
    candidates: List[str]
    reason: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "branch": self.branch,
            "candidates": list(self.candidates),
            "reason": self.reason,
        }


@dataclass(slots=True)
class MergeResult:
    status: str
    branch: str
    remote: str
    trunk: str
    candidates: List[str]
    reason: str
    pushed: bool = False
    deleted: bool = False
    commit: Optional[str] = None
    logs: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "status": self.status,
            "branch": self.branch,
            "remote": self.remote,
            "trunk": self.trunk,
            "candidates": list(self.candidates),
            "reason": self.reason,
            "pushed": self.pushed,
            "deleted": self.deleted,
            "commit": self.commit,
            "logs": list(self.logs),
        }
