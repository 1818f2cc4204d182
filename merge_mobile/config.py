"""Configuration for the branch-merge helper."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, DirectoryPath, field_validator

ENV_PREFIX = "MERGE_MOBILE_"
ENV_FIELDS = ("remote", "prefix", "trunk", "order")


class MergeConfig(BaseModel):
    """Where to look for Mobile branches and where to merge them."""

    repo: DirectoryPath = Path(".")
    remote: str = "origin"
    prefix: str = "claude/"
    trunk: str = "main"
    order: Literal["listing", "committerdate"] = "listing"
    delete: Literal["ask", "yes", "no"] = "ask"

    @field_validator("remote", "trunk")
    @classmethod
    def _require_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        if any(char.isspace() for char in value):
            raise ValueError(f"must not contain whitespace (got '{value}')")
        return value

    @field_validator("prefix")
    @classmethod
    def _normalise_prefix(cls, value: str) -> str:
        value = value.strip().strip("/")
        if not value:
            raise ValueError("must not be empty")
        return f"{value}/"

    @property
    def pattern(self) -> str:
        return f"{self.remote}/{self.prefix}"

    @classmethod
    def from_env(
        cls,
        overrides: Optional[Mapping[str, object]] = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "MergeConfig":
        """Build a config from ``MERGE_MOBILE_*`` variables, then explicit overrides.

        Overrides whose value is ``None`` are ignored so argparse defaults can be
        passed straight through.
        """

        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        for name in ENV_FIELDS:
            raw = env.get(f"{ENV_PREFIX}{name.upper()}")
            if raw:
                values[name] = raw
        for name, value in (overrides or {}).items():
            if value is not None:
                values[name] = value
        return cls(**values)


__all__ = ["ENV_PREFIX", "MergeConfig"]
