from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from .config import MergeConfig
from .errors import GitCommandError, NoBranchesFoundError
from .git import GitRunner
from .workflow import merge_latest_branch


def _load_local_env(repo: Path) -> None:
    """Load ``<repo>/.env`` without overriding variables already set."""

    env_file = repo / ".env"
    if env_file.exists():
        load_dotenv(env_file, override=False)


def _stderr_echo(line: str) -> None:
    print(line, file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="merge-mobile",
        description="Find the latest Mobile branch on the fork and merge it into the trunk",
    )
    parser.add_argument("--repo", default=".", help="Repository to operate in")
    parser.add_argument("--remote", help="Remote to fetch from and push to (default: origin)")
    parser.add_argument("--prefix", help="Branch prefix Mobile pushes under (default: claude/)")
    parser.add_argument("--trunk", help="Branch to merge into (default: main)")
    parser.add_argument(
        "--order",
        choices=["listing", "committerdate"],
        help="How candidates are ordered before picking the last one (default: listing)",
    )
    parser.add_argument(
        "--delete",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Delete the merged remote branch without asking (--no-delete keeps it)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Only list and select, do not merge")
    parser.add_argument("--json", action="store_true", dest="as_json", help="Print the result payload as JSON")
    parser.add_argument("--verbose", action="store_true", help="Log git invocations to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    repo = Path(args.repo).expanduser().resolve()
    _load_local_env(repo)

    if args.delete is None:
        delete = None
    else:
        delete = "yes" if args.delete else "no"

    try:
        config = MergeConfig.from_env(
            {
                "repo": repo,
                "remote": args.remote,
                "prefix": args.prefix,
                "trunk": args.trunk,
                "order": args.order,
                "delete": delete,
            }
        )
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    try:
        result = merge_latest_branch(
            config,
            runner=GitRunner(config.repo, quiet=args.as_json),
            echo=_stderr_echo if args.as_json else None,
            dry_run=args.dry_run,
        )
    except NoBranchesFoundError:
        return 1
    except GitCommandError as exc:
        print(exc.stderr.strip() or str(exc), file=sys.stderr)
        return exc.returncode if exc.returncode > 0 else 1

    if args.as_json:
        print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
