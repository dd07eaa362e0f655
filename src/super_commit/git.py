from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


class GitError(Exception):
    pass


def _run_git(*args: str, input: str | None = None) -> str:
    logger.debug("git %s", " ".join(args))
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            check=True,
            input=input,
        )
    except subprocess.CalledProcessError as e:
        raise GitError(f"git {' '.join(args)} failed: {e.stderr.strip()}") from e
    except FileNotFoundError:
        raise GitError("git is not installed or not in PATH")
    return result.stdout


def is_git_repository() -> bool:
    try:
        _run_git("rev-parse", "--git-dir")
    except GitError:
        return False
    return True


def get_git_dir() -> Path:
    return Path(_run_git("rev-parse", "--git-dir").strip())


def get_staged_files() -> list[str]:
    output = _run_git("diff", "--cached", "--name-only")
    return [line for line in output.splitlines() if line.strip()]


def has_staged_changes() -> bool:
    return bool(get_staged_files())


def get_current_branch() -> str:
    try:
        branch = _run_git("rev-parse", "--abbrev-ref", "HEAD").strip()
    except GitError:
        return "unknown"
    return branch or "unknown"


def commit(message: str, amend: bool = False) -> str:
    args = ["commit", "-F", "-"]
    if amend:
        args.append("--amend")
    try:
        return _run_git(*args, input=message)
    except GitError as e:
        action = "amend" if amend else "create"
        raise GitError(f"Failed to {action} commit: {e}") from e


def stage_all() -> None:
    _run_git("add", ".")


def stage_files(paths: list[str]) -> None:
    if paths:
        _run_git("add", "--", *paths)


def get_last_commit_message() -> str:
    try:
        return _run_git("log", "-1", "--format=%B").strip()
    except GitError:
        return ""


def validate_environment(require_staged: bool = True) -> tuple[bool, str | None]:
    """Check that committing is possible from the current directory.

    Returns:
        (True, None) when ready, otherwise (False, reason).
    """
    if not is_git_repository():
        return False, 'Not a git repository. Please run "git init" first.'
    if require_staged and not has_staged_changes():
        return False, 'No staged changes to commit. Please stage your changes with "git add" first.'
    return True, None
