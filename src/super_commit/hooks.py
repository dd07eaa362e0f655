from __future__ import annotations

import json
import logging
import shutil
import sys
from pathlib import Path

from .exceptions import HookError

logger = logging.getLogger(__name__)

HOOK_MARKER = "# Installed by super-commit"
HOOK_TYPES = ["commit-msg", "prepare-commit-msg"]

# Lock file -> package manager; first match wins, npm otherwise.
_LOCK_FILES = (
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
)

HUSKY_INSTALL_COMMANDS = {
    "npm": ["npm", "install", "--save-dev", "husky"],
    "yarn": ["yarn", "add", "--dev", "husky"],
    "pnpm": ["pnpm", "add", "--save-dev", "husky"],
}

HUSKY_INIT_COMMAND = ["npx", "husky", "init"]


def resolve_executable() -> str:
    """Find the absolute path to the super-commit executable."""
    found = shutil.which("super-commit")
    if found:
        return found

    candidate = Path(sys.executable).parent / "super-commit"
    if candidate.exists():
        return str(candidate)

    return "super-commit"


def generate_hook_script(hook_type: str, executable: str | None = None) -> str:
    exe = executable or resolve_executable()
    if hook_type == "commit-msg":
        return f"""#!/usr/bin/env sh
{HOOK_MARKER}
{exe} validate --file "$1"
"""
    if hook_type == "prepare-commit-msg":
        # $2 is empty only for a plain "git commit" (no -m, template, merge, squash or amend)
        return f"""#!/usr/bin/env sh
{HOOK_MARKER}
if [ -z "$2" ]; then
    exec < /dev/tty && {exe} commit --output "$1"
fi
"""
    raise HookError(f"Unknown hook type: {hook_type}")


def is_installed(hooks_dir: Path, hook_type: str) -> bool:
    hook_path = hooks_dir / hook_type
    return hook_path.is_file() and HOOK_MARKER in hook_path.read_text()


def install_hook(hooks_dir: Path, hook_type: str, force: bool = False) -> Path:
    hook_path = hooks_dir / hook_type
    if hook_path.exists() and not force and not is_installed(hooks_dir, hook_type):
        raise HookError(f"{hook_path} already exists and was not installed by super-commit (use --force)")
    hooks_dir.mkdir(parents=True, exist_ok=True)
    hook_path.write_text(generate_hook_script(hook_type))
    hook_path.chmod(0o755)
    logger.debug("Wrote %s", hook_path)
    return hook_path


def uninstall_hook(hooks_dir: Path, hook_type: str) -> bool:
    """Remove a hook written by super-commit. Returns False if none was installed."""
    hook_path = hooks_dir / hook_type
    if not hook_path.exists():
        return False
    if not is_installed(hooks_dir, hook_type):
        raise HookError(f"{hook_path} was not installed by super-commit; leaving it in place")
    hook_path.unlink()
    return True


# --- Husky (Node projects) ---

HUSKY_HOOK_SCRIPT = f"""#!/usr/bin/env sh
{HOOK_MARKER}
if [ -z "$2" ]; then
  exec < /dev/tty && super-commit commit --output "$1"
fi
"""


def detect_package_manager(cwd: Path) -> str:
    for lock_file, manager in _LOCK_FILES:
        if (cwd / lock_file).exists():
            return manager
    return "npm"


def read_package_json(cwd: Path) -> dict:
    path = cwd / "package.json"
    if not path.exists():
        raise HookError("package.json not found. Please run this command in a Node.js project.")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except ValueError as e:
        raise HookError(f"Cannot parse {path}: {e}") from e


def husky_installed(cwd: Path, package: dict) -> bool:
    return bool(
        package.get("devDependencies", {}).get("husky")
        or package.get("dependencies", {}).get("husky")
        or (cwd / ".husky").exists()
    )


def write_husky_hook(cwd: Path) -> Path:
    hook_path = cwd / ".husky" / "prepare-commit-msg"
    hook_path.parent.mkdir(parents=True, exist_ok=True)
    hook_path.write_text(HUSKY_HOOK_SCRIPT)
    hook_path.chmod(0o755)
    return hook_path


def update_package_scripts(cwd: Path, package: dict) -> tuple[bool, list[str]]:
    """Add the husky "prepare" script and a "commit" shortcut to package.json.

    Returns whether the file was rewritten and any warnings for the user.
    """
    warnings = []
    updated = False
    scripts = package.setdefault("scripts", {})

    prepare = scripts.get("prepare")
    if not prepare:
        scripts["prepare"] = "husky"
        updated = True
    elif "husky" not in prepare:
        warnings.append('"prepare" script already exists in package.json; make sure it runs: husky')

    if not scripts.get("commit"):
        scripts["commit"] = "super-commit"
        updated = True

    if updated:
        path = cwd / "package.json"
        path.write_text(json.dumps(package, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return updated, warnings
