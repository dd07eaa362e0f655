from __future__ import annotations

import json
import logging
import subprocess
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape as rich_escape

from .commit_check import check_commit_message
from .config import (
    CONFIG_FILE_NAME,
    TOML_CONFIG_FILE_NAME,
    Language,
    SuperCommitConfig,
    config_source,
    config_to_dict,
    default_config,
    load_config,
    write_config,
)
from .display import format_errors, format_preview, format_staged_files
from .exceptions import HookError
from .formatter import format_commit
from .git import GitError, get_current_branch, get_git_dir, get_staged_files, validate_environment
from .git import commit as git_commit
from .hooks import (
    HOOK_TYPES,
    HUSKY_INIT_COMMAND,
    HUSKY_INSTALL_COMMANDS,
    detect_package_manager,
    husky_installed,
    install_hook,
    is_installed,
    read_package_json,
    uninstall_hook,
    update_package_scripts,
    write_husky_hook,
)
from .messages import t
from .models import CommitRecord
from .prompts import InteractivePrompts
from .validator import validate

console = Console(highlight=False, soft_wrap=True)


def _commit_options(func):
    options = [
        click.option("-t", "--type", "type_", default=None, help="Commit type (feat, fix, docs, etc.)"),
        click.option("-s", "--scope", default=None, help="Commit scope"),
        click.option("-m", "--message", default=None, help="Commit message (short description)"),
        click.option("-b", "--body", default=None, help="Commit body (longer description)"),
        click.option("--breaking", is_flag=True, help="Mark as breaking change (the body describes it)"),
        click.option("-i", "--issues", default=None, help='Issue references (e.g. "fix #123")'),
        click.option("--amend", is_flag=True, help="Amend the previous commit instead of creating one."),
        click.option("--dry-run", is_flag=True, help="Show the message without committing."),
        click.option(
            "--output",
            type=click.Path(dir_okay=False, path_type=Path),
            default=None,
            help="Write the message to a file instead of committing (used by git hooks).",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group(invoke_without_command=True)
@_commit_options
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.version_option(package_name="super-commit")
@click.pass_context
def main(ctx: click.Context, verbose: bool, **commit_kwargs) -> None:
    """A conventional commit CLI tool with full customization.

    Run without arguments for interactive mode, or pass --type and --message.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG] %(message)s")
        logging.getLogger("super_commit").setLevel(logging.DEBUG)

    if ctx.invoked_subcommand is None:
        _commit(message_arg=None, **commit_kwargs)


@main.command("commit")
@click.argument("message_arg", metavar="[MESSAGE]", required=False)
@_commit_options
def commit_cmd(message_arg: str | None, **commit_kwargs) -> None:
    """Create a conventional commit (interactive unless --type/--message are given)."""
    _commit(message_arg=message_arg, **commit_kwargs)


def _record_from_flags(
    type_: str | None,
    scope: str | None,
    message: str | None,
    body: str | None,
    breaking: bool,
    issues: str | None,
) -> CommitRecord:
    if not type_ or not message:
        console.print("[bold red]❌ When using flags, both --type and --message are required.[/]")
        console.print('[dim]Example: super-commit --type feat --message "add new feature"[/]')
        sys.exit(1)

    return CommitRecord(
        type=type_,
        scope=scope or None,
        subject=message,
        body=body or None,
        breaking=breaking,
        breaking_body=body if breaking else None,
        issues=issues or None,
    )


def _commit(
    message_arg: str | None,
    type_: str | None,
    scope: str | None,
    message: str | None,
    body: str | None,
    breaking: bool,
    issues: str | None,
    amend: bool,
    dry_run: bool,
    output: Path | None,
) -> None:
    message = message or message_arg
    # Hooks and amends run with whatever is (or is not) staged.
    ready, reason = validate_environment(require_staged=not (amend or output))
    if not ready:
        console.print(f"[bold red]❌ {rich_escape(reason)}[/]")
        sys.exit(1)

    config = load_config()
    language = config.language

    try:
        staged = get_staged_files()
    except GitError as e:
        console.print(f"[bold red]{rich_escape(str(e))}[/]")
        sys.exit(1)
    if output is None:
        click.echo(format_staged_files(staged, language))

    interactive = not type_ and not message
    if interactive:
        prompts = InteractivePrompts(config, console)
        record = prompts.prompt()
    else:
        record = _record_from_flags(type_, scope, message, body, breaking, issues)

    errors = validate(config, record)
    if errors:
        click.echo(format_errors(errors, language))
        sys.exit(1)

    commit_message = format_commit(config, record)

    if interactive:
        if not prompts.confirm_commit(commit_message):
            console.print(f"\n[yellow]{t(language, 'commit_cancelled')}[/]\n")
            sys.exit(0)
    else:
        click.echo(format_preview(commit_message, "📋 Commit Message:"))

    if output is not None:
        output.write_text(commit_message + "\n", encoding="utf-8")
        return

    if dry_run:
        console.print("[dim]Dry run: no commit created.[/]")
        return

    try:
        git_commit(commit_message, amend=amend)
    except GitError as e:
        console.print("[bold red]❌ Error creating commit:[/]")
        console.print(f"[red]{rich_escape(str(e))}[/]")
        sys.exit(1)

    console.print(f"\n[bold green]{t(language, 'commit_created')}[/]\n")
    branch = get_current_branch()
    console.print(f"[dim]Branch: {rich_escape(branch)}[/]")
    console.print(f"[dim]To push: git push origin {rich_escape(branch)}[/]\n")


# --- init ---


def _customize(config: SuperCommitConfig, level: str) -> SuperCommitConfig:
    if level in ("standard", "advanced"):
        use_emoji = click.confirm("Do you want to use emojis in commit messages?", default=False)
        config = config.model_copy(update={"format": config.format.model_copy(update={"use_emoji": use_emoji})})

    if level == "advanced":
        subject_max_length = click.prompt(
            "Maximum length for commit subject",
            type=click.IntRange(10, 200),
            default=72,
        )
        scope_required = click.confirm("Should scope be required?", default=False)
        validation = config.validation.model_copy(
            update={"subject_max_length": subject_max_length, "scope_required": scope_required}
        )
        config = config.model_copy(update={"validation": validation})
    return config


@main.command("init")
@click.option(
    "--format", "file_format", default="json", type=click.Choice(["json", "toml"]),
    help="Configuration file format.",
)
@click.option("--force", is_flag=True, help="Overwrite an existing configuration file without asking.")
def init_cmd(file_format: str, force: bool) -> None:
    """Initialize super-commit configuration in the current directory."""
    console.print("\n[bold blue]🚀 Super Commit Configuration Setup[/]\n")

    filename = TOML_CONFIG_FILE_NAME if file_format == "toml" else CONFIG_FILE_NAME
    config_path = Path.cwd() / filename
    if config_path.exists() and not force:
        if not click.confirm("Configuration file already exists. Do you want to overwrite it?", default=False):
            console.print("[yellow]Configuration setup cancelled.[/]")
            return

    language = click.prompt(
        "Select your preferred language (en: English, tr: Türkçe)",
        type=click.Choice([lang.value for lang in Language]),
        default="en",
    )
    level = click.prompt(
        "Select configuration type (basic: recommended defaults, standard: emoji, advanced: full)",
        type=click.Choice(["basic", "standard", "advanced"]),
        default="basic",
    )

    config = _customize(default_config(language), level)

    try:
        write_config(config_path, config)
    except OSError as e:
        console.print("[bold red]Failed to create configuration file:[/]")
        console.print(f"[red]{rich_escape(str(e))}[/]")
        sys.exit(1)

    console.print(f"\n[green]✅ Configuration file created successfully at {rich_escape(filename)}[/]")
    console.print("[dim]You can manually edit this file to further customize your settings.[/]")
    console.print("[dim]To start committing, run: [cyan]super-commit[/cyan][/]")


# --- validate ---


def _print_format_help(message: str) -> None:
    header = message.strip().split("\n")[0] if message.strip() else ""
    config = load_config()
    console.print("[bold red]❌ Invalid commit message format![/]\n")
    console.print("[dim]Your message:[/]")
    console.print(f"  [yellow]{rich_escape(header)}[/]\n")
    console.print("Commit message must follow Conventional Commits format:")
    console.print(f"  [cyan]{rich_escape('<type>(<scope>)' + config.format.separator + ' <subject>')}[/]\n")
    console.print("Valid types:")
    console.print(f"  [dim]{rich_escape(', '.join(config.type_values))}[/]\n")
    console.print("Examples:")
    console.print("  [green]feat: add user authentication[/]")
    console.print("  [green]fix(api): resolve login endpoint error[/]")
    console.print("  [green]docs: update README[/]\n")
    console.print("[cyan]💡 Tip: Use 'super-commit' for interactive mode.[/]")


@main.command("validate")
@click.option("-m", "--message", default=None, help="Commit message to validate.")
@click.option(
    "-f", "--file", "message_file", default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Read the message from a file (e.g. .git/COMMIT_EDITMSG).",
)
@click.option("--silent", is_flag=True, help="Only report through the exit code.")
def validate_cmd(message: str | None, message_file: Path | None, silent: bool) -> None:
    """Validate a commit message against the configured rules."""
    if message_file is not None:
        if not message_file.exists():
            if not silent:
                console.print(f"[bold red]❌ File not found: {rich_escape(str(message_file))}[/]")
            sys.exit(1)
        message = message_file.read_text(encoding="utf-8")
    elif message is None:
        if not silent:
            console.print("[bold red]❌ Please provide a message or file to validate[/]")
            console.print('[dim]Usage: super-commit validate --message "your message"[/]')
            console.print("[dim]   or: super-commit validate --file .git/COMMIT_EDITMSG[/]")
        sys.exit(1)

    config = load_config()
    result = check_commit_message(config, message)

    if not result.valid:
        if not silent:
            if result.parsed is None:
                _print_format_help(message)
            else:
                click.echo(format_errors(result.errors, config.language))
        sys.exit(1)

    if not silent:
        console.print("[green]✅ Commit message is valid![/]")


# --- config ---


@main.group("config")
def config_group() -> None:
    """Inspect the effective configuration."""
    pass


@config_group.command("show")
def config_show() -> None:
    """Print the effective configuration as JSON."""
    config = load_config()
    click.echo(json.dumps(config_to_dict(config), indent=2, ensure_ascii=False))


@config_group.command("path")
def config_path() -> None:
    """Print the configuration file in use."""
    load_config()
    source = config_source()
    if source is None:
        console.print("[dim]No configuration file found; using defaults.[/]")
    else:
        click.echo(str(source))


# --- Hook management ---


def _get_repo_hooks_dir() -> Path:
    try:
        hooks_dir = get_git_dir() / "hooks"
    except GitError:
        console.print("[bold red]Not in a git repository.[/]")
        sys.exit(1)
    hooks_dir.mkdir(exist_ok=True)
    return hooks_dir


@main.group("hook")
def hook_group() -> None:
    """Manage git hooks in the current repository."""
    pass


@hook_group.command("install")
@click.option("--force", is_flag=True, help="Overwrite hooks not written by super-commit.")
@click.argument("hook_type", required=False, type=click.Choice(HOOK_TYPES))
def hook_install(force: bool, hook_type: str | None) -> None:
    """Install git hooks (both when no hook type is given)."""
    hooks_dir = _get_repo_hooks_dir()
    for name in [hook_type] if hook_type else HOOK_TYPES:
        try:
            install_hook(hooks_dir, name, force=force)
        except HookError as e:
            console.print(f"[bold red]{rich_escape(str(e))}[/]")
            sys.exit(1)
        console.print(f"[green]Installed {name} hook in current repo.[/]")


@hook_group.command("uninstall")
@click.argument("hook_type", required=False, type=click.Choice(HOOK_TYPES))
def hook_uninstall(hook_type: str | None) -> None:
    """Remove git hooks installed by super-commit."""
    hooks_dir = _get_repo_hooks_dir()
    for name in [hook_type] if hook_type else HOOK_TYPES:
        try:
            removed = uninstall_hook(hooks_dir, name)
        except HookError as e:
            console.print(f"[bold red]{rich_escape(str(e))}[/]")
            sys.exit(1)
        if removed:
            console.print(f"[green]Removed {name} hook.[/]")
        else:
            console.print(f"[dim]{name} hook is not installed.[/]")


@hook_group.command("status")
def hook_status() -> None:
    """Show which hooks are installed in the current repo."""
    hooks_dir = _get_repo_hooks_dir()
    console.print("[bold]Current repo:[/]")
    for name in HOOK_TYPES:
        if is_installed(hooks_dir, name):
            console.print(f"  [green]{name}: installed[/]")
        else:
            console.print(f"  [dim]{name}: not installed[/]")


# --- Husky ---


@main.command("husky")
def husky_cmd() -> None:
    """Set up Husky integration for automatic conventional commits."""
    console.print("\n[bold blue]🐶 Husky Integration Setup[/]\n")
    cwd = Path.cwd()

    try:
        package = read_package_json(cwd)
    except HookError as e:
        console.print(f"[bold red]❌ {rich_escape(str(e))}[/]")
        sys.exit(1)

    if husky_installed(cwd, package):
        console.print("[green]✓ Husky is already installed[/]")
        if (cwd / ".husky" / "prepare-commit-msg").exists():
            if not click.confirm(
                "prepare-commit-msg hook already exists. Do you want to overwrite it?", default=False
            ):
                console.print("[yellow]Setup cancelled.[/]")
                return
    else:
        if not click.confirm("Husky is not installed. Do you want to install it?", default=True):
            console.print("[yellow]Setup cancelled. Please install Husky manually and run this command again.[/]")
            return

        manager = detect_package_manager(cwd)
        console.print(f"\n[cyan]📦 Installing Husky with {manager}...[/]")
        try:
            subprocess.run(HUSKY_INSTALL_COMMANDS[manager], cwd=cwd, check=True)
            console.print("[green]✓ Husky installed successfully[/]")
            console.print("\n[cyan]🔧 Initializing Husky...[/]")
            subprocess.run(HUSKY_INIT_COMMAND, cwd=cwd, check=True)
            console.print("[green]✓ Husky initialized[/]")
        except (subprocess.CalledProcessError, OSError) as e:
            console.print("[bold red]Failed to install Husky:[/]")
            console.print(f"[red]{rich_escape(str(e))}[/]")
            sys.exit(1)
        # husky init rewrites package.json
        package = read_package_json(cwd)

    write_husky_hook(cwd)
    console.print("[green]✓ prepare-commit-msg hook created[/]")

    updated, warnings = update_package_scripts(cwd, package)
    for warning in warnings:
        console.print(f"\n[yellow]⚠️  Warning: {rich_escape(warning)}[/]")
    if updated:
        console.print("[green]✓ package.json scripts updated[/]")

    console.print("\n[bold green]✅ Husky integration setup completed![/]\n")
    console.print("[dim]Super Commit will now be used for all commits in this repository.[/]")
    console.print('[dim]You can still use "git commit" as usual.[/]')
