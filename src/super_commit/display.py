from __future__ import annotations

import io

from rich.console import Console
from rich.markup import escape

from .config import Language
from .messages import t
from .models import ValidationError

_RULE = "─" * 60


def _buffer_console() -> tuple[io.StringIO, Console]:
    buf = io.StringIO()
    return buf, Console(file=buf, force_terminal=False, highlight=False, soft_wrap=True)


def format_staged_files(files: list[str], language: Language = Language.EN) -> str:
    buf, console = _buffer_console()
    if not files:
        console.print(f"[yellow]{t(language, 'no_staged')}[/]")
        console.print(f"[dim]{escape(t(language, 'no_staged_tip'))}[/]")
        return buf.getvalue()

    console.print(f"[bold cyan]{t(language, 'staged_title')}[/]\n")
    for path in files:
        console.print(f"  [green]✓ {escape(path)}[/]")
    return buf.getvalue()


def format_errors(errors: list[ValidationError], language: Language = Language.EN) -> str:
    buf, console = _buffer_console()
    console.print(f"[bold red]{t(language, 'errors_title')}[/]\n")
    for error in errors:
        console.print(f"  [red]• {escape(error.field)}: {escape(error.message)}[/]")
    return buf.getvalue()


def format_preview(message: str, title: str) -> str:
    buf, console = _buffer_console()
    console.print(f"[bold cyan]{escape(title)}[/]\n")
    console.print(f"[dim]{_RULE}[/]")
    console.print(escape(message))
    console.print(f"[dim]{_RULE}[/]")
    return buf.getvalue()
