from __future__ import annotations

import re
from typing import Callable

import click
from rich.console import Console
from rich.markup import escape

from .config import SuperCommitConfig
from .display import format_preview
from .messages import t
from .models import CommitRecord

_CUSTOM_SCOPE_PATTERN = re.compile(r"^[a-z0-9-]+$")
_CUSTOM = object()


class InteractivePrompts:
    """Sequential question flow that gathers a CommitRecord from the user."""

    def __init__(self, config: SuperCommitConfig, console: Console | None = None) -> None:
        self._config = config
        self._console = console or Console(highlight=False, soft_wrap=True)

    def _t(self, key: str, **kwargs: object) -> str:
        return t(self._config.language, key, **kwargs)

    def _choose(self, question: str, options: list[tuple[str, object]]) -> object:
        self._console.print(f"[bold]{escape(question)}[/]")
        for number, (label, _) in enumerate(options, start=1):
            self._console.print(f"  {number}) {escape(label)}")

        by_value = {value: value for _, value in options if isinstance(value, str)}

        def convert(raw: str) -> object:
            raw = raw.strip()
            if raw.isdigit() and 1 <= int(raw) <= len(options):
                return options[int(raw) - 1][1]
            if raw in by_value:
                return by_value[raw]
            raise click.BadParameter(self._t("choice_invalid"))

        return click.prompt(">", default="1", value_proc=convert)

    def _required_text(self, question: str, check: Callable[[str], str | None]) -> str:
        def convert(raw: str) -> str:
            value = raw.strip()
            problem = check(value)
            if problem:
                raise click.BadParameter(problem)
            return value

        return click.prompt(question, value_proc=convert)

    def prompt(self) -> CommitRecord:
        self._console.print(f"\n[bold blue]{self._t('interactive_title')}[/]\n")
        type_ = self.prompt_type()
        scope = self.prompt_scope()
        subject = self.prompt_subject()
        body = self.prompt_body()
        breaking, breaking_body = self.prompt_breaking()
        issues = self.prompt_issues()
        return CommitRecord(
            type=type_,
            scope=scope,
            subject=subject,
            body=body,
            breaking=breaking,
            breaking_body=breaking_body,
            issues=issues,
        )

    def prompt_type(self) -> str:
        use_emoji = self._config.format.use_emoji
        options = [
            (f"{option.emoji} {option.name}" if use_emoji and option.emoji else option.name, option.value)
            for option in self._config.types
        ]
        return self._choose(self._config.prompt_messages.type, options)

    def prompt_scope(self) -> str | None:
        rules = self._config.validation
        options: list[tuple[str, object]] = [(self._t("no_scope"), None)]
        options.extend((scope.name, scope.value) for scope in self._config.scopes or ())
        if rules.allow_custom_scopes:
            options.append((self._t("custom_scope"), _CUSTOM))

        if rules.scope_required and len(options) == 1:
            return None

        choice = self._choose(self._config.prompt_messages.scope, options)
        if choice is _CUSTOM:
            return self.prompt_custom_scope()
        return choice or None

    def prompt_custom_scope(self) -> str:
        def check(value: str) -> str | None:
            if not value:
                return self._t("scope_empty")
            if not _CUSTOM_SCOPE_PATTERN.match(value):
                return self._t("scope_invalid")
            return None

        return self._required_text(self._config.prompt_messages.custom_scope, check)

    def prompt_subject(self) -> str:
        rules = self._config.validation

        def check(value: str) -> str | None:
            if not value:
                return self._t("subject_required")
            if len(value) < rules.subject_min_length:
                return self._t("subject_too_short", min=rules.subject_min_length)
            if len(value) > rules.subject_max_length:
                return self._t("subject_too_long", max=rules.subject_max_length, length=len(value))
            if value.endswith("."):
                return self._t("subject_period")
            return None

        return self._required_text(self._config.prompt_messages.subject, check)

    def prompt_body(self) -> str | None:
        allow_empty = self._config.validation.allow_empty_body
        if allow_empty and not click.confirm(self._t("want_body"), default=False):
            return None

        self._console.print(escape(self._config.prompt_messages.body))
        text = click.edit("")
        return (text or "").strip() or None

    def prompt_breaking(self) -> tuple[bool, str | None]:
        if not click.confirm(self._config.prompt_messages.breaking, default=False):
            return False, None

        def check(value: str) -> str | None:
            return None if value else self._t("breaking_required")

        return True, self._required_text(self._config.prompt_messages.breaking_body, check)

    def prompt_issues(self) -> str | None:
        issues = click.prompt(self._config.prompt_messages.issues, default="", show_default=False)
        return issues.strip() or None

    def confirm_commit(self, message: str) -> bool:
        click.echo(format_preview(message, self._t("preview_title")), nl=False)
        return click.confirm(self._t("confirm_commit"), default=True)
