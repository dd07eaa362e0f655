from __future__ import annotations

import re
from dataclasses import dataclass, field

from .config import EmojiPosition, SuperCommitConfig
from .models import CommitRecord, ValidationError
from .validator import validate

_ISSUE_KEYWORDS = r"(?:close|closes|closed|fix|fixes|fixed|resolve|resolves|resolved|re|ref|refs)"
_ISSUE_PATTERN = re.compile(rf"{_ISSUE_KEYWORDS}\s+#\d+", re.IGNORECASE)
# The breaking description ends at a blank line or at an issue reference line.
_BREAKING_PATTERN = re.compile(
    rf"BREAKING CHANGE:[ \t]*(.+?)(?=\n\n|\n(?i:{_ISSUE_KEYWORDS})\s+#\d+|$)",
    re.DOTALL,
)
# git commit -v appends the staged diff below this line; it is never part of the message.
_SCISSORS = "# ------------------------ >8 ------------------------"

_FORMAT_HINT = "Expected format: <type>(<scope>): <subject>  (e.g. feat(api): add user authentication)"


@dataclass(frozen=True)
class CommitCheckResult:
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    parsed: CommitRecord | None = None


def _header_pattern(separator: str) -> re.Pattern[str]:
    return re.compile(rf"^(\w+)(?:\(([^)]+)\))?{re.escape(separator)} (.+)$")


def _strip_emoji(header: str, config: SuperCommitConfig) -> str:
    position = config.format.emoji_position
    for option in config.types:
        if not option.emoji:
            continue
        emoji = option.emoji
        if position is EmojiPosition.BEFORE_TYPE:
            if header.startswith(f"{emoji} {option.value}"):
                return header[len(emoji) + 1:]
        elif position is EmojiPosition.AFTER_TYPE:
            if header.startswith(f"{option.value} {emoji}"):
                return option.value + header[len(option.value) + len(emoji) + 1:]
        elif header.startswith(option.value) and header.endswith(f" {emoji}"):
            return header[: -(len(emoji) + 1)]
    return header


def _message_lines(message: str) -> list[str]:
    lines = []
    for line in message.strip().split("\n"):
        if line.startswith(_SCISSORS):
            break
        if not line.startswith("#"):
            lines.append(line)
    return lines


def parse_commit_message(message: str, config: SuperCommitConfig | None = None) -> CommitRecord | None:
    """Split a raw commit message back into a CommitRecord.

    Git comment lines (starting with ``#``) are ignored, as is everything below
    the scissors line that ``git commit -v`` writes. When *config* enables
    emoji, the type emoji is removed from its configured header position before
    matching. Returns None when the header is not in ``type(scope): subject``
    form.
    """
    lines = _message_lines(message)
    if not lines:
        return None

    header = lines[0].strip()
    separator = ":"
    if config is not None:
        separator = config.format.separator
        if config.format.use_emoji:
            header = _strip_emoji(header, config)

    match = _header_pattern(separator).match(header)
    if not match:
        return None
    type_, scope, subject = match.groups()

    body = None
    breaking = False
    breaking_body = None
    issues = None

    rest = "\n".join(lines[1:]).strip()
    if rest:
        remainder = rest
        breaking_match = _BREAKING_PATTERN.search(rest)
        if breaking_match:
            breaking = True
            breaking_body = breaking_match.group(1).strip()
            remainder = rest[:breaking_match.start()] + rest[breaking_match.end():]

        issue_match = _ISSUE_PATTERN.search(rest)
        if issue_match:
            issues = issue_match.group(0)

        body_text = _ISSUE_PATTERN.sub("", remainder).strip()
        body = body_text or None

    return CommitRecord(
        type=type_,
        scope=scope,
        subject=subject,
        body=body,
        breaking=breaking,
        breaking_body=breaking_body,
        issues=issues,
    )


def check_commit_message(config: SuperCommitConfig, message: str) -> CommitCheckResult:
    message = message.strip()
    if not message:
        return CommitCheckResult(
            valid=False,
            errors=[ValidationError("header", f"Commit message is empty. {_FORMAT_HINT}")],
        )

    parsed = parse_commit_message(message, config)
    if parsed is None:
        return CommitCheckResult(
            valid=False,
            errors=[ValidationError("header", f"Invalid commit message format. {_FORMAT_HINT}")],
        )

    errors = validate(config, parsed)
    return CommitCheckResult(valid=not errors, errors=errors, parsed=parsed)
