from __future__ import annotations

from .config import EmojiPosition, SuperCommitConfig
from .models import CommitRecord

BREAKING_CHANGE_PREFIX = "BREAKING CHANGE: "

# (before type, after type, after subject) header slots for the type emoji.
_EMOJI_SLOTS: dict[EmojiPosition, tuple[str, str, str]] = {
    EmojiPosition.BEFORE_TYPE: ("{emoji} ", "", ""),
    EmojiPosition.AFTER_TYPE: ("", " {emoji}", ""),
    EmojiPosition.AFTER_SUBJECT: ("", "", " {emoji}"),
}


def _type_emoji(config: SuperCommitConfig, record: CommitRecord) -> str:
    if not config.format.use_emoji:
        return ""
    option = config.find_type(record.type)
    return (option.emoji or "") if option else ""


def format_header(config: SuperCommitConfig, record: CommitRecord) -> str:
    emoji = _type_emoji(config, record)

    before_type = after_type = after_subject = ""
    if emoji:
        before_type, after_type, after_subject = (
            slot.format(emoji=emoji) for slot in _EMOJI_SLOTS[config.format.emoji_position]
        )

    scope = f"({record.scope})" if record.scope else ""
    return (
        f"{before_type}{record.type}{after_type}{scope}"
        f"{config.format.separator} {record.subject}{after_subject}"
    )


def format_issues(issues: str) -> str:
    return issues.strip()


def format_commit(config: SuperCommitConfig, record: CommitRecord) -> str:
    """Render *record* as a conventional commit message.

    The record is assumed to be validated already; nothing is re-checked here.
    Every section after the header is prefixed by the configured number of
    newlines, so the result never ends with a separator.
    """
    line_breaks = "\n" * config.format.line_breaks_between_sections
    parts = [format_header(config, record)]

    if record.body:
        parts.append(line_breaks + record.body)
    if record.breaking and record.breaking_body:
        parts.append(line_breaks + BREAKING_CHANGE_PREFIX + record.breaking_body)
    if record.issues:
        parts.append(line_breaks + format_issues(record.issues))

    return "".join(parts)
