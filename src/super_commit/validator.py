from __future__ import annotations

import re
from typing import Callable

from .config import SuperCommitConfig
from .models import CommitRecord, ValidationError

_LOWERCASE_START = re.compile(r"^[a-z]")

Rule = Callable[[SuperCommitConfig, CommitRecord], list[ValidationError]]


def _check_type(config: SuperCommitConfig, record: CommitRecord) -> list[ValidationError]:
    errors = []
    if config.validation.type_required and not record.type:
        errors.append(ValidationError("type", "Commit type is required"))
    if record.type:
        valid_types = config.type_values
        if record.type not in valid_types:
            errors.append(ValidationError(
                "type",
                f'Invalid type "{record.type}". Valid types are: {", ".join(valid_types)}',
            ))
    return errors


def _check_scope(config: SuperCommitConfig, record: CommitRecord) -> list[ValidationError]:
    errors = []
    rules = config.validation
    if rules.scope_required and not record.scope:
        errors.append(ValidationError("scope", "Scope is required"))
    if record.scope and config.scopes is not None and not rules.allow_custom_scopes:
        valid_scopes = config.scope_values
        if record.scope not in valid_scopes:
            errors.append(ValidationError(
                "scope",
                f'Invalid scope "{record.scope}". Valid scopes are: {", ".join(valid_scopes)}',
            ))
    return errors


def _check_subject(config: SuperCommitConfig, record: CommitRecord) -> list[ValidationError]:
    rules = config.validation
    subject = record.subject
    if not subject:
        if rules.subject_required:
            return [ValidationError("subject", "Subject is required")]
        return []

    # The four checks below are independent; all of them may fire at once.
    errors = []
    length = len(subject)
    if length < rules.subject_min_length:
        errors.append(ValidationError(
            "subject",
            f"Subject is too short. Minimum length is {rules.subject_min_length} characters",
        ))
    if length > rules.subject_max_length:
        errors.append(ValidationError(
            "subject",
            f"Subject is too long. Maximum length is {rules.subject_max_length} characters "
            f"(current: {length})",
        ))
    if not _LOWERCASE_START.match(subject):
        errors.append(ValidationError("subject", "Subject should start with a lowercase letter"))
    if subject.endswith("."):
        errors.append(ValidationError("subject", "Subject should not end with a period"))
    return errors


def _check_body(config: SuperCommitConfig, record: CommitRecord) -> list[ValidationError]:
    errors = []
    rules = config.validation
    if not rules.allow_empty_body and not record.body and not record.breaking:
        errors.append(ValidationError("body", "Body is required"))
    if record.body:
        for number, line in enumerate(record.body.split("\n"), start=1):
            if len(line) > rules.body_max_line_length:
                errors.append(ValidationError(
                    "body",
                    f"Body line {number} is too long. "
                    f"Maximum length is {rules.body_max_line_length} characters",
                ))
    return errors


def _check_breaking(config: SuperCommitConfig, record: CommitRecord) -> list[ValidationError]:
    if record.breaking and not record.breaking_body:
        return [ValidationError("breakingBody", "Breaking changes must have a description")]
    return []


# Evaluation order is also the order of the reported errors.
RULES: tuple[Rule, ...] = (
    _check_type,
    _check_scope,
    _check_subject,
    _check_body,
    _check_breaking,
)


def validate(config: SuperCommitConfig, record: CommitRecord) -> list[ValidationError]:
    """Return every rule violation of *record*, in rule order.

    All rules run even after an earlier one fails. Missing fields are reported
    as errors, never raised.
    """
    errors: list[ValidationError] = []
    for rule in RULES:
        errors.extend(rule(config, record))
    return errors


def is_valid(config: SuperCommitConfig, record: CommitRecord) -> bool:
    return not validate(config, record)
