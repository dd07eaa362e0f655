import pytest

from super_commit.config import ScopeOption, default_config
from super_commit.models import CommitRecord, ValidationError
from super_commit.validator import RULES, is_valid, validate


@pytest.fixture
def config():
    return default_config()


def with_rules(config, **changes):
    return config.model_copy(update={"validation": config.validation.model_copy(update=changes)})


def fields(errors):
    return [e.field for e in errors]


class TestValidRecords:
    def test_minimal_record_is_valid(self, config):
        record = CommitRecord(type="feat", subject="add login flow")
        assert validate(config, record) == []
        assert is_valid(config, record) is True

    def test_full_record_is_valid(self, config):
        record = CommitRecord(
            type="fix",
            scope="api",
            subject="correct token refresh",
            body="The refresh token was\nnever rotated.",
            breaking=True,
            breaking_body="tokens issued before this release are rejected",
            issues="fixes #42",
        )
        assert validate(config, record) == []


class TestTypeRules:
    def test_missing_type_reports_exactly_one_type_error(self, config):
        errors = validate(config, CommitRecord(type="", subject="add x"))
        assert fields(errors) == ["type"]
        assert errors[0].message == "Commit type is required"

    def test_missing_type_allowed_when_not_required(self, config):
        config = with_rules(config, type_required=False)
        assert validate(config, CommitRecord(type="", subject="add x")) == []

    def test_unknown_type_lists_valid_types(self, config):
        errors = validate(config, CommitRecord(type="feature", subject="add x"))
        assert fields(errors) == ["type"]
        assert 'Invalid type "feature"' in errors[0].message
        assert "feat, fix, docs, style, refactor, perf, test, build, ci, chore, revert" in errors[0].message

    def test_type_match_is_case_sensitive(self, config):
        errors = validate(config, CommitRecord(type="Feat", subject="add x"))
        assert fields(errors) == ["type"]


class TestScopeRules:
    def test_scope_required(self, config):
        config = with_rules(config, scope_required=True)
        errors = validate(config, CommitRecord(type="feat", subject="add x"))
        assert fields(errors) == ["scope"]
        assert errors[0].message == "Scope is required"

    def test_custom_scope_allowed_by_default(self, config):
        assert validate(config, CommitRecord(type="feat", scope="billing", subject="add x")) == []

    def test_custom_scope_rejected_when_disallowed(self, config):
        config = with_rules(config, allow_custom_scopes=False)
        errors = validate(config, CommitRecord(type="feat", scope="billing", subject="add x"))
        assert fields(errors) == ["scope"]
        assert 'Invalid scope "billing"' in errors[0].message
        assert "api, ui, db, config, deps" in errors[0].message

    def test_predefined_scope_accepted_when_custom_disallowed(self, config):
        config = with_rules(config, allow_custom_scopes=False)
        assert validate(config, CommitRecord(type="feat", scope="api", subject="add x")) == []

    def test_no_scope_list_means_any_scope(self, config):
        config = with_rules(config.model_copy(update={"scopes": None}), allow_custom_scopes=False)
        assert validate(config, CommitRecord(type="feat", scope="anything", subject="add x")) == []

    def test_empty_scope_list_rejects_every_scope(self, config):
        config = with_rules(config.model_copy(update={"scopes": ()}), allow_custom_scopes=False)
        errors = validate(config, CommitRecord(type="feat", scope="api", subject="add x"))
        assert fields(errors) == ["scope"]

    def test_custom_scope_list(self, config):
        config = with_rules(
            config.model_copy(update={"scopes": (ScopeOption(value="core", name="core"),)}),
            allow_custom_scopes=False,
        )
        assert validate(config, CommitRecord(type="feat", scope="core", subject="add x")) == []


class TestSubjectRules:
    def test_subject_required(self, config):
        errors = validate(config, CommitRecord(type="feat", subject=""))
        assert fields(errors) == ["subject"]
        assert errors[0].message == "Subject is required"

    def test_empty_subject_allowed_when_not_required(self, config):
        config = with_rules(config, subject_required=False)
        assert validate(config, CommitRecord(type="feat", subject="")) == []

    def test_too_long_subject_reports_actual_length(self, config):
        subject = "a" * 80
        errors = validate(config, CommitRecord(type="feat", subject=subject))
        assert fields(errors) == ["subject"]
        assert "Maximum length is 72" in errors[0].message
        assert "(current: 80)" in errors[0].message

    def test_subject_at_max_length_is_valid(self, config):
        assert validate(config, CommitRecord(type="feat", subject="a" * 72)) == []

    def test_too_short_subject(self, config):
        config = with_rules(config, subject_min_length=10)
        errors = validate(config, CommitRecord(type="feat", subject="add x"))
        assert fields(errors) == ["subject"]
        assert "Minimum length is 10" in errors[0].message

    @pytest.mark.parametrize("subject", ["Add login", "1st attempt", "_private helper", "éclair support"])
    def test_subject_must_start_with_lowercase_ascii_letter(self, config, subject):
        errors = validate(config, CommitRecord(type="feat", subject=subject))
        assert [e.message for e in errors] == ["Subject should start with a lowercase letter"]

    def test_subject_must_not_end_with_period(self, config):
        errors = validate(config, CommitRecord(type="feat", subject="add login."))
        assert [e.message for e in errors] == ["Subject should not end with a period"]

    def test_lowercase_subject_without_period_has_no_style_errors(self, config):
        assert validate(config, CommitRecord(type="feat", subject="add login...x")) == []

    def test_all_four_subject_checks_fire_together(self, config):
        config = with_rules(config, subject_min_length=10, subject_max_length=3)
        errors = validate(config, CommitRecord(type="feat", subject="Abcd."))
        assert fields(errors) == ["subject"] * 4
        messages = [e.message for e in errors]
        assert "too short" in messages[0]
        assert "too long" in messages[1]
        assert "lowercase" in messages[2]
        assert "period" in messages[3]


class TestBodyRules:
    def test_body_optional_by_default(self, config):
        assert validate(config, CommitRecord(type="feat", subject="add x")) == []

    def test_body_required(self, config):
        config = with_rules(config, allow_empty_body=False)
        errors = validate(config, CommitRecord(type="feat", subject="add x"))
        assert fields(errors) == ["body"]
        assert errors[0].message == "Body is required"

    def test_breaking_record_is_exempt_from_body_requirement(self, config):
        config = with_rules(config, allow_empty_body=False)
        record = CommitRecord(type="feat", subject="add x", breaking=True, breaking_body="drops v1")
        assert validate(config, record) == []

    def test_long_body_line_names_line_number(self, config):
        record = CommitRecord(type="feat", subject="add X", body="line1\n" + "x" * 101)
        errors = validate(config, record)
        body_errors = [e for e in errors if e.field == "body"]
        assert len(body_errors) == 1
        assert "Body line 2 is too long" in body_errors[0].message
        assert "Maximum length is 100" in body_errors[0].message

    def test_one_error_per_long_line(self, config):
        config = with_rules(config, body_max_line_length=5)
        record = CommitRecord(type="feat", subject="add x", body="toolong\nok\nalso too long")
        errors = validate(config, record)
        assert [e.message.split(" is")[0] for e in errors] == ["Body line 1", "Body line 3"]


class TestBreakingRules:
    def test_breaking_without_description(self, config):
        record = CommitRecord(type="feat", subject="add retry logic", breaking=True)
        assert validate(config, record) == [
            ValidationError("breakingBody", "Breaking changes must have a description"),
        ]

    def test_breaking_body_ignored_when_not_breaking(self, config):
        record = CommitRecord(type="feat", subject="add x", breaking_body="unused")
        assert validate(config, record) == []


class TestOrdering:
    def test_errors_follow_rule_order(self, config):
        config = with_rules(config, scope_required=True, allow_empty_body=False)
        record = CommitRecord(type="nope", subject="Bad.", breaking=True)
        errors = validate(config, record)
        assert fields(errors) == ["type", "scope", "subject", "subject", "breakingBody"]

    def test_body_error_before_breaking_error(self, config):
        config = with_rules(config, body_max_line_length=3)
        record = CommitRecord(type="feat", subject="add x", body="long line", breaking=True)
        assert fields(validate(config, record)) == ["body", "breakingBody"]

    def test_validate_is_stable(self, config):
        record = CommitRecord(type="", scope="", subject="X.", body="y" * 200, breaking=True)
        assert validate(config, record) == validate(config, record)

    def test_rule_table_order(self):
        assert [rule.__name__ for rule in RULES] == [
            "_check_type",
            "_check_scope",
            "_check_subject",
            "_check_body",
            "_check_breaking",
        ]


class TestScenarioC:
    def test_uppercase_subject_with_required_body(self, config):
        config = with_rules(config, allow_empty_body=False)
        record = CommitRecord(type="feat", scope="api", subject="Add Endpoint")
        errors = validate(config, record)
        assert ValidationError("subject", "Subject should start with a lowercase letter") in errors
        assert ValidationError("body", "Body is required") in errors
