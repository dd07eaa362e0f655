from __future__ import annotations

import json
import logging
import sys
from enum import Enum
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from .defaults import PROMPT_MESSAGES_EN, default_config_data
from .exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".supercommitrc.json"
TOML_CONFIG_FILE_NAME = ".supercommit.toml"
CONFIG_SECTION = "supercommit"

# Per-directory lookup order when searching upwards from the working directory.
_SEARCH_FILES = (
    CONFIG_FILE_NAME,
    ".supercommitrc",
    TOML_CONFIG_FILE_NAME,
    "pyproject.toml",
    "package.json",
)


class EmojiPosition(Enum):
    BEFORE_TYPE = "before-type"
    AFTER_TYPE = "after-type"
    AFTER_SUBJECT = "after-subject"


class Language(Enum):
    EN = "en"
    TR = "tr"


class _Schema(BaseModel):
    """Frozen model read and written in the camelCase on-disk schema."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class CommitTypeOption(_Schema):
    value: StrictStr
    name: StrictStr
    description: StrictStr | None = None
    emoji: StrictStr | None = None


class ScopeOption(_Schema):
    value: StrictStr
    name: StrictStr
    description: StrictStr | None = None


class ValidationRules(_Schema):
    subject_max_length: StrictInt = Field(default=72, description="Maximum header subject length")
    subject_min_length: StrictInt = Field(default=1, description="Minimum header subject length")
    body_max_line_length: StrictInt = Field(default=100, description="Maximum length of each body line")
    type_required: StrictBool = True
    scope_required: StrictBool = False
    subject_required: StrictBool = True
    allow_custom_scopes: StrictBool = Field(
        default=True,
        description="Accept scopes that are not in the configured scope list",
    )
    allow_empty_body: StrictBool = True


class FormatTemplate(_Schema):
    use_emoji: StrictBool = False
    emoji_position: EmojiPosition = EmojiPosition.BEFORE_TYPE
    separator: StrictStr = Field(default=":", description="Text between type(scope) and the subject")
    line_breaks_between_sections: StrictInt = Field(
        default=1,
        ge=0,
        description="Newlines placed before body, breaking change and issues",
    )


class PromptMessages(_Schema):
    type: StrictStr = PROMPT_MESSAGES_EN["type"]
    scope: StrictStr = PROMPT_MESSAGES_EN["scope"]
    custom_scope: StrictStr = PROMPT_MESSAGES_EN["customScope"]
    subject: StrictStr = PROMPT_MESSAGES_EN["subject"]
    body: StrictStr = PROMPT_MESSAGES_EN["body"]
    breaking: StrictStr = PROMPT_MESSAGES_EN["breaking"]
    breaking_body: StrictStr = PROMPT_MESSAGES_EN["breakingBody"]
    issues: StrictStr = PROMPT_MESSAGES_EN["issues"]


class SuperCommitConfig(_Schema):
    types: tuple[CommitTypeOption, ...] = Field(min_length=1)
    scopes: tuple[ScopeOption, ...] | None = Field(
        default=None,
        description="Known scopes; None disables the scope whitelist",
    )
    validation: ValidationRules = Field(default_factory=ValidationRules)
    prompt_messages: PromptMessages = Field(default_factory=PromptMessages)
    format: FormatTemplate = Field(default_factory=FormatTemplate)
    language: Language = Language.EN

    @field_validator("types")
    @classmethod
    def unique_types(cls, types: tuple[CommitTypeOption, ...]) -> tuple[CommitTypeOption, ...]:
        seen: set[str] = set()
        for option in types:
            if option.value in seen:
                raise ValueError(f"Duplicate commit type '{option.value}'")
            seen.add(option.value)
        return types

    @property
    def type_values(self) -> list[str]:
        return [t.value for t in self.types]

    @property
    def scope_values(self) -> list[str]:
        return [s.value for s in self.scopes or ()]

    def find_type(self, value: str) -> CommitTypeOption | None:
        for option in self.types:
            if option.value == value:
                return option
        return None


def _describe(error: PydanticValidationError) -> str:
    problems = []
    for item in error.errors():
        where = ".".join(str(part) for part in item["loc"]) or "configuration"
        problems.append(f"{where}: {item['msg']}")
    return "; ".join(problems)


def parse_config(data: object) -> SuperCommitConfig:
    """Build a SuperCommitConfig from the on-disk schema, applying defaults.

    Raises:
        ConfigError: if the data violates the schema.
    """
    try:
        return SuperCommitConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError(_describe(e)) from e


def config_to_dict(config: SuperCommitConfig) -> dict:
    return config.model_dump(mode="json", by_alias=True, exclude_none=True)


def default_config(language: Language | str = Language.EN) -> SuperCommitConfig:
    if isinstance(language, Language):
        language = language.value
    return parse_config(default_config_data(language))


def _read_candidate(path: Path) -> dict | None:
    """Return the raw config held by *path*, or None if it holds none."""
    if path.name == "pyproject.toml":
        return tomllib.loads(path.read_text(encoding="utf-8")).get("tool", {}).get(CONFIG_SECTION)
    if path.name == "package.json":
        return json.loads(path.read_text(encoding="utf-8")).get(CONFIG_SECTION)
    if path.suffix == ".toml":
        return tomllib.loads(path.read_text(encoding="utf-8"))
    return json.loads(path.read_text(encoding="utf-8"))


class ConfigLoader:
    def __init__(self, cwd: Path | None = None) -> None:
        self._cwd = cwd
        self._cached: SuperCommitConfig | None = None
        self._source: Path | None = None

    @property
    def source(self) -> Path | None:
        """File the cached configuration was read from (None for defaults)."""
        return self._source

    def find_config_file(self) -> tuple[Path, dict] | None:
        start = (self._cwd or Path.cwd()).resolve()
        for directory in (start, *start.parents):
            for name in _SEARCH_FILES:
                candidate = directory / name
                if not candidate.is_file():
                    continue
                try:
                    raw = _read_candidate(candidate)
                except (OSError, ValueError) as e:
                    # json.JSONDecodeError and tomllib.TOMLDecodeError are ValueErrors
                    raise ConfigError(f"Cannot read {candidate}: {e}") from e
                if raw is not None:
                    return candidate, raw
        return None

    def load(self) -> SuperCommitConfig:
        if self._cached is not None:
            return self._cached

        config = None
        try:
            found = self.find_config_file()
            if found:
                path, raw = found
                config = parse_config(raw)
                self._source = path
                logger.debug("Loaded configuration from %s", path)
        except ConfigError as e:
            logger.warning("Invalid config file detected, using defaults: %s", e)

        if config is None:
            config = default_config()
            self._source = None
        self._cached = config
        return config

    def clear_cache(self) -> None:
        self._cached = None
        self._source = None

    @staticmethod
    def default_config(language: Language | str = Language.EN) -> SuperCommitConfig:
        return default_config(language)


_loader = ConfigLoader()


def load_config() -> SuperCommitConfig:
    return _loader.load()


def clear_cache() -> None:
    _loader.clear_cache()


def config_source() -> Path | None:
    return _loader.source


def write_config(path: Path, config: SuperCommitConfig) -> None:
    data = config_to_dict(config)
    if path.suffix == ".toml":
        path.write_bytes(tomli_w.dumps(data).encode())
    else:
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
