from __future__ import annotations

# Raw default configurations in the on-disk (camelCase) schema. They are parsed
# through config.parse_config (pydantic) so that defaults and files share one code path.

_TYPE_EMOJI = {
    "feat": "✨",
    "fix": "\U0001f41b",
    "docs": "\U0001f4da",
    "style": "\U0001f48e",
    "refactor": "\U0001f4e6",
    "perf": "\U0001f680",
    "test": "\U0001f6a8",
    "build": "\U0001f6e0️",
    "ci": "⚙️",
    "chore": "♻️",
    "revert": "\U0001f5d1️",
}

_DEFAULT_VALIDATION = {
    "subjectMaxLength": 72,
    "subjectMinLength": 1,
    "bodyMaxLineLength": 100,
    "typeRequired": True,
    "scopeRequired": False,
    "subjectRequired": True,
    "allowCustomScopes": True,
    "allowEmptyBody": True,
}

_DEFAULT_FORMAT = {
    "useEmoji": False,
    "emojiPosition": "before-type",
    "separator": ":",
    "lineBreaksBetweenSections": 1,
}

_TYPES_EN = [
    ("feat", "feat: A new feature", "Introduces a new feature to the codebase"),
    ("fix", "fix: A bug fix", "Patches a bug in your codebase"),
    ("docs", "docs: Documentation only changes", "Changes to documentation only"),
    (
        "style",
        "style: Changes that do not affect the meaning of the code",
        "Code style changes (white-space, formatting, missing semi-colons, etc)",
    ),
    (
        "refactor",
        "refactor: A code change that neither fixes a bug nor adds a feature",
        "Code refactoring without changing functionality",
    ),
    ("perf", "perf: A code change that improves performance", "Performance improvements"),
    ("test", "test: Adding missing tests or correcting existing tests", "Adding or updating tests"),
    (
        "build",
        "build: Changes that affect the build system or external dependencies",
        "Build system or dependency changes",
    ),
    ("ci", "ci: Changes to our CI configuration files and scripts", "Continuous integration changes"),
    (
        "chore",
        "chore: Other changes that don't modify src or test files",
        "Other changes that don't modify source or test files",
    ),
    ("revert", "revert: Reverts a previous commit", "Reverts a previous commit"),
]

_TYPES_TR = [
    ("feat", "feat: Yeni bir özellik", "Kod tabanına yeni bir özellik ekler"),
    ("fix", "fix: Hata düzeltme", "Kod tabanındaki bir hatayı düzeltir"),
    ("docs", "docs: Sadece dokümantasyon değişiklikleri", "Sadece dokümantasyon değişiklikleri"),
    (
        "style",
        "style: Kodun anlamını etkilemeyen değişiklikler",
        "Kod stili değişiklikleri (boşluk, formatlama, noktalı virgül, vb.)",
    ),
    (
        "refactor",
        "refactor: Hata düzeltmeyen ve özellik eklemeyen kod değişikliği",
        "İşlevselliği değiştirmeyen kod yeniden yapılandırması",
    ),
    ("perf", "perf: Performansı iyileştiren kod değişikliği", "Performans iyileştirmeleri"),
    ("test", "test: Eksik testleri ekleme veya mevcut testleri düzeltme", "Test ekleme veya güncelleme"),
    (
        "build",
        "build: Derleme sistemini veya dış bağımlılıkları etkileyen değişiklikler",
        "Derleme sistemi veya bağımlılık değişiklikleri",
    ),
    (
        "ci",
        "ci: CI yapılandırma dosyaları ve scriptlerinde değişiklikler",
        "Sürekli entegrasyon değişiklikleri",
    ),
    (
        "chore",
        "chore: Kaynak veya test dosyalarını değiştirmeyen diğer değişiklikler",
        "Kaynak veya test dosyalarını değiştirmeyen diğer değişiklikler",
    ),
    ("revert", "revert: Önceki bir commit'i geri alır", "Önceki bir commit'i geri alır"),
]

_SCOPES_EN = [
    ("api", "api: API related changes"),
    ("ui", "ui: User interface changes"),
    ("db", "db: Database related changes"),
    ("config", "config: Configuration changes"),
    ("deps", "deps: Dependency updates"),
]

_SCOPES_TR = [
    ("api", "api: API ile ilgili değişiklikler"),
    ("ui", "ui: Kullanıcı arayüzü değişiklikleri"),
    ("db", "db: Veritabanı ile ilgili değişiklikler"),
    ("config", "config: Yapılandırma değişiklikleri"),
    ("deps", "deps: Bağımlılık güncellemeleri"),
]

PROMPT_MESSAGES_EN = {
    "type": "Select the type of change that you're committing:",
    "scope": "Denote the SCOPE of this change (optional):",
    "customScope": "Enter a custom scope:",
    "subject": "Write a SHORT, IMPERATIVE tense description of the change:",
    "body": "Provide a LONGER description of the change (optional):",
    "breaking": "Are there any breaking changes?",
    "breakingBody": "Describe the breaking changes:",
    "issues": 'Add issue references (e.g. "fix #123", "re #456"):',
}

PROMPT_MESSAGES_TR = {
    "type": "Yaptığınız değişikliğin türünü seçin:",
    "scope": "Bu değişikliğin KAPSAMINI belirtin (opsiyonel):",
    "customScope": "Özel bir kapsam girin:",
    "subject": "Değişikliğin KISA, EMİR KİPİNDE bir açıklamasını yazın:",
    "body": "Değişikliğin DAHA UZUN bir açıklamasını yazın (opsiyonel):",
    "breaking": "Herhangi bir breaking change var mı?",
    "breakingBody": "Breaking change'leri açıklayın:",
    "issues": 'Issue referansları ekleyin (örn. "fix #123", "re #456"):',
}


def _build(language: str, types: list, scopes: list, prompt_messages: dict) -> dict:
    return {
        "language": language,
        "types": [
            {"value": value, "name": name, "description": description, "emoji": _TYPE_EMOJI[value]}
            for value, name, description in types
        ],
        "scopes": [{"value": value, "name": name} for value, name in scopes],
        "validation": dict(_DEFAULT_VALIDATION),
        "promptMessages": dict(prompt_messages),
        "format": dict(_DEFAULT_FORMAT),
    }


def default_config_data(language: str = "en") -> dict:
    if language == "tr":
        return _build("tr", _TYPES_TR, _SCOPES_TR, PROMPT_MESSAGES_TR)
    return _build("en", _TYPES_EN, _SCOPES_EN, PROMPT_MESSAGES_EN)
