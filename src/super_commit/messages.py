from __future__ import annotations

from .config import Language

# Display texts that are not part of PromptMessages. Validation error messages
# stay English; only the surrounding presentation is localized.
_MESSAGES: dict[Language, dict[str, str]] = {
    Language.EN: {
        "interactive_title": "📝 Super Commit - Interactive Mode",
        "no_scope": "None (no scope)",
        "custom_scope": "[ Enter custom scope ]",
        "scope_empty": "Scope cannot be empty",
        "scope_invalid": "Scope can only contain lowercase letters, numbers, and hyphens",
        "choice_invalid": "Please choose one of the listed options",
        "subject_required": "Subject is required",
        "subject_too_short": "Subject must be at least {min} characters",
        "subject_too_long": "Subject must be at most {max} characters (current: {length})",
        "subject_period": "Subject should not end with a period",
        "want_body": "Do you want to add a longer description?",
        "breaking_required": "Breaking change description is required",
        "preview_title": "📋 Commit Message Preview:",
        "confirm_commit": "Proceed with this commit message?",
        "errors_title": "❌ Validation Errors:",
        "staged_title": "📝 Staged Changes:",
        "no_staged": "⚠️  No staged changes found.",
        "no_staged_tip": 'Tip: Use "git add" to stage your changes first.',
        "commit_cancelled": "❌ Commit cancelled.",
        "commit_created": "✅ Commit created successfully!",
    },
    Language.TR: {
        "interactive_title": "📝 Super Commit - İnteraktif Mod",
        "no_scope": "Yok (scope yok)",
        "custom_scope": "[ Özel scope gir ]",
        "scope_empty": "Scope boş olamaz",
        "scope_invalid": "Scope sadece küçük harf, rakam ve tire içerebilir",
        "choice_invalid": "Lütfen listelenen seçeneklerden birini seçin",
        "subject_required": "Açıklama zorunludur",
        "subject_too_short": "Açıklama en az {min} karakter olmalıdır",
        "subject_too_long": "Açıklama en fazla {max} karakter olabilir (şu an: {length})",
        "subject_period": "Açıklama nokta ile bitmemelidir",
        "want_body": "Detaylı bir açıklama eklemek ister misiniz?",
        "breaking_required": "Breaking change açıklaması zorunludur",
        "preview_title": "📋 Commit Mesajı Önizlemesi:",
        "confirm_commit": "Bu commit mesajı ile devam edilsin mi?",
        "errors_title": "❌ Doğrulama Hataları:",
        "staged_title": "📝 Hazırlanan Değişiklikler:",
        "no_staged": "⚠️  Hazırlanmış değişiklik bulunamadı.",
        "no_staged_tip": 'İpucu: Değişikliklerinizi önce "git add" ile hazırlayın.',
        "commit_cancelled": "❌ Commit iptal edildi.",
        "commit_created": "✅ Commit başarıyla oluşturuldu!",
    },
}


def t(language: Language, key: str, **kwargs: object) -> str:
    text = _MESSAGES.get(language, _MESSAGES[Language.EN])[key]
    return text.format(**kwargs) if kwargs else text
