from __future__ import annotations


class SuperCommitError(Exception):
    """Base exception for super-commit."""


class ConfigError(SuperCommitError):
    """Configuration file is malformed or violates the schema."""


class HookError(SuperCommitError):
    """Hook installation or removal failed."""
