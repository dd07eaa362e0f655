from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CommitRecord:
    type: str
    subject: str
    scope: str | None = None
    body: str | None = None
    breaking: bool = False
    breaking_body: str | None = None
    issues: str | None = None


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"
