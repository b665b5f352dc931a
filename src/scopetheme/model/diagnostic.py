"""Diagnostic model: structured messages about a theme definition."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a theme's rules.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        index: Position of the offending entry in the theme's settings array.
        name: The offending rule's name, if it has one.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    index: int | None = None
    name: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.index is not None:
            location = f" [entry={self.index}]"
            if self.name:
                location = f" [entry={self.index} name={self.name!r}]"
        return f"{self.severity.value}{location}: {self.message}"
