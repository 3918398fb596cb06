"""Non-fatal parsing warnings and the sinks that receive them.

Parsers never raise on malformed JSON. They report what they had to skip to
an injected WarningLogger and return None (or drop the element) instead.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol

logger = logging.getLogger(__name__)


class WarningKind(str, Enum):
    """Kinds of parsing warnings."""

    MISSING_REQUIRED_FIELD = "missing-required-field"  # Required field absent or uninterpretable
    MALFORMED_VALUE = "malformed-value"  # Value of an unexpected JSON type, skipped


class Severity(str, Enum):
    """How much a warning affects the parsed result."""

    MINOR = "minor"  # Cosmetic, no data lost
    MODERATE = "moderate"  # Optional data lost
    MAJOR = "major"  # An element could not be parsed at all


@dataclass(frozen=True)
class JsonWarning:
    """Warning raised while parsing a JSON value into a model."""

    kind: WarningKind
    model: type
    message: str
    data: Any = None
    severity: Severity = Severity.MAJOR

    def __str__(self) -> str:
        return f"[{self.severity.value}] {self.model.__name__}: {self.message}"


class WarningLogger(Protocol):
    """Receives parsing warnings. Implementations must not raise."""

    def log(self, warning: JsonWarning) -> None: ...


class ListWarningLogger:
    """Collects warnings in the order they are logged."""

    def __init__(self) -> None:
        self.warnings: list[JsonWarning] = []

    def log(self, warning: JsonWarning) -> None:
        self.warnings.append(warning)

    def __len__(self) -> int:
        return len(self.warnings)


# Severity -> logging level
_LEVELS = {
    Severity.MINOR: logging.DEBUG,
    Severity.MODERATE: logging.INFO,
    Severity.MAJOR: logging.WARNING,
}


class LoggingWarningLogger:
    """Forwards warnings to the logging module."""

    def __init__(self, log: Optional[logging.Logger] = None, context: Optional[str] = None) -> None:
        self.logger = log or logger
        self.context = context

    def log(self, warning: JsonWarning) -> None:
        prefix = f"{self.context}: " if self.context else ""
        self.logger.log(_LEVELS[warning.severity], f"{prefix}{warning}")
