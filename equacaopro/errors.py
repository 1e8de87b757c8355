"""Exception types raised by the diagnostic core."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DiagnosticError", "ConfigurationError", "RequestError"]


class DiagnosticError(Exception):
    """Base class for failures surfaced at the submission boundary."""


class ConfigurationError(DiagnosticError):
    """Raised when the completion credential is missing at call time."""


@dataclass(eq=False, slots=True)
class RequestError(DiagnosticError):
    """Failure of the outbound completion call."""

    message: str
    status: int | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        if self.status is None:
            return self.message
        return f"{self.message} (HTTP {self.status})"
