"""EquaçãoPro package bootstrap and public API surface."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _get_version

try:
    __version__ = _get_version("equacaopro")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"

from .completion import CompletionClient, TextGenerator
from .errors import ConfigurationError, DiagnosticError, RequestError
from .prompts import RESPONSE_SECTIONS, SYSTEM_INSTRUCTION, compose_prompt
from .questionnaire import QUESTIONS, Question
from .rendering import render_markdown
from .wizard import DiagnosticWizard, WizardPhase, WizardState

__all__ = [
    "__version__",
    "CompletionClient",
    "ConfigurationError",
    "DiagnosticError",
    "DiagnosticWizard",
    "QUESTIONS",
    "Question",
    "RESPONSE_SECTIONS",
    "RequestError",
    "SYSTEM_INSTRUCTION",
    "TextGenerator",
    "WizardPhase",
    "WizardState",
    "compose_prompt",
    "render_markdown",
]
