"""State machine driving the five-step procrastination diagnostic.

The wizard moves through four phases::

    collecting(step) -> submitting -> succeeded(result) | failed(error)

``WizardState`` values are immutable; the transition functions return a new
state, or the same one when a guard rejects the transition. The
:class:`DiagnosticWizard` controller owns the only side effect, the single
call to the completion backend made while the state is ``submitting``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .completion import TextGenerator
from .errors import ConfigurationError, DiagnosticError
from .prompts import SYSTEM_INSTRUCTION, compose_prompt
from .questionnaire import QUESTION_KEYS, QUESTIONS, Question
from .rendering import missing_sections

LOG = logging.getLogger(__name__)

__all__ = [
    "FAILURE_MESSAGE",
    "DiagnosticWizard",
    "WizardPhase",
    "WizardState",
    "advance",
    "can_advance",
    "fail",
    "initial_state",
    "restart",
    "retreat",
    "succeed",
    "with_answer",
]

FAILURE_MESSAGE = "Ocorreu um erro ao gerar o diagnóstico. Tente novamente."
LAST_STEP = len(QUESTIONS) - 1


class WizardPhase(str, Enum):
    COLLECTING = "collecting"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class WizardState(BaseModel):
    model_config = ConfigDict(frozen=True)

    phase: WizardPhase = WizardPhase.COLLECTING
    step: int = 0
    answers: dict[str, str] = Field(default_factory=dict)
    result: str | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _check_variant(self) -> "WizardState":
        if not 0 <= self.step <= LAST_STEP:
            raise ValueError(f"step must be within [0, {LAST_STEP}], got {self.step}")
        unknown = set(self.answers) - set(QUESTION_KEYS)
        if unknown:
            raise ValueError(f"unknown answer keys: {sorted(unknown)}")
        if (self.result is not None) != (self.phase is WizardPhase.SUCCEEDED):
            raise ValueError("result is present exactly when the phase is 'succeeded'")
        if (self.error is not None) != (self.phase is WizardPhase.FAILED):
            raise ValueError("error is present exactly when the phase is 'failed'")
        return self

    @property
    def question(self) -> Question:
        return QUESTIONS[self.step]

    @property
    def current_answer(self) -> str:
        return self.answers.get(self.question.key, "")

    @property
    def is_last_step(self) -> bool:
        return self.step == LAST_STEP


def _replace(state: WizardState, **updates: Any) -> WizardState:
    data = state.model_dump()
    data.update(updates)
    return WizardState.model_validate(data)


def initial_state() -> WizardState:
    return WizardState()


def can_advance(state: WizardState) -> bool:
    """Return ``True`` when the advance/submit action is enabled."""

    return state.phase is WizardPhase.COLLECTING and bool(state.current_answer.strip())


def with_answer(state: WizardState, text: str) -> WizardState:
    """Record ``text`` as the answer to the current question.

    Unchanged text, including an empty textarea on an unanswered question,
    returns ``state`` itself so no empty key enters the answer set.
    """

    if state.phase is not WizardPhase.COLLECTING:
        return state
    if state.current_answer == text:
        return state
    answers = dict(state.answers)
    answers[state.question.key] = text
    return _replace(state, answers=answers)


def advance(state: WizardState) -> WizardState:
    """Move to the next question, or start submission from the last one."""

    if not can_advance(state):
        return state
    if state.is_last_step:
        return _replace(state, phase=WizardPhase.SUBMITTING, result=None, error=None)
    return _replace(state, step=state.step + 1)


def retreat(state: WizardState) -> WizardState:
    if state.phase is not WizardPhase.COLLECTING or state.step == 0:
        return state
    return _replace(state, step=state.step - 1)


def restart(state: WizardState) -> WizardState:
    """Return a clean wizard; ignored while a submission is outstanding."""

    if state.phase is WizardPhase.SUBMITTING:
        return state
    return initial_state()


def succeed(state: WizardState, text: str) -> WizardState:
    if state.phase is not WizardPhase.SUBMITTING:
        return state
    return _replace(state, phase=WizardPhase.SUCCEEDED, result=text, error=None)


def fail(state: WizardState, message: str) -> WizardState:
    if state.phase is not WizardPhase.SUBMITTING:
        return state
    return _replace(state, phase=WizardPhase.FAILED, result=None, error=message or FAILURE_MESSAGE)


class DiagnosticWizard:
    """Holds a :class:`WizardState` and performs the submission call."""

    def __init__(
        self,
        generator: TextGenerator,
        state: WizardState | None = None,
        *,
        system_instruction: str = SYSTEM_INSTRUCTION,
    ) -> None:
        self._generator = generator
        self._state = state or initial_state()
        self._system_instruction = system_instruction
        self._in_flight = False

    @property
    def state(self) -> WizardState:
        return self._state

    def can_advance(self) -> bool:
        return can_advance(self._state)

    def answer(self, text: str) -> WizardState:
        self._state = with_answer(self._state, text)
        return self._state

    def advance(self) -> WizardState:
        self._state = advance(self._state)
        return self._state

    def retreat(self) -> WizardState:
        self._state = retreat(self._state)
        return self._state

    def restart(self) -> WizardState:
        self._state = restart(self._state)
        return self._state

    def submit(self) -> WizardState:
        """Run the pending completion call, at most once per submission."""

        state = self._state
        if state.phase is not WizardPhase.SUBMITTING:
            return state
        if self._in_flight:
            LOG.warning("Submission already in flight; ignoring duplicate request")
            return state

        prompt = compose_prompt(state.answers)
        self._in_flight = True
        LOG.info("Submitting diagnostic (%d characters of prompt)", len(prompt))
        try:
            text = self._generator.generate(prompt, self._system_instruction)
        except ConfigurationError as exc:
            LOG.error("Diagnostic not submitted, configuration incomplete: %s", exc)
            self._state = fail(state, FAILURE_MESSAGE)
        except DiagnosticError as exc:
            LOG.error("Diagnostic request failed: %s", exc, exc_info=exc)
            self._state = fail(state, FAILURE_MESSAGE)
        else:
            absent = missing_sections(text)
            if absent:
                LOG.warning("Response is missing sections: %s", ", ".join(absent))
            self._state = succeed(state, text)
            LOG.info("Diagnostic generated (%d characters)", len(text))
        finally:
            self._in_flight = False
        return self._state
