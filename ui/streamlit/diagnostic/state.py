"""Session-state helpers for the diagnostic Streamlit app."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Mapping, MutableMapping

from pydantic import ValidationError

from equacaopro.wizard import WizardPhase, WizardState, initial_state

LOG = logging.getLogger(__name__)

SESSION_KEY = "diagnostic_state"
VIEW_KEY = "active_view"
ANSWER_KEY_PREFIX = "diagnostic_answer_"
ERROR_ID_KEY = "diagnostic_error_id"


class View(str, Enum):
    LANDING = "landing"
    DIAGNOSTIC = "diagnostic"


def get_state(store: MutableMapping[str, Any]) -> WizardState:
    raw = store.get(SESSION_KEY)
    if isinstance(raw, WizardState):
        return raw
    if isinstance(raw, Mapping):
        try:
            return WizardState.model_validate(raw)
        except ValidationError:
            LOG.warning("Discarding invalid wizard state from session")
    state = initial_state()
    store[SESSION_KEY] = state.model_dump(mode="json")
    return state


def save_state(store: MutableMapping[str, Any], state: WizardState) -> WizardState:
    store[SESSION_KEY] = state.model_dump(mode="json")
    if state.phase is not WizardPhase.FAILED:
        store.pop(ERROR_ID_KEY, None)
    return state


def get_error_id(store: MutableMapping[str, Any]) -> str | None:
    """Return the id the current failure was logged under, if it was logged."""

    value = store.get(ERROR_ID_KEY)
    return value if isinstance(value, str) and value else None


def remember_error_id(store: MutableMapping[str, Any], error_id: str) -> str:
    store[ERROR_ID_KEY] = error_id
    return error_id


def answer_widget_key(question_key: str) -> str:
    return f"{ANSWER_KEY_PREFIX}{question_key}"


def seed_answer_widget(store: MutableMapping[str, Any], state: WizardState) -> str:
    """Make sure the textarea of the current question starts from the stored answer.

    Streamlit drops widget keys for widgets that were not rendered in the
    previous run, so the stored answer is copied back before rendering.
    """

    key = answer_widget_key(state.question.key)
    if key not in store:
        store[key] = state.current_answer
    return key


def clear_answer_widgets(store: MutableMapping[str, Any]) -> None:
    for key in [key for key in store if str(key).startswith(ANSWER_KEY_PREFIX)]:
        del store[key]


def reset_state(store: MutableMapping[str, Any]) -> WizardState:
    clear_answer_widgets(store)
    return save_state(store, initial_state())


def get_view(store: MutableMapping[str, Any]) -> View:
    raw = store.get(VIEW_KEY)
    try:
        return View(raw) if raw is not None else View.LANDING
    except ValueError:
        return View.LANDING


def set_view(store: MutableMapping[str, Any], view: View) -> View:
    store[VIEW_KEY] = view.value
    return view


__all__ = [
    "ANSWER_KEY_PREFIX",
    "ERROR_ID_KEY",
    "SESSION_KEY",
    "VIEW_KEY",
    "View",
    "answer_widget_key",
    "clear_answer_widgets",
    "get_error_id",
    "get_state",
    "get_view",
    "remember_error_id",
    "reset_state",
    "save_state",
    "seed_answer_widget",
    "set_view",
]
