"""Streamlit entry point: view selector, wizard callbacks and submission."""

from __future__ import annotations

import logging
from functools import lru_cache

import streamlit as st

from equacaopro.boot import configure_logging
from equacaopro.completion import CompletionClient, TextGenerator
from equacaopro.runtime_config import load_runtime_settings
from equacaopro.wizard import DiagnosticWizard, WizardPhase

from .. import log_error
from . import views
from .state import (
    View,
    answer_widget_key,
    clear_answer_widgets,
    get_error_id,
    get_state,
    get_view,
    remember_error_id,
    reset_state,
    save_state,
    seed_answer_widget,
    set_view,
)

LOG = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _bootstrap_logging() -> int:
    return configure_logging(level=load_runtime_settings().log_level)


def build_generator() -> TextGenerator:
    """Return the completion backend used for submissions."""

    return CompletionClient()


def _wizard() -> DiagnosticWizard:
    return DiagnosticWizard(build_generator(), get_state(st.session_state))


def _current_input(wizard: DiagnosticWizard) -> str:
    key = answer_widget_key(wizard.state.question.key)
    return str(st.session_state.get(key) or "")


# ----------------------------------------------------------------------
# Callbacks, executed before the script body on the next run
def _start_diagnostic() -> None:
    reset_state(st.session_state)
    set_view(st.session_state, View.DIAGNOSTIC)


def _back_to_landing() -> None:
    reset_state(st.session_state)
    set_view(st.session_state, View.LANDING)


def _record_answer() -> None:
    wizard = _wizard()
    wizard.answer(_current_input(wizard))
    save_state(st.session_state, wizard.state)


def _advance() -> None:
    wizard = _wizard()
    wizard.answer(_current_input(wizard))
    before = wizard.state
    after = wizard.advance()
    if after is before:
        LOG.debug("Advance ignored on step %d: empty answer", before.step)
    save_state(st.session_state, after)


def _retreat() -> None:
    wizard = _wizard()
    wizard.answer(_current_input(wizard))
    save_state(st.session_state, wizard.retreat())


def _restart() -> None:
    wizard = _wizard()
    state = wizard.restart()
    clear_answer_widgets(st.session_state)
    save_state(st.session_state, state)


# ----------------------------------------------------------------------
# Views
def _render_collecting(wizard: DiagnosticWizard) -> None:
    state = wizard.state
    views.render_wizard_header(state, on_back=_back_to_landing)
    key = seed_answer_widget(st.session_state, state)
    text = views.render_question_card(state, key, on_answer=_record_answer)
    state = save_state(st.session_state, wizard.answer(text))
    views.render_navigation(
        state,
        enabled=wizard.can_advance(),
        on_retreat=_retreat,
        on_advance=_advance,
    )


def _run_submission(wizard: DiagnosticWizard) -> None:
    placeholder = st.empty()
    with placeholder.container():
        views.render_loading()
        with st.spinner("O assistente está gerando seu diagnóstico..."):
            # Any st call may raise a pending rerun; persist the outcome first.
            save_state(st.session_state, wizard.submit())
    placeholder.empty()


def _failure_id(wizard: DiagnosticWizard) -> str | None:
    state = wizard.state
    if state.phase is not WizardPhase.FAILED or state.error is None:
        return None
    error_id = get_error_id(st.session_state)
    if error_id is None:
        error_id = remember_error_id(st.session_state, log_error(state.error, logger=LOG))
    return error_id


def _render_diagnostic() -> None:
    wizard = _wizard()
    if wizard.state.phase is WizardPhase.SUBMITTING:
        _run_submission(wizard)

    if wizard.state.phase is WizardPhase.COLLECTING:
        _render_collecting(wizard)
    else:
        views.render_result(
            wizard.state,
            error_id=_failure_id(wizard),
            on_back=_back_to_landing,
            on_restart=_restart,
        )


def main() -> None:
    _bootstrap_logging()
    st.set_page_config(page_title="EquaçãoPro · Diagnóstico de Procrastinação", page_icon="🧩")
    views.inject_styles()

    if get_view(st.session_state) is View.LANDING:
        views.render_landing(on_start=_start_diagnostic)
    else:
        _render_diagnostic()


__all__ = ["build_generator", "main"]
