"""Streamlit view helpers for the diagnostic app."""

from __future__ import annotations

from collections.abc import Callable

import streamlit as st

from equacaopro.questionnaire import QUESTIONS
from equacaopro.rendering import render_markdown
from equacaopro.wizard import WizardState

from .. import show_error
from . import content

Callback = Callable[[], None]

EQUATION_NOTE = (
    "Cada pergunta mapeia uma variável da Equação da Procrastinação de Piers Steel. "
    "Com suas respostas, identificaremos qual variável está causando sua procrastinação "
    "e forneceremos ações concretas e personalizadas."
)
EMPTY_ANSWER_HINT = "🔥 Escreva pelo menos uma frase completa para continuar."
HONESTY_HINT = "Seja honesto e específico. Quanto mais detalhes, melhor o diagnóstico."


def inject_styles() -> None:
    st.markdown(
        """
        <style>
        .equation-box {
            font-family: 'JetBrains Mono', 'SFMono-Regular', monospace;
            font-size: 1.15rem;
            padding: 1rem 1.25rem;
            border-radius: 0.75rem;
            border: 1px solid #e2e8f0;
            background: rgba(255, 255, 255, 0.7);
        }
        .effect-up { color: #be123c; font-weight: 600; }
        .effect-down { color: #0f766e; font-weight: 600; }
        </style>
        """,
        unsafe_allow_html=True,
    )


def render_landing(on_start: Callback) -> None:
    st.caption(f"🧩 **{content.BRAND}** · {content.BADGE}")
    st.title(content.HEADLINE)

    st.markdown("**A Equação da Procrastinação**")
    st.markdown(
        f'<div class="equation-box">{content.equation_html()}</div>', unsafe_allow_html=True
    )
    st.write(content.TAGLINE)

    cta, secondary = st.columns(2)
    cta.button(
        "Começar Diagnóstico →",
        key="start_diagnostic",
        type="primary",
        on_click=on_start,
        use_container_width=True,
    )
    secondary.markdown(f"[Como Funciona](#{content.HOW_IT_WORKS_ANCHOR})")
    st.caption("   ".join(f"✅ {badge}" for badge in content.TRUST_BADGES))

    st.divider()
    st.header("Entenda as Variáveis", anchor="variaveis")
    st.write(content.VARIABLES_INTRO)
    for row_start in range(0, len(content.VARIABLES), 2):
        columns = st.columns(2)
        for column, variable in zip(columns, content.VARIABLES[row_start : row_start + 2]):
            with column.container(border=True):
                st.subheader(f"{variable.icon} {variable.name}")
                st.write(variable.description)
                css = "effect-up" if variable.increases else "effect-down"
                st.markdown(
                    f'<span class="{css}">{variable.effect}</span>', unsafe_allow_html=True
                )
    st.info(content.VARIABLES_KEY)

    st.divider()
    st.header("Como Funciona", anchor=content.HOW_IT_WORKS_ANCHOR)
    st.write(content.HOW_IT_WORKS_INTRO)
    steps = content.how_it_works()
    for column, (number, section) in zip(st.columns(len(steps)), steps):
        with column.container(border=True):
            st.caption(number)
            st.subheader(f"{content.STEP_ICONS.get(section.key, '')} {section.title}")
            st.write(section.summary)
    st.markdown(f"*{content.QUOTE}*")

    st.divider()
    left, right = st.columns(2)
    left.caption(content.FOOTER_LEFT)
    right.caption(content.FOOTER_RIGHT)


def render_wizard_header(state: WizardState, on_back: Callback) -> None:
    back, brand, counter = st.columns([1, 2, 1])
    back.button("← Voltar", key="wizard_back_to_landing", on_click=on_back)
    brand.markdown(f"🧩 **{content.BRAND}**")
    counter.markdown(f"**{state.step + 1}/{len(QUESTIONS)}**")


def render_question_card(state: WizardState, answer_key: str, on_answer: Callback) -> str:
    """Render the current question and return the text typed so far."""

    question = state.question
    with st.container(border=True):
        st.subheader(f"{question.icon} {question.title}")
        st.caption(question.subtitle)
        text = st.text_area(
            question.title,
            key=answer_key,
            placeholder=question.placeholder,
            height=150,
            on_change=on_answer,
            label_visibility="collapsed",
        )
        st.caption(HONESTY_HINT)
    return text or ""


def render_navigation(
    state: WizardState,
    *,
    enabled: bool,
    on_retreat: Callback,
    on_advance: Callback,
) -> None:
    previous, following = st.columns(2)
    previous.button(
        "Anterior",
        key="retreat",
        disabled=state.step == 0,
        on_click=on_retreat,
        use_container_width=True,
    )
    following.button(
        "Gerar Diagnóstico" if state.is_last_step else "Próxima",
        key="advance",
        type="primary",
        disabled=not enabled,
        on_click=on_advance,
        use_container_width=True,
    )
    if not enabled:
        st.markdown(f":orange[{EMPTY_ANSWER_HINT}]")
    st.info(EQUATION_NOTE, icon="ℹ️")


def render_loading() -> None:
    st.header("Analisando suas respostas...")
    st.write("O assistente está aplicando a Equação da Procrastinação ao seu caso.")


def render_result(
    state: WizardState,
    *,
    error_id: str | None,
    on_back: Callback,
    on_restart: Callback,
) -> None:
    st.button("← Voltar ao Início", key="result_back_to_landing", on_click=on_back)
    st.title("Seu Diagnóstico Científico")
    st.caption("Aqui está a análise da sua procrastinação e um plano de ação concreto.")

    if state.result:
        html = render_markdown(state.result)
        st.markdown(html, unsafe_allow_html=True)
    if state.error and error_id:
        show_error(state.error, error_id)

    st.button(
        "Começar Novo Diagnóstico",
        key="restart_diagnostic",
        type="primary",
        on_click=on_restart,
    )
