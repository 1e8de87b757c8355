"""Static copy for the landing view."""

from __future__ import annotations

from dataclasses import dataclass

from equacaopro.prompts import RESPONSE_SECTIONS, ResponseSection

BRAND = "EquaçãoPro"
BADGE = "Baseado em ciência"
HEADLINE = "Supere a Procrastinação"
TAGLINE = (
    "Um assistente científico que diagnostica e resolve seu problema de procrastinação "
    "usando dados concretos, não motivação genérica."
)
TRUST_BADGES: tuple[str, ...] = (
    "Método científico validado",
    "Sem jargão motivacional",
    "Ações práticas e mensuráveis",
)
VARIABLES_INTRO = (
    "A procrastinação não é preguiça. É uma equação matemática que você pode controlar."
)
VARIABLES_KEY = (
    "**A chave:** Aumentar Expectativa e Valor, reduzir Impulsividade, "
    "e criar urgência saudável diminuindo o Tempo percebido."
)
HOW_IT_WORKS_INTRO = (
    "Quatro passos baseados em ciência comportamental, não em motivação superficial."
)
QUOTE = (
    '"A procrastinação é uma equação. Mude as variáveis e você muda o resultado." '
    "— Piers Steel, PhD"
)
FOOTER_LEFT = f"**{BRAND}** | Baseado na pesquisa científica de Piers Steel"
FOOTER_RIGHT = f"© 2024 {BRAND} Assistant. MVP 1.0 - Diagnóstico Científico de Procrastinação."
HOW_IT_WORKS_ANCHOR = "como-funciona"


@dataclass(frozen=True, slots=True)
class EquationVariable:
    name: str
    description: str
    increases: bool
    icon: str
    color: str

    @property
    def effect(self) -> str:
        return "↑ Aumenta procrastinação" if self.increases else "↓ Reduz procrastinação"


VARIABLES: tuple[EquationVariable, ...] = (
    EquationVariable(
        "Impulsividade", "Sua tendência a distrações e gratificação imediata.", True, "⚡", "#e11d48"
    ),
    EquationVariable(
        "Expectativa", "Sua confiança de que conseguirá completar a tarefa.", False, "🎯", "#0d9488"
    ),
    EquationVariable("Valor", "Quão recompensadora é a tarefa para você.", False, "💎", "#d97706"),
    EquationVariable("Tempo", "Quanto tempo até o prazo final.", True, "⏳", "#0284c7"),
)

_VARIABLE_COLORS = {variable.name: variable.color for variable in VARIABLES}

STEP_ICONS = {"diagnostico": "🩺", "equacao": "🧮", "recomendacao": "🧭", "acao": "🚀"}


def how_it_works() -> tuple[tuple[str, ResponseSection], ...]:
    """Return the numbered steps, one per response section."""

    return tuple((f"{index:02d}", section) for index, section in enumerate(RESPONSE_SECTIONS, 1))


def _tint(name: str) -> str:
    return f'<span style="color:{_VARIABLE_COLORS[name]}">{name}</span>'


def equation_html() -> str:
    """The procrastination equation with each variable in its colour."""

    procrastination = '<span style="color:#e11d48">Procrastinação</span>'
    return (
        f"{procrastination} = {_tint('Impulsividade')} ÷ "
        f"[{_tint('Expectativa')} × {_tint('Valor')} × (1 ÷ {_tint('Tempo')})]"
    )
