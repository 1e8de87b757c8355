"""Prompt composition and the fixed system instruction sent to the model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from jinja2 import Environment, PackageLoader, StrictUndefined

from .questionnaire import QUESTIONS

__all__ = [
    "EQUATION",
    "PRINCIPLES",
    "RESPONSE_SECTIONS",
    "RESTRICTIONS",
    "ResponseSection",
    "SYSTEM_INSTRUCTION",
    "compose_prompt",
]

PACKAGE_NAME = "equacaopro"

EQUATION = "Procrastinação = Impulsividade ÷ [Expectativa × Valor × (1 ÷ Tempo)]"


@dataclass(frozen=True, slots=True)
class ResponseSection:
    """One block of the four-part answer the model must produce."""

    key: str
    heading: str
    title: str
    guidance: str
    example: str
    summary: str


RESPONSE_SECTIONS: tuple[ResponseSection, ...] = (
    ResponseSection(
        key="diagnostico",
        heading="DIAGNÓSTICO",
        title="Diagnóstico",
        guidance=(
            "Qual é o problema raiz com base na equação? "
            "(Seja direto e use os dados do usuário para justificar)."
        ),
        example=(
            "Sua procrastinação parece vir de uma **baixa Expectativa** de sucesso, pois você "
            "mencionou que não tem profundidade na prática, o que gera medo de errar e perder dinheiro."
        ),
        summary="Respondemos perguntas específicas sobre seu contexto e tarefa.",
    ),
    ResponseSection(
        key="equacao",
        heading="EQUAÇÃO",
        title="Equação",
        guidance=(
            "Como a fórmula se aplica ao problema do usuário? (Explique qual variável é o "
            "principal problema: Expectativa baixa, Valor baixo, ou Impulsividade alta / Prazo distante)."
        ),
        example=(
            "Sua **Expectativa** (confiança) está em 6/10, o que diminui drasticamente o denominador "
            "da equação e aumenta a procrastinação. Embora o **Valor** seja alto, a incerteza sobre "
            "sua capacidade de alcançá-lo o paralisa."
        ),
        summary="Analisamos suas respostas através da fórmula científica.",
    ),
    ResponseSection(
        key="recomendacao",
        heading="RECOMENDAÇÃO",
        title="Recomendação",
        guidance=(
            "Qual variável da equação devemos ajustar e como? "
            "(Seja prático e focado na variável diagnosticada)."
        ),
        example=(
            "Precisamos aumentar sua **Expectativa**. A melhor forma de fazer isso não é com "
            "pensamento positivo, mas ganhando experiência prática controlada para reduzir o medo do fracasso."
        ),
        summary="Identificamos qual variável intervir para máximo impacto.",
    ),
    ResponseSection(
        key="acao",
        heading="AÇÃO",
        title="Ação",
        guidance=(
            "Qual é a primeira ação concreta e pequena (estilo SMART) que o usuário pode tomar agora? "
            "(Deve ser algo que pode ser feito em menos de 30 minutos)."
        ),
        example=(
            "Crie uma campanha de teste com um orçamento mínimo (ex: R$10) em uma plataforma. "
            "O objetivo **não é ter lucro**, mas sim completar o ciclo de criação e publicação. "
            "Isso vai construir sua confiança e gerar dados reais para análise, aumentando sua "
            "**Expectativa** para o próximo passo."
        ),
        summary="Recebe passos concretos e mensuráveis para executar agora.",
    ),
)

PRINCIPLES: tuple[str, ...] = (
    "Use os dados fornecidos pelo usuário para o diagnóstico.",
    "Use dados concretos e a equação, não motivação genérica.",
    "Personalize recomendações para cada usuário.",
    "Seja científico, não místico.",
)

RESTRICTIONS: tuple[str, ...] = (
    'Nunca prometa uma "solução mágica".',
    "Nunca ignore barreiras reais que o usuário mencionar.",
    "Nunca seja moralista sobre procrastinação.",
    "Sempre siga a ESTRUTURA DE RESPOSTA PADRÃO.",
    "Mantenha a resposta concisa e focada nos 4 pontos.",
)


@lru_cache(maxsize=1)
def _environment() -> Environment:
    return Environment(
        loader=PackageLoader(PACKAGE_NAME, "templates"),
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def _render_system_instruction() -> str:
    template = _environment().get_template("system_instruction.txt.j2")
    return template.render(
        equation=EQUATION,
        principles=PRINCIPLES,
        sections=RESPONSE_SECTIONS,
        restrictions=RESTRICTIONS,
    )


SYSTEM_INSTRUCTION: str = _render_system_instruction()


def compose_prompt(answers: Mapping[str, str]) -> str:
    """Render the user prompt embedding every answer in catalog order.

    Raises :class:`KeyError` when an answer for one of the questions is missing.
    """

    items = [
        {"label": question.prompt_label, "text": answers[question.key].strip()}
        for question in QUESTIONS
    ]
    template = _environment().get_template("diagnostic_prompt.txt.j2")
    return template.render(answers=items)
