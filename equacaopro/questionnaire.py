"""The fixed five-question catalog of the procrastination diagnostic."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Question", "QUESTIONS", "QUESTION_KEYS"]


@dataclass(frozen=True, slots=True)
class Question:
    key: str
    title: str
    subtitle: str
    placeholder: str
    prompt_label: str
    icon: str


QUESTIONS: tuple[Question, ...] = (
    Question(
        key="tarefa",
        title="Qual tarefa você está procrastinando?",
        subtitle='Seja específico. Exemplo: "Criar apresentação de vendas para cliente X"',
        placeholder="Descreva a tarefa em detalhes...",
        prompt_label="Tarefa",
        icon="💬",
    ),
    Question(
        key="expectativa",
        title="Qual sua confiança de conseguir completar?",
        subtitle="De 0 a 10, quão capaz você se sente para fazer isso? Por quê?",
        placeholder='Exemplo: "6/10 - Tenho conhecimento, mas falta prática com a ferramenta..."',
        prompt_label="Expectativa (Confiança)",
        icon="🎯",
    ),
    Question(
        key="valor",
        title="Qual o valor/recompensa desta tarefa?",
        subtitle="O que você ganha completando? Como isso ajuda seus objetivos?",
        placeholder='Exemplo: "Fechar contrato de R$50k, avançar na carreira, reduzir ansiedade..."',
        prompt_label="Valor (Recompensa)",
        icon="💎",
    ),
    Question(
        key="tempo",
        title="Quando é o prazo? Qual sua relação com ele?",
        subtitle="Data limite e como você se sente sobre esse prazo.",
        placeholder='Exemplo: "Sexta-feira próxima. Parece distante, mas sei que é pouco tempo..."',
        prompt_label="Tempo (Prazo)",
        icon="⏳",
    ),
    Question(
        key="impulsividade",
        title="O que te distrai desta tarefa?",
        subtitle="Liste suas principais fontes de distração e por que são atraentes.",
        placeholder=(
            'Exemplo: "Redes sociais, notificações, vídeos no YouTube. '
            'São fáceis e dão prazer imediato..."'
        ),
        prompt_label="Impulsividade (Distrações)",
        icon="⚡",
    ),
)

QUESTION_KEYS: tuple[str, ...] = tuple(question.key for question in QUESTIONS)
