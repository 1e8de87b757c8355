from __future__ import annotations

from typing import Callable

import pytest

from equacaopro.runtime_config import RuntimeSettings

CREDENTIAL_VARS = (
    "EQUACAOPRO_API_KEY",
    "API_KEY",
    "GEMINI_API_KEY",
    "OPENAI_API_KEY",
    "EQUACAOPRO_MODEL",
    "EQUACAOPRO_BASE_URL",
)

SCENARIO_ANSWERS = {
    "tarefa": "Enviar relatório",
    "expectativa": "3/10 - não sei usar a ferramenta",
    "valor": "Evita repreensão do chefe",
    "tempo": "Hoje às 18h, sinto pânico",
    "impulsividade": "Celular e redes sociais",
}

SAMPLE_RESPONSE = (
    "### **[DIAGNÓSTICO]**\nSua **Expectativa** está baixa.\n\n"
    "### **[EQUAÇÃO]**\nExpectativa 3/10 reduz o denominador.\n\n"
    "### **[RECOMENDAÇÃO]**\nAumente a Expectativa com prática guiada.\n\n"
    "### **[AÇÃO]**\nAbra a ferramenta e faça um rascunho de 15 minutos.\n"
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment and .env file out of the tests."""

    for name in CREDENTIAL_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setitem(RuntimeSettings.model_config, "env_file", None)


@pytest.fixture
def scenario_answers() -> dict[str, str]:
    return dict(SCENARIO_ANSWERS)


class StubGenerator:
    """Deterministic stand-in for the completion client."""

    def __init__(
        self,
        response: str = SAMPLE_RESPONSE,
        *,
        error: Exception | None = None,
        side_effect: Callable[[], None] | None = None,
    ) -> None:
        self.response = response
        self.error = error
        self.side_effect = side_effect
        self.calls: list[tuple[str, str]] = []

    def generate(self, prompt: str, system_instruction: str) -> str:
        self.calls.append((prompt, system_instruction))
        if self.side_effect is not None:
            self.side_effect()
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def stub_generator() -> StubGenerator:
    return StubGenerator()


@pytest.fixture
def make_generator() -> Callable[..., StubGenerator]:
    return StubGenerator
