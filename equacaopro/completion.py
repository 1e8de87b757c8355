"""Completion client for the hosted text-generation model."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, Protocol

from openai import APIStatusError, OpenAI, OpenAIError

from .errors import ConfigurationError, RequestError
from .runtime_config import RuntimeSettings, load_runtime_settings

LOG = logging.getLogger(__name__)

__all__ = ["CompletionClient", "TextGenerator", "Transport"]

Transport = Callable[..., str]


class TextGenerator(Protocol):
    """Narrow interface the wizard depends on."""

    def generate(self, prompt: str, system_instruction: str) -> str:
        ...


class CompletionClient:
    """Wrapper around an OpenAI-compatible chat-completions endpoint.

    The credential is resolved every time :meth:`generate` runs. When
    ``settings`` is omitted the environment (and ``.env``) is read at call
    time, so a key exported after start-up is picked up on the next
    submission. ``transport`` replaces the network call and receives
    ``(prompt, system_instruction, model=...)``.
    """

    def __init__(
        self,
        settings: RuntimeSettings | None = None,
        *,
        transport: Transport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    def _current_settings(self) -> RuntimeSettings:
        if self._settings is not None:
            return self._settings
        return load_runtime_settings()

    def generate(self, prompt: str, system_instruction: str) -> str:
        """Return the model's markdown answer for ``prompt``.

        Raises :class:`ConfigurationError` before any request when no API key
        is configured and :class:`RequestError` for every failure of the call
        itself. Exactly one attempt is made.
        """

        settings = self._current_settings()
        api_key = settings.credential()
        if api_key is None:
            raise ConfigurationError(
                "No API key configured. Set EQUACAOPRO_API_KEY (or API_KEY) in the environment."
            )

        LOG.info("Requesting completion from model %s", settings.model)
        if self._transport is not None:
            text = self._transport(prompt, system_instruction, model=settings.model)
        else:
            text = self._request(api_key, settings, prompt, system_instruction)

        if not isinstance(text, str) or not text.strip():
            raise RequestError("Completion response did not contain any text")
        LOG.debug("Completion returned %d characters", len(text))
        return text

    def _request(
        self,
        api_key: str,
        settings: RuntimeSettings,
        prompt: str,
        system_instruction: str,
    ) -> str:
        client_kwargs: dict[str, Any] = {"api_key": api_key, "max_retries": 0}
        if settings.base_url:
            client_kwargs["base_url"] = settings.base_url

        try:
            client = OpenAI(**client_kwargs)
            response = client.chat.completions.create(
                model=settings.model,
                messages=[
                    {"role": "system", "content": system_instruction},
                    {"role": "user", "content": prompt},
                ],
            )
        except APIStatusError as exc:
            raise RequestError(_status_detail(exc), exc.status_code) from exc
        except OpenAIError as exc:
            raise RequestError(str(exc) or exc.__class__.__name__) from exc

        choices = getattr(response, "choices", None) or []
        if not choices:
            raise RequestError("Completion response contained no choices")
        return _extract_choice_content(choices[0])


def _status_detail(exc: APIStatusError) -> str:
    body = getattr(exc, "body", None)
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            message = error.get("message")
            if isinstance(message, str) and message.strip():
                return message.strip()
        message = body.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return str(exc) or "Completion request failed"


def _extract_choice_content(choice: Any) -> str:
    message = getattr(choice, "message", None)
    if message is None and isinstance(choice, dict):
        message = choice.get("message")
    if message is None:
        return ""
    content: Any = getattr(message, "content", None)
    if content is None and isinstance(message, dict):
        content = message.get("content")
    if isinstance(content, Iterable) and not isinstance(content, (str, bytes)):
        parts: list[str] = []
        for item in content:
            if isinstance(item, dict):
                text = item.get("text")
                if text:
                    parts.append(str(text))
            elif item:
                parts.append(str(item))
        content = "".join(parts)
    return str(content or "")
