"""Streamlit UI helpers shared by the app views."""

from __future__ import annotations

import logging
import uuid
from typing import Any

import streamlit as st

_LOG = logging.getLogger("ui.streamlit.errors")

__all__ = ["log_error", "show_error"]


def _render_error_id(container: Any, error_id: str) -> None:
    """Attach a caption/code snippet with the error identifier to ``container``."""

    if container is None:
        return
    container.caption("Código do erro (clique para copiar):")
    container.code(error_id, language=None)


def log_error(
    message: str,
    *,
    logger: logging.Logger | logging.LoggerAdapter | None = None,
    exc_info: Any | None = None,
) -> str:
    """Log ``message`` at error level under a fresh 12-character id and return the id."""

    error_id = uuid.uuid4().hex[:12].upper()
    log = logger or _LOG
    log.error("Error %s: %s", error_id, message, exc_info=exc_info, extra={"error_id": error_id})
    return error_id


def show_error(message: str, error_id: str) -> None:
    """Render ``message`` with :func:`streamlit.error` and the copyable ``error_id``."""

    container = st.container()
    container.error(message, icon="⚠️")
    _render_error_id(container, error_id)

