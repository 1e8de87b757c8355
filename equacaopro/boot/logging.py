"""Root logger setup for the Streamlit entry point."""

from __future__ import annotations

import logging
import os
from typing import Any

__all__ = ["configure_logging"]

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [%(error_id)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# HTTP client loggers print request lines at INFO.
_CHATTY_LOGGERS = ("httpx", "httpcore", "openai")


class _ErrorIdFilter(logging.Filter):
    """Give every record an ``error_id`` so the shared format always resolves."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "error_id"):
            record.error_id = "-"
        return True


def _coerce_level(value: str | int | None) -> int:
    """Translate a level name or number into a ``logging`` level.

    Names are case insensitive. Blank or unknown values give ``INFO``.
    """

    if isinstance(value, int):
        return value
    candidate = (value or "").strip()
    if candidate.isdigit():
        return int(candidate)
    resolved = logging.getLevelName(candidate.upper()) if candidate else None
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(*, level: str | int | None = None, **kwargs: Any) -> int:
    """Install a stream handler on the root logger and return the applied level.

    ``level`` defaults to the ``LOG_LEVEL`` environment variable. Handlers
    already on the root logger are replaced (``force=True``) rather than
    stacked. Extra ``kwargs`` go to :func:`logging.basicConfig`.
    """

    effective = _coerce_level(os.environ.get("LOG_LEVEL") if level is None else level)
    kwargs.setdefault("format", LOG_FORMAT)
    kwargs.setdefault("datefmt", DATE_FORMAT)
    kwargs.setdefault("force", True)
    logging.basicConfig(level=effective, **kwargs)

    error_ids = _ErrorIdFilter()
    for handler in logging.getLogger().handlers:
        handler.addFilter(error_ids)

    chatty_level = effective if effective <= logging.DEBUG else logging.WARNING
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(chatty_level)
    return effective
