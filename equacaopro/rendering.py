"""Markdown rendering for model responses."""

from __future__ import annotations

import unicodedata
from functools import lru_cache

from markdown_it import MarkdownIt
from markdown_it.token import Token

from .prompts import RESPONSE_SECTIONS

__all__ = ["missing_sections", "render_markdown", "section_headings"]


@lru_cache(maxsize=1)
def _markdown_parser() -> MarkdownIt:
    # Raw HTML in the model output is escaped rather than passed through.
    md = MarkdownIt("commonmark", {"html": False})
    md.enable("table")
    md.enable("strikethrough")
    return md


def render_markdown(text: str) -> str:
    """Render ``text`` to HTML. Pure and deterministic."""

    return _markdown_parser().render(text or "")


def _inline_text(token: Token | None) -> str:
    if token is None:
        return ""
    if token.type != "inline" or not token.children:
        return token.content
    return "".join(child.content for child in token.children if child.content)


def section_headings(text: str, *, level: int = 3) -> list[str]:
    """Return the plain text of every heading of ``level`` in ``text``."""

    tokens = _markdown_parser().parse(text or "")
    tag = f"h{level}"
    headings: list[str] = []
    for idx, token in enumerate(tokens):
        if token.type != "heading_open" or token.tag != tag:
            continue
        next_token = tokens[idx + 1] if idx + 1 < len(tokens) else None
        headings.append(_inline_text(next_token).strip())
    return headings


def _fold(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return stripped.strip("[]*_ ").upper()


def missing_sections(text: str) -> tuple[str, ...]:
    """Return the headings of the response contract absent from ``text``."""

    found = {_fold(heading) for heading in section_headings(text)}
    return tuple(
        section.heading for section in RESPONSE_SECTIONS if _fold(section.heading) not in found
    )
