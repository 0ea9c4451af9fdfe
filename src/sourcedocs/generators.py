"""Markdown output for documented symbols."""

from __future__ import annotations

from typing import Sequence

from .comment import render_comment, symbol_name
from .config import DEFAULT_CONFIG, Config
from .declaration import format_declaration
from .markdown import heading
from .models import DocRecord


def render_symbol(
    record: DocRecord,
    config: Config | None = None,
    level: int = 3,
    comment: str | None = None,
) -> str:
    """Render one symbol as a heading, its declaration and its comment.

    ``comment`` is rendered from the record unless given.
    """
    config = config or DEFAULT_CONFIG
    if comment is None:
        comment = render_comment(record)
    parts = [
        heading(symbol_name(record, config), level),
        format_declaration(record, config),
        comment,
    ]
    return "\n\n".join(part for part in parts if part)


def render_symbols(
    records: Sequence[DocRecord],
    config: Config | None = None,
    level: int = 3,
    comments: Sequence[str] | None = None,
) -> str:
    """Render several symbols separated by horizontal rules.

    ``comments``, if given, holds the rendered comment of each record.
    """
    if comments is None:
        comments = [render_comment(record) for record in records]
    sections = [
        render_symbol(record, config, level, comment)
        for record, comment in zip(records, comments)
    ]
    return "\n\n---\n\n".join(sections)
