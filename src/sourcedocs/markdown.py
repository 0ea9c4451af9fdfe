"""Markdown formatting primitives.

Pure string builders with no knowledge of documentation records.
"""

from __future__ import annotations

from typing import Iterable


def code_block(code: str, language: str | None = None) -> str:
    """Wrap ``code`` in a backtick fence, tagged with ``language`` if given."""
    return f"```{language or ''}\n{code}\n```"


def collapsible_section(summary: str, details: str) -> str:
    """Render a ``<details>`` block with ``summary`` as its visible label."""
    return "\n".join(
        [
            "<details>",
            f"<summary>{summary}</summary>",
            "",
            details.strip(),
            "",
            "</details>",
        ]
    )


def bullet(text: str) -> str:
    return f"- {text}"


def link(text: str, url: str) -> str:
    return f"[{text}]({url})"


def image(alt: str, url: str) -> str:
    return f"![{alt}]({url})"


def heading(text: str, level: int = 1) -> str:
    """Render an ATX heading; ``level`` is clamped to 1-6."""
    level = min(max(level, 1), 6)
    return f"{'#' * level} {text}"


def collection_output(title: str, items: Iterable[str]) -> str:
    """Render ``title`` followed by ``items``, or nothing for an empty collection."""
    items = list(items)
    if not items:
        return ""
    return "\n".join([title, *items])
