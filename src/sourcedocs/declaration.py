"""Declaration block formatting."""

from __future__ import annotations

from .config import DEFAULT_CONFIG, Config
from .markdown import code_block
from .models import DocField, DocRecord, get


def resolve_declaration(record: DocRecord) -> str | None:
    """Pick the declaration text to show for ``record``.

    A non-empty documented declaration wins; otherwise the parsed
    declaration is used, even if empty. Returns None if neither exists.
    """
    documented = get(record, DocField.DOC_DECLARATION)
    if documented:
        return documented
    return get(record, DocField.PARSED_DECLARATION)


def format_declaration(record: DocRecord, config: Config | None = None) -> str:
    """Render the declaration as a fenced code block, or "" if there is none."""
    config = config or DEFAULT_CONFIG
    declaration = resolve_declaration(record)
    if not declaration:
        return ""
    return code_block(declaration, config.language)
