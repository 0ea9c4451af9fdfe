"""Derived views of a documentation record: name, comment and debug info.

All functions are pure over the record, so records can be rendered in any
order or in parallel.
"""

from __future__ import annotations

from .callouts import render_callouts
from .config import DEFAULT_CONFIG, Config
from .discussion import render_discussion
from .models import DebugInfo, DocField, DocRecord, get


def symbol_name(record: DocRecord, config: Config | None = None) -> str:
    """Return the symbol name, or the configured placeholder."""
    config = config or DEFAULT_CONFIG
    name = get(record, DocField.NAME)
    return name if name is not None else config.placeholder_name


def render_abstract(record: DocRecord) -> str | None:
    return get(record, DocField.DOC_ABSTRACT) or None


def render_comment(record: DocRecord) -> str:
    """Join abstract, discussion and callouts with blank lines.

    Missing or empty parts are left out entirely.
    """
    parts = [
        render_abstract(record),
        render_discussion(record),
        render_callouts(record),
    ]
    return "\n\n".join(part for part in parts if part)


def debug_info(
    record: DocRecord, config: Config | None = None, comment: str | None = None
) -> DebugInfo:
    """Build the introspection view of ``record``.

    Pass an already rendered ``comment`` to avoid rendering it again.
    """
    config = config or DEFAULT_CONFIG
    if comment is None:
        comment = render_comment(record)
    file = get(record, DocField.FILE_PATH) or ""
    prefix = config.resolved_path_prefix()
    if prefix:
        file = file.replace(prefix, "")

    return DebugInfo(
        name=symbol_name(record, config),
        declaration=get(record, DocField.PARSED_DECLARATION) or "",
        file=file,
        is_documented=bool(comment),
    )
