"""sourcedocs - Markdown rendering of source symbol documentation records."""

from sourcedocs.callouts import collect_callout, render_callouts
from sourcedocs.comment import debug_info, render_comment, symbol_name
from sourcedocs.config import Config
from sourcedocs.declaration import format_declaration, resolve_declaration
from sourcedocs.discussion import (
    DiscussionNode,
    NodeKind,
    linearize,
    parse_discussion,
    render_discussion,
)
from sourcedocs.errors import MalformedDiscussionError, RecordError, SourceDocsError
from sourcedocs.generators import render_symbol, render_symbols
from sourcedocs.keys import DiscussionKey, is_callout_key, is_discussion_key
from sourcedocs.models import DebugInfo, DocField
from sourcedocs.validators import compute_coverage, summarize, undocumented

__all__ = [
    "Config",
    "DebugInfo",
    "DiscussionKey",
    "DiscussionNode",
    "DocField",
    "MalformedDiscussionError",
    "NodeKind",
    "RecordError",
    "SourceDocsError",
    "collect_callout",
    "compute_coverage",
    "debug_info",
    "format_declaration",
    "is_callout_key",
    "is_discussion_key",
    "linearize",
    "parse_discussion",
    "render_callouts",
    "render_comment",
    "render_discussion",
    "render_symbol",
    "render_symbols",
    "resolve_declaration",
    "summarize",
    "symbol_name",
    "undocumented",
]
