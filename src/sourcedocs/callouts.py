"""Callout collection from the flattened discussion stream.

The flattened stream is a list of single-entry mappings such as
``{"Note": "text"}`` or ``{"Para": "text"}``. A callout's content is its own
entry plus every ``Para`` entry that directly follows it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Sequence

from .keys import CALLOUT_KEYS, DiscussionKey
from .markdown import collapsible_section
from .models import DocField, DocRecord, get

log = logging.getLogger(__name__)

_SEPARATOR = "\n\n"


def _entry(item: Any) -> tuple[str | None, str | None]:
    """Return the (key, value) of a flattened entry."""
    if not isinstance(item, Mapping) or not item:
        log.debug("Ignoring malformed discussion entry: %r", item)
        return None, None
    key, value = next(iter(item.items()))
    return key, value if isinstance(value, str) else None


def collect_callout(
    entries: Sequence[Any], key: DiscussionKey
) -> str | None:
    """Collect the text of the first ``key`` callout in ``entries``.

    Only the first occurrence is used. Collection stops at the first entry
    that is neither ``key`` nor a paragraph. Each collected piece is preceded
    by a blank line.

    Returns:
        The accumulated text, or None if ``key`` does not occur or
        contributes only whitespace.
    """
    found = False
    text = ""

    for item in entries:
        entry_key, value = _entry(item)
        is_key = entry_key == key.value
        is_paragraph = entry_key == DiscussionKey.PARAGRAPH.value

        if is_key and not found:
            found = True
            text = _SEPARATOR + value if value is not None else ""
        elif is_paragraph and found:
            text += _SEPARATOR + (value or "")
        elif not is_key and not is_paragraph and found:
            break

    if not text.strip():
        return None
    return text


def render_callouts(record: DocRecord) -> str | None:
    """Render every callout of ``record`` as a collapsible block.

    Blocks follow the declared order of callout keys, not the order in
    which callouts appear. Returns None if no callout has content.
    """
    entries = get(record, DocField.DOC_DISCUSSION, (list, tuple))
    if not entries:
        return None

    blocks = []
    for key in CALLOUT_KEYS:
        text = collect_callout(entries, key)
        if text:
            blocks.append(collapsible_section(key.value, text))

    if not blocks:
        return None
    return _SEPARATOR.join(blocks)
