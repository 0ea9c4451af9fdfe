"""Discussion tag identities.

Tags in a symbol's discussion are either callouts (rendered separately as
collapsible blocks) or structural markers (paragraphs, code, lists).
"""

from __future__ import annotations

from enum import Enum


class DiscussionKey(str, Enum):
    """Known discussion tags, valued by their wire names."""

    ATTENTION = "Attention"
    AUTHOR = "Author"
    AUTHORS = "Authors"
    BUG = "Bug"
    COMPLEXITY = "Complexity"
    COPYRIGHT = "Copyright"
    DATE = "Date"
    EXAMPLE = "Example"
    EXPERIMENT = "Experiment"
    IMPORTANT = "Important"
    INVARIANT = "Invariant"
    NOTE = "Note"
    PRECONDITION = "Precondition"
    POSTCONDITION = "Postcondition"
    REMARK = "Remark"
    REQUIRES = "Requires"
    SEE_ALSO = "SeeAlso"
    SINCE = "Since"
    VERSION = "Version"
    WARNING = "Warning"

    PARAGRAPH = "Para"
    CODE_LISTING = "CodeListing"
    LIST_BULLET = "List-Bullet"
    ITEM = "Item"


# Declaration order is render order for callout blocks
CALLOUT_KEYS: tuple[DiscussionKey, ...] = (
    DiscussionKey.ATTENTION,
    DiscussionKey.AUTHOR,
    DiscussionKey.AUTHORS,
    DiscussionKey.BUG,
    DiscussionKey.COMPLEXITY,
    DiscussionKey.COPYRIGHT,
    DiscussionKey.DATE,
    DiscussionKey.EXAMPLE,
    DiscussionKey.EXPERIMENT,
    DiscussionKey.IMPORTANT,
    DiscussionKey.INVARIANT,
    DiscussionKey.NOTE,
    DiscussionKey.PRECONDITION,
    DiscussionKey.POSTCONDITION,
    DiscussionKey.REMARK,
    DiscussionKey.REQUIRES,
    DiscussionKey.SEE_ALSO,
    DiscussionKey.SINCE,
    DiscussionKey.VERSION,
    DiscussionKey.WARNING,
)

STRUCTURAL_KEYS: tuple[DiscussionKey, ...] = (
    DiscussionKey.PARAGRAPH,
    DiscussionKey.CODE_LISTING,
    DiscussionKey.LIST_BULLET,
    DiscussionKey.ITEM,
)

_CALLOUT_NAMES = frozenset(key.value for key in CALLOUT_KEYS)
_DISCUSSION_NAMES = _CALLOUT_NAMES | frozenset(key.value for key in STRUCTURAL_KEYS)


def is_callout_key(name: str | None) -> bool:
    """Return True if ``name`` is exactly one of the callout tag names."""
    if isinstance(name, DiscussionKey):
        name = name.value
    return isinstance(name, str) and name in _CALLOUT_NAMES


def is_discussion_key(name: str | None) -> bool:
    """Return True if ``name`` is a callout or structural tag name."""
    if isinstance(name, DiscussionKey):
        name = name.value
    return isinstance(name, str) and name in _DISCUSSION_NAMES
