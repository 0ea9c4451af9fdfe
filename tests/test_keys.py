"""Tests for discussion tag classification."""

import pytest

from sourcedocs.keys import (
    CALLOUT_KEYS,
    STRUCTURAL_KEYS,
    DiscussionKey,
    is_callout_key,
    is_discussion_key,
)


class TestCalloutKeys:
    @pytest.mark.parametrize("name", ["Note", "Warning", "SeeAlso", "Postcondition"])
    def test_callout_names(self, name):
        assert is_callout_key(name)
        assert is_discussion_key(name)

    @pytest.mark.parametrize("name", ["Para", "CodeListing", "List-Bullet", "Item"])
    def test_structural_names_are_not_callouts(self, name):
        assert not is_callout_key(name)
        assert is_discussion_key(name)

    @pytest.mark.parametrize("name", ["note", "NOTE", "Note ", "Parameter", "Link", ""])
    def test_matching_is_exact(self, name):
        assert not is_callout_key(name)
        assert not is_discussion_key(name)

    def test_none_is_not_a_key(self):
        assert not is_callout_key(None)
        assert not is_discussion_key(None)

    def test_enum_members_are_accepted(self):
        assert is_callout_key(DiscussionKey.NOTE)
        assert not is_callout_key(DiscussionKey.PARAGRAPH)
        assert is_discussion_key(DiscussionKey.LIST_BULLET)


class TestKeyGroups:
    def test_groups_are_disjoint(self):
        assert not set(CALLOUT_KEYS) & set(STRUCTURAL_KEYS)

    def test_every_key_is_grouped(self):
        assert set(CALLOUT_KEYS) | set(STRUCTURAL_KEYS) == set(DiscussionKey)

    def test_callout_order(self):
        assert len(CALLOUT_KEYS) == 20
        assert CALLOUT_KEYS[0] is DiscussionKey.ATTENTION
        assert CALLOUT_KEYS[-1] is DiscussionKey.WARNING
        assert CALLOUT_KEYS.index(DiscussionKey.NOTE) < CALLOUT_KEYS.index(
            DiscussionKey.WARNING
        )
