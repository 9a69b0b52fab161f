"""Tests for rules/_alias.py - RuleAlias."""

from __future__ import annotations

import pytest

from authority.rules._alias import RuleAlias


class TestRuleAlias:
    def test_includes_listed_actions(self):
        alias = RuleAlias("manage", ["create", "update", "delete"])
        assert alias.includes("create")
        assert alias.includes("update")
        assert alias.includes("delete")

    def test_excludes_other_actions(self):
        alias = RuleAlias("manage", ["create", "update", "delete"])
        assert not alias.includes("read")
        assert not alias.includes("manage")

    def test_single_string_is_one_action(self):
        alias = RuleAlias("moderate", "delete")
        assert alias.actions == frozenset({"delete"})
        assert not alias.includes("d")

    def test_accepts_any_iterable(self):
        alias = RuleAlias("rw", (a for a in ["read", "write"]))
        assert alias.actions == frozenset({"read", "write"})

    def test_duplicates_collapse(self):
        alias = RuleAlias("rw", ["read", "read", "write"])
        assert len(alias.actions) == 2

    def test_name(self):
        assert RuleAlias("manage", []).name == "manage"

    def test_actions_are_immutable(self):
        alias = RuleAlias("manage", ["create"])
        with pytest.raises(AttributeError):
            alias.actions.add("delete")  # type: ignore[attr-defined]

    def test_equality(self):
        assert RuleAlias("m", ["a", "b"]) == RuleAlias("m", ["b", "a"])
        assert RuleAlias("m", ["a"]) != RuleAlias("n", ["a"])
        assert hash(RuleAlias("m", ["a", "b"])) == hash(RuleAlias("m", ["b", "a"]))

    def test_repr(self):
        assert repr(RuleAlias("rw", ["write", "read"])) == "RuleAlias('rw', ['read', 'write'])"
