"""Tests for explain/_models.py - explanation dataclasses."""

from __future__ import annotations

import json

import pytest

from authority.explain._models import AccessExplanation, RuleEvaluation


def _rule(**overrides) -> RuleEvaluation:
    fields = {
        "action": "read",
        "resource": "Post",
        "allow": True,
        "has_condition": False,
        "decision": True,
        "decisive": True,
    }
    fields.update(overrides)
    return RuleEvaluation(**fields)


def _explanation(**overrides) -> AccessExplanation:
    fields = {
        "user_repr": "MockUser(id=1)",
        "action": "read",
        "actions": ["read", "view"],
        "resource_type": "Post",
        "resource_repr": "None",
        "allowed": True,
        "deny_by_default": False,
        "rules": [_rule()],
    }
    fields.update(overrides)
    return AccessExplanation(**fields)


class TestRuleEvaluation:
    def test_is_frozen(self):
        with pytest.raises(AttributeError):
            _rule().decision = False  # type: ignore[misc]

    def test_to_dict(self):
        assert _rule().to_dict() == {
            "action": "read",
            "resource": "Post",
            "allow": True,
            "has_condition": False,
            "decision": True,
            "decisive": True,
        }


class TestAccessExplanation:
    def test_to_dict_is_json_serializable(self):
        data = _explanation().to_dict()
        assert json.loads(json.dumps(data)) == data
        assert data["rules"][0]["action"] == "read"
        assert data["actions"] == ["read", "view"]

    def test_str_allowed(self):
        text = str(_explanation())
        assert "Access Check: ALLOWED" in text
        assert "User: MockUser(id=1)" in text
        assert "matches read, view" in text
        assert "allow read on Post: ALLOW <- decisive" in text

    def test_str_conditional_rule(self):
        text = str(
            _explanation(
                allowed=False,
                rules=[_rule(allow=True, has_condition=True, decision=False)],
            )
        )
        assert "Access Check: DENIED" in text
        assert "allow read on Post when <condition>: DENY" in text

    def test_str_deny_by_default(self):
        text = str(_explanation(allowed=False, deny_by_default=True, rules=[]))
        assert "DENY BY DEFAULT" in text

    def test_decisive_rule(self):
        first = _rule(decisive=False)
        last = _rule(action="view")
        assert _explanation(rules=[first, last]).decisive_rule is last
