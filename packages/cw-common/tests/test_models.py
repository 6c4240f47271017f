"""
Tests for cw-common shared data models.

Validates camelCase serialisation, snake_case population, and the
partial-update record.
"""

from __future__ import annotations

from cw_common.models import Alert, Call, CallInput, IngestionResult, Rule, RuleUpdate


def _alert() -> Alert:
    return Alert(
        id="alert_1",
        rule_id="rule_1",
        call_id="call_1",
        created_at="2025-01-01T00:00:00+00:00",
        matched_keywords=["help"],
    )


class TestAlert:
    def test_serialises_with_camel_case_keys(self) -> None:
        data = _alert().model_dump(by_alias=True)
        assert data == {
            "id": "alert_1",
            "ruleId": "rule_1",
            "callId": "call_1",
            "createdAt": "2025-01-01T00:00:00+00:00",
            "matchedKeywords": ["help"],
        }

    def test_accepts_camel_case_input(self) -> None:
        alert = Alert.model_validate(
            {
                "id": "alert_2",
                "ruleId": "rule_9",
                "callId": "call_9",
                "createdAt": "now",
                "matchedKeywords": ["a", "b"],
            }
        )
        assert alert.rule_id == "rule_9"
        assert alert.matched_keywords == ["a", "b"]


class TestRule:
    def test_enabled_defaults_true(self) -> None:
        rule = Rule(id="rule_1", name="distress", keywords=["help"])
        assert rule.enabled is True


class TestRuleUpdate:
    def test_changes_only_contains_set_fields(self) -> None:
        assert RuleUpdate(enabled=False).changes() == {"enabled": False}

    def test_empty_update_has_no_changes(self) -> None:
        assert RuleUpdate().changes() == {}

    def test_explicit_none_is_reported(self) -> None:
        assert RuleUpdate(name=None).changes() == {"name": None}


class TestCallInput:
    def test_all_fields_optional(self) -> None:
        data = CallInput()
        assert data.transcript is None


class TestIngestionResult:
    def test_nests_call_and_alerts(self) -> None:
        call = Call(
            id="call_1",
            timestamp="2025-01-01T10:00:00Z",
            phone="555-0100",
            location="Springfield",
            transcript="please send help now",
        )
        result = IngestionResult(call=call, alerts=[_alert()])
        data = result.model_dump(by_alias=True)
        assert data["call"]["id"] == "call_1"
        assert data["alerts"][0]["ruleId"] == "rule_1"

    def test_alerts_default_empty(self) -> None:
        call = Call(id="c", timestamp="t", phone="p", location="l", transcript="x")
        assert IngestionResult(call=call).alerts == []
