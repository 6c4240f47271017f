"""Tests for storage.rule_store."""

from __future__ import annotations

import pytest

from cw_common.errors import ValidationError
from cw_common.models import RuleUpdate
from storage.rule_store import RuleStore, validate_keywords


# ─── RuleStore.create ────────────────────────────────────────────


class TestCreate:
    async def test_assigns_prefixed_id(self, db_session):
        rule = await RuleStore(db_session).create("distress", ["help", "emergency"])
        assert rule.id.startswith("rule_")
        assert rule.name == "distress"
        assert rule.keywords == ["help", "emergency"]
        assert rule.enabled is True

    async def test_ids_unique(self, db_session):
        store = RuleStore(db_session)
        a = await store.create("a", ["x"])
        b = await store.create("b", ["x"])
        assert a.id != b.id

    async def test_disabled_on_create(self, db_session):
        rule = await RuleStore(db_session).create("quiet", ["hush"], enabled=False)
        assert rule.enabled is False

    async def test_persisted_across_sessions(self, db_session, session_factory):
        created = await RuleStore(db_session).create("r", ["café", "a, b", "z"])
        async with session_factory() as other:
            loaded = await RuleStore(other).get(created.id)
        assert loaded == created
        assert isinstance(loaded.enabled, bool)

    @pytest.mark.parametrize("keywords", [[], [""], [" "], ["ok", ""], [1], None, "help"])
    async def test_rejects_invalid_keywords(self, db_session, keywords):
        store = RuleStore(db_session)
        with pytest.raises(ValidationError):
            await store.create("bad", keywords)
        assert await store.list() == []

    @pytest.mark.parametrize("name", [None, "", "   ", 5])
    async def test_rejects_invalid_name(self, db_session, name):
        with pytest.raises(ValidationError):
            await RuleStore(db_session).create(name, ["help"])

    async def test_keywords_are_trimmed(self, db_session):
        rule = await RuleStore(db_session).create("r", ["  help "])
        assert rule.keywords == ["help"]


# ─── RuleStore.list ──────────────────────────────────────────────


class TestList:
    async def test_insertion_order(self, db_session):
        store = RuleStore(db_session)
        names = ["zulu", "alpha", "mike"]
        for name in names:
            await store.create(name, ["k"])
        assert [r.name for r in await store.list()] == names

    async def test_only_enabled(self, db_session):
        store = RuleStore(db_session)
        on = await store.create("on", ["k"])
        await store.create("off", ["k"], enabled=False)
        enabled = await store.list(only_enabled=True)
        assert [r.id for r in enabled] == [on.id]
        assert len(await store.list()) == 2


# ─── RuleStore.update ────────────────────────────────────────────


class TestUpdate:
    async def test_enabled_only_leaves_other_fields(self, db_session):
        store = RuleStore(db_session)
        rule = await store.create("distress", ["help", "emergency"])
        updated = await store.update(rule.id, RuleUpdate(enabled=False))
        assert updated.enabled is False
        assert updated.name == "distress"
        assert updated.keywords == ["help", "emergency"]

    async def test_replaces_keywords(self, db_session):
        store = RuleStore(db_session)
        rule = await store.create("r", ["a"])
        updated = await store.update(rule.id, RuleUpdate(keywords=["b", "c"]))
        assert updated.keywords == ["b", "c"]
        assert (await store.get(rule.id)).keywords == ["b", "c"]

    async def test_no_fields_returns_rule_unchanged(self, db_session):
        store = RuleStore(db_session)
        rule = await store.create("r", ["a"])
        assert await store.update(rule.id, RuleUpdate()) == rule

    async def test_unknown_id_returns_none_and_mutates_nothing(self, db_session):
        store = RuleStore(db_session)
        rule = await store.create("r", ["a"])
        assert await store.update("rule_missing", RuleUpdate(name="x")) is None
        assert await store.list() == [rule]

    async def test_rejects_empty_keywords(self, db_session):
        store = RuleStore(db_session)
        rule = await store.create("r", ["a"])
        with pytest.raises(ValidationError):
            await store.update(rule.id, RuleUpdate(keywords=[]))

    async def test_rejects_null_enabled(self, db_session):
        store = RuleStore(db_session)
        rule = await store.create("r", ["a"])
        with pytest.raises(ValidationError):
            await store.update(rule.id, RuleUpdate(enabled=None))

    async def test_failed_update_applies_nothing(self, db_session, session_factory):
        store = RuleStore(db_session)
        rule = await store.create("original", ["help"])
        with pytest.raises(ValidationError):
            await store.update(rule.id, RuleUpdate(name="renamed", keywords=[]))
        await store.toggle(rule.id)
        async with session_factory() as other:
            loaded = await RuleStore(other).get(rule.id)
        assert loaded.name == "original"
        assert loaded.keywords == ["help"]
        assert loaded.enabled is False

    @pytest.mark.parametrize("keywords", [[42], "help", None])
    async def test_rejects_malformed_keywords(self, db_session, keywords):
        store = RuleStore(db_session)
        rule = await store.create("r", ["a"])
        with pytest.raises(ValidationError):
            await store.update(rule.id, RuleUpdate(keywords=keywords))
        assert await store.get(rule.id) == rule


# ─── RuleStore.toggle ────────────────────────────────────────────


class TestToggle:
    async def test_flips_enabled(self, db_session):
        store = RuleStore(db_session)
        rule = await store.create("r", ["a"])
        toggled = await store.toggle(rule.id)
        assert toggled.enabled is False

    async def test_twice_restores_original(self, db_session):
        store = RuleStore(db_session)
        rule = await store.create("r", ["a"], enabled=False)
        await store.toggle(rule.id)
        again = await store.toggle(rule.id)
        assert again.enabled is False
        assert again == rule

    async def test_unknown_id(self, db_session):
        assert await RuleStore(db_session).toggle("rule_missing") is None


def test_validate_keywords_returns_cleaned_copy():
    assert validate_keywords(["a ", " b"]) == ["a", "b"]
