"""
Tests for actions/base.py.

Covers:
  - register: insertion order, duplicate ids rejected, first kept
  - select_recommended: only flagged actions, catalog order
  - by_ids: all-or-nothing resolution, catalog order, duplicates collapse
"""

import dataclasses

import pytest

from wintuner.actions.base import Action, ActionRegistry
from wintuner.errors import DuplicateIdError, UnknownIdError


# ── Helpers ───────────────────────────────────────────────────────────────────

def _noop() -> None:
    pass


def _action(action_id: str, recommended: bool = False, label: str = "") -> Action:
    return Action(id=action_id, label=label or action_id.title(), operation=_noop,
                  recommended=recommended)


def _registry(*ids: str) -> ActionRegistry:
    return ActionRegistry(_action(i) for i in ids)


# ── register / all ────────────────────────────────────────────────────────────

class TestRegister:
    def test_all_returns_insertion_order(self):
        reg = _registry("c", "a", "b")
        assert [a.id for a in reg.all()] == ["c", "a", "b"]

    def test_register_returns_action(self):
        reg = ActionRegistry()
        action = _action("a")
        assert reg.register(action) is action

    def test_duplicate_id_raises(self):
        reg = _registry("a")
        with pytest.raises(DuplicateIdError) as exc:
            reg.register(_action("a", label="Second"))
        assert exc.value.action_id == "a"

    def test_duplicate_keeps_first_registration(self):
        reg = ActionRegistry()
        reg.register(_action("a", label="First"))
        with pytest.raises(DuplicateIdError):
            reg.register(_action("a", label="Second"))
        assert len(reg) == 1
        assert reg.get("a").label == "First"

    def test_duplicate_in_constructor_raises(self):
        with pytest.raises(DuplicateIdError):
            _registry("a", "b", "a")

    def test_all_returns_a_copy(self):
        reg = _registry("a", "b")
        reg.all().clear()
        assert len(reg) == 2

    def test_contains_and_iter(self):
        reg = _registry("a", "b")
        assert "a" in reg
        assert "z" not in reg
        assert [a.id for a in reg] == ["a", "b"]
        assert reg.ids() == ["a", "b"]

    def test_actions_are_immutable(self):
        action = _action("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            action.id = "b"  # type: ignore[misc]


# ── select_recommended ────────────────────────────────────────────────────────

class TestSelectRecommended:
    def test_only_recommended_in_catalog_order(self):
        reg = ActionRegistry([
            _action("a", recommended=True),
            _action("b"),
            _action("c", recommended=True),
        ])
        assert [a.id for a in reg.select_recommended()] == ["a", "c"]

    def test_none_recommended_returns_empty(self):
        assert _registry("a", "b").select_recommended() == []


# ── by_ids ────────────────────────────────────────────────────────────────────

class TestByIds:
    def test_resolves_known_ids(self):
        reg = _registry("a", "b", "c")
        assert [a.id for a in reg.by_ids(["a", "c"])] == ["a", "c"]

    def test_unknown_id_fails_entirely(self):
        reg = _registry("a", "b")
        with pytest.raises(UnknownIdError) as exc:
            reg.by_ids(["a", "c"])
        assert exc.value.ids == ("c",)

    def test_reports_every_unknown_id(self):
        reg = _registry("a")
        with pytest.raises(UnknownIdError) as exc:
            reg.by_ids(["x", "a", "y"])
        assert exc.value.ids == ("x", "y")
        assert "x" in str(exc.value) and "y" in str(exc.value)

    def test_returns_catalog_order(self):
        reg = _registry("a", "b", "c")
        assert [a.id for a in reg.by_ids(["c", "a"])] == ["a", "c"]

    def test_duplicates_collapse(self):
        reg = _registry("a", "b")
        assert [a.id for a in reg.by_ids(["b", "b", "a"])] == ["a", "b"]

    def test_empty_ids_returns_empty(self):
        assert _registry("a").by_ids([]) == []

    def test_get_unknown_raises(self):
        with pytest.raises(UnknownIdError):
            _registry("a").get("b")
