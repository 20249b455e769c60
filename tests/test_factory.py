"""Tests for the action factory."""

from __future__ import annotations

from unittest.mock import MagicMock

import reaction
from reaction import Action, Keep, create_action, create_actions


def test_create_action_returns_empty_action() -> None:
    action = create_action()
    assert isinstance(action, Action)
    assert len(action) == 0
    assert action.name is None


def test_create_action_with_name() -> None:
    assert create_action("status_update").name == "status_update"


def test_scenario_two_actions_kept_then_reset() -> None:
    a = create_action()
    b = create_action()
    assert reaction.keep.created_actions == (a, b)

    reaction.keep.reset()
    assert reaction.keep.created_actions == ()


def test_create_actions_bulk() -> None:
    actions = create_actions("text_update", "status_update")

    assert list(actions) == ["text_update", "status_update"]
    assert actions["text_update"].name == "text_update"
    assert reaction.keep.created_actions == (actions["text_update"], actions["status_update"])


def test_create_actions_into_injected_keep() -> None:
    private = Keep()
    actions = create_actions("a", "b", keep=private)

    assert private.created_actions == (actions["a"], actions["b"])
    assert len(reaction.keep) == 0


def test_scenarios_end_to_end() -> None:
    a = create_action()
    fn1 = MagicMock()
    a.subscribe(fn1)
    a(42, "x")
    fn1.assert_called_once_with(42, "x")

    log: list[str] = []
    a.subscribe(lambda *args: log.append("log1"))
    a.subscribe(lambda *args: log.append("log2"))
    a(True)
    assert log == ["log1", "log2"]

    fn = MagicMock()
    h = a.subscribe(fn)
    a.unsubscribe(h)
    a(1)
    fn.assert_not_called()
