"""Action factory."""

from __future__ import annotations

from reaction.action import Action
from reaction.keep import Keep
from reaction.keep import keep as default_keep


def create_action(name: str | None = None, *, keep: Keep | None = None) -> Action:
    """Create an action with no subscribers and record it in ``keep``.

    The process-wide keep is used unless another is passed in.
    """
    action = Action(name)
    (keep if keep is not None else default_keep).register(action)
    return action


def create_actions(*names: str, keep: Keep | None = None) -> dict[str, Action]:
    """Create one named action per name, in order."""
    return {name: create_action(name, keep=keep) for name in names}
