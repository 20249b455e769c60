"""Reaction — callable actions for unidirectional data flow."""

from reaction.action import Action, Listener, Subscription
from reaction.errors import InvalidListenerError, ListenerNotFoundError, ReactionError
from reaction.factory import create_action, create_actions
from reaction.keep import Keep, keep

# Test-isolation alias; application code should not touch the keep.
__keep = keep

__all__ = [
    "Action",
    "Listener",
    "Subscription",
    "create_action",
    "create_actions",
    "Keep",
    "keep",
    "ReactionError",
    "InvalidListenerError",
    "ListenerNotFoundError",
]
