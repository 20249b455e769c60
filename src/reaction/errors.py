"""Reaction exception hierarchy."""

from __future__ import annotations


class ReactionError(Exception):
    """Base class for errors raised by reaction itself."""


class InvalidListenerError(ReactionError, TypeError):
    """Raised when subscribing something that is not callable."""


class ListenerNotFoundError(ReactionError, LookupError):
    """Raised when unsubscribing a handle or listener the action never had."""
