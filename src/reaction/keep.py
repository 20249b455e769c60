"""Keep — process-wide record of every action the factory has created."""

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reaction.action import Action

logger = logging.getLogger(__name__)


class Keep:
    """Ordered bag of created actions, cleared with ``reset()``.

    The keep retains a reference to each registered action until the next
    reset. It exists for introspection and for isolating test cases from
    one another; application code should not depend on it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._actions: list[Action] = []

    @property
    def created_actions(self) -> tuple[Action, ...]:
        """Actions created since the last reset, in creation order."""
        with self._lock:
            return tuple(self._actions)

    def register(self, action: Action) -> None:
        """Append an action. Called by the factory only."""
        with self._lock:
            self._actions.append(action)
            count = len(self._actions)
        logger.debug("Kept %r (%d total)", action, count)

    def reset(self) -> None:
        """Forget every kept action. Actions held elsewhere stay usable."""
        with self._lock:
            dropped = len(self._actions)
            self._actions.clear()
        logger.debug("Keep reset, dropped %d action(s)", dropped)

    @contextlib.contextmanager
    def isolated(self) -> Iterator[Keep]:
        """Reset before and after the block."""
        self.reset()
        try:
            yield self
        finally:
            self.reset()

    def __len__(self) -> int:
        with self._lock:
            return len(self._actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(self.created_actions)

    def __contains__(self, action: object) -> bool:
        with self._lock:
            return any(kept is action for kept in self._actions)

    def __repr__(self) -> str:
        return f"<Keep actions={len(self)}>"


keep = Keep()
"""The process-wide keep used by ``create_action`` unless another is injected."""
