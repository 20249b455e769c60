from __future__ import annotations

from collections.abc import Iterator

import pytest

import reaction


@pytest.fixture(autouse=True)
def fresh_keep() -> Iterator[reaction.Keep]:
    """Reset the process-wide keep around every test."""
    with reaction.keep.isolated() as kept:
        yield kept
