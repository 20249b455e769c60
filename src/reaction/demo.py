"""Story example: two actions wired to a handful of listeners."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from reaction.action import Action
from reaction.factory import create_action

Echo = Callable[[str], None]


@dataclass
class Demo:
    text_update: Action
    status_update: Action


def build_demo(echo: Echo) -> Demo:
    """Create the example actions and subscribe the printing listeners."""
    text_update = create_action("text_update")
    status_update = create_action("status_update")

    def on_status(online: object) -> None:
        echo(f"status:  {'ONLINE' if online else 'OFFLINE'}")

    def on_text(*args: object) -> None:
        for arg in args:
            echo(f"text:  {arg}")

    def on_story(*args: object) -> None:
        echo("story:  Once upon a time the user did the following: " + ", ".join(map(str, args)))

    status_update.subscribe(on_status)
    text_update.subscribe(on_text)
    text_update.subscribe(on_story)
    return Demo(text_update=text_update, status_update=status_update)


def run_demo(echo: Echo) -> None:
    """Play the example sequence: online, one text update, offline."""
    demo = build_demo(echo)
    demo.status_update(True)
    demo.text_update("testing", 1337, {"test": 1337})
    demo.status_update(False)
