"""Keyboard shortcuts for undo/redo."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, List

logger = logging.getLogger(__name__)

KeyListener = Callable[["KeyEvent"], bool]


@dataclass(frozen=True)
class KeyEvent:
    key: str
    ctrl: bool = False
    meta: bool = False
    shift: bool = False

    @property
    def command(self) -> bool:
        """Ctrl on most platforms, Cmd on macOS."""
        return self.ctrl or self.meta

    def is_undo(self) -> bool:
        return self.command and self.key.lower() == "z" and not self.shift

    def is_redo(self) -> bool:
        key = self.key.lower()
        return self.command and (key == "y" or (key == "z" and self.shift))


class KeyDispatcher:
    """Global key listener registry; listeners run in registration order."""

    def __init__(self) -> None:
        self._listeners: List[KeyListener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def add_listener(self, listener: KeyListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: KeyListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            logger.warning("Listener %r was not registered", listener)

    def dispatch(self, event: KeyEvent) -> bool:
        """Deliver an event; True if any listener handled it."""
        handled = False
        for listener in list(self._listeners):
            if listener(event):
                handled = True
        return handled


def history_key_handler(target) -> KeyListener:
    """Build a listener that maps undo/redo keys onto ``target.undo``/``target.redo``."""

    def handle(event: KeyEvent) -> bool:
        if event.is_undo():
            target.undo()
            return True
        if event.is_redo():
            target.redo()
            return True
        return False

    return handle


@contextmanager
def bind_history_shortcuts(dispatcher: KeyDispatcher, target) -> Iterator[KeyListener]:
    """Register undo/redo shortcuts for the duration of the block."""
    listener = history_key_handler(target)
    dispatcher.add_listener(listener)
    try:
        yield listener
    finally:
        dispatcher.remove_listener(listener)
