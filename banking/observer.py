# -*- coding: utf-8 -*-
"""
Transaction observers.

- An observer is anything with an `update(message)` method.
- Accounts call observers synchronously, in registration order, after
  every successful mutation. Observer errors are not caught.
- TransactionLogger is the console observer used by the driver.
"""

from __future__ import annotations

import sys
from typing import Callable, List, Optional, Protocol, TextIO, Union

import banking.config as cfg


class Observer(Protocol):
    def update(self, message: str) -> None:
        ...


Listener = Union[Observer, Callable[[str], None]]


def deliver(listener: Listener, message: str) -> None:
    """Invoke an observer object or a bare callable with `message`."""
    update = getattr(listener, "update", None)
    if callable(update):
        update(message)
    else:
        listener(message)


class TransactionLogger:
    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self.entries: List[str] = []

    def __repr__(self) -> str:
        return f"TransactionLogger(entries={len(self.entries)})"

    def update(self, message: str) -> None:
        # sys.stdout is looked up per write so redirected stdout is honoured
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{cfg.LOG_LABEL}{message}\n")
        self.entries.append(message)
