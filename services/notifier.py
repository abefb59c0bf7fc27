# services/notifier.py
"""
Notification sink used by the dispatch service.
Anything with a notify(message) method can stand in (logging, push, ...).
"""
from typing import Protocol

from utils.Helpers import NOTIFY_PREFIX


class Notifier(Protocol):
    def notify(self, message: str) -> None: ...


class ConsoleNotifier:
    """Prints notifications to stdout."""

    def notify(self, message: str) -> None:
        print(f"{NOTIFY_PREFIX} {message}")
