"""
Services module: business logic layer for the assistance prototype.

Contains the classes that work across entities:
  - AssistanceService: request creation, nearest-helper dispatch, resolution
  - ConsoleNotifier: default notification sink
"""

from .dispatcher import AssistanceService, REQUIRED_CAPABILITY
from .notifier import ConsoleNotifier, Notifier

__all__ = [
    "AssistanceService",
    "REQUIRED_CAPABILITY",
    "ConsoleNotifier",
    "Notifier",
]
