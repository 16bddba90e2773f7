"""Notification data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Notification:
    """A transient status message shown to the user."""

    message: str
    is_error: bool = False
