"""Errors raised by the order flow."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lunch_tray.models import LunchTrayScreen, NavEvent


class LunchTrayError(Exception):
    """Base class for rejected user actions."""


class InvalidTransition(LunchTrayError, ValueError):
    """The current screen has no edge for the requested event."""

    def __init__(self, screen: LunchTrayScreen, event: NavEvent | None):
        self.screen = screen
        self.event = event
        if event is None:
            message = f"Cannot navigate back from {screen.title}"
        else:
            message = f"{event.label} is not available on {screen.title}"
        super().__init__(message)


class SelectionRequired(LunchTrayError):
    """Next was requested on a menu screen with nothing selected."""

    def __init__(self, screen: LunchTrayScreen):
        self.screen = screen
        super().__init__(f"Select an item before continuing ({screen.title})")
