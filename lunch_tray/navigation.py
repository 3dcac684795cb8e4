"""Screen router: fixed transition table plus a back stack."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from lunch_tray.exceptions import InvalidTransition
from lunch_tray.logger import get_logger
from lunch_tray.models import LunchTrayScreen, NavEvent

logger = get_logger(__name__)


class SideEffect(str, Enum):
    NONE = "none"
    RECORD_SELECTION = "record_selection"
    RESET_ORDER = "reset_order"


@dataclass(frozen=True)
class Transition:
    source: LunchTrayScreen
    event: NavEvent
    target: LunchTrayScreen
    effect: SideEffect


_S = LunchTrayScreen
_E = NavEvent

TRANSITIONS: dict[tuple[LunchTrayScreen, NavEvent], tuple[LunchTrayScreen, SideEffect]] = {
    (_S.START, _E.START_ORDER): (_S.ENTREE, SideEffect.NONE),
    (_S.ENTREE, _E.NEXT): (_S.SIDE_DISH, SideEffect.RECORD_SELECTION),
    (_S.ENTREE, _E.CANCEL): (_S.START, SideEffect.RESET_ORDER),
    (_S.SIDE_DISH, _E.NEXT): (_S.ACCOMPANIMENT, SideEffect.RECORD_SELECTION),
    (_S.SIDE_DISH, _E.CANCEL): (_S.START, SideEffect.RESET_ORDER),
    (_S.ACCOMPANIMENT, _E.NEXT): (_S.CHECKOUT, SideEffect.RECORD_SELECTION),
    (_S.ACCOMPANIMENT, _E.CANCEL): (_S.START, SideEffect.RESET_ORDER),
    (_S.CHECKOUT, _E.CANCEL): (_S.START, SideEffect.RESET_ORDER),
    (_S.CHECKOUT, _E.SUBMIT): (_S.START, SideEffect.RESET_ORDER),
}


def allowed_events(screen: LunchTrayScreen) -> list[NavEvent]:
    """Events with an edge out of ``screen``, in declaration order."""
    return [event for (source, event) in TRANSITIONS if source is screen]


class Navigator:
    """Tracks the current screen as a stack rooted at Start.

    Forward edges push the target. Edges back to Start unwind the whole stack,
    so a finished or cancelled order never leaves history behind.
    """

    def __init__(self) -> None:
        self._back_stack: list[LunchTrayScreen] = [LunchTrayScreen.START]

    @property
    def current(self) -> LunchTrayScreen:
        return self._back_stack[-1]

    @property
    def back_stack(self) -> tuple[LunchTrayScreen, ...]:
        return tuple(self._back_stack)

    @property
    def can_navigate_back(self) -> bool:
        return len(self._back_stack) > 1

    def resolve(self, event: NavEvent) -> Transition:
        """Look up the edge for ``event`` without moving."""
        edge = TRANSITIONS.get((self.current, event))
        if edge is None:
            raise InvalidTransition(self.current, event)
        target, effect = edge
        return Transition(source=self.current, event=event, target=target, effect=effect)

    def dispatch(self, event: NavEvent) -> Transition:
        transition = self.resolve(event)
        if transition.target is LunchTrayScreen.START:
            del self._back_stack[1:]
        else:
            self._back_stack.append(transition.target)
        logger.info(
            "navigate %s -[%s]-> %s effect=%s",
            transition.source.value,
            event.value,
            transition.target.value,
            transition.effect.value,
        )
        return transition

    def navigate_up(self) -> LunchTrayScreen:
        """Return to the previous screen."""
        if not self.can_navigate_back:
            raise InvalidTransition(self.current, None)
        left = self._back_stack.pop()
        logger.info("navigate_up %s -> %s", left.value, self.current.value)
        return self.current
