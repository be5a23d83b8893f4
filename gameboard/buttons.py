"""Debounced push buttons read through an injectable pin reader."""

from __future__ import annotations

import time
from typing import Callable

BUTTON_UP = 12
BUTTON_DOWN = 13
BUTTON_ACTION = 14
BUTTON_LEFT = 27
BUTTON_RIGHT = 26

PinReader = Callable[[int], bool]
Clock = Callable[[], int]

_START = time.monotonic()


def millis() -> int:
    """Milliseconds elapsed since the module was loaded."""
    return int((time.monotonic() - _START) * 1000)


class Button:
    """A single push button that reports each press once.

    ``reader(pin)`` returns True while the button on ``pin`` is held down.
    A press is reported only on the transition to held, and only if more
    than ``DEBOUNCE_TIME`` milliseconds passed since the last reported press.
    """

    DEBOUNCE_TIME = 200

    def __init__(self, pin: int, reader: PinReader, clock: Clock = millis) -> None:
        self.pin = pin
        self._reader = reader
        self._clock = clock
        self._pressed = False
        self._last_press_time = 0

    def is_pressed(self) -> bool:
        """Return True once for each new, debounced press."""
        now = self._clock()
        if self._reader(self.pin):
            if not self._pressed and now - self._last_press_time > self.DEBOUNCE_TIME:
                self._pressed = True
                self._last_press_time = now
                return True
        else:
            self._pressed = False
        return False


class Buttons:
    """The five buttons of the board."""

    def __init__(self, reader: PinReader, clock: Clock = millis) -> None:
        self.up = Button(BUTTON_UP, reader, clock)
        self.down = Button(BUTTON_DOWN, reader, clock)
        self.left = Button(BUTTON_LEFT, reader, clock)
        self.right = Button(BUTTON_RIGHT, reader, clock)
        self.action = Button(BUTTON_ACTION, reader, clock)