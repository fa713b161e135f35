"""A bouncing sprite scroll text.

A row of letter sprites moves left across the screen. Each letter
falls under gravity and bounces off the floor; a letter that leaves the
left edge re-enters on the right carrying the next character of the
message, which repeats once it runs out.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import cycle

SCREEN_WIDTH = 320
LETTER_SIZE = 32
LETTER_COUNT = (SCREEN_WIDTH + 3 * LETTER_SIZE) // LETTER_SIZE
GRAVITY = 0x1A
"""Added to each letter's vertical speed every frame, in 1/256 pixels."""
FLOOR = 200
SCROLL_SPEED = 2

MESSAGE = (
    "Here is a little scrolltext made with the Removers'library. "
    "Isn't it fun what we can do with a few sprites? ########   "
)


def _short(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _half_toward_zero(value: int) -> int:
    half = abs(value) // 2
    return -half if value < 0 else half


@dataclass
class Letter:
    """One letter sprite: position, vertical speed (8.8 fixed point) and character."""

    x: int
    y: int = 0
    vy: int = 0
    char: str = " "


class Scroller:
    """The letters of the scroll text and the message they draw from."""

    def __init__(self, text: str = MESSAGE) -> None:
        if not text:
            raise ValueError("scroll text must not be empty")
        self.text = text
        self._chars = cycle(text)
        self.letters = [Letter(x=LETTER_SIZE * index) for index in range(LETTER_COUNT)]

    def step(self) -> None:
        """Advance every letter by one frame."""
        for letter in self.letters:
            letter.x -= SCROLL_SPEED
            letter.y += letter.vy >> 8
            letter.vy = _short(letter.vy + GRAVITY)
            if letter.y >= FLOOR:
                letter.vy = _short(-_half_toward_zero(letter.vy))
            if letter.x <= -LETTER_SIZE:
                letter.x += LETTER_COUNT * LETTER_SIZE
                letter.char = next(self._chars)
                letter.y = -LETTER_SIZE
                letter.vy = 0