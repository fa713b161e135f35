"""An 8-bit chunky frame buffer with bitmap text drawing."""

from __future__ import annotations

from typing import Union

from jagkit.font import FONT_WIDTH, T_XREZ, T_YREZ, glyph_rows

_BYTE_MAX = 0xFF


def _check_color(color: int) -> int:
    if not 0 <= color <= _BYTE_MAX:
        raise ValueError(f"colour index must be 0-255: {color}")
    return color


class Screen:
    """A frame buffer of one colour index per pixel, stored row by row.

    Text is drawn with the 8x8 font, each font pixel scaled to a
    ``text_size`` square in ``text_color``. Unset font pixels are left
    alone when ``transparent`` is true and written as 0 otherwise.
    Drawing is addressed linearly, so text running off the right edge
    continues on the following rows; pixels past the end of the buffer
    are dropped.
    """

    def __init__(
        self,
        width: int = T_XREZ,
        height: int = T_YREZ,
        text_size: int = 1,
        text_color: int = 2,
        transparent: bool = True,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"screen size must be positive: {width}x{height}")
        self.width = width
        self.height = height
        self.text_size = text_size
        self.text_color = text_color
        self.transparent = transparent
        self.pixels = bytearray(width * height)

    @property
    def text_size(self) -> int:
        """Scale factor of drawn text."""
        return self._text_size

    @text_size.setter
    def text_size(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"text size must be at least 1: {size}")
        self._text_size = size

    @property
    def text_color(self) -> int:
        """Colour index of drawn text."""
        return self._text_color

    @text_color.setter
    def text_color(self, color: int) -> None:
        self._text_color = _check_color(color)

    def clear(self, color: int = 0) -> None:
        """Fill the whole screen with ``color``."""
        self.pixels[:] = bytes([_check_color(color)]) * len(self.pixels)

    def pixel(self, x: int, y: int) -> int:
        """Return the colour index at (x, y); IndexError when off screen."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is off screen")
        return self.pixels[y * self.width + x]

    def _put(self, location: int, color: int) -> None:
        if 0 <= location < len(self.pixels):
            self.pixels[location] = color

    def draw_char(self, x: int, y: int, ch: Union[str, int]) -> None:
        """Draw one character with its top left corner at (x, y)."""
        size = self.text_size
        color = self.text_color
        line_start = y * self.width + x
        for row in glyph_rows(ch):
            for _ in range(size):
                location = line_start
                for column in range(FONT_WIDTH):
                    lit = row >> (FONT_WIDTH - 1 - column) & 1
                    for _ in range(size):
                        if lit:
                            self._put(location, color)
                        elif not self.transparent:
                            self._put(location, 0)
                        location += 1
                line_start += self.width

    def draw_string(self, x: int, y: int, text: str) -> None:
        """Draw ``text`` left to right starting at (x, y)."""
        for ch in text:
            self.draw_char(x, y, ch)
            x += FONT_WIDTH * self.text_size