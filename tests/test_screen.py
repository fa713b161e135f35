import pytest

from jagkit.font import FONT_HEIGHT, FONT_WIDTH, T_XREZ, T_YREZ, glyph_bits
from jagkit.screen import Screen


def _assert_glyph(screen, x, y, ch, size, color, background):
    bits = glyph_bits(ch)
    for dy in range(FONT_HEIGHT * size):
        for dx in range(FONT_WIDTH * size):
            expected = color if bits[dy // size][dx // size] else background
            assert screen.pixel(x + dx, y + dy) == expected


def test_default_screen_is_blank():
    screen = Screen()
    assert (screen.width, screen.height) == (T_XREZ, T_YREZ)
    assert len(screen.pixels) == T_XREZ * T_YREZ
    assert not any(screen.pixels)


def test_draw_char_matches_glyph():
    screen = Screen(text_color=1)
    screen.draw_char(10, 10, "A")
    _assert_glyph(screen, 10, 10, "A", 1, 1, 0)


def test_draw_char_scaled():
    screen = Screen()
    screen.text_color = 45
    screen.text_size = 3
    screen.draw_char(70, 100, "H")
    _assert_glyph(screen, 70, 100, "H", 3, 45, 0)


def test_transparent_leaves_background():
    screen = Screen(text_color=1)
    screen.clear(7)
    screen.draw_char(0, 0, "A")
    _assert_glyph(screen, 0, 0, "A", 1, 1, 7)


def test_opaque_clears_unset_pixels():
    screen = Screen(text_color=1, transparent=False)
    screen.clear(7)
    screen.draw_char(0, 0, "A")
    _assert_glyph(screen, 0, 0, "A", 1, 1, 0)
    assert screen.pixel(FONT_WIDTH, 0) == 7


def test_space_draws_nothing_when_transparent():
    screen = Screen()
    screen.clear(5)
    screen.draw_char(20, 20, " ")
    assert set(screen.pixels) == {5}


def test_draw_string_advances_by_scaled_width():
    screen = Screen(text_size=2, text_color=3)
    screen.draw_string(4, 6, "Hi")
    _assert_glyph(screen, 4, 6, "H", 2, 3, 0)
    _assert_glyph(screen, 4 + FONT_WIDTH * 2, 6, "i", 2, 3, 0)


def test_hello_message():
    screen = Screen(text_color=1, transparent=False)
    screen.clear(0)
    message = "Hello Jag Users"
    screen.draw_string(1, 1, message)
    for index, ch in enumerate(message):
        _assert_glyph(screen, 1 + index * FONT_WIDTH, 1, ch, 1, 1, 0)


def test_drawing_past_end_is_dropped():
    screen = Screen(width=16, height=4, text_color=9)
    screen.draw_char(0, 0, "A")
    assert len(screen.pixels) == 16 * 4


def test_clear_fills_every_pixel():
    screen = Screen(width=8, height=8)
    screen.clear(200)
    assert set(screen.pixels) == {200}


def test_pixel_off_screen_raises():
    screen = Screen()
    with pytest.raises(IndexError):
        screen.pixel(T_XREZ, 0)
    with pytest.raises(IndexError):
        screen.pixel(0, -1)


def test_bad_settings_raise():
    with pytest.raises(ValueError):
        Screen(text_size=0)
    with pytest.raises(ValueError):
        Screen(text_color=256)
    with pytest.raises(ValueError):
        Screen(width=0)
    with pytest.raises(ValueError):
        Screen().clear(-1)


def test_character_outside_font_raises():
    with pytest.raises(ValueError):
        Screen().draw_char(0, 0, "\u00e9")