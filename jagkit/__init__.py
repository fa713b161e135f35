"""Atari Jaguar runtime helpers: division routines, profiler, Dhrystone, font, screen and scroller."""

__version__ = "0.1.0"

__all__ = [
    "arith",
    "dhrystone",
    "font",
    "profiler",
    "screen",
    "scroller",
]