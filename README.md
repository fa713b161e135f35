# jagkit

Runtime helpers and reference routines for the Atari Jaguar console,
usable from plain Python: the runtime's 32-bit division and remainder
routines, a call profiler for named sections, the Dhrystone 1.1
benchmark, the 8x8 bitmap text font, a byte-per-pixel screen that draws
text with that font, and the bouncing-letter sprite scroller.

No third-party libraries are needed.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Modules

### `jagkit.arith`

`ldivs(z, n)`, `ldivu(z, n)`, `lmods(z, n)` and `lmodu(z, n)` give the
signed and unsigned quotient and remainder of 32-bit values. Operands are
reduced to 32 bits first and results wrap the same way. Signed division
truncates toward zero, and a signed remainder takes the sign of `z`.
Dividing by zero does not raise: every routine returns 0.

    from jagkit.arith import ldivs, lmods
    ldivs(-7, 2)   # -3
    lmods(-7, 2)   # -1

### `jagkit.profiler`

`Profiler(clock=None)` counts how often named sections are entered and
sums the ticks spent in them. `clock` is any callable returning a tick
count; its `frequency` attribute, when present, gives ticks per second.
Without a clock, `time.perf_counter_ns` is used at 1 000 000 000 ticks
per second.

- `start(name)` counts an entry and notes the start time.
- `end(name)` adds the ticks since the last start; unknown names are ignored.
- `report()` returns a `Freq=...` line followed by one
  `name: calls=N,total=HIGH,LOW` line per section, in first-seen order.
- `entries` maps each name to its `ProfileEntry` (`count`, `total`,
  `total_high`, `total_low`).

### `jagkit.dhrystone`

`Dhrystone()` holds the benchmark's global state; `run(loops=60000)`
sets up its two `Record`s and runs the passes, leaving the globals
(`int_glob`, `array1_glob`, `array2_glob`, `record_1`, `record_2`,
`loop_count` and so on) for inspection. A negative loop count raises
`ValueError`. `Ident` is the benchmark's enumeration.

`report(loops, vbl_count, hz=60)` builds the result line of a timed run,
working in 16-bit unsigned arithmetic; it raises `ZeroDivisionError`
when the run lasted less than one whole second. `number_to_decimal(value)`
formats a value as a 16-bit unsigned decimal.

    from jagkit.dhrystone import report
    report(60000, 600)
    # 'Dhrystone - 1.1: time for 60000 passes = 10 => -t -i 6000 -r " dhrystones/second."'

### `jagkit.font`

The 8x8 font for character codes 0 to 127. `glyph_rows(code)` returns a
glyph's eight row bytes (most significant bit leftmost) and
`glyph_bits(code)` the same as rows of booleans. Either takes a
one-character string or an integer code; codes outside the font raise
`ValueError`.

### `jagkit.screen`

`Screen(width=320, height=200, text_size=1, text_color=2, transparent=True)`
is a frame buffer of one colour index (0-255) per pixel, in `pixels`.
`clear(color=0)` fills it, `pixel(x, y)` reads one pixel (`IndexError`
off screen), and `draw_char(x, y, ch)` and `draw_string(x, y, text)` draw
font text scaled by `text_size` in `text_color`. Unset font pixels are
left alone when `transparent` is true and written as 0 otherwise.
Addressing is linear, so text past the right edge continues on the
following rows; pixels past the end of the buffer are dropped.

    from jagkit.screen import Screen
    screen = Screen(text_color=1)
    screen.draw_string(1, 1, "Hello Jag Users")

### `jagkit.scroller`

`Scroller(text=MESSAGE)` holds a row of `Letter` sprites (`x`, `y`,
`vy` in 8.8 fixed point, `char`). Each `step()` moves every letter two
pixels left, applies gravity, bounces it off the floor at y = 200, and
sends a letter that leaves the left edge back in on the right with the
next character of the text, which repeats once it runs out. An empty
text raises `ValueError`.

## What it does not do

jagkit models the routines' behaviour in memory only. It does not talk to
a console or its hardware, has no table of hardware register addresses or
bit-field equates, no colour palette, and does not display anything: a
`Screen` or `Scroller` is state to inspect, not a window. There is no
command-line program.