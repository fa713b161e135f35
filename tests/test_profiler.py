from jagkit.profiler import ProfileEntry, Profiler


class FakeClock:
    def __init__(self, ticks, frequency=709379):
        self._ticks = iter(ticks)
        self.frequency = frequency

    def __call__(self):
        return next(self._ticks)


def test_single_section_counts_and_total():
    profiler = Profiler(FakeClock([100, 130]))
    profiler.start("work")
    profiler.end("work")
    entry = profiler.entries["work"]
    assert entry.count == 1
    assert entry.total == 130 - 100


def test_repeated_section_accumulates():
    profiler = Profiler(FakeClock([0, 10, 50, 55]))
    for _ in range(2):
        profiler.start("loop")
        profiler.end("loop")
    entry = profiler.entries["loop"]
    assert entry.count == 2
    assert entry.total == (10 - 0) + (55 - 50)


def test_end_without_any_start_is_ignored():
    clock = FakeClock([])
    profiler = Profiler(clock)
    profiler.end("nothing")
    assert profiler.entries == {}


def test_end_of_unknown_section_is_ignored():
    profiler = Profiler(FakeClock([1, 2]))
    profiler.start("known")
    profiler.end("other")
    assert list(profiler.entries) == ["known"]
    assert profiler.entries["known"].total == 0


def test_report_format_and_order():
    profiler = Profiler(FakeClock([0, 5, 20, 27], frequency=3546895))
    profiler.start("first")
    profiler.end("first")
    profiler.start("second")
    profiler.end("second")
    lines = profiler.report().splitlines()
    assert lines[0] == "Freq=3546895"
    assert lines[1] == "first: calls=1,total=0,5"
    assert lines[2] == "second: calls=1,total=0,7"
    assert len(lines) == 3


def test_report_splits_large_total():
    start = 0
    finish = (3 << 32) + 42
    profiler = Profiler(FakeClock([start, finish]))
    profiler.start("long")
    profiler.end("long")
    entry = profiler.entries["long"]
    assert entry.total_high == 3
    assert entry.total_low == 42
    assert "long: calls=1,total=3,42" in profiler.report()


def test_entry_halves_recombine():
    entry = ProfileEntry("x", total=(7 << 32) | 0xDEAD)
    assert (entry.total_high << 32) | entry.total_low == entry.total


def test_empty_report_has_only_frequency():
    profiler = Profiler(FakeClock([], frequency=1000))
    assert profiler.report() == "Freq=1000\n"


def test_default_clock_measures_non_negative_time():
    profiler = Profiler()
    profiler.start("real")
    profiler.end("real")
    entry = profiler.entries["real"]
    assert entry.count == 1
    assert entry.total >= 0
    assert profiler.report().startswith(f"Freq={profiler.frequency}\n")