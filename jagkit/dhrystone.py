"""The Dhrystone 1.1 integer benchmark and its result line.

``Dhrystone`` runs the benchmark procedures over its own set of global
state, so the values they leave behind can be inspected. ``report``
builds the line printed once a timed run has finished.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

VERSION = "1.1"
BANNER = f"Dhrystone - {VERSION}"

LOOPS = 60000
"""Default number of passes."""
HZ = 60
"""Default number of timer ticks per second."""

STR0 = "DHRYSTONE PROGRAM, SOME STRING"
STR1 = "DHRYSTONE PROGRAM, 1'ST STRING"
STR2 = "DHRYSTONE PROGRAM, 2'ND STRING"

DEBUG_BEFORE_PROC1 = 0x12345678
DEBUG_AFTER_PROC1 = 0x87654321

_USHORT = 0xFFFF
_ARRAY_SIZE = 51


class Ident(enum.IntEnum):
    """The benchmark's enumeration type."""

    IDENT1 = 0
    IDENT2 = 1
    IDENT3 = 2
    IDENT4 = 3
    IDENT5 = 4


@dataclass(eq=False)
class Record:
    """A benchmark record; ``ptr_comp`` links to another record."""

    ptr_comp: Optional[Record] = None
    discr: Ident = Ident.IDENT1
    enum_comp: Ident = Ident.IDENT1
    int_comp: int = 0
    string_comp: str = ""

    def assign_from(self, other: Record) -> None:
        """Copy every field of ``other`` into this record."""
        self.ptr_comp = other.ptr_comp
        self.discr = other.discr
        self.enum_comp = other.enum_comp
        self.int_comp = other.int_comp
        self.string_comp = other.string_comp


def _strcmp(left: str, right: str) -> int:
    return (left > right) - (left < right)


def _c_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


@dataclass(eq=False)
class Dhrystone:
    """Global state of the benchmark and the procedures that work on it."""

    int_glob: int = 0
    bool_glob: bool = False
    char1_glob: str = "\0"
    char2_glob: str = "\0"
    array1_glob: list[int] = field(default_factory=lambda: [0] * _ARRAY_SIZE)
    array2_glob: list[list[int]] = field(
        default_factory=lambda: [[0] * _ARRAY_SIZE for _ in range(_ARRAY_SIZE)]
    )
    record_1: Record = field(default_factory=Record)
    record_2: Record = field(default_factory=Record)
    ptr_glb: Optional[Record] = None
    ptr_glb_next: Optional[Record] = None
    string1_loc: str = ""
    string2_loc: str = ""
    loop_count: int = 0
    debug_flag: int = 0

    def run(self, loops: int = LOOPS) -> None:
        """Set up the records and run ``loops`` passes of the benchmark."""
        if loops < 0:
            raise ValueError(f"loop count must not be negative: {loops}")
        self.debug_flag = 0
        self.ptr_glb_next = self.record_1
        self.ptr_glb = self.record_2
        self.ptr_glb.ptr_comp = self.ptr_glb_next
        self.ptr_glb.discr = Ident.IDENT1
        self.ptr_glb.enum_comp = Ident.IDENT3
        self.ptr_glb.int_comp = 40
        self.ptr_glb.string_comp = STR0
        self.string1_loc = STR1
        self.array2_glob[8][7] = 10

        for index in range(loops):
            self._proc5()
            self._proc4()
            int_loc1 = 2
            int_loc2 = 3
            self.string2_loc = STR2
            enum_loc = Ident.IDENT2
            self.bool_glob = not self._func2(self.string1_loc, self.string2_loc)
            int_loc3 = 0
            while int_loc1 < int_loc2:
                int_loc3 = 5 * int_loc1 - int_loc2
                int_loc3 = self._proc7(int_loc1, int_loc2)
                int_loc1 += 1
            self._proc8(self.array1_glob, self.array2_glob, int_loc1, int_loc3)
            self.debug_flag = DEBUG_BEFORE_PROC1
            self._proc1(self.ptr_glb)
            self.debug_flag = DEBUG_AFTER_PROC1
            for code in range(ord("A"), ord(self.char2_glob) + 1):
                if enum_loc == self._func1(chr(code), "C"):
                    enum_loc = self._proc6(Ident.IDENT1)
            int_loc3 = (int_loc2 & _USHORT) * (int_loc1 & _USHORT)
            int_loc2 = _c_div(int_loc3, int_loc1)
            int_loc2 = 7 * (int_loc3 - int_loc2) - int_loc1
            int_loc1 = self._proc2(int_loc1)
            self.loop_count = index

    def _proc1(self, ptr_par_in: Record) -> None:
        next_record = ptr_par_in.ptr_comp
        next_record.assign_from(self.ptr_glb)
        ptr_par_in.int_comp = 5
        next_record.int_comp = ptr_par_in.int_comp
        next_record.ptr_comp = ptr_par_in.ptr_comp
        next_record.ptr_comp = self._proc3(next_record.ptr_comp)
        if next_record.discr == Ident.IDENT1:
            next_record.int_comp = 6
            next_record.enum_comp = self._proc6(ptr_par_in.enum_comp)
            next_record.ptr_comp = self.ptr_glb.ptr_comp
            next_record.int_comp = self._proc7(next_record.int_comp, 10)
        else:
            ptr_par_in.assign_from(next_record)

    def _proc2(self, int_par_io: int) -> int:
        if self.char1_glob != "A":
            raise RuntimeError("Proc2 cannot finish unless Char1Glob is 'A'")
        int_loc = int_par_io + 10 - 1
        return int_loc - self.int_glob

    def _proc3(self, ptr_par_out: Optional[Record]) -> Optional[Record]:
        if self.ptr_glb is not None:
            ptr_par_out = self.ptr_glb.ptr_comp
        else:
            self.int_glob = 100
        self.ptr_glb.int_comp = self._proc7(10, self.int_glob)
        return ptr_par_out

    def _proc4(self) -> None:
        bool_loc = self.char1_glob == "A"
        bool_loc |= self.bool_glob
        self.char2_glob = "B"

    def _proc5(self) -> None:
        self.char1_glob = "A"
        self.bool_glob = False

    def _proc6(self, enum_par_in: Ident) -> Ident:
        enum_par_out = enum_par_in
        if not self._func3(enum_par_in):
            enum_par_out = Ident.IDENT4
        if enum_par_in == Ident.IDENT1:
            enum_par_out = Ident.IDENT1
        elif enum_par_in == Ident.IDENT2:
            enum_par_out = Ident.IDENT1 if self.int_glob > 100 else Ident.IDENT4
        elif enum_par_in == Ident.IDENT3:
            enum_par_out = Ident.IDENT2
        elif enum_par_in == Ident.IDENT5:
            enum_par_out = Ident.IDENT3
        return enum_par_out

    @staticmethod
    def _proc7(int_par_i1: int, int_par_i2: int) -> int:
        int_loc = int_par_i1 + 2
        return int_par_i2 + int_loc

    def _proc8(
        self,
        array1: list[int],
        array2: list[list[int]],
        int_par_i1: int,
        int_par_i2: int,
    ) -> None:
        int_loc = int_par_i1 + 5
        array1[int_loc] = int_par_i2
        array1[int_loc + 1] = array1[int_loc]
        array1[int_loc + 30] = int_loc
        for int_index in (int_loc, int_loc + 1):
            array2[int_loc][int_index] = int_loc
        array2[int_loc][int_loc - 1] += 1
        array2[int_loc + 20][int_loc] = array1[int_loc]
        self.int_glob = 5

    @staticmethod
    def _func1(char_par1: str, char_par2: str) -> Ident:
        char_loc1 = char_par1
        char_loc2 = char_loc1
        return Ident.IDENT1 if char_loc2 != char_par2 else Ident.IDENT2

    def _func2(self, str_par_i1: str, str_par_i2: str) -> bool:
        int_loc = 1
        if self._func1(str_par_i1[int_loc], str_par_i2[int_loc + 1]) != Ident.IDENT1:
            raise RuntimeError("Func2 cannot finish when the compared letters match")
        char_loc = "A"
        int_loc += 1
        if "W" <= char_loc <= "Z":
            int_loc = 7
        if char_loc == "X":
            return True
        if _strcmp(str_par_i1, str_par_i2) > 0:
            int_loc += 7
            return True
        return False

    @staticmethod
    def _func3(enum_par_in: Ident) -> bool:
        return enum_par_in == Ident.IDENT3


def number_to_decimal(value: int) -> str:
    """Decimal digits of ``value`` taken as a 16-bit unsigned number."""
    return str(value & _USHORT)


def report(loops: int, vbl_count: int, hz: int = HZ) -> str:
    """The result line for ``loops`` passes timed at ``vbl_count`` ticks of ``hz``.

    Raises ZeroDivisionError when the run took less than one whole second.
    """
    ticks = vbl_count & _USHORT
    rate = hz & _USHORT
    if not rate:
        raise ZeroDivisionError("tick rate is zero")
    seconds = ticks // rate
    if not seconds:
        raise ZeroDivisionError("run took less than one second")
    per_second = (loops & _USHORT) // seconds
    return (
        f"{BANNER}: time for {number_to_decimal(loops)} passes = "
        f"{number_to_decimal(seconds)} => -t -i {number_to_decimal(per_second)}"
        ' -r " dhrystones/second."'
    )