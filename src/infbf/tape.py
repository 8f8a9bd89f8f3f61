from __future__ import annotations

import re
from typing import Dict, Mapping, Optional, Tuple

import numpy as np

from .errors import make_notation_error

CELL_SIZE = 256

_INITIAL_CELLS = 64

# One match per notation token; `bad` catches anything else so it can be reported
_TOKEN_RE = re.compile(
    r"(?P<active>\[\s*(?P<active_value>[^\s\[\]|]*)\s*\])"
    r"|(?P<bar>\|)"
    r"|(?P<number>[^\s\[\]|]+)"
    r"|(?P<bad>\S)"
)


def _grow(buf: np.ndarray, need: int) -> np.ndarray:
    size = max(need, 2 * len(buf))
    return np.concatenate([buf, np.zeros(size - len(buf), dtype=np.uint8)])


class Tape:
    """
    Brainfuck tape, unbounded in both directions.

    Cells live in two growable uint8 buffers: `_pos` holds indices 0, 1, 2, ...
    and `_neg` holds indices -1, -2, -3, ... Cells that were never written
    read as 0. The populated range is the smallest range covering every index
    that has been written, and is what `pretty()` and `equals()` look at.
    """

    def __init__(self, cells: Optional[Mapping[int, int]] = None, pointer: int = 0):
        self._pos = np.zeros(_INITIAL_CELLS, dtype=np.uint8)
        self._neg = np.zeros(_INITIAL_CELLS, dtype=np.uint8)
        self._lo: Optional[int] = None
        self._hi: Optional[int] = None
        self.pointer = pointer
        if cells:
            for at, val in cells.items():
                self.set(at, val)

    @staticmethod
    def _validate_index(at) -> None:
        if isinstance(at, bool) or not isinstance(at, (int, np.integer)):
            raise TypeError(f"Tape index must be an integer, got {type(at).__name__}")

    def get(self, at: int) -> int:
        self._validate_index(at)
        if at >= 0:
            return int(self._pos[at]) if at < len(self._pos) else 0
        slot = -at - 1
        return int(self._neg[slot]) if slot < len(self._neg) else 0

    def set(self, at: int, val: int) -> None:
        self._validate_index(at)
        at = int(at)
        if at >= 0:
            if at >= len(self._pos):
                self._pos = _grow(self._pos, at + 1)
            self._pos[at] = int(val) % CELL_SIZE
        else:
            slot = -at - 1
            if slot >= len(self._neg):
                self._neg = _grow(self._neg, slot + 1)
            self._neg[slot] = int(val) % CELL_SIZE
        self._lo = at if self._lo is None else min(self._lo, at)
        self._hi = at if self._hi is None else max(self._hi, at)

    @property
    def value(self) -> int:
        """Value of the cell under the pointer."""
        return self.get(self.pointer)

    @value.setter
    def value(self, val: int) -> None:
        self.set(self.pointer, val)

    def bounds(self) -> Optional[Tuple[int, int]]:
        """Inclusive (lo, hi) of the populated range, or None for a fresh tape."""
        if self._lo is None:
            return None
        return self._lo, self._hi

    def window(self, lo: int, hi: int) -> np.ndarray:
        """Copy of cells lo..hi inclusive as a uint8 array."""
        out = np.zeros(max(0, hi - lo + 1), dtype=np.uint8)
        if hi < lo:
            return out
        if hi >= 0:
            start = max(lo, 0)
            stop = min(hi + 1, len(self._pos))
            if stop > start:
                out[start - lo:stop - lo] = self._pos[start:stop]
        if lo < 0:
            # index i < 0 is stored at _neg[-i - 1]
            first = -min(hi, -1) - 1
            last = min(-lo - 1, len(self._neg) - 1)
            if last >= first:
                seg = self._neg[first:last + 1][::-1]
                out[-last - 1 - lo:-first - lo] = seg
        return out

    def cells(self) -> Dict[int, int]:
        """Populated cells as an {index: value} dict, zeros included."""
        rng = self.bounds()
        if rng is None:
            return {}
        lo, hi = rng
        return {lo + i: int(v) for i, v in enumerate(self.window(lo, hi))}

    def copy(self) -> "Tape":
        clone = Tape(pointer=self.pointer)
        clone._pos = self._pos.copy()
        clone._neg = self._neg.copy()
        clone._lo, clone._hi = self._lo, self._hi
        return clone

    # ===== Equality =====

    def equals(self, other: "Tape") -> bool:
        """Cell-wise equality over both populated ranges; unset and 0 are the same."""
        ranges = [r for r in (self.bounds(), other.bounds()) if r is not None]
        if not ranges:
            return True
        lo = min(r[0] for r in ranges)
        hi = max(r[1] for r in ranges)
        return bool(np.array_equal(self.window(lo, hi), other.window(lo, hi)))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tape):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    # ===== Notation =====

    @classmethod
    def parse(cls, text: str) -> "Tape":
        """
        Parse the tape notation.

        Syntax looks like this:
            1 2 | 3 [4] 5 6
        1 and 2 have negative indices, the rest have non-negative indices.
        The [brackets] around 4 mark the cell the pointer is on. Without a bar
        the first number sits at index 0; without brackets the pointer is 0.
        """
        values = []
        bar_at: Optional[int] = None
        active_at: Optional[int] = None

        for m in _TOKEN_RE.finditer(text):
            column = m.start()
            if m.group('bad') is not None:
                raise make_notation_error(
                    message=f"Unexpected character {m.group('bad')!r}", text=text, column=column
                )
            if m.group('bar') is not None:
                if bar_at is not None:
                    raise make_notation_error(message="Expected at most 1 bar", text=text, column=column)
                bar_at = len(values)
                continue

            raw = m.group('active_value') if m.group('active') is not None else m.group('number')
            if m.group('active') is not None:
                if active_at is not None:
                    raise make_notation_error(
                        message="Expected at most 1 pointer marker", text=text, column=column
                    )
                active_at = len(values)
            if not (raw.isascii() and raw.isdigit()):
                raise make_notation_error(message=f"Non-numeric token {raw!r}", text=text, column=column)
            val = int(raw)
            if val >= CELL_SIZE:
                raise make_notation_error(message=f"Value {val} is not a byte", text=text, column=column)
            values.append(val)

        offset = -bar_at if bar_at is not None else 0
        tape = cls({i + offset: v for i, v in enumerate(values)})
        tape.pointer = active_at + offset if active_at is not None else 0
        return tape

    def pretty(self) -> str:
        """
        Render the tape in the notation `parse` reads.

        This is a right-inverse of `parse`: Tape.parse(tape.pretty()) equals tape,
        pointer included. Cells are grouped into triplets by extra spacing.
        """
        rng = self.bounds() or (0, 0)
        lo = min(0, rng[0], self.pointer)
        hi = max(0, rng[1], self.pointer)
        window = self.window(lo, hi)

        parts = []
        for idx in range(lo, hi + 1):
            s = str(int(window[idx - lo]))
            if idx == self.pointer:
                s = f"[{s}]"
            if idx == 0 and lo < 0:
                s = f"| {s}"
            if idx % 3 == 0:
                s = f"  {s}"
            parts.append(s)
        return ' '.join(parts)

    def __str__(self) -> str:
        return self.pretty()

    def __repr__(self) -> str:
        return f"Tape.parse({self.pretty()!r})"
