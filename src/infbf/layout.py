"""
Tape layout shared by every infinifuck operation.

The tape is split into chunks of 3 cells called *triplets*. An infinifuck
number (an *integer*) is a run of *digit* triplets followed by one *spacing*
triplet:

     ( ( flag x data )*N  a b c )*K
         ^^^^^^^^^^^^^    ^^^^^
         one digit        spacing

A digit has flag == 1, x == 0 and one base-256 digit in data; the leftmost
digit is the least significant. A spacing triplet is all zeros. Operations may
break these rules while they run but restore them before they finish, and
always start and end with the pointer on the flag of an integer's leftmost
digit.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import ContractError
from .tape import CELL_SIZE, Tape

TRIPLET = 3

# Digit cells
FLAG, X, DATA = 0, 1, 2
# Spacing cells
A, B, C = 0, 1, 2

# Cells the preamble leaves free to the left of the first integer
MARGIN = TRIPLET


@dataclass(frozen=True)
class Integer:
    start: int  # index of the leftmost flag
    digits: List[int]  # least significant first

    @property
    def value(self) -> int:
        return sum(d * CELL_SIZE ** i for i, d in enumerate(self.digits))

    @property
    def end(self) -> int:
        # index of the `a` cell of the trailing spacing triplet
        return self.start + TRIPLET * len(self.digits)


def digits_of(value: int, width: Optional[int] = None) -> List[int]:
    """Base-256 digits of `value`, least significant first, padded to `width`."""
    if value < 0:
        raise ValueError(f"Integers are unsigned, got {value}")
    digits = []
    while value:
        value, d = divmod(value, CELL_SIZE)
        digits.append(d)
    digits = digits or [0]
    if width is not None:
        if width < len(digits):
            raise ValueError(f"{len(digits)} digits do not fit in width {width}")
        digits += [0] * (width - len(digits))
    return digits


def tape_with(values: Sequence[int], *, width: Optional[int] = None, active: int = 0, origin: int = 0) -> Tape:
    """
    Build a well-formed tape holding `values` as consecutive integers.

    The first integer's leftmost flag sits at `origin`; the pointer is placed
    on the leftmost flag of integer number `active`.
    """
    if not values:
        raise ValueError("A tape needs at least one integer")
    if not 0 <= active < len(values):
        raise IndexError(f"No integer {active} among {len(values)}")

    tape = Tape()
    at = origin
    for i, v in enumerate(values):
        if i == active:
            tape.pointer = at
        for d in digits_of(v, width):
            tape.set(at + FLAG, 1)
            tape.set(at + X, 0)
            tape.set(at + DATA, d)
            at += TRIPLET
        for off in (A, B, C):
            tape.set(at + off, 0)
        at += TRIPLET
    return tape


def _triplet_kind(tape: Tape, at: int) -> str:
    cells = (tape.get(at), tape.get(at + 1), tape.get(at + 2))
    if cells[FLAG] == 1 and cells[X] == 0:
        return 'digit'
    if cells == (0, 0, 0):
        return 'spacing'
    return 'broken'


def read_integers(tape: Tape) -> List[Integer]:
    """
    Decode the integer view of `tape`, scanning triplets aligned with the pointer.

    Runs of zero triplets (margins, gaps) are skipped. Raises ContractError on
    a triplet that is neither a digit nor a spacing triplet.
    """
    rng = tape.bounds()
    if rng is None:
        return []
    lo, hi = rng
    base = tape.pointer % TRIPLET
    at = lo - ((lo - base) % TRIPLET)

    integers: List[Integer] = []
    start: Optional[int] = None
    digits: List[int] = []
    while at <= hi or start is not None:
        kind = _triplet_kind(tape, at)
        if kind == 'broken':
            raise ContractError(
                message=f"Triplet at {at} is neither a digit nor a spacing triplet: {tape.pretty()}",
                want="flag=1 x=0 data, or 0 0 0",
                got=tape.pretty(),
            )
        if kind == 'digit':
            if start is None:
                start = at
            digits.append(tape.get(at + DATA))
        elif start is not None:
            integers.append(Integer(start=start, digits=digits))
            start, digits = None, []
        at += TRIPLET
    return integers


def integer_values(tape: Tape) -> List[int]:
    return [i.value for i in read_integers(tape)]


def active_integer(tape: Tape) -> Integer:
    for integer in read_integers(tape):
        if integer.start == tape.pointer:
            return integer
    raise ContractError(
        message=f"Pointer {tape.pointer} is not on the leftmost flag of an integer: {tape.pretty()}",
        want="pointer on a leftmost flag",
        got=tape.pretty(),
    )


def check_layout(tape: Tape) -> None:
    """Raise ContractError unless `tape` satisfies the layout every operation assumes."""
    active_integer(tape)
