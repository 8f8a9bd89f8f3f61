#!/usr/bin/env python3
"""
Integer encoding helpers: building and decoding triplet tapes.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from infbf import LEFT, PREAMBLE, RIGHT, ContractError, Tape, run_program
from infbf.layout import (
    MARGIN, Integer, active_integer, check_layout, digits_of, integer_values, read_integers, tape_with,
)


def test_digits_are_little_endian_base_256():
    assert digits_of(0) == [0]
    assert digits_of(255) == [255]
    assert digits_of(256) == [0, 1]
    assert digits_of(0x010203) == [3, 2, 1]
    assert digits_of(5, width=3) == [5, 0, 0]


def test_digits_of_rejects_bad_input():
    with pytest.raises(ValueError):
        digits_of(-1)
    with pytest.raises(ValueError):
        digits_of(65536, width=2)


def test_tape_with_single_integer():
    assert tape_with([5]) == Tape.parse("[1] 0 5   0 0 0")
    assert tape_with([5]).pointer == 0


def test_tape_with_several_integers_and_active():
    tape = tape_with([258, 7], active=1, origin=3)
    assert tape == Tape.parse("0 0 0   1 0 2   1 0 1   0 0 0   [1] 0 7   0 0 0")
    assert tape.pointer == 12


def test_tape_with_width():
    assert tape_with([1], width=3) == Tape.parse("[1] 0 1   1 0 0   1 0 0   0 0 0")


def test_tape_with_rejects_bad_arguments():
    with pytest.raises(ValueError):
        tape_with([])
    with pytest.raises(IndexError):
        tape_with([1, 2], active=2)


def test_read_integers():
    tape = Tape.parse("[1] 0 255   1 0 1   0 0 0   0 0 0   1 0 9")
    assert read_integers(tape) == [Integer(start=0, digits=[255, 1]), Integer(start=12, digits=[9])]
    assert integer_values(tape) == [511, 9]
    assert read_integers(tape)[0].end == 6


def test_read_integers_with_negative_cells():
    tape = Tape.parse("1 0 4   0 0 0 | [1] 0 6")
    assert integer_values(tape) == [4, 6]
    assert active_integer(tape).value == 6


def test_read_integers_rejects_broken_triplets():
    with pytest.raises(ContractError):
        read_integers(Tape.parse("[1] 1 5"))
    with pytest.raises(ContractError):
        read_integers(Tape.parse("[1] 0 5   0 3 0"))


def test_active_integer_must_start_at_pointer():
    tape = Tape.parse("1 0 4   [1] 0 6")
    with pytest.raises(ContractError, match="not on the leftmost flag"):
        active_integer(tape)


def test_check_layout_accepts_built_tapes():
    check_layout(tape_with([0, 1, 70000], active=2, origin=3))


def test_check_layout_rejects_pointer_on_data():
    tape = tape_with([3])
    tape.pointer = 2
    with pytest.raises(ContractError):
        check_layout(tape)


def test_preamble_starts_the_first_integer_after_the_margin():
    result = run_program(PREAMBLE)
    assert result.tape.pointer == MARGIN
    assert active_integer(result.tape) == Integer(start=MARGIN, digits=[0])
    # a scan coming back from the right stops inside the margin
    result = run_program(PREAMBLE + RIGHT + LEFT)
    assert result.tape.pointer == MARGIN
    assert result.min_index_reached >= 0
