#!/usr/bin/env python3
"""
Peephole minifier.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from infbf import Tape, minify, run_program
from infbf.optimizer import count_ops, net, pack_straight, segments


@pytest.mark.parametrize("code, want", [
    ("+-", ""),
    ("-+", ""),
    ("><", ""),
    ("<>", ""),
    (">+-<", ""),
    ("+++-", "++"),
    ("[-]+", "[-]+"),
    ("+[-+]-", "+[]-"),
    ("a+b # -", "+"),
])
def test_minify_cancels_redundant_pairs(code, want):
    assert minify(code) == want


def test_minify_leaves_unbalanced_fragments_alone():
    assert minify(">+-[-<") == ">[-<"
    assert minify("<>]<") == "]<"


def test_minify_keeps_behaviour():
    code = "+++>+-<[->>+<<-+]>>."
    tape = Tape.parse("[0] 0 0")
    want = run_program(code, tape=tape.copy())
    got = run_program(minify(code), tape=tape.copy())
    assert got.tape == want.tape
    assert got.output == want.output


def test_net_counts_each_direction():
    assert net("+++-") == 2
    assert net("<<>") == -1
    assert net("+-") == 0


def test_pack_straight_reaches_a_fixpoint():
    # dropping "+-" leaves "><" adjacent, which only a second pass removes
    assert pack_straight(">+-<") == ""
    assert pack_straight(">>+-<.--+") == ">.-"
    assert pack_straight(",,") == ",,"


def test_segments_keep_brackets_apart():
    assert segments("+[->+<]") == ["+", "[", "->+<", "]"]
    assert segments("]]") == ["]", "]"]
    assert segments("") == []


def test_count_ops_counts_opcodes_only():
    assert count_ops("+[->+<] # move") == 7
    assert count_ops("") == 0
