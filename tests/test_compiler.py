#!/usr/bin/env python3
"""
Infinifuck -> brainfuck compilation and end-to-end runs of compiled programs.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from infbf import (
    CLOSE, GET, LEFT, MINUS, OPEN, OPERATIONS, PLUS, PREAMBLE, PUT, RIGHT,
    CompileError, CompileOptions, InfinifuckCompiler, RunOptions, StepLimitError,
    compile_file, compile_string, get_operation, mapping_table, run_string,
)
from infbf.layout import integer_values


def test_compile_is_token_substitution_after_the_preamble():
    bf = InfinifuckCompiler().compile("+>-<[],.")
    assert bf == PREAMBLE + PLUS + RIGHT + MINUS + LEFT + OPEN + CLOSE + GET + PUT


def test_non_opcode_characters_are_ignored():
    assert compile_string("add one: + # and a comment with -").bf_code == PREAMBLE + PLUS


def test_comments_end_at_the_line_break():
    options = CompileOptions(comment_marker=";")
    bf = compile_string("+ ; - [\n- ; ]", options=options).bf_code
    assert bf == PREAMBLE + PLUS + MINUS


def test_every_operation_is_registered():
    assert set(OPERATIONS) == {
        'preamble', 'right', 'left', 'plus', 'minus', 'is_nonzero', 'open', 'close', 'get', 'put',
    }
    assert get_operation('plus').symbol == '+'
    assert get_operation('is_nonzero').symbol is None
    assert get_operation('put').code == '>>.<<'
    with pytest.raises(KeyError):
        get_operation('times')


def test_fragments_contain_only_opcodes():
    for op in OPERATIONS.values():
        assert op.code
        assert set(op.code) <= set('+-<>[].,')


def test_fragments_use_the_expected_brainfuck():
    assert RIGHT == '[>>>]>>>[-]+'
    assert LEFT == '<<<<<<<<<[<<<]>>>[-]+'
    assert GET == '[>>[-]>]<<<[<<<]>>>>>,<<'
    assert PREAMBLE == '>>>+'


@pytest.mark.parametrize("source, line", [
    ("+[\n-\n", 1),
    ("+\n-]\n", 2),
    ("[\n[\n]", 1),
])
def test_unbalanced_source_is_reported_with_its_line(source, line):
    with pytest.raises(CompileError, match="Unbalanced brackets") as info:
        compile_string(source)
    assert info.value.line == line
    assert f"> {line:4d} |" in info.value.context


def test_optimize_level_minifies_across_fragments():
    plain = compile_string("><").bf_code
    optimized = compile_string("><", options=CompileOptions(optimize_level=1)).bf_code
    assert len(optimized) <= len(plain)
    assert compile_string("><", options=CompileOptions(optimize_level=1)).op_count == len(optimized)


def test_compile_file(tmp_path):
    path = tmp_path / "echo.if"
    path.write_text(",[.,]", encoding="utf-8")
    assert compile_file(path).bf_code == compile_string(",[.,]").bf_code


def test_echo_program():
    result = run_string(",[.,]", "Hello, world!")
    assert result.text == "Hello, world!"
    assert result.min_index_reached >= 0


def test_counts_past_one_byte():
    # 300 increments, then print the low byte: 300 % 256 == 44 == ','
    result = run_string("+" * 300 + ".")
    assert result.output == b","
    assert integer_values(result.tape) == [300]


def test_copy_loop_with_multi_byte_value():
    # a = 300; move a into b and c
    source = "+" * 300 + "[->+>+<<]>>."
    result = run_string(source)
    assert integer_values(result.tape) == [0, 300, 300]
    assert result.output == b","


def test_left_of_the_first_integer_creates_one():
    # the margin only covers scans that come back from the right; stepping
    # left of the first integer needs the unbounded tape
    result = run_string("<+.")
    assert result.output == b"\x01"
    assert integer_values(result.tape) == [1, 0]
    assert result.min_index_reached == -6


def test_run_string_honours_step_limit():
    with pytest.raises(StepLimitError):
        run_string("+[]", run_options=RunOptions(max_steps=1000))


def test_mapping_table_lists_every_operation():
    table = mapping_table()
    assert "PLUS (+)" in table
    assert "IS_NONZERO" in table
    for op in OPERATIONS.values():
        assert op.code in table
