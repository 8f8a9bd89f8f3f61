from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Dict, Optional, Union

from .errors import StepLimitError, make_program_error
from .lexer import COMMENT_MARKER, distill
from .tape import CELL_SIZE, Tape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOptions:
    max_steps: Optional[int] = None
    comment_marker: str = COMMENT_MARKER


@dataclass
class RunResult:
    tape: Tape
    output: bytes
    min_index_reached: int
    steps: int

    @property
    def text(self) -> str:
        # one character per output byte
        return self.output.decode('latin-1')


def build_jump_table(code: str) -> Dict[int, int]:
    """Pair every '[' with its matching ']' (both directions) in one scan."""
    table: Dict[int, int] = {}
    stack = []
    for pos, cmd in enumerate(code):
        if cmd == '[':
            stack.append(pos)
        elif cmd == ']':
            if not stack:
                raise make_program_error(message="Unbalanced brackets: unmatched ']'", program=code, position=pos)
            start = stack.pop()
            table[start] = pos
            table[pos] = start
    if stack:
        raise make_program_error(message="Unbalanced brackets: unmatched '['", program=code, position=stack[-1])
    return table


class Program:
    """
    A primitive program: distilled opcode text plus its bracket jump table.

    Construction fails with ProgramError when brackets do not nest, so a
    Program that exists can always be run. `a + b` is plain concatenation.
    """

    def __init__(self, source: Union[str, "Program"] = '', *, comment_marker: str = COMMENT_MARKER):
        if isinstance(source, Program):
            source = source.code
        self.code = distill(source, comment_marker)
        self.jump_table = build_jump_table(self.code)

    def __add__(self, other: Union[str, "Program"]) -> "Program":
        if isinstance(other, str):
            other = Program(other)
        if not isinstance(other, Program):
            return NotImplemented
        return Program(self.code + other.code)

    def __radd__(self, other: str) -> "Program":
        if not isinstance(other, str):
            return NotImplemented
        return Program(other) + self

    def __eq__(self, other) -> bool:
        if not isinstance(other, Program):
            return NotImplemented
        return self.code == other.code

    __hash__ = None

    def __len__(self) -> int:
        return len(self.code)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Program({self.code!r})"


class PrimitiveRunner:
    """
    Executes a primitive program against a Tape.

    - 8-bit wrapping cells
    - tape unbounded to both left and right
    - reading past the end of input stores 0
    - ']' always jumps back to its '[', which re-tests the cell
    """

    def __init__(self, options: Optional[RunOptions] = None):
        self.options = options or RunOptions()
        self.reset()

    def reset(self, tape: Optional[Tape] = None):
        self.tape = tape if tape is not None else Tape()
        self.program = Program()
        self.pc = 0
        self.input_buffer: deque = deque()
        self.output_buffer = bytearray()
        self.step_count = 0
        self.min_index_reached = self.tape.pointer

    def load_program(self, program: Union[str, Program], stdin: Union[str, bytes] = b'', tape: Optional[Tape] = None):
        self.reset(tape)
        if not isinstance(program, Program):
            program = Program(program, comment_marker=self.options.comment_marker)
        self.program = program
        if isinstance(stdin, str):
            stdin = stdin.encode('utf-8')
        self.input_buffer.extend(stdin)
        logger.debug(
            "loaded program: %d ops, %d bracket pairs, %d input bytes",
            len(program), len(program.jump_table) // 2, len(stdin),
        )

    @property
    def finished(self) -> bool:
        return self.pc >= len(self.program.code)

    def step(self) -> bool:
        """Execute one instruction. Returns False once the program has ended."""
        code = self.program.code
        if self.pc >= len(code):
            return False

        tape = self.tape
        command = code[self.pc]
        self.step_count += 1

        if command == '+':
            tape.set(tape.pointer, (tape.get(tape.pointer) + 1) % CELL_SIZE)
        elif command == '-':
            tape.set(tape.pointer, (tape.get(tape.pointer) - 1) % CELL_SIZE)
        elif command == '>':
            tape.pointer += 1
        elif command == '<':
            tape.pointer -= 1
            if tape.pointer < self.min_index_reached:
                self.min_index_reached = tape.pointer
        elif command == '[':
            if tape.get(tape.pointer) == 0:
                self.pc = self.program.jump_table[self.pc] + 1
                return self.pc < len(code)
        elif command == ']':
            self.pc = self.program.jump_table[self.pc]
            return True
        elif command == '.':
            self.output_buffer.append(tape.get(tape.pointer))
        elif command == ',':
            tape.set(tape.pointer, self.input_buffer.popleft() if self.input_buffer else 0)

        self.pc += 1
        return self.pc < len(code)

    def run(self) -> RunResult:
        max_steps = self.options.max_steps
        while not self.finished:
            if max_steps is not None and self.step_count >= max_steps:
                raise StepLimitError(
                    message=f"StepLimitError: program still running after {self.step_count} steps",
                    steps=self.step_count,
                )
            self.step()

        logger.debug(
            "run finished: %d steps, %d output bytes, min index %d",
            self.step_count, len(self.output_buffer), self.min_index_reached,
        )
        return RunResult(
            tape=self.tape,
            output=bytes(self.output_buffer),
            min_index_reached=self.min_index_reached,
            steps=self.step_count,
        )


def run_program(
    program: Union[str, Program],
    stdin: Union[str, bytes] = b'',
    tape: Optional[Tape] = None,
    *,
    options: Optional[RunOptions] = None,
) -> RunResult:
    """Run `program` on `tape` (mutated in place; a fresh tape if omitted)."""
    runner = PrimitiveRunner(options)
    runner.load_program(program, stdin, tape)
    return runner.run()
