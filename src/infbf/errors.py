from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


def _build_context(lines: List[str], line_no_1: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
    return "\n".join(out)


def _build_span(text: str, column: int, *, width: int = 24) -> str:
    # Single-line excerpt with a caret under `column` (0-based)
    start = max(0, column - width)
    end = min(len(text), column + width)
    excerpt = text[start:end].replace('\n', ' ')
    return f"  {excerpt}\n  {' ' * (column - start)}^"


def _hint_for(message: str, *, kind: str) -> Optional[str]:
    msg = message.lower()
    if kind == 'notation':
        if 'pointer marker' in msg:
            return 'Mark exactly one cell as active, e.g. "1 0 0   [1] 0 0".'
        if 'bar' in msg:
            return 'Use at most one "|" and place it directly before the cell at index 0.'
        if 'not a byte' in msg:
            return 'Cell values are bytes: 0..255.'
        return None
    if kind == 'program':
        if 'unbalanced' in msg:
            return 'Every "[" needs a matching "]" after it.'
        return None
    if kind == 'compile':
        if 'unbalanced' in msg:
            return 'Check for a missing "]" or an extra "[" in the infinifuck source.'
        return None
    return None


@dataclass
class InfBFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class NotationError(InfBFError):
    column: int
    context: str


@dataclass
class ProgramError(InfBFError):
    position: int
    context: str


@dataclass
class CompileError(InfBFError):
    line: int
    context: str


@dataclass
class ContractError(InfBFError):
    want: str
    got: str


@dataclass
class StepLimitError(InfBFError):
    steps: int


def make_notation_error(*, message: str, text: str, column: int) -> NotationError:
    ctx = _build_span(text, column)
    hint = _hint_for(message, kind='notation')
    hint_block = f"\nHint: {hint}" if hint else ""
    return NotationError(
        message=f"NotationError: {message} (column {column})\n{ctx}{hint_block}",
        column=column,
        context=ctx,
    )


def make_program_error(*, message: str, program: str, position: int) -> ProgramError:
    ctx = _build_span(program, position)
    hint = _hint_for(message, kind='program')
    hint_block = f"\nHint: {hint}" if hint else ""
    return ProgramError(
        message=f"ProgramError: {message} (instruction {position})\n{ctx}{hint_block}",
        position=position,
        context=ctx,
    )


def make_compile_error(*, message: str, source: str, line: int) -> CompileError:
    lines = source.split('\n')
    ctx = _build_context(lines, line)
    hint = _hint_for(message, kind='compile')
    hint_block = f"\nHint: {hint}" if hint else ""
    return CompileError(
        message=f"CompileError: {message} (line {line})\n{ctx}{hint_block}",
        line=line,
        context=ctx,
    )


def make_contract_error(*, desc: str, what: str, want: str, got: str) -> ContractError:
    return ContractError(
        message=f"{desc}: failed: want {what}:\n\t{want}\nbut got:\n\t{got}",
        want=want,
        got=got,
    )
