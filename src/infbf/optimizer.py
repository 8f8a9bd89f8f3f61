#
# Peephole minifier for primitive (brainfuck) programs.
#
# Folds every run of +/- and every run of </> into its net effect and drops
# runs that cancel out, repeating until nothing changes. Dropping a zero run
# can make two move runs adjacent (">+-<"), hence the fixpoint.
#
# Brackets and IO are barriers: nothing is folded across them, so the result
# is equivalent to the input on every tape.
#
from __future__ import annotations

import re
from typing import List

from .lexer import COMMENT_MARKER, distill

_RUN_RE = re.compile(r"[+-]+|[<>]+|[.,]")
_BRACKETS_RE = re.compile(r"([\[\]])")


def net(run: str) -> int:
    """Net effect of a run: +1 per '+' or '>', -1 per '-' or '<'."""
    return sum(1 if ch in '+>' else -1 for ch in run)


def _fold(run: str) -> str:
    if run in ('.', ','):
        return run
    up, down = ('+', '-') if run[0] in '+-' else ('>', '<')
    n = net(run)
    return up * n if n > 0 else down * -n


def pack_straight(code: str) -> str:
    """Minify bracket-free opcode text."""
    while True:
        packed = ''.join(_fold(m.group()) for m in _RUN_RE.finditer(code))
        if packed == code:
            return packed
        code = packed


def segments(code: str) -> List[str]:
    """Split opcode text into bracket-free runs and single brackets, in order."""
    return [p for p in _BRACKETS_RE.split(code) if p]


def count_ops(code: str, *, comment_marker: str = COMMENT_MARKER) -> int:
    """Static op count: one per opcode character, brackets included."""
    return len(distill(code, comment_marker))


def minify(code: str, *, comment_marker: str = COMMENT_MARKER) -> str:
    """
    Remove comments and extraneous characters, then cancel provably redundant
    pairs such as a '+' followed by a '-'.

    Each straight-line run between brackets is packed on its own, so this also
    works on fragments whose brackets are closed by another fragment.
    """
    code = distill(code, comment_marker)
    return ''.join(p if p in ('[', ']') else pack_straight(p) for p in segments(code))
