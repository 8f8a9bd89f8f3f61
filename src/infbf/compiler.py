from __future__ import annotations

import logging

from .errors import make_compile_error
from .lexer import COMMENT_MARKER, strip_comments, tokenize
from .ops_arith import ArithOpsMixin
from .ops_control import ControlFlowMixin
from .ops_io import IOMixin
from .ops_memory import MemoryOpsMixin
from .optimizer import minify

logger = logging.getLogger(__name__)

# infinifuck opcode -> operation name
OPCODE_NAMES = {
    '+': 'plus',
    '-': 'minus',
    '>': 'right',
    '<': 'left',
    '[': 'open',
    ']': 'close',
    ',': 'get',
    '.': 'put',
}

OPERATION_NAMES = ('preamble', 'right', 'left', 'plus', 'minus', 'is_nonzero', 'open', 'close', 'get', 'put')


class InfinifuckCompiler(MemoryOpsMixin, ArithOpsMixin, ControlFlowMixin, IOMixin):
    """
    Infinifuck -> brainfuck compiler.

    Memory Layout:
    - Triplets of cells; integers are runs of digit triplets (flag x data)
      closed by a spacing triplet (0 0 0); see `infbf.layout`
    - The first triplet is kept free so leftward scans stay on the tape

    Code Generation Strategy:
    - The preamble, then one fixed fragment per source opcode
    - Each fragment is generated by a `_generate_<name>` method and minified once
    - OPEN/CLOSE/MINUS reuse IS_NONZERO by emitting it inline
    """

    def __init__(self, optimize_level=None, comment_marker=COMMENT_MARKER):
        self.bf_code = []  # Generated brainfuck code
        self.loop_lines = []  # Source lines of the currently open '['
        self.optimize_level = optimize_level
        self.comment_marker = comment_marker
        self._fragments = {}

    def fragment(self, name):
        """Minified brainfuck for one operation."""
        if name not in OPERATION_NAMES:
            raise KeyError(f"Unknown operation: {name}")
        if name not in self._fragments:
            saved, self.bf_code = self.bf_code, []
            try:
                getattr(self, f'_generate_{name}')()
                self._fragments[name] = minify(''.join(self.bf_code))
            finally:
                self.bf_code = saved
        return self._fragments[name]

    # ===== Main Compilation Pipeline =====

    def compile(self, code, optimize_level=None):
        """
        Main compilation method.

        Steps:
        1. Preprocess: remove comments
        2. Tokenize: pick out the eight opcodes, remembering their lines
        3. Emit the preamble, then the fragment for each opcode

        Args:
            code: infinifuck source code string

        Returns:
            Generated brainfuck code string
        """
        source = code
        tokens = tokenize(strip_comments(code, self.comment_marker))
        self.bf_code = [self.fragment('preamble')]
        self.loop_lines = []

        for op, line in tokens:
            if op == '[':
                self.loop_lines.append(line)
            elif op == ']':
                if not self.loop_lines:
                    raise make_compile_error(message="Unbalanced brackets: unmatched ']'", source=source, line=line)
                self.loop_lines.pop()
            self.bf_code.append(self.fragment(OPCODE_NAMES[op]))

        if self.loop_lines:
            raise make_compile_error(
                message="Unbalanced brackets: unmatched '['", source=source, line=self.loop_lines[-1]
            )

        bf = ''.join(self.bf_code)
        level = self.optimize_level if optimize_level is None else optimize_level
        if level is not None:
            bf = minify(bf)
        logger.debug("compiled %d tokens into %d brainfuck ops", len(tokens), len(bf))
        return bf
