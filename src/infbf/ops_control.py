from __future__ import annotations


class ControlFlowMixin:
    # OPEN and CLOSE wrap a native loop around the x cell that IS_NONZERO
    # computes, so the body runs while the whole integer is nonzero rather
    # than while one cell is. CLOSE re-tests whichever integer is active when
    # the body finishes, as brainfuck's ']' does with the current cell.

    def _generate_open(self):
        self._generate_is_nonzero()
        self.bf_code.append('>')  # x
        self.bf_code.append('[')
        self.bf_code.append('-')  # x = 0
        self.bf_code.append('<')  # flag

    def _generate_close(self):
        self._generate_is_nonzero()
        self.bf_code.append('>')  # x
        self.bf_code.append(']')
        self.bf_code.append('<')  # flag
