from __future__ import annotations


class IOMixin:
    def _generate_get(self):
        # Clear every data cell, ending on the trailing a
        self.bf_code.append('[>>[-]>]')
        self.bf_code.append('<<<[<<<]>>>')  # leftmost flag
        self.bf_code.append('>>,<<')        # read into the low digit; EOF reads 0

    def _generate_put(self):
        # Only the low digit is visible: output is the value mod 256
        self.bf_code.append('>>.<<')
