from __future__ import annotations

from .layout import MARGIN


class MemoryOpsMixin:
    # Cell names used below: a digit is `flag x data`, a spacing triplet is `a b c`.
    # Every generator starts and ends on the leftmost flag of an integer.

    def _generate_preamble(self):
        # Leave one triplet free on the left: scans that come back from the
        # right (RIGHT then LEFT, the rewinds of PLUS, MINUS and GET) stop on
        # it instead of running past index 0.
        self.bf_code.append('>' * MARGIN)
        # Initialize the first integer: the pointer is now on its flag
        self.bf_code.append('+')

    def _generate_right(self):
        # Move to the leftmost flag of the next integer, creating it if missing.
        self.bf_code.append('[>>>]')  # skip the digits; stop on the trailing a
        self.bf_code.append('>>>')    # the triplet after the spacing:
                                      # a flag if there is a next integer, else 0
        self.bf_code.append('[-]+')   # flag = 1; turns an empty triplet into a digit

    def _generate_left(self):
        # Move to the leftmost flag of the previous integer, creating it if missing.
        # From our flag, 3 cells back is the previous spacing and 6 back is the
        # previous integer's last digit, so 9 back is either one of its digits
        # or a zero triplet.
        self.bf_code.append('<<<<<<<<<')
        self.bf_code.append('[<<<]>>>')  # walk to its leftmost flag
        self.bf_code.append('[-]+')      # flag = 1
