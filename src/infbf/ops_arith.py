from __future__ import annotations


class ArithOpsMixin:
    # ===== PLUS =====
    #
    # x = 1
    # while x:
    #     data += 1
    #     x = (data == 0)
    #     if x:
    #         x = 0
    #         move to the next triplet, making sure it holds a digit
    #         x = 1
    # return to the leftmost digit
    #
    # "making sure it holds a digit": if the next triplet is the spacing after
    # the integer, shift every integer to the right over by one triplet and
    # turn the freed triplet into a digit with data = 0.

    def _generate_plus(self):
        # position: leftmost flag
        self.bf_code.append('>+')  # x = 1

        self.bf_code.append('[')  # while x
        self.bf_code.append('>+<')  # data += 1

        # x = (data == 0), going through flag as scratch
        self.bf_code.append('-<->')               # x = flag = 0
        self.bf_code.append('>[-<+<+>>]<[->+<]')  # flag = data
        self.bf_code.append('+<[>-<[-]]+>')       # x = (flag == 0); flag = 1

        self.bf_code.append('[')  # if x (the digit wrapped)
        self.bf_code.append('-')  # x = 0
        self.bf_code.append('>>>')  # next triplet: either the x of the next digit
                                    # or the b of the trailing spacing
        self._generate_ensure_digit()
        self.bf_code.append('+')    # x = 1 on the new digit
        self.bf_code.append('-<->')  # flag = x = 0 so the branch exits
        self.bf_code.append(']')

        # The branch left flag = 0 if it ran and flag = 1 if it did not.
        # Restore flag = 1 and carry the branch outcome into x.
        self.bf_code.append('<-[>+<[-]]+>')
        self.bf_code.append(']')  # while x

        # position: x
        self.bf_code.append('<')         # flag
        self.bf_code.append('[<<<]>>>')  # leftmost flag

    def _generate_ensure_digit(self):
        # position: x/b; the cell to the left is flag/a
        self.bf_code.append('+<[>-<-]+>')  # x/b = (flag/a == 0); flag/a = 1
        self.bf_code.append('[')           # only on a spacing triplet: position b
        self.bf_code.append('<->-')        # a = b = 0
        self._generate_shift_right()
        self.bf_code.append('<+>')  # a = 1: the spacing is now a digit with data = 0
        self.bf_code.append(']')    # b == 0 so this exits; position x

    def _generate_shift_right(self):
        # position: b of the spacing being turned into a digit.
        # Walk right over every later integer, setting b of each trailing spacing
        # to 1 as a marker; end on the b of the rightmost integer.
        self.bf_code.append('>>[[>>>]>+>>]<<')
        # Walk back left over the marked integers, moving each digit 3 cells to
        # the right and clearing the markers. Our own b is 0, which stops the walk.
        self.bf_code.append('[-<<<<[>>[->>>+<<<]>+<<<-<<<]>]')

    # ===== IS_NONZERO =====
    #
    # go to the rightmost digit
    # while on a digit:
    #     x = (data != 0)
    #     x = x or x(+3); x(+3) = 0
    #     move to the preceding triplet
    # move to the succeeding triplet
    #
    # Leaves x of the leftmost digit = 1 iff the integer is nonzero; the x of
    # every other digit is left at 0. Ends on the leftmost flag.

    def _generate_is_nonzero(self):
        self.bf_code.append('[>>>]<<<')  # flag of the rightmost digit

        self.bf_code.append('[')  # while flag/a
        # x = data
        self.bf_code.append('->>[-<+<+>>]<<[->>+<<]+')
        # x = (x != 0)
        self.bf_code.append('->[<+>[-]]<[->+<]+')
        # x += x(+3); x(+3) = 0
        self.bf_code.append('>>>>[-<<<+>>>]<<<<')
        # x = (x != 0)
        self.bf_code.append('->[<+>[-]]<[->+<]+')
        self.bf_code.append('<<<')  # preceding triplet
        self.bf_code.append(']')

        self.bf_code.append('>>>')  # leftmost flag

    # ===== MINUS =====
    #
    # run IS_NONZERO
    # while x:
    #     x(+3) = (data == 0)
    #     data -= 1
    #     move to the next triplet
    # return to the leftmost digit
    #
    # Zero stays zero; borrowed digits become 255 and the chain never shrinks.

    def _generate_minus(self):
        self._generate_is_nonzero()
        self.bf_code.append('>')  # x
        self.bf_code.append('[')  # while x/b
        self.bf_code.append('-')  # x = 0
        # x = data
        self.bf_code.append('<->>[-<+<+>>]<<[->>+<<]+>')
        # x(+3) = (x == 0); x = 0
        self.bf_code.append('>>>+<<<[[-]>>>-<<<]')
        self.bf_code.append('>-<')  # data -= 1
        self.bf_code.append('>>>')  # x(+3)
        self.bf_code.append(']')

        # position: x/b of the first triplet that did not borrow
        self.bf_code.append('<')            # flag/a
        self.bf_code.append('<<<[<<<]>>>')  # leftmost flag
