from __future__ import annotations

from typing import List, Tuple

OPCODES = '+-<>[].,'

COMMENT_MARKER = '#'


def strip_comments(code: str, marker: str = COMMENT_MARKER) -> str:
    """Drop everything after `marker` on each line."""
    if not marker:
        return code
    return '\n'.join(line.split(marker, 1)[0] for line in code.split('\n'))


def distill(code: str, marker: str = COMMENT_MARKER) -> str:
    """Remove comments and every character that is not one of the eight opcodes."""
    code = strip_comments(code, marker)
    return ''.join(ch for ch in code if ch in OPCODES)


def tokenize(source: str) -> List[Tuple[str, int]]:
    """
    Split infinifuck source into (opcode, line) pairs.

    Infinifuck uses the same eight symbols as brainfuck; anything else is a comment.
    """
    tokens: List[Tuple[str, int]] = []
    for line_no, line in enumerate(source.split('\n'), start=1):
        for ch in line:
            if ch in OPCODES:
                tokens.append((ch, line_no))
    return tokens
