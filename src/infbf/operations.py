from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .compiler import OPCODE_NAMES, OPERATION_NAMES, InfinifuckCompiler


@dataclass(frozen=True)
class Operation:
    name: str
    symbol: Optional[str]  # infinifuck opcode, None for building blocks
    code: str


_SYMBOLS = {name: op for op, name in OPCODE_NAMES.items()}

_compiler = InfinifuckCompiler()

OPERATIONS: Dict[str, Operation] = {
    name: Operation(name=name, symbol=_SYMBOLS.get(name), code=_compiler.fragment(name))
    for name in OPERATION_NAMES
}

PREAMBLE = OPERATIONS['preamble'].code
RIGHT = OPERATIONS['right'].code
LEFT = OPERATIONS['left'].code
PLUS = OPERATIONS['plus'].code
MINUS = OPERATIONS['minus'].code
IS_NONZERO = OPERATIONS['is_nonzero'].code
OPEN = OPERATIONS['open'].code
CLOSE = OPERATIONS['close'].code
GET = OPERATIONS['get'].code
PUT = OPERATIONS['put'].code


def get_operation(name: str) -> Operation:
    try:
        return OPERATIONS[name]
    except KeyError:
        raise KeyError(f"Unknown operation: {name}") from None
