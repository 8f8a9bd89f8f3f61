from .tape import Tape
from .engine import Program, PrimitiveRunner, RunOptions, RunResult, build_jump_table, run_program
from .compiler import InfinifuckCompiler
from .operations import (
    CLOSE, GET, IS_NONZERO, LEFT, MINUS, OPEN, OPERATIONS, PLUS, PREAMBLE, PUT, RIGHT,
    Operation, get_operation,
)
from .optimizer import minify
from .api import CompileOptions, CompileResult, compile_file, compile_string, mapping_table, run_string
from .errors import (
    CompileError, ContractError, InfBFError, NotationError, ProgramError, StepLimitError,
)

__all__ = [
    'Tape',
    'Program',
    'PrimitiveRunner',
    'RunOptions',
    'RunResult',
    'build_jump_table',
    'run_program',
    'InfinifuckCompiler',
    'Operation',
    'OPERATIONS',
    'get_operation',
    'PREAMBLE',
    'RIGHT',
    'LEFT',
    'PLUS',
    'MINUS',
    'IS_NONZERO',
    'OPEN',
    'CLOSE',
    'GET',
    'PUT',
    'minify',
    'CompileOptions',
    'CompileResult',
    'compile_string',
    'compile_file',
    'run_string',
    'mapping_table',
    'InfBFError',
    'NotationError',
    'ProgramError',
    'CompileError',
    'ContractError',
    'StepLimitError',
]
