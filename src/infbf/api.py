from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .compiler import InfinifuckCompiler
from .engine import RunOptions, RunResult, run_program
from .lexer import COMMENT_MARKER
from .operations import OPERATIONS
from .optimizer import count_ops


@dataclass(frozen=True)
class CompileOptions:
    optimize_level: Optional[int] = None
    comment_marker: str = COMMENT_MARKER


@dataclass(frozen=True)
class CompileResult:
    bf_code: str
    op_count: int


def compile_string(source: str, *, options: Optional[CompileOptions] = None) -> CompileResult:
    options = options or CompileOptions()
    compiler = InfinifuckCompiler(optimize_level=options.optimize_level, comment_marker=options.comment_marker)
    bf = compiler.compile(source)
    return CompileResult(bf_code=bf, op_count=count_ops(bf))


def compile_file(path: str | Path, *, options: Optional[CompileOptions] = None, encoding: str = "utf-8") -> CompileResult:
    p = Path(path)
    return compile_string(p.read_text(encoding=encoding), options=options)


def run_string(
    source: str,
    stdin: Union[str, bytes] = b'',
    *,
    options: Optional[CompileOptions] = None,
    run_options: Optional[RunOptions] = None,
) -> RunResult:
    """Compile infinifuck `source` and run it on a fresh tape."""
    compiled = compile_string(source, options=options)
    return run_program(compiled.bf_code, stdin, options=run_options)


def mapping_table() -> str:
    rows = ["~~~~~~~ Mapping ~~~~~~~", ""]
    for op in OPERATIONS.values():
        label = op.name.upper()
        if op.symbol is not None:
            label = f"{label} ({op.symbol})"
        rows.append(f"{label:<14}= {op.code}")
    return "\n".join(rows)
