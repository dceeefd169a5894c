from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .engine import run
from .instructions import Program
from .tape import INITIAL_TAPE_LENGTH
from .translator import translate


@dataclass(frozen=True)
class RunOptions:
    tape_length: int = INITIAL_TAPE_LENGTH
    coalesce: bool = True
    encoding: str = 'utf-8'


@dataclass(frozen=True)
class RunResult:
    output: bytes
    instructions: int
    steps: int
    tape_length: int
    encoding: str = 'utf-8'

    @property
    def text(self) -> str:
        return self.output.decode(self.encoding)


def translate_string(source: str, *, options: Optional[RunOptions] = None) -> Program:
    coalesce = True if options is None else options.coalesce
    return translate(source, coalesce_runs=coalesce)


def translate_file(path: str | Path, *, options: Optional[RunOptions] = None, encoding: str = 'utf-8') -> Program:
    p = Path(path)
    return translate_string(p.read_text(encoding=encoding), options=options)


def run_program(program: Program, *, input_data: bytes = b'', options: Optional[RunOptions] = None) -> RunResult:
    opts = options or RunOptions()
    stdout = io.BytesIO()
    ctx = run(
        program,
        io.BytesIO(input_data),
        stdout,
        tape_length=opts.tape_length,
        encoding=opts.encoding,
    )
    return RunResult(
        output=stdout.getvalue(),
        instructions=len(program),
        steps=ctx.steps,
        tape_length=len(ctx.tape),
        encoding=opts.encoding,
    )


def run_string(source: str, *, input_data: bytes = b'', options: Optional[RunOptions] = None) -> RunResult:
    return run_program(translate_string(source, options=options), input_data=input_data, options=options)


def run_file(
    path: str | Path,
    *,
    input_data: bytes = b'',
    options: Optional[RunOptions] = None,
    encoding: str = 'utf-8',
) -> RunResult:
    p = Path(path)
    return run_string(p.read_text(encoding=encoding), input_data=input_data, options=options)
