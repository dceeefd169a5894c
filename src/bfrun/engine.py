from __future__ import annotations

import io
import logging
import sys
from dataclasses import dataclass, field
from typing import BinaryIO, List, TextIO, Union

from .errors import BFRuntimeError, make_input_read_error, make_pointer_overflow, make_pointer_underflow
from .instructions import Add, Input, LoopBegin, LoopEnd, Move, Output, Program
from .tape import INITIAL_TAPE_LENGTH, Tape

logger = logging.getLogger(__name__)

# Largest index a Python sequence can address.
MAX_POINTER = sys.maxsize

# Characters held before output is written out.
OUTPUT_BUFFER_SIZE = 4096


@dataclass
class ExecutionContext:
    """Mutable state of one run. Created by `run`, dropped when it returns."""

    tape: Tape
    pointer: int = 0
    pc: int = 0
    steps: int = 0
    output: List[str] = field(default_factory=list)


def _flush(ctx: ExecutionContext, output_stream: Union[BinaryIO, TextIO], encoding: str) -> None:
    if not ctx.output:
        output_stream.flush()
        return
    text = ''.join(ctx.output)
    ctx.output.clear()
    if isinstance(output_stream, io.TextIOBase):
        output_stream.write(text)
    else:
        output_stream.write(text.encode(encoding))
    output_stream.flush()


def _move(ctx: ExecutionContext, delta: int) -> None:
    new_ptr = ctx.pointer + delta
    if new_ptr < 0:
        raise make_pointer_underflow(pc=ctx.pc, pointer=ctx.pointer, delta=delta)
    if new_ptr > MAX_POINTER:
        raise make_pointer_overflow(pc=ctx.pc, pointer=ctx.pointer, delta=delta)
    ctx.pointer = new_ptr
    ctx.tape.ensure(new_ptr)


def _read(ctx: ExecutionContext, input_stream: BinaryIO) -> None:
    try:
        data = input_stream.read(1)
    except (OSError, ValueError) as exc:
        raise make_input_read_error(pc=ctx.pc, reason=str(exc)) from exc
    # End of input stores zero.
    ctx.tape[ctx.pointer] = data[0] if data else 0


def execute(
    ctx: ExecutionContext,
    program: Program,
    input_stream: BinaryIO,
    output_stream: Union[BinaryIO, TextIO],
    encoding: str = 'utf-8',
) -> None:
    """Run the dispatch loop over `ctx` until the program counter runs off the end."""
    tape = ctx.tape
    instrs = program.instructions
    n = len(instrs)

    while ctx.pc < n:
        instr = instrs[ctx.pc]
        kind = type(instr)

        if kind is Add:
            tape.add(ctx.pointer, instr.delta)
        elif kind is Move:
            _move(ctx, instr.delta)
        elif kind is LoopBegin:
            if tape[ctx.pointer] == 0:
                ctx.pc = instr.target
        elif kind is LoopEnd:
            if tape[ctx.pointer] != 0:
                ctx.pc = instr.target
        elif kind is Output:
            ctx.output.append(chr(tape[ctx.pointer]))
            if len(ctx.output) >= OUTPUT_BUFFER_SIZE:
                _flush(ctx, output_stream, encoding)
        elif kind is Input:
            # A prompt must be visible before blocking on input.
            if ctx.output:
                _flush(ctx, output_stream, encoding)
            _read(ctx, input_stream)

        # Jumps land on the partner bracket; this increment steps past it.
        ctx.pc += 1
        ctx.steps += 1


def run(
    program: Program,
    input_stream: BinaryIO,
    output_stream: Union[BinaryIO, TextIO],
    *,
    tape_length: int = INITIAL_TAPE_LENGTH,
    encoding: str = 'utf-8',
) -> ExecutionContext:
    """
    Execute `program` against a fresh tape.

    Output is buffered and written to `output_stream` before every input read,
    whenever the buffer fills, and once more before returning. When a runtime
    error stops the run, the output produced so far is still flushed and the
    error propagates; a failure of that last flush is logged and does not
    replace the runtime error.

    Returns the finished context so callers can inspect the tape.
    """
    ctx = ExecutionContext(tape=Tape(tape_length))
    logger.debug("running %d instructions on a %d-cell tape", len(program), tape_length)
    try:
        execute(ctx, program, input_stream, output_stream, encoding)
    except BFRuntimeError:
        try:
            _flush(ctx, output_stream, encoding)
        except (OSError, ValueError) as exc:
            logger.warning("could not flush output after runtime error: %s", exc)
        raise
    _flush(ctx, output_stream, encoding)
    logger.debug("run finished after %d steps, tape length %d", ctx.steps, len(ctx.tape))
    return ctx
