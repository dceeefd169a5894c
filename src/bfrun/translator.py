from __future__ import annotations

import logging
from typing import Dict, List

from .errors import make_unmatched_closing_bracket, make_unmatched_opening_brackets
from .instructions import (
    CELL_SIZE,
    Add,
    Input,
    Instruction,
    LoopBegin,
    LoopEnd,
    Move,
    Output,
    Program,
)

logger = logging.getLogger(__name__)

BF_OPS = set('+-<>[],.')

_PRIMITIVES: Dict[str, Instruction] = {
    '+': Add(1),
    '-': Add(CELL_SIZE - 1),
    '>': Move(1),
    '<': Move(-1),
    '[': LoopBegin(),
    ']': LoopEnd(),
    '.': Output(),
    ',': Input(),
}


def lex(source: str) -> List[Instruction]:
    """Map command characters to primitives; everything else is a comment."""
    return [_PRIMITIVES[ch] for ch in source if ch in BF_OPS]


def coalesce(instrs: List[Instruction]) -> List[Instruction]:
    """Combine adjacent Add/Add and Move/Move. Zero-sum runs are kept."""
    out: List[Instruction] = []
    for instr in instrs:
        prev = out[-1] if out else None
        if isinstance(instr, Add) and isinstance(prev, Add):
            out[-1] = Add((prev.delta + instr.delta) % CELL_SIZE)
        elif isinstance(instr, Move) and isinstance(prev, Move):
            out[-1] = Move(prev.delta + instr.delta)
        else:
            out.append(instr)
    return out


def resolve_jumps(instrs: List[Instruction]) -> List[Instruction]:
    """
    Link each LoopBegin/LoopEnd pair to the other's index.

    Raises UnmatchedClosingBracket on a stray ']' (position in the filtered
    stream) and UnmatchedOpeningBrackets when '[' remain open at the end.
    """
    out = list(instrs)
    stack: List[int] = []
    for i, instr in enumerate(out):
        if isinstance(instr, LoopBegin):
            stack.append(i)
        elif isinstance(instr, LoopEnd):
            if not stack:
                raise make_unmatched_closing_bracket(position=i)
            other = stack.pop()
            out[i] = LoopEnd(other)
            out[other] = LoopBegin(i)

    if stack:
        raise make_unmatched_opening_brackets(count=len(stack))
    return out


def translate(source: str, *, coalesce_runs: bool = True) -> Program:
    instrs = lex(source)
    if coalesce_runs:
        instrs = coalesce(instrs)
    program = Program(tuple(resolve_jumps(instrs)))
    logger.debug("translated %d source chars into %d instructions", len(source), len(program))
    return program
