from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

CELL_SIZE = 256


# ---------------- Instructions ----------------
@dataclass(frozen=True)
class Add:
    delta: int  # 0..255, wraps on the cell


@dataclass(frozen=True)
class Move:
    delta: int  # net >/<, signed


@dataclass(frozen=True)
class LoopBegin:
    target: Optional[int] = None  # index of the matching LoopEnd


@dataclass(frozen=True)
class LoopEnd:
    target: Optional[int] = None  # index of the matching LoopBegin


@dataclass(frozen=True)
class Output:
    pass


@dataclass(frozen=True)
class Input:
    pass


Instruction = Union[Add, Move, LoopBegin, LoopEnd, Output, Input]


class ProgramError(ValueError):
    """Raised when a Program is built from an inconsistent instruction list."""


@dataclass(frozen=True)
class Program:
    """
    Immutable, jump-resolved instruction sequence.

    Every LoopBegin at index i points at its LoopEnd at index j and the LoopEnd
    points back at i. Loop targets are the partner's own index; the engine's
    post-increment steps past it.
    """

    instructions: Tuple[Instruction, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.instructions, tuple):
            object.__setattr__(self, 'instructions', tuple(self.instructions))
        self._check_pairs()

    def _check_pairs(self) -> None:
        stack = []
        for i, instr in enumerate(self.instructions):
            if isinstance(instr, LoopBegin):
                stack.append(i)
            elif isinstance(instr, LoopEnd):
                if not stack:
                    raise ProgramError(f"LoopEnd at {i} has no LoopBegin")
                j = stack.pop()
                begin = self.instructions[j]
                if begin.target != i or instr.target != j:
                    raise ProgramError(f"loop pair {j}<->{i} is not linked symmetrically")
            elif isinstance(instr, Add):
                if not 0 <= instr.delta < CELL_SIZE:
                    raise ProgramError(f"Add delta out of range at {i}: {instr.delta}")
        if stack:
            raise ProgramError(f"{len(stack)} LoopBegin(s) left open")

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def to_source(self) -> str:
        """
        Emit canonical source that translates back to this same Program.

        Zero-sum runs are written as "+-" and "><" so they stay one instruction.
        """
        out = []
        for instr in self.instructions:
            if isinstance(instr, Add):
                if instr.delta == 0:
                    out.append('+-')
                elif instr.delta <= CELL_SIZE // 2:
                    out.append('+' * instr.delta)
                else:
                    out.append('-' * (CELL_SIZE - instr.delta))
            elif isinstance(instr, Move):
                if instr.delta == 0:
                    out.append('><')
                elif instr.delta > 0:
                    out.append('>' * instr.delta)
                else:
                    out.append('<' * (-instr.delta))
            elif isinstance(instr, LoopBegin):
                out.append('[')
            elif isinstance(instr, LoopEnd):
                out.append(']')
            elif isinstance(instr, Output):
                out.append('.')
            elif isinstance(instr, Input):
                out.append(',')
        return ''.join(out)
