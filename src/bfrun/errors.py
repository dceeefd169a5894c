from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional


_HINTS = {
    'unmatched_closing_bracket': 'Every "]" needs an earlier "[" that is still open.',
    'unmatched_opening_brackets': 'Check for a missing "]" at the end of a loop.',
    'pointer_underflow': 'The program moved left of cell 0; the tape only grows to the right.',
    'pointer_overflow': None,
    'input_read_error': 'The input stream failed; end of input alone never raises.',
}


def _with_hint(message: str, kind: str) -> str:
    hint = _HINTS.get(kind)
    return f"{message}\nHint: {hint}" if hint else message


@dataclass
class BFError(Exception):
    message: str

    kind: ClassVar[str] = 'error'

    def __str__(self) -> str:
        return self.message


# ---------------- Translation-time ----------------
@dataclass
class BFSyntaxError(BFError):
    kind: ClassVar[str] = 'syntax'


@dataclass
class UnmatchedClosingBracket(BFSyntaxError):
    position: int

    kind: ClassVar[str] = 'unmatched_closing_bracket'


@dataclass
class UnmatchedOpeningBrackets(BFSyntaxError):
    count: int

    kind: ClassVar[str] = 'unmatched_opening_brackets'


# ---------------- Execution-time ----------------
@dataclass
class BFRuntimeError(BFError):
    pc: int

    kind: ClassVar[str] = 'runtime'


@dataclass
class PointerUnderflow(BFRuntimeError):
    pointer: int
    delta: int

    kind: ClassVar[str] = 'pointer_underflow'


@dataclass
class PointerOverflow(BFRuntimeError):
    pointer: int
    delta: int

    kind: ClassVar[str] = 'pointer_overflow'


@dataclass
class InputReadError(BFRuntimeError):
    reason: str

    kind: ClassVar[str] = 'input_read_error'


def make_unmatched_closing_bracket(*, position: int) -> UnmatchedClosingBracket:
    kind = UnmatchedClosingBracket.kind
    return UnmatchedClosingBracket(
        message=_with_hint(f"SyntaxError: unmatched closing bracket at position {position}", kind),
        position=position,
    )


def make_unmatched_opening_brackets(*, count: int) -> UnmatchedOpeningBrackets:
    kind = UnmatchedOpeningBrackets.kind
    return UnmatchedOpeningBrackets(
        message=_with_hint(f"SyntaxError: {count} unmatched opening brackets", kind),
        count=count,
    )


def make_pointer_underflow(*, pc: int, pointer: int, delta: int) -> PointerUnderflow:
    kind = PointerUnderflow.kind
    return PointerUnderflow(
        message=_with_hint(
            f"RuntimeError: pointer underflow at instruction {pc} (pointer {pointer}, move {delta})", kind
        ),
        pc=pc,
        pointer=pointer,
        delta=delta,
    )


def make_pointer_overflow(*, pc: int, pointer: int, delta: int) -> PointerOverflow:
    kind = PointerOverflow.kind
    return PointerOverflow(
        message=_with_hint(
            f"RuntimeError: pointer overflow at instruction {pc} (pointer {pointer}, move {delta})", kind
        ),
        pc=pc,
        pointer=pointer,
        delta=delta,
    )


def make_input_read_error(*, pc: int, reason: Optional[str]) -> InputReadError:
    kind = InputReadError.kind
    reason = reason or 'unknown error'
    return InputReadError(
        message=_with_hint(f"RuntimeError: failed to read input at instruction {pc}: {reason}", kind),
        pc=pc,
        reason=reason,
    )
