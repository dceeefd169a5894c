from .instructions import Add, Input, LoopBegin, LoopEnd, Move, Output, Program, ProgramError
from .translator import translate
from .engine import ExecutionContext, run
from .tape import INITIAL_TAPE_LENGTH, Tape
from .errors import (
    BFError,
    BFRuntimeError,
    BFSyntaxError,
    InputReadError,
    PointerOverflow,
    PointerUnderflow,
    UnmatchedClosingBracket,
    UnmatchedOpeningBrackets,
)
from .api import RunOptions, RunResult, run_file, run_program, run_string, translate_file, translate_string

__all__ = [
    'Add',
    'Move',
    'LoopBegin',
    'LoopEnd',
    'Output',
    'Input',
    'Program',
    'ProgramError',
    'translate',
    'run',
    'ExecutionContext',
    'Tape',
    'INITIAL_TAPE_LENGTH',
    'BFError',
    'BFSyntaxError',
    'BFRuntimeError',
    'UnmatchedClosingBracket',
    'UnmatchedOpeningBrackets',
    'PointerUnderflow',
    'PointerOverflow',
    'InputReadError',
    'RunOptions',
    'RunResult',
    'translate_string',
    'translate_file',
    'run_program',
    'run_string',
    'run_file',
]
