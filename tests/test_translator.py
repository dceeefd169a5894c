"""
Translation of source text into coalesced, jump-resolved programs.
"""

import os
import random
import sys
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfrun import (
    Add,
    BFSyntaxError,
    Input,
    LoopBegin,
    LoopEnd,
    Move,
    Output,
    UnmatchedClosingBracket,
    UnmatchedOpeningBrackets,
    translate,
)


def test_plus_run_coalesces():
    assert list(translate("+++")) == [Add(3)]


def test_minus_run_wraps():
    assert list(translate("---")) == [Add(253)]


def test_mixed_add_runs_net_modulo_256():
    """Any +/- string becomes one Add holding the net count mod 256."""
    rng = random.Random(1234)
    for _ in range(50):
        src = "".join(rng.choice("+-") for _ in range(rng.randint(1, 700)))
        net = src.count("+") - src.count("-")
        assert list(translate(src)) == [Add(net % 256)]


def test_move_runs_keep_signed_net():
    rng = random.Random(99)
    for _ in range(50):
        src = "".join(rng.choice("<>") for _ in range(rng.randint(1, 300)))
        net = src.count(">") - src.count("<")
        assert list(translate(src)) == [Move(net)]


def test_zero_sum_run_is_kept():
    assert list(translate("+-")) == [Add(0)]
    assert list(translate("><")) == [Move(0)]


def test_loop_example_sequence():
    assert list(translate("++>>[--<<]")) == [
        Add(2),
        Move(2),
        LoopBegin(5),
        Add(254),
        Move(-2),
        LoopEnd(2),
    ]


def test_comments_are_dropped():
    assert list(translate("hello + world\n.")) == [Add(1), Output()]


def test_io_is_not_coalesced():
    assert list(translate(",,..")) == [Input(), Input(), Output(), Output()]


def test_coalescing_stops_at_other_kinds():
    assert list(translate("++>+")) == [Add(2), Move(1), Add(1)]


def test_nested_brackets_are_symmetric():
    program = translate("+[>[-]<[>+<-]]>[[[]]]")
    for i, instr in enumerate(program):
        if isinstance(instr, LoopBegin):
            assert isinstance(program[instr.target], LoopEnd)
            assert program[instr.target].target == i
        elif isinstance(instr, LoopEnd):
            assert isinstance(program[instr.target], LoopBegin)
            assert program[instr.target].target == i


def test_lone_closing_bracket():
    with pytest.raises(UnmatchedClosingBracket) as exc:
        translate("]")
    assert exc.value.position == 0
    assert "unmatched closing bracket at position 0" in str(exc.value)


def test_closing_bracket_position_counts_filtered_instructions():
    """Comments and coalesced runs do not count toward the position."""
    with pytest.raises(UnmatchedClosingBracket) as exc:
        translate("comment +++ > ]")
    assert exc.value.position == 2


def test_lone_opening_bracket():
    with pytest.raises(UnmatchedOpeningBrackets) as exc:
        translate("[")
    assert exc.value.count == 1
    assert "1 unmatched opening brackets" in str(exc.value)


def test_opening_bracket_count():
    with pytest.raises(UnmatchedOpeningBrackets) as exc:
        translate("[[[]")
    assert exc.value.count == 2


def test_closing_before_opening_is_not_balanced():
    """Brackets are stack-matched, not counted."""
    with pytest.raises(UnmatchedClosingBracket):
        translate("][")


def test_syntax_errors_share_a_family():
    for src in ("]", "["):
        with pytest.raises(BFSyntaxError) as exc:
            translate(src)
        assert exc.value.kind in ("unmatched_closing_bracket", "unmatched_opening_brackets")


def test_without_coalescing_one_instruction_per_command():
    program = translate("++>>[--<<]", coalesce_runs=False)
    assert len(program) == 10
    assert program[4] == LoopBegin(9)
    assert program[9] == LoopEnd(4)


def test_translation_is_deterministic():
    src = "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    assert translate(src) == translate(src)
