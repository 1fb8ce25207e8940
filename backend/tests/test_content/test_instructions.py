"""Tests for the crochet instruction compiler."""

from __future__ import annotations

import re

import pytest

from app.content.instructions import (
    ABBREVIATIONS,
    DEFAULT_MATERIALS,
    compile_instructions,
    compile_pattern,
    row_instruction,
    skill_level,
)
from app.engine.errors import InvalidParameter
from app.engine.pattern import generate_pattern
from tests.conftest import CURVATURE_SWEEP, HYPERBOLIC_K, SPHERICAL_K


@pytest.mark.parametrize("k", CURVATURE_SWEEP)
def test_rows_follow_schedule_order(k):
    pattern = generate_pattern(k, 9)
    rows = compile_instructions(pattern)
    assert [r.round for r in rows] == list(range(1, 10))
    assert [r.stitch_count for r in rows] == list(pattern.stitch_counts)


def test_first_round_is_foundation_ring():
    rows = compile_instructions(generate_pattern(0.0, 3))
    assert rows[0].instruction == "Ch 8, join with sl st to form ring."


def test_flat_rounds_work_even():
    rows = compile_instructions(generate_pattern(0.0, 3))
    assert rows[1].instruction == "Rnd 2: Ch 3 (counts as dc), dc in each st around. Join with sl st. (8 sts)"
    assert rows[2].notes == []


def test_increase_round():
    row = row_instruction(2, 10, 8)
    assert "*dc in next 3 sts, inc, rep from * around" in row.instruction
    assert row.instruction.endswith("(10 sts)")
    assert row.notes == ["2 sts increased"]


def test_decrease_round():
    row = row_instruction(3, 4, 6)
    assert "*dc in next st, dc2tog, rep from * around" in row.instruction
    assert row.instruction.endswith("(4 sts)")
    assert row.notes == ["2 sts decreased"]


def test_every_stitch_shaped():
    row = row_instruction(2, 16, 8)
    assert "*inc, rep from * around" in row.instruction


def test_hyperbolic_pattern_uses_increases():
    rows = compile_instructions(generate_pattern(HYPERBOLIC_K, 4))
    assert all("inc" in r.instruction for r in rows[1:])


def test_spherical_pattern_uses_decreases():
    rows = compile_instructions(generate_pattern(SPHERICAL_K, 3))
    assert "dc2tog" in rows[1].instruction


@pytest.mark.parametrize(
    "k,rows,level",
    [
        (0.0, 5, "Beginner"),
        (0.0, 9, "Intermediate"),
        (-0.5, 6, "Intermediate"),
        (-1.0, 6, "Advanced"),
        (0.0, 16, "Advanced"),
    ],
)
def test_skill_level(k, rows, level):
    assert skill_level(generate_pattern(k, rows)) == level


def test_compile_pattern_bundle():
    compiled = compile_pattern(-0.9, 6)
    assert compiled.pattern == generate_pattern(-0.9, 6)
    assert len(compiled.instructions) == 6
    assert compiled.abbreviations == ABBREVIATIONS
    assert compiled.abbreviations is not ABBREVIATIONS
    assert compiled.materials == DEFAULT_MATERIALS
    assert compiled.materials is not DEFAULT_MATERIALS
    assert any("K = -0.900" in note for note in compiled.notes)
    assert "High curvature: expect strong shaping effects." in compiled.notes


def test_compile_pattern_rejects_bad_input():
    with pytest.raises(InvalidParameter):
        compile_pattern(1.5, 6)
    with pytest.raises(InvalidParameter):
        compile_pattern(0.0, 0)


def test_every_regime_has_notes(sweep):
    for k in sweep:
        notes = compile_pattern(k, 4).notes
        assert len(notes) >= 3
        assert notes[-1].startswith("High curvature") or notes[-1].startswith("Curvature parameter")


_ROUND = re.compile(r"Rnd \d+: Ch 3 \(counts as dc\), (.*)\. Join with sl st\. \((\d+) sts?\)")
_STARRED = re.compile(r"\*(.*), rep from \* (?:around|(\d+) more times?)(?:, (.*))?")

# (pattern, stitches worked into, stitches made) for each phrase a round can use
_PHRASES = [
    (re.compile(r"dc in next st"), lambda m: (1, 1)),
    (re.compile(r"dc in next (\d+) sts"), lambda m: (int(m[1]), int(m[1]))),
    (re.compile(r"inc"), lambda m: (1, 2)),
    (re.compile(r"(\d+) dc in next st"), lambda m: (1, int(m[1]))),
    (re.compile(r"dc in last st"), lambda m: (1, 1)),
    (re.compile(r"dc in each of last (\d+) sts"), lambda m: (int(m[1]), int(m[1]))),
    (re.compile(r"(\d+) dc in last st"), lambda m: (1, int(m[1]))),
    (re.compile(r"(\d+) dc in each of last (\d+) sts"), lambda m: (int(m[2]), int(m[1]) * int(m[2]))),
    (re.compile(r"dc(\d+)tog"), lambda m: (int(m[1]), 1)),
    (re.compile(r"dc(\d+)tog (\d+) times"), lambda m: (int(m[1]) * int(m[2]), int(m[2]))),
]


def _work(phrases: str) -> tuple[int, int]:
    used = made = 0
    for phrase in phrases.split(", "):
        for pattern, effect in _PHRASES:
            match = pattern.fullmatch(phrase)
            if match:
                u, m = effect(match)
                used += u
                made += m
                break
        else:
            raise AssertionError(f"unrecognised phrase: {phrase!r}")
    return used, made


def _work_round(instruction: str, prev: int) -> tuple[int, int]:
    """Follow a written round stitch by stitch; return (worked into, made)."""
    match = _ROUND.fullmatch(instruction)
    assert match, instruction
    body, stated = match[1], int(match[2])
    if body == "dc in each st around":
        return prev, stated

    starred = _STARRED.fullmatch(body)
    if not starred:
        return _work(body)
    unit_used, unit_made = _work(starred[1])
    if starred[2] is None:
        assert prev % unit_used == 0, instruction
        repeats = prev // unit_used
    else:
        repeats = int(starred[2]) + 1
    used, made = unit_used * repeats, unit_made * repeats
    if starred[3]:
        tail_used, tail_made = _work(starred[3])
        used += tail_used
        made += tail_made
    return used, made


@pytest.mark.parametrize("k", CURVATURE_SWEEP)
def test_written_rounds_make_stated_counts(k):
    rows = compile_instructions(generate_pattern(k, 30))
    for before, row in zip(rows, rows[1:]):
        used, made = _work_round(row.instruction, before.stitch_count)
        assert used == before.stitch_count, row.instruction
        assert made == row.stitch_count, row.instruction


@pytest.mark.parametrize("prev", range(1, 41))
def test_any_count_change_is_worked_exactly(prev):
    for count in range(1, 41):
        row = row_instruction(2, count, prev)
        assert _work_round(row.instruction, prev) == (prev, count), row.instruction


def test_uneven_increase_writes_leftover_stitches():
    row = row_instruction(2, 11, 8)
    assert row.instruction == (
        "Rnd 2: Ch 3 (counts as dc), *dc in next st, inc, rep from * 2 more times, "
        "dc in each of last 2 sts. Join with sl st. (11 sts)"
    )


def test_every_pair_decreased():
    row = row_instruction(2, 3, 6)
    assert "*dc2tog, rep from * around" in row.instruction
    assert row.instruction.endswith("(3 sts)")


def test_steep_increase_spreads_over_each_stitch():
    row = row_instruction(2, 11, 4)
    assert "*3 dc in next st, rep from * 2 more times, 2 dc in last st" in row.instruction


def test_single_stitch_wording():
    row = row_instruction(2, 9, 8)
    assert row.notes == ["1 st increased"]
    assert "dc in next 7 sts, inc" in row.instruction

    row = row_instruction(2, 1, 2)
    assert row.instruction.endswith("(1 st)")
    assert row.notes == ["1 st decreased"]


def test_single_extra_repeat_wording():
    row = row_instruction(2, 7, 5)
    assert "*dc in next st, inc, rep from * 1 more time, dc in last st" in row.instruction
