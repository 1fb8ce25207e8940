"""Turn a stitch schedule into worked crochet instructions.

Downstream of the engine: reads a StitchPattern, never feeds back into it.
Row order is kept exactly as generated.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from app.engine.curvature import CurvatureRegime
from app.engine.pattern import StitchPattern, generate_pattern

ABBREVIATIONS: dict[str, str] = {
    "ch": "chain",
    "sc": "single crochet",
    "dc": "double crochet",
    "sl st": "slip stitch",
    "inc": "increase (2 stitches in same stitch)",
    "dc2tog": "double crochet 2 together (decrease)",
    "rep": "repeat",
    "rnd": "round",
    "st(s)": "stitch(es)",
}

DEFAULT_MATERIALS: list[str] = [
    "Worsted weight yarn (approx. 200g)",
    "4.0mm crochet hook",
    "Stitch markers",
    "Yarn needle",
    "Scissors",
]

_REGIME_NOTES: dict[CurvatureRegime, list[str]] = {
    CurvatureRegime.HYPERBOLIC: [
        "Creates a ruffled, expanding fabric for collars, edgings or sculptural pieces.",
        "Keep tension loose so the fabric can expand.",
        "Block firmly to open up the ruffles.",
    ],
    CurvatureRegime.SPHERICAL: [
        "Creates a domed shape suitable for hats, bowls or amigurumi.",
        "Keep tension tight so the dome closes without gaps.",
        "Mark decrease points with stitch markers to keep them symmetric.",
    ],
    CurvatureRegime.EUCLIDEAN: [
        "Creates a flat fabric suitable for coasters or motifs.",
        "Keep tension even throughout for a flat result.",
    ],
}

# |K| above which the shaping becomes visibly pronounced.
_STRONG_CURVATURE = 0.7


@dataclass
class RowInstruction:
    round: int
    stitch_count: int
    instruction: str
    notes: list[str] = field(default_factory=list)


@dataclass
class CrochetPattern:
    pattern: StitchPattern
    skill_level: str
    materials: list[str]
    abbreviations: dict[str, str]
    instructions: list[RowInstruction]
    notes: list[str]


def _sts(n: int) -> str:
    return "1 st" if n == 1 else f"{n} sts"


def _plain(n: int) -> str:
    return "dc in next st" if n == 1 else f"dc in next {n} sts"


def _last(n: int) -> str:
    return "dc in last st" if n == 1 else f"dc in each of last {n} sts"


def _render(unit: list[str], repeats: int, tail: list[str]) -> str:
    """Join a repeat unit worked ``repeats`` times with the stitches left after it."""
    group = ", ".join(unit)
    if repeats == 1:
        parts = [group]
    elif not tail:
        parts = [f"*{group}, rep from * around"]
    else:
        more = "1 more time" if repeats == 2 else f"{repeats - 1} more times"
        parts = [f"*{group}, rep from * {more}"]
    return ", ".join(parts + tail)


def _increase_body(prev: int, count: int) -> str:
    gained = count - prev
    if gained <= prev:
        # Each repeat consumes ``plain + 1`` sts and makes ``plain + 2``.
        plain = prev // gained - 1
        leftover = prev - gained * (plain + 1)
        unit = ([_plain(plain)] if plain else []) + ["inc"]
        return _render(unit, gained, [_last(leftover)] if leftover else [])

    per_st, extra = divmod(count, prev)
    if not extra:
        return _render([f"{per_st} dc in next st"], prev, [])
    rest = prev - extra
    tail = [f"{per_st} dc in each of last {rest} sts" if rest > 1 else f"{per_st} dc in last st"]
    return _render([f"{per_st + 1} dc in next st"], extra, tail)


def _decrease_body(prev: int, count: int) -> str:
    lost = prev - count
    if 2 * lost <= prev:
        # Each repeat consumes ``plain + 2`` sts and makes ``plain + 1``.
        plain = prev // lost - 2
        leftover = prev - lost * (plain + 2)
        unit = ([_plain(plain)] if plain else []) + ["dc2tog"]
        return _render(unit, lost, [_last(leftover)] if leftover else [])

    per_cluster, extra = divmod(prev, count)
    if not extra:
        return _render([f"dc{per_cluster}tog"], count, [])
    rest = count - extra
    tail = [f"dc{per_cluster}tog {rest} times" if rest > 1 else f"dc{per_cluster}tog"]
    return _render([f"dc{per_cluster + 1}tog"], extra, tail)


def row_instruction(round_no: int, count: int, prev: int | None) -> RowInstruction:
    if prev is None:
        return RowInstruction(round_no, count, f"Ch {count}, join with sl st to form ring.")

    prefix = f"Rnd {round_no}: Ch 3 (counts as dc), "
    suffix = f". Join with sl st. ({_sts(count)})"

    if count > prev:
        body = _increase_body(prev, count)
        return RowInstruction(
            round_no, count, prefix + body + suffix, [f"{_sts(count - prev)} increased"]
        )
    if count < prev:
        body = _decrease_body(prev, count)
        return RowInstruction(
            round_no, count, prefix + body + suffix, [f"{_sts(prev - count)} decreased"]
        )
    return RowInstruction(round_no, count, prefix + "dc in each st around" + suffix)


def compile_instructions(pattern: StitchPattern) -> list[RowInstruction]:
    rows: list[RowInstruction] = []
    prev: int | None = None
    for i, count in enumerate(pattern.stitch_counts):
        rows.append(row_instruction(i + 1, count, prev))
        prev = count
    return rows


def skill_level(pattern: StitchPattern) -> str:
    complexity = abs(pattern.curvature) * pattern.row_count
    if complexity > 5 or pattern.row_count > 15:
        return "Advanced"
    if complexity > 2 or pattern.row_count > 8:
        return "Intermediate"
    return "Beginner"


def pattern_notes(pattern: StitchPattern) -> list[str]:
    notes = list(_REGIME_NOTES[pattern.regime])
    notes.append(f"Curvature parameter: K = {pattern.curvature:.3f} ({pattern.description})")
    if abs(pattern.curvature) > _STRONG_CURVATURE:
        notes.append("High curvature: expect strong shaping effects.")
    return notes


def compile_pattern(curvature: float, row_count: int) -> CrochetPattern:
    """Generate the schedule for ``curvature`` and compile it into a full pattern."""
    pattern = generate_pattern(curvature, row_count)
    return CrochetPattern(
        pattern=pattern,
        skill_level=skill_level(pattern),
        materials=list(DEFAULT_MATERIALS),
        abbreviations=dict(ABBREVIATIONS),
        instructions=compile_instructions(pattern),
        notes=pattern_notes(pattern),
    )
