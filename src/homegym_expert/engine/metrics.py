"""Plan-level metrics: training volume and weekly calorie estimate."""

from __future__ import annotations

import math
from collections.abc import Sequence

from ..models import Intensity, TraceCategory, WorkoutDay
from .trace import TraceRecorder

INTENSITY_MULTIPLIERS: dict[Intensity | None, float] = {
    Intensity.HIGH: 1.3,
    Intensity.MEDIUM: 1.1,
    Intensity.LIGHT: 1.0,
    None: 1.0,
}


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def volume_score(plan: Sequence[WorkoutDay], trace: TraceRecorder) -> int:
    """Volume = total sets x 10 + total reps x 0.5, where reps are counted per set."""
    total_sets = 0
    total_reps = 0
    for day in plan:
        for scheduled in day.scheduled():
            total_sets += scheduled.sets
            total_reps += scheduled.sets * scheduled.reps

    score = round_half_up(total_sets * 10 + total_reps * 0.5)
    trace.add(
        TraceCategory.CALCULATION,
        f"Volume Score: ({total_sets} sets x 10) + ({total_reps} reps x 0.5) = {score}",
    )
    return score


def calorie_estimate(
    plan: Sequence[WorkoutDay], intensity: Intensity | None, trace: TraceRecorder
) -> int:
    base = sum(day.total_calories for day in plan)
    multiplier = INTENSITY_MULTIPLIERS[intensity]
    total = round_half_up(base * multiplier)
    label = intensity.value if intensity is not None else "unset"
    trace.add(
        TraceCategory.CALCULATION,
        f"Calorie Burn: {base:g} base x {multiplier} ({label} intensity) = {total} kcal/week",
    )
    return total
