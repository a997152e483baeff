"""Workout Complexity Score (WCS) calculation."""

from __future__ import annotations

from ..errors import InvalidInput
from ..knowledge import (
    EXPERIENCE,
    INTENSITY,
    TIME_CONSTRAINT,
    TRAINING_DAYS,
    interpret,
    weight_table,
)
from ..models import (
    ExperienceLevel,
    Intensity,
    ScoreBreakdown,
    TraceCategory,
    UserConstraints,
    UserProfile,
)
from .trace import TraceRecorder

DEFAULT_TRAINING_DAYS = 2
DEFAULT_INTENSITY = Intensity.MEDIUM
DEFAULT_AVAILABLE_TIME = 60

EXPERIENCE_VALUES = weight_table(EXPERIENCE)
TRAINING_DAYS_VALUES = weight_table(TRAINING_DAYS)
INTENSITY_VALUES = weight_table(INTENSITY)
TIME_CONSTRAINT_VALUES = weight_table(TIME_CONSTRAINT)


def _lookup(table: dict[str | int, int], key: object, field: str) -> int:
    raw = key.value if hasattr(key, "value") else key
    try:
        return table[raw]  # type: ignore[index]
    except (KeyError, TypeError):
        raise InvalidInput(field, raw, f"expected one of {sorted(map(str, table))}") from None


def calculate_score(
    profile: UserProfile, constraints: UserConstraints, trace: TraceRecorder
) -> ScoreBreakdown:
    """
    WCS = (Experience + TrainingDays + Intensity) - TimeConstraint.

    Unset constraints fall back to 2 days, medium intensity and 60 minutes; an
    unset experience level weighs as a beginner.
    """
    experience = profile.experience_level or ExperienceLevel.BEGINNER
    days = constraints.training_days or DEFAULT_TRAINING_DAYS
    intensity = constraints.intensity or DEFAULT_INTENSITY
    minutes = constraints.available_time or DEFAULT_AVAILABLE_TIME

    experience_value = _lookup(EXPERIENCE_VALUES, experience, "profile.experience_level")
    trace.add(
        TraceCategory.CALCULATION,
        f"Experience Level: {experience.value} -> Value: {experience_value}",
    )

    days_value = _lookup(TRAINING_DAYS_VALUES, days, "constraints.training_days")
    trace.add(
        TraceCategory.CALCULATION,
        f"Training Days: {days} days/week -> Value: {days_value}",
    )

    intensity_value = _lookup(INTENSITY_VALUES, intensity, "constraints.intensity")
    trace.add(
        TraceCategory.CALCULATION,
        f"Intensity: {intensity.value} -> Value: {intensity_value}",
    )

    time_value = _lookup(TIME_CONSTRAINT_VALUES, minutes, "constraints.available_time")
    trace.add(
        TraceCategory.CALCULATION,
        f"Time Available: {minutes} minutes -> Time Constraint: {time_value}",
    )

    score = experience_value + days_value + intensity_value - time_value
    trace.add(
        TraceCategory.CALCULATION,
        f"WCS Formula: ({experience_value} + {days_value} + {intensity_value})"
        f" - {time_value} = {score}",
    )

    interpretation = interpret(score)
    trace.add(
        TraceCategory.OPTIMIZATION,
        f"WCS Interpretation: {interpretation.level.value} - {interpretation.summary}",
    )

    return ScoreBreakdown(
        experience_value=experience_value,
        training_days_value=days_value,
        intensity_value=intensity_value,
        time_constraint_value=time_value,
        score=score,
        level=interpretation.level,
        interpretation=interpretation.summary,
    )
