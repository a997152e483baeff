"""Equipment and injury filters over the exercise catalog."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..models import (
    Equipment,
    ExcludedExercises,
    Exercise,
    ImpactLevel,
    Injury,
    MuscleGroup,
    TraceCategory,
)
from .trace import TraceRecorder


def injury_conflict(exercise: Exercise, injuries: Iterable[Injury]) -> str | None:
    """
    Return the reason an exercise is unsafe for the given injuries, or None.
    Rules are checked knee, shoulder, back; the first match wins.
    """
    active = set(injuries)
    if (
        Injury.KNEE in active
        and exercise.muscle_group is MuscleGroup.LEGS
        and exercise.impact_level is ImpactLevel.HIGH
    ):
        return "High impact not suitable for knee injury"
    if Injury.SHOULDER in active and exercise.is_overhead:
        return "Overhead movement not suitable for shoulder injury"
    if Injury.BACK in active and exercise.is_back_strain:
        return "Movement strains lower back"
    return None


def filter_by_equipment(
    exercises: Sequence[Exercise],
    equipment: Equipment,
    excluded: ExcludedExercises,
    trace: TraceRecorder,
) -> list[Exercise]:
    available = equipment.available()
    if available:
        trace.system(f"Available Equipment: {', '.join(tag.value for tag in available)}")
    else:
        trace.add(TraceCategory.WARNING, "No equipment selected; only equipment-free exercises fit")

    kept: list[Exercise] = []
    for exercise in exercises:
        if all(equipment.has(tag) for tag in exercise.required_equipment):
            kept.append(exercise)
            continue
        excluded.by_equipment.append(exercise.name)
        needs = ", ".join(tag.value for tag in exercise.required_equipment)
        trace.add(
            TraceCategory.CONSTRAINT,
            f'Equipment Rule: Excluding "{exercise.name}" - requires {needs}',
        )
    trace.system(f"Exercises after equipment filter: {len(kept)}")
    return kept


def filter_by_injuries(
    exercises: Sequence[Exercise],
    injuries: Sequence[Injury],
    excluded: ExcludedExercises,
    trace: TraceRecorder,
) -> list[Exercise]:
    active = [i for i in injuries if i is not Injury.NONE]
    if not active:
        trace.add(TraceCategory.SUCCESS, "No physical limitations detected")
        return list(exercises)

    trace.add(
        TraceCategory.WARNING,
        f"Physical Limitations Detected: {', '.join(i.value for i in active)}",
    )
    kept: list[Exercise] = []
    for exercise in exercises:
        reason = injury_conflict(exercise, active)
        if reason is None:
            kept.append(exercise)
            continue
        excluded.by_injury.append(exercise.name)
        trace.add(TraceCategory.CONSTRAINT, f'Injury Rule: Excluding "{exercise.name}" - {reason}')
    trace.system(f"Exercises after injury filter: {len(kept)}")
    return kept


def filter_exercises(
    catalog: Sequence[Exercise],
    equipment: Equipment,
    injuries: Sequence[Injury],
    trace: TraceRecorder,
) -> tuple[list[Exercise], ExcludedExercises]:
    """Apply the equipment filter, then the injury filter, keeping catalog order."""
    excluded = ExcludedExercises()
    remaining = filter_by_equipment(catalog, equipment, excluded, trace)
    remaining = filter_by_injuries(remaining, injuries, excluded, trace)
    if not remaining:
        trace.add(TraceCategory.WARNING, "No exercises match the equipment and limitations")
    return remaining, excluded
