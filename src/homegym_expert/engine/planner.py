"""
Weekly plan builder.

Chooses a split from the number of training days, prescribes sets/reps/rest
per goal and complexity score, and greedily packs each day's exercise pool
into the requested session time.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass

from ..catalog import by_muscle_group
from ..models import (
    Exercise,
    MuscleGroup,
    ScheduledExercise,
    TraceCategory,
    TrainingGoal,
    WorkoutDay,
    WorkoutSession,
)
from .trace import TraceRecorder

logger = logging.getLogger(__name__)

WARMUP_MINUTES = 5
COOLDOWN_MINUTES = 3
SET_MINUTES = 0.5
AVG_EXERCISE_MINUTES = 6
STOP_FILL_RATIO = 0.85
PAD_FILL_RATIO = 0.9
MAX_PADDED_SETS = 6

GOAL_NOTES: dict[TrainingGoal, str] = {
    TrainingGoal.STRENGTH: "Focus on heavy weight, controlled movement",
    TrainingGoal.MUSCLE_GAIN: "Focus on mind-muscle connection, slow negatives",
    TrainingGoal.GENERAL_FITNESS: "Keep heart rate elevated, minimal rest",
}

GOAL_OPTIMIZATIONS: dict[TrainingGoal | None, str] = {
    TrainingGoal.STRENGTH: "Strength -> Increasing rest periods, reducing reps",
    TrainingGoal.MUSCLE_GAIN: "Muscle Gain -> Focus on time under tension",
    TrainingGoal.GENERAL_FITNESS: "General Fitness -> Circuit-style with minimal rest",
    None: "No goal selected -> Catalog defaults kept",
}


@dataclass(frozen=True)
class DayTemplate:
    day_name: str
    focus: str
    # (muscle group, start, stop) slices of the filtered buckets
    slices: tuple[tuple[MuscleGroup, int, int], ...]


PUSH, PULL, LEGS, CORE = MuscleGroup.PUSH, MuscleGroup.PULL, MuscleGroup.LEGS, MuscleGroup.CORE

_FULL_BODY = ((PUSH, 0, 2), (PULL, 0, 2), (LEGS, 0, 2), (CORE, 0, 1))

SPLITS: dict[int, tuple[str, tuple[DayTemplate, ...]]] = {
    2: (
        "Full Body",
        (
            DayTemplate("Tuesday", "Full Body", _FULL_BODY),
            DayTemplate("Friday", "Full Body", _FULL_BODY),
        ),
    ),
    3: (
        "Upper/Lower/Full Body",
        (
            DayTemplate("Monday", "Upper Body", ((PUSH, 0, 3), (PULL, 0, 3))),
            DayTemplate("Wednesday", "Lower Body", ((LEGS, 0, 4), (CORE, 0, 2))),
            DayTemplate("Friday", "Full Body", ((PUSH, 0, 2), (PULL, 0, 2), (LEGS, 0, 2))),
        ),
    ),
    4: (
        "Upper/Lower",
        (
            DayTemplate("Monday", "Upper Body (Push)", ((PUSH, 0, 4), (CORE, 0, 1))),
            DayTemplate("Tuesday", "Lower Body", ((LEGS, 0, 4), (CORE, 0, 2))),
            DayTemplate("Thursday", "Upper Body (Pull)", ((PULL, 0, 4), (CORE, 0, 1))),
            DayTemplate("Friday", "Lower Body + Core", ((LEGS, 2, 5), (CORE, 1, 4))),
        ),
    ),
}


def choose_split(training_days: int) -> tuple[str, tuple[DayTemplate, ...]]:
    """Split depends on the day count only; any count other than 2 or 3 uses the 4-day split."""
    return SPLITS.get(training_days, SPLITS[4])


def adjust_exercise(
    exercise: Exercise, goal: TrainingGoal | None, score: int
) -> ScheduledExercise:
    """Turn catalog defaults into a prescription for the goal, then the score."""
    sets = exercise.sets_default
    reps = exercise.reps_default
    rest = exercise.rest_seconds

    if goal is TrainingGoal.STRENGTH:
        sets = min(sets + 1, 5)
        reps = max(reps - 4, 4)
        rest = min(rest + 30, 120)
    elif goal is TrainingGoal.MUSCLE_GAIN:
        sets = min(sets + 1, 4)
        reps = min(reps + 2, 12)
        rest = 75
    elif goal is TrainingGoal.GENERAL_FITNESS:
        reps = min(reps + 3, 15)
        rest = max(rest - 15, 30)

    if score >= 4:
        sets = min(sets + 1, 5)
        rest = max(rest - 15, 30)
    elif score <= 1:
        sets = max(sets - 1, 2)
        rest = min(rest + 15, 120)

    return ScheduledExercise(
        exercise=exercise,
        sets=sets,
        reps=reps,
        rest_seconds=rest,
        notes=GOAL_NOTES.get(goal) if goal is not None else None,
    )


def exercise_minutes(scheduled: ScheduledExercise) -> float:
    """Work at 30 seconds a set plus rest between sets."""
    return scheduled.sets * SET_MINUTES + (scheduled.sets - 1) * (scheduled.rest_seconds / 60)


def pack_session(
    pool: Sequence[Exercise],
    goal: TrainingGoal | None,
    score: int,
    budget_minutes: float,
    rng: random.Random,
) -> tuple[list[ScheduledExercise], float]:
    """
    Greedy time packing for one session.

    Candidates are shuffled, then accepted while they fit the budget; packing
    stops once 85% of the budget is used. Below 90% the selected exercises get
    one extra set each per pass (capped at six) until a pass adds nothing.
    Returns the selection and the packed minutes.
    """
    candidates = list(pool)
    rng.shuffle(candidates)

    selected: list[ScheduledExercise] = []
    used = 0.0
    for exercise in candidates:
        scheduled = adjust_exercise(exercise, goal, score)
        minutes = exercise_minutes(scheduled)
        if used + minutes <= budget_minutes:
            selected.append(scheduled)
            used += minutes
        if used >= budget_minutes * STOP_FILL_RATIO:
            break

    while selected and used < budget_minutes * PAD_FILL_RATIO:
        added = False
        for scheduled in selected:
            extra = SET_MINUTES + scheduled.rest_seconds / 60
            if scheduled.sets < MAX_PADDED_SETS and used + extra <= budget_minutes:
                scheduled.sets += 1
                used += extra
                added = True
        if not added:
            break

    return selected, used


def build_day(
    template: DayTemplate,
    buckets: dict[MuscleGroup, list[Exercise]],
    goal: TrainingGoal | None,
    score: int,
    session_minutes: int,
    rng: random.Random,
) -> WorkoutDay:
    pool: list[Exercise] = []
    for group, start, stop in template.slices:
        pool.extend(buckets[group][start:stop])

    budget = session_minutes - WARMUP_MINUTES - COOLDOWN_MINUTES
    selected, packed = pack_session(pool, goal, score, budget, rng)
    packed = round(packed, 2)
    calories = sum(s.exercise.calories_per_set * s.sets for s in selected)

    session = WorkoutSession(
        session_number=1,
        exercises=selected,
        duration=session_minutes,
        packed_minutes=packed,
    )
    # Displayed duration is the requested session length, not the packed time.
    return WorkoutDay(
        day_name=template.day_name,
        focus=template.focus,
        sessions=[session],
        total_duration=session_minutes,
        total_calories=calories,
        packed_minutes=packed,
    )


def build_plan(
    exercises: Sequence[Exercise],
    training_days: int,
    session_minutes: int,
    goal: TrainingGoal | None,
    score: int,
    trace: TraceRecorder,
    rng: random.Random,
) -> list[WorkoutDay]:
    trace.system(
        f"Generating {training_days}-day workout plan with {session_minutes} min sessions"
    )
    split_name, templates = choose_split(training_days)
    trace.add(TraceCategory.RULE, f"Split Rule: {training_days} days/week -> {split_name} Split")

    reserved = WARMUP_MINUTES + COOLDOWN_MINUTES
    trace.add(
        TraceCategory.OPTIMIZATION,
        f"Time Per Session: {session_minutes} minutes (including {reserved}min warmup/cooldown)",
    )
    trace.add(
        TraceCategory.OPTIMIZATION,
        "Estimated Exercises Per Day: "
        f"~{(session_minutes - reserved) // AVG_EXERCISE_MINUTES} exercises to fit time limit",
    )

    buckets = {group: by_muscle_group(exercises, group) for group in MuscleGroup}
    days: list[WorkoutDay] = []
    for template in templates:
        day = build_day(template, buckets, goal, score, session_minutes, rng)
        count = len(day.scheduled())
        trace.add(
            TraceCategory.OPTIMIZATION,
            f"{day.day_name}: {count} exercises scheduled for {session_minutes} min session"
            f" ({day.packed_minutes:g} min of work)",
        )
        if not count:
            trace.add(TraceCategory.WARNING, f"{day.day_name}: no exercises fit this day")
        days.append(day)

    trace.add(TraceCategory.OPTIMIZATION, f"Goal Optimization: {GOAL_OPTIMIZATIONS[goal]}")
    logger.debug("Built %d-day plan (%s) with score %s", len(days), split_name, score)
    return days
