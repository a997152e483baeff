"""
Knowledge base: the fixed attribute weights behind the Workout Complexity Score.

The score tables in ``engine.score`` are derived from ``ATTRIBUTE_WEIGHTS`` so
that the values shown to users and the values used for inference cannot drift.
"""

from __future__ import annotations

from pydantic import BaseModel

from .models import (
    ComplexityLevel,
    EquipmentTag,
    ExperienceLevel,
    Injury,
    Intensity,
    TrainingGoal,
)


class AttributeWeight(BaseModel):
    name: str
    attribute: str
    key: str | int
    value: int
    description: str


class Interpretation(BaseModel):
    level: ComplexityLevel
    range: str
    description: str
    summary: str


EXPERIENCE = "Experience Level"
TRAINING_DAYS = "Training Days"
INTENSITY = "Workout Intensity"
TIME_CONSTRAINT = "Time Constraint"
TRAINING_GOAL = "Training Goal"
EQUIPMENT = "Equipment"
LIMITATION = "Physical Limitation"


def _w(name: str, attribute: str, key: str | int, value: int, description: str) -> AttributeWeight:
    return AttributeWeight(
        name=name, attribute=attribute, key=key, value=value, description=description
    )


ATTRIBUTE_WEIGHTS: tuple[AttributeWeight, ...] = (
    _w(
        EXPERIENCE,
        "Beginner",
        ExperienceLevel.BEGINNER.value,
        0,
        "New to fitness training, requires simpler exercises with lower volume",
    ),
    _w(
        EXPERIENCE,
        "Intermediate",
        ExperienceLevel.INTERMEDIATE.value,
        1,
        "Has training experience, can handle more complex exercises and higher volume",
    ),
    _w(TRAINING_DAYS, "2 days/week", 2, 0, "Minimal training frequency, requires Full Body"),
    _w(TRAINING_DAYS, "3 days/week", 3, 1, "Moderate frequency, allows Upper/Lower/Full Body"),
    _w(TRAINING_DAYS, "4 days/week", 4, 2, "Higher frequency, enables an Upper/Lower split"),
    _w(
        INTENSITY,
        "Light",
        Intensity.LIGHT.value,
        0,
        "Lower effort exercises, longer rest periods, suitable for recovery",
    ),
    _w(
        INTENSITY,
        "Medium",
        Intensity.MEDIUM.value,
        1,
        "Moderate effort, balanced between intensity and recovery",
    ),
    _w(
        INTENSITY,
        "High",
        Intensity.HIGH.value,
        2,
        "Maximum effort exercises, shorter rest periods, higher calorie burn",
    ),
    # inverted: more time means less constraint
    _w(TIME_CONSTRAINT, "60 minutes", 60, 0, "No constraint on workout duration"),
    _w(TIME_CONSTRAINT, "45 minutes", 45, 1, "Requires efficient exercise selection"),
    _w(TIME_CONSTRAINT, "30 minutes", 30, 2, "Requires compact high-efficiency workouts"),
    _w(
        TRAINING_GOAL,
        "Muscle Gain",
        TrainingGoal.MUSCLE_GAIN.value,
        0,
        "Hypertrophy focus, moderate weights, 8-12 reps, 60-90s rest",
    ),
    _w(
        TRAINING_GOAL,
        "Strength",
        TrainingGoal.STRENGTH.value,
        1,
        "Power focus, heavier weights, 4-6 reps, 90-120s rest",
    ),
    _w(
        TRAINING_GOAL,
        "General Fitness",
        TrainingGoal.GENERAL_FITNESS.value,
        2,
        "Circuit-style, 12-15 reps, 30-45s rest",
    ),
    _w(EQUIPMENT, "Dumbbells", EquipmentTag.DUMBBELLS.value, 1, "Weighted compound movements"),
    _w(EQUIPMENT, "Resistance Bands", EquipmentTag.BANDS.value, 1, "Variable resistance"),
    _w(EQUIPMENT, "Bench", EquipmentTag.BENCH.value, 1, "Pressing and step movements"),
    _w(EQUIPMENT, "Pull-up Bar", EquipmentTag.PULLUP_BAR.value, 1, "Vertical pulling"),
    _w(EQUIPMENT, "Bodyweight", EquipmentTag.BODYWEIGHT.value, 1, "Fundamental movements"),
    _w(LIMITATION, "None", Injury.NONE.value, 0, "No restrictions, all exercises available"),
    _w(
        LIMITATION,
        "Shoulder Injury",
        Injury.SHOULDER.value,
        1,
        "Avoid overhead movements, substitute with floor/horizontal presses",
    ),
    _w(
        LIMITATION,
        "Knee Injury",
        Injury.KNEE.value,
        2,
        "Avoid high-impact leg movements like jumps and lunges",
    ),
    _w(LIMITATION, "Back Injury", Injury.BACK.value, 3, "Avoid exercises straining the lower back"),
)

WCS_FORMULA = "WCS = (Experience + TrainingDays + Intensity) - TimeConstraint"

INTERPRETATIONS: tuple[Interpretation, ...] = (
    Interpretation(
        level=ComplexityLevel.BASIC,
        range="WCS <= 1",
        description="Simple exercises, longer rest, fewer sets",
        summary="Basic workout complexity - fundamental movements with adequate rest",
    ),
    Interpretation(
        level=ComplexityLevel.MODERATE,
        range="WCS 2-3",
        description="Balanced workout with moderate complexity",
        summary="Moderate workout complexity - balanced approach with progressive exercises",
    ),
    Interpretation(
        level=ComplexityLevel.ADVANCED,
        range="WCS >= 4",
        description="Complex exercises, shorter rest, higher volume",
        summary="Advanced workout complexity - challenging exercises with higher intensity",
    ),
)


def weight_table(name: str) -> dict[str | int, int]:
    """Map attribute keys of one weight group to their numeric value."""
    return {w.key: w.value for w in ATTRIBUTE_WEIGHTS if w.name == name}


def interpret(score: int) -> Interpretation:
    if score <= 1:
        level = ComplexityLevel.BASIC
    elif score <= 3:
        level = ComplexityLevel.MODERATE
    else:
        level = ComplexityLevel.ADVANCED
    return next(i for i in INTERPRETATIONS if i.level is level)
