"""
Pydantic models for engine inputs, the exercise catalog and results.
"""

from __future__ import annotations

import enum
from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MuscleGroup(str, enum.Enum):
    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"
    CORE = "core"


class EquipmentTag(str, enum.Enum):
    DUMBBELLS = "dumbbells"
    BANDS = "bands"
    BENCH = "bench"
    PULLUP_BAR = "pullupBar"
    BODYWEIGHT = "bodyweight"


class ImpactLevel(str, enum.Enum):
    HIGH = "high"
    LOW = "low"


class ExperienceLevel(str, enum.Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"


class TrainingGoal(str, enum.Enum):
    MUSCLE_GAIN = "muscle_gain"
    STRENGTH = "strength"
    GENERAL_FITNESS = "general_fitness"


class Intensity(str, enum.Enum):
    LIGHT = "light"
    MEDIUM = "medium"
    HIGH = "high"


class Injury(str, enum.Enum):
    NONE = "none"
    SHOULDER = "shoulder"
    KNEE = "knee"
    BACK = "back"


class TraceCategory(str, enum.Enum):
    SYSTEM = "system"
    CONSTRAINT = "constraint"
    RULE = "rule"
    OPTIMIZATION = "optimization"
    CALCULATION = "calculation"
    WARNING = "warning"
    SUCCESS = "success"


TrainingDays = Literal[2, 3, 4]
SessionMinutes = Literal[30, 45, 60]


class Exercise(BaseModel):
    """Immutable catalog record."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    muscle_group: MuscleGroup
    required_equipment: tuple[EquipmentTag, ...] = ()
    impact_level: ImpactLevel = ImpactLevel.LOW
    is_overhead: bool = False
    is_back_strain: bool = False
    sets_default: int = Field(..., ge=1)
    reps_default: int = Field(..., ge=1)
    rest_seconds: int = Field(..., ge=0)
    calories_per_set: float = Field(..., ge=0)
    duration_minutes: float = Field(..., ge=0)

    @field_validator("required_equipment", mode="after")
    @classmethod
    def dedupe_equipment(cls, v: tuple[EquipmentTag, ...]) -> tuple[EquipmentTag, ...]:
        return tuple(dict.fromkeys(v))


class UserProfile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    experience_level: ExperienceLevel | None = None
    training_goal: TrainingGoal | None = None


class UserConstraints(BaseModel):
    model_config = ConfigDict(extra="forbid")

    training_days: TrainingDays | None = None
    available_time: SessionMinutes | None = None
    intensity: Intensity | None = None
    injuries: list[Injury] = Field(default_factory=list)

    @field_validator("injuries", mode="after")
    @classmethod
    def dedupe_injuries(cls, v: list[Injury]) -> list[Injury]:
        return list(dict.fromkeys(v))

    def active_injuries(self) -> list[Injury]:
        """Injuries with the ``none`` sentinel stripped."""
        return [i for i in self.injuries if i is not Injury.NONE]


class Equipment(BaseModel):
    """Availability of each equipment capability."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    dumbbells: bool = False
    bands: bool = False
    bench: bool = False
    pullup_bar: bool = Field(False, alias="pullupBar")
    bodyweight: bool = False

    def has(self, tag: EquipmentTag) -> bool:
        return bool(getattr(self, _EQUIPMENT_FIELDS[tag]))

    def available(self) -> list[EquipmentTag]:
        return [tag for tag in EquipmentTag if self.has(tag)]


_EQUIPMENT_FIELDS: dict[EquipmentTag, str] = {
    EquipmentTag.DUMBBELLS: "dumbbells",
    EquipmentTag.BANDS: "bands",
    EquipmentTag.BENCH: "bench",
    EquipmentTag.PULLUP_BAR: "pullup_bar",
    EquipmentTag.BODYWEIGHT: "bodyweight",
}


class ScheduledExercise(BaseModel):
    """A catalog exercise with run-specific prescription."""

    exercise: Exercise
    sets: int
    reps: int
    rest_seconds: int
    notes: str | None = None


class WorkoutSession(BaseModel):
    session_number: int
    exercises: list[ScheduledExercise] = Field(default_factory=list)
    duration: int
    packed_minutes: float = 0.0


class WorkoutDay(BaseModel):
    day_name: str
    focus: str
    sessions: list[WorkoutSession] = Field(default_factory=list)
    total_duration: int
    total_calories: float = 0.0
    packed_minutes: float = 0.0

    def scheduled(self) -> list[ScheduledExercise]:
        return [ex for session in self.sessions for ex in session.exercises]


class TraceEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    category: TraceCategory
    message: str


class ComplexityLevel(str, enum.Enum):
    BASIC = "Basic"
    MODERATE = "Moderate"
    ADVANCED = "Advanced"


class ScoreBreakdown(BaseModel):
    experience_value: int
    training_days_value: int
    intensity_value: int
    time_constraint_value: int
    score: int
    level: ComplexityLevel
    interpretation: str


class ExcludedExercises(BaseModel):
    by_equipment: list[str] = Field(default_factory=list)
    by_injury: list[str] = Field(default_factory=list)


class RecommendationResult(BaseModel):
    wcs: ScoreBreakdown
    volume_score: int
    estimated_calorie_burn: int
    workout_plan: list[WorkoutDay]
    trace: list[TraceEntry]
    excluded: ExcludedExercises
    seed: int | None = None
