import pytest

from homegym_expert.models import EquipmentTag, Exercise, ImpactLevel, MuscleGroup


def make_exercise(
    id: str,
    muscle_group: MuscleGroup = MuscleGroup.PUSH,
    equipment: tuple[EquipmentTag, ...] = (EquipmentTag.BODYWEIGHT,),
    impact: ImpactLevel = ImpactLevel.LOW,
    overhead: bool = False,
    back_strain: bool = False,
    sets: int = 3,
    reps: int = 10,
    rest: int = 60,
    calories: float = 5,
) -> Exercise:
    return Exercise(
        id=id,
        name=id.replace("-", " ").title(),
        muscle_group=muscle_group,
        required_equipment=equipment,
        impact_level=impact,
        is_overhead=overhead,
        is_back_strain=back_strain,
        sets_default=sets,
        reps_default=reps,
        rest_seconds=rest,
        calories_per_set=calories,
        duration_minutes=4,
    )


@pytest.fixture
def exercise_factory():
    return make_exercise


@pytest.fixture
def small_catalog() -> list[Exercise]:
    """Six exercises per muscle group, bodyweight only, ids like ``legs-3``."""
    return [
        make_exercise(f"{group.value}-{i}", muscle_group=group)
        for group in MuscleGroup
        for i in range(6)
    ]
