"""Tests for equipment and injury filtering."""

import itertools

import pytest

from homegym_expert.catalog import load_catalog
from homegym_expert.engine.filters import filter_exercises, injury_conflict
from homegym_expert.engine.trace import TraceRecorder
from homegym_expert.models import (
    Equipment,
    EquipmentTag,
    ImpactLevel,
    Injury,
    MuscleGroup,
    TraceCategory,
)

EQUIPMENT_FIELDS = ["dumbbells", "bands", "bench", "pullupBar", "bodyweight"]


@pytest.mark.parametrize(
    "flags", list(itertools.product([False, True], repeat=len(EQUIPMENT_FIELDS)))
)
def test_equipment_filter_is_monotonic(flags):
    """Every kept exercise has all of its required equipment available."""
    equipment = Equipment.model_validate(dict(zip(EQUIPMENT_FIELDS, flags, strict=True)))
    catalog = load_catalog()
    kept, excluded = filter_exercises(catalog, equipment, [], TraceRecorder())
    for exercise in kept:
        assert all(equipment.has(tag) for tag in exercise.required_equipment)
    assert len(kept) + len(excluded.by_equipment) == len(catalog)


def test_equipment_filter_records_and_logs_exclusions(exercise_factory):
    push_up = exercise_factory("push-up")
    press = exercise_factory("db-press", equipment=(EquipmentTag.DUMBBELLS, EquipmentTag.BENCH))
    trace = TraceRecorder()
    kept, excluded = filter_exercises(
        [push_up, press], Equipment(bodyweight=True, dumbbells=True), [], trace
    )
    assert kept == [push_up]
    assert excluded.by_equipment == ["Db Press"]
    constraint_msgs = [e.message for e in trace.entries if e.category is TraceCategory.CONSTRAINT]
    assert constraint_msgs == ['Equipment Rule: Excluding "Db Press" - requires dumbbells, bench']


@pytest.mark.parametrize("injuries", [[], [Injury.NONE]])
def test_injury_filter_noop_without_injuries(injuries):
    catalog = load_catalog()
    equipment = Equipment(dumbbells=True, bands=True, bench=True, pullup_bar=True, bodyweight=True)
    trace = TraceRecorder()
    kept, excluded = filter_exercises(catalog, equipment, injuries, trace)
    assert kept == list(catalog)
    assert excluded.by_injury == []
    assert any(
        e.category is TraceCategory.SUCCESS and e.message == "No physical limitations detected"
        for e in trace.entries
    )


def test_knee_rule_only_hits_high_impact_legs(exercise_factory):
    jump = exercise_factory("jump-squat", MuscleGroup.LEGS, impact=ImpactLevel.HIGH)
    squat = exercise_factory("squat", MuscleGroup.LEGS)
    climbers = exercise_factory("climbers", MuscleGroup.CORE, impact=ImpactLevel.HIGH)
    kept, excluded = filter_exercises(
        [jump, squat, climbers], Equipment(bodyweight=True), [Injury.KNEE], TraceRecorder()
    )
    assert kept == [squat, climbers]
    assert excluded.by_injury == ["Jump Squat"]


def test_shoulder_and_back_rules(exercise_factory):
    overhead = exercise_factory("pike", overhead=True)
    strain = exercise_factory("superman", MuscleGroup.CORE, back_strain=True)
    plain = exercise_factory("plank", MuscleGroup.CORE)
    equipment = Equipment(bodyweight=True)

    kept, excluded = filter_exercises(
        [overhead, strain, plain], equipment, [Injury.SHOULDER], TraceRecorder()
    )
    assert kept == [strain, plain]
    assert excluded.by_injury == ["Pike"]

    kept, excluded = filter_exercises(
        [overhead, strain, plain], equipment, [Injury.BACK, Injury.NONE], TraceRecorder()
    )
    assert kept == [overhead, plain]
    assert excluded.by_injury == ["Superman"]


def test_injury_rules_short_circuit_on_first_match(exercise_factory):
    """An exercise matching every rule is excluded and logged once, for the knee."""
    worst = exercise_factory(
        "thruster-jump",
        MuscleGroup.LEGS,
        impact=ImpactLevel.HIGH,
        overhead=True,
        back_strain=True,
    )
    injuries = [Injury.BACK, Injury.SHOULDER, Injury.KNEE]
    assert injury_conflict(worst, injuries) == "High impact not suitable for knee injury"

    trace = TraceRecorder()
    kept, excluded = filter_exercises([worst], Equipment(bodyweight=True), injuries, trace)
    assert kept == []
    assert excluded.by_injury == ["Thruster Jump"]
    injury_msgs = [e.message for e in trace.entries if e.message.startswith("Injury Rule")]
    assert len(injury_msgs) == 1


def test_filter_preserves_catalog_order(small_catalog):
    kept, _ = filter_exercises(
        small_catalog, Equipment(bodyweight=True), [Injury.KNEE], TraceRecorder()
    )
    assert kept == small_catalog


def test_no_equipment_warns_and_empties(small_catalog):
    trace = TraceRecorder()
    kept, excluded = filter_exercises(small_catalog, Equipment(), [], trace)
    assert kept == []
    assert len(excluded.by_equipment) == len(small_catalog)
    warnings = [e.message for e in trace.entries if e.category is TraceCategory.WARNING]
    assert len(warnings) == 2
