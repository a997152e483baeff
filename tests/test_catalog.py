"""Tests for exercise catalog loading."""

import json

from homegym_expert.catalog import by_muscle_group, load_catalog, parse_catalog
from homegym_expert.models import EquipmentTag, MuscleGroup


def test_packaged_catalog_loads():
    catalog = load_catalog()
    assert catalog
    assert len({e.id for e in catalog}) == len(catalog)
    for group in MuscleGroup:
        assert by_muscle_group(catalog, group)
    assert load_catalog() is catalog  # cached


def test_parse_catalog_skips_invalid_and_duplicate_records():
    good = {
        "id": "x-1",
        "name": "Band Row",
        "muscle_group": "pull",
        "required_equipment": ["bands", "bands"],
        "sets_default": 3,
        "reps_default": 12,
        "rest_seconds": 60,
        "calories_per_set": 6,
        "duration_minutes": 4,
    }
    bad = {**good, "id": "x-2", "muscle_group": "arms"}
    exercises = parse_catalog([good, bad, dict(good)])
    assert [e.id for e in exercises] == ["x-1"]
    assert exercises[0].required_equipment == (EquipmentTag.BANDS,)


def test_custom_catalog_path(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": "c-1",
                    "name": "Plank",
                    "muscle_group": "core",
                    "required_equipment": ["bodyweight"],
                    "sets_default": 3,
                    "reps_default": 30,
                    "rest_seconds": 45,
                    "calories_per_set": 5,
                    "duration_minutes": 3,
                }
            ]
        ),
        encoding="utf-8",
    )
    catalog = load_catalog(path)
    assert [e.name for e in catalog] == ["Plank"]


def test_unreadable_catalog_is_empty(tmp_path):
    assert load_catalog(tmp_path / "missing.json") == ()
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert load_catalog(broken) == ()


def test_non_object_records_are_skipped(tmp_path):
    """Scalars in the catalog list are logged and skipped, not fatal."""
    plank = {
        "id": "c-1",
        "name": "Plank",
        "muscle_group": "core",
        "sets_default": 3,
        "reps_default": 30,
        "rest_seconds": 45,
        "calories_per_set": 5,
        "duration_minutes": 3,
    }
    assert [e.id for e in parse_catalog([plank, "oops", 1, None])] == ["c-1"]

    path = tmp_path / "mixed.json"
    path.write_text(json.dumps([1, plank]), encoding="utf-8")
    assert [e.name for e in load_catalog(path)] == ["Plank"]


def test_failed_load_is_not_cached(tmp_path):
    """A catalog that appears after a failed read is picked up on the next call."""
    path = tmp_path / "late.json"
    assert load_catalog(path) == ()
    path.write_text(
        json.dumps(
            [
                {
                    "id": "l-1",
                    "name": "Glute Bridge",
                    "muscle_group": "legs",
                    "sets_default": 3,
                    "reps_default": 15,
                    "rest_seconds": 45,
                    "calories_per_set": 6,
                    "duration_minutes": 3,
                }
            ]
        ),
        encoding="utf-8",
    )
    assert [e.id for e in load_catalog(path)] == ["l-1"]
