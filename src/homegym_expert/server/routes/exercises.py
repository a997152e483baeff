"""
Catalog and knowledge base API routes.
"""

from fastapi import APIRouter, HTTPException, Query

from ...catalog import by_muscle_group, load_catalog
from ...knowledge import ATTRIBUTE_WEIGHTS, INTERPRETATIONS, WCS_FORMULA
from ...models import MuscleGroup

router = APIRouter()


@router.get("/exercises")
async def list_exercises(
    muscle_group: MuscleGroup | None = Query(None, description="push, pull, legs or core"),
) -> dict:
    """
    List catalog exercises in catalog order, optionally for one muscle group.
    """
    catalog = load_catalog()
    if not catalog:
        raise HTTPException(status_code=503, detail="Exercise catalog unavailable")
    items = by_muscle_group(catalog, muscle_group) if muscle_group else list(catalog)
    return {
        "ok": True,
        "items": [e.model_dump(mode="json") for e in items],
        "total": len(items),
    }


@router.get("/knowledge")
async def knowledge() -> dict:
    """Attribute weights and WCS formula behind the complexity score."""
    return {
        "ok": True,
        "formula": WCS_FORMULA,
        "weights": [w.model_dump(mode="json") for w in ATTRIBUTE_WEIGHTS],
        "interpretation": [i.model_dump(mode="json") for i in INTERPRETATIONS],
    }
