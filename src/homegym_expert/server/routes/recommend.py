"""
Workout recommendation API route.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ...engine import RecommendationEngine
from ...errors import InvalidInput
from ...models import RecommendationResult

router = APIRouter()


class RecommendRequest(BaseModel):
    # Plain mappings so domain errors surface as InvalidInput from the engine.
    profile: dict[str, Any] = Field(default_factory=dict)
    constraints: dict[str, Any] = Field(default_factory=dict)
    equipment: dict[str, Any] = Field(default_factory=dict)
    seed: int | None = None


class RecommendResponse(BaseModel):
    success: bool
    result: RecommendationResult | None = None
    error: str | None = None
    field: str | None = None


@lru_cache(maxsize=1)
def get_engine() -> RecommendationEngine:
    return RecommendationEngine()


@router.post("/recommend", response_model=RecommendResponse)
def recommend_plan(req: RecommendRequest):
    """Run the inference engine for one questionnaire submission."""
    try:
        result = get_engine().run(req.profile, req.constraints, req.equipment, seed=req.seed)
    except InvalidInput as e:
        logging.info("Rejected recommendation input: %s", e)
        body = RecommendResponse(success=False, error=str(e), field=e.field)
        return JSONResponse(body.model_dump(mode="json"), status_code=422)
    return RecommendResponse(success=True, result=result)
