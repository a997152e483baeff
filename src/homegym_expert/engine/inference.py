"""
Recommendation engine: runs score, filter, plan and metrics stages in order.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .. import __version__
from ..catalog import load_catalog
from ..config import SETTINGS
from ..errors import InvalidInput
from ..models import (
    Equipment,
    Exercise,
    RecommendationResult,
    TraceCategory,
    UserConstraints,
    UserProfile,
)
from .filters import filter_exercises
from .metrics import calorie_estimate, volume_score
from .planner import build_plan
from .score import DEFAULT_AVAILABLE_TIME, DEFAULT_TRAINING_DAYS, calculate_score
from .trace import TraceRecorder

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _coerce(model: type[ModelT], value: ModelT | Mapping[str, Any] | None, name: str) -> ModelT:
    if isinstance(value, model):
        # Re-validate so instances built with model_construct cannot bypass the domains.
        value = value.model_dump(by_alias=True, warnings=False)
    try:
        return model.model_validate(value or {})
    except ValidationError as e:
        raise InvalidInput.from_validation_error(name, e) from None


class RecommendationEngine:
    """
    Stateless-per-call engine.

    The instance only holds the read-only catalog and default seed; every call
    to ``run`` gets its own trace, exclusion lists and random generator, so a
    single engine may be shared between concurrent callers.
    """

    def __init__(self, catalog: Sequence[Exercise] | None = None, seed: int | None = None):
        self.catalog: tuple[Exercise, ...] = (
            tuple(catalog) if catalog is not None else load_catalog()
        )
        self.seed = seed if seed is not None else SETTINGS.ENGINE_SEED

    def run(
        self,
        profile: UserProfile | Mapping[str, Any] | None,
        constraints: UserConstraints | Mapping[str, Any] | None,
        equipment: Equipment | Mapping[str, Any] | None,
        seed: int | None = None,
    ) -> RecommendationResult:
        """
        Produce a weekly plan with metrics and trace.

        Raises ``InvalidInput`` before any stage runs when an input value lies
        outside its domain. Empty catalogs or filters yield an empty plan.
        """
        profile = _coerce(UserProfile, profile, "profile")
        constraints = _coerce(UserConstraints, constraints, "constraints")
        equipment = _coerce(Equipment, equipment, "equipment")

        seed = seed if seed is not None else self.seed
        rng = random.Random(seed)
        trace = TraceRecorder(mirror_to_log=SETTINGS.FF_TRACE_LOGGING)

        trace.system(f"HomeGym Expert System v{__version__} - Inference Engine")
        trace.system("Initializing Knowledge Base...")
        trace.system(f"Loaded {len(self.catalog)} exercises from database")
        if not self.catalog:
            trace.add(TraceCategory.WARNING, "Exercise catalog is empty")

        trace.phase("1: Input Processing")
        wcs = calculate_score(profile, constraints, trace)

        trace.phase("2: Constraint Checking")
        available, excluded = filter_exercises(
            self.catalog, equipment, constraints.injuries, trace
        )

        trace.phase("3: Workout Plan Generation")
        plan = build_plan(
            available,
            training_days=constraints.training_days or DEFAULT_TRAINING_DAYS,
            session_minutes=constraints.available_time or DEFAULT_AVAILABLE_TIME,
            goal=profile.training_goal,
            score=wcs.score,
            trace=trace,
            rng=rng,
        )

        trace.phase("4: Performance Metrics Calculation")
        volume = volume_score(plan, trace)
        calories = calorie_estimate(plan, constraints.intensity, trace)

        trace.system("")
        trace.add(TraceCategory.SUCCESS, "Inference Complete - Workout Plan Generated!")
        trace.add(
            TraceCategory.SUCCESS,
            f"WCS: {wcs.score} | Volume: {volume} | Calories: {calories} kcal",
        )
        logger.info(
            "Recommendation ready: wcs=%s days=%d volume=%d calories=%d",
            wcs.score,
            len(plan),
            volume,
            calories,
        )

        return RecommendationResult(
            wcs=wcs,
            volume_score=volume,
            estimated_calorie_burn=calories,
            workout_plan=plan,
            trace=trace.entries,
            excluded=excluded,
            seed=seed,
        )


def recommend(
    profile: UserProfile | Mapping[str, Any] | None,
    constraints: UserConstraints | Mapping[str, Any] | None,
    equipment: Equipment | Mapping[str, Any] | None,
    *,
    catalog: Sequence[Exercise] | None = None,
    seed: int | None = None,
) -> RecommendationResult:
    """One-shot helper building a fresh engine per call."""
    return RecommendationEngine(catalog=catalog, seed=seed).run(profile, constraints, equipment)
