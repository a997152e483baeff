"""
Inference engine turning questionnaire answers into a weekly workout plan.
"""

from .inference import RecommendationEngine, recommend
from .trace import TraceRecorder

__all__ = ["RecommendationEngine", "TraceRecorder", "recommend"]
