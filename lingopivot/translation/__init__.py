"""Translation routing, caching, scoring and model backends."""

from .cache import TranslationCache
from .confidence import ConfidenceScorer
from .model_pipeline import LoadProgress, LoadStatus, ModelPipeline
from .profiles import InMemoryProfileStore, ProfileStore
from .router import TranslationRouter

__all__ = [
    "ConfidenceScorer",
    "InMemoryProfileStore",
    "LoadProgress",
    "LoadStatus",
    "ModelPipeline",
    "ProfileStore",
    "TranslationCache",
    "TranslationRouter",
]
