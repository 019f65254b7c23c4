"""Linguistic analysis: morphology, sense disambiguation and reordering."""

from .disambiguation import Disambiguation, DisambiguationContext, WordSenseDisambiguator
from .reordering import SentenceReorderer

__all__ = [
    "Disambiguation",
    "DisambiguationContext",
    "SentenceReorderer",
    "WordSenseDisambiguator",
]
