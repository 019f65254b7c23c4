"""Offline multi-strategy translation and transliteration pipeline."""

from .translation.router import TranslationRouter

__version__ = "0.1.0"

__all__ = ["TranslationRouter", "__version__"]
