"""Language identity, grammar profiles and script detection."""

from .registry import LanguageRegistry

__all__ = ["LanguageRegistry"]
