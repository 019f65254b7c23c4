"""Latin <-> native script transliteration."""

from .transliterator import Transliterator

__all__ = ["Transliterator"]
