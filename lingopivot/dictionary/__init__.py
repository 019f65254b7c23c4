"""Idiom, phrase and word-sense dictionaries."""

from .idioms import IdiomDictionary
from .loader import DataLoader
from .phrases import PhraseDictionary

__all__ = ["DataLoader", "IdiomDictionary", "PhraseDictionary"]
