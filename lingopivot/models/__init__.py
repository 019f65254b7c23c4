"""Data models for the translation pipeline."""

from .language_profile import (
    AdjectivePosition,
    LanguageProfile,
    ScriptDetection,
    WordOrder,
)
from .token import MorphologicalFeatures, PartOfSpeech, SentenceChunk, Tense, Token
from .idiom_entry import (
    IdiomCategory,
    IdiomEntry,
    IdiomMatch,
    IdiomReplacement,
    Register,
    WordSense,
)
from .translation_result import (
    ChatMessageViews,
    ChatPath,
    Correction,
    CorrectionType,
    TranslationDirection,
    TranslationMethod,
    TranslationResult,
)

__all__ = [
    "AdjectivePosition",
    "LanguageProfile",
    "ScriptDetection",
    "WordOrder",
    "MorphologicalFeatures",
    "PartOfSpeech",
    "SentenceChunk",
    "Tense",
    "Token",
    "IdiomCategory",
    "IdiomEntry",
    "IdiomMatch",
    "IdiomReplacement",
    "Register",
    "WordSense",
    "ChatMessageViews",
    "ChatPath",
    "Correction",
    "CorrectionType",
    "TranslationDirection",
    "TranslationMethod",
    "TranslationResult",
]
