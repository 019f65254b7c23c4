"""Data models for translation results and chat message views."""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import List, Optional

from .token import Token


class TranslationMethod(str, Enum):
    """How the final text of a translation was produced."""

    DICTIONARY_LOOKUP = "dictionary-lookup"
    PHRASE_MATCH = "phrase-match"
    IDIOM_REPLACEMENT = "idiom-replacement"
    WORD_BY_WORD = "word-by-word"
    MORPHOLOGY_ADJUSTED = "morphology-adjusted"
    REORDERED = "reordered"
    CONTEXT_DISAMBIGUATED = "context-disambiguated"
    POST_PROCESSED = "post-processed"
    MODEL_FALLBACK = "model-fallback"
    PASSTHROUGH = "passthrough"


class CorrectionType(str, Enum):
    WORD_SENSE = "word-sense"
    WORD_ORDER = "word-order"
    MORPHOLOGY = "morphology"
    IDIOM = "idiom"
    GRAMMAR = "grammar"
    FLUENCY = "fluency"
    TRANSLITERATION = "transliteration"


class TranslationDirection(str, Enum):
    """Route taken between a source and a target language."""

    PASSTHROUGH = "passthrough"
    ENGLISH_SOURCE = "english-source"
    ENGLISH_TARGET = "english-target"
    LATIN_TO_LATIN = "latin-to-latin"
    LATIN_TO_NATIVE = "latin-to-native"
    NATIVE_TO_LATIN = "native-to-latin"
    NATIVE_TO_NATIVE = "native-to-native"

    @property
    def uses_english_pivot(self) -> bool:
        """Only native-to-native pairs bridge through English."""
        return self == TranslationDirection.NATIVE_TO_NATIVE


class ChatPath(str, Enum):
    """Sender/receiver combination of a chat message.

    Each side is one of: English, another Latin-script language, or a
    native-script language.
    """

    ENGLISH_TO_ENGLISH = "english-to-english"
    ENGLISH_TO_LATIN = "english-to-latin"
    ENGLISH_TO_NATIVE = "english-to-native"
    LATIN_TO_ENGLISH = "latin-to-english"
    LATIN_TO_LATIN = "latin-to-latin"
    LATIN_TO_NATIVE = "latin-to-native"
    NATIVE_TO_ENGLISH = "native-to-english"
    NATIVE_TO_LATIN = "native-to-latin"
    NATIVE_TO_NATIVE = "native-to-native"

    @classmethod
    def between(cls, sender_kind: str, receiver_kind: str) -> "ChatPath":
        return cls(f"{sender_kind}-to-{receiver_kind}")


@dataclass
class Correction:
    """A single correction applied by a pipeline stage."""

    type: CorrectionType
    original: str
    corrected: str
    reason: str


@dataclass
class TranslationResult:
    """Represents the result of translating a single text."""

    text: str
    original_text: str
    source_language: str
    target_language: str
    method: TranslationMethod
    confidence: float  # 0-1
    direction: TranslationDirection = TranslationDirection.PASSTHROUGH
    corrections: List[Correction] = field(default_factory=list)
    tokens: List[Token] = field(default_factory=list)
    english_pivot: Optional[str] = None
    was_reordered: bool = False
    was_disambiguated: bool = False
    idioms_found: List[str] = field(default_factory=list)
    unknown_words: List[str] = field(default_factory=list)
    fallback_used: bool = False
    is_translated: bool = False
    is_transliterated: bool = False
    cached: bool = False
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        """Check if the pipeline produced something other than the input."""
        return self.error is None and (self.is_translated or self.is_transliterated)

    def to_dict(self) -> dict:
        """Serialize to plain JSON-compatible types (tokens omitted)."""
        data = asdict(self)
        data.pop("tokens")
        data["method"] = self.method.value
        data["direction"] = self.direction.value
        data["corrections"] = [
            {**c, "type": c["type"].value} for c in data["corrections"]
        ]
        return data


@dataclass
class ChatMessageViews:
    """Sender and receiver renderings of one chat message."""

    original_text: str
    sender_view: str
    receiver_view: str
    english_core: str
    sender_language: str
    receiver_language: str
    path: ChatPath
    was_translated: bool = False
    was_transliterated: bool = False
    confidence: float = 0.0
    method: TranslationMethod = TranslationMethod.PASSTHROUGH
    corrections: List[Correction] = field(default_factory=list)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["path"] = self.path.value
        data["method"] = self.method.value
        data["corrections"] = [
            {**c, "type": c["type"].value} for c in data["corrections"]
        ]
        return data
