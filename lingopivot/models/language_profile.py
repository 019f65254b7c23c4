"""Data models for language identity and grammar metadata."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class WordOrder(str, Enum):
    """Canonical subject/verb/object order of declarative sentences."""

    SVO = "SVO"
    SOV = "SOV"
    VSO = "VSO"
    VOS = "VOS"
    OVS = "OVS"
    OSV = "OSV"


class AdjectivePosition(str, Enum):
    """Where attributive adjectives sit relative to their noun."""

    BEFORE = "before"
    AFTER = "after"


LATIN_SCRIPT = "Latin"


@dataclass(frozen=True)
class LanguageProfile:
    """Identity and grammar metadata for a single language."""

    name: str  # canonical, lowercase ("hindi")
    code: str  # ISO 639 code ("hi")
    native_name: str
    script: str = LATIN_SCRIPT  # "Latin" or a native script name ("Devanagari")
    rtl: bool = False

    # Grammar
    word_order: WordOrder = WordOrder.SVO
    has_gender: bool = False
    has_articles: bool = False
    adjective_position: AdjectivePosition = AdjectivePosition.BEFORE
    uses_postpositions: bool = False
    subject_dropping: bool = False
    has_cases: bool = False
    has_honorifics: bool = False
    sentence_end_particle: Optional[str] = None

    @property
    def is_latin(self) -> bool:
        """Check if the language is natively written in Latin script."""
        return self.script == LATIN_SCRIPT

    @property
    def adjectives_after_nouns(self) -> bool:
        return self.adjective_position == AdjectivePosition.AFTER


@dataclass(frozen=True)
class ScriptDetection:
    """Result of detecting the writing system of a piece of text."""

    script: str
    language: str
    is_latin: bool
    confidence: float
