"""Data models for idioms and ambiguous word senses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class IdiomCategory(str, Enum):
    IDIOM = "idiom"
    PROVERB = "proverb"
    SLANG = "slang"
    COLLOQUIAL = "colloquial"


class Register(str, Enum):
    FORMAL = "formal"
    INFORMAL = "informal"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class IdiomEntry:
    """A fixed English expression with per-language equivalents."""

    phrase: str
    meaning: str
    translations: Dict[str, str]  # target language name -> phrase (sparse)
    category: IdiomCategory = IdiomCategory.IDIOM
    register: Register = Register.NEUTRAL
    normalized_phrase: str = ""

    def __post_init__(self):
        if not self.normalized_phrase:
            object.__setattr__(self, "normalized_phrase", normalize_phrase(self.phrase))

    def translation_for(self, language: str) -> Optional[str]:
        """Get the equivalent phrase for a language, if one is registered."""
        translation = self.translations.get(language.lower())
        return translation or None


@dataclass
class IdiomMatch:
    """An idiom located inside a piece of text."""

    phrase: str
    entry: IdiomEntry
    start: int
    end: int


@dataclass
class IdiomReplacement:
    """Outcome of replacing idioms in a text."""

    text: str
    replacements: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class WordSense:
    """One meaning of an ambiguous English word."""

    id: str
    meaning: str
    context_clues: List[str]
    translations: Dict[str, str]


def normalize_phrase(phrase: str) -> str:
    """Lowercase and collapse whitespace for dictionary keys."""
    return " ".join(phrase.lower().split())
