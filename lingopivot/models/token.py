"""Data models for tokenized sentences."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional


class PartOfSpeech(str, Enum):
    """Coarse part-of-speech tags used by the pipeline."""

    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PRONOUN = "pronoun"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    INTERJECTION = "interjection"
    DETERMINER = "determiner"
    UNKNOWN = "unknown"


class Tense(str, Enum):
    PAST = "past"
    PRESENT = "present"
    FUTURE = "future"
    PERFECT = "perfect"
    PROGRESSIVE = "progressive"


@dataclass
class MorphologicalFeatures:
    """Morphological features detected on a token."""

    gender: Optional[str] = None  # masculine, feminine, neuter, common
    number: Optional[str] = None  # singular, plural, dual
    tense: Optional[Tense] = None
    person: Optional[int] = None  # 1, 2 or 3
    is_plural: Optional[bool] = None
    is_negated: Optional[bool] = None
    is_question: Optional[bool] = None


@dataclass
class Token:
    """A single lexical unit (word, whitespace run or punctuation mark)."""

    text: str
    normalized: str
    pos: PartOfSpeech
    lemma: str
    index: int
    is_word: bool
    features: MorphologicalFeatures = field(default_factory=MorphologicalFeatures)

    def with_text(self, text: str) -> "Token":
        """Return a copy of the token carrying different raw text."""
        return replace(self, text=text)


@dataclass
class SentenceChunk:
    """A clause-sized piece of a longer sentence."""

    text: str
    tokens: List[Token] = field(default_factory=list)
    kind: str = "main"  # main, subordinate
    separator: str = ""  # whitespace that followed the chunk in the input
