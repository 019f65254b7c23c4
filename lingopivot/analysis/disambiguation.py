"""Context-based word sense disambiguation."""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..dictionary.sense_data import AMBIGUOUS_WORDS, DOMAIN_KEYWORDS
from ..models.idiom_entry import WordSense

logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE = 0.5
MAX_CONFIDENCE = 0.95
DOMAIN_BONUS = 2

_WORD = re.compile(r"[^\W\d_]+")


@dataclass
class DisambiguationContext:
    """What the disambiguator can see around an ambiguous word."""

    surrounding_words: List[str] = field(default_factory=list)
    sentence: str = ""
    previous_sentence: str = ""
    domain: Optional[str] = None  # sports, finance, casual


@dataclass
class Disambiguation:
    sense: WordSense
    confidence: float


class WordSenseDisambiguator:
    """
    Picks the most likely sense of an ambiguous English word.

    Each sense scores one point per context clue found among the
    surrounding words and sentence, plus a bonus when the conversation
    domain matches the sense. The first registered sense is the default.
    """

    def __init__(self, senses: Optional[Dict[str, List[WordSense]]] = None):
        self._senses: Dict[str, List[WordSense]] = {
            word.lower(): list(entries)
            for word, entries in (senses if senses is not None else AMBIGUOUS_WORDS).items()
        }

    def is_ambiguous(self, word: str) -> bool:
        return word.lower() in self._senses

    def get_senses(self, word: str) -> List[WordSense]:
        return list(self._senses.get(word.lower(), []))

    def ambiguous_words(self) -> List[str]:
        return list(self._senses)

    def add(self, word: str, senses: List[WordSense]) -> None:
        self._senses[word.lower()] = list(senses)

    def disambiguate(self, word: str, context: DisambiguationContext) -> Optional[Disambiguation]:
        """
        Choose a sense for a word given its context.

        Args:
            word: The ambiguous word
            context: Surrounding words, sentence and optional domain

        Returns:
            The chosen sense with a confidence, or None if the word is not ambiguous
        """
        senses = self._senses.get(word.lower())
        if not senses:
            return None

        context_text = " ".join(
            [*context.surrounding_words, context.sentence, context.previous_sentence]
        ).lower()
        context_words = set(_WORD.findall(context_text))
        domain_keywords = set(DOMAIN_KEYWORDS.get((context.domain or "").lower(), ()))

        scores = []
        for sense in senses:
            score = sum(1 for clue in sense.context_clues if _clue_present(clue, context_words, context_text))
            if domain_keywords and domain_keywords.intersection(sense.context_clues):
                score += DOMAIN_BONUS
            scores.append(score)

        best = max(scores)
        if best == 0 or scores.count(best) > 1:
            logger.debug("No decisive context for %r, using default sense", word)
            return Disambiguation(sense=senses[0], confidence=DEFAULT_CONFIDENCE)

        sense = senses[scores.index(best)]
        confidence = min(MAX_CONFIDENCE, DEFAULT_CONFIDENCE + 0.1 * best)
        logger.debug("Resolved %r as %s (score %d)", word, sense.id, best)
        return Disambiguation(sense=sense, confidence=round(confidence, 4))

    @staticmethod
    def translate_sense(sense: WordSense, language: str) -> Optional[str]:
        return sense.translations.get(language.lower()) or None

    def disambiguate_and_translate(
        self, word: str, context: DisambiguationContext, language: str
    ) -> Optional[Disambiguation]:
        """Disambiguate a word and return the result only if the sense has a translation."""
        result = self.disambiguate(word, context)
        if result is None or self.translate_sense(result.sense, language) is None:
            return None
        return result


def _clue_present(clue: str, context_words: set, context_text: str) -> bool:
    if " " in clue:
        return re.search(rf"\b{re.escape(clue)}\b", context_text) is not None
    return clue in context_words
