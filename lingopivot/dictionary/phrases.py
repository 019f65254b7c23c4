"""English phrase and word dictionary with reverse (native -> English) lookup."""

import logging
import unicodedata
from typing import Dict, List, Optional

from ..analysis import morphology
from .phrase_data import builtin_phrases

logger = logging.getLogger(__name__)


def normalize_key(text: str) -> str:
    """Lowercase, drop punctuation and collapse whitespace."""
    stripped = "".join(
        " " if unicodedata.category(char).startswith("P") and char not in "'-" else char
        for char in (text or "").lower()
    )
    return " ".join(stripped.split())


class PhraseDictionary:
    """
    Translations of common English phrases and words.

    Keys are matched punctuation-insensitively, so "Thank you!" finds
    "thank you". A reverse index per language maps native phrases back to
    English; when several English entries share a translation the first
    one added wins.
    """

    def __init__(self, phrases: Optional[Dict[str, Dict[str, str]]] = None):
        self._phrases: Dict[str, Dict[str, str]] = {}
        self._reverse: Dict[str, Dict[str, str]] = {}
        for english, translations in (builtin_phrases() if phrases is None else phrases).items():
            self.add(english, translations)

    def __len__(self) -> int:
        return len(self._phrases)

    def __contains__(self, english: str) -> bool:
        return normalize_key(english) in self._phrases

    def add(self, english: str, translations: Dict[str, str]) -> None:
        """Add translations for an English phrase, merging with existing ones."""
        key = normalize_key(english)
        if not key:
            return
        entry = self._phrases.setdefault(key, {})
        for language, translation in translations.items():
            if not translation or not translation.strip():
                continue
            language = language.lower()
            entry[language] = translation
            self._reverse.setdefault(language, {}).setdefault(normalize_key(translation), key)

    def languages(self) -> List[str]:
        return sorted(self._reverse)

    def lookup(self, text: str, language: str) -> Optional[str]:
        """Exact (normalized) match of a whole phrase."""
        entry = self._phrases.get(normalize_key(text))
        if not entry:
            return None
        return entry.get(language.lower())

    def lookup_word(self, word: str, language: str) -> Optional[str]:
        """Look up a single word, falling back to its lemma."""
        translation = self.lookup(word, language)
        if translation:
            return translation
        lemma = morphology.lemmatize(word)
        if lemma != word.lower():
            return self.lookup(lemma, language)
        return None

    def reverse_lookup(self, text: str, language: str) -> Optional[str]:
        """Find the English phrase for a translation in the given language."""
        return self._reverse.get(language.lower(), {}).get(normalize_key(text))
