"""Idiom lookup and in-text replacement."""

import logging
import re
from typing import Dict, Iterable, List, Optional

from ..models.idiom_entry import IdiomEntry, IdiomMatch, IdiomReplacement, normalize_phrase
from .idiom_data import IDIOMS

logger = logging.getLogger(__name__)


class IdiomDictionary:
    """
    Fixed English expressions and their per-language equivalents.

    Idioms are found case-insensitively on word boundaries. When idioms
    overlap, the longer one wins, so "raining cats and dogs" is never
    split by a shorter entry.
    """

    def __init__(self, entries: Optional[Iterable[IdiomEntry]] = None):
        self._entries: Dict[str, IdiomEntry] = {}
        self._patterns: Dict[str, re.Pattern] = {}
        for entry in IDIOMS if entries is None else entries:
            self.add(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, phrase: str) -> bool:
        return normalize_phrase(phrase) in self._entries

    def add(self, entry: IdiomEntry) -> None:
        """Add or replace an idiom."""
        key = entry.normalized_phrase
        self._entries[key] = entry
        words = (re.escape(word) for word in key.split())
        self._patterns[key] = re.compile(r"\b" + r"\s+".join(words) + r"\b", re.IGNORECASE)

    def entries(self) -> List[IdiomEntry]:
        return list(self._entries.values())

    def lookup(self, phrase: str) -> Optional[IdiomEntry]:
        return self._entries.get(normalize_phrase(phrase))

    def translation_for(self, phrase: str, language: str) -> Optional[str]:
        entry = self.lookup(phrase)
        if entry is None:
            return None
        return entry.translation_for(language)

    def for_language(self, language: str) -> List[IdiomEntry]:
        """Get every idiom with an equivalent in the given language."""
        return [entry for entry in self._entries.values() if entry.translation_for(language)]

    def find_all(self, text: str) -> List[IdiomMatch]:
        """
        Locate idioms in a text.

        Args:
            text: Text to scan

        Returns:
            Non-overlapping matches sorted by position
        """
        if not text:
            return []

        candidates: List[IdiomMatch] = []
        # Longest phrases claim their span first
        for key in sorted(self._entries, key=len, reverse=True):
            for found in self._patterns[key].finditer(text):
                candidates.append(IdiomMatch(
                    phrase=found.group(0),
                    entry=self._entries[key],
                    start=found.start(),
                    end=found.end(),
                ))

        matches: List[IdiomMatch] = []
        for candidate in candidates:
            if any(candidate.start < kept.end and kept.start < candidate.end for kept in matches):
                continue
            matches.append(candidate)
        return sorted(matches, key=lambda match: match.start)

    def replace_all(self, text: str, language: str) -> IdiomReplacement:
        """
        Replace every idiom that has an equivalent in the target language.

        Idioms without an equivalent are left untouched.
        """
        replacements: List[str] = []
        result = text
        for match in reversed(self.find_all(text)):
            translation = match.entry.translation_for(language)
            if not translation:
                continue
            result = result[:match.start] + translation + result[match.end:]
            replacements.append(f'"{match.entry.phrase}" → "{translation}"')

        replacements.reverse()
        if replacements:
            logger.debug("Replaced %d idiom(s) for %s", len(replacements), language)
        return IdiomReplacement(text=result, replacements=replacements)
