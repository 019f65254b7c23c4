"""Latin <-> native script transliteration."""

import logging
from functools import lru_cache
from typing import Dict, Optional, Tuple

from ..languages.registry import LanguageRegistry
from .script_blocks import SCRIPT_BLOCKS, ScriptBlock

logger = logging.getLogger(__name__)

MAX_CHUNK = 4
INHERENT_VOWEL = "a"


def _inverse(mapping: Dict[str, str]) -> Dict[str, str]:
    """Invert a Latin -> native map; the first Latin key registered wins."""
    inverse: Dict[str, str] = {}
    for latin, native in mapping.items():
        if len(native) == 1:
            inverse.setdefault(native, latin)
    return inverse


@lru_cache(maxsize=None)
def _reverse_maps(block: ScriptBlock) -> Tuple[Dict[str, str], Dict[str, str], Dict[str, str]]:
    return _inverse(block.consonants), _inverse(block.vowels), _inverse(block.modifiers)


class Transliterator:
    """
    Converts keyboard-style Latin input to a native script and back.

    The forward direction is a greedy longest-match scan over the script's
    consonant and vowel tables. Brahmic scripts get the inherent vowel and
    virama conjunct rules; other scripts map letter by letter.
    """

    def __init__(self, registry: Optional[LanguageRegistry] = None):
        self.registry = registry or LanguageRegistry()

    def script_block(self, language: str) -> Optional[ScriptBlock]:
        """Get the script block for a language, or None if it has none."""
        profile = self.registry.get_profile(language)
        if profile.is_latin:
            return None
        return SCRIPT_BLOCKS.get(profile.script.lower())

    def has_transliteration(self, language: str) -> bool:
        return self.script_block(language) is not None

    def to_native(self, text: str, language: str) -> str:
        """
        Transliterate Latin text into the native script of a language.

        Args:
            text: Latin-script input (e.g. "namaste")
            language: Target language identifier

        Returns:
            Native-script text, or the input unchanged when the language has
            no script block or the text is not Latin.
        """
        if not text or not text.strip():
            return text
        block = self.script_block(language)
        if block is None or not self.registry.is_latin_text(text):
            return text

        signs = set(block.modifiers.values())
        output = []
        bare_consonant = False
        i = 0
        while i < len(text):
            char = text[i]
            if char.isspace() or char.isdigit():
                output.append(char)
                bare_consonant = False
                i += 1
                continue

            word_start = i == 0 or not text[i - 1].isalpha()
            consonant = self._longest_match(text, i, block.consonants, word_start)
            vowel = self._longest_match(text, i, block.vowels, word_start)
            # Consonants win ties; a strictly longer vowel match wins otherwise
            if consonant and (not vowel or consonant[1] >= vowel[1]):
                native, length = consonant
                is_sign = native in signs
                if bare_consonant and block.is_brahmic and not is_sign:
                    output.append(block.virama)
                output.append(native)
                i += length
                bare_consonant = block.is_brahmic and not is_sign
                if bare_consonant:
                    consumed = self._attach_vowel(text, i, block, output)
                    if consumed:
                        i += consumed
                        bare_consonant = False
                continue

            if vowel:
                native, length = vowel
                output.append(native)
                i += length
            else:
                output.append(char)
                i += 1
            bare_consonant = False

        return "".join(output)

    def to_latin(self, text: str, language: str) -> str:
        """
        Transliterate native-script text back to Latin.

        Args:
            text: Native-script input
            language: Source language identifier

        Returns:
            Latin text, or the input unchanged when it is already Latin or
            the language has no script block.
        """
        if not text or not text.strip():
            return text
        block = self.script_block(language)
        if block is None or self.registry.is_latin_text(text):
            return text

        consonants, vowels, modifiers = _reverse_maps(block)
        signs = set(block.modifiers.values())
        output = []
        for index, char in enumerate(text):
            if char == block.virama:
                continue
            if char in consonants:
                output.append(consonants[char])
                if block.is_brahmic and char not in signs:
                    following = text[index + 1] if index + 1 < len(text) else ""
                    if following != block.virama and following not in modifiers:
                        output.append(INHERENT_VOWEL)
            elif char in vowels:
                output.append(vowels[char])
            elif char in modifiers:
                output.append(modifiers[char])
            else:
                output.append(char)
        return "".join(output)

    def live_preview(self, text: str, language: str) -> str:
        """Preview of what the user is typing, rendered in the target script."""
        if not text or not text.strip():
            return ""
        return self.to_native(text, language)

    @staticmethod
    def _longest_match(
        text: str, start: int, table: Dict[str, str], word_start: bool = False
    ) -> Optional[Tuple[str, int]]:
        """Find the longest table key at ``start`` (4 chars down to 1).

        Keys are case-sensitive; a lowercase retry lets capitalized words
        ("Bagunnav") match. A lone capital that starts a word ("Harry",
        "Namaste") is read as its lowercase letter.
        """
        for length in range(MAX_CHUNK, 0, -1):
            chunk = text[start:start + length]
            if len(chunk) < length:
                continue
            if length == 1 and word_start and chunk.isupper() and chunk.lower() in table:
                return table[chunk.lower()], length
            if chunk in table:
                return table[chunk], length
            if chunk.lower() in table:
                return table[chunk.lower()], length
        return None

    @staticmethod
    def _attach_vowel(text: str, start: int, block: ScriptBlock, output: list) -> int:
        """Attach the vowel sign following a consonant; return chars consumed."""
        for length in (2, 1):
            chunk = text[start:start + length]
            if len(chunk) < length:
                continue
            if chunk in block.modifiers:
                output.append(block.modifiers[chunk])
                return length
            if length == 1 and chunk == INHERENT_VOWEL:
                return 1
        return 0
