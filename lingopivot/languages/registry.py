"""Language registry: canonical names, aliases, grammar profiles and script detection."""

import logging
from typing import Dict, Iterable, List, Optional

from ..models.language_profile import LATIN_SCRIPT, LanguageProfile, ScriptDetection
from .language_data import LANGUAGE_ALIASES, LANGUAGES, LATIN_RANGES, NLLB_CODES, UNICODE_BLOCKS

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "english"
LATIN_TEXT_RATIO = 0.7


def _in_ranges(code_point: int, ranges) -> bool:
    return any(first <= code_point <= last for first, last in ranges)


class LanguageRegistry:
    """
    Lookup table for every supported language.

    Identifiers may be canonical names ("hindi"), ISO codes ("hi"),
    aliases ("hindustani") or ASCII native names. Unknown identifiers are
    never an error: they normalize to themselves and get a default
    Latin/SVO profile.
    """

    def __init__(
        self,
        profiles: Optional[Iterable[LanguageProfile]] = None,
        aliases: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize the registry.

        Args:
            profiles: Extra profiles registered after the built-in table
            aliases: Extra alias -> canonical name mappings
        """
        self._by_name: Dict[str, LanguageProfile] = {}
        self._lookup: Dict[str, str] = {}

        for profile in LANGUAGES:
            self.register(profile)
        for profile in profiles or ():
            self.register(profile)

        for alias, name in LANGUAGE_ALIASES.items():
            self._lookup.setdefault(alias, name)
        for alias, name in (aliases or {}).items():
            self._lookup[alias.strip().lower()] = name.strip().lower()

    def register(self, profile: LanguageProfile) -> None:
        """Add or replace a language profile."""
        name = profile.name.lower()
        self._by_name[name] = profile
        self._lookup[name] = name
        self._lookup.setdefault(profile.code.lower(), name)
        native = profile.native_name.lower()
        if native.isascii():
            self._lookup.setdefault(native, name)

    def normalize(self, identifier: Optional[str]) -> str:
        """Resolve any identifier to its canonical lowercase name."""
        if not identifier or not identifier.strip():
            return DEFAULT_LANGUAGE
        key = " ".join(identifier.strip().lower().split())
        return self._lookup.get(key, key)

    def get_profile(self, identifier: Optional[str]) -> LanguageProfile:
        """Get the profile for a language, synthesizing one if unknown."""
        name = self.normalize(identifier)
        profile = self._by_name.get(name)
        if profile is None:
            logger.debug("No profile for %r, using defaults", name)
            profile = LanguageProfile(name=name, code=name, native_name=name)
        return profile

    def is_supported(self, identifier: Optional[str]) -> bool:
        return self.normalize(identifier) in self._by_name

    def is_same_language(self, a: Optional[str], b: Optional[str]) -> bool:
        return self.normalize(a) == self.normalize(b)

    def is_english(self, identifier: Optional[str]) -> bool:
        return self.normalize(identifier) == "english"

    def is_latin_script(self, identifier: Optional[str]) -> bool:
        """Check if a language is natively written in Latin script."""
        return self.get_profile(identifier).is_latin

    def is_rtl(self, identifier: Optional[str]) -> bool:
        return self.get_profile(identifier).rtl

    def supported_languages(self) -> List[str]:
        """Get all canonical language names, sorted."""
        return sorted(self._by_name)

    def profiles(self) -> List[LanguageProfile]:
        return [self._by_name[name] for name in self.supported_languages()]

    def model_code(self, identifier: Optional[str]) -> str:
        """Get the script-qualified code model backends expect (e.g. ``hin_Deva``)."""
        name = self.normalize(identifier)
        code = NLLB_CODES.get(name)
        if code:
            return code
        return f"{self.get_profile(name).code}_Latn"

    def detect_script(self, text: str) -> ScriptDetection:
        """
        Detect the writing system of a text.

        Scans the text character by character and returns the first
        Unicode block any character falls into. Text with no native-script
        characters is reported as Latin/English.
        """
        for char in text or "":
            code_point = ord(char)
            if code_point < 0x0370:
                continue
            for script, language, ranges in UNICODE_BLOCKS:
                if _in_ranges(code_point, ranges):
                    return ScriptDetection(
                        script=script, language=language, is_latin=False, confidence=0.95
                    )
        return ScriptDetection(
            script=LATIN_SCRIPT, language=DEFAULT_LANGUAGE, is_latin=True, confidence=0.6
        )

    def is_latin_text(self, text: str) -> bool:
        """Check if more than 70% of the letters in a text are Latin."""
        letters = [char for char in text or "" if char.isalpha()]
        if not letters:
            return True
        latin = sum(1 for char in letters if _in_ranges(ord(char), LATIN_RANGES))
        return latin / len(letters) > LATIN_TEXT_RATIO
