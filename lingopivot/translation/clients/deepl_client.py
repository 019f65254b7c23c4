"""DeepL translation backend."""

import logging
from typing import Optional

import deepl

from ...config import config
from ...exceptions import BackendError

logger = logging.getLogger(__name__)


class DeepLBackend:
    """Model backend using the DeepL API."""

    name = "deepl"

    # NLLB code -> DeepL code
    LANGUAGE_MAP = {
        "eng_Latn": "EN-US",
        "deu_Latn": "DE",
        "fra_Latn": "FR",
        "ita_Latn": "IT",
        "spa_Latn": "ES",
        "ron_Latn": "RO",
        "por_Latn": "PT-BR",
        "nld_Latn": "NL",
        "pol_Latn": "PL",
        "rus_Cyrl": "RU",
        "ukr_Cyrl": "UK",
        "bul_Cyrl": "BG",
        "ces_Latn": "CS",
        "dan_Latn": "DA",
        "ell_Grek": "EL",
        "fin_Latn": "FI",
        "hun_Latn": "HU",
        "ind_Latn": "ID",
        "jpn_Jpan": "JA",
        "kor_Hang": "KO",
        "nob_Latn": "NB",
        "swe_Latn": "SV",
        "tur_Latn": "TR",
        "arb_Arab": "AR",
        "zho_Hans": "ZH",
    }

    # Source languages take the bare code (no regional variant)
    SOURCE_OVERRIDES = {"EN-US": "EN", "PT-BR": "PT"}

    def __init__(self, api_key: Optional[str] = None):
        """
        Initialize the DeepL backend.

        Args:
            api_key: DeepL API key. If not provided, uses DEEPL_API_KEY from environment.
        """
        self.api_key = api_key or config.deepl_api_key
        if not self.api_key:
            raise ValueError("DeepL API key is required")
        self.translator: Optional[deepl.Translator] = None

    def supports(self, code: str) -> bool:
        return code in self.LANGUAGE_MAP

    def load(self) -> None:
        """Create the SDK client and check the account is reachable."""
        if self.translator is None:
            self.translator = deepl.Translator(self.api_key)
        usage = self.translator.get_usage()
        if usage.character and usage.character.limit_reached:
            raise BackendError(self.name, "character quota exhausted")

    def translate(self, text: str, source_code: str, target_code: str) -> str:
        """
        Translate a single text.

        Args:
            text: Text to translate
            source_code: NLLB source code (e.g. "eng_Latn")
            target_code: NLLB target code (e.g. "deu_Latn")

        Returns:
            Translated text
        """
        target = self.LANGUAGE_MAP.get(target_code)
        if target is None:
            raise BackendError(self.name, f"unsupported target language {target_code}")
        if self.translator is None:
            self.load()

        kwargs = {
            "text": text,
            "target_lang": target,
            "preserve_formatting": True,
        }
        source = self.LANGUAGE_MAP.get(source_code)
        if source:
            kwargs["source_lang"] = self.SOURCE_OVERRIDES.get(source, source)

        try:
            result = self.translator.translate_text(**kwargs)
        except deepl.DeepLException as e:
            raise BackendError(self.name, str(e)) from e
        logger.debug("DeepL translated %d chars to %s", len(text), target)
        return result.text
