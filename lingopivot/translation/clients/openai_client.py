"""OpenAI chat-model translation backend."""

import logging
from typing import Dict, Optional

import openai
from openai import OpenAI

from ...config import config
from ...exceptions import BackendError

logger = logging.getLogger(__name__)


class OpenAIBackend:
    """Model backend using OpenAI chat completions."""

    name = "openai"

    def __init__(
        self,
        api_key: Optional[str] = None,
        language_names: Optional[Dict[str, str]] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ):
        """
        Initialize the OpenAI backend.

        Args:
            api_key: OpenAI API key. If not provided, uses OPENAI_API_KEY from environment.
            language_names: NLLB code -> language name used in prompts
            model: Chat model name (defaults to config.openai_model)
            temperature: Sampling temperature (defaults to config.openai_temperature)
        """
        self.api_key = api_key or config.openai_api_key
        if not self.api_key:
            raise ValueError("OpenAI API key is required")
        self.language_names = language_names or {}
        self.client: Optional[OpenAI] = None
        self.model = model or config.openai_model
        self.temperature = config.openai_temperature if temperature is None else temperature

    def load(self) -> None:
        if self.client is None:
            self.client = OpenAI(api_key=self.api_key)

    def translate(self, text: str, source_code: str, target_code: str) -> str:
        """
        Translate text with a chat model.

        Args:
            text: Text to translate
            source_code: NLLB source code (e.g. "hin_Deva")
            target_code: NLLB target code (e.g. "tel_Telu")

        Returns:
            Translated text
        """
        if self.client is None:
            self.load()

        source_name = self._language_name(source_code)
        target_name = self._language_name(target_code)

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": self._build_system_prompt(target_name)},
                    {"role": "user", "content": f"Translate from {source_name} to {target_name}:\n{text}"},
                ],
                temperature=self.temperature,
                max_completion_tokens=500,
            )
        except openai.OpenAIError as e:
            raise BackendError(self.name, str(e)) from e

        result = (response.choices[0].message.content or "").strip()
        result = self._clean_response(result)
        if not result or result == "[UNABLE]":
            raise BackendError(self.name, f"no translation returned for {target_code}")
        return result

    def _language_name(self, code: str) -> str:
        return self.language_names.get(code, code)

    def _build_system_prompt(self, target_name: str) -> str:
        return f"""You are a translator for a multilingual chat app.

RULES:
1. Translate the meaning, not word for word. Idioms become natural {target_name} expressions.
2. Write {target_name} in its native script.
3. Keep the tone of the message (casual stays casual).
4. Preserve emojis, names and numbers exactly.
5. Respond with ONLY the translated text. No quotes, notes or prefixes.
6. If translation is impossible, respond with: [UNABLE]"""

    def _clean_response(self, response: str) -> str:
        """Clean up common chat-model formatting issues."""
        if (response.startswith('"') and response.endswith('"')) or (
            response.startswith("'") and response.endswith("'")
        ):
            response = response[1:-1]

        for prefix in ("Translation:", "Translated:", "Here is the translation:"):
            if response.lower().startswith(prefix.lower()):
                response = response[len(prefix):].strip()

        return response
