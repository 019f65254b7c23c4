"""Model translation backends."""

from typing import Optional

from ...config import Config
from .base import TranslationBackend
from .deepl_client import DeepLBackend
from .openai_client import OpenAIBackend

__all__ = ["DeepLBackend", "OpenAIBackend", "TranslationBackend", "create_backend"]


def create_backend(config: Config, language_names: Optional[dict] = None) -> Optional[TranslationBackend]:
    """Build the backend selected by ``config.model_backend`` (None when disabled)."""
    if config.model_backend == "deepl":
        return DeepLBackend(api_key=config.deepl_api_key)
    if config.model_backend == "openai":
        return OpenAIBackend(
            api_key=config.openai_api_key,
            language_names=language_names,
            model=config.openai_model,
            temperature=config.openai_temperature,
        )
    return None
