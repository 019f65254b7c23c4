"""Configuration management for the translation pipeline."""

import os
from dataclasses import dataclass, field
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()

MODEL_BACKENDS = ("none", "deepl", "openai")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_path(name: str) -> Optional[str]:
    return os.getenv(name) or None


@dataclass
class Config:
    """Application configuration."""

    # API Keys
    deepl_api_key: str = field(default_factory=lambda: os.getenv("DEEPL_API_KEY", ""))
    openai_api_key: str = field(default_factory=lambda: os.getenv("OPENAI_API_KEY", ""))

    # Cache settings
    cache_ttl_seconds: float = field(
        default_factory=lambda: float(os.getenv("LINGOPIVOT_CACHE_TTL", "300"))
    )
    cache_size: int = field(
        default_factory=lambda: int(os.getenv("LINGOPIVOT_CACHE_SIZE", "10000"))
    )

    # Translation settings
    fallback_confidence_threshold: float = field(
        default_factory=lambda: float(os.getenv("LINGOPIVOT_FALLBACK_THRESHOLD", "0.4"))
    )
    max_sentence_length: int = field(
        default_factory=lambda: int(os.getenv("LINGOPIVOT_MAX_SENTENCE_LENGTH", "500"))
    )

    # Model backend settings
    model_backend: str = field(
        default_factory=lambda: os.getenv("LINGOPIVOT_MODEL_BACKEND", "none").lower()
    )
    model_timeout_seconds: float = field(
        default_factory=lambda: float(os.getenv("LINGOPIVOT_MODEL_TIMEOUT", "10"))
    )
    model_queue_size: int = field(
        default_factory=lambda: int(os.getenv("LINGOPIVOT_MODEL_QUEUE_SIZE", "100"))
    )
    model_queue_expiry_seconds: float = field(
        default_factory=lambda: float(os.getenv("LINGOPIVOT_MODEL_QUEUE_EXPIRY", "30"))
    )

    # OpenAI model settings
    openai_model: str = "gpt-5-mini-2025-08-07"
    openai_temperature: float = 0.3

    # External data files (JSON)
    idioms_path: Optional[str] = field(default_factory=lambda: _env_path("LINGOPIVOT_IDIOMS_PATH"))
    grammar_path: Optional[str] = field(default_factory=lambda: _env_path("LINGOPIVOT_GRAMMAR_PATH"))
    phrases_path: Optional[str] = field(default_factory=lambda: _env_path("LINGOPIVOT_PHRASES_PATH"))

    log_level: str = field(default_factory=lambda: os.getenv("LINGOPIVOT_LOG_LEVEL", "WARNING"))

    # Pipeline stage toggles
    enable_idioms: bool = field(default_factory=lambda: _env_bool("LINGOPIVOT_ENABLE_IDIOMS", True))
    enable_disambiguation: bool = field(
        default_factory=lambda: _env_bool("LINGOPIVOT_ENABLE_DISAMBIGUATION", True)
    )
    enable_morphology: bool = field(
        default_factory=lambda: _env_bool("LINGOPIVOT_ENABLE_MORPHOLOGY", True)
    )
    enable_reordering: bool = field(
        default_factory=lambda: _env_bool("LINGOPIVOT_ENABLE_REORDERING", True)
    )
    enable_post_processing: bool = field(
        default_factory=lambda: _env_bool("LINGOPIVOT_ENABLE_POST_PROCESSING", True)
    )
    enable_model_fallback: bool = field(
        default_factory=lambda: _env_bool("LINGOPIVOT_ENABLE_MODEL_FALLBACK", True)
    )

    @property
    def model_enabled(self) -> bool:
        return self.enable_model_fallback and self.model_backend != "none"

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if self.model_backend not in MODEL_BACKENDS:
            errors.append(
                f"LINGOPIVOT_MODEL_BACKEND must be one of {', '.join(MODEL_BACKENDS)}"
            )
        if self.model_backend == "deepl" and not self.deepl_api_key:
            errors.append("DEEPL_API_KEY is not set")
        if self.model_backend == "openai" and not self.openai_api_key:
            errors.append("OPENAI_API_KEY is not set")
        if not 0.0 <= self.fallback_confidence_threshold <= 1.0:
            errors.append("LINGOPIVOT_FALLBACK_THRESHOLD must be between 0 and 1")
        if self.cache_size < 1:
            errors.append("LINGOPIVOT_CACHE_SIZE must be positive")
        return errors


# Global config instance
config = Config()
