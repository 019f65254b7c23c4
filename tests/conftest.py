import logging
import threading
import time

import pytest

from lingopivot.config import Config
from lingopivot.languages.registry import LanguageRegistry
from lingopivot.translation.router import TranslationRouter
from lingopivot.transliteration.transliterator import Transliterator


def make_config(**overrides) -> Config:
    """Config that ignores the developer's environment."""
    settings = dict(
        model_backend="none",
        idioms_path=None,
        grammar_path=None,
        phrases_path=None,
        cache_size=100,
        cache_ttl_seconds=300.0,
        fallback_confidence_threshold=0.4,
        max_sentence_length=500,
        enable_idioms=True,
        enable_disambiguation=True,
        enable_morphology=True,
        enable_reordering=True,
        enable_post_processing=True,
        enable_model_fallback=True,
    )
    settings.update(overrides)
    return Config(**settings)


class FakeBackend:
    """Backend double that records calls and can be slowed down or made to fail."""

    name = "fake"

    def __init__(self, reply="translated", load_delay=0.0, translate_delay=0.0, load_failures=0):
        self.reply = reply
        self.load_delay = load_delay
        self.translate_delay = translate_delay
        self.load_failures = load_failures
        self.load_calls = 0
        self.calls = []
        self._lock = threading.Lock()

    def load(self) -> None:
        with self._lock:
            self.load_calls += 1
            failing = self.load_calls <= self.load_failures
        time.sleep(self.load_delay)
        if failing:
            raise RuntimeError("model files missing")

    def translate(self, text, source_code, target_code):
        time.sleep(self.translate_delay)
        self.calls.append((text, source_code, target_code))
        return self.reply


@pytest.fixture(autouse=True)
def package_logger():
    """Undo configure_logging so caplog sees package records."""
    logger = logging.getLogger("lingopivot")
    yield logger
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def config():
    return make_config()


@pytest.fixture
def registry():
    return LanguageRegistry()


@pytest.fixture
def transliterator(registry):
    return Transliterator(registry)


@pytest.fixture
def router(config, registry):
    return TranslationRouter(config=config, registry=registry)
