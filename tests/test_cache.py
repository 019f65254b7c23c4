import pytest

from lingopivot.models.translation_result import TranslationMethod, TranslationResult
from lingopivot.translation.cache import TranslationCache, cache_key
from lingopivot.translation.confidence import ConfidenceScorer


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_result(text="hola"):
    return TranslationResult(
        text=text,
        original_text="hello",
        source_language="english",
        target_language="spanish",
        method=TranslationMethod.PHRASE_MATCH,
        confidence=0.95,
        is_translated=True,
    )


@pytest.fixture
def clock():
    return FakeClock()


def test_get_after_set(clock):
    cache = TranslationCache(clock=clock)
    result = make_result()
    cache.set("hello", "english", "spanish", result)

    assert cache.get("hello", "english", "spanish") is result
    assert cache.get("hello", "english", "french") is None
    assert cache.get("Hello", "english", "spanish") is None


def test_entries_expire_after_ttl(clock):
    cache = TranslationCache(ttl=300, clock=clock)
    cache.set("hello", "english", "spanish", make_result())

    clock.now = 300.0
    assert cache.get("hello", "english", "spanish") is not None

    clock.now = 300.5
    assert cache.get("hello", "english", "spanish") is None
    assert len(cache) == 0


def test_oldest_entry_is_evicted_when_full(clock):
    cache = TranslationCache(max_size=2, clock=clock)
    cache.set("one", "english", "spanish", make_result("uno"))
    cache.set("two", "english", "spanish", make_result("dos"))
    cache.set("three", "english", "spanish", make_result("tres"))

    assert len(cache) == 2
    assert cache.get("one", "english", "spanish") is None
    assert cache.get("three", "english", "spanish").text == "tres"
    assert cache.stats()["evictions"] == 1


def test_stats_and_clear(clock):
    cache = TranslationCache(max_size=10, ttl=60, clock=clock)
    cache.set("hello", "english", "spanish", make_result())
    cache.get("hello", "english", "spanish")
    cache.get("bye", "english", "spanish")

    stats = cache.stats()
    assert stats["size"] == 1
    assert stats["max_size"] == 10
    assert stats["ttl_seconds"] == 60
    assert stats["hits"] == 1
    assert stats["misses"] == 1
    assert stats["hit_rate"] == 0.5

    cache.clear()
    assert len(cache) == 0


def test_cache_key_separates_language_pairs():
    assert cache_key("hi", "english", "hindi") != cache_key("hi", "hindi", "english")
    assert cache_key("hi", "english", "hindi") == cache_key("hi", "english", "hindi")


@pytest.mark.parametrize(
    "translated, total, idioms, expected",
    [
        (0, 3, 0, 0.0),
        (3, 0, 0, 0.0),
        (3, 3, 0, 0.8),
        (1, 2, 0, 0.4),
        (1, 4, 1, 0.5),
        (3, 3, 1, 0.95),
    ],
)
def test_word_by_word_confidence(translated, total, idioms, expected):
    assert ConfidenceScorer().word_by_word(translated, total, idioms=idioms) == pytest.approx(expected)


def test_pivot_applies_factor_once_to_weaker_leg():
    scorer = ConfidenceScorer()
    assert scorer.pivot(0.95, 0.8) == pytest.approx(0.68)
    assert scorer.pivot(0.8, 0.95) == pytest.approx(0.68)
    assert scorer.pivot(0.95, 0.95) < scorer.phrase_match()


def test_fixed_scores():
    scorer = ConfidenceScorer()
    assert scorer.passthrough() == 1.0
    assert scorer.phrase_match() == 0.95
    assert scorer.model() == 0.85
