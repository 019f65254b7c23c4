from dataclasses import replace
from unittest.mock import AsyncMock, MagicMock

import pytest

from conftest import make_config
from lingopivot.exceptions import BackendError, BackendTimeoutError
from lingopivot.models.translation_result import (
    ChatPath,
    CorrectionType,
    TranslationDirection,
    TranslationMethod,
)
from lingopivot.translation.model_pipeline import ModelPipeline
from lingopivot.translation.profiles import InMemoryProfileStore
from lingopivot.translation.router import TranslationRouter


@pytest.mark.parametrize(
    "source, target, direction",
    [
        ("hindi", "Hindi", TranslationDirection.PASSTHROUGH),
        ("english", "hindi", TranslationDirection.ENGLISH_SOURCE),
        ("telugu", "en", TranslationDirection.ENGLISH_TARGET),
        ("spanish", "french", TranslationDirection.LATIN_TO_LATIN),
        ("spanish", "hindi", TranslationDirection.LATIN_TO_NATIVE),
        ("hindi", "spanish", TranslationDirection.NATIVE_TO_LATIN),
        ("hindi", "telugu", TranslationDirection.NATIVE_TO_NATIVE),
    ],
)
def test_classify(router, source, target, direction):
    assert router.classify(source, target) == direction


class TestEnglishSource:
    def test_idiom_with_question_mark(self, router):
        result = router.translate("How are you?", "english", "hindi")

        assert result.text == "आप कैसे हैं?"
        assert result.method == TranslationMethod.IDIOM_REPLACEMENT
        assert result.confidence == pytest.approx(0.95)
        assert result.idioms_found == ["how are you"]
        assert result.is_translated
        assert result.direction == TranslationDirection.ENGLISH_SOURCE
        assert any(c.type == CorrectionType.IDIOM for c in result.corrections)

    def test_idiom_to_latin_target(self, router):
        result = router.translate("kick the bucket", "english", "spanish")

        assert result.text == "estirar la pata"
        assert result.method == TranslationMethod.IDIOM_REPLACEMENT

    def test_word_by_word_with_reordering(self, router):
        result = router.translate("I love cats", "english", "hindi")

        assert result.text == "मैं बिल्लियाँ प्यार"
        assert result.was_reordered
        assert result.method == TranslationMethod.REORDERED
        assert result.confidence == pytest.approx(0.8)
        assert result.unknown_words == []
        assert any(c.type == CorrectionType.WORD_ORDER for c in result.corrections)

    def test_whole_phrase(self, router):
        result = router.translate("Hello", "english", "telugu")

        assert result.text == "నమస్కారం"
        assert result.method == TranslationMethod.PHRASE_MATCH
        assert result.confidence == pytest.approx(0.95)

    def test_whole_phrase_keeps_punctuation(self, router):
        assert router.translate("Thank you!", "english", "hindi").text == "धन्यवाद!"

    def test_latin_target_is_capitalized_like_the_source(self, router):
        assert router.translate("Hello", "english", "spanish").text == "Hola"
        assert router.translate("hello", "english", "spanish").text == "hola"

    def test_articles_dropped_for_languages_without_them(self, router):
        result = router.translate("the cat", "english", "hindi")

        assert result.text == "बिल्ली"
        assert result.method == TranslationMethod.MORPHOLOGY_ADJUSTED
        assert any(
            c.type == CorrectionType.MORPHOLOGY and c.original == "the" for c in result.corrections
        )

    def test_ambiguous_word_resolved_from_context(self, router):
        result = router.translate("I went to the bank to deposit money", "english", "spanish")

        assert "banco" in result.text
        assert result.was_disambiguated
        assert result.method == TranslationMethod.CONTEXT_DISAMBIGUATED
        assert any(c.type == CorrectionType.WORD_SENSE for c in result.corrections)

    def test_river_bank(self, router):
        result = router.translate("We sat on the bank of the river", "english", "hindi")
        assert "किनारा" in result.text

    def test_unknown_words_are_transliterated_for_native_targets(self, router):
        result = router.translate("xyzzy", "english", "hindi")

        assert result.unknown_words == ["xyzzy"]
        assert result.confidence == 0.0
        assert not result.is_translated
        assert result.is_transliterated
        assert not router.registry.is_latin_text(result.text)

    def test_unknown_words_stay_for_latin_targets(self, router):
        result = router.translate("xyzzy", "english", "spanish")

        assert result.text == "xyzzy"
        assert result.method == TranslationMethod.DICTIONARY_LOOKUP
        assert not result.success

    def test_multiple_sentences(self, router):
        result = router.translate("Hello. Thank you!", "english", "hindi")
        assert result.text == "नमस्ते. धन्यवाद!"

    def test_line_breaks_between_sentences_survive(self, router):
        result = router.translate("Hello.\nThank you!", "english", "hindi")
        assert result.text == "नमस्ते.\nधन्यवाद!"

    def test_long_sentences_are_not_reordered(self, registry):
        router = TranslationRouter(config=make_config(max_sentence_length=5), registry=registry)
        result = router.translate("I love cats", "english", "hindi")

        assert result.text == "मैं प्यार बिल्लियाँ"
        assert not result.was_reordered

    def test_stages_can_be_disabled(self, registry):
        router = TranslationRouter(
            config=make_config(enable_idioms=False, enable_reordering=False), registry=registry
        )
        result = router.translate("I love cats", "english", "hindi")

        assert result.text == "मैं प्यार बिल्लियाँ"
        assert router.translate("kick the bucket", "english", "spanish").idioms_found == []


class TestToEnglish:
    def test_reverse_word_order(self, router):
        result = router.translate("मैं बिल्लियाँ प्यार", "hindi", "english")

        assert result.text == "I love cats"
        assert result.was_reordered
        assert result.direction == TranslationDirection.ENGLISH_TARGET

    def test_whole_phrase_gets_sentence_case(self, router):
        result = router.translate("नमस्ते", "hindi", "english")

        assert result.text == "Hello"
        assert result.method == TranslationMethod.PHRASE_MATCH

    def test_unknown_native_words_are_romanized(self, router):
        result = router.translate("नमस्ते कखग", "hindi", "english")

        assert result.text == "Hello kakhaga"
        assert result.unknown_words == ["कखग"]
        assert result.is_translated

    def test_english_meaning(self, router):
        assert router.english_meaning("नमस्ते", "hindi") == "Hello"
        assert router.english_meaning("  hi there ", "english") == "hi there"
        assert router.english_meaning("", "hindi") == ""


class TestPivotAndDirect:
    def test_native_to_native_pivots_through_english(self, router):
        result = router.translate("नमस्ते", "hindi", "telugu")

        assert result.text == "నమస్కారం"
        assert result.english_pivot == "Hello"
        assert result.direction == TranslationDirection.NATIVE_TO_NATIVE
        assert result.confidence == pytest.approx(0.95 * 0.85)
        assert result.is_translated

    def test_latin_to_latin(self, router):
        result = router.translate("hola", "spanish", "french")

        assert result.text == "bonjour"
        assert result.english_pivot is None
        assert result.confidence == pytest.approx(0.95)

    def test_latin_to_native(self, router):
        assert router.translate("gato", "spanish", "hindi").text == "बिल्ली"

    def test_native_to_latin(self, router):
        result = router.translate("नमस्ते", "hindi", "spanish")

        assert result.text == "Hola"
        assert result.direction == TranslationDirection.NATIVE_TO_LATIN


class TestPassthrough:
    def test_same_language_is_verbatim(self, router):
        result = router.translate("Bagunnav?", "telugu", "te")

        assert result.text == "Bagunnav?"
        assert result.method == TranslationMethod.PASSTHROUGH
        assert result.confidence == 1.0
        assert not result.is_translated

    def test_same_language_script_normalization_is_opt_in(self, router):
        result = router.translate("namaste", "hindi", "hindi", normalize_script=True)

        assert result.text == "नमस्ते"
        assert result.is_transliterated
        assert result.method == TranslationMethod.PASSTHROUGH

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_input(self, router, text):
        result = router.translate(text, "english", "hindi")

        assert result.text == ""
        assert result.confidence == 1.0
        assert result.method == TranslationMethod.PASSTHROUGH


class TestCache:
    def test_second_call_is_served_from_cache(self, router):
        calls = []
        translate_uncached = router._translate_uncached

        def spy(*args):
            calls.append(args)
            return translate_uncached(*args)

        router._translate_uncached = spy

        first = router.translate("I love cats", "english", "hindi")
        second = router.translate("  I love cats  ", "english", "Hindi")

        assert len(calls) == 1
        assert not first.cached
        assert second.cached
        assert second.text == first.text
        assert router.cache_stats()["hits"] == 1

    def test_passthrough_and_untranslated_results_are_not_cached(self, router):
        router.translate("hello", "english", "english")
        router.translate("xyzzy", "english", "spanish")
        assert len(router.cache) == 0

    def test_clear_cache(self, router):
        router.translate("Hello", "english", "spanish")
        router.clear_cache()
        assert router.cache_stats()["size"] == 0

    def test_cache_stats_include_dictionary_sizes(self, router):
        stats = router.cache_stats()
        assert stats["phrases"] == len(router.phrases)
        assert stats["idioms"] == len(router.idioms)


class TestChat:
    def test_english_sender(self, router):
        views = router.translate_for_chat("How are you?", "english", "hindi")

        assert views.sender_view == "How are you?"
        assert views.english_core == "How are you?"
        assert views.receiver_view == "आप कैसे हैं?"
        assert views.path == ChatPath.ENGLISH_TO_NATIVE
        assert views.was_translated
        assert views.confidence == pytest.approx(0.95)

    def test_native_sender(self, router):
        views = router.translate_for_chat("नमस्ते", "hindi", "spanish")

        assert views.sender_view == "नमस्ते"
        assert views.english_core == "Hello"
        assert views.receiver_view == "Hola"
        assert views.path == ChatPath.NATIVE_TO_LATIN

    def test_english_receiver_gets_the_core(self, router):
        views = router.translate_for_chat("नमस्ते", "hindi", "english")

        assert views.receiver_view == "Hello"
        assert views.path == ChatPath.NATIVE_TO_ENGLISH

    def test_latin_typed_sender_sees_native_script(self, router):
        views = router.translate_for_chat("namaste", "hindi", "telugu")

        assert views.sender_view == "नमस्ते"
        assert views.english_core == "hello"
        assert views.receiver_view == "నమస్కారం"

    def test_english_typed_by_native_speaker(self, router):
        views = router.translate_for_chat("thank you", "hindi", "tamil")

        assert views.english_core == "thank you"
        assert views.sender_view == "धन्यवाद"
        assert views.receiver_view == "நன்றி"

    def test_same_language_receiver_sees_sender_view(self, router):
        views = router.translate_for_chat("namaste", "hindi", "hi")

        assert views.receiver_view == views.sender_view == "नमस्ते"
        assert views.path == ChatPath.NATIVE_TO_NATIVE

    def test_receiver_view_comes_from_english_core(self, config, registry):
        class LossyRouter(TranslationRouter):
            def translate(self, text, source, target, normalize_script=False):
                result = super().translate(text, source, target, normalize_script)
                if self.registry.normalize(target) == "hindi":
                    return replace(result, text="???")
                return result

        router = LossyRouter(config=config, registry=registry)
        views = router.translate_for_chat("thank you", "hindi", "tamil")

        assert views.sender_view == "???"
        assert views.receiver_view == "நன்றி"
        assert views.confidence == pytest.approx(0.95)

    def test_idiom_reaches_receiver(self, router):
        views = router.translate_for_chat("kick the bucket", "english", "spanish")

        assert views.sender_view == "kick the bucket"
        assert views.receiver_view == "estirar la pata"
        assert views.path == ChatPath.ENGLISH_TO_LATIN
        assert views.method == TranslationMethod.IDIOM_REPLACEMENT
        assert views.was_translated
        assert any(c.type == CorrectionType.IDIOM for c in views.corrections)

    def test_empty_message(self, router):
        views = router.translate_for_chat("  ", "hindi", "telugu")

        assert views.sender_view == views.receiver_view == views.english_core == ""
        assert views.confidence == 1.0

    async def test_async_chat_matches_sync(self, router):
        views = await router.translate_for_chat_async("नमस्ते", "hindi", "spanish")
        assert views.receiver_view == "Hola"

    async def test_translate_for_users(self, config, registry):
        store = InMemoryProfileStore({"asha": "hindi", "ravi": "telugu"})
        router = TranslationRouter(config=config, registry=registry, profile_store=store)

        views = await router.translate_for_users("How are you?", "sam", "asha")

        assert views.sender_language == "english"
        assert views.receiver_language == "hindi"
        assert views.receiver_view == "आप कैसे हैं?"

    async def test_translate_for_users_with_async_store(self, config, registry):
        class RemoteStore:
            async def get_user_language(self, user_id):
                return {"u1": "hindi", "u2": "telugu"}[user_id]

        router = TranslationRouter(config=config, registry=registry, profile_store=RemoteStore())
        views = await router.translate_for_users("नमस्ते", "u1", "u2")

        assert views.receiver_view == "నమస్కారం"


class TestModelFallback:
    @pytest.fixture
    def pipeline(self):
        pipeline = MagicMock(spec=ModelPipeline)
        pipeline.translate = AsyncMock(return_value="नकली अनुवाद")
        return pipeline

    async def test_low_confidence_uses_model(self, router, pipeline):
        router.model_pipeline = pipeline

        result = await router.translate_async("xyzzy plugh", "english", "hindi")

        pipeline.translate.assert_awaited_once_with("xyzzy plugh", "english", "hindi")
        assert result.text == "नकली अनुवाद"
        assert result.method == TranslationMethod.MODEL_FALLBACK
        assert result.confidence == pytest.approx(0.85)
        assert result.fallback_used

    async def test_confident_result_skips_model(self, router, pipeline):
        router.model_pipeline = pipeline

        result = await router.translate_async("How are you?", "english", "hindi")

        pipeline.translate.assert_not_awaited()
        assert result.text == "आप कैसे हैं?"

    async def test_model_error_keeps_dictionary_result(self, router, pipeline, caplog):
        pipeline.translate.side_effect = BackendError("fake", "boom")
        router.model_pipeline = pipeline

        result = await router.translate_async("xyzzy", "english", "spanish")

        assert result.text == "xyzzy"
        assert not result.fallback_used
        assert "boom" in result.error
        assert not result.success
        assert "Model fallback failed" in caplog.text

    async def test_empty_model_output_is_ignored(self, router, pipeline):
        pipeline.translate.return_value = "  "
        router.model_pipeline = pipeline

        result = await router.translate_async("xyzzy", "english", "spanish")
        assert result.method == TranslationMethod.DICTIONARY_LOOKUP
        assert result.error == "Model backend returned an empty translation"

    async def test_sync_result_does_not_hide_model(self, router, pipeline):
        router.model_pipeline = pipeline
        weak = router.translate("xyzzy plugh", "english", "hindi")
        assert weak.confidence == 0.0

        result = await router.translate_async("xyzzy plugh", "english", "hindi")

        assert result.method == TranslationMethod.MODEL_FALLBACK
        assert result.text == "नकली अनुवाद"
        assert not result.cached

        again = await router.translate_async("xyzzy plugh", "english", "hindi")
        assert again.cached
        assert again.text == "नकली अनुवाद"
        pipeline.translate.assert_awaited_once()

    async def test_model_is_retried_after_failure(self, router, pipeline):
        pipeline.translate.side_effect = [BackendTimeoutError("fake", 10.0), "नकली अनुवाद"]
        router.model_pipeline = pipeline

        first = await router.translate_async("xyzzy plugh", "english", "hindi")
        second = await router.translate_async("xyzzy plugh", "english", "hindi")

        assert first.method == TranslationMethod.DICTIONARY_LOOKUP
        assert "timed out" in first.error
        assert second.method == TranslationMethod.MODEL_FALLBACK
        assert second.error is None
        assert pipeline.translate.await_count == 2

    async def test_fallback_can_be_disabled(self, registry, pipeline):
        router = TranslationRouter(
            config=make_config(enable_model_fallback=False), registry=registry, model_pipeline=pipeline
        )
        await router.translate_async("xyzzy", "english", "spanish")
        pipeline.translate.assert_not_awaited()


async def test_initialize_loads_data_files(tmp_path, registry):
    phrases = tmp_path / "phrases.json"
    phrases.write_text('{"good luck": {"hindi": "शुभकामनाएँ"}}', encoding="utf-8")
    router = TranslationRouter(config=make_config(phrases_path=str(phrases)), registry=registry)

    loaded = await router.initialize()

    assert loaded["phrases"] == 1
    assert router.translate("Good luck", "english", "hindi").text == "शुभकामनाएँ"
