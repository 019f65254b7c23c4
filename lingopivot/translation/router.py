"""Translation router: picks a strategy per language pair and runs the dictionary pipeline."""

import inspect
import logging
import re
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Set, Tuple

from ..analysis import morphology
from ..analysis.disambiguation import DisambiguationContext, WordSenseDisambiguator
from ..analysis.reordering import SentenceReorderer
from ..config import Config, config as default_config
from ..dictionary.idioms import IdiomDictionary
from ..dictionary.loader import DataLoader
from ..dictionary.phrases import PhraseDictionary
from ..exceptions import LingoPivotError
from ..languages.registry import LanguageRegistry
from ..models.token import PartOfSpeech, Tense, Token
from ..models.translation_result import (
    ChatMessageViews,
    ChatPath,
    Correction,
    CorrectionType,
    TranslationDirection,
    TranslationMethod,
    TranslationResult,
)
from ..transliteration.transliterator import Transliterator
from .cache import TranslationCache
from .confidence import ConfidenceScorer
from .model_pipeline import ModelPipeline
from .profiles import InMemoryProfileStore, ProfileStore

logger = logging.getLogger(__name__)

ENGLISH = "english"
ARTICLES = ("a", "an", "the")
THIRD_PERSON = ("he", "she", "it")
MODALS = ("can", "could", "may", "might", "must", "shall", "should", "will", "would")
CONTEXT_WINDOW = 5
PHRASE_SPANS = (3, 2)

_DOUBLE_SPACE = re.compile(r"[^\S\n]{2,}")
_SPACE_BEFORE_PUNCT = re.compile(r"[^\S\n]+([.,!?;:।؟。！？])")
_REPEATED_END = re.compile(r"([!?؟！？।])[!?؟！？।]+")
_MISSING_SPACE = re.compile(r"([,;:])([A-Za-z])")
_SENTENCE_START = re.compile(r"(^|[.!?]\s+)([a-z])")
_TRAILING_PUNCT = re.compile(r"[.!?]+$")
_ENDS_WITH_PUNCT = re.compile(r"[.!?。！？؟।]$")
_LATIN_WORD = re.compile(r"[A-Za-z][A-Za-z']*")


@dataclass
class _Pass:
    """Working state of one pipeline pass."""

    text: str
    corrections: List[Correction] = field(default_factory=list)
    tokens: List[Token] = field(default_factory=list)
    idioms_found: List[str] = field(default_factory=list)
    unknown_words: List[str] = field(default_factory=list)
    total: int = 0
    translated: int = 0
    phrase_match: bool = False
    was_reordered: bool = False
    was_disambiguated: bool = False
    transliterated: bool = False
    confidence: float = 0.0

    def correct(self, kind: CorrectionType, original: str, corrected: str, reason: str) -> None:
        self.corrections.append(Correction(type=kind, original=original, corrected=corrected, reason=reason))

    @property
    def method(self) -> TranslationMethod:
        if self.phrase_match:
            return TranslationMethod.PHRASE_MATCH
        if not self.translated:
            if any(c.type == CorrectionType.GRAMMAR for c in self.corrections):
                return TranslationMethod.POST_PROCESSED
            return TranslationMethod.DICTIONARY_LOOKUP
        if self.idioms_found:
            return TranslationMethod.IDIOM_REPLACEMENT
        if self.was_disambiguated:
            return TranslationMethod.CONTEXT_DISAMBIGUATED
        if self.was_reordered:
            return TranslationMethod.REORDERED
        if any(c.type == CorrectionType.MORPHOLOGY for c in self.corrections):
            return TranslationMethod.MORPHOLOGY_ADJUSTED
        return TranslationMethod.WORD_BY_WORD


def _fixed_token(text: str, source: str) -> Token:
    """A token holding finished target text that later stages must not touch."""
    return Token(
        text=text,
        normalized=text.lower(),
        pos=PartOfSpeech.UNKNOWN,
        lemma=source.lower(),
        index=-1,
        is_word=True,
    )


def _count_words(text: str) -> int:
    return len(_LATIN_WORD.findall(text)) or len(text.split())


def _carry_punctuation(source: str, translation: str) -> str:
    """Keep the source's closing punctuation on a whole-phrase translation."""
    trailing = _TRAILING_PUNCT.search(source.strip())
    if trailing and not _ENDS_WITH_PUNCT.search(translation):
        return translation + trailing.group(0)
    return translation


def _starts_capitalized(text: str) -> bool:
    """True if the first letter is uppercase or belongs to a caseless script."""
    for char in text:
        if char.isalpha():
            return char.isupper() or char.lower() == char.upper()
    return False


def _match_case(original: str, word: str) -> str:
    if original[:1].isupper():
        return word[:1].upper() + word[1:]
    return word


class TranslationRouter:
    """
    Translates text between any two supported languages.

    Strategy per language pair:
    1. Same language: passthrough
    2. English on one side, or a direct pair: dictionary pipeline
    3. Two native-script languages: pivot through English
    4. Confidence below the threshold: model backend, when one is configured

    The dictionary pipeline runs idiom replacement, sense disambiguation,
    phrase and word lookup, morphology, reordering, post-processing and
    transliteration of leftover Latin words.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        registry: Optional[LanguageRegistry] = None,
        transliterator: Optional[Transliterator] = None,
        idioms: Optional[IdiomDictionary] = None,
        phrases: Optional[PhraseDictionary] = None,
        disambiguator: Optional[WordSenseDisambiguator] = None,
        reorderer: Optional[SentenceReorderer] = None,
        cache: Optional[TranslationCache] = None,
        scorer: Optional[ConfidenceScorer] = None,
        model_pipeline: Optional[ModelPipeline] = None,
        profile_store: Optional[ProfileStore] = None,
    ):
        """
        Initialize the router.

        Every collaborator is optional; missing ones are built from the
        built-in tables. Pass shared instances to reuse them across routers.

        Args:
            config: Pipeline settings (module default if not provided)
            registry: Language registry
            transliterator: Script transliterator
            idioms: Idiom dictionary
            phrases: Phrase and word dictionary
            disambiguator: Word-sense disambiguator
            reorderer: Tokenizer and word-order engine
            cache: Result cache
            scorer: Confidence scorer
            model_pipeline: Optional model backend for low-confidence results
            profile_store: User language lookup for translate_for_users
        """
        self.config = config or default_config
        self.registry = registry if registry is not None else LanguageRegistry()
        self.transliterator = (
            transliterator if transliterator is not None else Transliterator(self.registry)
        )
        self.idioms = idioms if idioms is not None else IdiomDictionary()
        self.phrases = phrases if phrases is not None else PhraseDictionary()
        self.disambiguator = disambiguator if disambiguator is not None else WordSenseDisambiguator()
        self.reorderer = reorderer if reorderer is not None else SentenceReorderer(self.registry)
        self.cache = cache if cache is not None else TranslationCache(
            max_size=self.config.cache_size, ttl=self.config.cache_ttl_seconds
        )
        self.scorer = scorer or ConfidenceScorer()
        self.model_pipeline = model_pipeline
        self.profile_store = profile_store if profile_store is not None else InMemoryProfileStore()
        self.loader = DataLoader(self.config, self.registry, self.idioms, self.phrases)

    async def initialize(self) -> Dict[str, int]:
        """Load the configured data files into the dictionaries."""
        return await self.loader.load_all()

    # Public API

    def classify(self, source: str, target: str) -> TranslationDirection:
        """Decide how a language pair is translated."""
        source = self.registry.normalize(source)
        target = self.registry.normalize(target)
        if source == target:
            return TranslationDirection.PASSTHROUGH
        if source == ENGLISH:
            return TranslationDirection.ENGLISH_SOURCE
        if target == ENGLISH:
            return TranslationDirection.ENGLISH_TARGET

        source_latin = self.registry.is_latin_script(source)
        target_latin = self.registry.is_latin_script(target)
        if source_latin and target_latin:
            return TranslationDirection.LATIN_TO_LATIN
        if source_latin:
            return TranslationDirection.LATIN_TO_NATIVE
        if target_latin:
            return TranslationDirection.NATIVE_TO_LATIN
        return TranslationDirection.NATIVE_TO_NATIVE

    def translate(
        self, text: str, source: str, target: str, normalize_script: bool = False
    ) -> TranslationResult:
        """
        Translate text with the dictionary pipeline.

        Args:
            text: Text to translate
            source: Source language (name, code or alias)
            target: Target language (name, code or alias)
            normalize_script: For same-language requests, render Latin-typed
                input in the language's native script

        Returns:
            TranslationResult with the text and how it was produced
        """
        early = self._short_circuit(text, source, target, normalize_script)
        if early is not None:
            return early

        result = self._translate_uncached(
            text.strip(), self.registry.normalize(source), self.registry.normalize(target)
        )
        self._store(result)
        return result

    async def translate_async(
        self, text: str, source: str, target: str, normalize_script: bool = False
    ) -> TranslationResult:
        """Translate text, asking the model backend when dictionary confidence is low."""
        early = self._short_circuit(text, source, target, normalize_script)
        if early is not None:
            return early

        result = self._translate_uncached(
            text.strip(), self.registry.normalize(source), self.registry.normalize(target)
        )
        if self._wants_model(result):
            result = await self._model_fallback(result)
        self._store(result)
        return result

    def translate_for_chat(self, text: str, sender: str, receiver: str) -> ChatMessageViews:
        """
        Render one chat message for its sender and its receiver.

        The message is first anchored in English. The receiver's view is
        translated from that English core, never from the sender's view.

        Args:
            text: Message as typed by the sender
            sender: Sender's language
            receiver: Receiver's language

        Returns:
            ChatMessageViews with both renderings and the English core
        """
        sender = self.registry.normalize(sender)
        receiver = self.registry.normalize(receiver)
        trimmed = (text or "").strip()
        if not trimmed:
            return self._empty_views(text or "", sender, receiver)

        to_english = None if sender == ENGLISH else self.translate(trimmed, sender, ENGLISH)
        core, own_language = self._english_core(trimmed, to_english)

        sender_result = None
        if not own_language:
            sender_result = self.translate(core, ENGLISH, sender)

        receiver_result = None
        if receiver == ENGLISH:
            receiver_result = to_english if own_language else None
        elif receiver != sender:
            receiver_result = self.translate(core, ENGLISH, receiver)

        return self._views(trimmed, sender, receiver, core, own_language, sender_result, receiver_result)

    async def translate_for_chat_async(
        self, text: str, sender: str, receiver: str
    ) -> ChatMessageViews:
        """Async variant of translate_for_chat that can use the model backend."""
        sender = self.registry.normalize(sender)
        receiver = self.registry.normalize(receiver)
        trimmed = (text or "").strip()
        if not trimmed:
            return self._empty_views(text or "", sender, receiver)

        to_english = None
        if sender != ENGLISH:
            to_english = await self.translate_async(trimmed, sender, ENGLISH)
        core, own_language = self._english_core(trimmed, to_english)

        sender_result = None
        if not own_language:
            sender_result = await self.translate_async(core, ENGLISH, sender)

        receiver_result = None
        if receiver == ENGLISH:
            receiver_result = to_english if own_language else None
        elif receiver != sender:
            receiver_result = await self.translate_async(core, ENGLISH, receiver)

        return self._views(trimmed, sender, receiver, core, own_language, sender_result, receiver_result)

    async def translate_for_users(
        self, text: str, sender_id: str, receiver_id: str
    ) -> ChatMessageViews:
        """Translate a chat message using each user's stored language."""
        sender = await self._user_language(sender_id)
        receiver = await self._user_language(receiver_id)
        return await self.translate_for_chat_async(text, sender, receiver)

    def english_meaning(self, text: str, source: str) -> str:
        """Get the English rendering of a text."""
        trimmed = (text or "").strip()
        if not trimmed or self.registry.is_english(source):
            return trimmed
        return self.translate(trimmed, source, ENGLISH).text

    def clear_cache(self) -> None:
        self.cache.clear()

    def cache_stats(self) -> Dict[str, float]:
        stats = self.cache.stats()
        stats["phrases"] = len(self.phrases)
        stats["idioms"] = len(self.idioms)
        return stats

    # Entry point helpers

    def _short_circuit(
        self, text: str, source: str, target: str, normalize_script: bool
    ) -> Optional[TranslationResult]:
        """Handle empty input, same-language pairs and cache hits."""
        source = self.registry.normalize(source)
        target = self.registry.normalize(target)
        if not text or not text.strip():
            return self._passthrough("", text or "", source, target)
        if source == target:
            return self._same_language(text, source, normalize_script)

        cached = self.cache.get(text.strip(), source, target)
        if cached is not None:
            logger.debug("Cache hit for %s -> %s", source, target)
            return replace(cached, cached=True)
        return None

    def _passthrough(self, text: str, original: str, source: str, target: str) -> TranslationResult:
        return TranslationResult(
            text=text,
            original_text=original,
            source_language=source,
            target_language=target,
            method=TranslationMethod.PASSTHROUGH,
            confidence=self.scorer.passthrough(),
            direction=TranslationDirection.PASSTHROUGH,
        )

    def _same_language(self, text: str, language: str, normalize_script: bool) -> TranslationResult:
        if normalize_script and self._is_latin_typed(text, language):
            native = self.transliterator.to_native(text, language)
            if native != text:
                result = self._passthrough(native, text, language, language)
                result.is_transliterated = True
                result.corrections.append(Correction(
                    type=CorrectionType.TRANSLITERATION,
                    original=text,
                    corrected=native,
                    reason=f"Rendered in {self.registry.get_profile(language).script} script",
                ))
                return result
        return self._passthrough(text, text, language, language)

    def _translate_uncached(self, text: str, source: str, target: str) -> TranslationResult:
        direction = self.classify(source, target)
        logger.debug("Translating %s -> %s via %s", source, target, direction.value)

        if direction.uses_english_pivot:
            return self._pivot(text, source, target)
        if direction == TranslationDirection.ENGLISH_SOURCE:
            state = self._from_english(text, target)
        elif direction == TranslationDirection.ENGLISH_TARGET:
            state = self._to_english(text, source)
        else:
            state = self._direct(text, source, target)
        return self._result(state, text, source, target, direction)

    def _result(
        self,
        state: _Pass,
        original: str,
        source: str,
        target: str,
        direction: TranslationDirection,
    ) -> TranslationResult:
        return TranslationResult(
            text=state.text,
            original_text=original,
            source_language=source,
            target_language=target,
            method=state.method,
            confidence=state.confidence,
            direction=direction,
            corrections=state.corrections,
            tokens=state.tokens,
            was_reordered=state.was_reordered,
            was_disambiguated=state.was_disambiguated,
            idioms_found=state.idioms_found,
            unknown_words=state.unknown_words,
            is_translated=state.translated > 0 and state.text != original,
            is_transliterated=state.transliterated and state.text != original,
        )

    def _store(self, result: TranslationResult) -> None:
        # Weak results stay uncached while a model backend could still improve them
        if not result.fallback_used and self._wants_model(result):
            return
        if result.is_translated or result.is_transliterated:
            self.cache.set(
                result.original_text, result.source_language, result.target_language, result
            )

    def _wants_model(self, result: TranslationResult) -> bool:
        return (
            self.model_pipeline is not None
            and self.config.enable_model_fallback
            and result.confidence < self.config.fallback_confidence_threshold
        )

    async def _model_fallback(self, result: TranslationResult) -> TranslationResult:
        """Replace a weak dictionary result with the model's translation if it succeeds."""
        try:
            translated = await self.model_pipeline.translate(
                result.original_text, result.source_language, result.target_language
            )
        except LingoPivotError as e:
            logger.warning(
                "Model fallback failed for %s -> %s, keeping dictionary result: %s",
                result.source_language, result.target_language, e,
            )
            return replace(result, error=f"Model fallback failed: {e}")

        translated = (translated or "").strip()
        if not translated:
            logger.warning("Model backend returned an empty translation, keeping dictionary result")
            return replace(result, error="Model backend returned an empty translation")

        logger.debug("Model fallback used for %s -> %s", result.source_language, result.target_language)
        return replace(
            result,
            text=translated,
            method=TranslationMethod.MODEL_FALLBACK,
            confidence=self.scorer.model(),
            fallback_used=True,
            is_translated=translated != result.original_text,
            tokens=[],
            unknown_words=[],
        )

    # Strategies

    def _pivot(self, text: str, source: str, target: str) -> TranslationResult:
        """Native to native: source -> English -> target."""
        first = self._to_english(text, source)
        second = self._from_english(first.text, target)

        second.corrections = first.corrections + second.corrections
        second.unknown_words = list(dict.fromkeys(first.unknown_words + second.unknown_words))
        second.transliterated = second.transliterated or first.transliterated
        second.was_reordered = second.was_reordered or first.was_reordered
        result = self._result(second, text, source, target, TranslationDirection.NATIVE_TO_NATIVE)
        return replace(
            result,
            english_pivot=first.text,
            confidence=self.scorer.pivot(first.confidence, second.confidence),
            is_translated=result.is_translated and first.translated > 0,
        )

    def _from_english(self, text: str, target: str) -> _Pass:
        """English -> target, chunk by chunk."""
        state = _Pass(text=text)
        chunks = self.reorderer.chunk_sentences(text)
        rendered = []
        all_phrases = True
        for chunk in chunks:
            chunk_text, phrase_match = self._from_english_chunk(chunk.text, target, state)
            rendered.append(chunk_text)
            all_phrases = all_phrases and phrase_match

        joined = self.reorderer.rejoin(rendered, [chunk.separator for chunk in chunks])
        output = self._post_process(joined, text, target, state)
        state.text = self._transliterate_leftovers(output, target, state)
        state.phrase_match = all_phrases and state.translated > 0
        if state.phrase_match:
            state.confidence = self.scorer.phrase_match()
        else:
            state.confidence = self.scorer.word_by_word(
                state.translated, state.total, idioms=len(state.idioms_found)
            )
        return state

    def _from_english_chunk(self, text: str, target: str, state: _Pass) -> Tuple[str, bool]:
        fixed: Set[int] = set()
        tokens = self._replace_idioms(text, target, state, fixed)
        if not fixed:
            whole = self.phrases.lookup(text, target)
            if whole:
                words = _count_words(text)
                state.total += words
                state.translated += words
                return _carry_punctuation(text, whole), True

        state.total += sum(1 for t in tokens if t.is_word and id(t) not in fixed)
        tokens = self._match_phrases(tokens, target, state, fixed)
        if self.config.enable_disambiguation:
            tokens = self._disambiguate(tokens, text, target, state, fixed)
        tokens = self._substitute_words(tokens, target, state, fixed)
        tokens = self._reorder(tokens, ENGLISH, target, state, len(text))
        state.tokens.extend(tokens)
        return self.reorderer.to_string(tokens), False

    def _to_english(self, text: str, source: str) -> _Pass:
        """Source -> English via the reverse dictionary."""
        state = _Pass(text=text)
        latin_typed = self._is_latin_typed(text, source)

        whole = self._read_source(text, source, latin_typed)
        if whole:
            words = _count_words(text)
            state.total = state.translated = words
            state.phrase_match = True
            state.text = self._post_process(_carry_punctuation(text, whole), text, ENGLISH, state)
            state.confidence = self.scorer.phrase_match()
            return state

        english_tokens = []
        for token in self.reorderer.tokenize(text):
            if not token.is_word:
                english_tokens.append(token)
                continue
            state.total += 1
            english = self._read_source(token.text, source, latin_typed)
            if english:
                english_tokens.append(token.with_text(english))
                state.translated += 1
            else:
                english_tokens.append(self._unknown_to_latin(token, source, ENGLISH, latin_typed, state))

        # Tag the English words before reordering
        tokens = self.reorderer.tokenize(self.reorderer.to_string(english_tokens))
        tokens = self._reorder(tokens, source, ENGLISH, state, len(text))
        if self.config.enable_morphology:
            tokens = self._english_agreement(tokens, state)
        state.tokens = tokens
        state.text = self._post_process(self.reorderer.to_string(tokens), text, ENGLISH, state)
        state.confidence = self.scorer.word_by_word(state.translated, state.total)
        return state

    def _direct(self, text: str, source: str, target: str) -> _Pass:
        """Non-English pair with a Latin side: map words row to row in the dictionary."""
        state = _Pass(text=text)
        latin_typed = self._is_latin_typed(text, source)

        english = self._read_source(text, source, latin_typed)
        whole = self.phrases.lookup(english, target) if english else None
        if whole:
            state.total = state.translated = _count_words(text)
            state.phrase_match = True
            state.text = self._post_process(_carry_punctuation(text, whole), text, target, state)
            state.confidence = self.scorer.phrase_match()
            return state

        tokens = []
        for token in self.reorderer.tokenize(text):
            if not token.is_word:
                tokens.append(token)
                continue
            state.total += 1
            english = self._read_source(token.text, source, latin_typed)
            translation = self.phrases.lookup_word(english, target) if english else None
            if translation:
                pos = morphology.detect_pos(english)
                tokens.append(replace(
                    token, text=translation, pos=pos, lemma=morphology.lemmatize(english, pos)
                ))
                state.translated += 1
            else:
                tokens.append(self._unknown_to_latin(token, source, target, latin_typed, state))

        tokens = self._reorder(tokens, source, target, state, len(text))
        state.tokens = tokens
        output = self._post_process(self.reorderer.to_string(tokens), text, target, state)
        state.text = self._transliterate_leftovers(output, target, state)
        state.confidence = self.scorer.word_by_word(state.translated, state.total)
        return state

    # Stages

    def _replace_idioms(
        self, text: str, target: str, state: _Pass, fixed: Set[int]
    ) -> List[Token]:
        """Tokenize a chunk, turning each translatable idiom into one fixed token."""
        if not self.config.enable_idioms:
            return self.reorderer.tokenize(text)

        tokens: List[Token] = []
        position = 0
        for match in self.idioms.find_all(text):
            translation = match.entry.translation_for(target)
            if not translation:
                continue
            tokens.extend(self.reorderer.tokenize(text[position:match.start]))
            token = _fixed_token(translation, match.entry.phrase)
            fixed.add(id(token))
            tokens.append(token)

            words = len(match.entry.normalized_phrase.split())
            state.total += words
            state.translated += words
            state.idioms_found.append(match.entry.phrase)
            state.correct(CorrectionType.IDIOM, match.phrase, translation, f"Idiom meaning '{match.entry.meaning}'")
            position = match.end
        tokens.extend(self.reorderer.tokenize(text[position:]))
        return tokens

    def _match_phrases(
        self, tokens: List[Token], target: str, state: _Pass, fixed: Set[int]
    ) -> List[Token]:
        """Replace runs of 3 or 2 words found as phrases in the dictionary."""
        result: List[Token] = []
        i = 0
        while i < len(tokens):
            token = tokens[i]
            hit = None
            if token.is_word and id(token) not in fixed:
                for size in PHRASE_SPANS:
                    span = self._word_span(tokens, i, size, fixed)
                    if span is None:
                        continue
                    end, words = span
                    translation = self.phrases.lookup(" ".join(words), target)
                    if translation:
                        hit = (end, words, translation)
                        break
            if hit is None:
                result.append(token)
                i += 1
                continue

            end, words, translation = hit
            phrase = _fixed_token(translation, " ".join(words))
            fixed.add(id(phrase))
            result.append(phrase)
            state.translated += len(words)
            i = end + 1
        return result

    @staticmethod
    def _word_span(
        tokens: List[Token], start: int, size: int, fixed: Set[int]
    ) -> Optional[Tuple[int, List[str]]]:
        """Collect ``size`` consecutive free words separated only by whitespace."""
        words: List[str] = []
        last = start
        j = start
        while j < len(tokens) and len(words) < size:
            token = tokens[j]
            if token.is_word:
                if id(token) in fixed:
                    return None
                words.append(token.text)
                last = j
            elif not token.text.isspace():
                return None
            j += 1
        if len(words) < size:
            return None
        return last, words

    def _disambiguate(
        self, tokens: List[Token], sentence: str, target: str, state: _Pass, fixed: Set[int]
    ) -> List[Token]:
        words = [t.text for t in tokens if t.is_word]
        result: List[Token] = []
        position = -1
        for token in tokens:
            if token.is_word:
                position += 1
            if not token.is_word or id(token) in fixed:
                result.append(token)
                continue

            word = token.normalized if self.disambiguator.is_ambiguous(token.normalized) else token.lemma
            if not self.disambiguator.is_ambiguous(word):
                result.append(token)
                continue

            context = DisambiguationContext(
                surrounding_words=(
                    words[max(0, position - CONTEXT_WINDOW):position]
                    + words[position + 1:position + 1 + CONTEXT_WINDOW]
                ),
                sentence=sentence,
            )
            found = self.disambiguator.disambiguate_and_translate(word, context, target)
            if found is None:
                result.append(token)
                continue

            translation = self.disambiguator.translate_sense(found.sense, target)
            replaced = token.with_text(translation)
            fixed.add(id(replaced))
            result.append(replaced)
            state.translated += 1
            state.was_disambiguated = True
            state.correct(
                CorrectionType.WORD_SENSE,
                token.text,
                translation,
                f"'{token.text}' read as {found.sense.meaning} ({found.confidence:.2f})",
            )
        return result

    def _substitute_words(
        self, tokens: List[Token], target: str, state: _Pass, fixed: Set[int]
    ) -> List[Token]:
        """Word-by-word lookup; drops articles for languages without them."""
        drop_articles = (
            self.config.enable_morphology and not self.registry.get_profile(target).has_articles
        )
        result: List[Token] = []
        i = 0
        while i < len(tokens):
            token = tokens[i]
            i += 1
            if not token.is_word or id(token) in fixed:
                result.append(token)
                continue

            if drop_articles and token.normalized in ARTICLES:
                state.translated += 1
                state.correct(CorrectionType.MORPHOLOGY, token.text, "", f"{target.title()} has no articles")
                if i < len(tokens) and tokens[i].text.isspace():
                    i += 1
                continue

            translation = self.phrases.lookup_word(token.text, target)
            if translation:
                result.append(token.with_text(translation))
                state.translated += 1
            else:
                state.unknown_words.append(token.text)
                result.append(token)
        return result

    def _reorder(
        self, tokens: List[Token], source: str, target: str, state: _Pass, length: int
    ) -> List[Token]:
        if not self.config.enable_reordering:
            return tokens
        if length > self.config.max_sentence_length:
            logger.debug("Skipping reordering of a %d character chunk", length)
            return tokens

        before = self.reorderer.to_string(tokens)
        reordered = self.reorderer.reorder(tokens, source, target)
        after = self.reorderer.to_string(reordered)
        if after != before:
            state.was_reordered = True
            source_order = self.registry.get_profile(source).word_order.value
            target_order = self.registry.get_profile(target).word_order.value
            state.correct(CorrectionType.WORD_ORDER, before, after, f"{source_order} to {target_order}")
        return reordered

    def _english_agreement(self, tokens: List[Token], state: _Pass) -> List[Token]:
        """Fix "i", a/an and third person singular verbs in English output."""
        result = list(tokens)
        words = [i for i, t in enumerate(result) if t.is_word]
        for n, i in enumerate(words):
            token = result[i]
            following = words[n + 1] if n + 1 < len(words) else None

            if token.normalized == "i" and token.text != "I":
                result[i] = token.with_text("I")
                state.correct(CorrectionType.MORPHOLOGY, token.text, "I", "Capitalized pronoun")
            elif token.normalized in ("a", "an") and following is not None:
                article = "an" if result[following].normalized[:1] in "aeiou" else "a"
                if article != token.normalized:
                    corrected = _match_case(token.text, article)
                    result[i] = token.with_text(corrected)
                    state.correct(CorrectionType.MORPHOLOGY, token.text, corrected, "Article agreement")
            elif token.normalized in THIRD_PERSON and following is not None:
                verb = result[following]
                if (
                    verb.pos == PartOfSpeech.VERB
                    and verb.normalized not in MODALS
                    and morphology.lemmatize(verb.normalized, PartOfSpeech.VERB) == verb.normalized
                ):
                    inflected = morphology.conjugate(verb.normalized, Tense.PRESENT, person=3)
                    if inflected != verb.normalized:
                        result[following] = verb.with_text(inflected)
                        state.correct(
                            CorrectionType.MORPHOLOGY, verb.text, inflected, "Third person singular agreement"
                        )
        return result

    def _post_process(self, text: str, source_text: str, target: str, state: _Pass) -> str:
        """Normalize spacing and punctuation; restore sentence case for Latin targets."""
        if not self.config.enable_post_processing:
            return text

        result = _DOUBLE_SPACE.sub(" ", text).strip()
        result = _SPACE_BEFORE_PUNCT.sub(r"\1", result)
        result = _REPEATED_END.sub(r"\1", result)
        if self.registry.is_latin_script(target):
            result = _MISSING_SPACE.sub(r"\1 \2", result)
            if _starts_capitalized(source_text):
                result = _SENTENCE_START.sub(lambda m: m.group(1) + m.group(2).upper(), result)

        if result != text:
            state.correct(CorrectionType.GRAMMAR, text, result, "Fixed spacing, punctuation and case")
        return result

    def _transliterate_leftovers(self, text: str, target: str, state: _Pass) -> str:
        """Render Latin words left in a native-script output in the target script."""
        if self.registry.is_latin_script(target) or not self.transliterator.has_transliteration(target):
            return text

        result = _LATIN_WORD.sub(lambda m: self.transliterator.to_native(m.group(0), target), text)
        if result != text:
            state.transliterated = True
            state.correct(
                CorrectionType.TRANSLITERATION,
                text,
                result,
                f"Untranslated words written in {self.registry.get_profile(target).script} script",
            )
        return result

    def _unknown_to_latin(
        self, token: Token, source: str, target: str, latin_typed: bool, state: _Pass
    ) -> Token:
        """Keep an unknown source word, romanized when the target is Latin-script."""
        state.unknown_words.append(token.text)
        if latin_typed or not self.registry.is_latin_script(target):
            return token
        latin = self.transliterator.to_latin(token.text, source)
        if latin == token.text:
            return token
        state.transliterated = True
        state.correct(CorrectionType.TRANSLITERATION, token.text, latin, "Romanized unknown word")
        return token.with_text(latin)

    def _read_source(self, text: str, source: str, latin_typed: bool) -> Optional[str]:
        """Find the English entry for source text, trying the native script first when typed in Latin."""
        candidates = [text]
        if latin_typed:
            candidates.insert(0, self.transliterator.to_native(text, source))
        for candidate in candidates:
            english = self.phrases.reverse_lookup(candidate, source)
            if english:
                return english
        return None

    def _is_latin_typed(self, text: str, language: str) -> bool:
        """Check for a native-script language written with a Latin keyboard."""
        return (
            not self.registry.is_latin_script(language)
            and self.transliterator.has_transliteration(language)
            and self.registry.is_latin_text(text)
        )

    # Chat helpers

    def _kind(self, language: str) -> str:
        if language == ENGLISH:
            return "english"
        return "latin" if self.registry.is_latin_script(language) else "native"

    def _english_core(
        self, text: str, to_english: Optional[TranslationResult]
    ) -> Tuple[str, bool]:
        """
        Derive the English meaning of a message.

        Returns the English core and whether the sender typed in their own
        language. Latin text the dictionary cannot read is taken as English.
        """
        if to_english is None:
            return text, True
        if to_english.is_translated:
            return to_english.text, True
        if not self.registry.is_latin_text(text):
            return to_english.text, True
        return text, False

    def _views(
        self,
        text: str,
        sender: str,
        receiver: str,
        core: str,
        own_language: bool,
        sender_result: Optional[TranslationResult],
        receiver_result: Optional[TranslationResult],
    ) -> ChatMessageViews:
        was_transliterated = False
        if own_language:
            sender_view = text
            if self._is_latin_typed(text, sender):
                sender_view = self.transliterator.to_native(text, sender)
                was_transliterated = sender_view != text
        else:
            sender_view = sender_result.text if sender_result else core

        views = ChatMessageViews(
            original_text=text,
            sender_view=sender_view,
            receiver_view=core,
            english_core=core,
            sender_language=sender,
            receiver_language=receiver,
            path=ChatPath.between(self._kind(sender), self._kind(receiver)),
            was_translated=core != text,
            was_transliterated=was_transliterated,
            confidence=self.scorer.passthrough(),
        )
        if receiver == sender:
            views.receiver_view = sender_view
        elif receiver_result is not None:
            views.receiver_view = receiver_result.text
            views.was_translated = views.was_translated or receiver_result.is_translated
            views.was_transliterated = was_transliterated or receiver_result.is_transliterated
            views.confidence = receiver_result.confidence
            views.method = receiver_result.method
            views.corrections = list(receiver_result.corrections)
        return views

    def _empty_views(self, text: str, sender: str, receiver: str) -> ChatMessageViews:
        return ChatMessageViews(
            original_text=text,
            sender_view="",
            receiver_view="",
            english_core="",
            sender_language=sender,
            receiver_language=receiver,
            path=ChatPath.between(self._kind(sender), self._kind(receiver)),
            confidence=self.scorer.passthrough(),
        )

    async def _user_language(self, user_id: str) -> str:
        language = self.profile_store.get_user_language(user_id)
        if inspect.isawaitable(language):
            language = await language
        return language
