"""Tokenization and constituent reordering between word orders."""

import logging
import re
import unicodedata
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..languages.registry import LanguageRegistry
from ..models.language_profile import WordOrder
from ..models.token import PartOfSpeech, SentenceChunk, Token
from . import morphology

logger = logging.getLogger(__name__)

# Whitespace runs and punctuation become their own tokens; apostrophes stay in words
_SPLIT = re.compile(r"(\s+|[.,!?;:\"()\[\]{}¿¡।॥。、！？，])")
_CHUNK_BOUNDARY = re.compile(
    r"(?<=[.;!?।。！？])\s+"
    r"|(?<=,)\s*(?=(?:which|who|that|when|where|while|although|because|if|unless|until|since|after|before)\b)",
    re.IGNORECASE,
)
_SUBORDINATORS = (
    "which", "who", "that", "when", "where", "while", "although", "because",
    "if", "unless", "until", "since", "after", "before",
)

NOMINALS = (PartOfSpeech.NOUN, PartOfSpeech.PRONOUN)


@dataclass
class SVO:
    subject: Optional[Token] = None
    verb: Optional[Token] = None
    object: Optional[Token] = None


def _is_word(segment: str) -> bool:
    if not any(char.isalpha() for char in segment):
        return False
    return all(
        char.isalpha() or unicodedata.category(char).startswith("M") or char in "'-’"
        for char in segment
    )


def _position(tokens: List[Token], target: Token) -> int:
    for i, token in enumerate(tokens):
        if token is target:
            return i
    return -1


def _space(index: int) -> Token:
    return Token(text=" ", normalized=" ", pos=PartOfSpeech.UNKNOWN, lemma=" ", index=index, is_word=False)


def _detach(tokens: List[Token], target: Token) -> Tuple[List[Token], Optional[Token]]:
    """Remove a token together with one adjacent whitespace token.

    Returns the remaining tokens and the whitespace token taken along.
    """
    result = list(tokens)
    i = _position(result, target)
    del result[i]
    if i > 0 and result[i - 1].text.isspace():
        return result[: i - 1] + result[i:], result[i - 1]
    if i < len(result) and result[i].text.isspace():
        return result[:i] + result[i + 1:], result[i]
    return result, None


def _swap(tokens: List[Token], first: int, second: int) -> None:
    tokens[first], tokens[second] = tokens[second], tokens[first]


class SentenceReorderer:
    """
    Rearranges tokens between SVO, SOV and VSO sentence structures.

    Subject, verb and object are found with a first-match heuristic: the
    first noun or pronoun is the subject, the first verb after it is the
    verb and the next noun or pronoun is the object. Complex sentences are
    chunked first and reordered chunk by chunk.
    """

    def __init__(self, registry: Optional[LanguageRegistry] = None):
        self.registry = registry or LanguageRegistry()

    def tokenize(self, text: str) -> List[Token]:
        """
        Split text into word, whitespace and punctuation tokens with POS tags.

        Joining the token texts reproduces the input exactly.
        """
        tokens: List[Token] = []
        previous_word: Optional[str] = None
        segments = [segment for segment in _SPLIT.split(text or "") if segment]
        for index, segment in enumerate(segments):
            if _is_word(segment):
                pos = morphology.detect_pos(segment, previous=previous_word)
                lemma = morphology.lemmatize(segment, pos)
                token = Token(
                    text=segment,
                    normalized=segment.lower(),
                    pos=pos,
                    lemma=lemma,
                    index=index,
                    is_word=True,
                    features=morphology.extract_features(segment, pos),
                )
                previous_word = segment
            else:
                token = Token(
                    text=segment,
                    normalized=segment.lower(),
                    pos=PartOfSpeech.UNKNOWN,
                    lemma=segment,
                    index=index,
                    is_word=False,
                )
                if not segment.isspace():
                    previous_word = None
            tokens.append(token)
        return tokens

    @staticmethod
    def to_string(tokens: List[Token]) -> str:
        return "".join(token.text for token in tokens)

    @staticmethod
    def identify_svo(tokens: List[Token]) -> SVO:
        found = SVO()
        for token in tokens:
            if not token.is_word:
                continue
            if found.subject is None:
                if token.pos in NOMINALS:
                    found.subject = token
            elif found.verb is None:
                if token.pos == PartOfSpeech.VERB:
                    found.verb = token
            elif found.object is None and token.pos in NOMINALS:
                found.object = token
        return found

    def svo_to_sov(self, tokens: List[Token]) -> List[Token]:
        """Move the verb after its object: "I love cats" -> "I cats love"."""
        svo = self.identify_svo(tokens)
        if svo.subject is None or svo.verb is None:
            return list(tokens)

        rest, gap = _detach(tokens, svo.verb)
        anchor = svo.object
        if anchor is None:
            words = [token for token in rest if token.is_word]
            anchor = words[-1]
        i = _position(rest, anchor) + 1
        return rest[:i] + [gap or _space(svo.verb.index), svo.verb] + rest[i:]

    def sov_to_svo(self, tokens: List[Token]) -> List[Token]:
        """Move the last verb right after the subject: "I cats love" -> "I love cats"."""
        verb = next((t for t in reversed(tokens) if t.is_word and t.pos == PartOfSpeech.VERB), None)
        subject = next((t for t in tokens if t.is_word and t.pos in NOMINALS), None)
        if verb is None or subject is None:
            return list(tokens)
        if _position(tokens, subject) >= _position(tokens, verb):
            return list(tokens)

        rest, gap = _detach(tokens, verb)
        i = _position(rest, subject) + 1
        # Keep the subject's trailing adjectives together with it
        while i < len(rest):
            j = i
            while j < len(rest) and not rest[j].is_word:
                j += 1
            if j < len(rest) and rest[j].pos == PartOfSpeech.ADJECTIVE:
                i = j + 1
            else:
                break
        return rest[:i] + [gap or _space(verb.index), verb] + rest[i:]

    def svo_to_vso(self, tokens: List[Token]) -> List[Token]:
        """Move the verb to the front: "I love cats" -> "love I cats"."""
        verb = self.identify_svo(tokens).verb
        if verb is None:
            return list(tokens)

        rest, gap = _detach(tokens, verb)
        i = 0
        while i < len(rest) and not rest[i].is_word:
            i += 1
        return rest[:i] + [verb, gap or _space(verb.index)] + rest[i:]

    def vso_to_svo(self, tokens: List[Token]) -> List[Token]:
        """Move a sentence-initial verb after the subject that follows it."""
        words = [token for token in tokens if token.is_word]
        if len(words) < 2 or words[0].pos != PartOfSpeech.VERB:
            return list(tokens)
        verb = words[0]
        subject = next((t for t in words[1:] if t.pos in NOMINALS), None)
        if subject is None:
            return list(tokens)

        rest, gap = _detach(tokens, verb)
        i = _position(rest, subject) + 1
        return rest[:i] + [gap or _space(verb.index), verb] + rest[i:]

    @staticmethod
    def move_adjectives_after_nouns(tokens: List[Token]) -> List[Token]:
        """Swap adjective + noun pairs so the adjective follows ("red car" -> "car red")."""
        result = list(tokens)
        i = 0
        while i < len(result):
            if result[i].is_word and result[i].pos == PartOfSpeech.ADJECTIVE:
                j = i + 1
                while j < len(result) and not result[j].is_word:
                    j += 1
                if j < len(result) and result[j].pos == PartOfSpeech.NOUN and result[i + 1:j] and all(
                    t.text.isspace() for t in result[i + 1:j]
                ):
                    _swap(result, i, j)
                    i = j + 1
                    continue
            i += 1
        return result

    @staticmethod
    def move_adjectives_before_nouns(tokens: List[Token]) -> List[Token]:
        """Swap noun + adjective pairs so the adjective comes first ("car red" -> "red car")."""
        result = list(tokens)
        i = 0
        while i < len(result):
            if result[i].is_word and result[i].pos == PartOfSpeech.NOUN:
                j = i + 1
                while j < len(result) and not result[j].is_word:
                    j += 1
                if j < len(result) and result[j].pos == PartOfSpeech.ADJECTIVE and result[i + 1:j] and all(
                    t.text.isspace() for t in result[i + 1:j]
                ):
                    _swap(result, i, j)
                    i = j + 1
                    continue
            i += 1
        return result

    def reorder(self, tokens: List[Token], source: str, target: str) -> List[Token]:
        """
        Reorder tokens from the source language's structure to the target's.

        Args:
            tokens: Tokens in source order
            source: Source language identifier
            target: Target language identifier

        Returns:
            A new token list in target order
        """
        source_profile = self.registry.get_profile(source)
        target_profile = self.registry.get_profile(target)
        source_order = source_profile.word_order
        target_order = target_profile.word_order

        result = list(tokens)
        if source_order != target_order:
            if source_order == WordOrder.SOV:
                result = self.sov_to_svo(result)
            elif source_order == WordOrder.VSO:
                result = self.vso_to_svo(result)

            if target_order == WordOrder.SOV:
                result = self.svo_to_sov(result)
            elif target_order == WordOrder.VSO:
                result = self.svo_to_vso(result)

        if source_profile.adjectives_after_nouns != target_profile.adjectives_after_nouns:
            if target_profile.adjectives_after_nouns:
                result = self.move_adjectives_after_nouns(result)
            else:
                result = self.move_adjectives_before_nouns(result)
        return result

    def reorder_text(self, text: str, source: str, target: str) -> Tuple[str, bool]:
        """Reorder a plain string; returns (text, was_reordered)."""
        source_profile = self.registry.get_profile(source)
        target_profile = self.registry.get_profile(target)
        if (
            source_profile.word_order == target_profile.word_order
            and source_profile.adjectives_after_nouns == target_profile.adjectives_after_nouns
        ):
            return text, False
        result = self.to_string(self.reorder(self.tokenize(text), source, target))
        return result, result != text

    def chunk_sentences(self, text: str) -> List[SentenceChunk]:
        """Split text into sentence and subordinate-clause chunks."""
        text = text or ""
        pieces = []
        start = 0
        for match in _CHUNK_BOUNDARY.finditer(text):
            pieces.append((text[start:match.start()], match.group(0)))
            start = match.end()
        pieces.append((text[start:], ""))

        chunks = []
        for piece, separator in pieces:
            piece = piece.strip()
            if not piece:
                continue
            first = piece.split(None, 1)[0].lower()
            kind = "subordinate" if chunks and first in _SUBORDINATORS else "main"
            chunks.append(SentenceChunk(text=piece, kind=kind, separator=separator))
        return chunks or [SentenceChunk(text=text or "")]

    def chunk(self, text: str) -> List[str]:
        return [chunk.text for chunk in self.chunk_sentences(text)]

    @staticmethod
    def rejoin(
        chunks: List[str], separators: Optional[List[str]] = None, connector: str = " "
    ) -> str:
        """Join translated chunks, reusing the input's separators when given."""
        if separators is None:
            return connector.join(chunks)
        return "".join(chunk + separator for chunk, separator in zip(chunks, separators))
