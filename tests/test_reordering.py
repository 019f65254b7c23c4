import pytest

from lingopivot.analysis.reordering import SentenceReorderer
from lingopivot.models.token import PartOfSpeech


@pytest.fixture
def reorderer(registry):
    return SentenceReorderer(registry)


def words(tokens):
    return [t.text for t in tokens if t.is_word]


@pytest.mark.parametrize(
    "text",
    ["I love cats.", "  Hello,   world!  ", "¿Qué tal?", "मैं ठीक हूँ।", "don't stop", ""],
)
def test_tokenize_round_trips_text(reorderer, text):
    assert reorderer.to_string(reorderer.tokenize(text)) == text


def test_tokenize_tags_words(reorderer):
    tokens = reorderer.tokenize("The cats are running.")

    assert words(tokens) == ["The", "cats", "are", "running"]
    tagged = {t.text: t for t in tokens if t.is_word}
    assert tagged["The"].pos == PartOfSpeech.DETERMINER
    assert tagged["cats"].pos == PartOfSpeech.NOUN
    assert tagged["cats"].lemma == "cat"
    assert tagged["running"].pos == PartOfSpeech.VERB
    assert tagged["running"].lemma == "run"
    assert tokens[-1].text == "." and not tokens[-1].is_word


def test_identify_svo(reorderer):
    svo = reorderer.identify_svo(reorderer.tokenize("I love cats"))
    assert (svo.subject.text, svo.verb.text, svo.object.text) == ("I", "love", "cats")


def test_svo_to_sov(reorderer):
    result = reorderer.svo_to_sov(reorderer.tokenize("I love cats"))
    assert words(result) == ["I", "cats", "love"]
    assert reorderer.to_string(result) == "I cats love"


def test_sov_to_svo(reorderer):
    result = reorderer.sov_to_svo(reorderer.tokenize("I cats love"))
    assert reorderer.to_string(result) == "I love cats"


def test_svo_to_vso_and_back(reorderer):
    vso = reorderer.svo_to_vso(reorderer.tokenize("I love cats"))
    assert reorderer.to_string(vso) == "love I cats"
    assert reorderer.to_string(reorderer.vso_to_svo(vso)) == "I love cats"


def test_reorder_between_languages(reorderer):
    tokens = reorderer.tokenize("I love cats")
    hindi = reorderer.reorder(tokens, "english", "hindi")
    assert reorderer.to_string(hindi) == "I cats love"
    assert reorderer.to_string(reorderer.reorder(hindi, "hindi", "english")) == "I love cats"


def test_reorder_moves_adjectives(reorderer):
    text, changed = reorderer.reorder_text("the red car", "english", "spanish")
    assert changed
    assert text == "the car red"

    text, changed = reorderer.reorder_text("the car red", "spanish", "english")
    assert text == "the red car"


def test_reorder_text_same_structure_is_unchanged(reorderer):
    assert reorderer.reorder_text("I love cats", "english", "german") == ("I love cats", False)


def test_sentence_without_verb_is_unchanged(reorderer):
    tokens = reorderer.tokenize("hello friend")
    assert reorderer.to_string(reorderer.svo_to_sov(tokens)) == "hello friend"


def test_chunk_sentences(reorderer):
    chunks = reorderer.chunk_sentences("I saw the man, who was tall. Then I left!")

    assert [c.text for c in chunks] == ["I saw the man,", "who was tall.", "Then I left!"]
    assert [c.kind for c in chunks] == ["main", "subordinate", "main"]


def test_chunks_keep_their_separators(reorderer):
    chunks = reorderer.chunk_sentences("Hello.\nThank you!  Bye.")

    assert [c.separator for c in chunks] == ["\n", "  ", ""]
    assert reorderer.rejoin(["A.", "B!", "C."], [c.separator for c in chunks]) == "A.\nB!  C."


def test_chunk_of_empty_text(reorderer):
    assert reorderer.chunk("") == [""]
    assert reorderer.rejoin(["a", "b"]) == "a b"
