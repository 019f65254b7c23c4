import pytest

from lingopivot.analysis import morphology
from lingopivot.models.token import PartOfSpeech, Tense


@pytest.mark.parametrize(
    "word, lemma",
    [
        ("running", "run"),
        ("taking", "take"),
        ("stopped", "stop"),
        ("studies", "study"),
        ("was", "be"),
        ("went", "go"),
        ("goes", "go"),
        ("cats", "cat"),
        ("children", "child"),
        ("need", "need"),
        ("needed", "need"),
        ("feed", "feed"),
        ("speed", "speed"),
        ("agreed", "agree"),
        ("died", "die"),
        ("dies", "die"),
        ("tried", "try"),
    ],
)
def test_lemmatize(word, lemma):
    assert morphology.lemmatize(word) == lemma


def test_lemmatize_noun_only_singularizes():
    assert morphology.lemmatize("boxes", PartOfSpeech.NOUN) == "box"
    assert morphology.lemmatize("happy", PartOfSpeech.ADJECTIVE) == "happy"


@pytest.mark.parametrize(
    "verb, tense, person, expected",
    [
        ("go", Tense.PRESENT, 3, "goes"),
        ("watch", Tense.PRESENT, 3, "watches"),
        ("study", Tense.PRESENT, 3, "studies"),
        ("have", Tense.PRESENT, 3, "has"),
        ("eat", Tense.PRESENT, 1, "eat"),
        ("be", Tense.PRESENT, 1, "am"),
        ("be", Tense.PRESENT, 3, "is"),
        ("stop", Tense.PAST, 3, "stopped"),
        ("bake", Tense.PAST, 3, "baked"),
        ("go", Tense.PAST, 3, "went"),
        ("be", Tense.PAST, 2, "were"),
        ("take", Tense.PERFECT, 3, "taken"),
        ("run", Tense.PROGRESSIVE, 3, "running"),
        ("make", Tense.PROGRESSIVE, 3, "making"),
        ("lie", Tense.PROGRESSIVE, 3, "lying"),
        ("go", Tense.FUTURE, 3, "will go"),
    ],
)
def test_conjugate(verb, tense, person, expected):
    assert morphology.conjugate(verb, tense, person=person) == expected


@pytest.mark.parametrize(
    "singular, plural",
    [("box", "boxes"), ("city", "cities"), ("knife", "knives"), ("child", "children"), ("cat", "cats")],
)
def test_pluralize_and_singularize(singular, plural):
    assert morphology.pluralize(singular) == plural
    assert morphology.singularize(plural) == singular


@pytest.mark.parametrize(
    "word, previous, pos",
    [
        ("the", None, PartOfSpeech.DETERMINER),
        ("she", None, PartOfSpeech.PRONOUN),
        ("love", None, PartOfSpeech.VERB),
        ("beautiful", None, PartOfSpeech.ADJECTIVE),
        ("quickly", None, PartOfSpeech.ADVERB),
        ("happiness", None, PartOfSpeech.NOUN),
        ("jumping", None, PartOfSpeech.VERB),
        ("blorp", "very", PartOfSpeech.ADJECTIVE),
        ("blorp", "to", PartOfSpeech.VERB),
        ("blorp", None, PartOfSpeech.NOUN),
        ("123", None, PartOfSpeech.UNKNOWN),
    ],
)
def test_detect_pos(word, previous, pos):
    assert morphology.detect_pos(word, previous=previous) == pos


def test_extract_features():
    plural = morphology.extract_features("cats", PartOfSpeech.NOUN)
    assert plural.is_plural
    assert plural.number == "plural"

    past = morphology.extract_features("walked", PartOfSpeech.VERB)
    assert past.tense == Tense.PAST

    pronoun = morphology.extract_features("we", PartOfSpeech.PRONOUN)
    assert pronoun.person == 1
    assert pronoun.number == "plural"

    assert morphology.extract_features("never", PartOfSpeech.ADVERB).is_negated


def test_stem():
    assert morphology.stem("happiness") == "happi"
    assert morphology.stem("walked") == "walk"
