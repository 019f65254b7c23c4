import pytest

from lingopivot.languages.registry import LanguageRegistry
from lingopivot.transliteration.script_blocks import SCRIPT_BLOCKS


def _language_for(script):
    return next(p.name for p in LanguageRegistry().profiles() if p.script.lower() == script)


MULTI_LETTER_CONSONANTS = [
    (_language_for(script), block, key)
    for script, block in SCRIPT_BLOCKS.items()
    for key in block.consonants
    if len(key) > 1
]


@pytest.mark.parametrize(
    "language, block, key",
    MULTI_LETTER_CONSONANTS,
    ids=[f"{block.name}-{key}" for _, block, key in MULTI_LETTER_CONSONANTS],
)
def test_longest_consonant_key_wins(transliterator, language, block, key):
    expected = block.consonants[key]
    if not block.is_brahmic:
        expected += block.vowels["a"]
    assert transliterator.to_native(key + "a", language) == expected


@pytest.mark.parametrize(
    "latin, native",
    [
        ("kha", "ख"),
        ("gha", "घ"),
        ("chha", "छ"),
        ("jha", "झ"),
        ("Tha", "ठ"),
        ("Dha", "ढ"),
        ("tha", "थ"),
        ("dha", "ध"),
        ("pha", "फ"),
        ("bha", "भ"),
        ("sha", "श"),
        ("Sha", "ष"),
        ("ksha", "क्ष"),
        ("gya", "ज्ञ"),
    ],
)
def test_devanagari_multi_letter_consonants(transliterator, latin, native):
    assert transliterator.to_native(latin, "hindi") == native


@pytest.mark.parametrize(
    "latin, native",
    [
        ("kha", "ఖ"),
        ("chha", "ఛ"),
        ("Tha", "ఠ"),
        ("sha", "శ"),
        ("ksha", "క్ష"),
    ],
)
def test_telugu_multi_letter_consonants(transliterator, latin, native):
    assert transliterator.to_native(latin, "telugu") == native


@pytest.mark.parametrize(
    "latin, language, native",
    [
        ("namaste", "hindi", "नमस्ते"),
        ("kyA", "hindi", "क्या"),
        ("aam", "hindi", "आम"),
        ("do 2", "hindi", "दो 2"),
        ("Bagunnav", "telugu", "బగున్నవ"),
        ("privet", "russian", "привет"),
    ],
)
def test_to_native_words(transliterator, latin, language, native):
    assert transliterator.to_native(latin, language) == native


def test_consonant_clusters_get_virama(transliterator):
    assert transliterator.to_native("nn", "hindi") == "न्न"


def test_to_latin_restores_inherent_vowel(transliterator):
    assert transliterator.to_latin("नमस्ते", "hindi") == "namaste"
    assert transliterator.to_latin("क्या", "hindi") == "kyaa"


def test_latin_script_languages_are_untouched(transliterator):
    assert not transliterator.has_transliteration("spanish")
    assert transliterator.to_native("hola", "spanish") == "hola"
    assert transliterator.to_latin("hola", "spanish") == "hola"


def test_text_already_in_target_form_is_untouched(transliterator):
    assert transliterator.to_native("नमस्ते", "hindi") == "नमस्ते"
    assert transliterator.to_latin("namaste", "hindi") == "namaste"


@pytest.mark.parametrize("text", ["", "   "])
def test_live_preview_of_blank_input(transliterator, text):
    assert transliterator.live_preview(text, "hindi") == ""


def test_live_preview_renders_partial_input(transliterator):
    assert transliterator.live_preview("nam", "hindi") == "नम"


def test_script_block_lookup(transliterator):
    assert transliterator.script_block("hindi").name == "devanagari"
    assert transliterator.script_block("marathi").name == "devanagari"
    assert transliterator.script_block("english") is None
    assert transliterator.has_transliteration("bangla")


@pytest.mark.parametrize(
    "latin, native",
    [
        ("Harry", "हर्र्य"),
        ("Namaste", "नमस्ते"),
        ("Tha", "ठ"),
        ("naH", "नः"),
    ],
)
def test_capital_starting_a_word_reads_as_lowercase(transliterator, latin, native):
    assert transliterator.to_native(latin, "hindi") == native
