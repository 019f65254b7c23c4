import json

import pytest
from click.testing import CliRunner

from lingopivot.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_translate(runner):
    result = runner.invoke(cli, ["translate", "How are you?", "-t", "hindi"])

    assert result.exit_code == 0, result.output
    assert "आप कैसे हैं?" in result.output
    assert "idiom-replacement" in result.output


def test_translate_json(runner):
    result = runner.invoke(cli, ["translate", "Hello", "--target", "es", "--json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["text"] == "Hola"
    assert data["target_language"] == "spanish"
    assert data["method"] == "phrase-match"
    assert data["direction"] == "english-source"


def test_translate_requires_target(runner):
    result = runner.invoke(cli, ["translate", "Hello"])

    assert result.exit_code != 0
    assert "--target" in result.output


def test_chat(runner):
    result = runner.invoke(cli, ["chat", "Hello", "--sender", "english", "--receiver", "spanish"])

    assert result.exit_code == 0, result.output
    assert "Hola" in result.output
    assert "english-to-latin" in result.output


def test_languages(runner):
    result = runner.invoke(cli, ["languages"])

    assert result.exit_code == 0, result.output
    assert "Supported languages" in result.output
    assert "hindi" in result.output


def test_languages_filtered_by_script(runner):
    result = runner.invoke(cli, ["languages", "--script", "telugu"])

    assert result.exit_code == 0, result.output
    assert "Supported languages (1)" in result.output


def test_transliterate(runner):
    result = runner.invoke(cli, ["transliterate", "namaste", "-l", "hindi"])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "नमस्ते"


def test_transliterate_reverse(runner):
    result = runner.invoke(cli, ["transliterate", "नमस्ते", "-l", "hi", "--reverse"])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "namaste"


def test_transliterate_latin_language(runner):
    result = runner.invoke(cli, ["transliterate", "hola", "-l", "spanish"])

    assert result.exit_code == 0, result.output
    assert "No transliteration available for spanish" in result.output


def test_idioms(runner):
    result = runner.invoke(cli, ["idioms", "-l", "hindi"])

    assert result.exit_code == 0, result.output
    assert "Idioms (" in result.output


def test_analyze(runner):
    result = runner.invoke(cli, ["analyze", "I love cats"])

    assert result.exit_code == 0, result.output
    assert "S=I V=love O=cats" in result.output
