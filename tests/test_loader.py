import asyncio
import json

import pytest

from conftest import make_config
from lingopivot.dictionary.idioms import IdiomDictionary
from lingopivot.dictionary.loader import DataLoader
from lingopivot.dictionary.phrases import PhraseDictionary
from lingopivot.models.idiom_entry import IdiomCategory
from lingopivot.models.language_profile import WordOrder


def write_json(path, data):
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return str(path)


@pytest.fixture
def build_loader(registry):
    def build(**paths):
        idioms = IdiomDictionary()
        phrases = PhraseDictionary()
        loader = DataLoader(make_config(**paths), registry, idioms, phrases)
        return loader, idioms, phrases

    return build


async def test_nothing_configured(build_loader):
    loader, idioms, phrases = build_loader()
    before = (len(idioms), len(phrases))

    assert await loader.load_all() == {"grammar": 0, "idioms": 0, "phrases": 0}
    assert (len(idioms), len(phrases)) == before


async def test_valid_files_are_merged(tmp_path, build_loader, registry):
    loader, idioms, phrases = build_loader(
        idioms_path=write_json(tmp_path / "idioms.json", [
            {
                "phrase": "spill the beans",
                "meaning": "reveal a secret",
                "translations": {"Spanish": "irse de la lengua"},
                "category": "idiom",
            },
        ]),
        phrases_path=write_json(tmp_path / "phrases.json", {
            "good luck": {"hindi": "शुभकामनाएँ"},
            "hello": {"hindi": "हैलो"},
        }),
        grammar_path=write_json(tmp_path / "grammar.json", {
            "languages": [{"name": "Klingon", "code": "tlh", "word_order": "sov"}],
        }),
    )

    loaded = await loader.load_all()

    assert loaded == {"grammar": 1, "idioms": 1, "phrases": 2}
    entry = idioms.lookup("Spill the beans")
    assert entry.translation_for("spanish") == "irse de la lengua"
    assert entry.category == IdiomCategory.IDIOM
    assert phrases.lookup("good luck", "hindi") == "शुभकामनाएँ"
    assert phrases.lookup("hello", "hindi") == "हैलो"
    assert phrases.lookup("hello", "telugu") == "నమస్కారం"
    assert registry.normalize("tlh") == "klingon"
    assert registry.get_profile("klingon").word_order == WordOrder.SOV
    assert loader.status() == {"grammar": True, "idioms": True, "phrases": True}


async def test_missing_file_is_skipped(tmp_path, build_loader, caplog):
    loader, idioms, _ = build_loader(idioms_path=str(tmp_path / "missing.json"))
    count = len(idioms)

    assert await loader.load_idioms() == 0
    assert len(idioms) == count
    assert "file not found" in caplog.text


async def test_invalid_json_is_skipped(tmp_path, build_loader, caplog):
    path = tmp_path / "phrases.json"
    path.write_text("{not json", encoding="utf-8")
    loader, _, phrases = build_loader(phrases_path=str(path))

    assert await loader.load_phrases() == 0
    assert "invalid JSON" in caplog.text
    assert phrases.lookup("hello", "hindi") == "नमस्ते"


async def test_malformed_rows_are_skipped(tmp_path, build_loader, caplog):
    loader, idioms, _ = build_loader(
        idioms_path=write_json(tmp_path / "idioms.json", [{"meaning": "no phrase"}]),
    )

    assert await loader.load_idioms() == 0
    assert "malformed entry" in caplog.text


async def test_loads_run_once(tmp_path, build_loader):
    loader, _, _ = build_loader(
        phrases_path=write_json(tmp_path / "phrases.json", {"good luck": {"hindi": "शुभकामनाएँ"}}),
    )

    first, second = await asyncio.gather(loader.load_phrases(), loader.load_phrases())
    assert first == second == 1
    assert await loader.load_phrases() == 1
