from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from conftest import FakeBackend
from lingopivot.exceptions import BackendError
from lingopivot.translation.model_pipeline import ModelPipeline
from lingopivot.web.app import create_app


@pytest.fixture
def client(router):
    app = create_app(translator=router)
    with TestClient(app) as client:
        yield client


def test_translate(client):
    response = client.post(
        "/api/translate",
        json={"text": "How are you?", "sourceLang": "english", "targetLang": "hindi"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["translatedText"] == "आप कैसे हैं?"
    assert data["translationPath"] == "english-source"
    assert data["method"] == "idiom-replacement"
    assert data["success"] is True
    assert data["isTranslated"] is True
    assert data["englishPivot"] is None
    assert "hindi" in data["supportedLanguages"]


def test_translate_pivot_reports_english(client):
    response = client.post(
        "/api/translate",
        json={"text": "नमस्ते", "sourceLang": "hi", "targetLang": "te"},
    )

    data = response.json()
    assert data["translatedText"] == "నమస్కారం"
    assert data["sourceLang"] == "hindi"
    assert data["targetLang"] == "telugu"
    assert data["englishPivot"] == "Hello"


def test_translate_empty_text_is_allowed(client):
    response = client.post(
        "/api/translate", json={"text": "", "sourceLang": "english", "targetLang": "hindi"}
    )

    assert response.status_code == 200
    assert response.json()["translatedText"] == ""


@pytest.mark.parametrize(
    "body, missing",
    [
        ({"sourceLang": "english", "targetLang": "hindi"}, "text"),
        ({"text": "hi", "targetLang": "hindi"}, "sourceLang"),
        ({"text": "hi", "sourceLang": "english", "targetLang": "  "}, "targetLang"),
    ],
)
def test_translate_missing_fields(client, body, missing):
    response = client.post("/api/translate", json=body)

    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert missing in data["error"]
    assert "english" in data["supportedLanguages"]


def test_invalid_body_lists_supported_languages(client):
    response = client.post("/api/translate", json={"text": ["not", "a", "string"]})

    assert response.status_code == 400
    assert "hindi" in response.json()["supportedLanguages"]


def test_translate_error_returns_500(client, router, monkeypatch):
    async def broken(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(router, "translate_async", broken)
    response = client.post(
        "/api/translate", json={"text": "hi", "sourceLang": "english", "targetLang": "hindi"}
    )

    assert response.status_code == 500
    assert "boom" in response.json()["error"]
    assert response.json()["supportedLanguages"]


def test_chat(client):
    response = client.post(
        "/api/chat",
        json={"text": "Hello", "senderLang": "english", "receiverLang": "spanish"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["senderView"] == "Hello"
    assert data["receiverView"] == "Hola"
    assert data["englishCore"] == "Hello"
    assert data["translationPath"] == "english-to-latin"
    assert data["success"] is True


def test_chat_missing_receiver(client):
    response = client.post("/api/chat", json={"text": "Hello", "senderLang": "english"})

    assert response.status_code == 400
    assert "receiverLang" in response.json()["error"]


def test_languages(client):
    data = client.get("/api/languages").json()

    hindi = next(lang for lang in data["languages"] if lang["name"] == "hindi")
    assert hindi == {
        "name": "hindi",
        "code": "hi",
        "nativeName": "हिन्दी",
        "script": "Devanagari",
        "rtl": False,
        "wordOrder": "SOV",
    }
    assert data["supportedLanguages"] == sorted(data["supportedLanguages"])


def test_health(client):
    client.post("/api/translate", json={"text": "Hello", "sourceLang": "english", "targetLang": "hindi"})
    data = client.get("/api/health").json()

    assert data["status"] == "ok"
    assert data["cache"]["size"] == 1
    assert data["model"] is None


def test_model_progress_without_backend(client):
    assert client.get("/api/models/progress").status_code == 404


def test_model_progress_stream(router):
    router.model_pipeline = ModelPipeline(FakeBackend())
    with TestClient(create_app(translator=router)) as client:
        response = client.get("/api/models/progress", params={"load": "true"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/event-stream")
    assert "event: complete" in response.text


def test_degraded_translation_reports_error(router):
    pipeline = MagicMock(spec=ModelPipeline)
    pipeline.translate = AsyncMock(side_effect=BackendError("fake", "boom"))
    router.model_pipeline = pipeline

    with TestClient(create_app(translator=router)) as client:
        response = client.post(
            "/api/translate", json={"text": "xyzzy", "sourceLang": "english", "targetLang": "spanish"}
        )

    assert response.status_code == 200
    data = response.json()
    assert data["translatedText"] == "xyzzy"
    assert data["success"] is False
    assert "boom" in data["error"]
