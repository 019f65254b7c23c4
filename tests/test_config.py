import pytest

from conftest import make_config
from lingopivot.config import Config


def test_defaults_are_valid():
    config = make_config()
    assert config.validate() == []
    assert not config.model_enabled


@pytest.mark.parametrize(
    "overrides, problem",
    [
        ({"model_backend": "marian"}, "LINGOPIVOT_MODEL_BACKEND"),
        ({"model_backend": "deepl", "deepl_api_key": ""}, "DEEPL_API_KEY"),
        ({"model_backend": "openai", "openai_api_key": ""}, "OPENAI_API_KEY"),
        ({"fallback_confidence_threshold": 1.5}, "LINGOPIVOT_FALLBACK_THRESHOLD"),
        ({"cache_size": 0}, "LINGOPIVOT_CACHE_SIZE"),
    ],
)
def test_validate_reports_problems(overrides, problem):
    errors = make_config(**overrides).validate()
    assert any(problem in error for error in errors)


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("LINGOPIVOT_CACHE_TTL", "60")
    monkeypatch.setenv("LINGOPIVOT_MODEL_BACKEND", "OpenAI")
    monkeypatch.setenv("LINGOPIVOT_ENABLE_IDIOMS", "off")
    monkeypatch.setenv("LINGOPIVOT_IDIOMS_PATH", "")

    config = Config()

    assert config.cache_ttl_seconds == 60.0
    assert config.model_backend == "openai"
    assert config.enable_idioms is False
    assert config.idioms_path is None


def test_model_enabled_needs_fallback_switch():
    assert make_config(model_backend="deepl").model_enabled
    assert not make_config(model_backend="deepl", enable_model_fallback=False).model_enabled
