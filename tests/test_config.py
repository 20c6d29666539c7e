import pytest
from builderkit.config import Settings, load_settings
from builderkit.domain.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("BUILDERKIT_HOST", "BUILDERKIT_PORT", "BUILDERKIT_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_defaults_without_env():
    assert load_settings() == Settings(host="127.0.0.1", port=8080, log_level="INFO")


def test_reads_env(monkeypatch):
    monkeypatch.setenv("BUILDERKIT_HOST", "0.0.0.0")
    monkeypatch.setenv("BUILDERKIT_PORT", "9000")
    monkeypatch.setenv("BUILDERKIT_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.host == "0.0.0.0"
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"


def test_invalid_port_raises(monkeypatch):
    monkeypatch.setenv("BUILDERKIT_PORT", "eighty")

    with pytest.raises(ConfigError) as exc:
        load_settings()

    assert exc.value.key == "BUILDERKIT_PORT"


def test_invalid_log_level_raises(monkeypatch):
    monkeypatch.setenv("BUILDERKIT_LOG_LEVEL", "loud")

    with pytest.raises(ConfigError) as exc:
        load_settings()

    assert exc.value.key == "BUILDERKIT_LOG_LEVEL"
    assert "LOUD" in str(exc.value)
