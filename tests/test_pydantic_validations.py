import pytest
from pydantic import ValidationError

from query_iterator.config.settings import IteratorConfig, Settings


@pytest.mark.parametrize("size", [0, -1, 100_001])
def test_chunk_size_bounds(size):
    with pytest.raises(ValidationError):
        IteratorConfig(default_chunk_size=size)


def test_iterator_config_is_frozen_and_strict():
    cfg = IteratorConfig(default_chunk_size=50)

    with pytest.raises(ValidationError):
        cfg.default_chunk_size = 10

    with pytest.raises(ValidationError) as e:
        IteratorConfig(default_chunk_size=10, prefetch=True)
    assert "prefetch" in str(e.value)


def test_settings_read_env(monkeypatch):
    monkeypatch.setenv("QUERY_ITERATOR_CHUNK_SIZE", "250")
    monkeypatch.setenv("QUERY_ITERATOR_DATABASE_URL", "sqlite+pysqlite:///demo.db")

    settings = Settings()

    assert settings.chunk_size == 250
    assert settings.database_url == "sqlite+pysqlite:///demo.db"
    assert settings.iterator_config() == IteratorConfig(default_chunk_size=250)


def test_settings_reject_bad_chunk_size_from_env(monkeypatch):
    monkeypatch.setenv("QUERY_ITERATOR_CHUNK_SIZE", "0")

    with pytest.raises(ValidationError) as e:
        Settings()
    assert "chunk_size" in str(e.value)
