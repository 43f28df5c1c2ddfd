"""Settings — env-driven, bare host:port normalized to a redis:// URL."""

from records_api.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.redis_db == 0
    assert settings.redis_password is None
    assert settings.record_key_prefix == "record:"
    assert settings.store_startup_timeout_seconds == 5.0
    assert settings.port == 45000


def test_reads_redis_url_from_env(monkeypatch):
    monkeypatch.setenv("REDIS_URL", "redis://cache:6379/0")
    assert Settings(_env_file=None).redis_url == "redis://cache:6379/0"


def test_bare_address_gets_scheme(monkeypatch):
    monkeypatch.setenv("REDIS_URL", "localhost:6379")
    assert Settings(_env_file=None).redis_url == "redis://localhost:6379"


def test_tls_url_untouched():
    assert Settings(redis_url="rediss://cache:6380").redis_url == "rediss://cache:6380"
