from snippetbox.config import Settings, create_adapter, create_store
from snippetbox.storage import FileAdapter, MemoryAdapter, RedisAdapter


def test_settings_defaults(monkeypatch):
    for name in ("SNIPPETS_BACKEND", "SNIPPETS_DIR", "SNIPPETS_STORAGE_KEY", "SNIPPETS_LOG_LEVEL", "REDIS_URL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings == Settings()
    assert settings.backend == "file"
    assert settings.storage_key == "codeSnippets"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SNIPPETS_BACKEND", " Redis ")
    monkeypatch.setenv("REDIS_URL", "redis://cache:6379/1")
    monkeypatch.setenv("SNIPPETS_STORAGE_KEY", "mySnippets")

    settings = Settings.from_env()

    assert settings.backend == "redis"
    assert settings.redis_url == "redis://cache:6379/1"
    assert settings.storage_key == "mySnippets"


def test_unknown_backend_falls_back_to_file(monkeypatch):
    monkeypatch.setenv("SNIPPETS_BACKEND", "cloud")

    assert Settings.from_env().backend == "file"


def test_overrides_skip_none():
    settings = Settings(backend="memory").with_overrides(backend=None, storage_key="other")

    assert settings.backend == "memory"
    assert settings.storage_key == "other"


def test_create_adapter_per_backend(tmp_path):
    assert isinstance(create_adapter(Settings(backend="memory")), MemoryAdapter)
    assert isinstance(create_adapter(Settings(backend="file", data_dir=str(tmp_path))), FileAdapter)
    assert isinstance(create_adapter(Settings(backend="redis")), RedisAdapter)


def test_create_store_loads_with_configured_key():
    adapter = MemoryAdapter({"custom": b'[{"title": "loaded"}]'})

    store = create_store(Settings(backend="memory", storage_key="custom"), adapter=adapter)

    assert store.key == "custom"
    assert store.get(0).title == "loaded"
