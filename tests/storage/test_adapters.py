import pytest

from snippetbox.snippet import SnippetStore
from snippetbox.storage import FileAdapter, MemoryAdapter, PersistenceAdapter, RedisAdapter


class _FakeRedis:
    def __init__(self, *, decode_responses=False):
        self.decode_responses = decode_responses
        self.values = {}
        self.set_calls = []

    def get(self, key):
        value = self.values.get(key)
        if value is not None and self.decode_responses:
            return value.decode("utf-8")
        return value

    def set(self, key, value, ex=None):
        self.set_calls.append({"key": key, "ex": ex})
        self.values[key] = value
        return True


@pytest.mark.parametrize(
    "adapter",
    [MemoryAdapter(), FileAdapter("unused"), RedisAdapter(_FakeRedis())],
)
def test_adapters_satisfy_the_protocol(adapter):
    assert isinstance(adapter, PersistenceAdapter)


def test_file_adapter_round_trip(tmp_path):
    adapter = FileAdapter(tmp_path / "data")

    assert adapter.get("codeSnippets") is None

    adapter.set("codeSnippets", b"[]")

    assert adapter.get("codeSnippets") == b"[]"
    assert adapter.path_for("codeSnippets") == tmp_path / "data" / "codeSnippets.json"
    assert [path.name for path in (tmp_path / "data").iterdir()] == ["codeSnippets.json"]


def test_file_adapter_sanitizes_keys(tmp_path):
    adapter = FileAdapter(tmp_path)

    assert adapter.path_for("../etc/passwd").parent == tmp_path


def test_file_adapter_backs_a_store(tmp_path):
    store = SnippetStore(FileAdapter(tmp_path))
    store.load()
    store.create({"title": "on disk", "code": "int x;"})

    reloaded = SnippetStore(FileAdapter(tmp_path))

    assert [snippet.title for snippet in reloaded.load()] == ["on disk"]


def test_redis_adapter_prefixes_keys_and_returns_bytes():
    client = _FakeRedis(decode_responses=True)
    adapter = RedisAdapter(client)

    adapter.set("codeSnippets", b"[]")

    assert "snippetbox:codeSnippets" in client.values
    assert adapter.get("codeSnippets") == b"[]"
    assert adapter.get("missing") is None
    assert client.set_calls == [{"key": "snippetbox:codeSnippets", "ex": None}]


def test_redis_adapter_applies_ttl():
    client = _FakeRedis()
    adapter = RedisAdapter(client, ttl_seconds=60)

    adapter.set("codeSnippets", b"[]")

    assert client.set_calls == [{"key": "snippetbox:codeSnippets", "ex": 60}]


def test_redis_adapter_from_url(monkeypatch):
    client = _FakeRedis()
    monkeypatch.setattr(
        "snippetbox.storage.redis_adapter.redis.Redis.from_url",
        lambda url: client,
    )

    adapter = RedisAdapter.from_url("redis://example:6379/0")

    assert adapter.redis is client
