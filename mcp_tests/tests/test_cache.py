import core.cache as cache_mod
from core.cache import TTLCache


def _fake_clock(monkeypatch):
    t = {"now": 0.0}

    def fake_monotonic():
        return t["now"]

    monkeypatch.setattr(cache_mod.time, "monotonic", fake_monotonic)
    return t


def test_ttlcache_set_get_and_expire(monkeypatch):
    t = _fake_clock(monkeypatch)

    c = TTLCache(ttl_minutes=1)
    assert c.ttl_ms == 60_000

    c.set("k", "v")
    assert c.get("k") == "v"

    # Exactly at the TTL the entry is still valid
    t["now"] = 60.0
    assert c.get("k") == "v"

    t["now"] = 60.001
    assert c.get("k") is None


def test_ttlcache_expired_entry_is_deleted_on_read(monkeypatch):
    t = _fake_clock(monkeypatch)

    c = TTLCache(ttl_minutes=1)
    c.set("a", 1)
    c.set("b", 2)
    assert len(c) == 2

    t["now"] = 61.0
    assert c.get("a") is None
    assert len(c) == 1


def test_ttlcache_missing_key_returns_none():
    c = TTLCache()
    assert c.get("nope") is None


def test_ttlcache_overwrite_resets_ttl(monkeypatch):
    t = _fake_clock(monkeypatch)

    c = TTLCache(ttl_minutes=1)
    c.set("k", "v1")

    t["now"] = 30.0
    c.set("k", "v2")
    assert c.get("k") == "v2"

    # 80s after the first set, 50s after the second
    t["now"] = 80.0
    assert c.get("k") == "v2"

    t["now"] = 91.0
    assert c.get("k") is None


def test_ttlcache_clear_removes_everything(monkeypatch):
    _fake_clock(monkeypatch)

    c = TTLCache()
    c.set("a", 1)
    c.set("b", 2)

    c.clear()

    assert c.get("a") is None
    assert c.get("b") is None
    assert len(c) == 0


def test_ttlcache_end_to_end_one_minute(monkeypatch):
    t = _fake_clock(monkeypatch)

    c = TTLCache(ttl_minutes=1)
    c.set("abc", [1, 2, 3])
    assert c.get("abc") == [1, 2, 3]

    t["now"] = 61.0
    assert c.get("abc") is None


def test_ttlcache_default_ttl_is_one_hour():
    assert TTLCache().ttl_ms == 60 * 60 * 1000
