"""Feature tests for the entity caches."""

import threading
from types import SimpleNamespace
from unittest.mock import patch

from cordkit.core.cache import Caches, CacheStrategy, EntityCache
from cordkit.discord.channel import ChannelType


class TestEntityCache:
    """Tests for get/put semantics."""

    def test_get_missing_returns_none(self):
        assert EntityCache("test").get("1") is None

    def test_last_put_wins(self):
        cache = EntityCache("test")
        cache.put("1", "first")
        cache.put("1", "second")

        assert cache.get("1") == "second"
        assert len(cache) == 1

    def test_remove(self):
        cache = EntityCache("test")
        cache.put("1", "value")

        assert cache.remove("1") == "value"
        assert cache.remove("1") is None
        assert "1" not in cache

    def test_find(self):
        cache = EntityCache("test")
        cache.put("1", 10)
        cache.put("2", 20)
        cache.put("3", 30)

        assert cache.find(lambda value: value > 15) == 20
        assert cache.find(lambda value: value > 100) is None
        assert sorted(cache.find_all(lambda value: value > 15)) == [20, 30]

    def test_clear(self):
        cache = EntityCache("test")
        cache.put("1", 1)
        cache.clear()
        assert cache.all() == []


class TestEviction:
    """Tests for least-recently-used eviction."""

    def test_unbounded_by_default(self):
        cache = EntityCache("test")
        for i in range(1000):
            cache.put(i, i)
        assert len(cache) == 1000

    def test_evicts_least_recently_used(self):
        cache = EntityCache("test", max_size=2)
        with patch("cordkit.core.cache.time.monotonic", side_effect=[1.0, 2.0, 3.0, 4.0]):
            cache.put("a", 1)  # t=1
            cache.put("b", 2)  # t=2
            cache.get("a")  # t=3, b is now oldest
            cache.put("c", 3)  # t=4

        assert "a" in cache
        assert "b" not in cache
        assert "c" in cache

    def test_replacing_does_not_evict(self):
        cache = EntityCache("test", max_size=2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.put("a", 3)

        assert len(cache) == 2
        assert cache.get("b") == 2

    def test_concurrent_puts(self):
        cache = EntityCache("test")

        def worker(offset):
            for i in range(200):
                cache.put(offset * 1000 + i, i)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(cache) == 800


class TestCaches:
    def test_category_only_returns_categories(self):
        caches = Caches()
        category = SimpleNamespace(type=ChannelType.GUILD_CATEGORY)
        text = SimpleNamespace(type=ChannelType.GUILD_TEXT)
        caches.channels.put("1", category)
        caches.channels.put("2", text)

        assert caches.category("1") is category
        assert caches.category("2") is None
        assert caches.category("3") is None

    def test_member_keyed_by_guild_and_user(self):
        caches = Caches()
        member = object()
        caches.members.put(("1", "2"), member)

        assert caches.member("1", "2") is member
        assert caches.member("2", "1") is None

    def test_clear_empties_everything(self):
        caches = Caches(max_size=10)
        caches.guilds.put("1", object())
        caches.users.put("1", object())
        caches.clear()

        assert len(caches.guilds) == 0
        assert len(caches.users) == 0


class TestCacheStrategy:
    def test_yes_and_no(self):
        client = SimpleNamespace(gateway_feeds_cache=True)
        assert CacheStrategy.YES.should_cache(client) is True
        assert CacheStrategy.NO.should_cache(client) is False

    def test_no_ws_depends_on_gateway(self):
        """NO_WS caches only while no gateway keeps the caches fresh."""
        assert CacheStrategy.NO_WS.should_cache(SimpleNamespace(gateway_feeds_cache=False))
        assert not CacheStrategy.NO_WS.should_cache(SimpleNamespace(gateway_feeds_cache=True))
