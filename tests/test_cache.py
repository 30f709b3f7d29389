"""Tests for the in-memory TTL cache."""

from unittest.mock import patch

from clarity.utils.cache import InMemoryCache


class TestInMemoryCache:
    """Test suite for InMemoryCache."""

    def setup_method(self):
        """Set up test fixtures."""
        self.cache = InMemoryCache(default_ttl=10)

    def test_set_and_get(self):
        self.cache.set("key", "value")

        assert self.cache.get("key") == "value"
        assert len(self.cache) == 1

    def test_missing_key(self):
        assert self.cache.get("missing") is None

    def test_expired_entries_are_dropped(self):
        """Test that entries past their TTL are removed on access."""
        with patch("clarity.utils.cache.time.time", return_value=1000.0):
            self.cache.set("key", "value", ttl=5)

        with patch("clarity.utils.cache.time.time", return_value=1006.0):
            assert self.cache.get("key") is None

        assert len(self.cache) == 0

    def test_clear(self):
        self.cache.set("a", 1)
        self.cache.set("b", 2)

        self.cache.clear()

        assert len(self.cache) == 0

    def test_create_key_is_stable(self):
        """Test that keys depend only on the text."""
        assert InMemoryCache.create_key("hello") == InMemoryCache.create_key("hello")
        assert InMemoryCache.create_key("hello") != InMemoryCache.create_key("Hello")

    def test_expired_entries_are_purged_on_write(self):
        """Test that writes sweep entries that expired without being read."""
        with patch("clarity.utils.cache.time.time", return_value=1000.0):
            for i in range(100):
                self.cache.set(f"job_{i}", i, ttl=5)

        with patch("clarity.utils.cache.time.time", return_value=1100.0):
            self.cache.set("fresh", "value")
            assert len(self.cache) == 1
            assert self.cache.get("fresh") == "value"

    def test_len_ignores_expired_entries(self):
        cache = InMemoryCache(default_ttl=0)
        with patch("clarity.utils.cache.time.time", return_value=1000.0):
            for i in range(1000):
                cache.set(f"key_{i}", i)

        with patch("clarity.utils.cache.time.time", return_value=1001.0):
            assert len(cache) == 0

    def test_max_entries_evicts_oldest(self):
        """Test that a full cache drops its oldest entries first."""
        cache = InMemoryCache(max_entries=3)
        for key in ("a", "b", "c", "d"):
            cache.set(key, key)

        assert len(cache) == 3
        assert cache.get("a") is None
        assert cache.get("d") == "d"

    def test_overwrite_refreshes_eviction_order(self):
        cache = InMemoryCache(max_entries=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("a", 3)
        cache.set("c", 4)

        assert cache.get("a") == 3
        assert cache.get("b") is None
