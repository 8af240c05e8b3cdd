"""Tests for ttl_cache: expiry, stats and memoisation."""

from ttl_cache import TTLCache


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestTTLCache:
    def test_get_and_has(self):
        cache = TTLCache(default_ttl=10, clock=FakeClock())
        cache.set('a', 1)

        assert cache.get('a') == 1
        assert cache.has('a')
        assert cache.get('missing') is None
        assert cache.get('missing', 'default') == 'default'

    def test_entries_expire(self):
        clock = FakeClock()
        cache = TTLCache(default_ttl=10, clock=clock)
        cache.set('a', 1)

        clock.now = 10
        assert cache.has('a')

        clock.now = 10.5
        assert not cache.has('a')
        assert cache.get('a') is None
        assert len(cache) == 0

    def test_per_entry_ttl(self):
        clock = FakeClock()
        cache = TTLCache(default_ttl=10, clock=clock)
        cache.set('short', 1, ttl=1)
        cache.set('long', 2)

        clock.now = 5
        assert cache.get('short') is None
        assert cache.get('long') == 2

    def test_set_purges_expired_entries(self):
        clock = FakeClock()
        cache = TTLCache(default_ttl=1, clock=clock)
        cache.set('old', 1)

        clock.now = 5
        cache.set('new', 2)
        assert len(cache) == 1

    def test_stats(self):
        clock = FakeClock()
        cache = TTLCache(default_ttl=10, clock=clock)
        cache.set('a', 1, ttl=1)
        cache.set('b', 2)

        clock.now = 2
        assert cache.stats() == {'active': 1, 'expired': 1, 'total': 2}

    def test_delete_and_clear(self):
        cache = TTLCache(clock=FakeClock())
        cache.set('a', 1)
        cache.set('b', 2)

        cache.delete('a')
        cache.delete('never-set')
        assert not cache.has('a')

        cache.clear()
        assert len(cache) == 0

    def test_falsy_values_are_cached(self):
        cache = TTLCache(clock=FakeClock())
        cache.set('zero', 0)
        assert cache.has('zero')
        assert cache.get('zero', 'default') == 0


class TestMemoize:
    def test_caches_results(self):
        cache = TTLCache(clock=FakeClock())
        calls = []

        @cache.memoize
        def square(x):
            calls.append(x)
            return x * x

        assert square(3) == 9
        assert square(3) == 9
        assert square(4) == 16
        assert calls == [3, 4]

    def test_custom_key_and_ttl(self):
        clock = FakeClock()
        cache = TTLCache(clock=clock)
        calls = []

        @cache.memoize(key=lambda name, **kwargs: name, ttl=5)
        def lookup(name, suffix=''):
            calls.append(name)
            return name + suffix

        assert lookup('a', suffix='!') == 'a!'
        assert lookup('a', suffix='?') == 'a!'

        clock.now = 6
        assert lookup('a', suffix='?') == 'a?'
        assert calls == ['a', 'a']

    def test_none_results_are_cached(self):
        cache = TTLCache(clock=FakeClock())
        calls = []

        @cache.memoize
        def nothing():
            calls.append(1)

        nothing()
        nothing()
        assert calls == [1]
