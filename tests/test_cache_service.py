import pytest

from services.cache_service import DatasetCache, create_cache_decorator


@pytest.fixture
def cache(tmp_path):
    dataset_cache = DatasetCache(directory=str(tmp_path / "cache"), size_limit=10e6, ttl=60, max_memory_items=2)
    yield dataset_cache
    dataset_cache.close()


def test_values_round_trip_through_memory_and_disk(cache):
    cache.set("key", {"regions": ["A"]})

    assert cache.get("key") == {"regions": ["A"]}
    assert cache.has_disk


def test_pruned_memory_entries_are_read_back_from_disk(cache):
    for index in range(3):
        cache.set(f"key-{index}", index)

    assert len(cache._memory_cache) == 2
    assert cache.get("key-0") == 0


def test_missing_key_returns_none(cache):
    assert cache.get("absent") is None


def test_clear_empties_both_levels(cache):
    cache.set("key", 1)

    cache.clear()

    assert cache.get("key") is None


def test_decorator_calls_function_once_per_arguments(cache):
    calls = []

    @create_cache_decorator(cache, ttl=60)
    def load(path):
        calls.append(path)
        return f"data from {path}"

    assert load("a.csv") == "data from a.csv"
    assert load("a.csv") == "data from a.csv"
    assert load("b.csv") == "data from b.csv"
    assert calls == ["a.csv", "b.csv"]


def test_decorator_does_not_cache_errors(cache):
    calls = []

    @create_cache_decorator(cache)
    def load(path):
        calls.append(path)
        raise ValueError("broken file")

    for _ in range(2):
        with pytest.raises(ValueError):
            load("a.csv")
    assert calls == ["a.csv", "a.csv"]
