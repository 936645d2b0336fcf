"""
In-memory query cache keyed by tuples such as ("foods", page, limit, name).
"""
from typing import Any, Callable, Dict, Hashable, Tuple

QueryKey = Tuple[Hashable, ...]


class QueryCache:

    def __init__(self):
        self._entries: Dict[QueryKey, Any] = {}
        self.hits = 0
        self.misses = 0

    def __contains__(self, key: QueryKey) -> bool:
        return key in self._entries

    def __len__(self):
        return len(self._entries)

    def fetch(self, key: QueryKey, loader: Callable[[], Any]) -> Any:
        """Cached value for `key`, calling `loader` on a miss.

        Nothing is stored when `loader` raises.
        """
        if key in self._entries:
            self.hits += 1
            return self._entries[key]
        self.misses += 1
        value = loader()
        self._entries[key] = value
        return value

    def invalidate(self, *prefix: Hashable) -> int:
        """Drop every key starting with `prefix`. Returns how many were dropped."""
        stale = [key for key in self._entries if key[:len(prefix)] == prefix]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def stats(self) -> dict:
        return {"size": len(self._entries), "hits": self.hits, "misses": self.misses}
