"""In-memory entity caches keyed by identifier."""

import logging
import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Generic, Hashable, List, Optional, TypeVar

from cordkit.discord.channel import ChannelType

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class CachedItem(Generic[T]):
    """A cached entity with access metadata."""

    value: T
    created_at: float
    last_accessed_at: float  # For true LRU eviction


class EntityCache(Generic[T]):
    """
    A key to entity map with get/put semantics.

    Features:
    - Thread-safe operations; the last ``put`` for a key wins
    - Optional size limit with least-recently-used eviction
    - Lookups never raise, they return ``None``
    """

    def __init__(self, name: str, max_size: int = 0):
        """
        Initialize the cache.

        Args:
            name: Used in log messages.
            max_size: Maximum number of entries; 0 means unbounded.
        """
        self.name = name
        self.max_size = max_size
        self._items: Dict[Hashable, CachedItem[T]] = {}
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Optional[T]:
        with self._lock:
            item = self._items.get(key)
            if item is None:
                return None
            item.last_accessed_at = time.monotonic()
            return item.value

    def put(self, key: Hashable, value: T) -> T:
        with self._lock:
            if self.max_size and len(self._items) >= self.max_size and key not in self._items:
                self._evict_oldest()
            now = time.monotonic()
            self._items[key] = CachedItem(value=value, created_at=now, last_accessed_at=now)
        return value

    def remove(self, key: Hashable) -> Optional[T]:
        with self._lock:
            item = self._items.pop(key, None)
        return item.value if item is not None else None

    def all(self) -> List[T]:
        with self._lock:
            return [item.value for item in self._items.values()]

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for value in self.all():
            if predicate(value):
                return value
        return None

    def find_all(self, predicate: Callable[[T], bool]) -> List[T]:
        return [value for value in self.all() if predicate(value)]

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._items

    def _evict_oldest(self) -> None:
        """Evict the least recently used entry. Caller holds the lock."""
        if not self._items:
            return
        lru_key = min(self._items, key=lambda k: self._items[k].last_accessed_at)
        del self._items[lru_key]
        logger.debug("Evicted LRU entry %s from %s cache", lru_key, self.name)


class Caches:
    """The per-resource caches a client reads back-references from."""

    def __init__(self, max_size: int = 0):
        self.guilds = EntityCache("guild", max_size)
        self.channels = EntityCache("channel", max_size)
        self.messages = EntityCache("message", max_size)
        self.members = EntityCache("member", max_size)
        self.users = EntityCache("user", max_size)
        self.stage_instances = EntityCache("stage_instance", max_size)

    def category(self, channel_id: Hashable):
        """Return the cached channel only if it is a category."""
        channel = self.channels.get(channel_id)
        if channel is None or channel.type != ChannelType.GUILD_CATEGORY:
            return None
        return channel

    def member(self, guild_id: Hashable, user_id: Hashable):
        return self.members.get((guild_id, user_id))

    def clear(self) -> None:
        for cache in (
            self.guilds,
            self.channels,
            self.messages,
            self.members,
            self.users,
            self.stage_instances,
        ):
            cache.clear()


class CacheStrategy(Enum):
    """Whether the entity-construction step writes what it builds to the cache."""

    YES = "yes"
    NO = "no"
    NO_WS = "no_ws"
    """Cache only when no gateway connection feeds the caches already."""

    def should_cache(self, client) -> bool:
        if self is CacheStrategy.YES:
            return True
        if self is CacheStrategy.NO:
            return False
        return not client.gateway_feeds_cache
