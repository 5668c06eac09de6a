"""
Tile Cache

Keeps open HGTFile handles keyed by tile key so a TileDirectory does not
reopen a tile on every query.

Thread-safety: ``MemoryTileCache.get_or_open()`` is single-flight per key.
Concurrent first queries for the same tile open it exactly once; queries
for different tiles open in parallel.
"""

import logging
import threading
from typing import Callable, Protocol

from hgtquery.io.hgt import HGTFile

logger = logging.getLogger(__name__)


class TileCache(Protocol):
    """
    Key to open tile store

    A cache owns every handle inserted into it and closes them on
    ``clear_all()``. Entries are never evicted individually.
    """

    def get(self, key: str) -> HGTFile | None:
        """Cached tile for key, or None"""
        ...

    def insert(self, key: str, tile: HGTFile) -> None:
        """Store tile under key, replacing any previous entry"""
        ...

    def get_or_open(self, key: str, opener: Callable[[], HGTFile]) -> HGTFile:
        """
        Cached tile for key, calling opener on a miss

        Must guarantee at most one open handle per key, even when several
        callers miss on the same key at once.
        """
        ...

    def clear_all(self) -> None:
        """Close every cached tile and empty the cache"""
        ...


class MemoryTileCache:
    """
    In-memory TileCache

    Unbounded: tiles stay open until ``clear_all()``.

    Examples:
        >>> cache = MemoryTileCache()
        >>> tile = cache.get_or_open("N48E021", lambda: HGTFile("data/N48E021.hgt"))
        >>> cache.get("N48E021") is tile
        True
        >>> cache.clear_all()
        >>> tile.closed
        True
    """

    def __init__(self):
        self._tiles: dict[str, HGTFile] = {}
        self._lock = threading.Lock()
        self._key_locks: dict[str, threading.Lock] = {}

    def get(self, key: str) -> HGTFile | None:
        with self._lock:
            return self._tiles.get(key)

    def insert(self, key: str, tile: HGTFile) -> None:
        with self._lock:
            replaced = self._tiles.get(key)
            self._tiles[key] = tile
        # Cache owns the replaced handle
        if replaced is not None and replaced is not tile:
            replaced.close()

    def get_or_open(self, key: str, opener: Callable[[], HGTFile]) -> HGTFile:
        tile = self.get(key)
        if tile is not None:
            return tile

        with self._key_lock(key):
            tile = self.get(key)
            if tile is None:  # double-checked under the per-key lock
                tile = opener()
                self.insert(key, tile)
                logger.debug("Cached tile %s", key)
        return tile

    def clear_all(self) -> None:
        with self._lock:
            tiles = list(self._tiles.values())
            self._tiles.clear()
            # Key locks stay: an open in flight must keep excluding its key

        errors: list[Exception] = []
        for tile in tiles:
            try:
                tile.close()
            except OSError as e:
                logger.warning("Failed to close %s: %s", tile.path, e)
                errors.append(e)
        logger.debug("Cleared %d cached tiles", len(tiles))
        if errors:
            raise errors[0]

    def keys(self) -> list[str]:
        """Cached tile keys, sorted"""
        with self._lock:
            return sorted(self._tiles)

    def _key_lock(self, key: str) -> threading.Lock:
        with self._lock:
            lock = self._key_locks.get(key)
            if lock is None:
                lock = self._key_locks[key] = threading.Lock()
            return lock

    def __len__(self) -> int:
        with self._lock:
            return len(self._tiles)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._tiles
