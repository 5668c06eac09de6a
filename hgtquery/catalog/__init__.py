"""
hgtquery Catalog Module

Multi-tile access: tile directories and the cache of open tiles.
"""

from hgtquery.catalog.cache import MemoryTileCache, TileCache
from hgtquery.catalog.directory import DirectoryOptions, TileDirectory

__all__ = [
    "DirectoryOptions",
    "MemoryTileCache",
    "TileCache",
    "TileDirectory",
]
