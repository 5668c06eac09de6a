"""
hgtquery I/O Module

HGT tile reading.
"""

from hgtquery.io.hgt import FileOptions, HGTFile

__all__ = ["FileOptions", "HGTFile"]
