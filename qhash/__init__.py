"""Compute file checksums and read and write md5sum-style checksum lists."""

__version__ = "0.3.0"