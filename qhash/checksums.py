"""Reading and writing md5sum-style checksum lists."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChecksumEntry:
    """One line of a checksum list: a hex checksum and the file it belongs to."""

    checksum: str
    filename: str


def _parse_line(line: str):
    if "*" in line:
        fields = line.split("*")
        if len(fields) == 2:
            return ChecksumEntry(fields[0].strip(), fields[1].strip())
        log.warning("unknown md5 file format (binary mode): %r", line)
        return None
    fields = line.split(" ")
    if len(fields) == 3:
        return ChecksumEntry(fields[0].strip(), fields[2].strip())
    log.warning("unknown md5 file format: %r", line)
    return None


def parse_md5_lines(lines: Iterable[str]) -> list[ChecksumEntry]:
    """Parse md5sum lines, skipping any that are not in a known format.

    A line is either "checksum<space><space>name" (text mode) or
    "checksum<space>*name" (binary mode).
    """
    entries = []
    for line in lines:
        entry = _parse_line(line.rstrip("\r\n"))
        if entry is not None:
            entries.append(entry)
    return entries


def parse_md5_file(path) -> list[ChecksumEntry]:
    """Read and parse a checksum file; raises OSError if it cannot be read."""
    with open(os.fspath(path), encoding="utf-8", errors="replace") as handle:
        return parse_md5_lines(handle.read().splitlines())


def format_md5_line(entry: ChecksumEntry) -> str:
    """Return the text-mode md5sum line for an entry, without a line ending."""
    return f"{entry.checksum}  {entry.filename}"


def write_md5_file(path, entries: Iterable[ChecksumEntry]) -> None:
    """Write entries as an md5sum file with UNIX line endings."""
    with open(os.fspath(path), "w", encoding="utf-8", newline="\n") as handle:
        for entry in entries:
            handle.write(format_md5_line(entry) + "\n")