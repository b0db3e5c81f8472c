"""A list of files to hash, their progress and their checksums."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from qhash.checksums import ChecksumEntry, parse_md5_lines, write_md5_file
from qhash.hasher import FileHasher, HashCallbacks
from qhash.settings import Options

log = logging.getLogger(__name__)


@dataclass(eq=False)
class FileEntry:
    """A file in the session with its size, progress and checksum."""

    name: str
    size: int = 0
    check_mode: bool = False
    checksum: str = ""
    progress: int = 0
    status: str = ""
    error: str = ""
    hasher: Optional[FileHasher] = field(default=None, repr=False)


class HashSession:
    """Keeps the files to hash and runs one worker thread per file."""

    def __init__(self, options=None) -> None:
        self.options = options if options is not None else Options()
        self.entries: list[FileEntry] = []
        self.check_mode = False

    def add_file(self, name) -> Optional[FileEntry]:
        """Add a file; return its entry, or None if it cannot be opened."""
        name = os.fspath(name)
        try:
            with open(name, "rb") as handle:
                size = os.fstat(handle.fileno()).st_size
        except OSError:
            log.warning("cannot open %s", name)
            return None
        entry = FileEntry(name=name, size=size, check_mode=self.check_mode)
        entry.hasher = FileHasher(name, self.options.algorithm, self._callbacks(entry))
        self.entries.append(entry)
        return entry

    def _callbacks(self, entry: FileEntry) -> HashCallbacks:
        def on_error(text: str) -> None:
            entry.error = text
            log.error("%s: %s", entry.name, text)

        def on_message(text: str) -> None:
            log.debug("%s: %s", entry.name, text)

        def on_progress(percent: int) -> None:
            entry.progress = percent
            entry.status = str(percent)

        def on_completed(checksum: str) -> None:
            self.set_checksum(entry, checksum)

        return HashCallbacks(on_error, on_message, on_progress, on_completed)

    def clear(self) -> None:
        """Stop all work and forget every file."""
        self.stop_all()
        self.entries.clear()

    def load_checksum_file(self, path) -> int:
        """Load an .md5 list in check mode; return the number of lines read.

        Files of other types are not read and 0 is returned. Raises OSError
        if the list cannot be read.
        """
        self.check_mode = True
        path = os.fspath(path)
        if not path.lower().endswith(".md5"):
            log.info("unsupported checksum file: %s", path)
            return 0
        with open(path, encoding="utf-8", errors="replace") as handle:
            lines = handle.read().splitlines()
        for item in parse_md5_lines(lines):
            entry = self.add_file(item.filename)
            if entry is not None:
                self.set_checksum(entry, item.checksum)
        return len(lines)

    def set_checksum(self, entry: FileEntry, checksum: str) -> None:
        """Store a checksum in the case the options ask for."""
        entry.checksum = checksum.upper() if self.options.uppercase else checksum.lower()

    def start(self) -> bool:
        """Start hashing every file; return False if work is still running."""
        if not self.all_stopped():
            return False
        for entry in self.entries:
            if not entry.check_mode:
                entry.checksum = ""
            entry.error = ""
            entry.hasher.set_algorithm(self.options.algorithm)
            entry.hasher.start()
        return True

    def all_stopped(self) -> bool:
        return not any(entry.hasher.is_running() for entry in self.entries)

    def stop_all(self) -> None:
        """Ask every running hash to stop."""
        for entry in self.entries:
            entry.hasher.stop()

    def wait(self, timeout=None) -> bool:
        """Wait for every worker; return True once all have finished."""
        for entry in self.entries:
            entry.hasher.wait(timeout)
        return self.all_stopped()

    def remove(self, entry: FileEntry) -> None:
        """Stop and drop one entry; raises ValueError if it is not here."""
        self.entries.remove(entry)
        if entry.hasher.is_running():
            entry.hasher.stop()

    def save(self, path) -> Path:
        """Save checksums as an md5 list and return the path written.

        A name without a .md5 or .sha1 extension gets .md5 appended; only
        .md5 lists can be written.
        """
        name = os.fspath(path)
        lowered = name.lower()
        if not (lowered.endswith(".md5") or lowered.endswith(".sha1")):
            name += ".md5"
        if not name.lower().endswith(".md5"):
            raise ValueError(f"unsupported checksum file format: {name}")
        write_md5_file(name, (ChecksumEntry(e.checksum, e.name) for e in self.entries))
        return Path(name)