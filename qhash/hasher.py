"""Background hashing of a single file with progress reporting."""

from __future__ import annotations

import mmap
import os
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from qhash.algorithms import HashAlgorithm, algorithm_from_value, new_hash


def _timestamp() -> str:
    now = datetime.now()
    return now.strftime("%Y-%m-%d_%H:%M:%S ") + f"{now.microsecond // 1000:03d}"


@dataclass
class HashCallbacks:
    """Optional handlers for events a FileHasher reports."""

    on_error: Optional[Callable[[str], None]] = None
    on_message: Optional[Callable[[str], None]] = None
    on_progress: Optional[Callable[[int], None]] = None
    on_completed: Optional[Callable[[str], None]] = None

    def error(self, text: str) -> None:
        if self.on_error:
            self.on_error(text)

    def message(self, text: str) -> None:
        if self.on_message:
            self.on_message(text)

    def progress(self, percent: int) -> None:
        if self.on_progress:
            self.on_progress(percent)

    def completed(self, checksum: str) -> None:
        if self.on_completed:
            self.on_completed(checksum)


class FileHasher:
    """Hashes one file, either in the calling thread or in a worker thread."""

    chunk_size = mmap.PAGESIZE * 1024

    def __init__(self, path="", algorithm=HashAlgorithm.MD5, callbacks=None) -> None:
        self.path = os.fspath(path)
        self.algorithm = algorithm_from_value(algorithm)
        self.callbacks = callbacks if callbacks is not None else HashCallbacks()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def set_algorithm(self, algorithm) -> None:
        """Choose the algorithm for the next run."""
        self.algorithm = algorithm_from_value(algorithm)

    def run(self) -> Optional[str]:
        """Hash the file and return the upper-case hex checksum, or None."""
        self._stop_event.clear()
        events = self.callbacks
        try:
            handle = open(self.path, "rb")
        except OSError:
            events.error(f"Unable to open file {self.path}")
            return None

        checksum = None
        with handle:
            size = os.fstat(handle.fileno()).st_size
            hasher = new_hash(self.algorithm)
            events.message("Start: " + _timestamp())
            done = 0
            failed = False
            while True:
                try:
                    chunk = handle.read(self.chunk_size)
                except OSError:
                    events.error("Read error")
                    failed = True
                    break
                hasher.update(chunk)
                done += len(chunk)
                events.progress(done * 100 // size if size else 100)
                if not chunk or handle.tell() >= size or self._stop_event.is_set():
                    break
            if not failed and not self._stop_event.is_set():
                checksum = hasher.hexdigest().upper()
                events.completed(checksum)
            events.message("Finish: " + _timestamp())
        return checksum

    def start(self) -> None:
        """Run in a worker thread; does nothing if one is already running."""
        if self.is_running():
            return
        self._thread = threading.Thread(target=self.run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Ask a running hash to stop after the current chunk."""
        self._stop_event.set()

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def wait(self, timeout=None) -> bool:
        """Wait for the worker thread; return True once it has finished."""
        if self._thread is not None:
            self._thread.join(timeout)
        return not self.is_running()