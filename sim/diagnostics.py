"""
arena_life module: sim/diagnostics.py

Append-only genome log.

On the log cadence every organism gets one line:

    hx,hy speed g0 g1 ... g26

Records go through a QueueHandler; a QueueListener thread does the file
I/O, so a slow disk never holds up a tick. Logging is best effort: if the
file cannot be opened the log disables itself with a warning, and write
errors are left to the handler's handleError.
"""

from __future__ import annotations
import logging
import logging.handlers
import queue
from typing import Iterable, Optional

from organism.organism import Organism

logger = logging.getLogger(__name__)


def format_line(org: Organism) -> str:
    genes = " ".join(f"{g:.4f}" for g in org.genome)
    return f"{org.hx:.4f},{org.hy:.4f} {org.speed:.4f} {genes}"


class GenomeLog:
    def __init__(self, path: Optional[str]):
        self.path = path
        self.lines_written = 0
        self._queue: "queue.SimpleQueue[logging.LogRecord]" = queue.SimpleQueue()
        self._file_handler: Optional[logging.FileHandler] = None
        self._listener: Optional[logging.handlers.QueueListener] = None
        # private to this log, never registered with the logging manager
        self._sink = logging.Logger(f"{__name__}.sink", logging.INFO)
        self._sink.propagate = False

        if path is None:
            return
        try:
            self._file_handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=False)
        except OSError as exc:
            logger.warning("Genome log disabled, cannot open %s: %s", path, exc)
            return
        self._file_handler.setFormatter(logging.Formatter("%(message)s"))
        self._sink.addHandler(logging.handlers.QueueHandler(self._queue))
        self._listener = logging.handlers.QueueListener(self._queue, self._file_handler)
        self._listener.start()

    @property
    def enabled(self) -> bool:
        return self._listener is not None

    def write(self, organisms: Iterable[Organism]) -> int:
        """Queue one line per organism; returns the number of lines queued."""
        if not self.enabled:
            return 0
        n = 0
        for org in organisms:
            self._sink.info("%s", format_line(org))
            n += 1
        self.lines_written += n
        return n

    def close(self) -> None:
        if self._listener is not None:
            self._listener.stop()
            self._listener = None
        for h in list(self._sink.handlers):
            self._sink.removeHandler(h)
        if self._file_handler is not None:
            self._file_handler.close()
            self._file_handler = None
