"""Reader stage: stream the source file into the handoff queue."""

import logging
import threading
from collections.abc import Iterator
from pathlib import Path
from queue import Queue
from typing import BinaryIO

from line_splitter.errors import ChunkTooLargeError, SourceIOError
from line_splitter.pipeline.types import (
    BUFFER_SIZE,
    EndOfStream,
    HandoffItem,
    LineRecord,
    StreamFailure,
)

logger = logging.getLogger(__name__)


def iter_line_records(
    handle: BinaryIO,
    max_size: int | None = None,
) -> Iterator[LineRecord]:
    """
    Yield one record per line of an open binary handle.

    Lines keep their terminator; a final line without one is yielded as-is.
    With ``max_size`` set, at most ``max_size + 1`` bytes of a line are held
    in memory: a longer line raises ChunkTooLargeError once its full length
    has been counted.
    """
    if max_size is None:
        for line in handle:
            yield LineRecord.from_bytes(line)
        return

    line_number = 0
    while True:
        line = handle.readline(max_size + 1)
        if not line:
            return
        line_number += 1
        if len(line) > max_size:
            size = len(line) + _skip_rest_of_line(handle, line)
            path = Path(handle.name) if hasattr(handle, "name") else None
            raise ChunkTooLargeError(line_number, size, max_size, path)
        yield LineRecord.from_bytes(line)


def _skip_rest_of_line(handle: BinaryIO, head: bytes) -> int:
    """Consume the remainder of a line started by ``head``; return its length."""
    skipped = 0
    piece = head
    while not piece.endswith(b"\n"):
        piece = handle.readline(BUFFER_SIZE)
        if not piece:
            break
        skipped += len(piece)
    return skipped


def stream_records(
    handle: BinaryIO,
    handoff: Queue[HandoffItem],
    stop: threading.Event,
    max_line_size: int | None = None,
) -> int:
    """
    Push every line of ``handle`` onto ``handoff``, then an EndOfStream.

    Takes ownership of ``handle`` and closes it on return. A read failure is
    pushed as a StreamFailure before being raised, as is a line longer than
    ``max_line_size``. When ``stop`` is set the stream is abandoned without an
    EndOfStream.

    Returns the number of records pushed.
    """
    path = Path(getattr(handle, "name", "<source>"))
    count = 0

    with handle:
        try:
            for record in iter_line_records(handle, max_line_size):
                if stop.is_set():
                    logger.debug("Reader stopped after %d lines", count)
                    return count
                handoff.put(record)
                count += 1
        except OSError as exc:
            error = SourceIOError(path, exc.strerror or str(exc))
            error.__cause__ = exc
            handoff.put(StreamFailure(error))
            raise error
        except Exception as exc:
            # Unblock the writer before the worker thread dies.
            handoff.put(StreamFailure(exc))
            raise

    handoff.put(EndOfStream())
    logger.debug("Reader done: %d lines from %s", count, path.name)
    return count
