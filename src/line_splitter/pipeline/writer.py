"""Writer stage: turn the line stream into budget-bounded chunk files."""

import enum
import logging
from pathlib import Path
from queue import Queue
from typing import BinaryIO

from line_splitter.errors import ChunkTooLargeError, SinkIOError, StreamDisconnectedError
from line_splitter.pipeline.types import (
    BUFFER_SIZE,
    EndOfStream,
    HandoffItem,
    LineRecord,
    SplitStats,
    StreamFailure,
)

logger = logging.getLogger(__name__)


class WriterState(enum.Enum):
    AWAITING_FIRST = "awaiting_first"
    WRITING = "writing"
    ROLLING = "rolling"
    DONE = "done"


def derive_chunk_path(target_dir: Path, source_name: str, file_number: int) -> Path:
    """Path of the ``file_number``-th chunk, e.g. ``out/3_access.log``."""
    return target_dir / f"{file_number}_{source_name}"


class ChunkWriter:
    """
    Writes line records into numbered chunk files, never splitting a line.

    A new chunk is started when adding the next record would push the current
    one past the budget; reaching the budget exactly does not roll over. At
    most one chunk file is open at a time.
    """

    def __init__(
        self,
        budget: int,
        target_dir: Path,
        source_name: str,
        source_path: Path | None = None,
    ):
        self._budget = budget
        self._target_dir = target_dir
        self._source_name = source_name
        self._source_path = source_path
        self._handle: BinaryIO | None = None
        self._path: Path | None = None
        self._file_number = 0
        self._progress = 0
        self.state = WriterState.AWAITING_FIRST
        self.stats = SplitStats()

    def __enter__(self) -> "ChunkWriter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def write(self, record: LineRecord) -> None:
        """Append one record, rolling over to a new chunk if needed."""
        if self.state is WriterState.DONE:
            raise RuntimeError("cannot write to a finished ChunkWriter")

        line_number = self.stats.lines_written + 1
        if record.size > self._budget:
            raise ChunkTooLargeError(line_number, record.size, self._budget, self._source_path)

        if self.state is WriterState.AWAITING_FIRST:
            self._create_target_dir()
            self._open_next()
            self._progress = record.size
        elif self._progress + record.size > self._budget:
            self.state = WriterState.ROLLING
            logger.debug(
                "Rolling over after %d bytes in %s (next line %d bytes)",
                self._progress,
                self._path.name,
                record.size,
            )
            self.close()
            self._open_next()
            self._progress = record.size
        else:
            self._progress += record.size

        self.state = WriterState.WRITING
        try:
            self._handle.write(record.content)
        except OSError as exc:
            raise SinkIOError(self._path, exc.strerror or str(exc)) from exc

        self.stats.lines_written += 1
        self.stats.bytes_written += record.size

    def finish(self) -> None:
        """Close the current chunk; no more records are accepted."""
        self.close()
        self.state = WriterState.DONE

    def close(self) -> None:
        """Flush and close the open chunk file, if any."""
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        try:
            handle.close()
        except OSError as exc:
            raise SinkIOError(self._path, exc.strerror or str(exc)) from exc

    def _create_target_dir(self) -> None:
        try:
            self._target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise SinkIOError(self._target_dir, exc.strerror or str(exc)) from exc

    def _open_next(self) -> None:
        self._file_number += 1
        self._path = derive_chunk_path(self._target_dir, self._source_name, self._file_number)
        try:
            self._handle = open(self._path, "wb", buffering=BUFFER_SIZE)  # noqa: SIM115
        except OSError as exc:
            raise SinkIOError(self._path, exc.strerror or str(exc)) from exc
        self.stats.files_written.append(self._path)


def consume_records(handoff: Queue[HandoffItem], writer: ChunkWriter) -> SplitStats:
    """
    Drain ``handoff`` into ``writer`` until the stream ends.

    Blocks on the queue between records. Returns the writer's statistics on a
    clean EndOfStream; a StreamFailure is raised as StreamDisconnectedError
    chained from the reader's error, except an oversized line caught by the
    reader, which is raised as-is. Chunks written before a failure are left
    on disk.
    """
    with writer:
        while True:
            item = handoff.get()
            if isinstance(item, LineRecord):
                writer.write(item)
            elif isinstance(item, EndOfStream):
                writer.finish()
                return writer.stats
            elif isinstance(item, StreamFailure):
                if isinstance(item.error, ChunkTooLargeError):
                    raise item.error
                raise StreamDisconnectedError(
                    f"line stream broke before end of file: {item.error}"
                ) from item.error
            else:
                raise TypeError(f"unexpected handoff item: {item!r}")
