import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from contextlib import suppress
from queue import Empty, Queue

from line_splitter.config import SplitConfig
from line_splitter.errors import SourceIOError
from line_splitter.pipeline.reader import stream_records
from line_splitter.pipeline.types import BUFFER_SIZE, HandoffItem, SplitStats
from line_splitter.pipeline.writer import ChunkWriter, consume_records

logger = logging.getLogger(__name__)

# Seconds between queue polls while unblocking a reader after a writer failure.
DRAIN_POLL_INTERVAL = 0.05


def split(config: SplitConfig) -> SplitStats:
    """
    Split the configured source into budget-bounded chunk files.

    Two-stage pipeline:
    1. Reader thread streams line records into a bounded queue
    2. Writer on the calling thread rolls chunks over as the budget fills

    The first error from either stage is raised; chunks already written stay
    on disk.
    """
    total_start = time.perf_counter()

    logger.info(
        "Starting: file=%s, bytes=%d, target=%s, queue_size=%d",
        config.source.name,
        config.budget,
        config.target_dir,
        config.queue_size,
    )

    try:
        source = open(config.source, "rb", buffering=BUFFER_SIZE)  # noqa: SIM115
    except OSError as exc:
        raise SourceIOError(config.source, exc.strerror or str(exc)) from exc

    handoff: Queue[HandoffItem] = Queue(maxsize=config.queue_size)
    stop = threading.Event()
    writer = ChunkWriter(
        config.budget,
        config.target_dir,
        config.source.name,
        source_path=config.source,
    )

    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="line-reader") as executor:
        reader = executor.submit(stream_records, source, handoff, stop, config.budget)
        try:
            stats = consume_records(handoff, writer)
        except BaseException:
            stop.set()
            _release_reader(handoff, reader)
            raise
        stats.lines_read = reader.result()

    total_time = time.perf_counter() - total_start
    if not stats.files_written:
        logger.info("Result: empty source, no chunks written (total %.2fs)", total_time)
    else:
        logger.info(
            "Result: %d lines, %d bytes in %d chunks (total %.2fs)",
            stats.lines_written,
            stats.bytes_written,
            len(stats.files_written),
            total_time,
        )
    return stats


def _release_reader(handoff: Queue[HandoffItem], reader: Future) -> None:
    """Discard queued items until the reader thread has returned."""
    while not reader.done():
        with suppress(Empty):
            handoff.get(timeout=DRAIN_POLL_INTERVAL)


def main_split(config: SplitConfig) -> None:
    """Main entry point that prints each written chunk path to stdout."""
    stats = split(config)
    for path in stats.files_written:
        print(path)
