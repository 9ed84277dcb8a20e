"""Reader and writer stages of the split pipeline."""

from line_splitter.pipeline.reader import iter_line_records, stream_records
from line_splitter.pipeline.types import (
    EndOfStream,
    HandoffItem,
    LineRecord,
    SplitStats,
    StreamFailure,
)
from line_splitter.pipeline.writer import (
    ChunkWriter,
    WriterState,
    consume_records,
    derive_chunk_path,
)

__all__ = [
    "ChunkWriter",
    "EndOfStream",
    "HandoffItem",
    "LineRecord",
    "SplitStats",
    "StreamFailure",
    "WriterState",
    "consume_records",
    "derive_chunk_path",
    "iter_line_records",
    "stream_records",
]
