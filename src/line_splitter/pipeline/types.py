"""Items exchanged between the reader and writer stages."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeAlias

# 1MB buffer for efficient I/O.
BUFFER_SIZE = 1024 * 1024

# Number of items the handoff queue holds before the reader blocks.
DEFAULT_QUEUE_SIZE = 1024


@dataclass(frozen=True, slots=True)
class LineRecord:
    """One line of the source file, terminator included."""

    content: bytes
    size: int

    @classmethod
    def from_bytes(cls, content: bytes) -> "LineRecord":
        return cls(content, len(content))


@dataclass(frozen=True, slots=True)
class EndOfStream:
    """Marks a clean end of the line stream."""


@dataclass(frozen=True, slots=True)
class StreamFailure:
    """Marks a stream the reader could not finish."""

    error: BaseException


HandoffItem: TypeAlias = LineRecord | EndOfStream | StreamFailure


@dataclass
class SplitStats:
    """Statistics from a split run."""

    lines_read: int = 0
    lines_written: int = 0
    bytes_written: int = 0
    files_written: list[Path] = field(default_factory=list)
