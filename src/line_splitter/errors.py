"""Exception hierarchy for the line splitter."""

from pathlib import Path


class SplitterError(Exception):
    """Base class for every error raised while configuring or running a split."""


class ConfigurationError(SplitterError):
    """Invalid byte size, source path or output directory."""


class ChunkTooLargeError(SplitterError):
    """A single line does not fit into the byte budget."""

    def __init__(
        self,
        line_number: int,
        line_size: int,
        budget: int,
        path: Path | None = None,
    ):
        where = f"line {line_number}" if path is None else f"line {line_number} of {path}"
        super().__init__(
            f"{where} is {line_size} bytes, "
            f"which exceeds the maximum chunk size of {budget} bytes"
        )
        self.line_number = line_number
        self.line_size = line_size
        self.budget = budget
        self.path = path


class SourceIOError(SplitterError):
    """Reading the source file failed."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"failed to read {path}: {reason}")
        self.path = path


class SinkIOError(SplitterError):
    """Creating the output directory or writing an output file failed."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"failed to write {path}: {reason}")
        self.path = path


class StreamDisconnectedError(SplitterError):
    """
    The line stream ended without an end-of-stream marker.

    Raised by the writer when the reader died; the reader's error is
    available as ``__cause__``.
    """
