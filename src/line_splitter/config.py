"""Run configuration and byte-size parsing."""

import re
from dataclasses import dataclass
from pathlib import Path

from line_splitter.errors import ConfigurationError
from line_splitter.pipeline.types import DEFAULT_QUEUE_SIZE

SIZE_SUFFIXES = {"k": 1_000, "m": 1_000_000}

_NUMERIC = re.compile(r"\d+")


@dataclass(frozen=True, slots=True)
class SplitConfig:
    """Everything a split run needs, resolved before either stage starts."""

    budget: int
    source: Path
    target_dir: Path
    queue_size: int = DEFAULT_QUEUE_SIZE


def parse_byte_size(arg: str) -> int:
    """
    Parse a byte budget such as ``"2000"``, ``"2k"`` or ``"2m"``.

    Suffixes are decimal: k = 1000 bytes, m = 1,000,000 bytes.
    """
    if _NUMERIC.fullmatch(arg):
        size = int(arg)
    else:
        prefix, suffix = arg[:-1], arg[-1:]
        if not _NUMERIC.fullmatch(prefix):
            raise ConfigurationError(
                f"{prefix!r} is not numeric, only k or m is a supported size suffix"
            )
        if suffix not in SIZE_SUFFIXES:
            raise ConfigurationError(f"{suffix!r} is not a supported size suffix")
        size = int(prefix) * SIZE_SUFFIXES[suffix]

    if size <= 0:
        raise ConfigurationError(f"chunk size must be positive, got {arg!r}")
    return size


def build_config(
    size: str,
    source: str | Path,
    target_dir: str | Path | None = None,
    queue_size: int = DEFAULT_QUEUE_SIZE,
    cwd: Path | None = None,
) -> SplitConfig:
    """
    Validate command-line values and build a SplitConfig.

    The output directory defaults to ``cwd`` (the process working directory
    when not given). It does not need to exist yet, but it must not be a file.
    """
    budget = parse_byte_size(size)

    source_path = Path(source)
    if not source_path.is_file():
        raise ConfigurationError(f"{source_path} is not a file")

    if target_dir is None:
        target_path = cwd if cwd is not None else Path.cwd()
    else:
        target_path = Path(target_dir)
    if target_path.exists() and not target_path.is_dir():
        raise ConfigurationError(f"{target_path} exists and is not a directory")

    if queue_size < 1:
        raise ConfigurationError(f"queue size must be at least 1, got {queue_size}")

    return SplitConfig(
        budget=budget,
        source=source_path,
        target_dir=target_path,
        queue_size=queue_size,
    )
