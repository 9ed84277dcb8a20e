"""Tests for configuration building and byte-size parsing."""

from pathlib import Path

import pytest

from line_splitter.config import SplitConfig, build_config, parse_byte_size
from line_splitter.errors import ConfigurationError
from line_splitter.pipeline.types import DEFAULT_QUEUE_SIZE


class TestParseByteSize:
    """Test cases for parse_byte_size."""

    def test_plain_number(self) -> None:
        assert parse_byte_size("2000") == 2000

    def test_kilo_suffix(self) -> None:
        assert parse_byte_size("2k") == 2000

    def test_mega_suffix(self) -> None:
        assert parse_byte_size("2m") == 2_000_000

    def test_double_suffix_is_rejected(self) -> None:
        """Test that '2km' fails on its non-numeric prefix."""
        with pytest.raises(ConfigurationError, match="not numeric"):
            parse_byte_size("2km")

    def test_unknown_suffix_is_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="not a supported size suffix"):
            parse_byte_size("2g")

    @pytest.mark.parametrize("arg", ["", "k", "-5", "1.5k", " 2k"])
    def test_malformed_values_are_rejected(self, arg: str) -> None:
        with pytest.raises(ConfigurationError):
            parse_byte_size(arg)

    @pytest.mark.parametrize("arg", ["0", "0k", "0m"])
    def test_zero_budget_is_rejected(self, arg: str) -> None:
        with pytest.raises(ConfigurationError, match="must be positive"):
            parse_byte_size(arg)


class TestBuildConfig:
    """Test cases for build_config."""

    def test_builds_config_with_explicit_dir(self, tmp_path: Path) -> None:
        source = tmp_path / "input.txt"
        source.write_bytes(b"a\n")

        config = build_config("1k", str(source), str(tmp_path / "out"))

        assert config == SplitConfig(
            budget=1000,
            source=source,
            target_dir=tmp_path / "out",
            queue_size=DEFAULT_QUEUE_SIZE,
        )

    def test_target_defaults_to_cwd(self, tmp_path: Path) -> None:
        source = tmp_path / "input.txt"
        source.write_bytes(b"a\n")

        config = build_config("10", source, cwd=tmp_path)
        assert config.target_dir == tmp_path

    def test_target_defaults_to_process_cwd(self, tmp_path: Path, monkeypatch) -> None:
        source = tmp_path / "input.txt"
        source.write_bytes(b"a\n")
        monkeypatch.chdir(tmp_path)

        config = build_config("10", source)
        assert config.target_dir == Path.cwd()

    def test_missing_source(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="is not a file"):
            build_config("10", tmp_path / "missing.txt")

    def test_directory_source(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="is not a file"):
            build_config("10", tmp_path)

    def test_target_that_is_a_file(self, tmp_path: Path) -> None:
        source = tmp_path / "input.txt"
        source.write_bytes(b"a\n")

        with pytest.raises(ConfigurationError, match="not a directory"):
            build_config("10", source, source)

    def test_invalid_size_is_checked_first(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not numeric"):
            build_config("2km", tmp_path / "missing.txt")

    def test_queue_size_must_be_positive(self, tmp_path: Path) -> None:
        source = tmp_path / "input.txt"
        source.write_bytes(b"a\n")

        with pytest.raises(ConfigurationError, match="queue size"):
            build_config("10", source, queue_size=0)

    def test_config_is_immutable(self, tmp_path: Path) -> None:
        source = tmp_path / "input.txt"
        source.write_bytes(b"a\n")
        config = build_config("10", source, cwd=tmp_path)

        with pytest.raises(AttributeError):
            config.budget = 20  # type: ignore[misc]
