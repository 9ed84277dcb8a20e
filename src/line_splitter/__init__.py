"""Line Splitter - Split large line-delimited files into size-bounded chunks."""

from line_splitter.config import SplitConfig, build_config, parse_byte_size
from line_splitter.splitter import main_split, split

__all__ = ["SplitConfig", "build_config", "main_split", "parse_byte_size", "split"]

__version__ = "0.1.0"
