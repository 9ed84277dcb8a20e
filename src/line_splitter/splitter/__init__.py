from line_splitter.splitter.split import main_split, split

__all__ = ["main_split", "split"]
