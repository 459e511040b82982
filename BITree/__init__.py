from .core import FenwickTree, InvalidIndexError, available_settings

__version__ = "0.1.0"
