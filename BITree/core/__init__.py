from .FenwickTree import FenwickTree
from .utils import InvalidIndexError, available_settings
