"""asosim - ASO similarity screen.

Compares query antisense oligonucleotide (ASO) sequences against a library
of existing ASOs and ranks library entries with the same length and ATGC
content by Hamming, Levenshtein or Sift3 distance.
"""

__version__ = "0.1.0"

from .app import ScreenApp, ScreenConfig
from .core.profile import SequenceProfile, count_composition
from .core.distance import DistanceMetric
from .core.engine import MatchEngine
from .utils.memory_monitor import MemoryMonitor

__all__ = [
    "ScreenApp",
    "ScreenConfig",
    "SequenceProfile",
    "count_composition",
    "DistanceMetric",
    "MatchEngine",
    "MemoryMonitor",
]
