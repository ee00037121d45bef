"""Core screening logic: profiles, distance metrics, filter and engine."""

from .errors import (
    ScreenError,
    MalformedRowError,
    SourceUnavailableError,
    MissingSelectionError,
    MalformedTableError,
)
from .profile import Composition, Match, SequenceProfile, count_composition
from .distance import (
    DistanceMetric,
    get_distance_function,
    hamming,
    levenshtein,
    sift3,
)
from .match_filter import passes_filter
from .engine import MatchEngine, MatchStats, ScreenResult

__all__ = [
    "ScreenError",
    "MalformedRowError",
    "SourceUnavailableError",
    "MissingSelectionError",
    "MalformedTableError",
    "Composition",
    "Match",
    "SequenceProfile",
    "count_composition",
    "DistanceMetric",
    "get_distance_function",
    "hamming",
    "levenshtein",
    "sift3",
    "passes_filter",
    "MatchEngine",
    "MatchStats",
    "ScreenResult",
]
