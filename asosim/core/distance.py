"""String distance metrics used to score ASO pairs."""

from enum import Enum
from typing import Callable

import Levenshtein
import numpy as np

__all__ = [
    "DistanceMetric",
    "DistanceFunction",
    "hamming",
    "levenshtein",
    "sift3",
    "get_distance_function",
]

DistanceFunction = Callable[[str, str], float]

SIFT3_MAX_OFFSET = 5


class DistanceMetric(str, Enum):
    """Distance metrics selectable for a screening run.

    Higher values mean a greater mismatch between sequences.
    """

    HAMMING = "hamming"
    LEVENSHTEIN = "levenshtein"
    SIFT3 = "sift3"

    @classmethod
    def from_name(cls, name: str) -> "DistanceMetric":
        """Parse a metric name case-insensitively.

        Example:
            >>> DistanceMetric.from_name("Sift3")
            <DistanceMetric.SIFT3: 'sift3'>
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(
                f"Unknown distance metric '{name}'. Choose one of: {choices}"
            ) from None

    def __str__(self) -> str:
        return self.value


def _code_points(seq: str) -> np.ndarray:
    return np.frombuffer(seq.encode("utf-32-le", "surrogatepass"), dtype=np.uint32)


def hamming(a: str, b: str) -> int:
    """Return the number of positions at which two equal-length strings differ.

    Raises:
        ValueError: If the strings differ in length

    Example:
        >>> hamming("AATA", "AAAT")
        2
    """
    if len(a) != len(b):
        raise ValueError(
            f"Hamming distance requires sequences of equal length "
            f"({len(a)} != {len(b)})"
        )
    if not a:
        return 0
    return int(np.count_nonzero(_code_points(a) != _code_points(b)))


def levenshtein(a: str, b: str) -> int:
    """Return the minimum number of single-character edits between two strings.

    Example:
        >>> levenshtein("ACGT", "AGCT")
        2
    """
    return Levenshtein.distance(a, b)


def sift3(a: str, b: str) -> float:
    """Approximate string distance using the Sift3 heuristic.

    Walks both strings with a shared cursor, counting common characters.
    On a mismatch it looks ahead up to ``SIFT3_MAX_OFFSET`` characters in
    either string for a resynchronisation point. The result is the mean
    length minus the number of common characters; it tracks edit distance
    loosely but is not a metric.

    Args:
        a: First string
        b: Second string

    Returns:
        Non-negative distance estimate

    Example:
        >>> sift3("AATA", "AAAT")
        2.0
    """
    len_a = len(a)
    len_b = len(b)
    if len_a == 0:
        return float(len_b)
    if len_b == 0:
        return float(len_a)

    cursor = 0
    offset_a = 0
    offset_b = 0
    common = 0
    while cursor + offset_a < len_a and cursor + offset_b < len_b:
        if a[cursor + offset_a] == b[cursor + offset_b]:
            common += 1
        else:
            offset_a = 0
            offset_b = 0
            for i in range(SIFT3_MAX_OFFSET):
                if cursor + i < len_a and a[cursor + i] == b[cursor]:
                    offset_a = i
                    break
                if cursor + i < len_b and a[cursor] == b[cursor + i]:
                    offset_b = i
                    break
        cursor += 1
    return (len_a + len_b) / 2.0 - common


def _hamming_score(a: str, b: str) -> float:
    return float(hamming(a, b))


def _levenshtein_score(a: str, b: str) -> float:
    return float(levenshtein(a, b))


def get_distance_function(metric: DistanceMetric) -> DistanceFunction:
    """Resolve a metric to a scoring function returning a float.

    Called once per run; all metrics return floats so a run's distances can
    be ordered uniformly.
    """
    if metric is DistanceMetric.HAMMING:
        return _hamming_score
    if metric is DistanceMetric.LEVENSHTEIN:
        return _levenshtein_score
    if metric is DistanceMetric.SIFT3:
        return sift3
    raise ValueError(f"Unsupported distance metric: {metric!r}")
