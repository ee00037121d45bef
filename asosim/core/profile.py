"""Per-sequence profiles used as the matching key."""

from collections import Counter
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Sequence

from .errors import MalformedRowError

__all__ = ["Composition", "Match", "SequenceProfile", "count_composition"]


class Composition(NamedTuple):
    """Nucleotide counts in A, T, G, C order."""

    a: int
    t: int
    g: int
    c: int


class Match(NamedTuple):
    """A library profile paired with its distance to a query."""

    entry: "SequenceProfile"
    distance: float


def count_composition(sequence: str) -> Composition:
    """Count A, T, G and C in a single pass over the sequence.

    Matching is exact and case-sensitive. Any other character (lowercase
    bases, ambiguity codes such as ``N``) is ignored, so the counts may sum
    to less than ``len(sequence)``.

    Args:
        sequence: Nucleotide sequence, 5' -> 3'

    Returns:
        Composition named tuple

    Example:
        >>> count_composition("AATX")
        Composition(a=2, t=1, g=0, c=0)
    """
    counts = Counter(sequence)
    return Composition(counts["A"], counts["T"], counts["G"], counts["C"])


@dataclass(frozen=True, eq=False)
class SequenceProfile:
    """Named sequence with its length and composition precomputed.

    Profiles compare by identity. ``name`` and ``sequence`` cannot be
    reassigned; the only mutable part is ``matches``, which is appended to
    while screening and sorted once when the report is assembled. Library
    profiles are shared by reference between the match lists of all queries
    they match.

    Attributes:
        name: Free-text identifier (not required to be unique)
        sequence: Nucleotide sequence, 5' -> 3'
        length: Number of characters in ``sequence``
        composition: A/T/G/C counts of ``sequence``
        matches: Library matches collected for a query profile

    Example:
        >>> profile = SequenceProfile("ASO_1", "AATA")
        >>> profile.length, profile.composition
        (4, Composition(a=3, t=1, g=0, c=0))
    """

    name: str
    sequence: str
    length: int = field(init=False)
    composition: Composition = field(init=False)
    matches: List[Match] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "length", len(self.sequence))
        object.__setattr__(self, "composition", count_composition(self.sequence))

    @classmethod
    def from_row(
        cls,
        row: Sequence[str],
        line_number: Optional[int] = None,
        source: Optional[str] = None,
    ) -> "SequenceProfile":
        """Build a profile from a parsed table row (name, sequence, ...).

        Extra columns are ignored.

        Raises:
            MalformedRowError: If the row has fewer than two fields
        """
        if len(row) < 2:
            raise MalformedRowError(source, line_number, row)
        return cls(row[0], row[1])

    def add_match(self, entry: "SequenceProfile", distance: float) -> None:
        """Record a library entry matching this query."""
        self.matches.append(Match(entry, distance))

    def sort_matches(self) -> List[Match]:
        """Sort matches by ascending distance in place.

        ``list.sort`` is stable, so entries with equal distance keep the order
        in which they were added.
        """
        self.matches.sort(key=lambda m: m.distance)
        return self.matches
