"""Cheap pre-check deciding whether a query/library pair gets scored."""

from .profile import SequenceProfile

__all__ = ["passes_filter"]


def passes_filter(query: SequenceProfile, entry: SequenceProfile) -> bool:
    """Return True if ``entry`` should be scored against ``query``.

    A pair is scored only when both sequences have the same length and the
    same A/T/G/C composition but are not textually identical. Identical
    sequences are never reported, whatever their names.

    Example:
        >>> q = SequenceProfile("q1", "AATA")
        >>> passes_filter(q, SequenceProfile("libA", "AAAT"))
        True
        >>> passes_filter(q, SequenceProfile("libB", "AATA"))
        False
    """
    return (
        query.length == entry.length
        and query.composition == entry.composition
        and query.sequence != entry.sequence
    )
