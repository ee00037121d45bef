"""Plain-text report of ranked library matches."""

import logging
import sys
from typing import List, Optional, Sequence, TextIO

from ..core.profile import SequenceProfile

__all__ = ["ReportWriter", "format_distance"]

NAME_WIDTH = 10
SEQ_WIDTH = 20


def format_distance(distance: float) -> str:
    """Render whole-number distances without a fractional part.

    Example:
        >>> format_distance(2.0), format_distance(2.5)
        ('2', '2.5')
    """
    if float(distance).is_integer():
        return str(int(distance))
    return repr(float(distance))


class ReportWriter:
    """Sorts each query's matches and renders the report table.

    Output layout, tab separated and padded to fixed widths::

        Input ASO   Seq                   Matching ASO  Seq                   Distance
        q1          AATA
                                          libA          AAAT                  2
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def format_header(self) -> str:
        return (
            f"{'Input ASO':<{NAME_WIDTH}}\t{'Seq':<{SEQ_WIDTH}}\t"
            f"{'Matching ASO':<{NAME_WIDTH}}\t{'Seq':<{SEQ_WIDTH}}\tDistance"
        )

    def format_report(self, queries: Sequence[SequenceProfile]) -> List[str]:
        """Return the report lines for ``queries`` in input order.

        Each query's matches are sorted ascending by distance; the sort is
        stable so ties keep the order in which matches were found. A query
        without matches contributes only its own line.

        Args:
            queries: Query profiles after matching

        Returns:
            Report lines without trailing newlines
        """
        lines = [self.format_header()]
        for query in queries:
            lines.append(f"{query.name:<{NAME_WIDTH}}\t{query.sequence:<{SEQ_WIDTH}}")
            for entry, distance in query.sort_matches():
                lines.append(
                    f"{'':<{NAME_WIDTH}}\t{'':<{SEQ_WIDTH}}\t"
                    f"{entry.name:<{NAME_WIDTH}}\t{entry.sequence:<{SEQ_WIDTH}}\t"
                    f"{format_distance(distance)}"
                )
        return lines

    def write_report(
        self, queries: Sequence[SequenceProfile], stream: Optional[TextIO] = None
    ) -> None:
        """Write the report to ``stream`` (stdout by default)."""
        stream = stream or sys.stdout
        lines = self.format_report(queries)
        stream.write("\n".join(lines) + "\n")
        stream.flush()
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"Report written: {len(lines)} lines")
