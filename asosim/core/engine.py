"""Cross-product screening of query ASOs against a library."""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import numpy as np
from numpy.typing import NDArray
from tqdm import tqdm

from ..utils.memory_monitor import MemoryMonitor
from .distance import DistanceMetric, get_distance_function
from .match_filter import passes_filter
from .profile import SequenceProfile

__all__ = ["MatchEngine", "MatchStats", "ScreenResult"]

# Only show a progress bar for libraries larger than this
PROGRESS_MIN_LIBRARY = 1000


@dataclass
class MatchStats:
    """Counters collected during one matching pass.

    Attributes:
        pairs_considered: Number of (library, query) pairs checked
        pairs_scored: Number of pairs that passed the filter and were scored
        queries_with_matches: Number of queries with at least one match
    """

    pairs_considered: int = 0
    pairs_scored: int = 0
    queries_with_matches: int = 0


@dataclass
class ScreenResult:
    """Profiles and counters produced by a screening run."""

    metric: DistanceMetric
    queries: List[SequenceProfile]
    library: List[SequenceProfile]
    stats: MatchStats


class MatchEngine:
    """Builds profiles and scores every query against the library."""

    def __init__(
        self,
        metric: DistanceMetric,
        memory_monitor: MemoryMonitor,
        logger: logging.Logger,
        show_progress: bool = True,
    ):
        """Initialize the engine for one distance metric.

        Args:
            metric: Distance metric used for every scored pair
            memory_monitor: MemoryMonitor instance for tracking memory usage
            logger: Logger instance for output
            show_progress: Whether to show a progress bar for large libraries

        Example:
            >>> from asosim.utils.memory_monitor import MemoryMonitor
            >>> from asosim.utils.logging_setup import setup_logger
            >>> logger = setup_logger("asosim")
            >>> engine = MatchEngine(
            ...     DistanceMetric.HAMMING, MemoryMonitor(logger), logger
            ... )
        """
        self.metric = metric
        self.distance_fn = get_distance_function(metric)
        self.memory_monitor = memory_monitor
        self.logger = logger
        self.show_progress = show_progress

    def build_profiles(
        self, rows: Iterable[Sequence[str]], source: Optional[str] = None
    ) -> List[SequenceProfile]:
        """Build one profile per row, preserving input order.

        Args:
            rows: Parsed rows, name in column 1 and sequence in column 2
            source: Label for error messages (e.g. file name)

        Returns:
            List of SequenceProfile

        Raises:
            MalformedRowError: On the first row with fewer than two fields
        """
        profiles = [
            SequenceProfile.from_row(row, line_number=i, source=source)
            for i, row in enumerate(rows, start=1)
        ]
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"Built {len(profiles)} profiles from {source or 'rows'}")
        return profiles

    def match(
        self, queries: List[SequenceProfile], library: List[SequenceProfile]
    ) -> MatchStats:
        """Score each query against each library entry that passes the filter.

        Iterates library entries in order and, for each, every query in
        order. Matches are appended to the query profile; nothing is sorted
        here.

        Args:
            queries: Query profiles; their ``matches`` lists are filled in
            library: Library profiles, referenced (not copied) by matches

        Returns:
            MatchStats for the pass

        Example:
            >>> queries = [SequenceProfile("q1", "AATA")]
            >>> library = [SequenceProfile("libA", "AAAT")]
            >>> engine.match(queries, library).pairs_scored
            1
            >>> queries[0].matches[0].distance
            2.0
        """
        if self.logger.isEnabledFor(logging.INFO):
            self.logger.info(
                f"Screening {len(queries)} ASO(s) against {len(library)} "
                f"library ASO(s) by {self.metric} distance..."
            )
        self.memory_monitor.check_memory_and_warn("matching start")

        stats = MatchStats()
        distances: List[float] = []

        library_iter: Iterable[SequenceProfile] = library
        if self.show_progress and len(library) > PROGRESS_MIN_LIBRARY:
            library_iter = tqdm(
                library,
                desc="Screening library",
                unit="ASO",
                leave=False,
            )

        for entry in library_iter:
            for query in queries:
                stats.pairs_considered += 1
                if not passes_filter(query, entry):
                    continue
                distance = self.distance_fn(query.sequence, entry.sequence)
                query.add_match(entry, distance)
                distances.append(distance)
                stats.pairs_scored += 1
                if self.logger.isEnabledFor(logging.DEBUG):
                    self.logger.debug(
                        f"{query.name} vs {entry.name}: {self.metric}={distance}"
                    )

        stats.queries_with_matches = sum(1 for q in queries if q.matches)
        self._log_summary(stats, distances)
        self.memory_monitor.check_memory_and_warn("matching complete")
        return stats

    def run(
        self,
        query_rows: Iterable[Sequence[str]],
        library_rows: Iterable[Sequence[str]],
        query_source: Optional[str] = None,
        library_source: Optional[str] = None,
    ) -> ScreenResult:
        """Build both profile sets, then match them.

        Every row on both sides is validated before any pair is scored, so a
        malformed row aborts the run without partial results.
        """
        queries = self.build_profiles(query_rows, query_source)
        library = self.build_profiles(library_rows, library_source)
        stats = self.match(queries, library)
        return ScreenResult(
            metric=self.metric, queries=queries, library=library, stats=stats
        )

    def _log_summary(self, stats: MatchStats, distances: List[float]) -> None:
        if not self.logger.isEnabledFor(logging.INFO):
            return
        self.logger.info(
            f"Scored {stats.pairs_scored} of {stats.pairs_considered} pairs; "
            f"{stats.queries_with_matches} ASO(s) with similar library entries"
        )
        if distances:
            res: NDArray[np.float64] = np.array(distances, dtype=float)
            self.logger.info(
                "Distance of matches (min/med/avg/max): "
                f"{np.min(res)}/{np.median(res)}/{round(float(np.mean(res)), 1)}/{np.max(res)}"
            )
