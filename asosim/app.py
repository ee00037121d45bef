"""Main application coordinator for asosim."""

import logging
from pathlib import Path
from typing import List, Optional, TextIO
from dataclasses import dataclass

from .core import DistanceMetric, MatchEngine, MissingSelectionError, ScreenResult
from .io import ReportWriter, TableReader
from .utils import MemoryMonitor, setup_logger

__all__ = ["ScreenConfig", "ScreenApp", "SINGLE_ASO_NAME"]

SINGLE_ASO_NAME = "testASO_001"


@dataclass
class ScreenConfig:
    """Configuration for a screening run.

    Attributes:
        library_file: Path to the library table of existing ASOs
        aso_seq: Single query sequence (single mode)
        input_aso_file: Path to the query table (multiple mode)
        input_header: Whether the query table has a header row
        library_header: Whether the library table has a header row
        metric: Distance metric used to score and rank matches
        delimiter: Field delimiter of both tables
        verbose: Whether to enable verbose logging
        log_level: Logging level override
        log_format: Logging format (text or json)
        show_progress: Whether to show a progress bar on large libraries

    Example:
        >>> config = ScreenConfig(
        ...     library_file=Path("library.csv"),
        ...     aso_seq="ACGTTGCA",
        ...     metric=DistanceMetric.HAMMING,
        ... )
    """

    library_file: Path
    aso_seq: Optional[str] = None
    input_aso_file: Optional[Path] = None
    input_header: bool = True
    library_header: bool = True
    metric: DistanceMetric = DistanceMetric.LEVENSHTEIN
    delimiter: str = ","
    verbose: bool = True
    log_level: Optional[str] = None
    log_format: str = "text"
    show_progress: bool = True


class ScreenApp:
    """Loads both tables, runs the engine and writes the report."""

    def __init__(self, config: ScreenConfig):
        self.config = config
        self.logger = setup_logger(
            "asosim", config.log_level, config.log_format, config.verbose
        )
        self.memory_monitor = MemoryMonitor(self.logger)

        self.reader = TableReader(delimiter=config.delimiter, logger=self.logger)
        self.engine = MatchEngine(
            config.metric,
            self.memory_monitor,
            self.logger,
            show_progress=config.show_progress,
        )
        self.report_writer = ReportWriter(self.logger)

    def load_queries(self) -> List[List[str]]:
        """Return query rows from the single sequence or the query table.

        Raises:
            MissingSelectionError: If neither a sequence nor a file is set
        """
        if self.config.input_aso_file is not None:
            if self.logger.isEnabledFor(logging.INFO):
                self.logger.info(
                    f"Processing input ASO file {self.config.input_aso_file}"
                )
            return self.reader.read_rows(
                self.config.input_aso_file,
                has_header=self.config.input_header,
                trim=True,
            )

        if self.config.aso_seq is not None:
            seq = self.config.aso_seq.strip()
            if self.logger.isEnabledFor(logging.INFO):
                self.logger.info(f"Naming the input ASO {seq} as {SINGLE_ASO_NAME}")
            return [[SINGLE_ASO_NAME, seq]]

        raise MissingSelectionError(
            "Enter ASO sequence or provide file path to ASOs"
        )

    def load_library(self) -> List[List[str]]:
        if self.logger.isEnabledFor(logging.INFO):
            self.logger.info(
                f"Initialising library of ASOs from {self.config.library_file}"
            )
        return self.reader.read_rows(
            self.config.library_file, has_header=self.config.library_header
        )

    def screen(self) -> ScreenResult:
        """Load inputs and match them; nothing is written.

        Both tables are fully read and validated before matching starts.
        """
        query_rows = self.load_queries()
        library_rows = self.load_library()

        total = len(query_rows) + len(library_rows)
        if total:
            mean_length = sum(len(r[1]) for r in query_rows + library_rows) / total
            self.memory_monitor.warn_for_large_screen(total, mean_length)

        query_source = (
            str(self.config.input_aso_file)
            if self.config.input_aso_file is not None
            else "--aso-seq"
        )
        return self.engine.run(
            query_rows,
            library_rows,
            query_source=query_source,
            library_source=str(self.config.library_file),
        )

    def run(self, stream: Optional[TextIO] = None) -> ScreenResult:
        """Execute the screen and write the report.

        Args:
            stream: Report destination, stdout by default

        Returns:
            ScreenResult with sorted match lists
        """
        result = self.screen()
        self.report_writer.write_report(result.queries, stream)

        if self.logger.isEnabledFor(logging.INFO):
            final_memory = self.memory_monitor.get_memory_usage_mb()
            self.logger.info(f"Done. Final memory usage: {final_memory:.1f}MB")
        return result
