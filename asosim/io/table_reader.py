"""Delimited ASO table parsing."""

import csv
import logging
from pathlib import Path
from typing import List, Optional

from ..core.errors import (
    MalformedRowError,
    MalformedTableError,
    SourceUnavailableError,
)

__all__ = ["TableReader"]


class TableReader:
    """Reads (name, sequence) rows from a delimited text file.

    Column 1 holds the ASO name and column 2 the sequence in 5' -> 3'
    orientation; additional columns are ignored. Lines starting with the
    comment marker and empty lines are skipped. A line of blank fields such
    as ``,,`` is a row with an empty name and sequence.
    """

    def __init__(
        self,
        delimiter: str = ",",
        comment: str = "#",
        logger: Optional[logging.Logger] = None,
    ):
        self.delimiter = delimiter
        self.comment = comment
        self.logger = logger or logging.getLogger(__name__)

    def read_rows(
        self, path: Path, has_header: bool = True, trim: bool = False
    ) -> List[List[str]]:
        """Read all data rows from ``path``.

        The whole file is read before returning, so a malformed row anywhere
        in the file aborts loading.

        Args:
            path: Table file path
            has_header: Whether the first non-comment row is a header
            trim: Strip surrounding whitespace from every field

        Returns:
            Rows in file order, each with at least two fields

        Raises:
            SourceUnavailableError: If the file cannot be opened or decoded
            MalformedRowError: If a data row has fewer than two fields
            MalformedTableError: If the file is not parseable as delimited text

        Example:
            >>> reader = TableReader()
            >>> reader.read_rows(Path("library.csv"))
            [['ASO_1', 'ACGTTGCA'], ['ASO_2', 'TTGACCGA']]
        """
        path = Path(path)
        if self.logger.isEnabledFor(logging.WARNING):
            if has_header:
                self.logger.warning(
                    f"Note: {path.name} has header, first entry will not be processed."
                )
            else:
                self.logger.warning(
                    f"Note: {path.name} has no header. First entry will be processed."
                )

        rows: List[List[str]] = []
        header_pending = has_header
        try:
            with open(path, newline="", encoding="utf-8") as f:
                reader = csv.reader(f, delimiter=self.delimiter)
                try:
                    for fields in reader:
                        line_number = reader.line_num
                        if not fields:
                            continue
                        if fields[0].startswith(self.comment):
                            continue
                        if trim:
                            fields = [x.strip() for x in fields]
                        if header_pending:
                            header_pending = False
                            if self.logger.isEnabledFor(logging.DEBUG):
                                self.logger.debug(f"Skipping header of {path.name}: {fields}")
                            continue
                        if len(fields) < 2:
                            raise MalformedRowError(str(path), line_number, fields)
                        rows.append(fields)
                except csv.Error as e:
                    raise MalformedTableError(path, reader.line_num, str(e)) from e
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(path, str(e)) from e

        if self.logger.isEnabledFor(logging.INFO):
            self.logger.info(f"Read {len(rows)} ASO(s) from {path}")
        return rows
