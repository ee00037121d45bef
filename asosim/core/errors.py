"""Exception types raised while loading inputs and screening ASOs."""

from pathlib import Path
from typing import Optional, Sequence, Union

__all__ = [
    "ScreenError",
    "MalformedRowError",
    "SourceUnavailableError",
    "MissingSelectionError",
    "MalformedTableError",
]


class ScreenError(Exception):
    """Base class for fatal screening errors."""


class MalformedRowError(ScreenError):
    """A table row does not provide both a name and a sequence."""

    def __init__(
        self,
        source: Optional[str],
        line_number: Optional[int],
        row: Sequence[str],
    ):
        self.source = source
        self.line_number = line_number
        self.row = list(row)
        where = source or "input"
        if line_number is not None:
            where = f"{where}, line {line_number}"
        super().__init__(
            f"{where}: Incomplete row {self.row!r}. Name and sequence necessary."
        )


class SourceUnavailableError(ScreenError):
    """An input table could not be opened or read."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Unable to open {self.path}: {reason}")


class MissingSelectionError(ScreenError):
    """Neither a single ASO sequence nor an ASO file was selected."""


class MalformedTableError(ScreenError):
    """An input table opened fine but is not valid delimited text."""

    def __init__(self, path: Union[str, Path], line_number: int, reason: str):
        self.path = Path(path)
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{self.path}, line {line_number}: Malformed table: {reason}")
