"""Command-line interface for asosim."""

import argparse
import sys
from pathlib import Path
import platform

from .app import ScreenApp, ScreenConfig
from .core import DistanceMetric, ScreenError
from .utils.validation import resolve_delimiter, validate_cli_arguments
from . import __version__

__all__ = ["parser_resolve_path", "parse_metric", "create_parser", "main"]


def _build_version_string() -> str:
    return f"asosim {__version__}\nPython {platform.python_version()}"


def parser_resolve_path(path: str) -> Path:
    """Resolve CLI-provided path string to an absolute Path.

    Example:
        >>> parser_resolve_path("library.csv")
        PosixPath('/absolute/path/to/library.csv')
    """
    return Path(path).resolve()


def parse_metric(value: str) -> DistanceMetric:
    """Parse ``--list-by`` case-insensitively."""
    try:
        return DistanceMetric.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser.

    Returns:
        Configured ArgumentParser with all asosim options

    Example:
        >>> parser = create_parser()
        >>> args = parser.parse_args(["-a", "ACGTTGCA", "-l", "library.csv"])
        >>> print(args.aso_seq, args.list_by)
        ACGTTGCA levenshtein
    """
    parser = argparse.ArgumentParser(
        prog="asosim",
        description=(
            "Screen ASO sequences (5' -> 3') against a library of existing "
            "ASOs. Library entries with the same length and ATGC content are "
            "ranked by string distance."
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        epilog=(
            "Notes: tables hold the ASO name in column 1 and the sequence in "
            "column 2. Lines starting with # are not read."
        ),
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=_build_version_string(),
        help="Show program version and Python version, then exit",
    )

    grp_input = parser.add_argument_group("Input ASOs", "Query selection")
    grp_input.add_argument(
        "-a",
        "--aso-seq",
        dest="aso_seq",
        help="Input ASO sequence. One sequence, in 5' -> 3' orientation",
        default=None,
        metavar="SEQ",
    )
    grp_input.add_argument(
        "-m",
        "--multiple-aso-seq",
        dest="multiple_aso",
        help="Process multiple ASO sequences; requires --input-aso-file",
        action="store_true",
        default=False,
    )
    grp_input.add_argument(
        "--input-aso-file",
        dest="input_aso_file",
        help="Path to input ASO sequences (name in column 1, sequence in column 2)",
        type=parser_resolve_path,
        default=None,
        metavar="FILE",
    )
    grp_input.add_argument(
        "--input-no-header",
        dest="input_header",
        help="No header in the input ASO file",
        action="store_false",
        default=True,
    )

    grp_lib = parser.add_argument_group("Library", "Existing ASOs to screen against")
    grp_lib.add_argument(
        "-l",
        "--library-aso-file",
        dest="library_aso_file",
        help="Path to library of existing ASOs (name in column 1, sequence in column 2)",
        type=parser_resolve_path,
        required=True,
        metavar="LIBRARY",
    )
    grp_lib.add_argument(
        "--library-no-header",
        dest="library_header",
        help="No header in the library file",
        action="store_false",
        default=True,
    )
    grp_lib.add_argument(
        "-d",
        "--delimiter",
        help="Field delimiter of both tables ('tab' for tab-separated files)",
        type=resolve_delimiter,
        default=",",
    )

    grp_dist = parser.add_argument_group("Distance", "Ranking of matches")
    grp_dist.add_argument(
        "--list-by",
        dest="list_by",
        help=(
            "Distance used to rank matches (hamming, levenshtein, sift3; "
            "case-insensitive). Higher means a greater mismatch"
        ),
        type=parse_metric,
        default=DistanceMetric.LEVENSHTEIN,
        metavar="DISTANCE",
    )

    grp_log = parser.add_argument_group("Logging", "Logging verbosity and format")
    grp_log.add_argument(
        "-q",
        "--quiet",
        help="Suppress progress output",
        action="store_true",
        default=False,
    )
    grp_log.add_argument(
        "-L",
        "--log-level",
        help=(
            "Logging level (DEBUG, INFO, WARNING, ERROR); default depends on --quiet"
        ),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
    )
    grp_log.add_argument(
        "-F",
        "--log-format",
        help="Logging format: text or json",
        choices=["text", "json"],
        default="text",
    )

    return parser


def main() -> None:
    """CLI entry point.

    Parses and validates arguments, builds the configuration and runs the
    screen. Fatal input errors exit with a non-zero status before any
    report is printed.

    Example:
        >>> # python -m asosim -a ACGTTGCA -l library.csv --list-by hamming
        >>> # asosim -m --input-aso-file queries.csv -l library.csv --list-by sift3
    """
    parser = create_parser()
    args = parser.parse_args()

    validate_cli_arguments(args)

    config = ScreenConfig(
        library_file=args.library_aso_file,
        aso_seq=args.aso_seq,
        input_aso_file=args.input_aso_file,
        input_header=args.input_header,
        library_header=args.library_header,
        metric=args.list_by,
        delimiter=args.delimiter,
        verbose=not args.quiet,
        log_level=args.log_level,
        log_format=args.log_format,
        show_progress=not args.quiet,
    )

    app = ScreenApp(config)
    app.logger.info(f"Starting {_build_version_string().splitlines()[0]}")
    app.logger.info(f"Library: {config.library_file}")
    app.logger.info(f"Distance: {config.metric}")
    try:
        app.run()
    except ScreenError as e:
        sys.exit(f"ERROR: {e}")
    except KeyboardInterrupt:
        print("\nOperation interrupted by user. Exiting.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
