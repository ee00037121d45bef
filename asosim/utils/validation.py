"""Input validation utilities."""

import sys
import argparse

__all__ = ["validate_cli_arguments", "resolve_delimiter"]

_DELIMITER_ALIASES = {"tab": "\t", "\\t": "\t", "comma": ",", "semicolon": ";"}


def resolve_delimiter(value: str) -> str:
    """Map a CLI delimiter value to a single character."""
    delimiter = _DELIMITER_ALIASES.get(value.lower(), value)
    if len(delimiter) != 1:
        raise argparse.ArgumentTypeError(
            f"delimiter must be a single character or 'tab', got {value!r}"
        )
    return delimiter


def validate_cli_arguments(args: argparse.Namespace) -> None:
    """Validate CLI argument combinations.

    Exactly one query selection is required: a single ``--aso-seq`` or
    ``--multiple-aso-seq`` together with ``--input-aso-file``.

    Args:
        args: Parsed command line arguments
    """
    if args.aso_seq is not None and (args.multiple_aso or args.input_aso_file):
        sys.exit(
            "ERROR: --aso-seq conflicts with --multiple-aso-seq/--input-aso-file"
        )

    if args.aso_seq is None and not args.multiple_aso:
        sys.exit(
            "ERROR: Enter ASO sequence (--aso-seq) or provide file path to ASOs "
            "(--multiple-aso-seq --input-aso-file FILE)"
        )

    if args.aso_seq is not None and not args.aso_seq.strip():
        sys.exit("ERROR: --aso-seq must not be empty")

    if args.aso_seq is not None:
        # undecodable argv bytes arrive as lone surrogates
        try:
            args.aso_seq.encode("utf-8")
        except UnicodeEncodeError:
            sys.exit("ERROR: --aso-seq contains bytes that are not valid UTF-8")

    if args.multiple_aso and args.input_aso_file is None:
        sys.exit("ERROR: --multiple-aso-seq requires --input-aso-file")

    if args.input_aso_file is not None and not args.multiple_aso:
        sys.exit("ERROR: --input-aso-file requires --multiple-aso-seq")

    if not args.input_header and args.input_aso_file is None:
        sys.exit("ERROR: --input-no-header requires --input-aso-file")
