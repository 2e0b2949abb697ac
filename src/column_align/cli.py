"""
Command-Line Interface for column-align.

This module provides the command-line interface for the alignment tool.

Usage:
    column-align data.csv
    column-align data.csv -o aligned.txt --justify right
    column-align -s '|' --output-sep ' | ' -t '"' < data.txt
    column-align data.csv --columns 1,3 --column-justify 3=right
"""

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from column_align import __version__
from column_align.config import Config, create_default_config, merge_configs
from column_align.core.padding import Justification
from column_align.exceptions import ConfigError
from column_align.logging_config import setup_logging
from column_align.main import AlignmentPipeline, AlignmentResult

# Spellings accepted for separators that are awkward to type in a shell
SEPARATOR_ALIASES = {
    "\\t": "\t",
    "tab": "\t",
    "space": " ",
}


def separator_arg(value: str) -> str:
    """Argument type for separators; resolves aliases such as '\\t'."""
    value = SEPARATOR_ALIASES.get(value, value)
    if not value:
        raise argparse.ArgumentTypeError("separator must not be empty")
    return value


def justification_arg(value: str) -> Justification:
    """Argument type for --justify."""
    try:
        return Justification.parse(value)
    except ConfigError as e:
        raise argparse.ArgumentTypeError(e.message)


def column_list_arg(value: str) -> List[int]:
    """Argument type for --columns: comma separated 1-based numbers."""
    columns = []
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit() or int(part) < 1:
            raise argparse.ArgumentTypeError(f"invalid column number: '{part}'")
        columns.append(int(part))
    return columns


def column_justification_arg(value: str) -> Tuple[int, Justification]:
    """Argument type for --column-justify: N=left|right|center."""
    column, sep, name = value.partition("=")
    if not sep or not column.strip().isdigit() or int(column) < 1:
        raise argparse.ArgumentTypeError(
            f"expected COLUMN=JUSTIFICATION, e.g. 2=right, got '{value}'"
        )
    return int(column), justification_arg(name)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="column-align",
        description="Align the columns of delimited text.",
        epilog="Column numbers start at 1.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Input/Output
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="File to align (default: standard input)",
        metavar="FILE",
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Write the result to FILE (default: standard output)",
        metavar="FILE",
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Configuration file (JSON)",
        metavar="FILE",
    )

    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="File encoding (default: utf-8)",
    )

    # Field options
    parser.add_argument(
        "-s", "--sep",
        type=separator_arg,
        default=",",
        help="Input field separator (default: ',')",
        metavar="SEP",
    )

    parser.add_argument(
        "--output-sep",
        type=separator_arg,
        help="Output field separator (default: same as --sep)",
        metavar="SEP",
    )

    parser.add_argument(
        "-t", "--qualifier",
        help="Text qualifier; separators inside qualified fields are kept",
        metavar="QUAL",
    )

    # Padding options
    parser.add_argument(
        "-j", "--justify",
        type=justification_arg,
        default=Justification.LEFT,
        help="Justification of every column: left, right or center (default: left)",
        metavar="JUST",
    )

    parser.add_argument(
        "--column-justify",
        type=column_justification_arg,
        action="append",
        default=[],
        help="Justification of one column, e.g. 2=right (can be specified multiple times)",
        metavar="N=JUST",
    )

    parser.add_argument(
        "-p", "--pad",
        type=int,
        default=1,
        help="Spaces on each side of the separator (default: 1)",
        metavar="N",
    )

    parser.add_argument(
        "-f", "--columns",
        type=column_list_arg,
        default=[],
        help="Only output these columns, e.g. 1,3",
        metavar="LIST",
    )

    # Output options
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only report errors",
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    return parser


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = create_parser()
    return parser.parse_args(args)


def args_to_config(args: argparse.Namespace) -> Config:
    """Convert parsed arguments to Config object."""
    config = create_default_config()

    config.input_file = args.input
    config.output_file = args.output
    config.encoding = args.encoding

    config.separator = args.sep
    config.output_separator = args.output_sep
    config.qualifier = args.qualifier

    config.justification = args.justify
    overrides: Dict[int, Justification] = {}
    for column, justification in args.column_justify:
        overrides[column] = justification
    config.column_justification = overrides
    config.pad = args.pad
    config.columns = args.columns

    config.verbose = args.verbose
    config.quiet = args.quiet
    config.log_level = args.log_level

    # Command-line args override file config
    if args.config:
        file_config = Config.load_from_file(args.config)
        config = merge_configs(file_config, config)

    return config


def log_level_for(config: Config) -> str:
    """Pick the effective log level from --verbose/--quiet and --log-level."""
    if config.quiet:
        return "ERROR"
    if config.verbose and config.log_level.upper() == "WARNING":
        return "INFO"
    return config.log_level


def report(result: AlignmentResult) -> None:
    """Print a run summary to stderr."""
    widths = ", ".join(
        f"{column + 1}:{width}" for column, width in sorted(result.column_widths.items())
    )
    print(
        f"Aligned {result.lines_written}/{result.lines_read} lines "
        f"in {result.processing_time:.2f} seconds",
        file=sys.stderr,
    )
    if widths:
        print(f"Column widths: {widths}", file=sys.stderr)


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code
    """
    parsed = parse_args(args)

    try:
        config = args_to_config(parsed)
    except (ConfigError, OSError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"Configuration error: {error}", file=sys.stderr)
        return 1

    setup_logging(log_level_for(config), verbose=config.verbose)

    result = AlignmentPipeline(config).run()
    if not result.success:
        for error in result.errors:
            print(f"Error: {error}", file=sys.stderr)
        return 1

    if config.verbose:
        report(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
