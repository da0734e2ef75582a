"""
Command-line interface for converting record files between formats.

Usage:
    python -m ypbank.cli.convert_cli --input <path> --input-format <fmt> --output-format <fmt> [options]
"""

import argparse
import sys
from pathlib import Path

from ypbank.config import load_settings
from ypbank.core.errors import CodecError
from ypbank.formats import FORMAT_NAMES, get_codec
from ypbank.observability.logger import configure_logging, get_logger, log_operation

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ypbank-convert",
        description="Convert YP Bank transaction records between csv, txt and bin formats",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # CSV to block text on stdout
  ypbank-convert --input records.csv --input-format csv --output-format txt

  # Block text to binary file
  ypbank-convert -i records.txt -f txt -o bin --output records.bin
        """
    )
    parser.add_argument("-i", "--input", required=True, help="Path to input file")
    parser.add_argument(
        "-f", "--input-format",
        required=True,
        choices=FORMAT_NAMES,
        help="Input file format"
    )
    parser.add_argument(
        "-o", "--output-format",
        choices=FORMAT_NAMES,
        help="Output format (default: from settings, csv)"
    )
    parser.add_argument("--output", help="Write to this file instead of stdout")
    parser.add_argument("--config", help="Path to settings YAML file")
    parser.add_argument("--log-level", help="Log level (default: from settings, INFO)")
    return parser


def convert_command(args) -> int:
    """
    Execute the conversion.

    Args:
        args: Parsed command-line arguments

    Returns:
        Process exit status
    """
    settings = load_settings(args.config)
    configure_logging(args.log_level or settings.log_level, settings.log_format)

    output_format = args.output_format or settings.default_output_format
    input_path = Path(args.input)

    try:
        with log_operation(
            "Converting records",
            logger=logger,
            input=str(input_path),
            input_format=args.input_format,
            output_format=output_format,
        ):
            with open(input_path, "rb") as source:
                records = get_codec(args.input_format).decode(source)

            if args.output:
                with open(args.output, "wb") as sink:
                    get_codec(output_format).encode(records, sink)
            else:
                sink = sys.stdout.buffer
                get_codec(output_format).encode(records, sink)
                sink.flush()
    except CodecError as e:
        logger.error(f"Failed to parse {args.input_format} data from '{input_path}': {e}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1

    logger.info(f"Converted {len(records)} records from {args.input_format} to {output_format}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return convert_command(args)
    except (FileNotFoundError, ValueError) as e:
        # Settings problems surface before logging is configured
        parser.error(str(e))


if __name__ == "__main__":
    sys.exit(main())
