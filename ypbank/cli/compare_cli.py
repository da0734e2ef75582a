"""
Command-line interface for comparing two record files.

Usage:
    python -m ypbank.cli.compare_cli --file1 <path> --format1 <fmt> --file2 <path> --format2 <fmt>
"""

import argparse
import sys
from pathlib import Path

from ypbank.compare import compare_record_sets, format_report
from ypbank.config import load_settings
from ypbank.core.errors import CodecError
from ypbank.core.models import RecordSet
from ypbank.formats import FORMAT_NAMES, get_codec
from ypbank.observability.logger import configure_logging, get_logger

logger = get_logger(__name__)


def read_records(path: Path, file_format: str) -> RecordSet:
    """Decode every record of a file."""
    with open(path, "rb") as source:
        return get_codec(file_format).decode(source)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ypbank-compare",
        description="Compare two YP Bank transaction record files by TX_ID",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ypbank-compare --file1 records.csv --format1 csv --file2 records.bin --format2 bin
        """
    )
    parser.add_argument("--file1", required=True, help="First record file")
    parser.add_argument("--format1", required=True, choices=FORMAT_NAMES, help="Format of --file1")
    parser.add_argument("--file2", required=True, help="Second record file")
    parser.add_argument("--format2", required=True, choices=FORMAT_NAMES, help="Format of --file2")
    parser.add_argument("--config", help="Path to settings YAML file")
    parser.add_argument("--log-level", help="Log level (default: from settings, INFO)")
    return parser


def compare_command(args) -> int:
    """
    Execute the comparison and print the report to stdout.

    Returns:
        0 when both files decode (even if they differ), 1 otherwise
    """
    settings = load_settings(args.config)
    configure_logging(args.log_level or settings.log_level, settings.log_format)

    file1, file2 = Path(args.file1), Path(args.file2)
    try:
        records1 = read_records(file1, args.format1)
        records2 = read_records(file2, args.format2)
    except CodecError as e:
        logger.error(f"Failed to parse input: {e}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1

    report = compare_record_sets(records1, records2, str(file1), str(file2))
    for line in format_report(report):
        print(line)

    logger.info(
        "Comparison complete",
        extra={
            "differences": len(report.differences),
            "only_in_first": len(report.only_in_first),
            "only_in_second": len(report.only_in_second),
        },
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return compare_command(args)
    except (FileNotFoundError, ValueError) as e:
        parser.error(str(e))


if __name__ == "__main__":
    sys.exit(main())
