"""
Command that draws the box-drawing table of a long multiplication

Usage:
    long-multiplication-table --multiplicand 13 --multiplier 26
    long-multiplication-table --multiplicand 13 --multiplier 26 --output store --file table.txt
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from longmult.config import get_settings
from longmult.errors import InvalidParametersError
from longmult.gateway.validators import validate_operand
from longmult.logging import get_logger, setup_logging
from longmult.services.generator import build_multiplication
from longmult.services.table import render_table_to_string

logger = get_logger(__name__)

OUTPUT_DISPLAY = "display"
OUTPUT_STORE = "store"
OUTPUT_BOTH = "both"
DEFAULT_FILE = "long-multiplication.txt"


def operand(value: str) -> str:
    """argparse type for a non-negative integer kept as its digits"""
    try:
        return validate_operand("operand", value, None)
    except InvalidParametersError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="long-multiplication-table",
        description=(
            "Create a table with the long-multiplication method\n"
            "given two values: the multiplicand and the multiplier."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--multiplicand", type=operand, required=True,
        help="The first coefficient of the multiplication",
    )
    parser.add_argument(
        "--multiplier", type=operand, required=True,
        help="The second coefficient of the multiplication",
    )
    parser.add_argument(
        "--output", choices=[OUTPUT_DISPLAY, OUTPUT_STORE, OUTPUT_BOTH],
        default=OUTPUT_DISPLAY,
        help="Print the table, store it in a file, or both (default: display)",
    )
    parser.add_argument(
        "--file", type=Path, default=Path(DEFAULT_FILE),
        help=f"File used by the store output (default: {DEFAULT_FILE})",
    )
    parser.add_argument(
        "--no-symbols", action="store_true",
        help="Omit the symbols legend",
    )
    return parser


def store(content: str, file_path: Path) -> None:
    """Write the table to a file"""
    file_path.write_text(content, encoding="utf-8")
    logger.info("Stored long multiplication table", file=str(file_path))


def main(argv: Optional[List[str]] = None, stdout: Optional[TextIO] = None) -> int:
    settings = get_settings()
    setup_logging(settings.log_level, sys.stderr)

    args = build_parser().parse_args(argv)
    stdout = stdout or sys.stdout

    multiplication = build_multiplication(
        args.multiplier,
        args.multiplicand,
        "no" if args.no_symbols else "yes"
    )
    content = render_table_to_string(multiplication, settings.table_footer)

    if args.output in (OUTPUT_DISPLAY, OUTPUT_BOTH):
        stdout.write(content)

    if args.output in (OUTPUT_STORE, OUTPUT_BOTH):
        try:
            store(content, args.file)
        except OSError as e:
            logger.error("Cannot store the table", file=str(args.file), error=str(e))
            print(f"Error: cannot write '{args.file}': {e.strerror}", file=sys.stderr)
            return 1

    return 0


def run() -> None:
    """Console script entry point"""
    sys.exit(main())


if __name__ == "__main__":
    run()
