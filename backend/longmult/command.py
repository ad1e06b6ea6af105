"""
CGI command that prints the long multiplication of two numbers

Usage:
    calculator-long-multiplication MULTIPLIER MULTIPLICAND OUTPUT_TYPE PRINT_DESCRIPTION
"""

import sys
from typing import List, Optional, TextIO

from longmult.config import get_settings
from longmult.errors import ArgumentCountError
from longmult.logging import get_logger, setup_logging
from longmult.services.generator import build_multiplication
from longmult.services.renderer import render_diagram

logger = get_logger(__name__)

EXPECTED_ARGUMENTS = 4
EXIT_SUCCESS = 0
ERROR_ARGUMENTS = 2


def content_type_header(output_type: str) -> str:
    """Header line and the blank line that ends the CGI headers"""
    return f"Content-Type: text/{output_type};charset=UTF-8\n\n"


def write_argument_error(error: ArgumentCountError, stdout: TextIO) -> None:
    """Plain-text diagnostic, since the output type may be the missing argument"""
    stdout.write(content_type_header("plain"))
    stdout.write("Error: Some arguments are missing.\n")
    for position in error.missing_positions:
        stdout.write(f"The argument #{position} is missing.\n")
    if error.has_extra_arguments:
        stdout.write("Too many arguments supplied.\n")
    stdout.write("Exiting...\n")


def run_command(arguments: List[str], stdout: TextIO) -> None:
    """
    Print the header and the diagram for already split arguments

    Args:
        arguments: multiplier, multiplicand, output type and description flag
        stdout: Sink for the CGI response

    Raises:
        ArgumentCountError: If there are not exactly four arguments
    """
    if len(arguments) != EXPECTED_ARGUMENTS:
        raise ArgumentCountError(EXPECTED_ARGUMENTS, len(arguments))

    multiplier, multiplicand, output_type, print_description = arguments

    stdout.write(content_type_header(output_type))
    multiplication = build_multiplication(multiplier, multiplicand, print_description)
    render_diagram(multiplication, stdout)

    logger.info(
        "Printed long multiplication",
        multiplier=multiplier,
        multiplicand=multiplicand,
        output_type=output_type,
        result=multiplication.result
    )


def main(argv: Optional[List[str]] = None, stdout: Optional[TextIO] = None) -> int:
    """Run the command and return its exit status"""
    settings = get_settings()
    setup_logging(settings.log_level, sys.stderr)

    arguments = sys.argv[1:] if argv is None else argv
    stdout = stdout or sys.stdout

    try:
        run_command(arguments, stdout)
    except ArgumentCountError as e:
        logger.warning(
            "Wrong number of arguments",
            expected=e.expected,
            received=e.received
        )
        write_argument_error(e, stdout)
        return ERROR_ARGUMENTS

    return EXIT_SUCCESS


def run() -> None:
    """Console script entry point"""
    sys.exit(main())


if __name__ == "__main__":
    run()
