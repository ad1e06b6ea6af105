"""
Fixed-width text rendering of a long multiplication
"""

import io
from typing import TextIO

from longmult.logging import get_logger
from longmult.models.schemas import Multiplication
from longmult.services.digits import count_digits, fill

logger = get_logger(__name__)

GUTTER_SIZE = 2


class DiagramRenderer:
    """Streams the long multiplication diagram row by row"""

    def __init__(self, multiplication: Multiplication, stream: TextIO):
        self.multiplication = multiplication
        self.stream = stream
        self.width = self.column_width()

    def column_width(self) -> int:
        """
        Width of the numeric column, without the gutter.

        It is the result size, widened when an operand or a staggered row
        would not fit (e.g. a zero product of multi-digit operands).

        Returns:
            Number of characters reserved for the numbers
        """
        m = self.multiplication
        width = max(m.result_size, m.multiplicand_size, m.multiplier_size)

        for index, partial, carry, total in m.triples():
            for value in (partial, carry, total):
                width = max(width, index + count_digits(value))

        return width

    def render(self) -> None:
        """Write the whole diagram to the stream"""
        m = self.multiplication

        self._write_headers()
        self._write_separator("=")

        for index, partial, carry, total in m.triples():
            label = index + 1
            stagger = fill(" ", index)
            self._write_row(
                "  ", index, str(partial),
                f"{stagger} ---> First digit: b{label} * a[x]"
            )
            self._write_row(
                "+ ", index, str(carry),
                f" ---> Carry: b{label} * a[x]"
            )
            self._write_row(
                "= ", index, str(total),
                " ---> Result of the sum"
            )
            if label < m.steps:
                self._write_separator("-")

        self._write_separator("=")

        for index, _, _, total in m.triples():
            shifted = str(total) + fill("0", index)
            self._write_row(
                "+ ", 0, shifted,
                f" ---> Result: b{index + 1} * a"
            )

        self._write_separator("-")
        self._write_row("= ", 0, str(m.result), " ---> Final result")

        logger.debug(
            "Rendered diagram",
            result=m.result,
            width=self.width,
            descriptions=m.is_printing_description
        )

    def _write_headers(self) -> None:
        m = self.multiplication
        self._write_row(
            "  ", 0, m.multiplicand_str, " ---> Multiplicand => a"
        )
        self._write_row(
            "x ", 0, m.multiplier_str, " ---> Multiplier => b"
        )

    def _write_row(self, gutter: str, index: int, digits: str, description: str) -> None:
        """Right-align `digits` on the column that ends `index` places left"""
        pad = (self.width - index) - len(digits)
        line = gutter + fill(" ", pad) + digits
        if self.multiplication.is_printing_description:
            line += description
        self.stream.write(line + "\n")

    def _write_separator(self, char: str) -> None:
        self.stream.write(fill(char, GUTTER_SIZE + self.width) + "\n")


def render_diagram(multiplication: Multiplication, stream: TextIO) -> None:
    """Stream the diagram of a populated multiplication"""
    DiagramRenderer(multiplication, stream).render()


def render_to_string(multiplication: Multiplication) -> str:
    """Render the diagram into a string"""
    buffer = io.StringIO()
    render_diagram(multiplication, buffer)
    return buffer.getvalue()
