"""
Box-drawing table of the long multiplication

The table shows every digit in its own cell: the position header, both
operands, the carry and unit row of each multiplier digit, the sum of every
column, the product rebuilt from those sums and the validation product.
"""

import io
from typing import List, Optional, TextIO

from longmult.logging import get_logger
from longmult.models.schemas import Multiplication

logger = get_logger(__name__)

BLANK = "   "

SYMBOLS = [
    "",
    "Symbols",
    "=======",
    "Pos. = Position.",
    "Ops. = Operations of the long multiplication.",
    "Sum. = Sum of each column of the multiplication.",
    "Pro. = Product of the multiplication.",
    "^ = Carry-over.",
    "n R = The row number.",
    "n C = The column number of the sum of the rows.",
    "* Replace 'n' for a number.",
    "P = The product of multiplication.",
    "V = Validate the product of multiplication.",
    "",
]


def digit_cell(digit: str) -> str:
    return f" {digit} "


def position_cell(position: int) -> str:
    """Column number, centered while it fits in the cell"""
    cell = str(position)
    if position < 100:
        cell = " " + cell
    if position < 10:
        cell += " "
    return cell


def column_sums(multiplication: Multiplication) -> List[int]:
    """
    Sum the units and carries that fall in every column

    Args:
        multiplication: Aggregate with both operand strings

    Returns:
        One sum per column, units column first
    """
    m = multiplication
    sums = [0] * (m.multiplicand_size + m.multiplier_size)

    for a in range(m.multiplier_size):
        for b in range(m.multiplicand_size):
            product = m.multiplier_digit(a) * m.multiplicand_digit(b)
            sums[a + b] += product % 10
            sums[a + b + 1] += product // 10

    return sums


class TableRenderer:
    """Streams the box-drawing table of a long multiplication"""

    def __init__(
        self,
        multiplication: Multiplication,
        stream: TextIO,
        footer: Optional[List[str]] = None
    ):
        self.multiplication = multiplication
        self.stream = stream
        self.footer = footer or []
        self.length = multiplication.multiplicand_size + multiplication.multiplier_size

    def render(self) -> None:
        """Write the whole table to the stream"""
        if self.multiplication.is_printing_description:
            self._write_lines(SYMBOLS)

        self._write_rule("┏", "━", "┓")
        self._write_positions()
        self._write_title("Ops.", "┯")
        self._write_operands()
        self._write_operations()
        self._write_title("Sum.", "┯")
        self._write_long_sum()
        self._write_product()
        self._write_rule("┗", "┷", "┛")

        if self.footer:
            self._write_lines([""] + ["---"] + self.footer)

        logger.debug(
            "Rendered table",
            columns=self.length,
            result=self.multiplication.result
        )

    def _write_positions(self) -> None:
        self._write_title("Pos.")
        self._write_rule("┠", "┬", "┨", "┄┄┄")
        self._write_cells(
            [position_cell(position) for position in range(self.length, 0, -1)]
        )
        self._write_rule("┣", "┷", "┫")

    def _write_operands(self) -> None:
        m = self.multiplication
        self._write_cells(self._right_aligned(m.multiplicand_str))
        self._write_cells(
            [" x "] + self._right_aligned(m.multiplier_str, self.length - 1)
        )
        self._write_rule("┣", "┿", "┫")

    def _write_operations(self) -> None:
        """Carry row and unit row for each multiplier digit"""
        m = self.multiplication
        size = m.multiplicand_size

        for a in range(m.multiplier_size):
            row = a + 1
            products = [
                m.multiplier_digit(a) * m.multiplicand_digit(b)
                for b in range(size - 1, -1, -1)
            ]
            carries = [digit_cell(str(product // 10)) for product in products]
            units = [digit_cell(str(product % 10)) for product in products]

            self._write_cells(
                [BLANK] * (self.length - size - row) + carries + [BLANK] * row,
                " ^"
            )
            self._write_rule("┠", "┼", "┨", "┈┈┈")
            self._write_cells(
                [BLANK] * (self.length - size - row + 1) + units + [BLANK] * (row - 1),
                f" {row} R"
            )
            if row < m.multiplier_size:
                self._write_rule("┠", "┼", "┨", "───")

        self._write_rule("┣", "┷", "┫")

    def _write_long_sum(self) -> None:
        """One row per column sum, written under its column"""
        for column, total in enumerate(column_sums(self.multiplication)):
            digits = str(total)
            self._write_cells(
                [BLANK] * (self.length - column - len(digits))
                + [digit_cell(digit) for digit in digits]
                + [BLANK] * column,
                f" {column + 1} C"
            )
            if column + 1 < self.length:
                self._write_rule("┠", "┼", "┨", "┈┈┈")

        self._write_rule("┣", "┷", "┫")

    def _write_product(self) -> None:
        """Product rebuilt from the column sums, then the validation product"""
        sums = column_sums(self.multiplication)
        product = sum(total * 10 ** column for column, total in enumerate(sums))

        self._write_title("Pro.", "┯")
        self._write_cells(self._right_aligned(str(product), fill=" 0 "), " P")
        self._write_rule("┠", "┼", "┨", "───")
        self._write_cells(self._right_aligned(str(self.multiplication.result)), " V")

    def _right_aligned(self, digits: str, width: int = None, fill: str = BLANK) -> List[str]:
        width = self.length if width is None else width
        return [fill] * (width - len(digits)) + [digit_cell(digit) for digit in digits]

    def _write_title(self, title: str, joint: str = None) -> None:
        self.stream.write("┃" + title.ljust(self.length * 4 - 1) + "┃\n")
        if joint:
            self._write_rule("┣", joint, "┫")

    def _write_rule(self, left: str, joint: str, right: str, segment: str = "━━━") -> None:
        self.stream.write(left + joint.join([segment] * self.length) + right + "\n")

    def _write_cells(self, cells: List[str], suffix: str = "") -> None:
        self.stream.write("┃" + "│".join(cells) + "┃" + suffix + "\n")

    def _write_lines(self, lines: List[str]) -> None:
        for line in lines:
            self.stream.write(line + "\n")


def render_table(
    multiplication: Multiplication,
    stream: TextIO,
    footer: Optional[List[str]] = None
) -> None:
    """Stream the table of a multiplication"""
    TableRenderer(multiplication, stream, footer).render()


def render_table_to_string(
    multiplication: Multiplication,
    footer: Optional[List[str]] = None
) -> str:
    """Render the table into a string"""
    buffer = io.StringIO()
    render_table(multiplication, buffer, footer)
    return buffer.getvalue()
