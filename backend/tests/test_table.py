"""
Tests for the box-drawing table
"""

import pytest
import sys
import os

# Add the backend directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from longmult.services.generator import build_multiplication
from longmult.services.table import (
    SYMBOLS,
    column_sums,
    position_cell,
    render_table_to_string,
)


def test_column_sums():
    """Test units and carries are summed per column, units first"""
    assert column_sums(build_multiplication("26", "13")) == [8, 13, 2, 0]
    assert column_sums(build_multiplication("2", "3")) == [6, 0]


def test_position_cell():
    """Test column numbers keep the cell width up to 999"""
    assert position_cell(1) == " 1 "
    assert position_cell(12) == " 12"
    assert position_cell(123) == "123"


def test_table_of_thirteen_by_twenty_six():
    """Test the full table of 13 x 26"""
    multiplication = build_multiplication("26", "13", "no")
    
    expected = (
        "┏━━━━━━━━━━━━━━━┓\n"
        "┃Pos.           ┃\n"
        "┠┄┄┄┬┄┄┄┬┄┄┄┬┄┄┄┨\n"
        "┃ 4 │ 3 │ 2 │ 1 ┃\n"
        "┣━━━┷━━━┷━━━┷━━━┫\n"
        "┃Ops.           ┃\n"
        "┣━━━┯━━━┯━━━┯━━━┫\n"
        "┃   │   │ 1 │ 3 ┃\n"
        "┃ x │   │ 2 │ 6 ┃\n"
        "┣━━━┿━━━┿━━━┿━━━┫\n"
        "┃   │ 0 │ 1 │   ┃ ^\n"
        "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
        "┃   │   │ 6 │ 8 ┃ 1 R\n"
        "┠───┼───┼───┼───┨\n"
        "┃ 0 │ 0 │   │   ┃ ^\n"
        "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
        "┃   │ 2 │ 6 │   ┃ 2 R\n"
        "┣━━━┷━━━┷━━━┷━━━┫\n"
        "┃Sum.           ┃\n"
        "┣━━━┯━━━┯━━━┯━━━┫\n"
        "┃   │   │   │ 8 ┃ 1 C\n"
        "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
        "┃   │ 1 │ 3 │   ┃ 2 C\n"
        "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
        "┃   │ 2 │   │   ┃ 3 C\n"
        "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
        "┃ 0 │   │   │   ┃ 4 C\n"
        "┣━━━┷━━━┷━━━┷━━━┫\n"
        "┃Pro.           ┃\n"
        "┣━━━┯━━━┯━━━┯━━━┫\n"
        "┃ 0 │ 3 │ 3 │ 8 ┃ P\n"
        "┠───┼───┼───┼───┨\n"
        "┃   │ 3 │ 3 │ 8 ┃ V\n"
        "┗━━━┷━━━┷━━━┷━━━┛\n"
    )
    
    assert render_table_to_string(multiplication) == expected


def test_operations_of_two_digit_multiplier():
    """Test the carry and unit rows of 579 x 48"""
    multiplication = build_multiplication("48", "579", "no")
    
    expected = (
        "┃   │ 4 │ 5 │ 7 │   ┃ ^\n"
        "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
        "┃   │   │ 0 │ 6 │ 2 ┃ 1 R\n"
        "┠───┼───┼───┼───┼───┨\n"
        "┃ 2 │ 2 │ 3 │   │   ┃ ^\n"
        "┠┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┼┈┈┈┨\n"
        "┃   │ 0 │ 8 │ 6 │   ┃ 2 R\n"
        "┣━━━┷━━━┷━━━┷━━━┷━━━┫\n"
    )
    
    assert expected in render_table_to_string(multiplication)


def test_long_sum_of_single_digits():
    """Test the sum, product and validation rows of 3 x 2"""
    multiplication = build_multiplication("2", "3", "no")
    
    expected = (
        "┃   │ 6 ┃ 1 C\n"
        "┠┈┈┈┼┈┈┈┨\n"
        "┃ 0 │   ┃ 2 C\n"
        "┣━━━┷━━━┫\n"
        "┃Pro.   ┃\n"
        "┣━━━┯━━━┫\n"
        "┃ 0 │ 6 ┃ P\n"
        "┠───┼───┨\n"
        "┃   │ 6 ┃ V\n"
        "┗━━━┷━━━┛\n"
    )
    
    assert render_table_to_string(multiplication).endswith(expected)


def test_symbols_legend_follows_description_flag():
    """Test the legend is printed only with descriptions"""
    legend = "\n".join(SYMBOLS) + "\n"
    
    verbose = render_table_to_string(build_multiplication("3", "9", "yes"))
    plain = render_table_to_string(build_multiplication("3", "9", "no"))
    
    assert verbose.startswith(legend + "┏━━━━━━━┓\n")
    assert verbose[len(legend):] == plain
    assert "V = Validate the product of multiplication." in verbose


def test_footer():
    """Test footer lines follow a separator after the table"""
    multiplication = build_multiplication("3", "9", "no")
    
    text = render_table_to_string(multiplication, ["Author: Ada", "License: GPL-3.0"])
    
    assert text.endswith("┗━━━┷━━━┛\n\n---\nAuthor: Ada\nLicense: GPL-3.0\n")


@pytest.mark.parametrize("multiplier,multiplicand", [
    ("8642", "13597"),
    ("0", "999"),
    ("999", "999"),
    ("007", "3"),
])
def test_product_row_matches_validation(multiplier, multiplicand):
    """Test the product rebuilt from column sums equals the real product"""
    multiplication = build_multiplication(multiplier, multiplicand, "no")
    lines = render_table_to_string(multiplication).splitlines()
    
    product_row = next(line for line in lines if line.endswith(" P"))
    validation_row = next(line for line in lines if line.endswith(" V"))
    
    def digits(row):
        return "".join(ch for ch in row[:-2] if ch.isdigit()).lstrip("0") or "0"
    
    assert digits(product_row) == digits(validation_row) == str(multiplication.result)
    assert all(len(line) == len(lines[0]) for line in lines if line.endswith("┫"))
