"""
Numeric and string helpers for the long multiplication layout
"""

import sys


def allow_long_numbers() -> None:
    """Lift the interpreter's int/str conversion limit (Python 3.11+)"""
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)


# Operands and products are rendered through str() whatever their size
allow_long_numbers()


def count_digits(number: int) -> int:
    """
    Count the decimal digits of a non-negative number.
    
    Args:
        number (int): Non-negative number
    
    Returns:
        int: Digit count, where zero counts as one digit
    """
    if number < 0:
        raise ValueError("Number must be non-negative")
    
    return len(str(number))


def digit_at(number_str: str, index: int) -> int:
    """
    Read the digit at `index` counted from the right of a decimal string.
    
    Args:
        number_str (str): Decimal digits as they were displayed
        index (int): 0 for the least significant digit
    
    Returns:
        int: Value of the digit character
    """
    return ord(number_str[len(number_str) - 1 - index]) - ord('0')


def fill(char: str, count: int) -> str:
    """Repeat `char` `count` times (nothing when count is not positive)."""
    return char * max(count, 0)
