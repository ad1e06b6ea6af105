"""
Partial product generation for the long multiplication
"""

from longmult.logging import get_logger
from longmult.models.schemas import Multiplication

logger = get_logger(__name__)


def generate_operations(multiplication: Multiplication) -> Multiplication:
    """
    Populate the (partial, carry, sum) triples of a multiplication
    
    Each multiplier digit, from the least significant one, is multiplied by
    every multiplicand digit. The last digit of every product lands in the
    partial value at the multiplicand digit's place; the leading digit is
    carried one place to the left.
    
    Args:
        multiplication: Aggregate built from the operand strings
        
    Returns:
        The same aggregate, with one triple appended per multiplier digit
    """
    for a in range(multiplication.multiplier_size):
        digit_multiplier = multiplication.multiplier_digit(a)
        partial = 0
        carry = 0
        place = 1
        
        for b in range(multiplication.multiplicand_size):
            digit_multiplicand = multiplication.multiplicand_digit(b)
            product = digit_multiplier * digit_multiplicand
            last_digit = product % 10
            leading_digits = product // 10
            
            partial += last_digit * place
            place *= 10
            carry += leading_digits * place
        
        multiplication.add_operation(partial, carry)
    
    logger.debug(
        "Generated operations",
        multiplier=multiplication.multiplier_str,
        multiplicand=multiplication.multiplicand_str,
        steps=multiplication.steps
    )
    
    return multiplication


def build_multiplication(
    multiplier: str,
    multiplicand: str,
    print_description: str = None
) -> Multiplication:
    """Build the aggregate and generate its operations"""
    multiplication = Multiplication.from_strings(
        multiplier, multiplicand, print_description
    )
    return generate_operations(multiplication)
