"""
Gateway parameter validation utilities
"""

import re
from typing import Optional

from pydantic import BaseModel

from longmult.errors import InvalidParametersError, OperandTooLargeError

PARAMETER_SEPARATOR = ","
MIN_PARAMETERS = 2
MAX_PARAMETERS = 4

OUTPUT_TYPE_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9!#$&^_.+-]*$")
OPERAND_PATTERN = re.compile(r"^[0-9]+$")


class MultiplicationRequest(BaseModel):
    """Validated gateway parameters"""
    multiplier: str
    multiplicand: str
    output_type: str
    print_description: str


def split_parameters(raw: str) -> list:
    """Split the comma-joined parameters, ignoring surrounding spaces"""
    if not raw or not raw.strip():
        return []
    return [part.strip() for part in raw.split(PARAMETER_SEPARATOR)]


def validate_operand(name: str, value: str, max_digits: Optional[int]) -> str:
    """
    Validate one operand
    
    Args:
        name: Operand name used in the diagnostics
        value: Raw operand text
        max_digits: Longest accepted operand, None for no limit
        
    Returns:
        The operand, unchanged
    """
    if not value:
        raise InvalidParametersError(f"The {name} is required.")
    
    if not OPERAND_PATTERN.match(value):
        raise InvalidParametersError(
            f"The {name} must be a non-negative integer, received '{value}'."
        )
    
    if max_digits is not None and len(value) > max_digits:
        raise OperandTooLargeError(name, len(value), max_digits)
    
    return value


def parse_parameters(
    raw: str,
    default_output_type: str = "plain",
    default_print_description: str = "yes",
    max_digits: Optional[int] = None
) -> MultiplicationRequest:
    """
    Parse `multiplier,multiplicand[,output_type][,print_description]`
    
    Args:
        raw: Comma-joined parameters from the URL
        default_output_type: Output type when the third parameter is absent
        default_print_description: Flag when the fourth parameter is absent
        max_digits: Longest accepted operand, None for no limit
        
    Returns:
        Validated request
        
    Raises:
        InvalidParametersError: If the parameters are malformed
        OperandTooLargeError: If an operand exceeds max_digits
    """
    parameters = split_parameters(raw)
    
    if not MIN_PARAMETERS <= len(parameters) <= MAX_PARAMETERS:
        raise InvalidParametersError(
            "Expected 'multiplier,multiplicand[,output_type][,print_description]' "
            f"(e.g. '5,79,plain,yes'), received {len(parameters)} parameters."
        )
    
    multiplier = validate_operand("multiplier", parameters[0], max_digits)
    multiplicand = validate_operand("multiplicand", parameters[1], max_digits)
    
    output_type = parameters[2] if len(parameters) > 2 and parameters[2] else default_output_type
    if not OUTPUT_TYPE_PATTERN.match(output_type):
        raise InvalidParametersError(f"Invalid output type '{output_type}'.")
    
    print_description = (
        parameters[3] if len(parameters) > 3 and parameters[3] else default_print_description
    )
    
    return MultiplicationRequest(
        multiplier=multiplier,
        multiplicand=multiplicand,
        output_type=output_type,
        print_description=print_description
    )
