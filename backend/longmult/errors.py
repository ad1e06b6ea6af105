"""
Error types raised by the long multiplication calculator
"""

from typing import List


class LongMultiplicationError(Exception):
    """Base class for calculator errors"""


class ArgumentCountError(LongMultiplicationError):
    """The CGI command received the wrong number of arguments"""
    
    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Expected {expected} arguments, received {received}"
        )
    
    @property
    def missing_positions(self) -> List[int]:
        """1-based positions of the absent arguments"""
        return list(range(self.received + 1, self.expected + 1))
    
    @property
    def has_extra_arguments(self) -> bool:
        return self.received > self.expected


class InvalidParametersError(LongMultiplicationError):
    """The gateway parameters are malformed"""


class OperandTooLargeError(LongMultiplicationError):
    """An operand exceeds the configured digit ceiling"""
    
    def __init__(self, name: str, digits: int, limit: int):
        self.name = name
        self.digits = digits
        self.limit = limit
        super().__init__(
            f"The {name} is too large: {digits} digits (maximum {limit})"
        )
