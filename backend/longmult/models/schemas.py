"""
Pydantic schemas for the long multiplication data
"""

from pydantic import BaseModel
from typing import Iterator, List, Optional, Tuple

from longmult.services.digits import count_digits, digit_at


OPERATION_SIZE = 3


def parse_print_description(flag: Optional[str]) -> bool:
    """Descriptions are printed unless the flag starts with 'n' or 'N'"""
    if not flag:
        return True
    return flag[0] not in ("n", "N")


class Multiplication(BaseModel):
    """One long multiplication and its generated operations"""
    multiplier: int
    multiplier_str: str
    multiplier_size: int
    multiplicand: int
    multiplicand_str: str
    multiplicand_size: int
    result: int
    result_size: int
    
    # Flat (partial, carry, sum) triples, least significant multiplier digit first
    operations: List[int] = []
    is_printing_description: bool = True
    
    @classmethod
    def from_strings(
        cls,
        multiplier: str,
        multiplicand: str,
        print_description: Optional[str] = None
    ) -> "Multiplication":
        """
        Build the aggregate from the decimal strings of both operands
        
        Args:
            multiplier: Decimal digits of the multiplier
            multiplicand: Decimal digits of the multiplicand
            print_description: Flag argument; 'n...' disables descriptions
            
        Returns:
            Multiplication with an empty operations list
        """
        multiplier_value = int(multiplier)
        multiplicand_value = int(multiplicand)
        result = multiplier_value * multiplicand_value
        
        return cls(
            multiplier=multiplier_value,
            multiplier_str=multiplier,
            multiplier_size=len(multiplier),
            multiplicand=multiplicand_value,
            multiplicand_str=multiplicand,
            multiplicand_size=len(multiplicand),
            result=result,
            result_size=count_digits(result),
            is_printing_description=parse_print_description(print_description)
        )
    
    def multiplier_digit(self, index: int) -> int:
        return digit_at(self.multiplier_str, index)
    
    def multiplicand_digit(self, index: int) -> int:
        return digit_at(self.multiplicand_str, index)
    
    def add_operation(self, partial: int, carry: int) -> None:
        """Append one (partial, carry, sum) triple"""
        self.operations.extend([partial, carry, partial + carry])
    
    def triples(self) -> Iterator[Tuple[int, int, int, int]]:
        """Yield (digit_index, partial, carry, sum) for every operation"""
        for index in range(0, len(self.operations), OPERATION_SIZE):
            partial, carry, total = self.operations[index:index + OPERATION_SIZE]
            yield index // OPERATION_SIZE, partial, carry, total
    
    @property
    def steps(self) -> int:
        """Number of generated triples"""
        return len(self.operations) // OPERATION_SIZE


class HealthCheckResponse(BaseModel):
    """Health check response"""
    status: str
    service: str
    version: str = "1.0.0"
