"""
validators.py

Shared codes for input validation in huffcodec.
"""


from typing import Any

from .errors import InvalidCodeError
from .settings import ZERO_BIT, ONE_BIT


def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_bit_string(bits: str) -> None:
    """Validate that bits is a string made only of ZERO_BIT and ONE_BIT."""
    validate_type(bits, "Bits", str)
    for position, bit in enumerate(bits):
        if bit != ZERO_BIT and bit != ONE_BIT:
            raise InvalidCodeError(position, bit)
