"""
errors.py

Typed failures raised by huffcodec.
"""


from typing import Any, Optional


class HuffmanError(ValueError):
    """Base class for all huffcodec errors."""


class EmptyInputError(HuffmanError):
    """Raised when there are no symbols to build a code from."""

    def __init__(self, message: str = "Input must contain at least one symbol") -> None:
        super().__init__(message)


class UnknownSymbolError(HuffmanError):
    """Raised when a symbol has no entry in the code table."""

    def __init__(self, symbol: Any) -> None:
        self.symbol = symbol
        super().__init__(f"Symbol {symbol!r} has no code in the code table")


class InvalidCodeError(HuffmanError):
    """Raised when a bit-string holds something that is not a valid code."""

    def __init__(self, position: int, bit: str, message: Optional[str] = None) -> None:
        self.position = position
        self.bit = bit
        if message is None:
            message = f"Encoded string must only be comprised of 1s or 0s, found {bit!r} at position {position}"
        super().__init__(message)


class TruncatedCodeError(HuffmanError):
    """Raised when a bit-string ends in the middle of a code."""

    def __init__(self, message: str = "Encoded string ends in the middle of a code") -> None:
        super().__init__(message)
