import abc
from typing import Any, List, Sequence, Union

from .models import Symbol


class BasePreprocessor(abc.ABC):
    @property
    @abc.abstractmethod
    def code(self) -> int:
        """Return the unique identification code for the preprocessor."""
        pass

    @abc.abstractmethod
    def convert_to_symbols(self, data: Any) -> List[Symbol]:
        """
        Convert caller data to a list of symbols.

        Args:
            data (Any): The input data.

        Returns:
            List[Symbol]: One symbol per element of the data.
        """
        pass

    @abc.abstractmethod
    def convert_from_symbols(self, symbols: List[Symbol]) -> Any:
        """
        Convert a list of symbols back to data of the type convert_to_symbols() accepts.

        Args:
            symbols (List[Symbol]): The list of symbols.

        Returns:
            Any: The reconstructed data.
        """
        pass

    def describe_symbol(self, symbol: Symbol) -> str:
        """Return a printable form of a symbol for code tables."""
        return repr(symbol)


class TextPreprocessor(BasePreprocessor):
    """
    Text Preprocessor: Each character of a string is a symbol.
    """
    @property
    def code(self) -> int:
        return 1

    def convert_to_symbols(self, data: str) -> List[Symbol]:
        if not isinstance(data, str):
            raise ValueError("Data should be in form of str")
        return list(data)

    def convert_from_symbols(self, symbols: List[Symbol]) -> str:
        return "".join(symbols)


class SequencePreprocessor(BasePreprocessor):
    """
    Sequence Preprocessor: Each element of a list or tuple is a symbol.
    """
    @property
    def code(self) -> int:
        return 2

    def convert_to_symbols(self, data: Sequence) -> List[Symbol]:
        if not isinstance(data, (list, tuple)):
            raise ValueError("Data should be in form of list or tuple")
        return list(data)

    def convert_from_symbols(self, symbols: List[Symbol]) -> List[Symbol]:
        return list(symbols)


class BytePreprocessor(BasePreprocessor):
    """
    Byte Preprocessor: Each byte of data is a symbol, held as its int value.

    convert_from_symbols() returns bytearray when as_bytearray is set and
    bytes otherwise.
    """
    def __init__(self, as_bytearray: bool = False) -> None:
        self.as_bytearray: bool = as_bytearray

    @property
    def code(self) -> int:
        return 3

    def convert_to_symbols(self, data: bytes) -> List[Symbol]:
        if not isinstance(data, (bytes, bytearray)):
            raise ValueError("Data should be in form of bytes")
        return list(data)

    def convert_from_symbols(self, symbols: List[Symbol]) -> Union[bytes, bytearray]:
        if self.as_bytearray:
            return bytearray(symbols)
        return bytes(symbols)

    def describe_symbol(self, symbol: Symbol) -> str:
        return f"0x{symbol:02x}"


def get_preprocessor(code: int) -> BasePreprocessor:
    """
    Retrieve a preprocessor instance based on the given code.

    Args:
        code (int): The preprocessor code.

    Returns:
        BasePreprocessor: An instance of a preprocessor.

    Raises:
        ValueError: If the preprocessor code is not supported.
    """
    if code == 1:
        return TextPreprocessor()
    elif code == 2:
        return SequencePreprocessor()
    elif code == 3:
        return BytePreprocessor()
    else:
        raise ValueError("Preprocessor code not supported")


def get_preprocessor_for(data: Any) -> BasePreprocessor:
    """
    Pick the preprocessor that accepts the type of data.

    Raises:
        ValueError: If no preprocessor accepts the data.
    """
    if isinstance(data, str):
        return TextPreprocessor()
    if isinstance(data, bytearray):
        return BytePreprocessor(as_bytearray=True)
    if isinstance(data, bytes):
        return BytePreprocessor()
    if isinstance(data, (list, tuple)):
        return SequencePreprocessor()
    raise ValueError(f"Data of type {type(data).__name__} is not supported, use str, bytes, list or tuple")
