"""
codecs.py

The HuffmanCode aggregate: builds a code for a piece of data, holds the code
tree, the code table and the encoded message, and decodes bit-strings back to
data of the same type.
"""


from typing import Any, Dict, List, Optional, Tuple

from .coders import HuffmanCoder, derive_code_table, pack_bits
from .frequency import count_frequencies
from .logger import Logger
from .models import CodeNode, Symbol, sort_symbols
from .preprocessors import BasePreprocessor, get_preprocessor_for
from .tree import build_tree


class HuffmanCode:
    """
    A Huffman code built from one piece of data.

    The data may be a str (one symbol per character), bytes (one symbol per
    byte value) or a list/tuple of hashable values. Nothing changes after
    construction; encoding other data or decoding only reads the tree and table.
    """

    def __init__(self, data: Any, logger: Optional[Logger] = None) -> None:
        self._preprocessor: BasePreprocessor = get_preprocessor_for(data)
        symbols = self._preprocessor.convert_to_symbols(data)

        frequency_table = count_frequencies(symbols, logger)
        self._root: CodeNode = build_tree(frequency_table, logger)

        code_table = derive_code_table(self._root, logger)
        self._code_table: Dict[Symbol, str] = {symbol: code_table[symbol] for symbol in sort_symbols(code_table)}
        self._coder = HuffmanCoder(self._root, self._code_table)
        self._encoded_message: str = self._coder.encode(symbols, logger)
        self._symbol_count: int = len(symbols)

    def get_root(self) -> CodeNode:
        return self._root

    def get_code_table(self) -> Dict[Symbol, str]:
        """
        Get the code of every symbol, ordered by symbol.

        Returns:
            Dict[Symbol, str]: A copy of the code table.
        """
        return dict(self._code_table)

    def get_encoded_message(self) -> str:
        """Get the bit-string of the data the code was built from."""
        return self._encoded_message

    def get_symbol_count(self) -> int:
        """Get the number of symbols in the data the code was built from."""
        return self._symbol_count

    def get_packed_message(self) -> Tuple[bytes, int]:
        """
        Get the encoded message packed into bytes.

        Returns:
            Tuple[bytes, int]: The packed bytes and the number of valid bits.
        """
        return pack_bits(self._encoded_message), len(self._encoded_message)

    def encode(self, data: Any, logger: Optional[Logger] = None) -> str:
        """
        Encode data over the same alphabet with this code.

        Raises:
            UnknownSymbolError: If the data holds a symbol that has no code.
        """
        return self._coder.encode(self._preprocessor.convert_to_symbols(data), logger)

    def decode_symbols(self, bits: str, logger: Optional[Logger] = None) -> List[Symbol]:
        """
        Decode a bit-string into the list of symbols.

        Raises:
            InvalidCodeError: If bits is not a valid sequence of codes.
            TruncatedCodeError: If bits ends in the middle of a code.
        """
        return self._coder.decode(bits, logger)

    def decode(self, bits: str, logger: Optional[Logger] = None) -> Any:
        """
        Decode a bit-string into data of the same type the code was built from.

        str, bytes and bytearray come back as the same type; list and tuple
        input both come back as a list.

        Raises:
            InvalidCodeError: If bits is not a valid sequence of codes.
            TruncatedCodeError: If bits ends in the middle of a code.
        """
        return self._preprocessor.convert_from_symbols(self.decode_symbols(bits, logger))

    def format_code_table(self) -> str:
        """Render the code table as printable lines ordered by symbol."""
        lines = ["Code table:", "*****************"]
        for symbol, code in self._code_table.items():
            lines.append(f"Symbol: {self._preprocessor.describe_symbol(symbol)} has a value of: {code}")
        lines.append("*****************")
        return "\n".join(lines)


def build(data: Any, logger: Optional[Logger] = None) -> HuffmanCode:
    """
    Build a Huffman code for data.

    Args:
        data (Any): A str, bytes, or list/tuple of hashable symbols.
        logger (Optional[Logger]): Logger for the construction steps.

    Returns:
        HuffmanCode: The code, holding the encoded message of data.

    Raises:
        EmptyInputError: If data holds no symbols.
        ValueError: If data is of an unsupported type.
    """
    return HuffmanCode(data, logger)
