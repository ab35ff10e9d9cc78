"""
coders.py

Code table derivation, encoding and decoding over a code tree, plus helpers
that pack bit-strings into bytes.

"""


from io import BytesIO
from typing import Dict, IO, Iterable, List, Optional

from .errors import InvalidCodeError, TruncatedCodeError, UnknownSymbolError
from .logger import Logger, CodeAssignedLog, CodingLog, CodingProgressStep, DecodingProgressStep
from .models import CodeNode, Symbol
from .settings import ZERO_BIT, ONE_BIT, SINGLE_SYMBOL_CODE, FIXED_SYMBOL_WIDTH
from .validators import validate_type


def derive_code_table(root: CodeNode, logger: Optional[Logger] = None) -> Dict[Symbol, str]:
    """
    Derive the code of every symbol from its root-to-leaf path.

    Left edges add ZERO_BIT and right edges add ONE_BIT. When the root is a
    leaf its symbol is given SINGLE_SYMBOL_CODE, since an empty code could
    not be decoded.

    Args:
        root (CodeNode): Root of the code tree.
        logger (Optional[Logger]): Logger for each assigned code.

    Returns:
        Dict[Symbol, str]: Codes in left-to-right leaf order.
    """
    validate_type(root, "Root", CodeNode)
    table: Dict[Symbol, str] = {}
    if root.is_leaf():
        table[root.symbol] = SINGLE_SYMBOL_CODE
    else:
        # Paths are immutable strings, each stack entry owns its own.
        stack = [(root, "")]
        while stack:
            node, path = stack.pop()
            if node.is_leaf():
                table[node.symbol] = path
            else:
                stack.append((node.right, path + ONE_BIT))
                stack.append((node.left, path + ZERO_BIT))

    if logger is not None:
        for symbol, code in table.items():
            logger.log(CodeAssignedLog(symbol, code))
    return table


class HuffmanCoder:
    """
    Encodes symbols with a code table and decodes bits by walking the code tree.
    """

    def __init__(self, root: CodeNode, code_table: Optional[Dict[Symbol, str]] = None) -> None:
        validate_type(root, "Root", CodeNode)
        self.root: CodeNode = root
        if code_table is None:
            code_table = derive_code_table(root)
        self.code_table: Dict[Symbol, str] = code_table

    def _report(self, error: Exception, logger: Optional[Logger]) -> Exception:
        if logger is not None:
            logger.error(error)
        return error

    def encode(self, symbols: Iterable[Symbol], logger: Optional[Logger] = None) -> str:
        """
        Encode symbols into a bit-string.

        Args:
            symbols (Iterable[Symbol]): The symbols to encode, in order.
            logger (Optional[Logger]): Logger for the size of each code.

        Returns:
            str: Concatenation of the code of every symbol.

        Raises:
            UnknownSymbolError: If a symbol has no code.
        """
        total = len(symbols) if hasattr(symbols, "__len__") else None
        codes: List[str] = []
        for symbol in symbols:
            try:
                code = self.code_table[symbol]
            except (KeyError, TypeError):
                # TypeError: unhashable values can never be in the table.
                raise self._report(UnknownSymbolError(symbol), logger) from None
            codes.append(code)
            if logger is not None:
                logger.log(CodingLog(FIXED_SYMBOL_WIDTH, len(code)))
                logger.log(CodingProgressStep("Encoding symbols", total))
        return "".join(codes)

    def decode(self, bits: str, logger: Optional[Logger] = None) -> List[Symbol]:
        """
        Decode a bit-string back into symbols.

        Args:
            bits (str): A string made of ZERO_BIT and ONE_BIT.
            logger (Optional[Logger]): Logger for decoding progress and errors.

        Returns:
            List[Symbol]: The decoded symbols.

        Raises:
            InvalidCodeError: If a character is not a bit or no code follows it.
            TruncatedCodeError: If the bits end in the middle of a code.
        """
        validate_type(bits, "Bits", str)
        root = self.root
        decoded: List[Symbol] = []

        if root.is_leaf():
            single_code = self.code_table[root.symbol]
            for position, bit in enumerate(bits):
                if bit == single_code:
                    decoded.append(root.symbol)
                elif bit == ZERO_BIT or bit == ONE_BIT:
                    message = f"No code starts with {bit!r} at position {position}"
                    raise self._report(InvalidCodeError(position, bit, message), logger)
                else:
                    raise self._report(InvalidCodeError(position, bit), logger)
            return decoded

        node = root
        for position, bit in enumerate(bits):
            if bit == ZERO_BIT:
                node = node.left
            elif bit == ONE_BIT:
                node = node.right
            else:
                raise self._report(InvalidCodeError(position, bit), logger)
            if node.is_leaf():
                decoded.append(node.symbol)
                node = root
                if logger is not None:
                    logger.log(DecodingProgressStep("Decoding symbols"))

        if node is not root:
            raise self._report(TruncatedCodeError(), logger)
        return decoded


class BitOutputStream:
    """
    Packs code bits into bytes on an underlying binary stream, most
    significant bit first.
    """

    def __init__(self, out: IO[bytes]) -> None:
        self.out: IO[bytes] = out
        self.pending: int = 0
        self.pending_count: int = 0
        self.bits_written: int = 0

    def write(self, bit: str) -> None:
        """
        Write one ZERO_BIT or ONE_BIT character.

        Raises:
            InvalidCodeError: If bit is any other character.
        """
        if bit == ONE_BIT:
            self.pending = (self.pending << 1) | 1
        elif bit == ZERO_BIT:
            self.pending <<= 1
        else:
            raise InvalidCodeError(self.bits_written, bit)
        self.pending_count += 1
        self.bits_written += 1
        if self.pending_count == 8:
            self.out.write(bytes((self.pending,)))
            self.pending = 0
            self.pending_count = 0

    def write_code(self, code: str) -> None:
        """Write every bit of a code in order."""
        for bit in code:
            self.write(bit)

    def finish(self) -> int:
        """
        Pad the last byte with zeros and flush it.

        Returns:
            int: Number of padding bits added.
        """
        padding = 0
        if self.pending_count > 0:
            padding = 8 - self.pending_count
            self.out.write(bytes((self.pending << padding,)))
            self.pending = 0
            self.pending_count = 0
        self.out.flush()
        return padding


class BitInputStream:
    """
    Reads code bits back out of a binary stream written by BitOutputStream.
    """

    def __init__(self, inp: IO[bytes]) -> None:
        self.inp: IO[bytes] = inp
        self.current_byte: int = 0
        self.remaining: int = 0
        self.bits_read: int = 0

    def read(self) -> str:
        """
        Read the next bit.

        Returns:
            str: ZERO_BIT or ONE_BIT.

        Raises:
            TruncatedCodeError: If the stream holds no more bits.
        """
        if self.remaining == 0:
            byte = self.inp.read(1)
            if not byte:
                raise TruncatedCodeError(f"Stream ended after {self.bits_read} bits")
            self.current_byte = byte[0]
            self.remaining = 8
        self.remaining -= 1
        self.bits_read += 1
        return ONE_BIT if (self.current_byte >> self.remaining) & 1 else ZERO_BIT

    def read_bits(self, count: int) -> str:
        """Read count bits as a bit-string."""
        return "".join(self.read() for _ in range(count))


def pack_bits(bits: str) -> bytes:
    """
    Pack a bit-string into bytes, most significant bit first.

    The last byte is padded with zeros; keep len(bits) to unpack it.

    Raises:
        InvalidCodeError: If bits holds a character other than ZERO_BIT or ONE_BIT.
    """
    validate_type(bits, "Bits", str)
    out = BytesIO()
    stream = BitOutputStream(out)
    stream.write_code(bits)
    stream.finish()
    return out.getvalue()


def unpack_bits(data: bytes, bit_length: int) -> str:
    """
    Read bit_length bits from data packed by pack_bits().

    Raises:
        TruncatedCodeError: If data holds fewer than bit_length bits.
    """
    validate_type(data, "Data", bytes)
    validate_type(bit_length, "Bit length", int)
    if bit_length < 0:
        raise ValueError("Bit length must be non-negative")
    return BitInputStream(BytesIO(data)).read_bits(bit_length)
