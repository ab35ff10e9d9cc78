"""
statistics.py

Measures how good a built code is.
"""


import numpy as np
from typing import List

from .codecs import HuffmanCode
from .models import Symbol
from .settings import FIXED_SYMBOL_WIDTH
from .tree import iter_leaves
from .validators import validate_type


class CodeStatistics:
    """
    Entropy, code lengths and compression figures of a HuffmanCode.

    Frequencies are read back from the leaves of the code tree, lengths from
    the code table. Arrays are aligned with `symbols`.
    """

    def __init__(self, symbols: List[Symbol], frequencies: np.ndarray, code_lengths: np.ndarray,
                 fixed_symbol_width: int = FIXED_SYMBOL_WIDTH) -> None:
        if len(symbols) == 0:
            raise ValueError("Statistics need at least one symbol")
        if len(symbols) != len(frequencies) or len(symbols) != len(code_lengths):
            raise ValueError("Symbols, frequencies and code lengths must have the same length")
        self.symbols: List[Symbol] = symbols
        self.frequencies: np.ndarray = np.asarray(frequencies, dtype=np.int64)
        self.code_lengths: np.ndarray = np.asarray(code_lengths, dtype=np.int64)
        self.fixed_symbol_width: int = fixed_symbol_width

    @classmethod
    def from_code(cls, huffman_code: HuffmanCode, fixed_symbol_width: int = FIXED_SYMBOL_WIDTH) -> "CodeStatistics":
        validate_type(huffman_code, "Huffman code", HuffmanCode)
        code_table = huffman_code.get_code_table()
        leaves = list(iter_leaves(huffman_code.get_root()))
        symbols = [leaf.symbol for leaf in leaves]
        frequencies = np.array([leaf.frequency for leaf in leaves], dtype=np.int64)
        code_lengths = np.array([len(code_table[symbol]) for symbol in symbols], dtype=np.int64)
        return cls(symbols, frequencies, code_lengths, fixed_symbol_width)

    @property
    def symbol_count(self) -> int:
        return int(self.frequencies.sum())

    @property
    def probabilities(self) -> np.ndarray:
        return self.frequencies / self.frequencies.sum()

    @property
    def entropy(self) -> float:
        """Shannon entropy in bits per symbol."""
        p = self.probabilities
        return float(-(p * np.log2(p)).sum())

    @property
    def average_code_length(self) -> float:
        """Expected code length in bits per symbol."""
        return float((self.probabilities * self.code_lengths).sum())

    @property
    def efficiency(self) -> float:
        """Entropy divided by average code length. 1.0 means no redundancy."""
        return self.entropy / self.average_code_length

    @property
    def kraft_sum(self) -> float:
        """Sum of 2^-length over all codes. Exactly 1.0 for a full code tree."""
        return float(np.power(2.0, -self.code_lengths.astype(np.float64)).sum())

    @property
    def encoded_bits(self) -> int:
        return int((self.frequencies * self.code_lengths).sum())

    @property
    def fixed_width_bits(self) -> int:
        return self.symbol_count * self.fixed_symbol_width

    @property
    def compression_ratio(self) -> float:
        return self.fixed_width_bits / self.encoded_bits

    def __str__(self) -> str:
        return (f"Symbols: {self.symbol_count}, Alphabet: {len(self.symbols)}, "
                f"Entropy: {self.entropy:.4f}, Average code length: {self.average_code_length:.4f}, "
                f"Encoded bits: {self.encoded_bits}, Fixed width bits: {self.fixed_width_bits}, "
                f"Compression ratio: {self.compression_ratio:.4f}")
