"""
models.py

The shared objects used in huffcodec.

"""


from collections.abc import Mapping
from typing import Dict, Hashable, Iterable, Iterator, List, Optional

from .errors import EmptyInputError

# A symbol is any hashable value: a character, a byte value or a list element.
Symbol = Hashable


def sort_symbols(symbols: Iterable) -> List[Symbol]:
    """
    Sort symbols by their natural order, or by repr when they cannot be compared.
    """
    symbols = list(symbols)
    try:
        return sorted(symbols)
    except TypeError:
        return sorted(symbols, key=repr)


class SymbolFrequency:
    """
    Represents a symbol together with its frequency.
    """
    def __init__(self, symbol: Symbol, frequency: int) -> None:
        self.symbol: Symbol = symbol
        self.frequency: int = frequency

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SymbolFrequency):
            return self.symbol == other.symbol and self.frequency == other.frequency
        return False

    def __str__(self) -> str:
        return f"[{self.symbol!r}, {self.frequency}]"

    def __repr__(self) -> str:
        return f"[{self.symbol!r}, {self.frequency}]"


class FrequencyTable(Mapping):
    """
    Read-only mapping from each distinct symbol to its number of occurrences.

    Keys keep the order in which the counts were given, which is the order of
    first occurrence when the table comes from count_frequencies().
    """
    def __init__(self, counts: Mapping) -> None:
        if len(counts) == 0:
            raise EmptyInputError()
        for symbol, count in counts.items():
            if not isinstance(count, int) or isinstance(count, bool):
                raise ValueError(f"Frequency of {symbol!r} must be of type int")
            if count <= 0:
                raise ValueError(f"Frequency of {symbol!r} must be positive")
        self._counts: Dict[Symbol, int] = dict(counts)
        self._sorted_symbols: Optional[List[Symbol]] = None

    def __getitem__(self, symbol: Symbol) -> int:
        return self._counts[symbol]

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"FrequencyTable({self._counts!r})"

    def get_size(self) -> int:
        """
        Get the number of distinct symbols in the table.

        Returns:
            int: Number of symbols.
        """
        return len(self._counts)

    def contains(self, symbol: Symbol) -> bool:
        """
        Check if the symbol is in the table.

        Args:
            symbol (Symbol): The symbol to check.

        Returns:
            bool: True if present, False otherwise.
        """
        return symbol in self._counts

    def get_frequency(self, symbol: Symbol) -> int:
        """
        Get the frequency of a symbol.

        Raises:
            KeyError: If the symbol is not in the table.
        """
        return self._counts[symbol]

    def get_total(self) -> int:
        """
        Get the total number of symbol occurrences counted.
        """
        return sum(self._counts.values())

    def get_sorted_symbols(self) -> List[Symbol]:
        """
        Get the list of symbols sorted by value.

        Returns:
            List[Symbol]: The sorted symbols.
        """
        if self._sorted_symbols is None:
            self._sorted_symbols = sort_symbols(self._counts)
        return list(self._sorted_symbols)

    def to_symbol_frequencies(self) -> List[SymbolFrequency]:
        """
        Get the table as a list of SymbolFrequency in first occurrence order.
        """
        return [SymbolFrequency(symbol, count) for symbol, count in self._counts.items()]


class CodeNode:
    """
    A node of the code tree. Use LeafNode or InternalNode.
    """
    __slots__ = ("frequency",)

    def __init__(self, frequency: int) -> None:
        self.frequency: int = frequency

    def is_leaf(self) -> bool:
        raise NotImplementedError


class LeafNode(CodeNode):
    """
    Holds one symbol and its frequency. Has no children.
    """
    __slots__ = ("symbol",)

    def __init__(self, symbol: Symbol, frequency: int) -> None:
        super().__init__(frequency)
        self.symbol: Symbol = symbol

    def is_leaf(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"LeafNode({self.symbol!r}, {self.frequency})"


class InternalNode(CodeNode):
    """
    Holds exactly two children and the sum of their frequencies.
    """
    __slots__ = ("left", "right")

    def __init__(self, left: CodeNode, right: CodeNode) -> None:
        if not isinstance(left, CodeNode) or not isinstance(right, CodeNode):
            raise ValueError("Children must be of type CodeNode")
        super().__init__(left.frequency + right.frequency)
        self.left: CodeNode = left
        self.right: CodeNode = right

    def is_leaf(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"InternalNode({self.frequency}, left={self.left!r}, right={self.right!r})"
