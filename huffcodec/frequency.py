"""
frequency.py

Counts how often each symbol occurs in a sequence.
"""


from typing import Dict, Iterable, Optional

from .errors import EmptyInputError
from .logger import Logger, FrequencyCountLog, CountingProgressStep
from .models import FrequencyTable, Symbol


def count_frequencies(symbols: Iterable[Symbol], logger: Optional[Logger] = None) -> FrequencyTable:
    """
    Count the occurrences of every symbol in a single pass.

    Args:
        symbols (Iterable[Symbol]): The symbols to count. Each must be hashable.
        logger (Optional[Logger]): Logger for per-symbol counts and progress.

    Returns:
        FrequencyTable: Symbols in order of first occurrence with their counts.

    Raises:
        EmptyInputError: If there are no symbols.
    """
    counts: Dict[Symbol, int] = {}
    total = len(symbols) if hasattr(symbols, "__len__") else None
    for symbol in symbols:
        counts[symbol] = counts.get(symbol, 0) + 1
        if logger is not None:
            logger.log(CountingProgressStep("Counting symbols", total))

    if not counts:
        error = EmptyInputError()
        if logger is not None:
            logger.error(error)
        raise error

    if logger is not None:
        for symbol, count in counts.items():
            logger.log(FrequencyCountLog(symbol, count))
    return FrequencyTable(counts)
