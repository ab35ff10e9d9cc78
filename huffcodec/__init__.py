"""
huffcodec: A Python library for building Huffman codes and losslessly encoding and decoding data with them.
"""

from .codecs import (
    HuffmanCode,
    build,
)

from .coders import (
    HuffmanCoder,
    BitOutputStream,
    BitInputStream,
    derive_code_table,
    pack_bits,
    unpack_bits,
)

from .errors import (
    HuffmanError,
    EmptyInputError,
    UnknownSymbolError,
    InvalidCodeError,
    TruncatedCodeError,
)

from .frequency import count_frequencies

from .models import (
    Symbol,
    SymbolFrequency,
    FrequencyTable,
    CodeNode,
    LeafNode,
    InternalNode,
)

from .preprocessors import (
    BasePreprocessor,
    TextPreprocessor,
    SequencePreprocessor,
    BytePreprocessor,
    get_preprocessor,
    get_preprocessor_for,
)

from .statistics import CodeStatistics

from .tree import build_tree, iter_leaves

from .logger import (
    Logger,
    Log,
    LogLevel,
    FrequencyCountLog,
    TreeMergeLog,
    CodeAssignedLog,
    CodingLog,
    CountingProgressStep,
    CodingProgressStep,
    DecodingProgressStep,
)

# Validators
from .validators import *

__all__ = [

    "HuffmanCode",
    "build",

    "HuffmanCoder",
    "BitOutputStream",
    "BitInputStream",
    "derive_code_table",
    "pack_bits",
    "unpack_bits",

    "HuffmanError",
    "EmptyInputError",
    "UnknownSymbolError",
    "InvalidCodeError",
    "TruncatedCodeError",

    "count_frequencies",

    "Symbol",
    "SymbolFrequency",
    "FrequencyTable",
    "CodeNode",
    "LeafNode",
    "InternalNode",

    "BasePreprocessor",
    "TextPreprocessor",
    "SequencePreprocessor",
    "BytePreprocessor",
    "get_preprocessor",
    "get_preprocessor_for",

    "CodeStatistics",

    "build_tree",
    "iter_leaves",

    "Logger",
    "Log",
    "LogLevel",
    "FrequencyCountLog",
    "TreeMergeLog",
    "CodeAssignedLog",
    "CodingLog",
    "CountingProgressStep",
    "CodingProgressStep",
    "DecodingProgressStep",
]
