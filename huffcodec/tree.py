"""
tree.py

Builds the code tree from a frequency table by repeatedly merging the two
least frequent nodes.

Ties between equal frequencies are broken by insertion order: leaves are
numbered in the table's key order (first occurrence in the input) and every
merged node is numbered after all nodes created before it. The heap entries
are (frequency, order, node) tuples, so nodes themselves are never compared.
"""


import heapq
from typing import Iterator, List, Optional, Tuple

from .logger import Logger, TreeMergeLog
from .models import CodeNode, FrequencyTable, InternalNode, LeafNode
from .validators import validate_type


def build_tree(frequency_table: FrequencyTable, logger: Optional[Logger] = None) -> CodeNode:
    """
    Build the code tree for a frequency table.

    Args:
        frequency_table (FrequencyTable): Non-empty table of symbol counts.
        logger (Optional[Logger]): Logger for each merge step.

    Returns:
        CodeNode: The root. A LeafNode when the table has a single symbol.
    """
    validate_type(frequency_table, "Frequency table", FrequencyTable)

    heap: List[Tuple[int, int, CodeNode]] = []
    order = 0
    for symbol, frequency in frequency_table.items():
        heap.append((frequency, order, LeafNode(symbol, frequency)))
        order += 1
    heapq.heapify(heap)

    while len(heap) > 1:
        _, _, first = heapq.heappop(heap)
        _, _, second = heapq.heappop(heap)
        merged = InternalNode(first, second)
        if logger is not None:
            logger.log(TreeMergeLog(first.frequency, second.frequency))
        heapq.heappush(heap, (merged.frequency, order, merged))
        order += 1

    return heap[0][2]


def iter_leaves(root: CodeNode) -> Iterator[LeafNode]:
    """Yield the leaves of a tree from left to right."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf():
            yield node
        else:
            stack.append(node.right)
            stack.append(node.left)
