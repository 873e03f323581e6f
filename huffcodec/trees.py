"""
trees.py

Frequency counting, Huffman tree construction and code table generation.
"""


import heapq
import itertools
from typing import Optional

from .bitstreams import BitInputStream, END_OF_STREAM
from .logger import Logger, FrequencyLog
from .models import HuffmanNode, Code, CodeTable, FrequencyTable
from .settings import BITS_PER_WORD


def count_frequencies(bit_in: BitInputStream, logger: Optional[Logger] = None) -> FrequencyTable:
    """
    Read every byte of the input once and count it, then rewind the input.

    The end of stream symbol always gets a count of one, so even an empty input
    yields a table with a symbol in it.

    Args:
        bit_in (BitInputStream): The input to scan. Must be seekable.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        FrequencyTable: The counts of the input.
    """
    data = bytearray()
    while True:
        value = bit_in.read_bits(BITS_PER_WORD)
        if value == END_OF_STREAM:
            break
        data.append(value)
    bit_in.reset()

    frequencies = FrequencyTable.from_bytes(bytes(data))
    if logger is not None:
        logger.log(FrequencyLog(frequencies.get_size(), frequencies.get_total()))
    return frequencies


def build_tree(frequencies: FrequencyTable) -> HuffmanNode:
    """
    Build the Huffman tree by repeatedly merging the two lightest nodes.

    Queue entries are ordered by weight and then by insertion order. Leaves go in
    by ascending symbol, merged nodes after them as they are created. The first
    node removed becomes the left child.

    Args:
        frequencies (FrequencyTable): Symbol counts.

    Returns:
        HuffmanNode: The root of the tree.

    Raises:
        ValueError: If the table holds no symbols.
    """
    order = itertools.count()
    heap = [(frequencies[symbol], next(order), HuffmanNode(symbol, frequencies[symbol]))
            for symbol in frequencies.get_symbols()]
    if not heap:
        raise ValueError("Frequency table must contain at least one symbol")
    heapq.heapify(heap)

    while len(heap) > 1:
        left_weight, _, left = heapq.heappop(heap)
        right_weight, _, right = heapq.heappop(heap)
        weight = left_weight + right_weight
        heapq.heappush(heap, (weight, next(order), HuffmanNode(0, weight, left, right)))

    return heap[0][2]


def generate_codes(root: HuffmanNode) -> CodeTable:
    """
    Walk the tree once and record the path to every leaf.

    A tree made of a single leaf gives that leaf an empty code.

    Args:
        root (HuffmanNode): The root of the tree.

    Returns:
        CodeTable: The code of every leaf symbol.
    """
    codes = CodeTable()

    def build_codes(node: HuffmanNode, code: Code) -> None:
        if node.is_leaf():
            codes.add(node.symbol, code)
        else:
            build_codes(node.left, code.append(0))
            build_codes(node.right, code.append(1))

    build_codes(root, Code())
    return codes
