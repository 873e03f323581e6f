"""
headers.py

Preorder serialization of the Huffman tree.

Internal nodes are written as a single 0 bit followed by the left and right
subtrees. Leaves are written as a single 1 bit followed by the symbol in
`symbol_width` bits.
"""


from .bitstreams import BitInputStream, BitOutputStream, END_OF_STREAM
from .errors import TruncatedHeaderError, InvalidTreeError
from .models import HuffmanNode
from .settings import SYMBOL_WIDTH, PSEUDO_EOF


def write_tree_header(root: HuffmanNode, bit_out: BitOutputStream, symbol_width: int = SYMBOL_WIDTH) -> None:
    """
    Write the tree in preorder.

    Args:
        root (HuffmanNode): The root of the tree.
        bit_out (BitOutputStream): The output bit stream.
        symbol_width (int): Number of bits per leaf symbol.
    """
    if root.is_leaf():
        bit_out.write(1)
        bit_out.write_bits(symbol_width, root.symbol)
    else:
        bit_out.write(0)
        write_tree_header(root.left, bit_out, symbol_width)
        write_tree_header(root.right, bit_out, symbol_width)


def read_tree_header(bit_in: BitInputStream, symbol_width: int = SYMBOL_WIDTH, depth: int = 0) -> HuffmanNode:
    """
    Read a tree written by write_tree_header.

    Args:
        bit_in (BitInputStream): The input bit stream, positioned at the first header bit.
        symbol_width (int): Number of bits per leaf symbol.

    Returns:
        HuffmanNode: The root of the tree.

    Raises:
        TruncatedHeaderError: If the stream ends inside the header.
        InvalidTreeError: If a leaf holds a value outside the symbol space, or the
            tree nests deeper than a tree over the symbol space can.
    """
    if depth > PSEUDO_EOF:
        raise InvalidTreeError(f"tree header nests deeper than {PSEUDO_EOF} levels")

    bit = bit_in.read()
    if bit == END_OF_STREAM:
        raise TruncatedHeaderError(bit_in.bits_read)

    if bit == 0:
        left = read_tree_header(bit_in, symbol_width, depth + 1)
        right = read_tree_header(bit_in, symbol_width, depth + 1)
        return HuffmanNode(0, 0, left, right)

    symbol = bit_in.read_bits(symbol_width)
    if symbol == END_OF_STREAM:
        raise TruncatedHeaderError(bit_in.bits_read)
    if symbol > PSEUDO_EOF:
        raise InvalidTreeError(f"tree header holds symbol {symbol} outside the symbol space")
    return HuffmanNode(symbol, 0)


def header_bit_length(root: HuffmanNode, symbol_width: int = SYMBOL_WIDTH) -> int:
    """Number of bits write_tree_header produces for this tree."""
    leaves, internal_nodes = root.count_nodes()
    return leaves * (1 + symbol_width) + internal_nodes
