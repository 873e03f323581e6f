"""
settings.py

Format constants and coder settings for huffcodec.
"""


from .validators import validate_type

BITS_PER_WORD = 8
BITS_PER_INT = 32
ALPHABET_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPHABET_SIZE

# Wide enough to hold every byte value plus PSEUDO_EOF.
SYMBOL_WIDTH = BITS_PER_WORD + 1

HUFF_NUMBER = 0xface8200
HUFF_TREE = HUFF_NUMBER | 1


class HuffmanCoderSettings:
    """
    Settings for the tree header Huffman coder.
    """

    def __init__(self, magic_number: int = HUFF_TREE, symbol_width: int = SYMBOL_WIDTH) -> None:
        validate_type(magic_number, "magic_number", int)
        validate_type(symbol_width, "symbol_width", int)
        if not 0 <= magic_number < (1 << BITS_PER_INT):
            raise ValueError(f"magic_number must fit in {BITS_PER_INT} bits")
        if PSEUDO_EOF >= (1 << symbol_width):
            raise ValueError(f"symbol_width of {symbol_width} bits cannot hold the end of stream symbol")
        self.magic_number: int = magic_number
        self.symbol_width: int = symbol_width
