"""
coders.py



"""


import abc
from typing import Optional

from .bitstreams import BitInputStream, BitOutputStream, END_OF_STREAM
from .errors import BadMagicError, TruncatedBodyError, InvalidTreeError
from .headers import write_tree_header, read_tree_header, header_bit_length
from .logger import Logger, CodingLog, DecodedSymbolLog, CodingProgressStep, TreeHeaderLog
from .models import HuffmanNode, CodeTable
from .settings import HuffmanCoderSettings, BITS_PER_WORD, BITS_PER_INT, PSEUDO_EOF, HUFF_TREE
from .trees import count_frequencies, build_tree, generate_codes
from .validators import validate_type


class CoderBase(abc.ABC):
    """
    Abstract base class for coders.
    """

    def __init__(self) -> None:
        """Initialize the coder."""
        pass

    @abc.abstractmethod
    def compress(self, bit_in: BitInputStream, bit_out: BitOutputStream) -> None:
        """
        Compress everything readable from bit_in, magic number first, into bit_out.

        Args:
            bit_in (BitInputStream): The input bit stream. Must be seekable.
            bit_out (BitOutputStream): The output bit stream.
        """
        pass

    @abc.abstractmethod
    def decompress(self, bit_in: BitInputStream, bit_out: BitOutputStream) -> None:
        """
        Check the magic number at the start of bit_in, then decode the rest into bit_out.

        Args:
            bit_in (BitInputStream): The compressed bit stream.
            bit_out (BitOutputStream): The output bit stream.
        """
        pass

    @abc.abstractmethod
    def decode(self, bit_in: BitInputStream, bit_out: BitOutputStream) -> None:
        """
        Decode a stream whose magic number has already been read.

        Args:
            bit_in (BitInputStream): The compressed bit stream, after the magic number.
            bit_out (BitOutputStream): The output bit stream.
        """
        pass

    @abc.abstractmethod
    def get_coder_code(self) -> int:
        """
        Get the magic number the coder writes first.

        Returns:
            int: The coder code.
        """
        pass


class HuffmanTreeCoder(CoderBase):
    """
    Huffman coder that stores its tree in the stream header.
    """

    def __init__(self, settings: Optional[HuffmanCoderSettings] = None, logger: Optional[Logger] = None) -> None:
        if settings is None:
            settings = HuffmanCoderSettings()
        validate_type(settings, "settings", HuffmanCoderSettings)
        self.magic_number: int = settings.magic_number
        self.symbol_width: int = settings.symbol_width
        self.logger: Optional[Logger] = logger

    def compress(self, bit_in: BitInputStream, bit_out: BitOutputStream) -> None:
        try:
            frequencies = count_frequencies(bit_in, self.logger)
            root = build_tree(frequencies)
            codes = generate_codes(root)

            bit_out.write_bits(BITS_PER_INT, self.magic_number)
            self.write_header(root, bit_out)
            self.encode_body(codes, bit_in, bit_out)
        finally:
            bit_out.finish()

    def write_header(self, root: HuffmanNode, bit_out: BitOutputStream) -> None:
        write_tree_header(root, bit_out, self.symbol_width)
        if self.logger is not None:
            leaves, internal_nodes = root.count_nodes()
            self.logger.log(TreeHeaderLog(leaves, internal_nodes, header_bit_length(root, self.symbol_width)))

    def encode_body(self, codes: CodeTable, bit_in: BitInputStream, bit_out: BitOutputStream) -> None:
        """
        Write the code of every byte left in bit_in, then the code of PSEUDO_EOF.

        Args:
            codes (CodeTable): Codes built from the same input.
            bit_in (BitInputStream): The input bit stream, rewound to the start.
            bit_out (BitOutputStream): The output bit stream.
        """
        while True:
            value = bit_in.read_bits(BITS_PER_WORD)
            if value == END_OF_STREAM:
                break
            code = codes.get_code(value)
            bit_out.write_bits(code.length, code.value)
            if self.logger is not None:
                self.logger.log(CodingLog(value, BITS_PER_WORD, code.length))
                self.logger.log(CodingProgressStep("Encoding symbols"))

        code = codes.get_code(PSEUDO_EOF)
        bit_out.write_bits(code.length, code.value)

    def decompress(self, bit_in: BitInputStream, bit_out: BitOutputStream) -> None:
        try:
            magic_number = bit_in.read_bits(BITS_PER_INT)
            if magic_number != self.magic_number:
                raise BadMagicError(magic_number)
            self.decode(bit_in, bit_out)
        finally:
            bit_out.finish()

    def decode(self, bit_in: BitInputStream, bit_out: BitOutputStream) -> None:
        root = read_tree_header(bit_in, self.symbol_width)
        if self.logger is not None:
            leaves, internal_nodes = root.count_nodes()
            self.logger.log(TreeHeaderLog(leaves, internal_nodes, header_bit_length(root, self.symbol_width)))
        self.decode_body(root, bit_in, bit_out)

    def decode_body(self, root: HuffmanNode, bit_in: BitInputStream, bit_out: BitOutputStream) -> None:
        """
        Walk the tree one bit at a time, writing a byte at every leaf until PSEUDO_EOF is reached.

        Args:
            root (HuffmanNode): The tree read from the header.
            bit_in (BitInputStream): The compressed bit stream, after the header.
            bit_out (BitOutputStream): The output bit stream.

        A tree that is a lone PSEUDO_EOF leaf comes from an empty input; its code is
        empty and there is nothing to decode.

        Raises:
            TruncatedBodyError: If the stream ends before PSEUDO_EOF.
            InvalidTreeError: If the tree is a single leaf other than PSEUDO_EOF.
        """
        if root.is_leaf():
            if root.symbol == PSEUDO_EOF:
                return
            raise InvalidTreeError(f"tree header describes a single leaf for symbol {root.symbol}")

        current = root
        bits_walked = 0
        while True:
            bit = bit_in.read()
            if bit == END_OF_STREAM:
                raise TruncatedBodyError(bit_in.bits_read)

            current = current.left if bit == 0 else current.right
            bits_walked += 1

            if current.is_leaf():
                if current.symbol == PSEUDO_EOF:
                    break
                bit_out.write_bits(BITS_PER_WORD, current.symbol)
                if self.logger is not None:
                    self.logger.log(DecodedSymbolLog(current.symbol, bits_walked))
                    self.logger.log(CodingProgressStep("Decoding symbols"))
                current = root
                bits_walked = 0

    def get_coder_code(self) -> int:
        """
        Get the coder code.

        Returns:
            int: The magic number of tree header framing.
        """
        return self.magic_number


def get_coder(code: int, logger: Optional[Logger] = None) -> CoderBase:
    """
    Retrieve a coder instance based on the magic number at the start of a stream.

    Args:
        code (int): The magic number.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        CoderBase: An instance of a coder.

    Raises:
        BadMagicError: If no coder writes that magic number.
    """
    if code == HUFF_TREE:
        return HuffmanTreeCoder(HuffmanCoderSettings(), logger)
    else:
        raise BadMagicError(code)
