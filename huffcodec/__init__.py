"""
huffcodec: A Python library for lossless Huffman compression and decompression of byte streams.
"""

from .codecs import (
    HuffmanCodec,
    HuffmanCodecFile,
)

from .coders import (
    CoderBase,
    HuffmanTreeCoder,
    get_coder,
)

from .bitstreams import (
    BitOutputStream,
    BitInputStream,
    END_OF_STREAM,
)

from .models import (
    HuffmanNode,
    Code,
    FrequencyTable,
    CodeTable,
)

from .trees import (
    count_frequencies,
    build_tree,
    generate_codes,
)

from .headers import (
    write_tree_header,
    read_tree_header,
    header_bit_length,
)

from .errors import (
    HuffmanError,
    BadMagicError,
    TruncatedHeaderError,
    TruncatedBodyError,
    InvalidTreeError,
)

from .settings import (
    HuffmanCoderSettings,
    BITS_PER_WORD,
    BITS_PER_INT,
    ALPHABET_SIZE,
    PSEUDO_EOF,
    SYMBOL_WIDTH,
    HUFF_NUMBER,
    HUFF_TREE,
)

from .logger import (
    Logger,
    Log,
    LogLevel,
    FrequencyLog,
    TreeHeaderLog,
    CodingLog,
    DecodedSymbolLog,
    CodingProgressStep,
)

from .experiments import HuffmanExperiment

# Validators
from .validators import *

__all__ = [

    "HuffmanCodec",
    "HuffmanCodecFile",

    "CoderBase",
    "HuffmanTreeCoder",
    "get_coder",

    "BitOutputStream",
    "BitInputStream",
    "END_OF_STREAM",

    "HuffmanNode",
    "Code",
    "FrequencyTable",
    "CodeTable",

    "count_frequencies",
    "build_tree",
    "generate_codes",

    "write_tree_header",
    "read_tree_header",
    "header_bit_length",

    "HuffmanError",
    "BadMagicError",
    "TruncatedHeaderError",
    "TruncatedBodyError",
    "InvalidTreeError",

    "HuffmanCoderSettings",
    "BITS_PER_WORD",
    "BITS_PER_INT",
    "ALPHABET_SIZE",
    "PSEUDO_EOF",
    "SYMBOL_WIDTH",
    "HUFF_NUMBER",
    "HUFF_TREE",

    "Logger",
    "Log",
    "LogLevel",
    "FrequencyLog",
    "TreeHeaderLog",
    "CodingLog",
    "DecodedSymbolLog",
    "CodingProgressStep",

    "HuffmanExperiment",
]
