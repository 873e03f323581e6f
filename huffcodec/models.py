"""
models.py

The shared objects used in the huffcodec.

"""


from typing import Optional, Iterator, List, Dict, Tuple

import numpy as np

from .settings import ALPHABET_SIZE, PSEUDO_EOF


class HuffmanNode:
    """
    A node of the Huffman tree. Leaves carry a symbol, internal nodes carry two children.
    """
    def __init__(self, symbol: int = 0, weight: int = 0,
                 left: Optional['HuffmanNode'] = None, right: Optional['HuffmanNode'] = None) -> None:
        if (left is None) != (right is None):
            raise ValueError("A node must have either two children or none")
        self.symbol: int = symbol
        self.weight: int = weight
        self.left: Optional[HuffmanNode] = left
        self.right: Optional[HuffmanNode] = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def count_nodes(self) -> Tuple[int, int]:
        """
        Count the nodes of the subtree rooted here.

        Returns:
            Tuple[int, int]: Number of leaves and number of internal nodes.
        """
        if self.is_leaf():
            return 1, 0
        left_leaves, left_internal = self.left.count_nodes()
        right_leaves, right_internal = self.right.count_nodes()
        return left_leaves + right_leaves, left_internal + right_internal + 1

    def __lt__(self, other: 'HuffmanNode') -> bool:
        return self.weight < other.weight

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HuffmanNode):
            return False
        if self.is_leaf() or other.is_leaf():
            return self.is_leaf() and other.is_leaf() and self.symbol == other.symbol
        return self.left == other.left and self.right == other.right

    def __repr__(self) -> str:
        if self.is_leaf():
            return f"Leaf({self.symbol}, {self.weight})"
        return f"Node({self.weight}, {self.left!r}, {self.right!r})"


class Code:
    """
    A root to leaf path stored as an integer value and a bit length.
    """
    def __init__(self, value: int = 0, length: int = 0) -> None:
        if length < 0 or value < 0 or value >> length:
            raise ValueError(f"Value {value} does not fit in {length} bits")
        self.value: int = value
        self.length: int = length

    @staticmethod
    def from_bits(bits: str) -> 'Code':
        """Build a code from a string of '0' and '1' characters."""
        if bits.strip("01"):
            raise ValueError("Bits must only contain '0' and '1'")
        return Code(int(bits, 2) if bits else 0, len(bits))

    def append(self, bit: int) -> 'Code':
        """Return a new code one step deeper, 0 for left and 1 for right."""
        return Code((self.value << 1) | bit, self.length + 1)

    def is_prefix_of(self, other: 'Code') -> bool:
        if self.length > other.length:
            return False
        return other.value >> (other.length - self.length) == self.value

    def __str__(self) -> str:
        return format(self.value, f"0{self.length}b") if self.length else ""

    def __repr__(self) -> str:
        return f"Code('{self}')"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Code):
            return self.value == other.value and self.length == other.length
        return False

    def __hash__(self) -> int:
        return hash((self.value, self.length))


class FrequencyTable:
    """
    Occurrence counts for every symbol, indexed by symbol value, PSEUDO_EOF included.
    """
    def __init__(self, counts: Optional[np.ndarray] = None) -> None:
        if counts is None:
            counts = np.zeros(ALPHABET_SIZE + 1, dtype=np.int64)
        counts = np.asarray(counts, dtype=np.int64)
        if counts.shape != (ALPHABET_SIZE + 1,):
            raise ValueError(f"Frequency table must hold exactly {ALPHABET_SIZE + 1} counts")
        if np.any(counts < 0):
            raise ValueError("Counts must be non-negative")
        self.counts: np.ndarray = counts

    @staticmethod
    def from_bytes(data: bytes) -> 'FrequencyTable':
        """Count the bytes of data and set PSEUDO_EOF to one."""
        counts = np.bincount(np.frombuffer(data, dtype=np.uint8), minlength=ALPHABET_SIZE + 1).astype(np.int64)
        counts[PSEUDO_EOF] = 1
        return FrequencyTable(counts)

    def __getitem__(self, symbol: int) -> int:
        return int(self.counts[symbol])

    def get_symbols(self) -> List[int]:
        """
        Get the symbols with a non-zero count, in ascending order.

        Returns:
            List[int]: The present symbols.
        """
        return [int(symbol) for symbol in np.flatnonzero(self.counts)]

    def get_size(self) -> int:
        """Number of symbols with a non-zero count."""
        return int(np.count_nonzero(self.counts))

    def get_total(self) -> int:
        """Sum of all counts."""
        return int(self.counts.sum())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyTable):
            return False
        return bool(np.array_equal(self.counts, other.counts))


class CodeTable:
    """
    Maps each symbol in the tree to its code.
    """
    def __init__(self) -> None:
        self.codes: Dict[int, Code] = {}

    def add(self, symbol: int, code: Code) -> None:
        if symbol in self.codes:
            raise ValueError(f"Symbol {symbol} already has a code")
        self.codes[symbol] = code

    def get_code(self, symbol: int) -> Code:
        """
        Get the code of a symbol.

        Raises:
            KeyError: If the symbol has no code.
        """
        return self.codes[symbol]

    def items(self) -> Iterator[Tuple[int, Code]]:
        return iter(sorted(self.codes.items()))

    def is_prefix_free(self) -> bool:
        """
        Check that no code is a prefix of another.

        Sorting the bit strings puts any prefix directly before a code it prefixes.
        """
        bit_strings = sorted(str(code) for code in self.codes.values())
        for shorter, longer in zip(bit_strings, bit_strings[1:]):
            if longer.startswith(shorter):
                return False
        return True

    def __contains__(self, symbol: int) -> bool:
        return symbol in self.codes

    def __len__(self) -> int:
        return len(self.codes)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self.codes))
