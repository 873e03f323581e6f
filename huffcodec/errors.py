"""
errors.py

Errors raised while reading a compressed stream.
"""


class HuffmanError(ValueError):
    """Base class for malformed compressed input."""


class BadMagicError(HuffmanError):
    def __init__(self, magic_number: int) -> None:
        self.magic_number = magic_number
        if magic_number == -1:
            message = "illegal header: stream ended before the magic number"
        else:
            message = f"illegal header starts with {magic_number:#010x}"
        super().__init__(message)


class TruncatedHeaderError(HuffmanError):
    def __init__(self, bits_read: int) -> None:
        self.bits_read = bits_read
        super().__init__(f"tree header truncated after {bits_read} bits")


class TruncatedBodyError(HuffmanError):
    def __init__(self, bits_read: int) -> None:
        self.bits_read = bits_read
        super().__init__(f"bad input, no PSEUDO_EOF after {bits_read} bits")


class InvalidTreeError(HuffmanError):
    """The tree header decodes to a tree no encoder would have written."""
