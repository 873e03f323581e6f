"""
bitstreams.py

Bit level readers and writers over binary streams.
"""


from typing import IO

from .validators import validate_bit_count

END_OF_STREAM = -1


class BitOutputStream:
    """
    A helper class to write bits to an underlying binary stream.
    """

    def __init__(self, out: IO[bytes]) -> None:
        """
        Initialize with an underlying output stream (e.g., a file opened in binary mode).

        Args:
            out (IO[bytes]): The output stream.
        """
        self.out: IO[bytes] = out
        self.current_byte: int = 0
        self.num_bits_filled: int = 0
        self.bits_written: int = 0

    def write(self, bit: int) -> None:
        """
        Write a single bit (0 or 1) to the stream.

        Args:
            bit (int): The bit to write.

        Raises:
            ValueError: If the bit is not 0 or 1.
        """
        if bit not in (0, 1):
            raise ValueError("Bit must be 0 or 1")
        self.current_byte = (self.current_byte << 1) | bit
        self.num_bits_filled += 1
        self.bits_written += 1
        if self.num_bits_filled == 8:
            self.flush_current_byte()

    def write_bits(self, count: int, value: int) -> None:
        """
        Write the low `count` bits of value, most significant bit first.

        Args:
            count (int): Number of bits to write.
            value (int): The value holding the bits.

        Raises:
            ValueError: If count is negative or value does not fit in count bits.
        """
        validate_bit_count(count)
        if value < 0 or value >> count:
            raise ValueError(f"Value {value} does not fit in {count} bits")
        for shift in range(count - 1, -1, -1):
            self.write((value >> shift) & 1)

    def flush_current_byte(self) -> None:
        """
        Write the current byte to the underlying stream and reset the buffer.
        """
        self.out.write(bytes((self.current_byte,)))
        self.current_byte = 0
        self.num_bits_filled = 0

    def finish(self) -> None:
        """
        Flush any remaining bits to the stream by padding with zeros.
        """
        if self.num_bits_filled > 0:
            self.current_byte = self.current_byte << (8 - self.num_bits_filled)
            self.flush_current_byte()
        self.out.flush()

    def close(self) -> None:
        """
        Finish writing and close the underlying stream.
        """
        self.finish()
        self.out.close()


class BitInputStream:
    """
    A helper class to read bits from an underlying binary stream.
    """

    def __init__(self, inp: IO[bytes]) -> None:
        """
        Initialize with an underlying input stream (e.g., a file opened in binary mode).

        The current position of inp is remembered so reset() can rewind to it.

        Args:
            inp (IO[bytes]): The input stream.
        """
        self.inp: IO[bytes] = inp
        self.current_byte: int = 0
        self.num_bits_remaining: int = 0
        self.bits_read: int = 0
        self.start_position: int = inp.tell() if inp.seekable() else 0

    def read(self) -> int:
        """
        Read a single bit from the stream.

        Returns:
            int: 0 or 1 for a valid bit, or -1 if no more bits are available.
        """
        if self.num_bits_remaining == 0:
            byte = self.inp.read(1)
            if len(byte) == 0:
                return END_OF_STREAM
            self.current_byte = byte[0]
            self.num_bits_remaining = 8
        self.num_bits_remaining -= 1
        self.bits_read += 1
        return (self.current_byte >> self.num_bits_remaining) & 1

    def read_bits(self, count: int) -> int:
        """
        Read `count` bits as an unsigned integer, most significant bit first.

        Args:
            count (int): Number of bits to read.

        Returns:
            int: The value read, or -1 if the stream ended before `count` bits were available.
        """
        validate_bit_count(count)
        value = 0
        for _ in range(count):
            bit = self.read()
            if bit == END_OF_STREAM:
                return END_OF_STREAM
            value = (value << 1) | bit
        return value

    def reset(self) -> None:
        """
        Rewind to the position the stream started from.

        Raises:
            ValueError: If the underlying stream cannot seek.
        """
        if not self.inp.seekable():
            raise ValueError("Input stream must be seekable to be reset")
        self.inp.seek(self.start_position)
        self.current_byte = 0
        self.num_bits_remaining = 0
        self.bits_read = 0

    def close(self) -> None:
        """
        Close the underlying input stream.
        """
        self.inp.close()
