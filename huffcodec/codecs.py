from io import BytesIO
from typing import IO, Optional

from .validators import validate_type, validate_file_exists
from .bitstreams import BitInputStream, BitOutputStream
from .coders import CoderBase, HuffmanTreeCoder, get_coder
from .errors import HuffmanError
from .logger import Logger, Log, LogLevel
from .settings import BITS_PER_INT


class HuffmanCodec:
    def compress(self, data: bytes, logger: Optional[Logger] = None) -> bytes:
        """
        Compress the input data.

        Args:
            data (bytes): The data to compress.
            logger: Logger instance for logging.

        Returns:
            bytes: The magic number, the tree header and the coded body.
        """
        validate_type(data, "Data", bytes)
        out_buffer = BytesIO()
        self.compress_stream(BytesIO(data), out_buffer, logger)
        return out_buffer.getvalue()

    def decompress(self, data: bytes, logger: Optional[Logger] = None) -> bytes:
        """
        Decompress the encoded data.

        Args:
            data (bytes): The compressed data.
            logger: Logger instance for logging.

        Returns:
            bytes: The decompressed data.

        Raises:
            HuffmanError: If the data is not a well formed compressed stream.
        """
        validate_type(data, "Data", bytes)
        out_buffer = BytesIO()
        self.decompress_stream(BytesIO(data), out_buffer, logger)
        return out_buffer.getvalue()

    def compress_stream(self, inp: IO[bytes], out: IO[bytes], logger: Optional[Logger] = None) -> None:
        """
        Compress a seekable binary stream into another binary stream.

        Args:
            inp (IO[bytes]): The input stream.
            out (IO[bytes]): The output stream.
            logger: Logger instance for logging.
        """
        coder = HuffmanTreeCoder(logger=logger)
        coder.compress(BitInputStream(inp), BitOutputStream(out))

    def decompress_stream(self, inp: IO[bytes], out: IO[bytes], logger: Optional[Logger] = None) -> None:
        """
        Decompress a binary stream into another binary stream.

        The coder is picked from the magic number at the start of the stream.

        Args:
            inp (IO[bytes]): The compressed stream.
            out (IO[bytes]): The output stream.
            logger: Logger instance for logging.
        """
        bit_in = BitInputStream(inp)
        bit_out = BitOutputStream(out)
        try:
            magic_number = bit_in.read_bits(BITS_PER_INT)
            coder: CoderBase = get_coder(magic_number, logger=logger)
            coder.decode(bit_in, bit_out)
        except HuffmanError as e:
            if logger is not None:
                logger.log(Log("Decoding_error", LogLevel.ERROR, str(e)))
            raise
        finally:
            bit_out.finish()


class HuffmanCodecFile(HuffmanCodec):
    def compress(self, input_path: str, output_path: str, logger: Optional[Logger] = None) -> None:
        """
        Compress the input file and write the compressed stream to an output file.

        Args:
            input_path (str): Path to the input file.
            output_path (str): Path to the output file.
            logger: Logger instance for logging.
        """
        validate_type(input_path, "Input path", str)
        validate_type(output_path, "Output path", str)
        validate_file_exists(input_path)

        with open(input_path, "rb") as input_file, open(output_path, "wb") as output_file:
            self.compress_stream(input_file, output_file, logger)

    def decompress(self, compressed_file_path: str, output_file_path: str, logger: Optional[Logger] = None) -> None:
        """
        Decompress the input file and write the decompressed data to an output file.

        Args:
            compressed_file_path (str): Path to the compressed file.
            output_file_path (str): Path to the output file.
            logger: Logger instance for logging.
        """
        validate_type(compressed_file_path, "Compressed file path", str)
        validate_type(output_file_path, "Output file path", str)
        validate_file_exists(compressed_file_path)

        with open(compressed_file_path, "rb") as input_file, open(output_file_path, "wb") as output_file:
            self.decompress_stream(input_file, output_file, logger)
