import unittest
from io import BytesIO

from huffcodec.bitstreams import BitOutputStream, BitInputStream, END_OF_STREAM

class TestBitOutputStream(unittest.TestCase):
    def test_bit_output_stream(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        bits = [1, 0, 1, 0, 1, 0, 1, 0]
        for bit in bits:
            bos.write(bit)
        bos.finish()
        result = out.getvalue()
        self.assertEqual(result, bytes([0b10101010]))

    def test_bit_output_stream_padding(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        for bit in [1, 0, 1]:
            bos.write(bit)
        bos.finish()
        result = out.getvalue()
        self.assertEqual(result, bytes([0b10100000]))

    def test_write_bits_most_significant_first(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        bos.write_bits(9, 0b100000001)
        bos.write_bits(7, 0b0000011)
        bos.finish()
        self.assertEqual(out.getvalue(), bytes([0b10000000, 0b10000011]))
        self.assertEqual(bos.bits_written, 16)

    def test_write_zero_bits(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        bos.write_bits(0, 0)
        bos.finish()
        self.assertEqual(out.getvalue(), b"")

    def test_write_bits_value_too_wide(self):
        bos = BitOutputStream(BytesIO())
        with self.assertRaises(ValueError):
            bos.write_bits(3, 8)
        with self.assertRaises(ValueError):
            bos.write_bits(-1, 0)

    def test_invalid_bit_write(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        with self.assertRaises(ValueError):
            bos.write(2)

class TestBitInputStream(unittest.TestCase):
    def test_bit_input_stream(self):
        data = bytes([0b11001010])
        inp = BytesIO(data)
        bis = BitInputStream(inp)
        bits = [bis.read() for _ in range(8)]
        self.assertEqual(bits, [1, 1, 0, 0, 1, 0, 1, 0])
        self.assertEqual(bis.read(), END_OF_STREAM)

    def test_read_bits(self):
        bis = BitInputStream(BytesIO(bytes([0xFA, 0xCE, 0x82, 0x01])))
        self.assertEqual(bis.read_bits(32), 0xFACE8201)
        self.assertEqual(bis.bits_read, 32)
        self.assertEqual(bis.read_bits(1), END_OF_STREAM)

    def test_read_bits_short_stream(self):
        bis = BitInputStream(BytesIO(bytes([0xFF])))
        self.assertEqual(bis.read_bits(9), END_OF_STREAM)

    def test_reset_rewinds_to_start_position(self):
        inp = BytesIO(b"xab")
        inp.read(1)
        bis = BitInputStream(inp)
        self.assertEqual(bis.read_bits(8), ord("a"))
        bis.read()
        bis.reset()
        self.assertEqual(bis.bits_read, 0)
        self.assertEqual(bis.read_bits(8), ord("a"))
        self.assertEqual(bis.read_bits(8), ord("b"))

    def test_reset_unseekable_stream(self):
        class Unseekable(BytesIO):
            def seekable(self):
                return False

        bis = BitInputStream(Unseekable(b"a"))
        with self.assertRaises(ValueError):
            bis.reset()

if __name__ == '__main__':
    unittest.main()
