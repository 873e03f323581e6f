import unittest
import numpy as np

from huffcodec.models import HuffmanNode, Code, FrequencyTable, CodeTable
from huffcodec.settings import ALPHABET_SIZE, PSEUDO_EOF

class TestHuffmanNode(unittest.TestCase):
    def test_leaf(self):
        leaf = HuffmanNode(97, 3)
        self.assertTrue(leaf.is_leaf())
        self.assertEqual(leaf.count_nodes(), (1, 0))

    def test_internal_node(self):
        node = HuffmanNode(0, 3, HuffmanNode(97, 2), HuffmanNode(PSEUDO_EOF, 1))
        self.assertFalse(node.is_leaf())
        self.assertEqual(node.count_nodes(), (2, 1))

    def test_single_child_rejected(self):
        with self.assertRaises(ValueError):
            HuffmanNode(0, 1, left=HuffmanNode(1, 1))

    def test_ordering_by_weight(self):
        self.assertLess(HuffmanNode(1, 1), HuffmanNode(0, 2))

    def test_structural_equality_ignores_weight(self):
        first = HuffmanNode(0, 5, HuffmanNode(1, 4), HuffmanNode(2, 1))
        second = HuffmanNode(0, 0, HuffmanNode(1, 0), HuffmanNode(2, 0))
        third = HuffmanNode(0, 0, HuffmanNode(2, 0), HuffmanNode(1, 0))
        self.assertEqual(first, second)
        self.assertNotEqual(first, third)

class TestCode(unittest.TestCase):
    def test_from_bits(self):
        code = Code.from_bits("0110")
        self.assertEqual(code.value, 6)
        self.assertEqual(code.length, 4)
        self.assertEqual(str(code), "0110")

    def test_empty_code(self):
        code = Code()
        self.assertEqual(str(code), "")
        self.assertEqual(code, Code.from_bits(""))

    def test_append(self):
        code = Code().append(0).append(1).append(1)
        self.assertEqual(code, Code.from_bits("011"))

    def test_invalid_bits(self):
        with self.assertRaises(ValueError):
            Code.from_bits("012")
        with self.assertRaises(ValueError):
            Code(4, 2)

    def test_is_prefix_of(self):
        self.assertTrue(Code.from_bits("01").is_prefix_of(Code.from_bits("011")))
        self.assertTrue(Code.from_bits("01").is_prefix_of(Code.from_bits("01")))
        self.assertFalse(Code.from_bits("01").is_prefix_of(Code.from_bits("001")))
        self.assertFalse(Code.from_bits("011").is_prefix_of(Code.from_bits("01")))

class TestFrequencyTable(unittest.TestCase):
    def test_from_bytes(self):
        table = FrequencyTable.from_bytes(b"aab")
        self.assertEqual(table[ord("a")], 2)
        self.assertEqual(table[ord("b")], 1)
        self.assertEqual(table[PSEUDO_EOF], 1)
        self.assertEqual(table.get_symbols(), [ord("a"), ord("b"), PSEUDO_EOF])
        self.assertEqual(table.get_size(), 3)
        self.assertEqual(table.get_total(), 4)

    def test_from_empty_bytes(self):
        table = FrequencyTable.from_bytes(b"")
        self.assertEqual(table.get_symbols(), [PSEUDO_EOF])

    def test_invalid_shape(self):
        with self.assertRaises(ValueError):
            FrequencyTable(np.zeros(ALPHABET_SIZE, dtype=np.int64))

    def test_negative_counts(self):
        counts = np.zeros(ALPHABET_SIZE + 1, dtype=np.int64)
        counts[3] = -1
        with self.assertRaises(ValueError):
            FrequencyTable(counts)

class TestCodeTable(unittest.TestCase):
    def test_add_and_get(self):
        codes = CodeTable()
        codes.add(97, Code.from_bits("0"))
        codes.add(PSEUDO_EOF, Code.from_bits("1"))
        self.assertIn(97, codes)
        self.assertNotIn(98, codes)
        self.assertEqual(len(codes), 2)
        self.assertEqual(list(codes), [97, PSEUDO_EOF])
        self.assertEqual(codes.get_code(97), Code.from_bits("0"))
        with self.assertRaises(KeyError):
            codes.get_code(98)

    def test_duplicate_symbol(self):
        codes = CodeTable()
        codes.add(97, Code.from_bits("0"))
        with self.assertRaises(ValueError):
            codes.add(97, Code.from_bits("1"))

    def test_is_prefix_free(self):
        codes = CodeTable()
        codes.add(1, Code.from_bits("0"))
        codes.add(2, Code.from_bits("10"))
        codes.add(3, Code.from_bits("11"))
        self.assertTrue(codes.is_prefix_free())
        codes.add(4, Code.from_bits("101"))
        self.assertFalse(codes.is_prefix_free())

if __name__ == '__main__':
    unittest.main()
