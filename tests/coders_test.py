import unittest
from io import BytesIO

from huffcodec.coders import (
    HuffmanCoder,
    BitOutputStream,
    BitInputStream,
    derive_code_table,
    pack_bits,
    unpack_bits,
)
from huffcodec.errors import InvalidCodeError, TruncatedCodeError, UnknownSymbolError
from huffcodec.logger import Logger, CodeAssignedLog, CodingLog
from huffcodec.models import FrequencyTable, LeafNode, InternalNode
from huffcodec.tree import build_tree

def build_coder(counts):
    return HuffmanCoder(build_tree(FrequencyTable(counts)))

class TestDeriveCodeTable(unittest.TestCase):
    def test_left_is_zero_right_is_one(self):
        root = InternalNode(LeafNode('x', 1), LeafNode('y', 1))
        self.assertEqual(derive_code_table(root), {'x': '0', 'y': '1'})

    def test_codes_follow_tree_paths(self):
        root = build_tree(FrequencyTable({'a': 2, 'b': 2, 'c': 1}))
        self.assertEqual(derive_code_table(root), {'b': '0', 'c': '10', 'a': '11'})

    def test_single_symbol_gets_one_bit(self):
        self.assertEqual(derive_code_table(LeafNode('a', 4)), {'a': '0'})

    def test_siblings_do_not_share_paths(self):
        root = build_tree(FrequencyTable({'a': 1, 'b': 1, 'c': 1, 'd': 1}))
        self.assertEqual(derive_code_table(root), {'a': '00', 'b': '01', 'c': '10', 'd': '11'})

    def test_codes_are_logged(self):
        logger = Logger()
        derive_code_table(InternalNode(LeafNode('x', 1), LeafNode('y', 1)), logger)
        logs = [log for log in logger.logs if isinstance(log, CodeAssignedLog)]
        self.assertEqual([(log.symbol, log.code) for log in logs], [('x', '0'), ('y', '1')])

    def test_invalid_root(self):
        with self.assertRaises(ValueError):
            derive_code_table(None)

class TestHuffmanCoder(unittest.TestCase):
    def setUp(self):
        self.coder = build_coder({'a': 2, 'b': 2, 'c': 1})
        self.logger = Logger()
        self.logger.display_error = False

    def test_encode(self):
        self.assertEqual(self.coder.encode("aabbc"), "11110010")
        self.assertEqual(self.coder.encode([]), "")

    def test_encode_logs_code_sizes(self):
        self.coder.encode("ab", self.logger)
        sizes = [log.encoded_size for log in self.logger.logs if isinstance(log, CodingLog)]
        self.assertEqual(sizes, [2, 1])

    def test_coding_logs_compare_against_fixed_width(self):
        self.coder.encode("ab", self.logger)
        logs = [log for log in self.logger.logs if isinstance(log, CodingLog)]
        self.assertEqual([log.fixed_width_size for log in logs], [8, 8])
        self.assertIn("Fixed width size: 8, Encoded size: 2", logs[0].message)

    def test_encode_unknown_symbol(self):
        with self.assertRaises(UnknownSymbolError) as context:
            self.coder.encode("abd", self.logger)
        self.assertEqual(context.exception.symbol, 'd')
        self.assertEqual(self.logger.logs[-1].type_name, "UnknownSymbolError")

    def test_encode_unhashable_symbol(self):
        with self.assertRaises(UnknownSymbolError):
            self.coder.encode([['a']])

    def test_decode(self):
        self.assertEqual(self.coder.decode("11110010"), ['a', 'a', 'b', 'b', 'c'])

    def test_decode_empty(self):
        self.assertEqual(self.coder.decode(""), [])

    def test_decode_invalid_character(self):
        with self.assertRaises(InvalidCodeError) as context:
            self.coder.decode("01x0", self.logger)
        self.assertEqual(context.exception.position, 2)
        self.assertEqual(context.exception.bit, 'x')
        self.assertEqual(self.logger.logs[-1].type_name, "InvalidCodeError")

    def test_decode_truncated(self):
        with self.assertRaises(TruncatedCodeError):
            self.coder.decode("1111001")
        with self.assertRaises(TruncatedCodeError):
            self.coder.decode("1")

    def test_decode_not_a_string(self):
        with self.assertRaises(ValueError):
            self.coder.decode(b"0101")

class TestSingleSymbolCoder(unittest.TestCase):
    def setUp(self):
        self.coder = build_coder({'a': 4})

    def test_encode(self):
        self.assertEqual(self.coder.encode("aaaa"), "0000")

    def test_decode(self):
        self.assertEqual(self.coder.decode("000"), ['a', 'a', 'a'])
        self.assertEqual(self.coder.decode(""), [])

    def test_decode_unused_bit(self):
        with self.assertRaises(InvalidCodeError) as context:
            self.coder.decode("001")
        self.assertEqual(context.exception.position, 2)

    def test_decode_invalid_character(self):
        with self.assertRaises(InvalidCodeError):
            self.coder.decode("0a")

class TestBitStreamHelpers(unittest.TestCase):
    def test_bit_output_stream(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        for bit in "10101010":
            bos.write(bit)
        self.assertEqual(bos.finish(), 0)
        self.assertEqual(out.getvalue(), bytes([0b10101010]))

    def test_bit_output_stream_padding(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        bos.write_code("101")
        self.assertEqual(bos.finish(), 5)
        self.assertEqual(out.getvalue(), bytes([0b10100000]))
        self.assertEqual(bos.bits_written, 3)

    def test_bit_input_stream(self):
        bis = BitInputStream(BytesIO(bytes([0b11001010])))
        bits = [bis.read() for _ in range(8)]
        self.assertEqual(bits, ["1", "1", "0", "0", "1", "0", "1", "0"])
        with self.assertRaises(TruncatedCodeError):
            bis.read()

    def test_bit_input_stream_read_bits(self):
        bis = BitInputStream(BytesIO(bytes([0b11110010, 0b10000000])))
        self.assertEqual(bis.read_bits(9), "111100101")
        self.assertEqual(bis.bits_read, 9)

    def test_invalid_bit_write(self):
        bos = BitOutputStream(BytesIO())
        bos.write("1")
        with self.assertRaises(InvalidCodeError) as context:
            bos.write("2")
        self.assertEqual(context.exception.position, 1)
        self.assertEqual(context.exception.bit, "2")

    def test_int_bit_is_rejected(self):
        bos = BitOutputStream(BytesIO())
        with self.assertRaises(InvalidCodeError):
            bos.write(1)

class TestPackBits(unittest.TestCase):
    def test_pack(self):
        self.assertEqual(pack_bits("101"), bytes([0b10100000]))
        self.assertEqual(pack_bits("111100101"), bytes([0b11110010, 0b10000000]))
        self.assertEqual(pack_bits(""), b"")

    def test_unpack(self):
        self.assertEqual(unpack_bits(bytes([0b10100000]), 3), "101")
        self.assertEqual(unpack_bits(bytes([0b11110010, 0b10000000]), 9), "111100101")

    def test_pack_invalid(self):
        with self.assertRaises(InvalidCodeError):
            pack_bits("10x")

    def test_unpack_too_short(self):
        with self.assertRaises(TruncatedCodeError):
            unpack_bits(bytes([0xff]), 9)

    def test_unpack_invalid_length(self):
        with self.assertRaises(ValueError):
            unpack_bits(b"\x00", -1)

if __name__ == '__main__':
    unittest.main()
