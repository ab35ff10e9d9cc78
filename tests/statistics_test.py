import unittest
import numpy as np

from huffcodec.codecs import build
from huffcodec.statistics import CodeStatistics

class TestCodeStatistics(unittest.TestCase):
    def setUp(self):
        self.stats = CodeStatistics.from_code(build("aabbc"))

    def test_arrays_follow_leaves(self):
        self.assertEqual(self.stats.symbols, ['b', 'c', 'a'])
        np.testing.assert_array_equal(self.stats.frequencies, [2, 1, 2])
        np.testing.assert_array_equal(self.stats.code_lengths, [1, 2, 2])

    def test_sizes(self):
        self.assertEqual(self.stats.symbol_count, 5)
        self.assertEqual(self.stats.encoded_bits, 8)
        self.assertEqual(self.stats.fixed_width_bits, 40)
        self.assertAlmostEqual(self.stats.compression_ratio, 5.0)

    def test_entropy_and_lengths(self):
        self.assertAlmostEqual(self.stats.entropy, 1.5219, places=4)
        self.assertAlmostEqual(self.stats.average_code_length, 1.6)
        self.assertAlmostEqual(self.stats.efficiency, 1.5219 / 1.6, places=4)
        self.assertAlmostEqual(self.stats.kraft_sum, 1.0)

    def test_encoded_bits_match_message(self):
        code = build("the quick brown fox jumps over the lazy dog")
        stats = CodeStatistics.from_code(code)
        self.assertEqual(stats.encoded_bits, len(code.get_encoded_message()))
        self.assertAlmostEqual(stats.kraft_sum, 1.0)
        self.assertGreaterEqual(stats.average_code_length, stats.entropy)

    def test_single_symbol(self):
        stats = CodeStatistics.from_code(build("aaaa"))
        self.assertAlmostEqual(stats.entropy, 0.0)
        self.assertAlmostEqual(stats.average_code_length, 1.0)
        self.assertAlmostEqual(stats.kraft_sum, 0.5)
        self.assertEqual(stats.encoded_bits, 4)

    def test_custom_fixed_width(self):
        stats = CodeStatistics.from_code(build("aabbc"), fixed_symbol_width=16)
        self.assertEqual(stats.fixed_width_bits, 80)

    def test_str(self):
        self.assertIn("Compression ratio: 5.0000", str(self.stats))

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            CodeStatistics.from_code("aabbc")
        with self.assertRaises(ValueError):
            CodeStatistics([], np.array([]), np.array([]))
        with self.assertRaises(ValueError):
            CodeStatistics(['a'], np.array([1, 2]), np.array([1]))

if __name__ == '__main__':
    unittest.main()
