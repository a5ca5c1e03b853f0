import unittest
from tetris_piece import PIECES
from tetris_rng import UniformRandom, SequenceSource


class TestUniformRandom(unittest.TestCase):
    def test_valid_types(self):
        rng = UniformRandom(1)
        seen = {rng.next_piece() for _ in range(500)}
        self.assertEqual(set(PIECES), seen)

    def test_seed_reproducible(self):
        a, b = UniformRandom(42), UniformRandom(42)
        self.assertEqual([a.next_piece() for _ in range(50)],
                         [b.next_piece() for _ in range(50)])


class TestSequenceSource(unittest.TestCase):
    def test_wraps(self):
        s = SequenceSource("TOI")
        self.assertEqual(list("TOITO"), [s.next_piece() for _ in range(5)])

    def test_rejects_bad_input(self):
        with self.assertRaises(ValueError):
            SequenceSource([])
        with self.assertRaises(ValueError):
            SequenceSource(["T", "X"])


if __name__ == '__main__':
    unittest.main()
