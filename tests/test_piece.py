import unittest
import tetris_piece as tp


class TestRotation(unittest.TestCase):
    def test_rotate_cw_formula(self):
        m = [[0, 1, 0],
             [1, 1, 1]]
        r = tp.rotate_cw(m)
        self.assertEqual(3, len(r))
        self.assertEqual(2, len(r[0]))
        h = len(m)
        for y, row in enumerate(m):
            for x, v in enumerate(row):
                self.assertEqual(v, r[x][h - 1 - y])

    def test_rotate_returns_new_matrix(self):
        m = [[1, 0, 0], [1, 1, 1]]
        r = tp.rotate_cw(m)
        r[0][0] = 9
        self.assertEqual([[1, 0, 0], [1, 1, 1]], m)

    def test_four_rotations_identity(self):
        for t in tp.PIECES:
            m = tp.SHAPES[t]
            r = m
            for _ in range(4):
                r = tp.rotate_cw(r)
            self.assertEqual(m, r, t)

    def test_o_piece_rotation_is_noop(self):
        o = tp.SHAPES["O"]
        self.assertEqual(o, tp.rotate_cw(o))

    def test_two_orientation_pieces(self):
        for t in ("S", "Z", "I"):
            m = tp.SHAPES[t]
            self.assertEqual(m, tp.rotate_cw(tp.rotate_cw(m)), t)

    def test_i_piece_goes_vertical(self):
        self.assertEqual([[1], [1], [1], [1]], tp.rotate_cw(tp.SHAPES["I"]))


class TestPiece(unittest.TestCase):
    def test_spawn_centered(self):
        self.assertEqual(3, tp.Piece.spawn("I").x)
        self.assertEqual(4, tp.Piece.spawn("O").x)
        self.assertEqual(3, tp.Piece.spawn("T").x)
        for t in tp.PIECES:
            self.assertEqual(0, tp.Piece.spawn(t).y)

    def test_spawn_copies_catalog(self):
        p = tp.Piece.spawn("T")
        p.shape[0][0] = 1
        self.assertEqual([[0, 1, 0], [1, 1, 1]], tp.SHAPES["T"])

    def test_translate_leaves_input(self):
        p = tp.Piece.spawn("L")
        q = tp.translate(p, -2, 3)
        self.assertEqual((3, 0), (p.x, p.y))
        self.assertEqual((1, 3), (q.x, q.y))
        self.assertEqual(p.shape, q.shape)
        self.assertIsNot(p.shape, q.shape)

    def test_cells(self):
        p = tp.Piece("S", [[0, 1, 1], [1, 1, 0]], 2, -1)
        self.assertEqual([(3, -1), (4, -1), (2, 0), (3, 0)], p.cells())

    def test_every_shape_has_four_cells(self):
        for t in tp.PIECES:
            self.assertEqual(4, len(tp.Piece.spawn(t).cells()), t)
            self.assertIn(t, tp.COLORS)


if __name__ == '__main__':
    unittest.main()
