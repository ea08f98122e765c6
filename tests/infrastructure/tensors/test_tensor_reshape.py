"""
Unit tests for in-place reshape.
"""

import unittest
from unittest import TestCase

from ranktensor import (
    Tensor,
    ShapeMismatchError,
    RankMismatchError,
    InvalidShapeError,
)


class TestTensorReshape(TestCase):
    def test_reshape_preserves_row_major_order(self) -> None:
        t = Tensor[int, 2](2, 3)
        t.assign(range(6))
        before = list(t)
        self.assertIsNone(t.reshape(3, 2))
        self.assertEqual(t.shape, (3, 2))
        self.assertEqual(list(t), before)
        self.assertEqual(t[2, 1], 5)
        self.assertEqual(t[1, 0], 2)

    def test_reshape_accepts_shape_sequence(self) -> None:
        t = Tensor[int, 3](2, 2, 2)
        t.reshape((2, 4, 1))
        self.assertEqual(t.shape, (2, 4, 1))
        t.reshape([8, 1, 1])
        self.assertEqual(t.shape, (8, 1, 1))

    def test_reshape_changing_element_count_fails(self) -> None:
        t = Tensor[int, 3](2, 2, 2)
        t.assign(range(8))
        with self.assertRaises(ShapeMismatchError) as ctx:
            t.reshape(3, 3, 1)
        self.assertEqual(ctx.exception.expected, (2, 2, 2))
        self.assertEqual(ctx.exception.got, (3, 3, 1))
        self.assertEqual(t.shape, (2, 2, 2))
        self.assertEqual(list(t), list(range(8)))

    def test_reshape_never_grows_storage(self) -> None:
        t = Tensor[int, 1](4)
        with self.assertRaises(ShapeMismatchError):
            t.reshape(5)
        self.assertEqual(t.data.size, 4)

    def test_reshape_requires_rank_sizes(self) -> None:
        t = Tensor[int, 2](2, 3)
        with self.assertRaises(RankMismatchError):
            t.reshape(6)
        with self.assertRaises(RankMismatchError):
            t.reshape((1, 2, 3))

    def test_reshape_rejects_non_positive_sizes(self) -> None:
        t = Tensor[int, 2](2, 3)
        with self.assertRaises(InvalidShapeError):
            t.reshape(0, 6)
        self.assertEqual(t.shape, (2, 3))


if __name__ == "__main__":
    unittest.main()
