"""
Unit tests for last-two-axes transpose.
"""

import unittest
from unittest import TestCase

import numpy as np

from ranktensor import Tensor, RankMismatchError


class TestTensorTranspose(TestCase):
    def test_transpose_matrix(self) -> None:
        m = Tensor[int, 2](2, 3)
        m[1, 0] = 99
        mt = m.transpose()
        self.assertEqual(mt.shape, (3, 2))
        self.assertEqual(mt[0, 1], 99)

    def test_every_element_moves(self) -> None:
        m = Tensor[int, 2](2, 3)
        m.assign(range(6))
        mt = m.T
        for i in range(2):
            for j in range(3):
                self.assertEqual(mt[j, i], m[i, j])

    def test_double_transpose_restores_tensor(self) -> None:
        m = Tensor[int, 2](3, 4)
        m.assign(range(12))
        self.assertEqual(m.transpose().transpose(), m)

    def test_source_is_not_mutated(self) -> None:
        m = Tensor[int, 2](2, 3)
        m.assign(range(6))
        mt = m.transpose()
        mt[0, 0] = -1
        self.assertEqual(m.shape, (2, 3))
        self.assertEqual(list(m), list(range(6)))

    def test_transpose_with_unit_axis_does_not_share_storage(self) -> None:
        row = Tensor[int, 2](1, 3)
        row.assign([1, 2, 3])
        t = row.transpose()
        t[0, 0] = 99
        self.assertEqual(list(row), [1, 2, 3])

        single = Tensor[int, 2](1, 1)
        single[0, 0] = 5
        s = single.T
        s[0, 0] = 99
        self.assertEqual(single[0, 0], 5)

        column = Tensor[int, 2](3, 1)
        column.assign([1, 2, 3])
        c = column.transpose()
        c[0, 2] = 99
        self.assertEqual(list(column), [1, 2, 3])

    def test_batched_transpose_with_unit_axis_does_not_share_storage(self) -> None:
        t = Tensor[int, 3](2, 1, 3)
        t.assign(range(6))
        tt = t.transpose()
        self.assertEqual(tt.shape, (2, 3, 1))
        self.assertEqual(tt[1, 2, 0], 5)
        tt[0, 0, 0] = 99
        self.assertEqual(list(t), list(range(6)))

    def test_transpose_batched_swaps_last_two_axes(self) -> None:
        arr = np.arange(24).reshape(2, 3, 4)
        t = Tensor.from_numpy(arr)
        tt = t.transpose()
        self.assertEqual(tt.shape, (2, 4, 3))
        np.testing.assert_array_equal(tt.to_numpy(), arr.swapaxes(-1, -2))
        self.assertEqual(tt[1, 3, 2], t[1, 2, 3])

    def test_transpose_rank_four(self) -> None:
        arr = np.arange(2 * 1 * 2 * 3).reshape(2, 1, 2, 3)
        tt = Tensor.from_numpy(arr).T
        self.assertEqual(tt.shape, (2, 1, 3, 2))
        np.testing.assert_array_equal(tt.to_numpy(), arr.swapaxes(-1, -2))

    def test_transpose_vector_raises_rank_mismatch(self) -> None:
        v = Tensor[int, 1](3)
        with self.assertRaises(RankMismatchError) as ctx:
            v.transpose()
        self.assertEqual(ctx.exception.got, 1)
        with self.assertRaises(RankMismatchError):
            v.T


if __name__ == "__main__":
    unittest.main()
