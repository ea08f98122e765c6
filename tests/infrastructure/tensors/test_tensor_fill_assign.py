"""
Unit tests for bulk mutation: `fill` and `assign`.
"""

import unittest
import warnings
from fractions import Fraction
from unittest import TestCase

from ranktensor import Tensor, SizeMismatchError


class TestTensorFill(TestCase):
    def test_fill_sets_every_element(self) -> None:
        t = Tensor[int, 2](2, 3)
        self.assertIsNone(t.fill(7))
        for i in range(2):
            for j in range(3):
                self.assertEqual(t[i, j], 7)

    def test_fill_object_dtype(self) -> None:
        t = Tensor[Fraction, 1](3)
        t.fill(Fraction(1, 3))
        self.assertEqual(list(t), [Fraction(1, 3)] * 3)


class TestTensorAssign(TestCase):
    def test_assign_is_row_major(self) -> None:
        t = Tensor[int, 2](2, 3)
        t.assign([1, 2, 3, 4, 5, 6])
        self.assertEqual(t[0, 2], 3)
        self.assertEqual(t[1, 0], 4)

    def test_assign_accepts_any_iterable(self) -> None:
        t = Tensor[int, 1](4)
        t.assign(x * x for x in range(4))
        self.assertEqual(list(t), [0, 1, 4, 9])

    def test_assign_wrong_length_raises_and_leaves_tensor_unchanged(self) -> None:
        t = Tensor[int, 2](2, 2)
        t.fill(3)
        with self.assertRaises(SizeMismatchError) as ctx:
            t.assign([1, 2, 3])
        self.assertEqual(ctx.exception.expected, 4)
        self.assertEqual(ctx.exception.got, 3)
        self.assertEqual(list(t), [3, 3, 3, 3])

        with self.assertRaises(SizeMismatchError):
            t.assign([1, 2, 3, 4, 5])

    def test_narrowing_assignment_warns(self) -> None:
        t = Tensor[int, 1](2)
        with self.assertWarns(RuntimeWarning):
            t.assign([1.9, 2.2])
        self.assertEqual(list(t), [1, 2])

    def test_narrowing_fill_warns(self) -> None:
        t = Tensor[int, 1](2)
        with self.assertWarns(RuntimeWarning):
            t.fill(2.7)
        self.assertEqual(list(t), [2, 2])

    def test_fill_with_matching_kind_does_not_warn(self) -> None:
        t = Tensor[float, 1](2)
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            t.fill(3)
        self.assertFalse(
            [w for w in caught if issubclass(w.category, RuntimeWarning)]
        )

    def test_widening_assignment_does_not_warn(self) -> None:
        t = Tensor[float, 1](2)
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            t.assign([1, 2])
        self.assertFalse(
            [w for w in caught if issubclass(w.category, RuntimeWarning)]
        )
        self.assertEqual(list(t), [1.0, 2.0])

    def test_assign_object_dtype_keeps_python_values(self) -> None:
        t = Tensor[Fraction, 1](2)
        t.assign([Fraction(1, 2), Fraction(2, 3)])
        self.assertIsInstance(t[0], Fraction)
        self.assertEqual(t[1], Fraction(2, 3))


if __name__ == "__main__":
    unittest.main()
