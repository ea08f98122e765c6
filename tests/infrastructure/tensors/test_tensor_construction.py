"""
Unit tests for Tensor specialization and construction.

Covers:
- ``Tensor[dtype, rank]`` / ``Tensor[rank]`` specialization and caching
- construction from separate sizes, from a shape sequence and with no sizes
- rank inference for unspecialized ``Tensor(...)``
- factory constructors (zeros / ones / full / from_numpy)
- value semantics (clone, copy, deepcopy, ==, hash)
"""

import copy
import unittest
import warnings
from fractions import Fraction
from unittest import TestCase

import numpy as np

from ranktensor import (
    Tensor,
    ITensor,
    RankKind,
    RankMismatchError,
    InvalidShapeError,
    ShapeMismatchError,
    get_default_dtype,
)


class TestTensorSpecialization(TestCase):
    def test_specialized_classes_are_cached(self) -> None:
        self.assertIs(Tensor[int, 2], Tensor[int, 2])
        self.assertIsNot(Tensor[int, 2], Tensor[int, 3])
        self.assertIsNot(Tensor[int, 2], Tensor[float, 2])

    def test_specialized_class_carries_rank_and_dtype(self) -> None:
        M = Tensor[int, 2]
        self.assertEqual(M.RANK, 2)
        self.assertEqual(M.DTYPE, np.dtype(int))
        self.assertTrue(issubclass(M, Tensor))

    def test_rank_only_uses_default_dtype(self) -> None:
        self.assertEqual(Tensor[3].DTYPE, get_default_dtype())
        self.assertEqual(Tensor[3].RANK, 3)

    def test_python_object_types_map_to_object_dtype(self) -> None:
        self.assertEqual(Tensor[Fraction, 1].DTYPE, np.dtype(object))

    def test_invalid_parameters(self) -> None:
        with self.assertRaises(ValueError):
            Tensor[int, 0]
        with self.assertRaises(TypeError):
            Tensor[int, "2"]
        with self.assertRaises(TypeError):
            Tensor[int, True]
        with self.assertRaises(TypeError):
            Tensor[int, 2, 3]

    def test_cannot_specialize_twice(self) -> None:
        with self.assertRaises(TypeError):
            Tensor[int, 2][3]


class TestTensorConstruction(TestCase):
    def test_separate_sizes_and_shape_sequence_agree(self) -> None:
        a = Tensor[int, 2](2, 3)
        b = Tensor[int, 2]((2, 3))
        c = Tensor[int, 2]([2, 3])
        for t in (a, b, c):
            self.assertEqual(t.shape, (2, 3))
            self.assertEqual(t.numel(), 6)
            self.assertEqual(t.rank, 2)
            self.assertIs(t.rank_kind, RankKind.MATRIX)

    def test_storage_is_zero_initialized(self) -> None:
        t = Tensor[int, 3](2, 3, 4)
        self.assertEqual(t.data.shape, (24,))
        self.assertTrue(np.all(t.data == 0))

    def test_no_sizes_builds_single_element_tensor(self) -> None:
        t = Tensor[int, 3]()
        self.assertEqual(t.shape, (1, 1, 1))
        self.assertEqual(t.numel(), 1)

    def test_size_one_axes_are_valid(self) -> None:
        t = Tensor[float, 2](1, 5)
        self.assertEqual(t.shape, (1, 5))

    def test_wrong_number_of_sizes_raises_rank_mismatch(self) -> None:
        with self.assertRaises(RankMismatchError):
            Tensor[int, 2](2)
        with self.assertRaises(RankMismatchError):
            Tensor[int, 2](2, 3, 4)
        with self.assertRaises(RankMismatchError):
            Tensor[int, 2]((2, 3, 4))

    def test_non_positive_size_raises_invalid_shape(self) -> None:
        with self.assertRaises(InvalidShapeError):
            Tensor[int, 2](2, 0)
        with self.assertRaises(InvalidShapeError):
            Tensor[int, 1](-3)

    def test_non_integer_size_raises_type_error(self) -> None:
        with self.assertRaises(TypeError):
            Tensor[int, 2](2, 1.5)

    def test_unspecialized_construction_infers_rank(self) -> None:
        t = Tensor(2, 3, 4)
        self.assertEqual(t.rank, 3)
        self.assertIs(type(t), Tensor[get_default_dtype(), 3])
        self.assertEqual(t.dtype, get_default_dtype())

    def test_unspecialized_construction_without_sizes_fails(self) -> None:
        with self.assertRaises(RankMismatchError):
            Tensor()

    def test_satisfies_protocol(self) -> None:
        self.assertIsInstance(Tensor[int, 1](3), ITensor)

    def test_data_is_read_only_view(self) -> None:
        t = Tensor[int, 1](3)
        with self.assertRaises(ValueError):
            t.data[0] = 1
        t[0] = 1
        self.assertEqual(t.data[0], 1)

    def test_repr(self) -> None:
        t = Tensor[int, 2](2, 3)
        r = repr(t)
        self.assertIn("shape=(2, 3)", r)
        self.assertIn("rank=2", r)


class TestTensorFactories(TestCase):
    def test_zeros_ones_full(self) -> None:
        M = Tensor[int, 2]
        self.assertTrue(np.all(M.zeros((2, 2)).data == 0))
        self.assertTrue(np.all(M.ones((2, 2)).data == 1))
        f = M.full((3, 1), 9)
        self.assertEqual(f.shape, (3, 1))
        self.assertTrue(np.all(f.data == 9))

    def test_ones_on_bool_tensor_does_not_warn(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            t = Tensor[bool, 1].ones((3,))
        self.assertTrue(all(t))

    def test_unspecialized_zeros_infers_rank(self) -> None:
        t = Tensor.zeros((2, 2, 2))
        self.assertEqual(t.rank, 3)

    def test_from_numpy_takes_rank_and_dtype_from_array(self) -> None:
        arr = np.arange(6, dtype=np.int64).reshape(2, 3)
        t = Tensor.from_numpy(arr)
        self.assertIs(type(t), Tensor[np.int64, 2])
        self.assertEqual(t[1, 2], 5)
        np.testing.assert_array_equal(t.to_numpy(), arr)

    def test_from_numpy_copies(self) -> None:
        arr = np.zeros((2, 2))
        t = Tensor.from_numpy(arr)
        arr[0, 0] = 5.0
        self.assertEqual(t[0, 0], 0.0)

    def test_from_numpy_on_specialized_class_checks_rank(self) -> None:
        with self.assertRaises(RankMismatchError):
            Tensor[int, 3].from_numpy(np.zeros((2, 2)))

    def test_copy_from_numpy_requires_same_shape(self) -> None:
        t = Tensor[float, 2](2, 3)
        with self.assertRaises(ShapeMismatchError):
            t.copy_from_numpy(np.zeros((3, 2)))

    def test_narrowing_copy_from_numpy_warns(self) -> None:
        t = Tensor[int, 2](1, 2)
        with self.assertWarns(RuntimeWarning):
            t.copy_from_numpy(np.array([[1.5, 2.5]]))
        self.assertEqual(list(t), [1, 2])

    def test_narrowing_from_numpy_on_specialized_class_warns(self) -> None:
        with self.assertWarns(RuntimeWarning):
            t = Tensor[int, 1].from_numpy(np.array([0.5, 3.0]))
        self.assertEqual(list(t), [0, 3])

    def test_to_numpy_is_independent(self) -> None:
        t = Tensor[int, 2](2, 2)
        out = t.to_numpy()
        out[0, 0] = 3
        self.assertEqual(t[0, 0], 0)


class TestTensorValueSemantics(TestCase):
    def _sample(self) -> Tensor:
        t = Tensor[int, 2](2, 3)
        t.assign(range(6))
        return t

    def test_clone_does_not_share_storage(self) -> None:
        t = self._sample()
        c = t.clone()
        self.assertIs(type(c), type(t))
        self.assertEqual(c, t)
        c[0, 0] = 100
        self.assertEqual(t[0, 0], 0)

    def test_copy_and_deepcopy(self) -> None:
        t = self._sample()
        for c in (copy.copy(t), copy.deepcopy(t)):
            c[1, 1] = -1
            self.assertEqual(t[1, 1], 4)

    def test_deepcopy_object_elements(self) -> None:
        t = Tensor[object, 1](2)
        t.assign([[1], [2]])
        c = copy.deepcopy(t)
        c[0].append(9)
        self.assertEqual(t[0], [1])

    def test_equality_compares_shape_and_values(self) -> None:
        a = self._sample()
        b = self._sample()
        self.assertEqual(a, b)
        b[0, 1] = 42
        self.assertNotEqual(a, b)

        c = self._sample()
        c.reshape(3, 2)
        self.assertNotEqual(a, c)

    def test_equality_ignores_dtype(self) -> None:
        self.assertEqual(Tensor[int, 2](2, 2), Tensor[float, 2](2, 2))

    def test_equality_with_other_types(self) -> None:
        self.assertNotEqual(self._sample(), "tensor")

    def test_tensors_are_unhashable(self) -> None:
        with self.assertRaises(TypeError):
            hash(self._sample())


if __name__ == "__main__":
    unittest.main()
