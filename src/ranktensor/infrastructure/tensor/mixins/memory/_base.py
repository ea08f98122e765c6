"""
Tensor memory / construction mixin.

This module defines `TensorMixinMemory`, a focused mixin that provides
factory constructors (zeros/ones/full/from_numpy) and the storage-level
operations (fill, bulk assignment, copying, NumPy interop, broadcasting
materialization) for the concrete `Tensor`.

Design intent
-------------
- Keep object creation and storage movement centralized in the tensor
  implementation, while presenting a small, framework-style API
  (`Tensor.zeros`, `Tensor.full`, `t.clone()`, ...).
- Every tensor owns its storage exclusively: every method here that returns
  a tensor returns one backed by a fresh buffer.

Notes
-----
- The mixin assumes the concrete `Tensor` class provides `_from_storage(...)`,
  `.rank`, `.dtype`, `._shape` and a flat `._data` NumPy buffer.
- `transpose` is declared here and implemented per rank kind in
  `_tensor_transpose.py`.
"""

from __future__ import annotations

import warnings
from abc import ABC
from typing import Any, Iterable, Sequence, Type

import numpy as np

from .....domain._tensor import ITensor
from .....domain._errors import ShapeMismatchError, SizeMismatchError
from ._tensor_broadcast import broadcast_offsets, check_broadcastable_to


def _warn_if_narrowing(src: np.dtype, dst: np.dtype) -> None:
    """
    Emit a `RuntimeWarning` when values of dtype `src` must be narrowed to be
    stored as `dst` (e.g. floats into an integer tensor).
    """
    if dst == object or src == object:
        return
    if not np.can_cast(src, dst, casting="same_kind"):
        warnings.warn(
            f"Assigning {src} values into a {dst} tensor "
            "narrows them to the tensor dtype.",
            RuntimeWarning,
            stacklevel=3,
        )


class TensorMixinMemory(ABC):
    """
    Mixin that implements tensor construction and memory-management helpers.

    It provides:

    - Factory constructors: `zeros`, `ones`, `full`, `from_numpy`
    - Bulk mutation: `fill`, `assign`, `copy_from_numpy`
    - Copies and views-as-copies: `clone`, `to_numpy`, `broadcast_to`
    - The rank-dispatched `transpose` entry point
    """

    @classmethod
    def zeros(cls: Type[ITensor], shape: Sequence[int]) -> "ITensor":
        """
        Create a tensor of the given shape filled with zeros.

        On an unspecialized `Tensor`, the rank is taken from ``len(shape)`` and
        the dtype from the configured default.
        """
        return cls(shape)

    @classmethod
    def ones(cls: Type[ITensor], shape: Sequence[int]) -> "ITensor":
        """
        Create a tensor of the given shape filled with ones.
        """
        out = cls(shape)
        out._data.fill(1)
        return out

    @classmethod
    def full(cls: Type[ITensor], shape: Sequence[int], value: Any) -> "ITensor":
        """
        Create a tensor of the given shape with every element set to `value`.

        Parameters
        ----------
        shape : Sequence[int]
            Shape of the output tensor.
        value : Any
            Fill value, converted to the tensor dtype.

        Returns
        -------
        ITensor
            Newly created tensor.
        """
        out = cls(shape)
        out.fill(value)
        return out

    @classmethod
    def from_numpy(cls: Type[ITensor], arr: Any) -> "ITensor":
        """
        Create a tensor holding a copy of a NumPy array.

        The rank is ``arr.ndim`` and the dtype is ``arr.dtype``, except when
        called on a specialized class, whose rank and dtype take precedence.

        Raises
        ------
        RankMismatchError
            If a specialized class is used and ``arr.ndim`` differs from its rank.
        """
        arr = np.asarray(arr)
        if cls.RANK is None:
            target = cls._specialized(arr.dtype, arr.ndim)
        else:
            target = cls
        out = target(arr.shape)
        out.copy_from_numpy(arr)
        return out

    def fill(self, value: Any) -> None:
        """
        Fill the tensor in-place with a scalar value.

        Notes
        -----
        - This operation mutates the tensor in-place and returns `None`.
        - Dtype casting follows NumPy semantics of the underlying buffer.

        Warns
        -----
        RuntimeWarning
            If `value` has to be narrowed to fit the tensor dtype.
        """
        _warn_if_narrowing(np.asarray(value).dtype, self._data.dtype)
        self._data.fill(value)

    def assign(self, values: Iterable[Any]) -> None:
        """
        Replace every element positionally from a flat sequence.

        Parameters
        ----------
        values : Iterable[Any]
            Exactly `numel()` values, in row-major order.

        Raises
        ------
        SizeMismatchError
            If the number of values differs from `numel()`. The tensor is left
            unchanged.

        Warns
        -----
        RuntimeWarning
            If the values have to be narrowed to fit the tensor dtype
            (e.g. floats assigned into an integer tensor).
        """
        values = list(values)
        if len(values) != self._data.size:
            raise SizeMismatchError(self._data.size, len(values))
        if self._data.dtype != object:
            src = np.asarray(values)
            _warn_if_narrowing(src.dtype, self._data.dtype)
            self._data[:] = src.astype(self._data.dtype)
            return
        for i, v in enumerate(values):
            self._data[i] = v

    def copy_from_numpy(self, arr: Any) -> None:
        """
        Copy a NumPy array of identical shape into this tensor's storage.

        Raises
        ------
        ShapeMismatchError
            If ``arr.shape`` differs from `shape`.

        Warns
        -----
        RuntimeWarning
            If the array values have to be narrowed to fit the tensor dtype.
        """
        arr = np.asarray(arr)
        if tuple(arr.shape) != self._shape:
            raise ShapeMismatchError(self._shape, tuple(arr.shape))
        _warn_if_narrowing(arr.dtype, self._data.dtype)
        self._data[:] = arr.reshape(-1)

    def to_numpy(self) -> np.ndarray:
        """
        Return a shaped copy of the tensor contents.

        Returns
        -------
        np.ndarray
            Array of shape `shape` and dtype `dtype`, independent of the
            tensor's storage.
        """
        return self._data.reshape(self._shape).copy()

    def clone(self) -> "ITensor":
        """
        Deep copy of tensor storage.

        Returns
        -------
        ITensor
            A tensor of the same class and shape with its own buffer.
        """
        return type(self)._from_storage(self._data.copy(), self._shape)

    def __copy__(self) -> "ITensor":
        return self.clone()

    def __deepcopy__(self, memo: dict) -> "ITensor":
        if self._data.dtype == object:
            from copy import deepcopy

            return type(self)._from_storage(deepcopy(self._data, memo), self._shape)
        return self.clone()

    def broadcast_to(self, shape: Sequence[int]) -> "ITensor":
        """
        Broadcast this tensor to a target shape by explicit expansion.

        Parameters
        ----------
        shape : Sequence[int]
            Target shape of the same rank. Every axis of `self` must either
            equal the target size or be 1.

        Returns
        -------
        ITensor
            Broadcasted tensor (materialized copy).

        Raises
        ------
        RankMismatchError
            If `shape` has a different rank.
        ShapeIncompatibleError
            If an axis of `self` is neither 1 nor the target size.
        """
        target = tuple(int(d) for d in shape)
        check_broadcastable_to(self._shape, target)
        storage = self._data[broadcast_offsets(self._shape, target)]
        return type(self)._from_storage(storage, target)

    def transpose(self) -> "ITensor":
        """
        Swap the last two axes: ``out[..., j, i] = self[..., i, j]``.

        Returns
        -------
        ITensor
            A new tensor; `self` is not modified.

        Raises
        ------
        RankMismatchError
            If the tensor has rank 1.
        """
        ...

    @property
    def T(self) -> "ITensor":
        """
        Convenience property for `transpose()`.
        """
        return self.transpose()
