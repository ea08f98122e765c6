"""
Tensor shape, indexing, and reshape mixin (NumPy CPU backend).

This module defines `TensorShapeAndIndexingMixin`, a cohesive mixin that
implements shape queries, element access and in-place reshape for the
NumPy-backed concrete Tensor implementation, together with the row-major
index arithmetic those methods rely on.

Design notes
------------
- Storage is a flat, contiguous NumPy array. A coordinate is mapped to a flat
  offset with row-major strides: ``stride[i] = product(shape[i+1:])``.
- Every coordinate is bounds-checked before it contributes to the offset, so
  an out-of-range access never reads or writes storage.
- Reshape only swaps the shape tuple. The storage and its linear order are
  left untouched, and the element count must not change.
"""

from __future__ import annotations

import operator
from typing import Any, Optional, Sequence

import numpy as np

from ...domain._tensor import ITensor
from ...domain._errors import (
    IndexOutOfRangeError,
    InvalidShapeError,
    RankMismatchError,
    ShapeMismatchError,
)


# ----------------------------
# Index engine
# ----------------------------
def numel(shape: Sequence[int]) -> int:
    """
    Return the number of elements of a shape (product of its dimensions).
    """
    n = 1
    for d in shape:
        n *= int(d)
    return n


def row_major_strides(shape: Sequence[int]) -> tuple[int, ...]:
    """
    Compute row-major (C-order) element strides.

    Parameters
    ----------
    shape : Sequence[int]
        Tensor shape.

    Returns
    -------
    tuple[int, ...]
        ``stride[i] = product(shape[i+1:])``; the last axis has stride 1.
    """
    strides = [1] * len(shape)
    acc = 1
    for axis in range(len(shape) - 1, -1, -1):
        strides[axis] = acc
        acc *= int(shape[axis])
    return tuple(strides)


def ravel_index(index: Sequence[int], shape: Sequence[int]) -> int:
    """
    Convert a coordinate into a flat row-major storage offset.

    Parameters
    ----------
    index : Sequence[int]
        One coordinate per axis.
    shape : Sequence[int]
        Tensor shape.

    Returns
    -------
    int
        Flat offset ``sum(index[i] * stride[i])``.

    Raises
    ------
    RankMismatchError
        If `index` and `shape` have different lengths.
    IndexOutOfRangeError
        If a coordinate is negative or not smaller than its axis size.
    TypeError
        If a coordinate is not an integer.
    """
    index = tuple(operator.index(i) for i in index)
    if len(index) != len(shape):
        raise RankMismatchError(len(shape), len(index), op="index")
    offset = 0
    for axis, (i, d, s) in enumerate(zip(index, shape, row_major_strides(shape))):
        if i < 0 or i >= d:
            raise IndexOutOfRangeError(tuple(index), tuple(shape), axis)
        offset += i * s
    return offset


def unravel_index(offset: int, shape: Sequence[int]) -> tuple[int, ...]:
    """
    Convert a flat row-major offset back into a coordinate.

    Raises
    ------
    IndexOutOfRangeError
        If `offset` is outside ``[0, numel(shape))``.
    """
    total = numel(shape)
    if offset < 0 or offset >= total:
        raise IndexOutOfRangeError((offset,), (total,), 0)
    coords = []
    for s in row_major_strides(shape):
        q, offset = divmod(offset, s)
        coords.append(q)
    return tuple(coords)


def _is_sequence(x: Any) -> bool:
    return isinstance(x, (Sequence, np.ndarray)) and not isinstance(x, (str, bytes))


def normalize_shape(
    dims: tuple[Any, ...], rank: Optional[int], *, op: str
) -> tuple[int, ...]:
    """
    Turn constructor/reshape arguments into a validated shape tuple.

    Both calling conventions are accepted: separate dimension values
    (``f(2, 3)``) and a single shape sequence (``f((2, 3))``).

    Parameters
    ----------
    dims : tuple[Any, ...]
        The positional arguments as received.
    rank : Optional[int]
        Required number of dimensions, or None to accept any count >= 1.
    op : str
        Operation name for error messages.

    Raises
    ------
    RankMismatchError
        If the number of dimensions differs from `rank` (or is zero).
    TypeError
        If a dimension is not an integer.
    InvalidShapeError
        If a dimension is smaller than 1.
    """
    if len(dims) == 1 and _is_sequence(dims[0]):
        dims = tuple(dims[0])
    if rank is not None and len(dims) != rank:
        raise RankMismatchError(rank, len(dims), op=op)
    if len(dims) == 0:
        raise RankMismatchError(">= 1", 0, op=op)
    shape = tuple(operator.index(d) for d in dims)
    if any(d < 1 for d in shape):
        raise InvalidShapeError(shape)
    return shape


class TensorShapeAndIndexingMixin(ITensor):
    """
    Shape and indexing operations for the concrete Tensor implementation.

    This mixin groups together Tensor methods that:
    - report the logical structure of a tensor (shape, numel),
    - read and write single elements by coordinate, and
    - reinterpret storage under a new shape (reshape).

    Notes
    -----
    - Methods assume the host class provides `.rank`, `._shape` and a flat
      NumPy `._data` buffer.
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the tensor shape.

        Returns
        -------
        tuple[int, ...]
            The tensor's shape.
        """
        return self._shape

    def numel(self) -> int:
        """
        Return the total number of elements in the tensor.

        Returns
        -------
        int
            Product of all dimensions in the tensor shape.
        """
        return numel(self._shape)

    def strides(self) -> tuple[int, ...]:
        """
        Return the row-major element strides of the current shape.
        """
        return row_major_strides(self._shape)

    def _normalize_index(self, key: Any) -> tuple[int, ...]:
        if isinstance(key, tuple):
            coords = key
        elif _is_sequence(key):
            coords = tuple(key)
        else:
            coords = (key,)
        if len(coords) != self.rank:
            raise RankMismatchError(self.rank, len(coords), op="index")
        return tuple(operator.index(c) for c in coords)

    def _offset(self, key: Any) -> int:
        return ravel_index(self._normalize_index(key), self._shape)

    def __getitem__(self, key: Any) -> Any:
        """
        Read one element.

        Parameters
        ----------
        key : int | tuple[int, ...] | Sequence[int]
            Exactly `rank` coordinates, either as ``t[i, j]`` or as a
            shape-shaped sequence ``t[[i, j]]``. Rank-1 tensors also accept a
            plain int.

        Returns
        -------
        Any
            The stored element.

        Raises
        ------
        RankMismatchError
            If the number of coordinates differs from the rank.
        IndexOutOfRangeError
            If any coordinate is outside its axis bound.
        TypeError
            If a coordinate is not an integer (slicing is not supported).
        """
        return self._data[self._offset(key)]

    def __setitem__(self, key: Any, value: Any) -> None:
        """
        Write one element. Coordinates follow the `__getitem__` rules.
        """
        self._data[self._offset(key)] = value

    def reshape(self, *dims: Any) -> None:
        """
        Reinterpret the tensor under a new shape, in place.

        Parameters
        ----------
        *dims : int | Sequence[int]
            Either `rank` separate sizes or a single shape sequence.

        Raises
        ------
        RankMismatchError
            If the number of sizes differs from the rank.
        ShapeMismatchError
            If the new shape holds a different number of elements. The tensor
            is left unchanged.

        Notes
        -----
        Storage is not touched: element ``k`` in row-major order stays element
        ``k`` under the new shape.
        """
        new_shape = normalize_shape(dims, self.rank, op="reshape")
        if numel(new_shape) != self._data.size:
            raise ShapeMismatchError(self._shape, new_shape)
        self._shape = new_shape
