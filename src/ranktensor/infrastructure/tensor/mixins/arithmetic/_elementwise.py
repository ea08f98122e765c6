"""
Elementwise op engine.

Two entry points back every arithmetic method of the Tensor:

- `tensor_binary_op` combines two same-rank tensors. Equal shapes take a
  flat fast path over storage; unequal shapes go through the broadcasting
  resolver, which gathers each operand with stride-0 replication along its
  size-1 axes.
- `tensor_scalar_op` applies a scalar to every element, on either side of the
  operator.

Result dtypes follow NumPy type promotion of the operands.
"""

from __future__ import annotations

import numbers
from typing import Any, Callable

import numpy as np

from .....domain._tensor import ITensor
from .....domain._errors import RankMismatchError
from ..memory._tensor_broadcast import broadcast_offsets, broadcast_shapes

BinaryKernel = Callable[[Any, Any], Any]


def is_scalar(x: Any) -> bool:
    """
    Return True if `x` should be treated as a scalar operand.

    Python numbers, `numbers.Number` implementations (e.g. `Fraction`,
    `Decimal`) and NumPy scalars qualify; tensors, arrays and sequences do not.
    """
    return isinstance(x, (numbers.Number, np.generic))


def tensor_binary_op(
    lhs: ITensor, rhs: ITensor, kernel: BinaryKernel, *, op: str
) -> "ITensor":
    """
    Apply `kernel` elementwise to two tensors of the same rank.

    Parameters
    ----------
    lhs : ITensor
        Left operand.
    rhs : ITensor
        Right operand.
    kernel : BinaryKernel
        Vectorized NumPy operation (e.g. `np.add`).
    op : str
        Operation name for error messages.

    Returns
    -------
    ITensor
        New tensor of the broadcast shape.

    Raises
    ------
    RankMismatchError
        If the operand ranks differ.
    ShapeIncompatibleError
        If the shapes are not broadcast-compatible.
    """
    if lhs.rank != rhs.rank:
        raise RankMismatchError(lhs.rank, rhs.rank, op=op)

    if lhs.shape == rhs.shape:
        return type(lhs)._from_storage(kernel(lhs._data, rhs._data), lhs.shape)

    out_shape = broadcast_shapes(lhs.shape, rhs.shape)
    a = lhs._data[broadcast_offsets(lhs.shape, out_shape)]
    b = rhs._data[broadcast_offsets(rhs.shape, out_shape)]
    return type(lhs)._from_storage(kernel(a, b), out_shape)


def tensor_scalar_op(
    tensor: ITensor, scalar: Any, kernel: BinaryKernel, *, reflected: bool = False
) -> "ITensor":
    """
    Apply a scalar to every element.

    Parameters
    ----------
    tensor : ITensor
        Tensor operand.
    scalar : Any
        Scalar operand.
    kernel : BinaryKernel
        Vectorized NumPy operation.
    reflected : bool, optional
        If True compute ``kernel(scalar, element)`` (scalar on the left, as in
        ``scalar - tensor``); otherwise ``kernel(element, scalar)``.

    Returns
    -------
    ITensor
        New tensor of the same shape.
    """
    if reflected:
        storage = kernel(scalar, tensor._data)
    else:
        storage = kernel(tensor._data, scalar)
    return type(tensor)._from_storage(np.asarray(storage), tensor.shape)
