"""
Batched matrix product implementations for ranktensor tensors.

This module registers `Tensor.matmul()` for rank-2 and rank >= 3 tensors via
`tensor_control_path_manager`. Both ranks share one contraction routine; the
rank-2 case simply has no batch axes. Rank-1 tensors hit the
`require_matrix_axes` trap.

Algorithm
---------
The accumulator is created with `np.zeros` of the result dtype (the additive
identity, also for ``object`` dtype) and the inner dimension is contracted one
slice at a time:

    acc += lhs[..., :, k, None] * rhs[..., None, k, :]    for k in range(K)

This only relies on ``+`` and ``*`` of the element type, so tensors of Python
objects such as `fractions.Fraction` are supported.
"""

import numpy as np

from ..._tensor_builder import tensor_control_path_manager, require_matrix_axes

from .....domain._rank import RankKind
from .....domain._tensor import ITensor
from .....domain._errors import RankMismatchError, ShapeIncompatibleError

from ._base import TensorMixinLinalg as TML


def _check_operands(lhs: ITensor, rhs: ITensor) -> tuple[int, ...]:
    if not isinstance(rhs, ITensor):
        raise TypeError(f"matmul: unsupported operand type {type(rhs)!r}")
    if lhs.rank != rhs.rank:
        raise RankMismatchError(lhs.rank, rhs.rank, op="matmul")

    a, b = lhs.shape, rhs.shape
    if a[-1] != b[-2]:
        raise ShapeIncompatibleError(a, b, reason="inner")
    if a[:-2] != b[:-2]:
        raise ShapeIncompatibleError(a, b, reason="batch")
    return a[:-2] + (a[-2], b[-1])


@tensor_control_path_manager(TML, TML.matmul, RankKind.MATRIX, require_matrix_axes)
@tensor_control_path_manager(TML, TML.matmul, RankKind.BATCHED, require_matrix_axes)
def tensor_matmul(self: ITensor, other: ITensor) -> "ITensor":
    """
    Contract the last axis of `self` with the second-to-last axis of `other`.

    Returns
    -------
    ITensor
        New tensor of shape ``batch + (M, N)``.
    """
    out_shape = _check_operands(self, other)

    lhs = self._data.reshape(self.shape)
    rhs = other._data.reshape(other.shape)
    dtype = np.result_type(lhs.dtype, rhs.dtype)

    acc = np.zeros(out_shape, dtype=dtype)
    for k in range(self.shape[-1]):
        acc = acc + lhs[..., :, k, None] * rhs[..., None, k, :]

    return type(self)._from_storage(acc.reshape(-1), out_shape)
