"""
Linear-algebra mixin for Tensor.

Declares the batched matrix product entry points. The contraction itself is
registered per rank kind in `_tensor_matmul.py`.
"""

from __future__ import annotations

from abc import ABC
from typing import Any

from .....domain._tensor import ITensor


class TensorMixinLinalg(ABC):
    """
    Mixin exposing `matmul` and the ``@`` operator.
    """

    def matmul(self, other: "ITensor") -> "ITensor":
        """
        Batched matrix product.

        ``out[..., i, j] = sum_k self[..., i, k] * other[..., k, j]``

        Parameters
        ----------
        other : ITensor
            Right operand of the same rank. Its second-to-last axis must equal
            the last axis of `self`, and all leading (batch) axes must match
            exactly.

        Returns
        -------
        ITensor
            New tensor of shape ``batch + (self.shape[-2], other.shape[-1])``.

        Raises
        ------
        RankMismatchError
            If the ranks differ or the rank is 1.
        ShapeIncompatibleError
            With ``reason="inner"`` when the inner dimensions differ, or
            ``reason="batch"`` when the batch axes differ.
        """
        ...

    def __matmul__(self, other: Any) -> "ITensor":
        if not isinstance(other, ITensor):
            return NotImplemented
        return self.matmul(other)


def matrix_product(lhs: ITensor, rhs: ITensor) -> "ITensor":
    """
    Return the batched matrix product of two tensors.

    Equivalent to ``lhs.matmul(rhs)``; see `TensorMixinLinalg.matmul`.
    """
    return lhs.matmul(rhs)
