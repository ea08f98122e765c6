"""
Arithmetic mixin defining elementwise Tensor operations.

This module declares :class:`TensorMixinArithmetic`, the mixin that exposes the
named elementwise operations (`add`, `subtract`, `multiply`, `scale`,
`divide`, `rsubtract`) and maps Python's arithmetic operators onto them.

The numerical work is done by the op engine in `_elementwise.py`; this mixin
only validates operand kinds and fixes operand order.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Union

import numpy as np

from .....domain._tensor import ITensor
from ._elementwise import is_scalar, tensor_binary_op, tensor_scalar_op

Number = Union[int, float, complex]


class TensorMixinArithmetic(ABC):
    """
    Elementwise arithmetic for tensors.

    Notes
    -----
    - Tensor operands must have the same rank. Equal shapes combine
      position by position; otherwise the shapes must be broadcast-compatible
      (every axis equal or 1 on one side).
    - Scalar operands apply to every element.
    - Operators return `NotImplemented` for unsupported operand types so that
      Python raises the usual `TypeError`.
    """

    # ----------------------------
    # Named operations
    # ----------------------------
    def add(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise addition ``self + other``.

        Parameters
        ----------
        other : Union[ITensor, Number]
            Tensor of the same rank (broadcast-compatible shape) or scalar.

        Returns
        -------
        ITensor
            New tensor holding the sums.
        """
        if is_scalar(other):
            return tensor_scalar_op(self, other, np.add)
        return tensor_binary_op(self, self._as_tensor(other, "add"), np.add, op="add")

    def subtract(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise subtraction ``self - other``.
        """
        if is_scalar(other):
            return tensor_scalar_op(self, other, np.subtract)
        return tensor_binary_op(
            self, self._as_tensor(other, "subtract"), np.subtract, op="subtract"
        )

    def multiply(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise (Hadamard) product ``self * other``.

        A ``(2, 1)`` tensor times a ``(2, 3)`` tensor yields ``(2, 3)``: the
        single column of the left operand is replicated across the columns.
        """
        if is_scalar(other):
            return tensor_scalar_op(self, other, np.multiply)
        return tensor_binary_op(
            self, self._as_tensor(other, "multiply"), np.multiply, op="multiply"
        )

    def scale(self: ITensor, factor: Number) -> "ITensor":
        """
        Multiply every element by a scalar.

        Raises
        ------
        TypeError
            If `factor` is not a scalar.
        """
        if not is_scalar(factor):
            raise TypeError(f"scale expects a scalar, got {type(factor)!r}")
        return tensor_scalar_op(self, factor, np.multiply)

    def divide(self: ITensor, divisor: Number) -> "ITensor":
        """
        Divide every element by a scalar (true division).

        Notes
        -----
        Integer tensors produce floating-point results, as Python's ``/`` does.

        Raises
        ------
        TypeError
            If `divisor` is not a scalar.
        """
        if not is_scalar(divisor):
            raise TypeError(f"divide expects a scalar, got {type(divisor)!r}")
        return tensor_scalar_op(self, divisor, np.true_divide)

    def rsubtract(self: ITensor, minuend: Number) -> "ITensor":
        """
        Compute ``minuend - element`` for every element.

        This is the non-commutative right-hand form used by ``scalar - tensor``.
        """
        if not is_scalar(minuend):
            raise TypeError(f"rsubtract expects a scalar, got {type(minuend)!r}")
        return tensor_scalar_op(self, minuend, np.subtract, reflected=True)

    def _as_tensor(self: ITensor, other: Any, op: str) -> "ITensor":
        if isinstance(other, ITensor):
            return other
        raise TypeError(f"{op}: unsupported operand type {type(other)!r}")

    # ----------------------------
    # Operators
    # ----------------------------
    def __add__(self, other: Any) -> "ITensor":
        if not (is_scalar(other) or isinstance(other, ITensor)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> "ITensor":
        # Addition is commutative.
        if not is_scalar(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "ITensor":
        if not (is_scalar(other) or isinstance(other, ITensor)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> "ITensor":
        if not is_scalar(other):
            return NotImplemented
        return self.rsubtract(other)

    def __mul__(self, other: Any) -> "ITensor":
        if not (is_scalar(other) or isinstance(other, ITensor)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> "ITensor":
        # Multiplication is commutative.
        if not is_scalar(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Any) -> "ITensor":
        if not is_scalar(other):
            return NotImplemented
        return self.divide(other)
