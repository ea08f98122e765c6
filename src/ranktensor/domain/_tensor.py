"""
Tensor interface definitions.

This module defines the domain-level interface for fixed-rank tensors using
structural typing. The interface captures the public contract that the
NumPy-backed `Tensor` implementation fulfils: shape and rank queries, element
access, bulk mutation, elementwise arithmetic and the structural operations
(reshape, transpose, matrix product, rendering).

Notes
-----
The protocol intentionally mirrors the concrete `Tensor` surface so that
helper code (e.g. `matrix_product`) can be typed against the interface rather
than the implementation class.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Protocol, Sequence, Union, runtime_checkable

from ._rank import RankKind

Number = Union[int, float, complex]


@runtime_checkable
class ITensor(Protocol):
    """
    Fixed-rank tensor interface.

    An `ITensor` is a dense, row-major, exclusively owned array whose number of
    axes (its rank) is fixed when its class is specialized.
    """

    # ---------------------------------------------------------------------
    # Structure
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the current shape.

        Returns
        -------
        tuple[int, ...]
            One positive size per axis.
        """
        ...

    @property
    def rank(self) -> int:
        """
        Return the number of axes.

        Returns
        -------
        int
            The class-level rank, always >= 1.
        """
        ...

    @property
    def rank_kind(self) -> RankKind:
        """
        Return the rank category used for rank-specific dispatch.
        """
        ...

    def numel(self) -> int:
        """
        Return the total number of stored elements.
        """
        ...

    # ---------------------------------------------------------------------
    # Element access and mutation
    # ---------------------------------------------------------------------
    def __getitem__(self, index: Any) -> Any: ...

    def __setitem__(self, index: Any, value: Any) -> None: ...

    def __iter__(self) -> Iterator[Any]: ...

    def fill(self, value: Any) -> None:
        """
        Overwrite every element with `value`.
        """
        ...

    def assign(self, values: Iterable[Any]) -> None:
        """
        Replace all elements positionally from a flat sequence.
        """
        ...

    def reshape(self, *dims: Any) -> None:
        """
        Reinterpret the storage under a new shape with the same element count.
        """
        ...

    # ---------------------------------------------------------------------
    # Elementwise arithmetic
    # ---------------------------------------------------------------------
    def add(self, other: Union["ITensor", Number]) -> "ITensor": ...

    def subtract(self, other: Union["ITensor", Number]) -> "ITensor": ...

    def multiply(self, other: Union["ITensor", Number]) -> "ITensor": ...

    def scale(self, factor: Number) -> "ITensor": ...

    def divide(self, divisor: Number) -> "ITensor": ...

    def rsubtract(self, minuend: Number) -> "ITensor": ...

    def broadcast_to(self, shape: Sequence[int]) -> "ITensor": ...

    # ---------------------------------------------------------------------
    # Structural ops
    # ---------------------------------------------------------------------
    def transpose(self) -> "ITensor":
        """
        Return a new tensor with the last two axes swapped.
        """
        ...

    def matmul(self, other: "ITensor") -> "ITensor":
        """
        Return the batched matrix product of `self` and `other`.
        """
        ...

    def clone(self) -> "ITensor":
        """
        Return a deep copy with independent storage.
        """
        ...

    def render(self) -> str:
        """
        Return the nested text rendering of the tensor.
        """
        ...
