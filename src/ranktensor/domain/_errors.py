"""
Contract-violation exceptions for ranktensor.

This module defines the exceptions raised when a tensor operation is invoked
with arguments that violate the tensor's structural contract: the wrong number
of dimensions or coordinates, a reshape that changes the element count, a bulk
assignment of the wrong length, operands that cannot be broadcast or
contracted, or a coordinate outside its axis bound.

Every error derives from `TensorError` and from the closest builtin exception
type (`ValueError` or `IndexError`), so callers can guard either the specific
condition or the generic Python category.
"""

from __future__ import annotations

from typing import Any


class TensorError(Exception):
    """
    Base class for all errors raised by ranktensor operations.

    Notes
    -----
    Errors are always raised before any mutation takes place, so an operation
    that fails leaves every operand unchanged.
    """


class RankMismatchError(TensorError, ValueError):
    """
    Raised when the number of supplied dimensions, coordinates or axes does
    not match the tensor rank, or when an operation requires a rank the
    tensor does not have.

    Attributes
    ----------
    expected : Any
        The rank (or rank constraint, e.g. ``">= 2"``) that was required.
    got : Any
        The rank or count that was actually supplied.
    """

    def __init__(self, expected: Any, got: Any, *, op: str = "") -> None:
        """
        Initialize the RankMismatchError.

        Parameters
        ----------
        expected : Any
            Required rank or constraint description.
        got : Any
            Supplied rank or count.
        op : str, optional
            Name of the operation that failed, used as a message prefix.
        """
        prefix = f"{op}: " if op else ""
        super().__init__(f"{prefix}rank mismatch: expected {expected}, got {got}.")
        self.expected = expected
        self.got = got


class ShapeMismatchError(TensorError, ValueError):
    """
    Raised when a shape-preserving operation (reshape, copy) receives a shape
    whose total element count or layout differs from the current one.

    Attributes
    ----------
    expected : tuple[int, ...]
        The current shape of the tensor.
    got : tuple[int, ...]
        The requested shape.
    """

    def __init__(self, expected: tuple[int, ...], got: tuple[int, ...]) -> None:
        super().__init__(
            f"Shape mismatch: cannot map shape {tuple(got)} onto {tuple(expected)}."
        )
        self.expected = tuple(expected)
        self.got = tuple(got)


class SizeMismatchError(TensorError, ValueError):
    """
    Raised when a bulk assignment supplies a number of values different from
    the tensor's element count.
    """

    def __init__(self, expected: int, got: int) -> None:
        super().__init__(f"Size mismatch: tensor holds {expected} elements, got {got}.")
        self.expected = expected
        self.got = got


class ShapeIncompatibleError(TensorError, ValueError):
    """
    Raised when two operand shapes cannot be combined.

    Attributes
    ----------
    lhs : tuple[int, ...]
        Shape of the left operand.
    rhs : tuple[int, ...]
        Shape of the right operand (or the broadcast target).
    reason : str
        Which rule failed:

        - ``"broadcast"``: an axis differs and neither size is 1,
        - ``"inner"``: matrix-product inner dimensions differ,
        - ``"batch"``: matrix-product batch axes differ.
    """

    def __init__(
        self, lhs: tuple[int, ...], rhs: tuple[int, ...], *, reason: str
    ) -> None:
        detail = {
            "broadcast": "shapes are not broadcast-compatible",
            "inner": "inner dimensions of the matrix product differ",
            "batch": "batch axes of the matrix product differ",
        }.get(reason, reason)
        super().__init__(
            f"Incompatible shapes {tuple(lhs)} and {tuple(rhs)}: {detail}."
        )
        self.lhs = tuple(lhs)
        self.rhs = tuple(rhs)
        self.reason = reason


class IndexOutOfRangeError(TensorError, IndexError):
    """
    Raised when an element coordinate falls outside its axis bound.

    Attributes
    ----------
    index : tuple[int, ...]
        The full coordinate that was requested.
    shape : tuple[int, ...]
        The tensor shape at the time of access.
    axis : int
        The first axis whose bound was violated.
    """

    def __init__(
        self, index: tuple[int, ...], shape: tuple[int, ...], axis: int
    ) -> None:
        super().__init__(
            f"Index {tuple(index)} out of range for shape {tuple(shape)} "
            f"(axis {axis} has size {shape[axis]})."
        )
        self.index = tuple(index)
        self.shape = tuple(shape)
        self.axis = axis


class InvalidShapeError(TensorError, ValueError):
    """
    Raised when a shape contains a dimension smaller than 1.
    """

    def __init__(self, shape: tuple[int, ...]) -> None:
        super().__init__(f"Invalid shape {tuple(shape)}: every dimension must be >= 1.")
        self.shape = tuple(shape)
