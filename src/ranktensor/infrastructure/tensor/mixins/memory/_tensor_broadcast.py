"""
Broadcasting resolver for same-rank tensors.

Two shapes of equal rank are broadcast-compatible when, on every axis, the
sizes are equal or one of them is 1. The broadcast shape takes the larger size
per axis. An operand whose size on an axis is 1 is virtually replicated along
that axis: its coordinate there is forced to 0 for every output coordinate.

The replication is expressed through strides. An axis of size 1 gets stride 0,
so the flat source offset of an output coordinate is
``sum(coord[i] * effective_stride[i])``. `broadcast_offsets` computes these
offsets for every output position at once, which lets elementwise kernels
gather both operands with a single NumPy fancy-index each.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .....domain._errors import RankMismatchError, ShapeIncompatibleError
from ..._shape_and_indexing import row_major_strides


def broadcast_shapes(lhs: Sequence[int], rhs: Sequence[int]) -> tuple[int, ...]:
    """
    Resolve the broadcast shape of two same-rank shapes.

    Parameters
    ----------
    lhs : Sequence[int]
        Left operand shape.
    rhs : Sequence[int]
        Right operand shape.

    Returns
    -------
    tuple[int, ...]
        Per-axis maximum of the two shapes.

    Raises
    ------
    RankMismatchError
        If the shapes have different lengths.
    ShapeIncompatibleError
        If some axis differs and neither size is 1.
    """
    if len(lhs) != len(rhs):
        raise RankMismatchError(len(lhs), len(rhs), op="broadcast")
    out = []
    for a, b in zip(lhs, rhs):
        if a != b and a != 1 and b != 1:
            raise ShapeIncompatibleError(tuple(lhs), tuple(rhs), reason="broadcast")
        out.append(max(a, b))
    return tuple(out)


def check_broadcastable_to(src: Sequence[int], target: Sequence[int]) -> None:
    """
    Validate one-directional broadcasting of `src` onto `target`.

    Raises
    ------
    RankMismatchError
        If the shapes have different lengths.
    ShapeIncompatibleError
        If some axis of `src` is neither 1 nor equal to the target size.
    """
    if len(src) != len(target):
        raise RankMismatchError(len(src), len(target), op="broadcast_to")
    for s, t in zip(src, target):
        if s != t and s != 1:
            raise ShapeIncompatibleError(tuple(src), tuple(target), reason="broadcast")


def broadcast_offsets(src: Sequence[int], out: Sequence[int]) -> np.ndarray:
    """
    Compute, for every output position in row-major order, the flat offset of
    the source element that feeds it.

    Parameters
    ----------
    src : Sequence[int]
        Source shape; each axis is either 1 or equal to the output size.
    out : Sequence[int]
        Broadcast output shape.

    Returns
    -------
    np.ndarray
        1-D integer array of length ``numel(out)``.
    """
    effective = np.array(
        [0 if d == 1 else s for d, s in zip(src, row_major_strides(src))],
        dtype=np.intp,
    )
    coords = np.indices(tuple(out), dtype=np.intp).reshape(len(out), -1)
    return effective @ coords
