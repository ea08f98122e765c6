"""
Last-two-axes transpose implementations for ranktensor tensors.

This module provides rank-specific implementations of `Tensor.transpose()` and
registers them via `tensor_control_path_manager`:

- `tensor_transpose_matrix`: plain 2D transpose, ``out[j, i] = x[i, j]``.
- `tensor_transpose_batched`: swaps the last two axes of every matrix in the
  batch, ``out[..., j, i] = x[..., i, j]``.

Rank-1 tensors have no matrix axes; they hit the `require_matrix_axes` trap
and fail with `RankMismatchError`.

Notes
-----
- Both implementations materialize a copy with `flatten()`, never a view;
  `reshape(-1)` returns a view when one of the last two axes has size 1.
"""

from ..._tensor_builder import tensor_control_path_manager, require_matrix_axes

from .....domain._rank import RankKind
from .....domain._tensor import ITensor

from ._base import TensorMixinMemory as TMM


@tensor_control_path_manager(TMM, TMM.transpose, RankKind.MATRIX, require_matrix_axes)
def tensor_transpose_matrix(self: ITensor) -> "ITensor":
    """
    Transpose a rank-2 tensor using NumPy and materialize the result.

    Returns
    -------
    ITensor
        A new tensor of shape ``(cols, rows)``.
    """
    r, c = self.shape
    storage = self._data.reshape(r, c).T.flatten()
    return type(self)._from_storage(storage, (c, r))


@tensor_control_path_manager(TMM, TMM.transpose, RankKind.BATCHED, require_matrix_axes)
def tensor_transpose_batched(self: ITensor) -> "ITensor":
    """
    Transpose the last two axes of a rank >= 3 tensor.

    Returns
    -------
    ITensor
        A new tensor whose shape is ``shape[:-2] + (shape[-1], shape[-2])``;
        batch axes are unchanged.
    """
    shape = self.shape
    out_shape = shape[:-2] + (shape[-1], shape[-2])
    storage = self._data.reshape(shape).swapaxes(-1, -2).flatten()
    return type(self)._from_storage(storage, out_shape)
