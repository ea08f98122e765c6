"""
Rank-specific text rendering for ranktensor tensors.

Registers `Tensor.render()` for each rank kind:

- `tensor_render_vector`: ``[e0 e1 ...]``
- `tensor_render_nested`: brace blocks for rank 2 and above, e.g. a ``(2, 3)``
  tensor renders as::

    {
      1 2 3
      4 5 6
    }

The nested form is produced by `_render_block`, which recurses once per axis
and stops at rank 1, where it emits one contiguous run of the flat storage.
"""

from typing import Sequence

import numpy as np

from ..._tensor_builder import tensor_control_path_manager
from ..._shape_and_indexing import numel

from .....domain._rank import RankKind
from .....domain._tensor import ITensor

from ._base import TensorMixinRender as TMR

INDENT = "  "


def _format_run(data: np.ndarray, start: int, length: int) -> str:
    return " ".join(str(v) for v in data[start : start + length])


def _render_block(
    data: np.ndarray, shape: Sequence[int], offset: int, depth: int
) -> list[str]:
    pad = INDENT * depth
    if len(shape) == 1:
        return [pad + _format_run(data, offset, shape[0])]

    block = numel(shape[1:])
    lines = [pad + "{"]
    for i in range(shape[0]):
        lines.extend(_render_block(data, shape[1:], offset + i * block, depth + 1))
    lines.append(pad + "}")
    return lines


@tensor_control_path_manager(TMR, TMR.render, RankKind.VECTOR)
def tensor_render_vector(self: ITensor) -> str:
    """
    Render a rank-1 tensor as a flat bracketed list.
    """
    return "[" + _format_run(self._data, 0, self.shape[0]) + "]"


@tensor_control_path_manager(TMR, TMR.render, RankKind.MATRIX)
@tensor_control_path_manager(TMR, TMR.render, RankKind.BATCHED)
def tensor_render_nested(self: ITensor) -> str:
    """
    Render a rank >= 2 tensor as nested brace blocks.
    """
    return "\n".join(_render_block(self._data, self.shape, 0, 0))
