"""
ranktensor: dense, fixed-rank tensors with broadcasting arithmetic, reshape,
transpose and batched matrix products, backed by NumPy.

Example
-------
>>> from ranktensor import Tensor
>>> m = Tensor[int, 2](2, 3)
>>> m.fill(7)
>>> int(m[1, 2])
7
"""

from .domain._errors import (
    TensorError,
    RankMismatchError,
    ShapeMismatchError,
    SizeMismatchError,
    ShapeIncompatibleError,
    IndexOutOfRangeError,
    InvalidShapeError,
)
from .domain._rank import RankKind
from .domain._tensor import ITensor
from .infrastructure.tensor import (
    Tensor,
    numel,
    row_major_strides,
    ravel_index,
    unravel_index,
    broadcast_shapes,
    matrix_product,
    get_default_dtype,
    set_default_dtype,
    default_dtype,
)

__version__ = "1.0.0"

__all__ = [
    "Tensor",
    "ITensor",
    "RankKind",
    "matrix_product",
    "broadcast_shapes",
    "numel",
    "row_major_strides",
    "ravel_index",
    "unravel_index",
    "get_default_dtype",
    "set_default_dtype",
    "default_dtype",
    "TensorError",
    "RankMismatchError",
    "ShapeMismatchError",
    "SizeMismatchError",
    "ShapeIncompatibleError",
    "IndexOutOfRangeError",
    "InvalidShapeError",
]
