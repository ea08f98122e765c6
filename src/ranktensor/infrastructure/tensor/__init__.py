from ._tensor import Tensor
from ._shape_and_indexing import numel, row_major_strides, ravel_index, unravel_index
from ._dtype_config import get_default_dtype, set_default_dtype, default_dtype
from .mixins.memory import broadcast_shapes
from .mixins.linalg import matrix_product

__all__ = [
    Tensor.__name__,
    numel.__name__,
    row_major_strides.__name__,
    ravel_index.__name__,
    unravel_index.__name__,
    broadcast_shapes.__name__,
    matrix_product.__name__,
    get_default_dtype.__name__,
    set_default_dtype.__name__,
    default_dtype.__name__,
]
