"""
Linear-algebra operation registrations for ranktensor.

Imports `_tensor_matmul` for its side effect of registering the rank-specific
`matmul` control paths on `TensorMixinLinalg`.
"""

from ._tensor_matmul import *
from ._base import TensorMixinLinalg, matrix_product

__all__ = [
    TensorMixinLinalg.__name__,
    matrix_product.__name__,
]
