"""
Tensor memory operation registrations for ranktensor.

This package aggregates the storage-level `Tensor` operations and registers
the rank-specific ones through the tensor control-path dispatch system. The
imported modules provide:

- `transpose`         : last-two-axes transpose (matrix / batched)
- `broadcast_shapes`  : same-rank broadcasting resolver used by arithmetic
  and `broadcast_to`

Public API
----------
Only `TensorMixinMemory` is re-exported as part of the public interface.
Control-path implementations are imported for their side effects
(registration) and are not intended to be accessed directly.
"""

from ._tensor_transpose import *
from ._tensor_broadcast import broadcast_shapes
from ._base import TensorMixinMemory

__all__ = [
    TensorMixinMemory.__name__,
    broadcast_shapes.__name__,
]
