"""
Tensor control-path manager for rank-specific dispatch.

This module defines a shared control-path manager used to register and resolve
rank-specific implementations of Tensor methods.

The manager is created by specializing the generic `create_path_builder`
utility with the state attribute name ``"rank_kind"``. As a result, method
dispatch is performed based on the value of ``self.rank_kind`` on Tensor
objects, which is derived from the rank fixed on the tensor's class.

Typical usage
-------------
Rank-specific implementations register themselves using this manager:

    @tensor_control_path_manager(TensorMixin, TensorMixin.op, RankKind.MATRIX)
    def op_matrix(self, ...): ...

    @tensor_control_path_manager(TensorMixin, TensorMixin.op, RankKind.BATCHED)
    def op_batched(self, ...): ...

At runtime, calling ``Tensor.op(...)`` dispatches to the implementation whose
registered rank kind matches ``self.rank_kind``.

Notes
-----
- All control paths registered via this manager share a single internal
  registry, ensuring consistent dispatch behavior across the Tensor subsystem.
- Operations defined only for rank >= 2 pass `require_matrix_axes` as their
  trap handler so vector tensors fail with `RankMismatchError`.
"""

from typing import Any, Callable

from ...domain.utils._control_path import create_path_builder
from ...domain._errors import RankMismatchError
from ...domain._rank import RankKind

# Control-path manager that dispatches Tensor methods based on `self.rank_kind`
tensor_control_path_manager = create_path_builder("rank_kind")


def require_matrix_axes(method: Callable[..., Any], kind: RankKind) -> None:
    """
    Trap handler for operations that need the last two axes to be matrix axes.

    Raises
    ------
    RankMismatchError
        Always; the dispatcher only calls this when no control path exists for
        `kind`, i.e. for rank-1 tensors.
    """
    got = 1 if kind is RankKind.VECTOR else str(kind)
    raise RankMismatchError(">= 2", got, op=method.__name__)
