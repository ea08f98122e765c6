"""
Concrete Tensor implementation (NumPy backend).

This module provides the concrete `Tensor` that satisfies the domain-level
`ITensor` protocol. A tensor class is specialized by element type and rank,
``Tensor[int, 2]``, and every instance of that class keeps exactly that many
axes for its whole lifetime.

Design notes
------------
- Storage is a flat, contiguous NumPy array in row-major order, owned
  exclusively by one tensor; every operation that returns a tensor returns
  one backed by a fresh buffer.
- Specialized classes are created on first use and cached, so
  ``Tensor[int, 2] is Tensor[int, 2]``.
- Rank-specific operations (transpose, matmul, render) dispatch on
  `rank_kind`, which is derived from the class-level rank, through the
  control-path manager in `_tensor_builder.py`.
- Behavior is split across mixins:
  shape/indexing, arithmetic, memory, linear algebra and rendering.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

import numpy as np

from ...domain._tensor import ITensor
from ...domain._rank import RankKind
from ._dtype_config import get_default_dtype, resolve_dtype
from ._shape_and_indexing import TensorShapeAndIndexingMixin, normalize_shape, numel
from .mixins.arithmetic import TensorMixinArithmetic
from .mixins.memory import TensorMixinMemory
from .mixins.linalg import TensorMixinLinalg
from .mixins.render import TensorMixinRender


class Tensor(
    TensorShapeAndIndexingMixin,
    TensorMixinArithmetic,
    TensorMixinMemory,
    TensorMixinLinalg,
    TensorMixinRender,
    ITensor,
):
    """
    Dense, fixed-rank tensor backed by a flat NumPy buffer.

    Specialize the class with an element type and a rank, then construct with
    one size per axis or with a shape sequence::

        Matrix = Tensor[int, 2]
        m = Matrix(2, 3)          # or Matrix((2, 3))
        m.fill(7)
        m[1, 2]                   # 7

    ``Tensor[2]`` uses the configured default dtype. Unspecialized
    ``Tensor(2, 3)`` infers the rank from the number of sizes.

    Parameters
    ----------
    *dims : int | Sequence[int]
        Either `rank` positive sizes or one shape sequence. With no arguments
        a specialized class builds an all-ones shape holding one element.

    Raises
    ------
    RankMismatchError
        If the number of sizes differs from the class rank, or no size is
        given to an unspecialized `Tensor`.
    InvalidShapeError
        If a size is smaller than 1.
    TypeError
        If a size is not an integer.

    Notes
    -----
    - Elements are zero-initialized.
    - Copies (`clone`, `copy.copy`, `copy.deepcopy`) never share storage.
    """

    RANK: Optional[int] = None
    DTYPE: Optional[np.dtype] = None

    _specializations: dict[tuple[np.dtype, int], type] = {}

    # Make NumPy defer to our reflected operators (``np.float64(2) - t``).
    __array_ufunc__ = None

    # ----------------------------
    # Specialization
    # ----------------------------
    def __class_getitem__(cls, params: Any) -> type:
        """
        Return the tensor class for ``Tensor[dtype, rank]`` or ``Tensor[rank]``.

        Raises
        ------
        TypeError
            If the parameters are malformed or the class is already specialized.
        ValueError
            If the rank is smaller than 1 or the dtype is not understood.
        """
        if cls.RANK is not None:
            raise TypeError(f"{cls.__name__} is already specialized")
        if isinstance(params, tuple):
            if len(params) != 2:
                raise TypeError("Tensor[...] expects (dtype, rank) or rank")
            dtype, rank = params
        else:
            dtype, rank = get_default_dtype(), params
        if isinstance(rank, bool) or not isinstance(rank, int):
            raise TypeError(f"Tensor rank must be an int, got {rank!r}")
        return cls._specialized(dtype, rank)

    @classmethod
    def _specialized(cls, dtype: Any, rank: int) -> type:
        if rank < 1:
            raise ValueError(f"Tensor rank must be >= 1, got {rank}")
        base = Tensor
        key = (resolve_dtype(dtype), int(rank))
        specialized = base._specializations.get(key)
        if specialized is None:
            specialized = type(base)(
                f"Tensor[{key[0]}, {key[1]}]",
                (base,),
                {
                    "RANK": key[1],
                    "DTYPE": key[0],
                    "__module__": base.__module__,
                    "__qualname__": f"Tensor[{key[0]}, {key[1]}]",
                },
            )
            base._specializations[key] = specialized
        return specialized

    @classmethod
    def _from_storage(cls, storage: np.ndarray, shape: tuple[int, ...]) -> "Tensor":
        """
        Wrap an existing flat buffer without copying it.

        The result class is specialized by the buffer's dtype and
        ``len(shape)``, so arithmetic results follow NumPy type promotion.
        Callers must hand over a buffer nobody else references.
        """
        storage = np.asarray(storage).reshape(-1)
        specialized = cls._specialized(storage.dtype, len(shape))
        obj = object.__new__(specialized)  # bypass __init__
        obj._shape = tuple(int(d) for d in shape)
        obj._data = storage
        return obj

    # ----------------------------
    # Construction
    # ----------------------------
    def __new__(cls, *dims: Any) -> "Tensor":
        if cls.RANK is None:
            shape = normalize_shape(dims, None, op="Tensor")
            cls = cls._specialized(get_default_dtype(), len(shape))
        return object.__new__(cls)

    def __init__(self, *dims: Any) -> None:
        if not dims:
            shape = (1,) * self.rank
        else:
            shape = normalize_shape(dims, self.rank, op="Tensor")
        self._shape: tuple[int, ...] = shape
        self._data: np.ndarray = np.zeros(numel(shape), dtype=self.dtype)

    # ----------------------------
    # Metadata
    # ----------------------------
    @property
    def rank(self) -> int:
        """
        Return the number of axes, fixed by the class.
        """
        return type(self).RANK

    @property
    def rank_kind(self) -> RankKind:
        """
        Return the rank category used for rank-specific dispatch.
        """
        return RankKind.of(type(self).RANK)

    @property
    def dtype(self) -> np.dtype:
        """
        Return the element dtype of this tensor.

        Returns
        -------
        np.dtype
            NumPy dtype of the storage (``object`` for arbitrary Python
            element types).
        """
        return type(self).DTYPE

    @property
    def data(self) -> np.ndarray:
        """
        Return a read-only view of the flat row-major storage.

        Use indexing, `fill` or `assign` to modify elements.
        """
        view = self._data.view()
        view.flags.writeable = False
        return view

    # ----------------------------
    # Value semantics
    # ----------------------------
    def __iter__(self) -> Iterator[Any]:
        """
        Iterate over all elements in row-major storage order.
        """
        return iter(self._data)

    def __eq__(self, other: Any) -> bool:
        """
        Return True if `other` is a tensor of the same rank and shape holding
        equal elements. Dtypes may differ.
        """
        if not isinstance(other, Tensor):
            return NotImplemented
        return (
            self.rank == other.rank
            and self._shape == other._shape
            and bool(np.array_equal(self._data, other._data))
        )

    __hash__ = None

    def __repr__(self) -> str:
        """
        Return a developer-facing description of the tensor.

        Returns
        -------
        str
            A string describing the tensor's shape, rank and dtype.
        """
        return f"Tensor(shape={self._shape}, rank={self.rank}, dtype={self.dtype})"

