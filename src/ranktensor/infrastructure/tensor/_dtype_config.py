"""
Process-wide default element type.

Tensor classes specialized by rank only (``Tensor[2]``) and unspecialized
construction (``Tensor(2, 3)``) take their element dtype from this setting.
It starts as ``float32`` and can be changed permanently with
`set_default_dtype` or temporarily with the `default_dtype` context manager.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

import numpy as np

_DEFAULT_DTYPE: np.dtype = np.dtype(np.float32)


def resolve_dtype(dtype: Any) -> np.dtype:
    """
    Normalize an element type into a NumPy dtype.

    Parameters
    ----------
    dtype : Any
        A NumPy dtype, dtype string, NumPy scalar type, or Python type.
        Python types that NumPy has no native dtype for (e.g.
        `fractions.Fraction`) map to ``object``.

    Returns
    -------
    np.dtype
        The normalized dtype.

    Raises
    ------
    ValueError
        If `dtype` is a string NumPy does not recognize, or is None.
    """
    if dtype is None:
        raise ValueError("dtype must not be None")
    if isinstance(dtype, type) and not issubclass(dtype, np.generic):
        if dtype in (bool, int, float, complex):
            return np.dtype(dtype)
        return np.dtype(object)
    try:
        return np.dtype(dtype)
    except TypeError as e:
        raise ValueError(f"Unsupported dtype: {dtype!r}") from e


def get_default_dtype() -> np.dtype:
    """
    Return the current default element dtype.
    """
    return _DEFAULT_DTYPE


def set_default_dtype(dtype: Any) -> None:
    """
    Set the default element dtype.

    Raises
    ------
    ValueError
        If `dtype` cannot be interpreted as a dtype.
    """
    global _DEFAULT_DTYPE
    _DEFAULT_DTYPE = resolve_dtype(dtype)


@contextmanager
def default_dtype(dtype: Any) -> Iterator[np.dtype]:
    """
    Temporarily change the default element dtype.

    The previous value is restored on exit, including when the body raises.
    An invalid dtype raises `ValueError` before the default is touched.

    Yields
    ------
    np.dtype
        The dtype in effect inside the block.
    """
    resolved = resolve_dtype(dtype)
    previous = get_default_dtype()
    set_default_dtype(resolved)
    try:
        yield resolved
    finally:
        set_default_dtype(previous)
