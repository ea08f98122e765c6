"""
Arithmetic mixin and elementwise op engine for Tensor operations.

This package aggregates the arithmetic-related Tensor mixin and the engine it
delegates to:

- addition           (``add`` / ``__add__`` / ``__radd__``)
- subtraction        (``subtract`` / ``rsubtract`` / ``__sub__`` / ``__rsub__``)
- multiplication     (``multiply`` / ``scale`` / ``__mul__`` / ``__rmul__``)
- scalar division    (``divide`` / ``__truediv__``)

Public API
----------
Only the base mixin class is exported as part of the public interface:

- ``TensorMixinArithmetic``
"""

from ._base import TensorMixinArithmetic

__all__ = [
    TensorMixinArithmetic.__name__,
]
