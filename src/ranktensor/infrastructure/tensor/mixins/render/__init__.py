"""
Text rendering registrations for ranktensor.

Imports `_tensor_render` for its side effect of registering the rank-specific
`render` control paths on `TensorMixinRender`.
"""

from ._tensor_render import *
from ._base import TensorMixinRender

__all__ = [
    TensorMixinRender.__name__,
]
