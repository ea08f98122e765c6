"""
Text rendering mixin for Tensor.

`render()` produces a nested, human-readable form whose nesting depth equals
the tensor rank. The layout is chosen per rank kind in `_tensor_render.py`.
"""

from abc import ABC


class TensorMixinRender(ABC):
    """
    Mixin exposing `render()` and routing `str(tensor)` through it.
    """

    def render(self) -> str:
        """
        Render the tensor contents as text.

        Returns
        -------
        str
            - rank 1: a flat bracketed list, e.g. ``[1 2 3]``;
            - rank >= 2: nested ``{ ... }`` blocks, one per axis from the
              outermost inward, with the innermost contiguous row-major runs
              printed as space-separated values, indented two spaces per level.
        """
        ...

    def __str__(self) -> str:
        return self.render()
