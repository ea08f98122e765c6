"""
Rank classification used for rank-specific dispatch.

Structural operations behave differently depending on how many axes a tensor
has: a vector has no matrix axes to transpose or contract, a matrix has exactly
two, and a batched tensor carries leading batch axes in front of its matrix
axes. `RankKind` names these three cases so that implementations can be
registered per kind instead of branching on the rank inside every method.
"""

from enum import Enum


class RankKind(Enum):
    """
    Enumeration of rank categories.

    Attributes
    ----------
    VECTOR : RankKind
        Rank 1.
    MATRIX : RankKind
        Rank 2.
    BATCHED : RankKind
        Rank 3 or higher (one or more batch axes before the matrix axes).
    """

    VECTOR = "vector"
    MATRIX = "matrix"
    BATCHED = "batched"

    @classmethod
    def of(cls, rank: int) -> "RankKind":
        """
        Classify a rank.

        Parameters
        ----------
        rank : int
            Number of axes. Must be >= 1.

        Returns
        -------
        RankKind
            The category for `rank`.

        Raises
        ------
        ValueError
            If `rank` is smaller than 1.
        """
        if rank < 1:
            raise ValueError(f"rank must be >= 1, got {rank}")
        if rank == 1:
            return cls.VECTOR
        if rank == 2:
            return cls.MATRIX
        return cls.BATCHED

    def __str__(self) -> str:
        return self.value
