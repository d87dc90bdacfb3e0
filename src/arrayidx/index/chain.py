import operator
from collections.abc import Iterable
from typing import SupportsIndex

from ..constants import MAX_FIXED_RANK, UNSUPPORTED_RANK_HELP
from ..diagnostics import ContractViolation, ErrorCode, UnsupportedRankError
from .base import ArrayIndex
from .fixed import Index0d, Index1d, Index2d, Index3d, Index4d, Index5d
from .nd import IndexNd

INDEX_TYPES_BY_RANK: tuple[type[ArrayIndex], ...] = (
    Index0d,
    Index1d,
    Index2d,
    Index3d,
    Index4d,
    Index5d,
)


def index_type_for_rank(rank: SupportsIndex) -> type[ArrayIndex]:
    """Return the fixed-rank index type for `rank`.

    Parameters
    ----------
    rank
        Number of axes, 0 through 5.

    Returns
    -------
    type[ArrayIndex]
        One of `Index0d` ... `Index5d`.
    """
    value = operator.index(rank)
    if value < 0:
        raise ContractViolation(
            code=ErrorCode.RANK_MISMATCH,
            message=f"rank must be non-negative, got {value}",
            related=("rank lookup",),
            data={"rank": value},
        )
    if value > MAX_FIXED_RANK:
        raise UnsupportedRankError(
            code=ErrorCode.RANK_UNSUPPORTED,
            message=f"no fixed-rank index type for rank {value}",
            help=UNSUPPORTED_RANK_HELP,
            related=("rank lookup",),
            data={"rank": value, "max_rank": MAX_FIXED_RANK},
        )
    return INDEX_TYPES_BY_RANK[value]


def index_from_nd(sizes: Iterable[SupportsIndex]) -> ArrayIndex | IndexNd:
    """Build the most specific index for `sizes`.

    Ranks up to 5 produce the matching fixed-rank type; longer sequences fall
    back to `IndexNd`.
    """
    components = tuple(sizes)
    if len(components) > MAX_FIXED_RANK:
        return IndexNd(components)
    return INDEX_TYPES_BY_RANK[len(components)].from_nd(components)


__all__ = ["INDEX_TYPES_BY_RANK", "index_from_nd", "index_type_for_rank"]
