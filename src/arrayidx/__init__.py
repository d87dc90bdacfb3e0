import logging

from .axis import Ax, AxisLike
from .constants import FIXED_RANKS, MAX_FIXED_RANK
from .diagnostics import (
    ArrayIndexError,
    AxisError,
    ContractViolation,
    ErrorCode,
    UnsupportedRankError,
)
from .index import (
    ArrayIndex,
    Index0d,
    Index1d,
    Index2d,
    Index3d,
    Index4d,
    Index5d,
    IndexNd,
    IndexSplice,
    UnimplIndex,
    index_from_nd,
    index_type_for_rank,
)
from .layout import iter_coordinates, unravel_flat_index
from .ranges import (
    UNBOUNDED,
    Excluded,
    Included,
    IndexRange,
    RangeLike,
    Unbounded,
    range2idxs_1d,
    range2idxs_2d,
    range2idxs_3d,
    range2idxs_4d,
    range2idxs_5d,
    range2idxs_nd,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Ax",
    "AxisLike",
    "ArrayIndex",
    "Index0d",
    "Index1d",
    "Index2d",
    "Index3d",
    "Index4d",
    "Index5d",
    "UnimplIndex",
    "IndexNd",
    "IndexSplice",
    "index_from_nd",
    "index_type_for_rank",
    "iter_coordinates",
    "unravel_flat_index",
    "Excluded",
    "Included",
    "IndexRange",
    "RangeLike",
    "UNBOUNDED",
    "Unbounded",
    "range2idxs_1d",
    "range2idxs_2d",
    "range2idxs_3d",
    "range2idxs_4d",
    "range2idxs_5d",
    "range2idxs_nd",
    "ArrayIndexError",
    "AxisError",
    "ContractViolation",
    "ErrorCode",
    "UnsupportedRankError",
    "FIXED_RANKS",
    "MAX_FIXED_RANK",
]
