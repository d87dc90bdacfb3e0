from .base import ArrayIndex, check_same_rank, coerce_component, rank_mismatch
from .chain import INDEX_TYPES_BY_RANK, index_from_nd, index_type_for_rank
from .fixed import Index0d, Index1d, Index2d, Index3d, Index4d, Index5d, UnimplIndex
from .nd import IndexNd, IndexSplice

__all__ = [
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
    "INDEX_TYPES_BY_RANK",
    "index_from_nd",
    "index_type_for_rank",
    "check_same_rank",
    "coerce_component",
    "rank_mismatch",
]
