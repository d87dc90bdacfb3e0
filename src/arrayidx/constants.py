MAX_FIXED_RANK = 5
FIXED_RANKS = tuple(range(MAX_FIXED_RANK + 1))

UNSUPPORTED_RANK_HELP = (
    f"fixed-rank indices stop at rank {MAX_FIXED_RANK}; use IndexNd for higher ranks"
)


__all__ = [
    "FIXED_RANKS",
    "MAX_FIXED_RANK",
]
