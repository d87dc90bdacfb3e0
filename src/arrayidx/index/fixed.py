from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar, NoReturn, SupportsIndex

from ..axis import AxisLike, axis_out_of_range, axis_value, resolve_axis
from ..constants import MAX_FIXED_RANK, UNSUPPORTED_RANK_HELP
from ..diagnostics import ErrorCode, UnsupportedRankError
from .base import ArrayIndex, check_same_rank


def _rank_unsupported(operation: str) -> NoReturn:
    """Raise the diagnostic for any use of the rank above the fixed family."""
    raise UnsupportedRankError(
        code=ErrorCode.RANK_UNSUPPORTED,
        message=(
            f"{operation}: rank {MAX_FIXED_RANK + 1} is not implemented "
            f"for fixed-rank indices"
        ),
        help=UNSUPPORTED_RANK_HELP,
        related=("rank chain",),
        data={"operation": operation, "max_rank": MAX_FIXED_RANK},
    )


@dataclass(frozen=True, slots=True, repr=False)
class Index0d(ArrayIndex):
    """Rank-0 index.

    There is exactly one rank-0 value. As a shape it addresses a single
    element, so `flat_len`, `inside` and `outside` are all 1.
    """

    RANK: ClassVar[int] = 0

    @classmethod
    def zero(cls) -> "Index0d":
        return cls()

    def to_nd(self) -> list[int]:
        return []

    def index_add(self, shift: "Index0d") -> "Index0d":
        check_same_rank(self, shift, operation="index_add")
        return Index0d()

    def index_sub(self, shift: "Index0d") -> "Index0d":
        check_same_rank(self, shift, operation="index_sub")
        return Index0d()

    def index_prepend(self, new_inside: SupportsIndex) -> "Index1d":
        return Index1d(new_inside)

    def index_append(self, new_outside: SupportsIndex) -> "Index1d":
        return Index1d(new_outside)

    def index_at(self, axis: AxisLike) -> int:
        raise axis_out_of_range(axis_value(axis), rank=0, operation="index_at")

    def index_cut(self, axis: AxisLike) -> "Index0d":
        # Rank 0 is its own Below; cutting leaves it unchanged.
        _ = axis
        return self

    def to_packed_stride(self) -> "Index0d":
        return Index0d()

    def flat_len(self) -> int:
        return 1

    def flat_index(self, stride: "Index0d") -> int:
        check_same_rank(self, stride, operation="flat_index")
        return 0

    def inside(self) -> int:
        return 1

    def outside(self) -> int:
        return 1


@dataclass(frozen=True, slots=True, repr=False)
class Index1d(ArrayIndex):
    """Rank-1 index."""

    ax0: int

    RANK: ClassVar[int] = 1

    @classmethod
    def zero(cls) -> "Index1d":
        return cls(0)

    def to_nd(self) -> list[int]:
        return [self.ax0]

    def index_add(self, shift: "Index1d") -> "Index1d":
        check_same_rank(self, shift, operation="index_add")
        return Index1d(self.ax0 + shift.ax0)

    def index_sub(self, shift: "Index1d") -> "Index1d":
        check_same_rank(self, shift, operation="index_sub")
        return Index1d(self.ax0 - shift.ax0)

    def index_prepend(self, new_inside: SupportsIndex) -> "Index2d":
        return Index2d(new_inside, self.ax0)

    def index_append(self, new_outside: SupportsIndex) -> "Index2d":
        return Index2d(self.ax0, new_outside)

    def index_at(self, axis: AxisLike) -> int:
        resolve_axis(axis, rank=1, operation="index_at")
        return self.ax0

    def index_cut(self, axis: AxisLike) -> Index0d:
        resolve_axis(axis, rank=1, operation="index_cut")
        return Index0d()

    def to_packed_stride(self) -> "Index1d":
        return Index1d(1)

    def flat_len(self) -> int:
        return self.ax0

    def flat_index(self, stride: "Index1d") -> int:
        check_same_rank(self, stride, operation="flat_index")
        return self.ax0 * stride.ax0

    def inside(self) -> int:
        return self.ax0

    def outside(self) -> int:
        return self.ax0


@dataclass(frozen=True, slots=True, repr=False)
class Index2d(ArrayIndex):
    """Rank-2 index; `ax0` is the inside axis."""

    ax0: int
    ax1: int

    RANK: ClassVar[int] = 2

    @classmethod
    def zero(cls) -> "Index2d":
        return cls(0, 0)

    def to_nd(self) -> list[int]:
        return [self.ax0, self.ax1]

    def index_add(self, shift: "Index2d") -> "Index2d":
        check_same_rank(self, shift, operation="index_add")
        return Index2d(
            self.ax0 + shift.ax0,
            self.ax1 + shift.ax1,
        )

    def index_sub(self, shift: "Index2d") -> "Index2d":
        check_same_rank(self, shift, operation="index_sub")
        return Index2d(
            self.ax0 - shift.ax0,
            self.ax1 - shift.ax1,
        )

    def index_prepend(self, new_inside: SupportsIndex) -> "Index3d":
        return Index3d(new_inside, self.ax0, self.ax1)

    def index_append(self, new_outside: SupportsIndex) -> "Index3d":
        return Index3d(self.ax0, self.ax1, new_outside)

    def index_at(self, axis: AxisLike) -> int:
        position = resolve_axis(axis, rank=2, operation="index_at")
        if position == 0:
            return self.ax0
        return self.ax1

    def index_cut(self, axis: AxisLike) -> Index1d:
        position = resolve_axis(axis, rank=2, operation="index_cut")
        if position == 0:
            return Index1d(self.ax1)
        return Index1d(self.ax0)

    def to_packed_stride(self) -> "Index2d":
        s0 = 1
        s1 = s0 * self.ax0
        return Index2d(s0, s1)

    def flat_len(self) -> int:
        return self.ax0 * self.ax1

    def flat_index(self, stride: "Index2d") -> int:
        check_same_rank(self, stride, operation="flat_index")
        return self.ax0 * stride.ax0 + self.ax1 * stride.ax1

    def inside(self) -> int:
        return self.ax0

    def outside(self) -> int:
        return self.ax1


@dataclass(frozen=True, slots=True, repr=False)
class Index3d(ArrayIndex):
    """Rank-3 index; `ax0` is the inside axis."""

    ax0: int
    ax1: int
    ax2: int

    RANK: ClassVar[int] = 3

    @classmethod
    def zero(cls) -> "Index3d":
        return cls(0, 0, 0)

    def to_nd(self) -> list[int]:
        return [self.ax0, self.ax1, self.ax2]

    def index_add(self, shift: "Index3d") -> "Index3d":
        check_same_rank(self, shift, operation="index_add")
        return Index3d(
            self.ax0 + shift.ax0,
            self.ax1 + shift.ax1,
            self.ax2 + shift.ax2,
        )

    def index_sub(self, shift: "Index3d") -> "Index3d":
        check_same_rank(self, shift, operation="index_sub")
        return Index3d(
            self.ax0 - shift.ax0,
            self.ax1 - shift.ax1,
            self.ax2 - shift.ax2,
        )

    def index_prepend(self, new_inside: SupportsIndex) -> "Index4d":
        return Index4d(new_inside, self.ax0, self.ax1, self.ax2)

    def index_append(self, new_outside: SupportsIndex) -> "Index4d":
        return Index4d(self.ax0, self.ax1, self.ax2, new_outside)

    def index_at(self, axis: AxisLike) -> int:
        position = resolve_axis(axis, rank=3, operation="index_at")
        if position == 0:
            return self.ax0
        if position == 1:
            return self.ax1
        return self.ax2

    def index_cut(self, axis: AxisLike) -> Index2d:
        position = resolve_axis(axis, rank=3, operation="index_cut")
        if position == 0:
            return Index2d(self.ax1, self.ax2)
        if position == 1:
            return Index2d(self.ax0, self.ax2)
        return Index2d(self.ax0, self.ax1)

    def to_packed_stride(self) -> "Index3d":
        s0 = 1
        s1 = s0 * self.ax0
        s2 = s1 * self.ax1
        return Index3d(s0, s1, s2)

    def flat_len(self) -> int:
        return self.ax0 * self.ax1 * self.ax2

    def flat_index(self, stride: "Index3d") -> int:
        check_same_rank(self, stride, operation="flat_index")
        return (
            self.ax0 * stride.ax0
            + self.ax1 * stride.ax1
            + self.ax2 * stride.ax2
        )

    def inside(self) -> int:
        return self.ax0

    def outside(self) -> int:
        return self.ax2


@dataclass(frozen=True, slots=True, repr=False)
class Index4d(ArrayIndex):
    """Rank-4 index; `ax0` is the inside axis."""

    ax0: int
    ax1: int
    ax2: int
    ax3: int

    RANK: ClassVar[int] = 4

    @classmethod
    def zero(cls) -> "Index4d":
        return cls(0, 0, 0, 0)

    def to_nd(self) -> list[int]:
        return [self.ax0, self.ax1, self.ax2, self.ax3]

    def index_add(self, shift: "Index4d") -> "Index4d":
        check_same_rank(self, shift, operation="index_add")
        return Index4d(
            self.ax0 + shift.ax0,
            self.ax1 + shift.ax1,
            self.ax2 + shift.ax2,
            self.ax3 + shift.ax3,
        )

    def index_sub(self, shift: "Index4d") -> "Index4d":
        check_same_rank(self, shift, operation="index_sub")
        return Index4d(
            self.ax0 - shift.ax0,
            self.ax1 - shift.ax1,
            self.ax2 - shift.ax2,
            self.ax3 - shift.ax3,
        )

    def index_prepend(self, new_inside: SupportsIndex) -> "Index5d":
        return Index5d(new_inside, self.ax0, self.ax1, self.ax2, self.ax3)

    def index_append(self, new_outside: SupportsIndex) -> "Index5d":
        return Index5d(self.ax0, self.ax1, self.ax2, self.ax3, new_outside)

    def index_at(self, axis: AxisLike) -> int:
        position = resolve_axis(axis, rank=4, operation="index_at")
        if position == 0:
            return self.ax0
        if position == 1:
            return self.ax1
        if position == 2:
            return self.ax2
        return self.ax3

    def index_cut(self, axis: AxisLike) -> Index3d:
        position = resolve_axis(axis, rank=4, operation="index_cut")
        if position == 0:
            return Index3d(self.ax1, self.ax2, self.ax3)
        if position == 1:
            return Index3d(self.ax0, self.ax2, self.ax3)
        if position == 2:
            return Index3d(self.ax0, self.ax1, self.ax3)
        return Index3d(self.ax0, self.ax1, self.ax2)

    def to_packed_stride(self) -> "Index4d":
        s0 = 1
        s1 = s0 * self.ax0
        s2 = s1 * self.ax1
        s3 = s2 * self.ax2
        return Index4d(s0, s1, s2, s3)

    def flat_len(self) -> int:
        return self.ax0 * self.ax1 * self.ax2 * self.ax3

    def flat_index(self, stride: "Index4d") -> int:
        check_same_rank(self, stride, operation="flat_index")
        return (
            self.ax0 * stride.ax0
            + self.ax1 * stride.ax1
            + self.ax2 * stride.ax2
            + self.ax3 * stride.ax3
        )

    def inside(self) -> int:
        return self.ax0

    def outside(self) -> int:
        return self.ax3


@dataclass(frozen=True, slots=True, repr=False)
class Index5d(ArrayIndex):
    """Rank-5 index, the top of the fixed-rank chain.

    `index_prepend`, `index_append` and `stride_append_packed` raise
    `UnsupportedRankError`: there is no rank 6.
    """

    ax0: int
    ax1: int
    ax2: int
    ax3: int
    ax4: int

    RANK: ClassVar[int] = 5

    @classmethod
    def zero(cls) -> "Index5d":
        return cls(0, 0, 0, 0, 0)

    def to_nd(self) -> list[int]:
        return [self.ax0, self.ax1, self.ax2, self.ax3, self.ax4]

    def index_add(self, shift: "Index5d") -> "Index5d":
        check_same_rank(self, shift, operation="index_add")
        return Index5d(
            self.ax0 + shift.ax0,
            self.ax1 + shift.ax1,
            self.ax2 + shift.ax2,
            self.ax3 + shift.ax3,
            self.ax4 + shift.ax4,
        )

    def index_sub(self, shift: "Index5d") -> "Index5d":
        check_same_rank(self, shift, operation="index_sub")
        return Index5d(
            self.ax0 - shift.ax0,
            self.ax1 - shift.ax1,
            self.ax2 - shift.ax2,
            self.ax3 - shift.ax3,
            self.ax4 - shift.ax4,
        )

    def index_prepend(self, new_inside: SupportsIndex) -> "UnimplIndex":
        _ = new_inside
        _rank_unsupported("Index5d.index_prepend")

    def index_append(self, new_outside: SupportsIndex) -> "UnimplIndex":
        _ = new_outside
        _rank_unsupported("Index5d.index_append")

    def index_at(self, axis: AxisLike) -> int:
        position = resolve_axis(axis, rank=5, operation="index_at")
        if position == 0:
            return self.ax0
        if position == 1:
            return self.ax1
        if position == 2:
            return self.ax2
        if position == 3:
            return self.ax3
        return self.ax4

    def index_cut(self, axis: AxisLike) -> Index4d:
        position = resolve_axis(axis, rank=5, operation="index_cut")
        if position == 0:
            return Index4d(self.ax1, self.ax2, self.ax3, self.ax4)
        if position == 1:
            return Index4d(self.ax0, self.ax2, self.ax3, self.ax4)
        if position == 2:
            return Index4d(self.ax0, self.ax1, self.ax3, self.ax4)
        if position == 3:
            return Index4d(self.ax0, self.ax1, self.ax2, self.ax4)
        return Index4d(self.ax0, self.ax1, self.ax2, self.ax3)

    def to_packed_stride(self) -> "Index5d":
        s0 = 1
        s1 = s0 * self.ax0
        s2 = s1 * self.ax1
        s3 = s2 * self.ax2
        s4 = s3 * self.ax3
        return Index5d(s0, s1, s2, s3, s4)

    def flat_len(self) -> int:
        return self.ax0 * self.ax1 * self.ax2 * self.ax3 * self.ax4

    def flat_index(self, stride: "Index5d") -> int:
        check_same_rank(self, stride, operation="flat_index")
        return (
            self.ax0 * stride.ax0
            + self.ax1 * stride.ax1
            + self.ax2 * stride.ax2
            + self.ax3 * stride.ax3
            + self.ax4 * stride.ax4
        )

    def inside(self) -> int:
        return self.ax0

    def outside(self) -> int:
        return self.ax4


class UnimplIndex(ArrayIndex):
    """Rank-6 placeholder that only exists as `Index5d.Above`.

    It cannot be constructed, and every operation raises
    `UnsupportedRankError`.
    """

    __slots__ = ()

    RANK: ClassVar[int] = MAX_FIXED_RANK + 1

    def __init__(self, *components: SupportsIndex) -> None:
        _ = components
        _rank_unsupported("UnimplIndex")

    @classmethod
    def zero(cls) -> "UnimplIndex":
        _rank_unsupported("UnimplIndex.zero")

    @classmethod
    def from_nd(cls, sizes: Iterable[SupportsIndex]) -> "UnimplIndex":
        _ = sizes
        _rank_unsupported("UnimplIndex.from_nd")

    def to_nd(self) -> list[int]:
        _rank_unsupported("UnimplIndex.to_nd")

    def index_add(self, shift: "UnimplIndex") -> "UnimplIndex":
        _ = shift
        _rank_unsupported("UnimplIndex.index_add")

    def index_sub(self, shift: "UnimplIndex") -> "UnimplIndex":
        _ = shift
        _rank_unsupported("UnimplIndex.index_sub")

    def index_prepend(self, new_inside: SupportsIndex) -> "UnimplIndex":
        _ = new_inside
        _rank_unsupported("UnimplIndex.index_prepend")

    def index_append(self, new_outside: SupportsIndex) -> "UnimplIndex":
        _ = new_outside
        _rank_unsupported("UnimplIndex.index_append")

    def stride_append_packed(self, outside_extent: SupportsIndex) -> "UnimplIndex":
        _ = outside_extent
        _rank_unsupported("UnimplIndex.stride_append_packed")

    def index_at(self, axis: AxisLike) -> int:
        _ = axis
        _rank_unsupported("UnimplIndex.index_at")

    def index_cut(self, axis: AxisLike) -> Index5d:
        _ = axis
        _rank_unsupported("UnimplIndex.index_cut")

    def to_packed_stride(self) -> "UnimplIndex":
        _rank_unsupported("UnimplIndex.to_packed_stride")

    def is_packed(self, stride: "UnimplIndex") -> bool:
        _ = stride
        _rank_unsupported("UnimplIndex.is_packed")

    def flat_len(self) -> int:
        _rank_unsupported("UnimplIndex.flat_len")

    def flat_index(self, stride: "UnimplIndex") -> int:
        _ = stride
        _rank_unsupported("UnimplIndex.flat_index")

    def inside(self) -> int:
        _rank_unsupported("UnimplIndex.inside")

    def outside(self) -> int:
        _rank_unsupported("UnimplIndex.outside")

    def dim(self) -> int:
        _rank_unsupported("UnimplIndex.dim")


# Rank chain. Rank 0 is its own Below; rank 5 goes up into the sentinel.
Index0d.Above, Index0d.Below = Index1d, Index0d
Index1d.Above, Index1d.Below = Index2d, Index0d
Index2d.Above, Index2d.Below = Index3d, Index1d
Index3d.Above, Index3d.Below = Index4d, Index2d
Index4d.Above, Index4d.Below = Index5d, Index3d
Index5d.Above, Index5d.Below = UnimplIndex, Index4d
UnimplIndex.Above, UnimplIndex.Below = UnimplIndex, Index5d


__all__ = [
    "Index0d",
    "Index1d",
    "Index2d",
    "Index3d",
    "Index4d",
    "Index5d",
    "UnimplIndex",
]
