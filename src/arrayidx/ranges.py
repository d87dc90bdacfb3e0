"""Range-to-bounds normalization for per-axis slicing.

Every range resolves to a half-open `[start, end)` pair:

| bound          | start   | end            |
|----------------|---------|----------------|
| `Included(x)`  | `x`     | `x + 1`        |
| `Excluded(x)`  | `x + 1` | `x`            |
| `Unbounded`    | `0`     | dimension size |

and must satisfy `start <= end <= size`.
"""

import operator
from collections.abc import Sequence
from dataclasses import dataclass
from types import EllipsisType
from typing import SupportsIndex, TypeAlias

from .diagnostics import ContractViolation, DiagnosticValue, ErrorCode
from .index import Index2d, Index3d, Index4d, Index5d, IndexNd, rank_mismatch


def _bound_value(value: SupportsIndex, *, kind: str) -> int:
    """Validate one bound endpoint as a non-negative int."""
    if isinstance(value, bool):
        raise TypeError(f"{kind} bound must be an int, not bool")
    endpoint = operator.index(value)
    if endpoint < 0:
        raise ContractViolation(
            code=ErrorCode.NEGATIVE_COMPONENT,
            message=f"{kind} bound must be non-negative, got {endpoint}",
            help="negative (wraparound) range bounds are not supported",
            related=("range bound",),
            data={"bound": kind, "value": endpoint},
        )
    return endpoint


@dataclass(frozen=True, slots=True)
class Included:
    """Bound that includes `value`."""

    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _bound_value(self.value, kind="included"))


@dataclass(frozen=True, slots=True)
class Excluded:
    """Bound that excludes `value`."""

    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _bound_value(self.value, kind="excluded"))


@dataclass(frozen=True, slots=True)
class Unbounded:
    """Open bound: the start or end of the whole dimension."""


UNBOUNDED = Unbounded()

Bound: TypeAlias = Included | Excluded | Unbounded


@dataclass(frozen=True, slots=True)
class IndexRange:
    """Range over one axis described by a start bound and an end bound."""

    start: Bound = UNBOUNDED
    end: Bound = UNBOUNDED

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            if not isinstance(getattr(self, name), Included | Excluded | Unbounded):
                raise TypeError(
                    f"IndexRange {name} must be Included, Excluded, or Unbounded"
                )

    @classmethod
    def closed(cls, start: SupportsIndex, end: SupportsIndex) -> "IndexRange":
        """`start..=end`."""
        return cls(Included(start), Included(end))

    @classmethod
    def half_open(cls, start: SupportsIndex, end: SupportsIndex) -> "IndexRange":
        """`start..end`."""
        return cls(Included(start), Excluded(end))

    @classmethod
    def starting_at(cls, start: SupportsIndex) -> "IndexRange":
        """`start..`."""
        return cls(Included(start), UNBOUNDED)

    @classmethod
    def ending_before(cls, end: SupportsIndex) -> "IndexRange":
        """`..end`."""
        return cls(UNBOUNDED, Excluded(end))

    @classmethod
    def ending_at(cls, end: SupportsIndex) -> "IndexRange":
        """`..=end`."""
        return cls(UNBOUNDED, Included(end))

    @classmethod
    def full(cls) -> "IndexRange":
        """`..`."""
        return cls(UNBOUNDED, UNBOUNDED)


RangeLike: TypeAlias = IndexRange | slice | range | EllipsisType | None


def _unsupported_step(step: object) -> ContractViolation:
    return ContractViolation(
        code=ErrorCode.UNSUPPORTED_STEP,
        message=f"ranges must have unit step, got step {step!r}",
        help="strided ranges are not supported; drop the step",
        related=("range step",),
    )


def as_index_range(spec: RangeLike) -> IndexRange:
    """Normalize one range-like value into an `IndexRange`.

    `slice` and `range` map to an included start and an excluded stop;
    `None` on either side of a slice, a bare `None`, or `...` mean unbounded.
    """
    if isinstance(spec, IndexRange):
        return spec
    if spec is None or spec is Ellipsis:
        return IndexRange.full()
    if isinstance(spec, slice):
        if spec.step is not None and spec.step != 1:
            raise _unsupported_step(spec.step)
        start: Bound = UNBOUNDED if spec.start is None else Included(spec.start)
        end: Bound = UNBOUNDED if spec.stop is None else Excluded(spec.stop)
        return IndexRange(start, end)
    if isinstance(spec, range):
        if spec.step != 1:
            raise _unsupported_step(spec.step)
        return IndexRange.half_open(spec.start, spec.stop)
    raise TypeError(
        "range must be IndexRange, slice, range, None, or Ellipsis, "
        f"got {type(spec).__name__}"
    )


def _resolve(
    spec: RangeLike,
    size: int,
    *,
    operation: str,
    axis: int | None,
) -> tuple[int, int]:
    bounds = as_index_range(spec)

    start_bound = bounds.start
    if isinstance(start_bound, Included):
        start = start_bound.value
    elif isinstance(start_bound, Excluded):
        start = start_bound.value + 1
    else:
        start = 0

    end_bound = bounds.end
    if isinstance(end_bound, Included):
        end = end_bound.value + 1
    elif isinstance(end_bound, Excluded):
        end = end_bound.value
    else:
        end = size

    if start <= end <= size:
        return start, end

    where = "" if axis is None else f" on axis {axis}"
    data: dict[str, DiagnosticValue] = {
        "operation": operation,
        "start": start,
        "end": end,
        "size": size,
    }
    if axis is not None:
        data["axis"] = axis
    raise ContractViolation(
        code=ErrorCode.RANGE_OUT_OF_BOUNDS,
        message=(
            f"{operation}: range [{start}, {end}){where} is invalid for "
            f"dimension size {size}"
        ),
        help="a range must satisfy start <= end <= dimension size",
        related=(f"{operation} bounds",),
        data=data,
    )


def range2idxs_1d(index_range: RangeLike, dimension_size: SupportsIndex) -> tuple[int, int]:
    """Resolve one range over a dimension of `dimension_size` into `(start, end)`.

    Raises
    ------
    ContractViolation
        If the resolved pair breaks `start <= end <= dimension_size`.
    """
    return _resolve(
        index_range,
        operator.index(dimension_size),
        operation="range2idxs_1d",
        axis=None,
    )


def _resolve_axes(
    ranges: Sequence[RangeLike],
    sizes: list[int],
    *,
    operation: str,
) -> tuple[list[int], list[int]]:
    """Resolve one range per axis; axes are independent of each other."""
    if not isinstance(ranges, tuple | list):
        raise TypeError(f"{operation} expects a tuple of per-axis ranges")
    if len(ranges) != len(sizes):
        raise rank_mismatch(
            operation=operation,
            expected=len(sizes),
            got=len(ranges),
            owner="ranges",
        )
    starts: list[int] = []
    ends: list[int] = []
    for axis, (spec, size) in enumerate(zip(ranges, sizes)):
        start, end = _resolve(spec, size, operation=operation, axis=axis)
        starts.append(start)
        ends.append(end)
    return starts, ends


def range2idxs_2d(
    ranges: tuple[RangeLike, RangeLike],
    size: Index2d | Sequence[SupportsIndex],
) -> tuple[Index2d, Index2d]:
    """Resolve two per-axis ranges into `(start, end)` rank-2 indices."""
    shape = size if isinstance(size, Index2d) else Index2d.from_nd(size)
    starts, ends = _resolve_axes(ranges, shape.to_nd(), operation="range2idxs_2d")
    return Index2d.from_nd(starts), Index2d.from_nd(ends)


def range2idxs_3d(
    ranges: tuple[RangeLike, RangeLike, RangeLike],
    size: Index3d | Sequence[SupportsIndex],
) -> tuple[Index3d, Index3d]:
    """Resolve three per-axis ranges into `(start, end)` rank-3 indices."""
    shape = size if isinstance(size, Index3d) else Index3d.from_nd(size)
    starts, ends = _resolve_axes(ranges, shape.to_nd(), operation="range2idxs_3d")
    return Index3d.from_nd(starts), Index3d.from_nd(ends)


def range2idxs_4d(
    ranges: tuple[RangeLike, RangeLike, RangeLike, RangeLike],
    size: Index4d | Sequence[SupportsIndex],
) -> tuple[Index4d, Index4d]:
    """Resolve four per-axis ranges into `(start, end)` rank-4 indices."""
    shape = size if isinstance(size, Index4d) else Index4d.from_nd(size)
    starts, ends = _resolve_axes(ranges, shape.to_nd(), operation="range2idxs_4d")
    return Index4d.from_nd(starts), Index4d.from_nd(ends)


def range2idxs_5d(
    ranges: tuple[RangeLike, RangeLike, RangeLike, RangeLike, RangeLike],
    size: Index5d | Sequence[SupportsIndex],
) -> tuple[Index5d, Index5d]:
    """Resolve five per-axis ranges into `(start, end)` rank-5 indices."""
    shape = size if isinstance(size, Index5d) else Index5d.from_nd(size)
    starts, ends = _resolve_axes(ranges, shape.to_nd(), operation="range2idxs_5d")
    return Index5d.from_nd(starts), Index5d.from_nd(ends)


def range2idxs_nd(
    ranges: Sequence[RangeLike],
    size: IndexNd | Sequence[SupportsIndex],
) -> tuple[IndexNd, IndexNd]:
    """Resolve one range per axis of a variable-rank shape."""
    shape = size if isinstance(size, IndexNd) else IndexNd.from_nd(size)
    starts, ends = _resolve_axes(ranges, shape.to_nd(), operation="range2idxs_nd")
    return IndexNd(tuple(starts)), IndexNd(tuple(ends))


__all__ = [
    "Bound",
    "Excluded",
    "Included",
    "IndexRange",
    "RangeLike",
    "UNBOUNDED",
    "Unbounded",
    "as_index_range",
    "range2idxs_1d",
    "range2idxs_2d",
    "range2idxs_3d",
    "range2idxs_4d",
    "range2idxs_5d",
    "range2idxs_nd",
]
