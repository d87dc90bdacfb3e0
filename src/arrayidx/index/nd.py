import operator
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from math import prod
from typing import SupportsIndex

from ..axis import AxisLike, axis_value, resolve_axis
from .base import coerce_component, rank_mismatch


@dataclass(frozen=True, slots=True)
class IndexNd:
    """Variable-rank index for ranks only known at runtime.

    Supports the same operations as the fixed-rank family, with the rank taken
    from the number of stored components. There is no rank ceiling, so prepend
    and append always succeed.
    """

    dims: tuple[int, ...]

    def __post_init__(self) -> None:
        try:
            components = tuple(self.dims)
        except TypeError as exc:
            raise TypeError("IndexNd expects an iterable of integers") from exc
        object.__setattr__(
            self,
            "dims",
            tuple(
                coerce_component(value, axis=axis, owner="IndexNd")
                for axis, value in enumerate(components)
            ),
        )

    @classmethod
    def zero(cls, dim: SupportsIndex) -> "IndexNd":
        """Return the all-zero index with `dim` components."""
        rank = operator.index(dim)
        if rank < 0:
            raise ValueError(f"IndexNd rank must be non-negative, got {rank}")
        return cls((0,) * rank)

    @classmethod
    def from_nd(cls, sizes: Iterable[SupportsIndex]) -> "IndexNd":
        return cls(tuple(sizes))

    def to_nd(self) -> list[int]:
        return list(self.dims)

    def _check_same_dim(self, other: object, *, operation: str) -> "IndexNd":
        if isinstance(other, IndexNd) and len(other.dims) == len(self.dims):
            return other
        dim = getattr(other, "dim", None)
        raise rank_mismatch(
            operation=operation,
            expected=len(self.dims),
            got=dim() if callable(dim) else -1,
            owner="IndexNd",
        )

    def index_add(self, shift: "IndexNd") -> "IndexNd":
        shift = self._check_same_dim(shift, operation="index_add")
        return IndexNd(tuple(a + b for a, b in zip(self.dims, shift.dims)))

    def index_sub(self, shift: "IndexNd") -> "IndexNd":
        shift = self._check_same_dim(shift, operation="index_sub")
        return IndexNd(tuple(a - b for a, b in zip(self.dims, shift.dims)))

    def index_prepend(self, new_inside: SupportsIndex) -> "IndexNd":
        return IndexNd((new_inside, *self.dims))

    def index_append(self, new_outside: SupportsIndex) -> "IndexNd":
        return IndexNd((*self.dims, new_outside))

    def stride_append_packed(self, outside_extent: SupportsIndex) -> "IndexNd":
        return self.index_append(self.outside() * operator.index(outside_extent))

    def index_at(self, axis: AxisLike) -> int:
        position = resolve_axis(axis, rank=len(self.dims), operation="index_at")
        return self.dims[position]

    def index_cut(self, axis: AxisLike) -> "IndexNd":
        position = resolve_axis(axis, rank=len(self.dims), operation="index_cut")
        return IndexNd(self.dims[:position] + self.dims[position + 1 :])

    def splice_at(self, axis: AxisLike) -> "IndexSplice":
        """Split into the axes before, at, and after `axis`.

        The selected part is empty when `axis` lies outside `[0, dim)`; in that
        case every component lands in the prefix (axis past the end) or the
        suffix (negative axis). `IndexSplice.join()` always rebuilds `self`.
        """
        position = axis_value(axis)
        empty = IndexNd(())
        if position < 0:
            return IndexSplice(prefix=empty, selected=empty, suffix=self)
        if position >= len(self.dims):
            return IndexSplice(prefix=self, selected=empty, suffix=empty)
        return IndexSplice(
            prefix=IndexNd(self.dims[:position]),
            selected=IndexNd((self.dims[position],)),
            suffix=IndexNd(self.dims[position + 1 :]),
        )

    def concat(self, *others: "IndexNd") -> "IndexNd":
        """Concatenate components of `others` after this index's components."""
        components = list(self.dims)
        for other in others:
            if not isinstance(other, IndexNd):
                raise TypeError("IndexNd.concat expects IndexNd operands")
            components.extend(other.dims)
        return IndexNd(tuple(components))

    def to_packed_stride(self) -> "IndexNd":
        stride: list[int] = []
        step = 1
        for extent in self.dims:
            stride.append(step)
            step *= extent
        return IndexNd(tuple(stride))

    def is_packed(self, stride: "IndexNd") -> bool:
        stride = self._check_same_dim(stride, operation="is_packed")
        return self.to_packed_stride() == stride

    def is_zero(self) -> bool:
        return all(component == 0 for component in self.dims)

    def flat_len(self) -> int:
        return prod(self.dims)

    def flat_index(self, stride: "IndexNd") -> int:
        stride = self._check_same_dim(stride, operation="flat_index")
        return sum(c * s for c, s in zip(self.dims, stride.dims))

    def inside(self) -> int:
        return self.dims[0] if self.dims else 1

    def outside(self) -> int:
        return self.dims[-1] if self.dims else 1

    def dim(self) -> int:
        return len(self.dims)

    @property
    def ndim(self) -> int:
        return len(self.dims)

    def __iter__(self) -> Iterator[int]:
        return iter(self.dims)

    def __getitem__(self, axis: AxisLike) -> int:
        return self.index_at(axis)


@dataclass(frozen=True, slots=True)
class IndexSplice:
    """Three-way split of an `IndexNd` around one axis."""

    prefix: IndexNd
    selected: IndexNd
    suffix: IndexNd

    def join(self) -> IndexNd:
        """Concatenate prefix, selection and suffix back into one index."""
        return self.prefix.concat(self.selected, self.suffix)

    def __iter__(self) -> Iterator[IndexNd]:
        yield self.prefix
        yield self.selected
        yield self.suffix


__all__ = ["IndexNd", "IndexSplice"]
