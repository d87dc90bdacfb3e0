import operator
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import fields
from typing import ClassVar, SupportsIndex

try:
    from typing import Self
except ImportError:  # pragma: no cover
    from typing_extensions import Self

from ..axis import AxisLike
from ..diagnostics import ContractViolation, ErrorCode


def coerce_component(value: SupportsIndex, *, axis: int, owner: str) -> int:
    """Validate one index component as a non-negative int."""
    if isinstance(value, bool):
        raise TypeError(f"{owner} components must be int, not bool")
    try:
        component = operator.index(value)
    except TypeError as exc:
        raise TypeError(
            f"{owner} components must be integers, got {type(value).__name__}"
        ) from exc
    if component < 0:
        raise ContractViolation(
            code=ErrorCode.NEGATIVE_COMPONENT,
            message=f"{owner}: component at axis {axis} is negative ({component})",
            help="index components are unsigned; check index_sub operands",
            related=(f"{owner} component",),
            data={"index_type": owner, "axis": axis, "value": component},
        )
    return component


def rank_mismatch(
    *,
    operation: str,
    expected: int,
    got: int,
    owner: str,
) -> ContractViolation:
    """Build the rank-mismatch diagnostic shared by every index type."""
    return ContractViolation(
        code=ErrorCode.RANK_MISMATCH,
        message=f"{owner}.{operation}: expected rank {expected}, got rank {got}",
        help="both operands must have the same rank",
        related=(f"{owner} rank",),
        data={
            "operation": operation,
            "index_type": owner,
            "expected": expected,
            "got": got,
        },
    )


def check_same_rank(index: "ArrayIndex", other: object, *, operation: str) -> None:
    """Require `other` to be an index of exactly the same fixed rank."""
    if type(other) is type(index):
        return
    dim = getattr(other, "dim", None)
    got = dim() if callable(dim) else -1
    raise rank_mismatch(
        operation=operation,
        expected=index.RANK,
        got=got,
        owner=type(index).__name__,
    )


class ArrayIndex(ABC):
    """Fixed-rank index contract.

    An index value is a tuple of `dim()` non-negative integers. The same value
    serves as a shape, a stride, or a coordinate; the operation decides the
    interpretation. Axis 0 is the inside (fastest-varying) dimension and the
    highest axis is the outside one.

    Concrete ranks expose their neighbours in the rank chain as the `Above`
    and `Below` class attributes.
    """

    __slots__ = ()

    RANK: ClassVar[int]
    Above: ClassVar[type["ArrayIndex"]]
    Below: ClassVar[type["ArrayIndex"]]

    def __post_init__(self) -> None:
        owner = type(self).__name__
        for axis, field in enumerate(fields(self)):
            value = coerce_component(getattr(self, field.name), axis=axis, owner=owner)
            object.__setattr__(self, field.name, value)

    @classmethod
    @abstractmethod
    def zero(cls) -> Self:
        """Return the all-zero index of this rank."""

    @classmethod
    def from_nd(cls, sizes: Iterable[SupportsIndex]) -> Self:
        """Build an index from a rank-agnostic sequence of exactly `RANK` ints."""
        components = tuple(sizes)
        if len(components) != cls.RANK:
            raise rank_mismatch(
                operation="from_nd",
                expected=cls.RANK,
                got=len(components),
                owner=cls.__name__,
            )
        return cls(*components)

    @abstractmethod
    def to_nd(self) -> list[int]:
        """Return the components as a list, axis 0 first."""

    @abstractmethod
    def index_add(self, shift: Self) -> Self:
        """Return the component-wise sum with a same-rank index."""

    @abstractmethod
    def index_sub(self, shift: Self) -> Self:
        """Return the component-wise difference with a same-rank index."""

    @abstractmethod
    def index_prepend(self, new_inside: SupportsIndex) -> "ArrayIndex":
        """Return the rank-above index with `new_inside` as the new axis 0."""

    @abstractmethod
    def index_append(self, new_outside: SupportsIndex) -> "ArrayIndex":
        """Return the rank-above index with `new_outside` as the new last axis."""

    def stride_append_packed(self, outside_extent: SupportsIndex) -> "ArrayIndex":
        """Extend a packed stride by one more packed outer dimension."""
        return self.index_append(self.outside() * operator.index(outside_extent))

    @abstractmethod
    def index_at(self, axis: AxisLike) -> int:
        """Return the component at `axis`."""

    @abstractmethod
    def index_cut(self, axis: AxisLike) -> "ArrayIndex":
        """Return the rank-below index with `axis` removed."""

    @abstractmethod
    def to_packed_stride(self) -> Self:
        """Return the contiguous stride for this index read as a shape."""

    def is_packed(self, stride: Self) -> bool:
        """Return whether `stride` is exactly the packed stride of this shape."""
        check_same_rank(self, stride, operation="is_packed")
        return self.to_packed_stride() == stride

    @abstractmethod
    def flat_len(self) -> int:
        """Return the number of elements addressed by this shape."""

    @abstractmethod
    def flat_index(self, stride: Self) -> int:
        """Return the linear offset of this coordinate under `stride`."""

    @abstractmethod
    def inside(self) -> int:
        """Return the axis-0 extent."""

    @abstractmethod
    def outside(self) -> int:
        """Return the highest-axis extent."""

    def dim(self) -> int:
        """Return the rank."""
        return self.RANK

    @property
    def ndim(self) -> int:
        return self.dim()

    def __iter__(self) -> Iterator[int]:
        return iter(self.to_nd())

    def __getitem__(self, axis: AxisLike) -> int:
        return self.index_at(axis)

    def __repr__(self) -> str:
        rendered = ", ".join(str(component) for component in self.to_nd())
        return f"{type(self).__name__}({rendered})"


__all__ = [
    "ArrayIndex",
    "check_same_rank",
    "coerce_component",
    "rank_mismatch",
]
