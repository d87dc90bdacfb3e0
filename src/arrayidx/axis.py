import operator
from dataclasses import dataclass
from typing import SupportsIndex, TypeAlias

from .diagnostics import AxisError, ErrorCode


@dataclass(frozen=True, slots=True)
class Ax:
    """Integer explicitly labelled as an axis position.

    Axis 0 is the innermost (fastest-varying) dimension. The wrapper carries
    no behavior beyond `__index__`, so it is accepted anywhere an axis is.
    """

    index: int

    def __post_init__(self) -> None:
        if isinstance(self.index, bool):
            raise TypeError("axis must be an int, not bool")
        object.__setattr__(self, "index", operator.index(self.index))

    def __index__(self) -> int:
        return self.index

    def __int__(self) -> int:
        return self.index

    def __repr__(self) -> str:
        return f"Ax({self.index})"


AxisLike: TypeAlias = Ax | SupportsIndex


def axis_value(axis: AxisLike) -> int:
    """Convert one axis-like value to a plain signed int."""
    if isinstance(axis, bool):
        raise TypeError("axis must be an int or Ax, not bool")
    return operator.index(axis)


def axis_out_of_range(position: int, *, rank: int, operation: str) -> AxisError:
    """Build the diagnostic for an axis outside `[0, rank)`."""
    return AxisError(
        code=ErrorCode.AXIS_OUT_OF_RANGE,
        message=f"{operation}: axis {position} is out of range for rank {rank}",
        help="rank 0 has no axes" if rank == 0 else f"valid axes are 0..{rank - 1}",
        related=(f"{operation} axis",),
        data={"operation": operation, "axis": position, "rank": rank},
    )


def resolve_axis(axis: AxisLike, *, rank: int, operation: str) -> int:
    """Validate one axis against `[0, rank)` and return it as an int.

    Negative axes are out of range; there is no wraparound.
    """
    position = axis_value(axis)
    if position < 0 or position >= rank:
        raise axis_out_of_range(position, rank=rank, operation=operation)
    return position


__all__ = ["Ax", "AxisLike", "axis_out_of_range", "axis_value", "resolve_axis"]
