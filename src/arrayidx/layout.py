import operator
from collections.abc import Iterator
from typing import SupportsIndex, TypeVar

from .diagnostics import ContractViolation, ErrorCode
from .index import ArrayIndex, IndexNd

ShapeT = TypeVar("ShapeT", bound="ArrayIndex | IndexNd")


def iter_coordinates(shape: ShapeT) -> Iterator[ShapeT]:
    """Yield every coordinate of `shape` in packed order.

    Axis 0 varies fastest, so the k-th coordinate has flat index k under
    `shape.to_packed_stride()`. Coordinates have the same type as `shape`.
    """
    extents = shape.to_nd()
    if any(extent == 0 for extent in extents):
        return
    build = type(shape).from_nd
    coordinate = [0] * len(extents)
    while True:
        yield build(coordinate)
        axis = 0
        while axis < len(extents):
            coordinate[axis] += 1
            if coordinate[axis] < extents[axis]:
                break
            coordinate[axis] = 0
            axis += 1
        else:
            return


def unravel_flat_index(flat: SupportsIndex, shape: ShapeT) -> ShapeT:
    """Return the coordinate whose packed flat index is `flat`.

    Inverse of `coordinate.flat_index(shape.to_packed_stride())`.
    """
    offset = operator.index(flat)
    total = shape.flat_len()
    if offset < 0 or offset >= total:
        raise ContractViolation(
            code=ErrorCode.FLAT_INDEX_OUT_OF_RANGE,
            message=f"flat index {offset} is out of range for {total} elements",
            help=f"valid flat indices are 0..{total - 1}" if total else None,
            related=("unravel_flat_index",),
            data={"flat": offset, "flat_len": total},
        )
    coordinate: list[int] = []
    remainder = offset
    for extent in shape.to_nd():
        coordinate.append(remainder % extent)
        remainder //= extent
    return type(shape).from_nd(coordinate)


__all__ = ["iter_coordinates", "unravel_flat_index"]
