import pytest

from arrayidx import (
    ContractViolation,
    Index0d,
    Index2d,
    Index3d,
    IndexNd,
    iter_coordinates,
    unravel_flat_index,
)
from arrayidx.index import INDEX_TYPES_BY_RANK


def test_iter_coordinates_walks_axis_zero_fastest() -> None:
    assert list(iter_coordinates(Index2d(2, 3))) == [
        Index2d(0, 0),
        Index2d(1, 0),
        Index2d(0, 1),
        Index2d(1, 1),
        Index2d(0, 2),
        Index2d(1, 2),
    ]


def test_iter_coordinates_rank_zero_yields_one_coordinate() -> None:
    assert list(iter_coordinates(Index0d())) == [Index0d()]
    assert list(iter_coordinates(IndexNd(()))) == [IndexNd(())]


def test_iter_coordinates_empty_shape_yields_nothing() -> None:
    assert list(iter_coordinates(Index3d(2, 0, 3))) == []


@pytest.mark.parametrize("rank", range(6))
def test_iter_coordinates_enumerates_flat_indices_in_order(rank: int) -> None:
    shape = INDEX_TYPES_BY_RANK[rank].from_nd([2, 3, 1, 2, 3][:rank])
    stride = shape.to_packed_stride()

    flat = [coordinate.flat_index(stride) for coordinate in iter_coordinates(shape)]
    assert flat == list(range(shape.flat_len()))


@pytest.mark.parametrize("rank", range(6))
def test_unravel_flat_index_inverts_flat_index(rank: int) -> None:
    shape = INDEX_TYPES_BY_RANK[rank].from_nd([3, 2, 2, 1, 2][:rank])
    stride = shape.to_packed_stride()

    for flat in range(shape.flat_len()):
        coordinate = unravel_flat_index(flat, shape)
        assert type(coordinate) is type(shape)
        assert coordinate.flat_index(stride) == flat


def test_unravel_flat_index_variable_rank() -> None:
    shape = IndexNd((2, 3, 2, 2, 2, 2))

    assert unravel_flat_index(7, shape) == IndexNd((1, 0, 1, 0, 0, 0))


@pytest.mark.parametrize("flat", [-1, 6, 100])
def test_unravel_flat_index_rejects_out_of_range(flat: int) -> None:
    with pytest.raises(ContractViolation) as error:
        unravel_flat_index(flat, Index2d(2, 3))

    assert error.value.code == "flat_index_out_of_range"
    assert error.value.data == {"flat": flat, "flat_len": 6}


def test_unravel_flat_index_empty_shape_has_no_valid_offset() -> None:
    with pytest.raises(ContractViolation):
        unravel_flat_index(0, Index2d(0, 3))
