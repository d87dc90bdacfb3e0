import numpy as np
import pytest

from arrayidx import (
    Ax,
    AxisError,
    ContractViolation,
    Index0d,
    Index1d,
    Index2d,
    Index3d,
    Index4d,
    Index5d,
    IndexNd,
)
from arrayidx.index import INDEX_TYPES_BY_RANK

SAMPLES = {
    0: [],
    1: [7],
    2: [3, 4],
    3: [2, 3, 4],
    4: [5, 1, 2, 3],
    5: [2, 3, 1, 4, 6],
}


@pytest.mark.parametrize("rank", range(6))
def test_zero_is_all_zero_and_has_rank(rank: int) -> None:
    index_type = INDEX_TYPES_BY_RANK[rank]
    zero = index_type.zero()

    assert zero.to_nd() == [0] * rank
    assert zero.dim() == rank
    assert zero.ndim == rank
    assert index_type.RANK == rank


@pytest.mark.parametrize("rank", range(6))
def test_from_nd_round_trips_through_to_nd(rank: int) -> None:
    index_type = INDEX_TYPES_BY_RANK[rank]
    index = index_type.from_nd(SAMPLES[rank])

    assert index.to_nd() == SAMPLES[rank]
    assert list(index) == SAMPLES[rank]
    assert index_type.from_nd(index.to_nd()) == index


@pytest.mark.parametrize("rank", range(6))
def test_from_nd_rejects_wrong_length(rank: int) -> None:
    index_type = INDEX_TYPES_BY_RANK[rank]

    with pytest.raises(ContractViolation) as error:
        index_type.from_nd([1] * (rank + 1))

    assert error.value.code == "rank_mismatch"
    assert error.value.data["expected"] == rank
    assert error.value.data["got"] == rank + 1


def test_rank_zero_has_exactly_one_value() -> None:
    assert Index0d() == Index0d.zero()
    assert Index0d.from_nd([]) == Index0d()
    assert hash(Index0d()) == hash(Index0d.zero())


def test_components_accept_numpy_integers() -> None:
    index = Index3d.from_nd(np.array([2, 3, 4], dtype=np.int64))

    assert index == Index3d(2, 3, 4)
    assert all(type(component) is int for component in index)


def test_components_reject_non_integers() -> None:
    with pytest.raises(TypeError):
        Index2d(1.5, 2)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Index1d(True)


def test_components_reject_negative_values() -> None:
    with pytest.raises(ContractViolation) as error:
        Index3d(1, -2, 3)

    assert error.value.code == "negative_component"
    assert error.value.data == {"index_type": "Index3d", "axis": 1, "value": -2}


def test_equality_is_structural_and_type_sensitive() -> None:
    assert Index2d(3, 4) == Index2d(3, 4)
    assert Index2d(3, 4) != Index2d(4, 3)
    assert Index2d(3, 4) != IndexNd((3, 4))
    assert len({Index2d(3, 4), Index2d(3, 4), Index2d(4, 3)}) == 2


def test_repr_lists_components_in_axis_order() -> None:
    assert repr(Index0d()) == "Index0d()"
    assert repr(Index3d(2, 3, 4)) == "Index3d(2, 3, 4)"


def test_indices_are_immutable() -> None:
    index = Index2d(3, 4)
    with pytest.raises(AttributeError):
        index.ax0 = 5  # type: ignore[misc]


@pytest.mark.parametrize("rank", range(6))
def test_index_add_and_sub_are_componentwise(rank: int) -> None:
    index_type = INDEX_TYPES_BY_RANK[rank]
    base = index_type.from_nd([10 * (axis + 1) for axis in range(rank)])
    shift = index_type.from_nd([axis + 1 for axis in range(rank)])

    total = base.index_add(shift)
    assert total.to_nd() == [11 * (axis + 1) for axis in range(rank)]
    assert total.index_sub(shift) == base


def test_index_add_rejects_other_rank() -> None:
    with pytest.raises(ContractViolation) as error:
        Index2d(1, 2).index_add(Index3d(1, 2, 3))  # type: ignore[arg-type]

    assert error.value.code == "rank_mismatch"
    assert error.value.data["expected"] == 2
    assert error.value.data["got"] == 3


def test_index_sub_underflow_is_reported() -> None:
    with pytest.raises(ContractViolation) as error:
        Index2d(1, 2).index_sub(Index2d(2, 0))

    assert error.value.code == "negative_component"


@pytest.mark.parametrize("rank", range(5))
def test_index_prepend_inserts_new_inside_axis(rank: int) -> None:
    index = INDEX_TYPES_BY_RANK[rank].from_nd(SAMPLES[rank])
    grown = index.index_prepend(9)

    assert type(grown) is INDEX_TYPES_BY_RANK[rank + 1]
    assert grown.to_nd() == [9, *SAMPLES[rank]]
    assert grown.inside() == 9


@pytest.mark.parametrize("rank", range(5))
def test_index_append_inserts_new_outside_axis(rank: int) -> None:
    index = INDEX_TYPES_BY_RANK[rank].from_nd(SAMPLES[rank])
    grown = index.index_append(9)

    assert type(grown) is INDEX_TYPES_BY_RANK[rank + 1]
    assert grown.to_nd() == [*SAMPLES[rank], 9]
    assert grown.outside() == 9


@pytest.mark.parametrize("rank", range(1, 6))
def test_index_at_reads_every_axis(rank: int) -> None:
    index = INDEX_TYPES_BY_RANK[rank].from_nd(SAMPLES[rank])

    for axis in range(rank):
        assert index.index_at(axis) == SAMPLES[rank][axis]
        assert index.index_at(Ax(axis)) == SAMPLES[rank][axis]
        assert index[axis] == SAMPLES[rank][axis]


@pytest.mark.parametrize("rank", range(6))
def test_index_at_rejects_out_of_range_axes(rank: int) -> None:
    index = INDEX_TYPES_BY_RANK[rank].from_nd(SAMPLES[rank])

    for axis in (-1, rank, rank + 3):
        with pytest.raises(AxisError) as error:
            index.index_at(axis)
        assert error.value.code == "axis_out_of_range"
        assert error.value.data["axis"] == axis
        assert error.value.data["rank"] == rank


def test_axis_error_is_also_an_index_error() -> None:
    with pytest.raises(IndexError):
        Index2d(3, 4)[2]


@pytest.mark.parametrize("rank", range(1, 6))
def test_index_cut_removes_one_axis_and_keeps_order(rank: int) -> None:
    index = INDEX_TYPES_BY_RANK[rank].from_nd(SAMPLES[rank])

    for axis in range(rank):
        cut = index.index_cut(axis)
        expected = SAMPLES[rank][:axis] + SAMPLES[rank][axis + 1 :]
        assert type(cut) is INDEX_TYPES_BY_RANK[rank - 1]
        assert cut.to_nd() == expected


@pytest.mark.parametrize("rank", range(1, 6))
def test_index_cut_rejects_out_of_range_axes(rank: int) -> None:
    index = INDEX_TYPES_BY_RANK[rank].from_nd(SAMPLES[rank])

    with pytest.raises(AxisError):
        index.index_cut(rank)
    with pytest.raises(AxisError):
        index.index_cut(-1)


def test_index_cut_on_rank_zero_is_a_self_loop() -> None:
    assert Index0d().index_cut(0) == Index0d()
    assert Index0d().index_cut(Ax(3)) == Index0d()


@pytest.mark.parametrize("rank", range(5))
def test_append_then_cut_last_axis_round_trips(rank: int) -> None:
    index = INDEX_TYPES_BY_RANK[rank].from_nd(SAMPLES[rank])

    assert index.index_append(11).index_cut(rank) == index


@pytest.mark.parametrize("rank", range(5))
def test_prepend_then_cut_axis_zero_round_trips(rank: int) -> None:
    index = INDEX_TYPES_BY_RANK[rank].from_nd(SAMPLES[rank])

    assert index.index_prepend(11).index_cut(0) == index


def test_inside_and_outside_pick_first_and_last_axes() -> None:
    assert Index1d(7).inside() == 7
    assert Index1d(7).outside() == 7
    assert Index4d(5, 1, 2, 3).inside() == 5
    assert Index4d(5, 1, 2, 3).outside() == 3
    assert Index5d(2, 3, 1, 4, 6).outside() == 6


def test_rank_zero_inside_outside_and_flat_len_are_one() -> None:
    assert Index0d().inside() == 1
    assert Index0d().outside() == 1
    assert Index0d().flat_len() == 1
    assert Index0d().flat_index(Index0d()) == 0


def test_rank_zero_index_at_always_fails() -> None:
    with pytest.raises(AxisError) as error:
        Index0d().index_at(0)

    assert error.value.help == "rank 0 has no axes"


@pytest.mark.parametrize("rank", range(1, 6))
def test_flat_len_is_product_of_components(rank: int) -> None:
    index = INDEX_TYPES_BY_RANK[rank].from_nd(SAMPLES[rank])

    assert index.flat_len() == int(np.prod(SAMPLES[rank]))


@pytest.mark.parametrize("rank", range(1, 6))
def test_flat_len_is_zero_with_any_zero_extent(rank: int) -> None:
    for axis in range(rank):
        extents = list(SAMPLES[rank])
        extents[axis] = 0
        assert INDEX_TYPES_BY_RANK[rank].from_nd(extents).flat_len() == 0


def test_flat_index_is_dot_product() -> None:
    coordinate = Index3d(1, 2, 3)
    stride = Index3d(1, 10, 100)

    assert coordinate.flat_index(stride) == 321


def test_flat_index_rejects_other_rank_stride() -> None:
    with pytest.raises(ContractViolation):
        Index3d(1, 2, 3).flat_index(Index2d(1, 2))  # type: ignore[arg-type]
