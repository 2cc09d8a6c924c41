import pytest
from hypothesis import given
from hypothesis import strategies as st

from bnposeidon import sparse_constants_a, sparse_constants_b
from bnposeidon.field import MODULUS
from bnposeidon.sparse_constants_b import (
    FIRST_ROUND,
    LAST_ROUND,
    SPARSE_ROW_LENGTH,
    sparse_row,
)

HEAD = 16023668707004248971294664614290028914393192768609916554276071736843535714477


def test_rounds_follow_previous_table():
    assert FIRST_ROUND == sparse_constants_a.LAST_ROUND + 1
    assert FIRST_ROUND == 19
    assert LAST_ROUND == 37
    assert len(sparse_constants_a.sparse_row(18)) == SPARSE_ROW_LENGTH
    assert len(sparse_constants_b.sparse_row(19)) == SPARSE_ROW_LENGTH
    with pytest.raises(IndexError):
        sparse_constants_a.sparse_row(19)
    with pytest.raises(IndexError):
        sparse_constants_b.sparse_row(18)


def test_first_row_matches_source():
    row = sparse_row(19)
    assert row[0] == HEAD
    assert row[1] == 19330308615634016202275470394593918283291746889176278663184951919223544096896
    assert row[6] == 8893687738651874055934077641258880070065696892648906132887857010931807062812


def test_last_row_matches_source():
    row = sparse_row(37)
    assert row[1] == 19155409025424437690664522806909434551970754598652921692474864449826455337216
    assert row[-1] == 20650062109272119754567889432541551183228545711882667368558930819623066285550


def test_middle_row_matches_source():
    row = sparse_row(26)
    assert row[4] == 164209740719129725777909013206421786172977937257506729867551471718043494039


@pytest.mark.parametrize("round_index", range(19, 38))
def test_every_row_shape(round_index):
    row = sparse_row(round_index)
    assert len(row) == SPARSE_ROW_LENGTH
    assert row[0] == HEAD
    assert all(0 <= value < MODULUS for value in row)


def test_rows_are_distinct():
    rows = [sparse_row(i) for i in range(FIRST_ROUND, LAST_ROUND + 1)]
    assert len(set(rows)) == len(rows)


def test_no_overlap_with_previous_table():
    ours = {
        v
        for i in range(FIRST_ROUND, LAST_ROUND + 1)
        for v in sparse_constants_b.sparse_row(i)[1:]
    }
    theirs = {
        v
        for i in range(sparse_constants_a.FIRST_ROUND, sparse_constants_a.LAST_ROUND + 1)
        for v in sparse_constants_a.sparse_row(i)[1:]
    }
    assert ours
    assert theirs
    assert ours.isdisjoint(theirs)


@pytest.mark.parametrize("round_index", [0, 18, 38, 55, -1])
def test_out_of_range_rounds(round_index):
    with pytest.raises(IndexError):
        sparse_row(round_index)


@pytest.mark.parametrize("round_index", [True, 19.0, "19", None])
def test_non_integer_round(round_index):
    with pytest.raises(TypeError):
        sparse_row(round_index)


@given(st.integers())
def test_any_integer_either_row_or_index_error(round_index):
    if FIRST_ROUND <= round_index <= LAST_ROUND:
        assert sparse_row(round_index) == sparse_constants_b.ROWS[round_index - FIRST_ROUND]
    else:
        with pytest.raises(IndexError):
            sparse_row(round_index)