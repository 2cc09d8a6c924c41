import pytest

from bnposeidon import sparse_constants_b, sparse_constants_c
from bnposeidon.field import MODULUS
from bnposeidon.round_constants import M_MATRIX
from bnposeidon.sparse_constants_c import (
    FIRST_ROUND,
    LAST_ROUND,
    SPARSE_ROW_LENGTH,
    sparse_row,
)


def test_covers_rounds_38_to_55():
    assert FIRST_ROUND == 38
    assert LAST_ROUND == 55
    assert len(sparse_row(38)) == SPARSE_ROW_LENGTH
    assert len(sparse_row(55)) == SPARSE_ROW_LENGTH
    with pytest.raises(IndexError):
        sparse_row(37)
    with pytest.raises(IndexError):
        sparse_row(56)


def test_follows_previous_block():
    assert sparse_constants_b.LAST_ROUND + 1 == sparse_constants_c.FIRST_ROUND
    assert len(sparse_constants_b.sparse_row(37)) == SPARSE_ROW_LENGTH
    assert len(sparse_constants_c.sparse_row(38)) == SPARSE_ROW_LENGTH
    with pytest.raises(IndexError):
        sparse_constants_b.sparse_row(38)
    with pytest.raises(IndexError):
        sparse_constants_c.sparse_row(37)


@pytest.mark.parametrize("round_index", range(38, 56))
def test_rows_have_seven_canonical_elements(round_index):
    row = sparse_row(round_index)
    assert len(row) == SPARSE_ROW_LENGTH
    assert all(0 <= value < MODULUS for value in row)


@pytest.mark.parametrize("round_index", range(38, 56))
def test_rows_start_with_mds_corner(round_index):
    assert sparse_row(round_index)[0] == M_MATRIX[0][0]


def test_first_round_values():
    row = sparse_row(38)
    assert row[1] == 11946781549111733342374437686417901919881339755720725189559112628795817706603
    assert row[6] == 3733704884118300721043768874060062456481930803626613247865795986430463043840


def test_last_round_tail_matches_mds_first_row():
    row = sparse_row(55)
    assert row[4:] == M_MATRIX[0][1:]
    assert row[1] == 17817950236968355275450565661453279500832679749582869473068209804712565393928


def test_middle_round_value():
    assert sparse_row(47)[3] == (
        3722997355103511782752507300407310792223403249171458092438045493962181025019
    )


def test_rows_are_distinct():
    rows = [sparse_row(i) for i in range(FIRST_ROUND, LAST_ROUND + 1)]
    assert len(set(rows)) == len(rows)


@pytest.mark.parametrize("round_index", [-1, 0, 18, 37, 56, 100])
def test_out_of_range_rounds_raise(round_index):
    with pytest.raises(IndexError):
        sparse_row(round_index)


@pytest.mark.parametrize("round_index", [True, 40.0, "40", None])
def test_non_integer_rounds_raise(round_index):
    with pytest.raises(TypeError):
        sparse_row(round_index)