import pytest
from hypothesis import given
from hypothesis import strategies as st

from bnposeidon.field import MODULUS, exp5, mul_acc, to_field

R_MINUS_ONE = "21888242871839275222246405745257275088548364400416034343698204186575808495616"

elements = st.integers(min_value=-(2**300), max_value=2**300)


def test_modulus_reduces_to_zero():
    assert to_field(MODULUS) == 0


def test_decimal_string_of_largest_element():
    assert to_field(R_MINUS_ONE) == MODULUS - 1


def test_negative_one_maps_to_largest_element():
    assert to_field(-1) == to_field(R_MINUS_ONE)


def test_bad_string_rejected():
    with pytest.raises(ValueError):
        to_field("abc")


def test_float_rejected():
    with pytest.raises(TypeError):
        to_field(1.5)


def test_bool_rejected():
    with pytest.raises(TypeError):
        to_field(True)


@given(elements)
def test_to_field_in_range_and_idempotent(value):
    reduced = to_field(value)
    assert 0 <= reduced < MODULUS
    assert to_field(reduced) == reduced
    assert to_field(str(value)) == reduced


def test_exp5_small_value():
    assert exp5(2) == 32


def test_exp5_of_minus_one():
    assert exp5(R_MINUS_ONE) == MODULUS - 1


@given(elements, elements)
def test_exp5_is_multiplicative(a, b):
    assert exp5(a * b) == exp5(a) * exp5(b) % MODULUS


@given(elements)
def test_exp5_ignores_representative(a):
    assert exp5(a) == exp5(a + MODULUS)


@given(elements, elements, elements)
def test_mul_acc_commutes_in_factors(acc, a, b):
    assert mul_acc(acc, a, b) == mul_acc(acc, b, a)


@given(elements, elements)
def test_mul_acc_with_zero_factor(acc, a):
    assert mul_acc(acc, a, 0) == to_field(acc)


@given(elements)
def test_mul_acc_with_unit_factor(a):
    assert mul_acc(0, a, 1) == to_field(a)


@given(elements, elements, elements, elements)
def test_mul_acc_chains_additively(acc, a, b, c):
    assert mul_acc(mul_acc(acc, a, b), a, c) == mul_acc(acc, a, b + c)