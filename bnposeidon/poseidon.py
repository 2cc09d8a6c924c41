"""Poseidon permutation and sponge hashing over the BN254 scalar field.

Inputs to the hashing functions are Goldilocks field elements, packed three
at a time into a single BN254 element before absorption.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from . import sparse_constants_a, sparse_constants_b, sparse_constants_c
from .field import MODULUS, exp5, mul_acc, to_field
from .round_constants import C_CONSTANTS, M_MATRIX, P_MATRIX, SPONGE_WIDTH, ark, mix

FULL_ROUNDS = 8
PARTIAL_ROUNDS = 56
SPONGE_RATE = 3

GOLDILOCKS_PER_ELEMENT = 3
"""Number of Goldilocks elements packed into one BN254 element."""

TO_VEC_CHUNK_BITS = 56
"""Width of the chunks produced by :func:`to_vec`; 64-bit chunks could collide."""

_HALF_FULL_ROUNDS = FULL_ROUNDS // 2
_SPARSE_TABLES = (sparse_constants_a, sparse_constants_b, sparse_constants_c)


def _sparse_row(round_index: int) -> tuple[int, ...]:
    for table in _SPARSE_TABLES:
        if table.FIRST_ROUND <= round_index <= table.LAST_ROUND:
            return table.sparse_row(round_index)
    raise IndexError(f"no sparse constants for partial round {round_index}")


def _exp5_state(state: Sequence[int]) -> tuple[int, ...]:
    return tuple(exp5(x) for x in state)


def _full_rounds(state: Sequence[int], is_first: bool) -> tuple[int, ...]:
    for i in range(_HALF_FULL_ROUNDS - 1):
        state = _exp5_state(state)
        if is_first:
            offset = (i + 1) * SPONGE_WIDTH
        else:
            offset = (
                (_HALF_FULL_ROUNDS + 1) * SPONGE_WIDTH
                + PARTIAL_ROUNDS
                + i * SPONGE_WIDTH
            )
        state = mix(ark(state, offset), M_MATRIX)

    state = _exp5_state(state)
    if is_first:
        return mix(ark(state, _HALF_FULL_ROUNDS * SPONGE_WIDTH), P_MATRIX)
    return mix(state, M_MATRIX)


def _partial_rounds(state: Sequence[int]) -> tuple[int, ...]:
    s = list(state)
    base = (_HALF_FULL_ROUNDS + 1) * SPONGE_WIDTH
    for i in range(PARTIAL_ROUNDS):
        s[0] = (exp5(s[0]) + C_CONSTANTS[base + i]) % MODULUS
        row = _sparse_row(i)
        new_first = sum(c * v for c, v in zip(row[:SPONGE_WIDTH], s)) % MODULUS
        first = s[0]
        s[1:] = [mul_acc(v, first, f) for v, f in zip(s[1:], row[SPONGE_WIDTH:])]
        s[0] = new_first
    return tuple(s)


def permute(state: Sequence[int | str]) -> tuple[int, ...]:
    """Apply the Poseidon permutation to a state of four field elements."""
    if len(state) != SPONGE_WIDTH:
        raise ValueError(f"state must hold {SPONGE_WIDTH} elements, got {len(state)}")
    current = ark(tuple(to_field(x) for x in state), 0)
    current = _full_rounds(current, True)
    current = _partial_rounds(current)
    return _full_rounds(current, False)


def _pack(elements: Sequence[int]) -> int:
    """Combine elements as little-endian 64-bit limbs into one field element."""
    total = 0
    for k, value in enumerate(elements):
        total = mul_acc(total, value, 1 << (64 * k))
    return total


def hash_no_pad(inputs: Iterable[int | str]) -> int:
    """Hash Goldilocks elements without padding, returning one field element.

    Elements are absorbed nine at a time; each group of three fills one rate
    slot of the state. An empty input hashes to zero.
    """
    elements = [to_field(x) for x in inputs]
    state = [0] * SPONGE_WIDTH
    block = SPONGE_RATE * GOLDILOCKS_PER_ELEMENT
    for start in range(0, len(elements), block):
        chunk = elements[start : start + block]
        groups = range(0, len(chunk), GOLDILOCKS_PER_ELEMENT)
        for slot, offset in enumerate(groups, start=1):
            state[slot] = _pack(chunk[offset : offset + GOLDILOCKS_PER_ELEMENT])
        state = list(permute(state))
    return state[0]


def hash_or_noop(inputs: Iterable[int | str]) -> int:
    """Pack up to three elements directly; hash longer inputs with :func:`hash_no_pad`."""
    elements = [to_field(x) for x in inputs]
    if len(elements) <= GOLDILOCKS_PER_ELEMENT:
        return _pack(elements)
    return hash_no_pad(elements)


def two_to_one(left: int | str, right: int | str) -> int:
    """Compress two digests into one."""
    return permute((0, 0, left, right))[0]


def to_vec(digest: int | str) -> list[int]:
    """Split a digest into 56-bit little-endian chunks covering the field's bit length."""
    value = to_field(digest)
    bit_length = MODULUS.bit_length()
    chunks = []
    for start in range(0, bit_length, TO_VEC_CHUNK_BITS):
        width = min(TO_VEC_CHUNK_BITS, bit_length - start)
        chunks.append((value >> start) & ((1 << width) - 1))
    return chunks