# bnposeidon

Poseidon hashing over the BN254 scalar field, with a sponge that absorbs
64-bit Goldilocks field elements. The permutation has a state width of 4,
8 full rounds and 56 partial rounds, with the partial rounds in their
sparse-matrix form.

All values are plain Python integers. Functions accept integers or decimal
strings and reduce them modulo the BN254 scalar field order
(`bnposeidon.field.MODULUS`).

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using it

```python
from bnposeidon.poseidon import permute, hash_no_pad, hash_or_noop, two_to_one, to_vec

# The raw permutation over a width-4 state; returns a tuple of four integers.
state = permute([0, 1, 2, 3])

# Hash a list of Goldilocks elements. Three elements are packed into each
# BN254 element as little-endian 64-bit limbs, and nine elements (three
# BN254 elements) are absorbed per permutation. An empty input gives 0.
digest = hash_no_pad([1, 2, 3, 4, 5])

# Up to three elements are packed directly rather than hashed; longer
# inputs go through hash_no_pad.
packed = hash_or_noop([7, 8])

# Compress two digests into one.
root = two_to_one(digest, packed)

# Split a digest into little-endian 56-bit chunks covering the field's
# 254 bits: four chunks of 56 bits and a final chunk of 30 bits.
limbs = to_vec(root)
```

Wrong input shapes raise exceptions: `permute` raises `ValueError` unless the
state holds exactly four elements, and non-numeric strings raise `ValueError`.

## Building blocks

- `bnposeidon.field`: `MODULUS`, and `to_field`, `exp5` and `mul_acc` over
  the BN254 scalar field.
- `bnposeidon.round_constants`: the additive round constants `C_CONSTANTS`
  and the matrices `M_MATRIX` and `P_MATRIX`, with `ark(state, offset)` and
  `mix(state, matrix)`.
- `bnposeidon.sparse_constants_a`, `bnposeidon.sparse_constants_b` and
  `bnposeidon.sparse_constants_c`: the sparse rows for partial rounds 0–18,
  19–37 and 38–55, each through `sparse_row(round_index)`, which raises
  `IndexError` for rounds outside its range.

## What it does not do

- It computes hashes directly on integers; it does not build arithmetic
  circuits or constraints.
- It has no Poseidon permutation over the Goldilocks field itself; only the
  BN254 permutation is provided.
- Hash inputs are reduced modulo the BN254 field, not checked to be valid
  Goldilocks elements.
- There is no command-line tool.