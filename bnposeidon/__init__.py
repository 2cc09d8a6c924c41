"""Poseidon permutation and sponge hashing over the BN254 scalar field for Goldilocks inputs."""

__version__ = "0.1.0"
__all__ = [
    "field",
    "round_constants",
    "sparse_constants_a",
    "sparse_constants_b",
    "sparse_constants_c",
    "poseidon",
]