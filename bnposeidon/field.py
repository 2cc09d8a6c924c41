"""Arithmetic in the BN254 scalar field."""

from __future__ import annotations

MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617
"""Order of the BN254 scalar field."""


def to_field(value: int | str) -> int:
    """Return ``value`` reduced into the range ``[0, MODULUS)``.

    Accepts integers and decimal strings. Negative numbers are mapped to
    their canonical representative.
    """
    if isinstance(value, bool):
        raise TypeError("booleans are not field elements")
    if isinstance(value, str):
        text = value.strip()
        if not text or not text.lstrip("-").isdigit():
            raise ValueError(f"not a decimal integer: {value!r}")
        return int(text, 10) % MODULUS
    if isinstance(value, int):
        return value % MODULUS
    raise TypeError(f"cannot convert {type(value).__name__} to a field element")


def exp5(x: int | str) -> int:
    """Return ``x`` raised to the fifth power in the field."""
    return pow(to_field(x), 5, MODULUS)


def mul_acc(acc: int | str, a: int | str, b: int | str) -> int:
    """Return ``acc + a * b`` in the field."""
    return (to_field(acc) + to_field(a) * to_field(b)) % MODULUS