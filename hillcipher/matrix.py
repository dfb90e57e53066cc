"""
2x2 matrix helpers for the Hill cipher.

For a key  K = [[a, b],
                [c, d]]
    det(K)      = a*d - b*c
    adj(K)      = [[ d, -b],
                   [-c,  a]]
    K^-1 mod N  = det^-1 * adj(K)   (mod N), det^-1 taken mod N
"""
from numbers import Integral
from typing import List, Sequence

import numpy as np

from .alphabet import N
from .errors import InvalidKeyError
from .modular import mod_inverse, reduce

Matrix = List[List[int]]


def as_key_matrix(m: Sequence[Sequence[int]]) -> Matrix:
    """Checks the shape of a caller-supplied key and returns a fresh 2x2 list."""
    try:
        rows = [list(row) for row in m]
    except TypeError:
        raise InvalidKeyError("key must be a 2x2 matrix of integers")
    if len(rows) != 2 or any(len(row) != 2 for row in rows):
        raise InvalidKeyError("key must be a 2x2 matrix of integers")
    for row in rows:
        for v in row:
            if isinstance(v, bool) or not isinstance(v, Integral):
                raise InvalidKeyError(f"key entries must be integers (got {v!r})")
    return [[int(v) for v in row] for row in rows]


def determinant2x2(m: Matrix) -> int:
    return m[0][0] * m[1][1] - m[0][1] * m[1][0]


def is_valid_key(m: Matrix, n: int = N) -> bool:
    """
    Key acceptance rule:
      - determinant must not be 0
      - |det - n| must not be 1 (det = 25 or det = 27 for n = 26)
    Invertibility mod n is only checked when decrypting.
    """
    det = determinant2x2(m)
    if det == 0:
        return False
    if abs(det - n) == 1:
        return False
    return True


def cofactor_matrix2x2(m: Matrix) -> Matrix:
    return [[m[1][1], -m[0][1]],
            [-m[1][0], m[0][0]]]


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """
    Plain p x q by q x r product, no modular reduction.
    object dtype keeps Python ints, so large entries cannot overflow.
    """
    A = np.array(a, dtype=object)
    B = np.array(b, dtype=object)
    if A.ndim != 2 or B.ndim != 2:
        raise ValueError("multiply expects two 2-D matrices")
    if A.shape[1] != B.shape[0]:
        raise ValueError(f"shape mismatch: {A.shape[0]}x{A.shape[1]} "
                         f"by {B.shape[0]}x{B.shape[1]}")
    return (A @ B).tolist()


def inverse_key_mod(m: Matrix, n: int = N) -> Matrix:
    """
    Modular inverse of a 2x2 key: det^-1 * adj(K), each entry reduced mod n.
    Raises NoInverseError when gcd(det, n) != 1.
    """
    cof = cofactor_matrix2x2(m)
    det_inv = mod_inverse(determinant2x2(m), n)
    return [[reduce(v * det_inv, n) for v in row] for row in cof]


def format_matrix(m: Matrix) -> str:
    return "\n".join(" ".join(f"{v:3}" for v in row) for row in m)
