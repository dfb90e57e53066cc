"""
Hill cipher engine (2x2 key, 26-letter alphabet).

    c = K . p        (mod 26)   encryption
    p = K^-1 . c     (mod 26)   decryption

Usage:
    HillCipher().set_key([[3, 3], [2, 5]]).set_message("ba").encrypt().get_result()
    -> 'ii'
"""
from typing import List, Optional, Sequence

from .alphabet import N
from .codec import ColumnVector, decode, encode, normalize
from .errors import InvalidKeyError, StateError
from .matrix import (Matrix, as_key_matrix, determinant2x2, format_matrix,
                     inverse_key_mod, is_valid_key, multiply)


# ==============================
# Pipeline: encode -> transform -> decode
# ==============================

def transform(key: Matrix, vectors: Sequence[ColumnVector]) -> List[ColumnVector]:
    """Multiply every column vector by the key (entries left unreduced)."""
    return [ColumnVector.from_matrix(multiply(key, v.as_matrix())) for v in vectors]


def encrypt(message: str, key: Sequence[Sequence[int]]) -> str:
    return HillCipher().set_key(key).set_message(message).encrypt().get_result()


def decrypt(message: str, key: Sequence[Sequence[int]]) -> str:
    return HillCipher().set_key(key).set_message(message).decrypt().get_result()


# ==============================
# Engine
# ==============================

class HillCipher:
    """
    Chainable configure -> operate -> result object.

    One instance per caller; it holds the key, the normalized message
    and the last result, nothing else. decrypt() works on a local copy
    of the inverse key, so the configured key never changes.
    """

    def __init__(self, verbose: int = 0):
        self.verbose = verbose
        self._key: Optional[Matrix] = None
        self._message: Optional[str] = None
        self._result: Optional[str] = None

    @property
    def key(self) -> Optional[Matrix]:
        return None if self._key is None else [row[:] for row in self._key]

    @property
    def message(self) -> Optional[str]:
        return self._message

    def set_key(self, matrix: Sequence[Sequence[int]]) -> "HillCipher":
        key = as_key_matrix(matrix)
        det = determinant2x2(key)
        if not is_valid_key(key):
            raise InvalidKeyError(
                f"invalid key: determinant {det} is 0 or differs from {N} by 1")
        self._key = key
        if self.verbose >= 1:
            print(f"[KEY] accepted, det = {det}")
            if self.verbose >= 2:
                print(format_matrix(key))
        return self

    def set_message(self, text: str) -> "HillCipher":
        self._message = normalize(text)
        if self.verbose >= 1:
            print(f"[MSG] {len(self._message)} letter(s): {self._message}")
        return self

    def inverse_key(self) -> Matrix:
        self._require_key()
        inv = inverse_key_mod(self._key)
        if self.verbose >= 1:
            print("[INV] inverse key mod 26:")
            print(format_matrix(inv))
        return inv

    def encrypt(self) -> "HillCipher":
        self._require_key()
        self._result = self._run(self._key, "ENC")
        return self

    def decrypt(self) -> "HillCipher":
        self._require_key()
        self._require_message()
        self._result = self._run(self.inverse_key(), "DEC")
        return self

    def get_result(self) -> str:
        if self._result is None:
            raise StateError("no result yet: call encrypt() or decrypt() first")
        return self._result

    # ------------------------------

    def _require_key(self):
        if self._key is None:
            raise StateError("no key set")

    def _require_message(self):
        if self._message is None:
            raise StateError("no message set")
        if not self._message:
            raise StateError("message has no alphabetic characters")

    def _run(self, key: Matrix, tag: str) -> str:
        self._require_message()
        vectors = encode(self._message)
        if self.verbose >= 1:
            print(f"[{tag}] {len(vectors)} block(s)")
        out = transform(key, vectors)
        if self.verbose >= 2:
            for v, o in zip(vectors, out):
                print(f"[BLK] ({v.top:2d}, {v.bottom:2d}) -> "
                      f"({o.top:4d}, {o.bottom:4d}) -> "
                      f"{decode([v])} -> {decode([o])}")
        result = decode(out)
        if self.verbose >= 1:
            print(f"[{tag}] result = {result}")
        return result
