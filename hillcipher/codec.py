"""
Text <-> column vectors.

    "Hello!" -> "hello" -> "helloo" -> [8, 5, 12, 12, 15, 15]
             -> (8, 5) (12, 12) (15, 15)

Each pair becomes a 2x1 column vector [[top], [bottom]] that the key
matrix multiplies from the left.
"""
import re
from typing import Iterable, List, NamedTuple, Sequence

from .alphabet import index_of, symbol_at
from .modular import reduce

_NON_LETTERS = re.compile(r"[^a-zA-Z]")


class ColumnVector(NamedTuple):
    top: int
    bottom: int

    def as_matrix(self) -> List[List[int]]:
        return [[self.top], [self.bottom]]

    @classmethod
    def from_matrix(cls, m: Sequence[Sequence[int]]) -> "ColumnVector":
        if len(m) != 2 or len(m[0]) != 1 or len(m[1]) != 1:
            raise ValueError("column vector must be a 2x1 matrix")
        return cls(m[0][0], m[1][0])


def normalize(text: str) -> str:
    """Keep ASCII letters only, lowercased."""
    return _NON_LETTERS.sub("", text).lower()


def pad(text: str) -> str:
    # odd length: repeat the last letter ("abc" -> "abcc")
    if len(text) % 2 != 0:
        return text + text[-1]
    return text


def encode(message: str) -> List[ColumnVector]:
    text = pad(normalize(message))
    ords = [index_of(ch) for ch in text]
    return [ColumnVector(ords[i], ords[i + 1]) for i in range(0, len(ords), 2)]


def decode(vectors: Iterable[ColumnVector]) -> str:
    """Flatten the vectors in order, reduce every entry mod N, map to letters."""
    out = []
    for vec in vectors:
        for value in vec:
            out.append(symbol_at(reduce(value)))
    return "".join(out)
