# Symbol table shared by every other module.
# The order is fixed: 'z' sits at position 0, then 'a'..'y' follow,
# so a=1, b=2, ..., y=25, z=0.

ALPHABET = "zabcdefghijklmnopqrstuvwxy"
N = len(ALPHABET)

_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def index_of(symbol: str) -> int:
    return _INDEX[symbol]


def symbol_at(index: int) -> str:
    if not 0 <= index < N:
        raise IndexError(f"alphabet index out of range: {index}")
    return ALPHABET[index]
