from Crypto.Util.number import GCD, inverse

from .alphabet import N
from .errors import NoInverseError


def _trunc_rem(x: int, n: int) -> int:
    # remainder with the sign of the dividend (C-style %)
    r = abs(x) % n
    return -r if x < 0 else r


def reduce(x: int, n: int = N) -> int:
    """
    Bring any integer into the residue range [0, n).

    Non-negative values are reduced the usual way. Negative values use the
    truncated remainder, which is <= 0, and are shifted back up by n:
        reduce(-1)  -> 26 + (-1)  = 25
        reduce(-27) -> 26 + (-1)  = 25
    A negative exact multiple of n gives remainder 0; that lands on 0,
    never on n itself.
    """
    if x >= 0:
        if x < n:
            return x
        return x % n
    r = n + _trunc_rem(x, n)
    return 0 if r == n else r


def mod_inverse(a: int, n: int = N) -> int:
    """
    Returns b with (a * b) mod n == 1.
    Raises NoInverseError when gcd(a, n) != 1 (0 included).
    """
    a = reduce(a, n)
    if GCD(a, n) != 1:
        raise NoInverseError(f"{a} has no inverse modulo {n} (gcd = {GCD(a, n)})")
    return inverse(a, n)
