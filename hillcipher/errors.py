# Exceptions raised by the Hill cipher.
# They all derive from ValueError, so callers that only expect the usual
# "bad key / bad input" ValueError keep working.


class HillCipherError(ValueError):
    """Base class for every Hill cipher failure."""


class InvalidKeyError(HillCipherError):
    """Key matrix is not 2x2 integers, or its determinant is rejected."""


class NoInverseError(HillCipherError):
    """Determinant has no multiplicative inverse modulo the alphabet size."""


class StateError(HillCipherError):
    """Operation called before the key, the message or a result exists."""
