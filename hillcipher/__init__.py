from .alphabet import ALPHABET, N
from .cipher import HillCipher, decrypt, encrypt
from .errors import HillCipherError, InvalidKeyError, NoInverseError, StateError

__all__ = [
    "ALPHABET", "N",
    "HillCipher", "encrypt", "decrypt",
    "HillCipherError", "InvalidKeyError", "NoInverseError", "StateError",
]
