# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de las primitivas criptográficas del paquete.
# --------------------------------------------------------------
"""Inicializa el paquete `cryptocore` y reexporta su API pública."""

from cryptocore.crypto_sym import AuthenticatedCipher, CipherVariant
from cryptocore.digester import Digester
from cryptocore.exceptions import (
    AuthenticationError,
    CryptoCoreError,
    EncodingError,
    KeyLengthError,
    ParameterError,
    RandomnessError,
)
from cryptocore.models import DecodedHash, HashParameters
from cryptocore.password_hasher import PasswordHasher
from cryptocore.primitives import constant_time_equal, random_bytes

__all__ = [
    "AuthenticatedCipher",
    "AuthenticationError",
    "CipherVariant",
    "CryptoCoreError",
    "DecodedHash",
    "Digester",
    "EncodingError",
    "HashParameters",
    "KeyLengthError",
    "ParameterError",
    "PasswordHasher",
    "RandomnessError",
    "constant_time_equal",
    "random_bytes",
]
