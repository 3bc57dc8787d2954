# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Cifrado autenticado con nonce aleatorio (XChaCha20-Poly1305 por defecto).
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico que producen sobres `nonce || ct || tag`."""

from __future__ import annotations

import logging
from enum import Enum
from typing import NamedTuple, Optional, Type, Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM, ChaCha20Poly1305
from nacl import bindings as sodium
from nacl.exceptions import CryptoError

from cryptocore.config import DEFAULT_CIPHER
from cryptocore.exceptions import AuthenticationError, KeyLengthError, ParameterError
from cryptocore.primitives import random_bytes

__all__ = ["CipherVariant", "AuthenticatedCipher"]

logger = logging.getLogger(__name__)


class CipherVariant(str, Enum):
    """Construcciones AEAD disponibles."""

    XCHACHA20_POLY1305 = "xchacha20-poly1305"
    CHACHA20_POLY1305 = "chacha20-poly1305"
    AES_256_GCM = "aes-256-gcm"


class XChaCha20Poly1305:
    """AEAD XChaCha20-Poly1305 de libsodium con la interfaz de `cryptography`.

    El nonce de 192 bits permite generarlo al azar sin riesgo práctico de
    repetición bajo una misma clave.

    """

    def __init__(self, key: bytes) -> None:
        self._key = bytes(key)

    def encrypt(self, nonce: bytes, data: bytes, associated_data: Optional[bytes]) -> bytes:
        return sodium.crypto_aead_xchacha20poly1305_ietf_encrypt(
            data, associated_data, nonce, self._key
        )

    def decrypt(self, nonce: bytes, data: bytes, associated_data: Optional[bytes]) -> bytes:
        return sodium.crypto_aead_xchacha20poly1305_ietf_decrypt(
            data, associated_data, nonce, self._key
        )


_Aead = Union[XChaCha20Poly1305, ChaCha20Poly1305, AESGCM]


class _VariantSpec(NamedTuple):
    aead: Type[_Aead]
    key_size: int
    nonce_size: int
    tag_size: int


_VARIANTS = {
    CipherVariant.XCHACHA20_POLY1305: _VariantSpec(
        XChaCha20Poly1305,
        sodium.crypto_aead_xchacha20poly1305_ietf_KEYBYTES,
        sodium.crypto_aead_xchacha20poly1305_ietf_NPUBBYTES,
        sodium.crypto_aead_xchacha20poly1305_ietf_ABYTES,
    ),
    CipherVariant.CHACHA20_POLY1305: _VariantSpec(ChaCha20Poly1305, 32, 12, 16),
    CipherVariant.AES_256_GCM: _VariantSpec(AESGCM, 32, 12, 16),
}


class AuthenticatedCipher:
    """Cifrador autenticado que genera un nonce nuevo en cada cifrado.

    La instancia solo guarda la variante elegida; cada llamada es
    independiente y puede ejecutarse concurrentemente.

    """

    def __init__(self, variant: Union[CipherVariant, str] = DEFAULT_CIPHER) -> None:
        try:
            self._variant = CipherVariant(variant)
        except ValueError as exc:
            raise ParameterError(f"Variante de cifrado no soportada: {variant}") from exc
        self._spec = _VARIANTS[self._variant]

    @property
    def variant(self) -> CipherVariant:
        return self._variant

    @property
    def key_size(self) -> int:
        return self._spec.key_size

    @property
    def nonce_size(self) -> int:
        return self._spec.nonce_size

    @property
    def tag_size(self) -> int:
        return self._spec.tag_size

    def generate_key(self) -> bytes:
        """Genera una clave aleatoria del tamaño exigido por la variante."""

        return random_bytes(self._spec.key_size)

    def encrypt(
        self, plaintext: bytes, key: bytes, associated_data: Optional[bytes] = None
    ) -> bytes:
        """Cifra `plaintext` con `key` y un nonce aleatorio.

        Args:
            plaintext (bytes): Datos en claro.
            key (bytes): Clave simétrica de `key_size` bytes.
            associated_data (Optional[bytes]): Datos autenticados adicionales.

        Returns:
            bytes: Sobre `nonce || ciphertext || tag`.

        Raises:
            KeyLengthError: Si la clave no tiene la longitud exigida.
            RandomnessError: Si no hay entropía para el nonce.

        """

        aead = self._new_aead(key)
        nonce = random_bytes(self._spec.nonce_size)
        # AEAD.encrypt ya devuelve ciphertext || tag.
        return nonce + aead.encrypt(nonce, bytes(plaintext), associated_data)

    def decrypt(
        self, envelope: bytes, key: bytes, associated_data: Optional[bytes] = None
    ) -> bytes:
        """Verifica y descifra un sobre producido por `encrypt`.

        Args:
            envelope (bytes): Sobre `nonce || ciphertext || tag`.
            key (bytes): Clave simétrica usada al cifrar.
            associated_data (Optional[bytes]): Datos autenticados adicionales.

        Returns:
            bytes: Mensaje original en claro.

        Raises:
            KeyLengthError: Si la clave no tiene la longitud exigida.
            AuthenticationError: Si el sobre es demasiado corto o el tag no
                verifica; nunca se devuelve texto parcial.

        """

        aead = self._new_aead(key)
        envelope = bytes(envelope)
        nonce_size = self._spec.nonce_size
        if len(envelope) < nonce_size + self._spec.tag_size:
            logger.warning("Sobre demasiado corto: %d bytes", len(envelope))
            raise AuthenticationError("El sobre cifrado es demasiado corto.")

        nonce, sealed = envelope[:nonce_size], envelope[nonce_size:]
        try:
            return aead.decrypt(nonce, sealed, associated_data)
        except (InvalidTag, CryptoError) as exc:
            logger.warning("Fallo de autenticación al descifrar (%s)", self._variant.value)
            raise AuthenticationError("El tag de autenticación no es válido.") from exc

    def _new_aead(self, key: bytes) -> _Aead:
        if len(key) != self._spec.key_size:
            raise KeyLengthError(
                f"{self._variant.value} requiere una clave de {self._spec.key_size} bytes, "
                f"se recibieron {len(key)}"
            )
        return self._spec.aead(bytes(key))
