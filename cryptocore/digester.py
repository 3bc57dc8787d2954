# --------------------------------------------------------------
# File: digester.py
# Description: Resúmenes criptográficos deterministas para control de integridad.
# --------------------------------------------------------------
"""Hash sin clave ni salt; no apto para almacenar contraseñas."""

from __future__ import annotations

import hashlib

from cryptocore.config import DEFAULT_DIGEST
from cryptocore.exceptions import ParameterError
from cryptocore.primitives import constant_time_equal

__all__ = ["SUPPORTED_DIGESTS", "Digester"]

SUPPORTED_DIGESTS = frozenset({"sha256", "sha512", "sha3_256", "sha3_512", "blake2b"})


class Digester:
    """Calcula y verifica resúmenes de longitud fija (SHA-512 por defecto)."""

    def __init__(self, algorithm: str = DEFAULT_DIGEST) -> None:
        if algorithm not in SUPPORTED_DIGESTS:
            raise ParameterError(f"Algoritmo de resumen no soportado: {algorithm}")
        self._algorithm = algorithm

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def digest_size(self) -> int:
        return hashlib.new(self._algorithm).digest_size

    def hash(self, data: bytes) -> bytes:
        """Devuelve el resumen de `data`."""

        return hashlib.new(self._algorithm, bytes(data)).digest()

    def hash_hex(self, data: bytes) -> str:
        return self.hash(data).hex()

    def compare(self, data: bytes, digest: bytes) -> bool:
        """Recalcula el resumen de `data` y lo compara en tiempo constante.

        Args:
            data (bytes): Datos a verificar.
            digest (bytes): Resumen esperado.

        Returns:
            bool: True si coinciden; False ante cualquier diferencia de longitud
            o contenido.

        """

        return constant_time_equal(self.hash(data), digest)
