# --------------------------------------------------------------
# File: password_hasher.py
# Description: Hash de contraseñas con Argon2id y verificación en tiempo constante.
# --------------------------------------------------------------
"""Derivación Argon2id con codificación autodescriptiva de los parámetros."""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from argon2.exceptions import HashingError
from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from cryptocore.config import DEFAULT_HASH_PARAMETERS
from cryptocore.encoding import decode_hash, encode_hash
from cryptocore.exceptions import ParameterError
from cryptocore.models import ARGON2_MIN_SALT_LENGTH, HashParameters
from cryptocore.primitives import constant_time_equal, random_bytes

__all__ = ["PasswordHasher"]

logger = logging.getLogger(__name__)

Secret = Union[bytes, bytearray, memoryview, str]


def _to_bytes(secret: Secret) -> bytes:
    """Normaliza el secreto a bytes (las cadenas se codifican en UTF-8)."""

    if isinstance(secret, str):
        return secret.encode("utf-8")
    if isinstance(secret, (bytes, bytearray, memoryview)):
        return bytes(secret)
    raise TypeError(f"El secreto debe ser bytes o str, no {type(secret).__name__}")


def _derive(secret: bytes, salt: bytes, parameters: HashParameters) -> bytes:
    """Ejecuta Argon2id con los parámetros indicados.

    Args:
        secret (bytes): Secreto de entrada.
        salt (bytes): Salt asociada.
        parameters (HashParameters): Coste temporal, memoria y paralelismo.

    Returns:
        bytes: Clave derivada de `parameters.output_length` bytes.

    """

    logger.debug(
        "Argon2id t=%d m=%dKiB p=%d outlen=%d",
        parameters.iterations,
        parameters.memory_kb,
        parameters.parallelism,
        parameters.output_length,
    )
    try:
        return hash_secret_raw(
            secret,
            salt,
            time_cost=parameters.iterations,
            memory_cost=parameters.memory_kb,
            parallelism=parameters.parallelism,
            hash_len=parameters.output_length,
            type=Type.ID,
            version=ARGON2_VERSION,
        )
    except (HashingError, OverflowError) as exc:
        logger.warning("Argon2id rechazó los parámetros: %s", exc)
        raise ParameterError(f"Argon2id rechazó los parámetros: {exc}") from exc


class PasswordHasher:
    """Hasher de contraseñas Argon2id con salt aleatoria por llamada.

    Los parámetros se fijan al construir la instancia y no cambian después, por
    lo que una misma instancia puede compartirse entre hilos.

    Example:
        >>> hasher = PasswordHasher(iterations=2, memory_kb=1024, parallelism=1)
        >>> encoded = hasher.hash(b"secreto")
        >>> hasher.compare(b"secreto", encoded)
        True

    """

    def __init__(self, parameters: Optional[HashParameters] = None, **overrides: Any) -> None:
        """Inicializa el hasher.

        Args:
            parameters (Optional[HashParameters]): Parámetros base; por defecto
                `DEFAULT_HASH_PARAMETERS`.
            **overrides (Any): Campos individuales que sustituyen a los base.

        Raises:
            ParameterError: Si la combinación resultante no es válida.

        """

        base = parameters if parameters is not None else DEFAULT_HASH_PARAMETERS
        self._parameters = HashParameters.build(base, **overrides) if overrides else base

    @property
    def parameters(self) -> HashParameters:
        return self._parameters

    def hash(self, secret: Secret) -> str:
        """Genera el hash codificado de `secret` con una salt aleatoria nueva.

        Raises:
            RandomnessError: Si no hay entropía disponible para la salt.
            ParameterError: Si Argon2id rechaza los parámetros.

        """

        salt = random_bytes(self._parameters.salt_length)
        return self._hash(_to_bytes(secret), salt)

    def hash_with_fixed_salt(self, secret: Secret, salt: bytes) -> str:
        """Genera un hash determinista usando la salt proporcionada.

        Pensado para pruebas y derivaciones deterministas; no debe usarse para
        almacenar contraseñas. Reutilizar una salt entre secretos distintos es
        responsabilidad del llamador.

        Raises:
            ParameterError: Si la salt es más corta que el mínimo de Argon2.

        """

        salt = bytes(salt)
        if len(salt) < ARGON2_MIN_SALT_LENGTH:
            raise ParameterError(f"La salt debe tener al menos {ARGON2_MIN_SALT_LENGTH} bytes.")
        return self._hash(_to_bytes(secret), salt)

    def compare(self, secret: Secret, encoded: str) -> bool:
        """Comprueba si `secret` corresponde al hash codificado.

        Los parámetros y la salt se recuperan de `encoded`, no de la instancia.

        Args:
            secret (Secret): Secreto candidato.
            encoded (str): Hash producido por `hash` o `hash_with_fixed_salt`.

        Returns:
            bool: True si coincide, False en caso contrario.

        Raises:
            EncodingError: Si la cadena está mal formada o usa un algoritmo o
                versión no soportados.

        """

        decoded = decode_hash(encoded)
        candidate = _derive(_to_bytes(secret), decoded.salt, decoded.parameters)
        return constant_time_equal(candidate, decoded.digest)

    def needs_rehash(self, encoded: str) -> bool:
        """Indica si `encoded` se generó con parámetros distintos a los actuales."""

        return decode_hash(encoded).parameters != self._parameters

    def _hash(self, secret: bytes, salt: bytes) -> str:
        parameters = self._parameters
        if len(salt) != parameters.salt_length:
            parameters = parameters.model_copy(update={"salt_length": len(salt)})
        digest = _derive(secret, salt, parameters)
        return encode_hash(parameters, salt, digest)
