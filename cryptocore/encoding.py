# --------------------------------------------------------------
# File: encoding.py
# Description: Codificación autodescriptiva (formato PHC) de hashes Argon2id.
# --------------------------------------------------------------
"""Serializa y analiza cadenas `$argon2id$v=19$m=..,t=..,p=..$salt$hash`."""

from __future__ import annotations

import base64
import binascii
import re

from argon2.low_level import ARGON2_VERSION
from pydantic import ValidationError

from cryptocore import config
from cryptocore.exceptions import EncodingError, ParameterError
from cryptocore.models import DecodedHash, HashParameters

__all__ = [
    "ALGORITHM_ID",
    "ARGON2_VERSION",
    "b64_decode",
    "b64_encode",
    "decode_hash",
    "encode_hash",
    "parameters_segment",
]

ALGORITHM_ID = "argon2id"

# Enteros canónicos: sin ceros a la izquierda y como máximo diez dígitos.
_ENCODED_RE = re.compile(
    r"\$(?P<algorithm>[a-z0-9]+)"
    r"\$v=(?P<version>[1-9][0-9]{0,9})"
    r"\$m=(?P<memory>[1-9][0-9]{0,9})"
    r",t=(?P<iterations>[1-9][0-9]{0,9})"
    r",p=(?P<parallelism>[1-9][0-9]{0,9})"
    r"\$(?P<salt>[A-Za-z0-9+/]+)"
    r"\$(?P<digest>[A-Za-z0-9+/]+)"
)


def b64_encode(data: bytes) -> str:
    """Codifica en Base64 estándar sin relleno."""

    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64_decode(value: str) -> bytes:
    """Decodifica Base64 estándar sin relleno, rechazando caracteres extraños."""

    if len(value) % 4 == 1:
        raise EncodingError("Longitud Base64 inválida.")
    pad = "=" * (-len(value) % 4)
    try:
        return base64.b64decode(value + pad, validate=True)
    except binascii.Error as exc:
        raise EncodingError(f"Base64 inválido: {exc}") from exc


def parameters_segment(parameters: HashParameters, version: int = ARGON2_VERSION) -> str:
    """Devuelve el prefijo `$argon2id$v=..$m=..,t=..,p=..` de una codificación."""

    return (
        f"${ALGORITHM_ID}$v={version}"
        f"$m={parameters.memory_kb},t={parameters.iterations},p={parameters.parallelism}"
    )


def encode_hash(parameters: HashParameters, salt: bytes, digest: bytes) -> str:
    """Serializa algoritmo, versión, parámetros, salt y clave derivada.

    Args:
        parameters (HashParameters): Parámetros usados en la derivación.
        salt (bytes): Salt empleada.
        digest (bytes): Clave derivada por Argon2id.

    Returns:
        str: Cadena autodescriptiva en formato PHC.

    """

    return f"{parameters_segment(parameters)}${b64_encode(salt)}${b64_encode(digest)}"


def decode_hash(encoded: str) -> DecodedHash:
    """Analiza una cadena codificada con la gramática exacta esperada.

    Args:
        encoded (str): Cadena producida por `encode_hash`.

    Returns:
        DecodedHash: Componentes recuperados.

    Raises:
        EncodingError: Si la cadena no sigue la gramática, o si el algoritmo o
            la versión no están soportados.

    """

    if not isinstance(encoded, str):
        raise EncodingError("El hash codificado debe ser una cadena.")

    match = _ENCODED_RE.fullmatch(encoded)
    if match is None:
        raise EncodingError("Hash codificado mal formado.")

    algorithm = match.group("algorithm")
    if algorithm != ALGORITHM_ID:
        raise EncodingError(f"Algoritmo no soportado: {algorithm}")

    version = int(match.group("version"))
    if version != ARGON2_VERSION:
        raise EncodingError(f"Versión de Argon2 no soportada: {version}")

    salt = b64_decode(match.group("salt"))
    digest = b64_decode(match.group("digest"))

    try:
        parameters = HashParameters.build(
            iterations=int(match.group("iterations")),
            memory_kb=int(match.group("memory")),
            parallelism=int(match.group("parallelism")),
            salt_length=len(salt),
            output_length=len(digest),
        )
    except (ParameterError, ValidationError) as exc:
        raise EncodingError(f"Parámetros codificados inválidos: {exc}") from exc

    if parameters.memory_kb > config.MAX_DECODED_MEMORY_KB:
        raise EncodingError(
            f"m={parameters.memory_kb} supera el máximo admitido de {config.MAX_DECODED_MEMORY_KB} KiB"
        )
    if parameters.iterations > config.MAX_DECODED_TIME_COST:
        raise EncodingError(
            f"t={parameters.iterations} supera el máximo admitido de {config.MAX_DECODED_TIME_COST}"
        )

    return DecodedHash(
        algorithm=algorithm,
        version=version,
        parameters=parameters,
        salt=salt,
        digest=digest,
    )
