# --------------------------------------------------------------
# File: primitives.py
# Description: Fuente de aleatoriedad segura y comparación en tiempo constante.
# --------------------------------------------------------------
"""Utilidades compartidas por el hasher, el digester y el cifrador."""

from __future__ import annotations

import hmac
import logging
import os

from cryptocore.exceptions import ParameterError, RandomnessError

__all__ = ["random_bytes", "constant_time_equal"]

logger = logging.getLogger(__name__)


def random_bytes(length: int) -> bytes:
    """Obtiene `length` bytes del CSPRNG del sistema operativo.

    Args:
        length (int): Número de bytes solicitados.

    Returns:
        bytes: Secuencia aleatoria de la longitud pedida.

    Raises:
        ParameterError: Si `length` no es un entero no negativo.
        RandomnessError: Si el sistema no puede proporcionar entropía.

    """

    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise ParameterError(f"Longitud aleatoria inválida: {length!r}")

    try:
        data = os.urandom(length)
    except (OSError, NotImplementedError) as exc:
        # Nunca se recurre a una fuente más débil.
        logger.warning("Fuente de entropía no disponible: %s", exc)
        raise RandomnessError("No se pudo obtener entropía del sistema.") from exc

    if len(data) != length:
        raise RandomnessError("La fuente de entropía devolvió menos bytes de los pedidos.")
    return data


def constant_time_equal(left: bytes, right: bytes) -> bool:
    """Compara dos secuencias de bytes sin filtrar la posición de la diferencia."""

    return hmac.compare_digest(bytes(left), bytes(right))
