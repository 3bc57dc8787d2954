# --------------------------------------------------------------
# File: config.py
# Description: Configuración por defecto de las primitivas leída del entorno.
# --------------------------------------------------------------
"""Valores por defecto inmutables, ajustables mediante variables de entorno."""

import os

from dotenv import load_dotenv

from cryptocore.exceptions import ParameterError
from cryptocore.models import HashParameters

load_dotenv()


def _env_int(name: str, default: int) -> int:
    """Lee una variable de entorno entera o devuelve el valor por defecto."""

    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ParameterError(f"{name} debe ser un entero, se recibió {raw!r}") from exc


# Parámetros Argon2id conservadores para autenticación interactiva.
DEFAULT_HASH_PARAMETERS = HashParameters.build(
    iterations=_env_int("CRYPTOCORE_ARGON2_TIME_COST", 3),
    memory_kb=_env_int("CRYPTOCORE_ARGON2_MEMORY_KB", 64 * 1024),
    parallelism=_env_int("CRYPTOCORE_ARGON2_PARALLELISM", 1),
    salt_length=_env_int("CRYPTOCORE_ARGON2_SALT_LEN", 16),
    output_length=_env_int("CRYPTOCORE_ARGON2_HASH_LEN", 32),
)

# Techos aplicados al analizar hashes almacenados de origen no confiable.
MAX_DECODED_MEMORY_KB = _env_int("CRYPTOCORE_ARGON2_MAX_MEMORY_KB", 1024 * 1024)
MAX_DECODED_TIME_COST = _env_int("CRYPTOCORE_ARGON2_MAX_TIME_COST", 64)

DEFAULT_CIPHER = os.getenv("CRYPTOCORE_CIPHER", "xchacha20-poly1305")
DEFAULT_DIGEST = os.getenv("CRYPTOCORE_DIGEST", "sha512")
