# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan parámetros y hashes decodificados."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from cryptocore.exceptions import ParameterError

# Límites impuestos por Argon2.
ARGON2_MIN_SALT_LENGTH = 8
ARGON2_MIN_OUTPUT_LENGTH = 4
ARGON2_MIN_MEMORY_PER_LANE = 8
ARGON2_MAX_UINT32 = 2**32 - 1
ARGON2_MAX_LANES = 0xFFFFFF


class HashParameters(BaseModel):
    """Parámetros ajustables de la derivación Argon2id.

    Attributes:
        iterations (int): Coste temporal (pasadas sobre la memoria).
        memory_kb (int): Memoria en KiB consumida por la derivación.
        parallelism (int): Número de carriles paralelos.
        salt_length (int): Longitud en bytes de la salt aleatoria.
        output_length (int): Longitud en bytes de la clave derivada.

    """

    model_config = ConfigDict(frozen=True, strict=True)

    iterations: int = Field(gt=0, le=ARGON2_MAX_UINT32)
    memory_kb: int = Field(gt=0, le=ARGON2_MAX_UINT32)
    parallelism: int = Field(gt=0, le=ARGON2_MAX_LANES)
    salt_length: int = Field(gt=0, le=ARGON2_MAX_UINT32)
    output_length: int = Field(gt=0, le=ARGON2_MAX_UINT32)

    @model_validator(mode="after")
    def _check_argon2_minimums(self) -> "HashParameters":
        if self.memory_kb < ARGON2_MIN_MEMORY_PER_LANE * self.parallelism:
            raise ValueError(
                f"memory_kb={self.memory_kb} insuficiente para parallelism={self.parallelism} "
                f"(mínimo {ARGON2_MIN_MEMORY_PER_LANE * self.parallelism})"
            )
        if self.salt_length < ARGON2_MIN_SALT_LENGTH:
            raise ValueError(f"salt_length debe ser al menos {ARGON2_MIN_SALT_LENGTH}")
        if self.output_length < ARGON2_MIN_OUTPUT_LENGTH:
            raise ValueError(f"output_length debe ser al menos {ARGON2_MIN_OUTPUT_LENGTH}")
        return self

    @classmethod
    def build(cls, base: "HashParameters | None" = None, **overrides: Any) -> "HashParameters":
        """Construye parámetros validados traduciendo errores a `ParameterError`.

        Args:
            base (HashParameters | None): Parámetros de partida opcionales.
            **overrides (Any): Campos que sustituyen a los de `base`.

        Returns:
            HashParameters: Nueva instancia inmutable.

        """

        values = base.model_dump() if base is not None else {}
        values.update(overrides)
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ParameterError(f"Parámetros Argon2 inválidos: {exc}") from exc


class DecodedHash(BaseModel):
    """Representa un hash codificado ya analizado.

    Attributes:
        algorithm (str): Identificador del algoritmo (`argon2id`).
        version (int): Versión de Argon2 declarada en la cadena.
        parameters (HashParameters): Parámetros recuperados.
        salt (bytes): Salt usada en la derivación.
        digest (bytes): Clave derivada almacenada.

    """

    model_config = ConfigDict(frozen=True)

    algorithm: str
    version: int
    parameters: HashParameters
    salt: bytes
    digest: bytes
