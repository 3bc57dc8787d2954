# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para parámetros rápidos y fallos de entropía.
# --------------------------------------------------------------

from typing import Iterator

import pytest

from cryptocore.models import HashParameters
from cryptocore.password_hasher import PasswordHasher


@pytest.fixture
def fast_params() -> HashParameters:
    """Parámetros Argon2id baratos para que las pruebas sean rápidas.

    Returns:
        HashParameters: t=1, m=1024 KiB, p=1, salt de 16 bytes y salida de 32.
    """
    return HashParameters(
        iterations=1, memory_kb=1024, parallelism=1, salt_length=16, output_length=32
    )


@pytest.fixture
def hasher(fast_params) -> PasswordHasher:
    """Hasher configurado con `fast_params`."""
    return PasswordHasher(fast_params)


@pytest.fixture
def no_entropy(monkeypatch) -> Iterator[None]:
    """Simula una fuente de entropía agotada sustituyendo `os.urandom`.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para parchear el módulo `os`.

    Returns:
        Iterator[None]: Control del fixture durante la prueba.
    """

    def _fail(length):
        raise OSError("entropy source unavailable")

    monkeypatch.setattr("cryptocore.primitives.os.urandom", _fail)
    yield
