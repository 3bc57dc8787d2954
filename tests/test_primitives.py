# --------------------------------------------------------------
# File: test_primitives.py
# Description: Pruebas de la fuente aleatoria y la comparación en tiempo constante.
# --------------------------------------------------------------

import pytest

from cryptocore.exceptions import ParameterError, RandomnessError
from cryptocore.primitives import constant_time_equal, random_bytes


@pytest.mark.parametrize("length", [0, 1, 12, 32, 1024])
def test_random_bytes_length(length):
    """Comprueba que se devuelva exactamente la longitud solicitada.

    Args:
        length (int): Número de bytes pedidos.

    Returns:
        None: Las aserciones comparan la longitud.
    """
    assert len(random_bytes(length)) == length


def test_random_bytes_are_not_repeated():
    """Evalúa que dos extracciones de 32 bytes no coincidan.

    Returns:
        None: Las aserciones comparan ambas muestras.
    """
    assert random_bytes(32) != random_bytes(32)


@pytest.mark.parametrize("length", [-1, 1.5, "8", True])
def test_random_bytes_rejects_invalid_length(length):
    """Valida que longitudes no enteras o negativas se rechacen.

    Args:
        length (object): Valor inválido.

    Returns:
        None: Se espera ParameterError.
    """
    with pytest.raises(ParameterError):
        random_bytes(length)


def test_random_bytes_propagates_entropy_failure(no_entropy):
    """Garantiza que el fallo del sistema se traduzca en RandomnessError.

    Returns:
        None: Se espera la excepción tipada.
    """
    with pytest.raises(RandomnessError):
        random_bytes(16)


def test_random_bytes_rejects_short_read(monkeypatch):
    """Comprueba que una lectura incompleta no se acepte en silencio.

    Returns:
        None: Se espera RandomnessError.
    """
    monkeypatch.setattr("cryptocore.primitives.os.urandom", lambda n: b"\x00" * (n - 1))
    with pytest.raises(RandomnessError):
        random_bytes(16)


def test_constant_time_equal():
    """Verifica igualdad, diferencia de contenido y diferencia de longitud.

    Returns:
        None: Las aserciones cubren los tres casos.
    """
    assert constant_time_equal(b"abc", b"abc")
    assert not constant_time_equal(b"abc", b"abd")
    assert not constant_time_equal(b"abc", b"abcd")
    assert constant_time_equal(bytearray(b"abc"), b"abc")
