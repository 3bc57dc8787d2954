# --------------------------------------------------------------
# File: exceptions.py
# Description: Jerarquía de excepciones de la capa criptográfica.
# --------------------------------------------------------------
"""Excepciones tipadas que devuelven las primitivas de `cryptocore`.

Los fallos de verificación (`AuthenticationError`) son resultados negativos
esperados; `RandomnessError` indica un fallo operativo del sistema.
"""


class CryptoCoreError(Exception):
    """Excepción base de todos los errores de `cryptocore`."""


class RandomnessError(CryptoCoreError):
    """La fuente de entropía del sistema no pudo entregar bytes aleatorios."""


class ParameterError(CryptoCoreError, ValueError):
    """Parámetros de configuración inválidos (error del llamador)."""


class KeyLengthError(CryptoCoreError, ValueError):
    """La clave proporcionada no tiene la longitud exigida por el cifrador."""


class AuthenticationError(CryptoCoreError):
    """El tag de autenticación no verifica: datos corruptos o manipulados."""


class EncodingError(CryptoCoreError, ValueError):
    """Hash codificado mal formado o con algoritmo/versión no reconocidos."""
