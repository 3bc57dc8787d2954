# --------------------------------------------------------------
# File: test_config.py
# Description: Pruebas de la configuración por defecto leída del entorno.
# --------------------------------------------------------------

import importlib

import pytest

from cryptocore.exceptions import ParameterError


@pytest.fixture
def reload_config(monkeypatch):
    """Recarga cryptocore.config tras ajustar variables de entorno.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para modificar el entorno.

    Returns:
        Callable[..., ModuleType]: Función que fija variables y recarga el módulo.
    """
    import cryptocore.config as config_module

    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config_module)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config_module)


def test_defaults_without_environment(reload_config, monkeypatch):
    """Comprueba los valores por defecto conservadores.

    Returns:
        None: Las aserciones comparan cada parámetro.
    """
    for name in (
        "CRYPTOCORE_ARGON2_TIME_COST",
        "CRYPTOCORE_ARGON2_MEMORY_KB",
        "CRYPTOCORE_ARGON2_PARALLELISM",
        "CRYPTOCORE_ARGON2_SALT_LEN",
        "CRYPTOCORE_ARGON2_HASH_LEN",
    ):
        monkeypatch.delenv(name, raising=False)
    config = reload_config()
    params = config.DEFAULT_HASH_PARAMETERS
    assert (params.iterations, params.memory_kb, params.parallelism) == (3, 65536, 1)
    assert (params.salt_length, params.output_length) == (16, 32)


def test_environment_overrides_defaults(reload_config):
    """Verifica que las variables de entorno ajusten los parámetros.

    Returns:
        None: Las aserciones comparan los valores leídos.
    """
    config = reload_config(
        CRYPTOCORE_ARGON2_TIME_COST="2",
        CRYPTOCORE_ARGON2_MEMORY_KB="1024",
        CRYPTOCORE_ARGON2_PARALLELISM="1",
    )
    params = config.DEFAULT_HASH_PARAMETERS
    assert (params.iterations, params.memory_kb, params.parallelism) == (2, 1024, 1)


@pytest.mark.parametrize(
    "env",
    [
        {"CRYPTOCORE_ARGON2_TIME_COST": "tres"},
        {"CRYPTOCORE_ARGON2_MEMORY_KB": "8", "CRYPTOCORE_ARGON2_PARALLELISM": "4"},
    ],
)
def test_invalid_environment_is_rejected(reload_config, env):
    """Garantiza que valores inválidos en el entorno fallen al cargar.

    Args:
        env (dict): Variables de entorno inválidas.

    Returns:
        None: Se espera ParameterError.
    """
    with pytest.raises(ParameterError):
        reload_config(**env)
