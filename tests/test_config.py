import pytest

from fintree.config import Settings
from fintree.exceptions import ConfigError


def test_defaults():
    settings = Settings.from_env({})
    assert settings.seed_path == "data/financeiro.json"
    assert settings.lookup_name == "Aluguel"
    assert settings.amount_precision == 2
    assert settings.log_level == "WARNING"


def test_env_overrides():
    settings = Settings.from_env({
        "FINTREE_SEED_PATH": "other.json",
        "FINTREE_LOOKUP_NAME": "Salário",
        "FINTREE_PRECISION": "3",
        "FINTREE_LOG_LEVEL": "debug",
    })
    assert settings.seed_path == "other.json"
    assert settings.lookup_name == "Salário"
    assert settings.amount_precision == 3
    assert settings.log_level == "DEBUG"


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("FINTREE_LOOKUP_NAME", "Despesas")
    assert Settings.from_env().lookup_name == "Despesas"


def test_bad_precision():
    with pytest.raises(ConfigError) as exc_info:
        Settings.from_env({"FINTREE_PRECISION": "two"})
    assert exc_info.value.details["config_key"] == "amount_precision"


def test_negative_precision():
    with pytest.raises(ConfigError):
        Settings(amount_precision=-1).validate()


def test_unknown_log_level():
    with pytest.raises(ConfigError) as exc_info:
        Settings.from_env({"FINTREE_LOG_LEVEL": "loud"})
    assert exc_info.value.code == "CONFIG_ERROR"
    assert "LOUD" in str(exc_info.value)
