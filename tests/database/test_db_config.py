import pytest

from config import get_settings_module
from src.workforce_admin.workforce_admin.core.exceptions import ConfigurationError
from src.workforce_admin.workforce_admin.database.connection import DBConfig


def test_from_settings_parses_url_and_key():
    config = DBConfig.from_settings("mysql://admin@db.local:3307/workforce", "s3cret")

    assert config == DBConfig(host="db.local", port=3307, user="admin", password="s3cret", database="workforce")
    assert config.describe() == "admin@db.local:3307/workforce"


def test_from_settings_defaults_port_and_user():
    config = DBConfig.from_settings("mysql+mysqlconnector://localhost/workforce", "k")
    assert (config.port, config.user) == (3306, "root")


@pytest.mark.parametrize(
    "url, key",
    [
        (None, "k"),
        ("mysql://localhost/workforce", None),
        ("postgres://localhost/workforce", "k"),
        ("mysql://localhost", "k"),
    ],
)
def test_from_settings_rejects_missing_or_bad_values(url, key):
    with pytest.raises(ConfigurationError):
        DBConfig.from_settings(url, key)


@pytest.mark.parametrize(
    "env, module",
    [("production", "config.production"), ("TEST", "config.testing"), ("anything", "config.development")],
)
def test_settings_module_selection(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == module
