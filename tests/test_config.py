import json

import pytest

from registrar.core.exceptions import ConfigurationError
from registrar.main import DEFAULT_CONFIG, RegistrarPlatform, load_config
from registrar.persistence import DatabaseFactory


def test_defaults_are_not_shared():
    config = load_config(environ={})
    config['database_config']['database_path'] = "elsewhere.db"

    assert DEFAULT_CONFIG['database_config']['database_path'] == "registrar.db"
    assert load_config(environ={})['port'] == 5000


def test_file_then_environment_overlay(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"port": 7000, "database_config": {"database_path": "file.db"}}), encoding="utf-8")

    config = load_config(str(path), environ={"REGISTRAR_DB_PATH": "env.db"})

    assert config['port'] == 7000
    assert config['database_config']['database_path'] == "env.db"
    assert config['database_type'] == "sqlite"


def test_bad_port_and_bad_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(environ={"PORT": "eighty"})
    with pytest.raises(ConfigurationError):
        load_config(str(tmp_path / "missing.json"), environ={})


def test_unknown_database_type():
    with pytest.raises(ConfigurationError):
        DatabaseFactory.create_database("oracle")


def test_platform_wires_services(tmp_path):
    platform = RegistrarPlatform({'database_config': {'database_path': str(tmp_path / "p.db")}})

    profile = platform.account_service.register("Alice", "a@x.com", "S1", "pw")
    assert platform.enrollment_service.get_enrollment(profile["id"]) == []
    assert platform.config['port'] == 5000
