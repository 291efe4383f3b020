"""
Main entry point for the Registrar server.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from .persistence import DatabaseFactory, StudentRepository
from .services import AccountService, EnrollmentService
from .api.rest_api import RegistrarRestAPI
from .core.exceptions import ConfigurationError
from .core.credentials import PBKDF2PasswordHasher


DEFAULT_CONFIG: Dict[str, Any] = {
    'database_type': 'sqlite',
    'database_config': {'database_path': 'registrar.db'},
    'host': '0.0.0.0',
    'port': 5000,
    'log_level': 'info',
    'password_hash_iterations': 260000,
}


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[str] = None, environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Build the platform config: defaults, then a JSON file, then environment."""
    environ = os.environ if environ is None else environ
    config = copy.deepcopy(DEFAULT_CONFIG)

    if path:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = _merge(config, json.load(f))
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Could not read config file {path}: {e}")

    if environ.get('REGISTRAR_DB_PATH'):
        config['database_config']['database_path'] = environ['REGISTRAR_DB_PATH']
    if environ.get('REGISTRAR_HOST'):
        config['host'] = environ['REGISTRAR_HOST']
    if environ.get('PORT'):
        try:
            config['port'] = int(environ['PORT'])
        except ValueError:
            raise ConfigurationError(f"PORT must be an integer, got {environ['PORT']!r}")

    return config


class RegistrarPlatform:
    """Wires the database, repositories, services and REST app together."""

    def __init__(self, config: Optional[dict] = None):
        self._config = _merge(DEFAULT_CONFIG, config or {})
        self._database = None
        self._student_repository = None
        self._account_service = None
        self._enrollment_service = None
        self._rest_api = None

        # Initialize platform
        self._initialize_platform()

    def _initialize_platform(self):
        """Initialize the platform with all services."""
        print("Initializing Registrar platform...")

        db_type = self._config.get('database_type', 'sqlite')
        db_config = self._config.get('database_config', {})
        self._database = DatabaseFactory.create_database(db_type, **db_config)
        print(f"✓ Database initialized: {db_type}")

        self._student_repository = StudentRepository(self._database)
        print("✓ Repositories initialized")

        hasher = PBKDF2PasswordHasher(iterations=self._config['password_hash_iterations'])
        self._account_service = AccountService(self._student_repository, hasher)
        self._enrollment_service = EnrollmentService(self._student_repository)
        print("✓ Services initialized")

        self._rest_api = RegistrarRestAPI(self._account_service, self._enrollment_service)
        print("✓ REST API initialized")

    @property
    def config(self) -> Dict[str, Any]:
        return self._config

    @property
    def app(self):
        """The FastAPI application."""
        return self._rest_api.app

    @property
    def account_service(self) -> AccountService:
        return self._account_service

    @property
    def enrollment_service(self) -> EnrollmentService:
        return self._enrollment_service

    def start_rest_server(self, host: Optional[str] = None, port: Optional[int] = None):
        """Run the REST server in the foreground until interrupted."""
        import uvicorn

        host = host or self._config['host']
        port = port or self._config['port']
        print(f"✓ REST server starting on http://{host}:{port}")
        print(f"  - API Docs: http://{host}:{port}/docs")
        uvicorn.run(
            self.app,
            host=host,
            port=port,
            log_level=self._config.get('log_level', 'info'),
        )


def create_app(config_path: Optional[str] = None):
    """Application factory for ``uvicorn --factory registrar.main:create_app``."""
    return RegistrarPlatform(load_config(config_path or os.environ.get('REGISTRAR_CONFIG'))).app


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Registrar course-registration server")
    parser.add_argument("--host", type=str, help="Interface to bind")
    parser.add_argument("--port", type=int, help="REST server port")
    parser.add_argument("--db", type=str, help="SQLite database path")
    parser.add_argument("--config", type=str, help="Configuration file path")
    parser.add_argument("--log-level", type=str, default=None,
                        choices=["debug", "info", "warning", "error"], help="Logging level")

    args = parser.parse_args()

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        parser.error(e.message)

    if args.db:
        config['database_config']['database_path'] = args.db
    if args.log_level:
        config['log_level'] = args.log_level

    logging.basicConfig(
        level=config['log_level'].upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    platform = RegistrarPlatform(config)

    try:
        platform.start_rest_server(args.host, args.port)
    except KeyboardInterrupt:
        print("\nShutting down...")


if __name__ == "__main__":
    main()
