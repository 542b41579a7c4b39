"""Application configuration read from the environment.

``load_dotenv()`` runs in ``api.main`` before this module is imported, so
values from a local ``.env`` file are visible here.
"""

import os
import tomllib
from pathlib import Path

APP_NAME = os.getenv('APP_NAME', 'user-accounts-api')
APP_ENV = os.getenv('APP_ENV', 'development')
PORT = int(os.getenv('PORT', '8000'))
API_PREFIX = os.getenv('API_PREFIX', '/api')

# Comma-separated list, or "*" for any origin
CORS_ORIGINS = os.getenv('CORS_ORIGINS', 'http://localhost:8080')
CORS_METHODS = ['GET', 'POST', 'PUT', 'DELETE', 'PATCH', 'OPTIONS']

JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY')
JWT_ALGORITHM = os.getenv('JWT_ALGORITHM', 'HS256')
JWT_EXPIRATION_DAYS = int(os.getenv('JWT_EXPIRATION_DAYS', '1'))

LOG_LEVEL = os.getenv('LOG_LEVEL')
LOG_DIR = os.getenv('LOG_DIR')


def is_production() -> bool:
    return APP_ENV == 'production'


if not JWT_SECRET_KEY:
    if is_production():
        raise ValueError(
            "JWT_SECRET_KEY environment variable is required in production. "
            "Generate a secure key with: openssl rand -hex 32"
        )
    JWT_SECRET_KEY = 'development-secret-key'


def _read_version() -> str:
    """Read version from pyproject.toml (single source of truth)."""
    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    try:
        with open(pyproject, "rb") as f:
            return tomllib.load(f)["project"]["version"]
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        return os.getenv('APP_VERSION', '0.0.0')


VERSION = _read_version()
