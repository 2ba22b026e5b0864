import os
import secrets


def _timeout_from_env():
    value = os.environ.get('COMPILE_SERVICE_TIMEOUT')
    if not value:
        return None
    return float(value)


class Config:
    # Basic settings
    SECRET_KEY = os.environ.get('SECRET_KEY', secrets.token_hex(32))
    DEBUG = os.environ.get('FLASK_DEBUG', 'False').lower() == 'true'
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Compile service (Wandbox)
    COMPILE_SERVICE_URL = 'https://wandbox.org/api/compile.json'
    COMPILE_SERVICE_TIMEOUT = _timeout_from_env()  # None waits for the upstream indefinitely


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing'
    COMPILE_SERVICE_TIMEOUT = None
