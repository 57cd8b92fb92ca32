"""
Configuration settings for the Pokédex catalog
"""
import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()


def _flag(name, default='false'):
    return (os.environ.get(name) or default).strip().lower() in ('1', 'true', 'yes', 'on')


def _database_url():
    host = os.environ.get('DB_HOST') or 'localhost'
    user = os.environ.get('DB_USER') or 'postgres'
    password = os.environ.get('DB_PASSWORD') or 'admin'
    name = os.environ.get('DB_NAME') or 'assignment3'
    port = os.environ.get('DB_PORT') or '5432'
    return f'postgresql+psycopg2://{user}:{password}@{host}:{port}/{name}'


class Config:
    """Flask application configuration"""

    # Signs the session token cookie (CHANGE THIS IN PRODUCTION!)
    SECRET_KEY = os.environ.get('SESSION_SECRET') or 'fallback-secret-key'
    PERMANENT_SESSION_LIFETIME = timedelta(
        seconds=int(os.environ.get('SESSION_LIFETIME') or 86400))
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Database configuration
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or _database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    AUTO_CREATE_TABLES = _flag('AUTO_CREATE_TABLES', 'true')

    # Server
    PORT = int(os.environ.get('PORT') or 3000)
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Credential hardening, off to stay compatible with plaintext rows
    HASH_PASSWORDS = _flag('HASH_PASSWORDS')

    # Privilege tier needed for user management when enforcement is on
    ENFORCE_USER_LEVEL = _flag('ENFORCE_USER_LEVEL')
    ADMIN_LEVEL = int(os.environ.get('ADMIN_LEVEL') or 2)
    DEFAULT_USER_LEVEL = 1


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    AUTO_CREATE_TABLES = True
    HASH_PASSWORDS = False
    ENFORCE_USER_LEVEL = False
