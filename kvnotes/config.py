import os

def _flag(value):
    return str(value).lower() == "true"

# Réglages relus depuis l'environnement à la création de l'app (après .env)
ENV_SETTINGS = {
    "AUTH_PASS": str,
    "NOTE_STORE_URL": str,
    "NOTE_STORE_PREFIX": str,
    "CORS_ORIGINS": str,
    "CORS_ALLOW_HEADERS": str,
    "CORS_EXPOSE_HEADERS": str,
    "MAX_CONTENT_LENGTH": int,
    "ENFORCE_HTTPS": _flag,
}

def env_overrides():
    return {name: cast(os.environ[name]) for name, cast in ENV_SETTINGS.items() if os.environ.get(name)}


class BaseConfig:
    APP_ENV = "development"

    # --- Secret partagé (mot de passe unique de l'app)
    AUTH_PASS = os.getenv("AUTH_PASS")

    # --- Note store: memory:// ou redis://host:6379/0
    NOTE_STORE_URL = os.getenv("NOTE_STORE_URL")
    NOTE_STORE_PREFIX = os.getenv("NOTE_STORE_PREFIX", "note:")

    # --- CORS (strings CSV -> découpées dans __init__)
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    CORS_ALLOW_HEADERS = os.getenv("CORS_ALLOW_HEADERS", "Content-Type,Authorization")
    CORS_EXPOSE_HEADERS = os.getenv("CORS_EXPOSE_HEADERS", "Content-Type")

    # --- Sécurité HTTP
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", "1000000"))  # ~1 Mo
    ENFORCE_HTTPS = _flag(os.getenv("ENFORCE_HTTPS", "false"))


class DevConfig(BaseConfig):
    DEBUG = True
    NOTE_STORE_URL = os.getenv("NOTE_STORE_URL", "memory://")


class ProdConfig(BaseConfig):
    APP_ENV = "production"
    DEBUG = False


class TestConfig(BaseConfig):
    APP_ENV = "test"
    TESTING = True
    AUTH_PASS = os.getenv("TEST_AUTH_PASS", "test-pass")
    NOTE_STORE_URL = "memory://"
