import logging
import os
from flask import Flask, jsonify, request
from dotenv import find_dotenv, load_dotenv

# .env (répertoire courant) avant la lecture des classes de config
load_dotenv(find_dotenv(usecwd=True))

from .config import DevConfig, ProdConfig, TestConfig, env_overrides  # noqa: E402
from .extensions import cors, init_notes, get_settings
from .common.authz import require_bearer
from .common.errors import ConfigurationError, register_error_handlers
from .common.logging import setup_json_logging, register_request_logging
from .notes.repository import NotesSettings, timestamp_key
from .store import store_from_url


log = logging.getLogger("kvnotes")


def _select_config(env):
    if env in ("test", "testing"):
        return TestConfig
    if env == "production":
        return ProdConfig
    return DevConfig


def _build_settings(app, store):
    """Assemble store + secret. A missing piece is reported on every request, not here."""
    if store is None and app.config.get("NOTE_STORE_URL"):
        try:
            store = store_from_url(app.config["NOTE_STORE_URL"], app.config.get("NOTE_STORE_PREFIX", "note:"))
        except ConfigurationError as e:
            log.error("invalid_note_store_url", extra={"error": e.message})
            store = None
    return NotesSettings(store=store, secret=app.config.get("AUTH_PASS") or None)


def create_app(config_object=None, store=None, key_factory=timestamp_key):
    app = Flask(__name__, static_folder=None)

    if config_object is not None:
        # config imposée par l'appelant (ex: tests): elle seule décide
        app.config.from_object(config_object)
    else:
        # Charge .env si présent (dev), puis choix config selon env
        load_dotenv(find_dotenv(usecwd=True))
        app.config.from_object(_select_config(os.getenv("APP_ENV") or os.getenv("FLASK_ENV", "development")))
        app.config.update(env_overrides())
    env = app.config.get("APP_ENV", "development")

    setup_json_logging(app)
    register_request_logging(app)

    settings = _build_settings(app, store)
    init_notes(app, settings, key_factory=key_factory)
    if settings.store is None:
        log.error("note_store_not_configured")
    if not settings.secret:
        log.error("auth_pass_not_configured")

    # --- Helpers ---
    def _csv(value, default_if_empty):
        """Convertit une chaîne CSV en liste, sinon retourne la valeur telle quelle ou un défaut."""
        if value is None:
            return default_if_empty
        if isinstance(value, str) and "," in value:
            items = [x.strip() for x in value.split(",") if x.strip()]
            return items if items else default_if_empty
        return value

    # --- CORS: whitelist + headers ---
    origins = _csv(app.config.get("CORS_ORIGINS", "*"), "*")
    allow_headers = _csv(app.config.get("CORS_ALLOW_HEADERS"), ["Authorization", "Content-Type"])
    expose_headers = _csv(app.config.get("CORS_EXPOSE_HEADERS"), ["Content-Type"])

    cors.init_app(app, resources={
        r"/api/*": {
            "origins": origins,
            "allow_headers": allow_headers,
            "expose_headers": expose_headers,
            "supports_credentials": False,
        }
    })

    # Handlers d'erreurs JSON uniformes
    register_error_handlers(app)

    # --- Gardes globales: config d'abord, puis Bearer sur /api/* ---
    @app.before_request
    def check_configuration():
        get_settings().check()

    @app.before_request
    def gate_api():
        # les preflight CORS (OPTIONS) ne portent pas d'Authorization
        if request.path.startswith("/api/") and request.method != "OPTIONS":
            require_bearer()

    # --- Security headers (UN SEUL after_request) ---
    @app.after_request
    def set_security_headers(resp):
        if resp.mimetype == "text/html":
            # Coquilles HTML: assets locaux uniquement
            resp.headers["Content-Security-Policy"] = (
                "default-src 'self'; "
                "connect-src 'self'; "
                "img-src 'self' data:; "
                "style-src 'self' 'unsafe-inline'; "
                "script-src 'self'"
            )
            resp.headers["X-Frame-Options"] = "SAMEORIGIN"
        else:
            # API JSON: CSP très restrictif (pas d'HTML attendu)
            resp.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none'; base-uri 'none'"
            resp.headers["X-Frame-Options"] = "DENY"

        # Headers communs
        resp.headers["X-Content-Type-Options"] = "nosniff"
        resp.headers["Referrer-Policy"] = "no-referrer"

        # HSTS uniquement si HTTPS (prod / reverse-proxy)
        if (env == "production" or app.config.get("ENFORCE_HTTPS")) and (
            request.is_secure or request.headers.get("X-Forwarded-Proto", "") == "https"
        ):
            resp.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains; preload"

        return resp

    # --- Blueprints ---
    from .notes.routes import bp as notes_bp
    app.register_blueprint(notes_bp, url_prefix="/api")

    from .pages.routes import bp as pages_bp
    app.register_blueprint(pages_bp)

    from .docs.routes import bp as docs_bp
    app.register_blueprint(docs_bp)

    # Liveness probe (ping store simple)
    @app.get("/healthz")
    def healthz():
        store_ok = get_settings().store.ping()
        return jsonify({
            "status": "ok" if store_ok else "error",
            "env": env,
            "store": "up" if store_ok else "down",
        }), (200 if store_ok else 503)

    return app
