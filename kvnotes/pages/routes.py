from flask import Blueprint, make_response

from kvnotes.common.authz import request_auth_status
from kvnotes.common.credentials import AuthStatus
from kvnotes.common.errors import AuthError
from .shells import APP_HTML, LOGIN_HTML

bp = Blueprint("pages", __name__)

def _html(body):
    resp = make_response(body, 200)
    resp.headers["Content-Type"] = "text/html; charset=utf-8"
    return resp

@bp.get("/")
def index():
    status = request_auth_status()
    if status is AuthStatus.AUTHORIZED:
        return _html(APP_HTML)
    if status is AuthStatus.NO_CREDENTIAL:
        return _html(LOGIN_HTML)
    # identifiant fourni mais faux (distinct de "absent")
    raise AuthError("Unauthorized")
