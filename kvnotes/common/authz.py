from flask import request

from kvnotes.common.credentials import AuthStatus, check_credential
from kvnotes.common.errors import AuthError
from kvnotes.extensions import get_settings

def request_auth_status() -> AuthStatus:
    return check_credential(request.headers.get("Authorization"), get_settings().secret)

def require_bearer() -> None:
    if request_auth_status() is not AuthStatus.AUTHORIZED:
        raise AuthError("Unauthorized")
