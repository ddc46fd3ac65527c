import enum
import hmac

class AuthStatus(enum.Enum):
    AUTHORIZED = "authorized"
    UNAUTHORIZED = "unauthorized"
    NO_CREDENTIAL = "no_credential"

def verify_secret(supplied, secret) -> bool:
    """Exact comparison (constant time). Empty values never match."""
    if not supplied or not secret:
        return False
    return hmac.compare_digest(supplied.encode("utf-8"), secret.encode("utf-8"))

def check_credential(header, secret) -> AuthStatus:
    """
    Classe l'en-tête Authorization brut:
        absent ou vide            -> NO_CREDENTIAL
        "Bearer <secret>" exact   -> AUTHORIZED
        tout le reste             -> UNAUTHORIZED
    """
    if not header:
        return AuthStatus.NO_CREDENTIAL
    if secret and verify_secret(header, f"Bearer {secret}"):
        return AuthStatus.AUTHORIZED
    return AuthStatus.UNAUTHORIZED
