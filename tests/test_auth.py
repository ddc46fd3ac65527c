# tests/test_auth.py
from kvnotes.common.credentials import AuthStatus, check_credential, verify_secret

def test_check_credential():
    assert check_credential(None, "s3cret") is AuthStatus.NO_CREDENTIAL
    assert check_credential("", "s3cret") is AuthStatus.NO_CREDENTIAL
    assert check_credential("Bearer s3cret", "s3cret") is AuthStatus.AUTHORIZED
    assert check_credential("Bearer s3cret ", "s3cret") is AuthStatus.UNAUTHORIZED
    assert check_credential("bearer s3cret", "s3cret") is AuthStatus.UNAUTHORIZED
    assert check_credential("Bearer other", "s3cret") is AuthStatus.UNAUTHORIZED
    assert check_credential("Bearer ", None) is AuthStatus.UNAUTHORIZED

def test_verify_secret():
    assert verify_secret("s3cret", "s3cret")
    assert not verify_secret("S3cret", "s3cret")
    assert not verify_secret("", "")
    assert not verify_secret(None, "s3cret")

def test_index_serves_login_shell_without_credential(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.mimetype == "text/html"
    assert b"login-form" in r.data

def test_index_serves_app_shell_when_authorized(client, auth_headers):
    r = client.get("/", headers=auth_headers)
    assert r.status_code == 200
    assert b'id="app"' in r.data
    assert "script-src 'self'" in r.headers["Content-Security-Policy"]

def test_index_rejects_wrong_credential(client):
    r = client.get("/", headers={"Authorization": "Bearer wrong"})
    assert r.status_code == 401
    assert r.get_json()["error"]["code"] == "unauthorized"

def test_other_paths_redirect_home(client):
    for path in ("/login", "/notes/123", "/static/app.js"):
        r = client.get(path)
        assert r.status_code == 302
        assert r.headers["Location"].endswith("/")
