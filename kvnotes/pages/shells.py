# kvnotes/pages/shells.py
# Coquilles HTML minimales: le rendu complet de l'app est hors du service.

LOGIN_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8"/>
    <meta name="viewport" content="width=device-width, initial-scale=1.0"/>
    <title>Login - My Notes</title>
  </head>
  <body>
    <main id="login" data-auth="bearer">
      <h1>My Notes</h1>
      <p>Please enter your password to continue.</p>
      <form id="login-form">
        <input type="password" id="password-input" placeholder="Password" required>
        <button type="submit">Login</button>
      </form>
    </main>
  </body>
</html>"""

APP_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8"/>
    <meta name="viewport" content="width=device-width, initial-scale=1.0"/>
    <title>My Notes</title>
  </head>
  <body>
    <main id="app" data-api="/api/notes" data-views="active trash"></main>
    <noscript>Enable JavaScript to use My Notes.</noscript>
  </body>
</html>"""
