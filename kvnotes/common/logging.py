# kvnotes/common/logging.py
import logging, sys, time, uuid
from pythonjsonlogger import jsonlogger
from flask import g, request

def setup_json_logging(app):
    # Root logger en INFO (DEBUG en dev via app.debug)
    level = logging.DEBUG if app.debug else logging.INFO
    root = logging.getLogger()
    root.handlers = []  # nettoie
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    fmt = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s "
        "%(request_id)s %(method)s %(path)s %(status)s %(latency_ms)s %(key)s"
    )
    handler.setFormatter(fmt)
    root.addHandler(handler)

def register_request_logging(app):
    @app.before_request
    def _assign_request_id_and_start_timer():
        # request id: X-Request-Id entrant ou généré
        g.request_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())
        g._start_time = time.time()

    @app.after_request
    def _log_request(resp):
        start = getattr(g, "_start_time", None)
        latency = int((time.time() - start) * 1000) if start is not None else -1

        # expose le request id au client
        resp.headers.setdefault("X-Request-Id", getattr(g, "request_id", "-"))

        logging.getLogger("kvnotes.request").info(
            "http_request",
            extra={
                "request_id": getattr(g, "request_id", "-"),
                "method": request.method,
                "path": request.path,
                "status": resp.status_code,
                "latency_ms": latency,
            },
        )
        return resp
