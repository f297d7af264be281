from __future__ import annotations
import argparse
import logging
import os
import re
import threading
from typing import Any, Mapping

from flask import Flask, request, jsonify, Response
from wordmatch.engine import Engine
from wordmatch.validation import is_valid_word
from wordmatch import config as CFG

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: Engine | None = None
_engine_lock = threading.Lock()

TEXT = "text"
ERROR = "error"
JSON_UTF = "application/json; charset=utf-8"
POST_ERROR = "Only POST requests are allowed."
TYPE_ERROR = "Parameter `text` must be of type String."
DECODE_ERROR = "Request body must be valid JSON."
INVALID_REQUEST = ("Invalid request. Parameter `text` should"
                   " not contain special chars, digits or spaces and should not be null.")

_DIGITS = re.compile(r"[0-9]+")
_MAX_PORT = 65535


def _current_engine() -> Engine:
    # main() installs the engine; fall back to a fresh one under `flask run`
    global _engine
    if _engine is None:
        with _engine_lock:
            if _engine is None:
                _engine = Engine()
    return _engine

def _json(payload: Any, status: int = 200) -> Response:
    resp = jsonify(payload)
    resp.status_code = status
    resp.headers["Content-Type"] = JSON_UTF
    return resp

def _bad_request(message: str) -> Response:
    log.info("400 %s %s: %s", request.method, request.path, message)
    return _json({ERROR: message}, 400)

# ---------- API ----------
@app.post("/analyze", provide_automatic_options=False)
def analyze_post():
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        return _bad_request(DECODE_ERROR)
    text = body.get(TEXT)
    if text is not None and not isinstance(text, str):
        return _bad_request(TYPE_ERROR)
    if not is_valid_word(text):
        return _bad_request(INVALID_REQUEST)
    result = _current_engine().analyze(text)
    return _json(result.to_dict())

@app.route("/analyze", methods=["GET", "PUT", "PATCH", "DELETE", "OPTIONS"])
def analyze_other():
    return _bad_request(POST_ERROR)

@app.get("/health")
def health():
    return _json({"ok": True, **_current_engine().stats()})

# ---------- UI ----------
@app.get("/")
def home():
    # Minimal page: one input, POSTs to /analyze, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Word Match • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.card{ max-width:640px; margin:32px auto; background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
input{ width:100%; box-sizing:border-box; padding:12px 14px; border-radius:12px; border:1px solid var(--border); background:#0b1117; color:var(--ink); font-size:16px; }
input:focus{ border-color:var(--accent); outline:none }
dl{ display:grid; grid-template-columns:6rem 1fr; gap:8px; margin-top:16px }
dt{ color:var(--muted) }
.err{ color:#ffb0b0; margin-top:12px; min-height:1.2em }
</style>
</head>
<body>
  <div class="card">
    <h1>Word match</h1>
    <form id="f"><input id="text" type="text" placeholder="Type a word and press Enter…" autocomplete="off" autofocus /></form>
    <div id="err" class="err"></div>
    <dl><dt>value</dt><dd id="value">—</dd><dt>lexical</dt><dd id="lexical">—</dd></dl>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
$("#f").addEventListener("submit", async (ev)=>{
  ev.preventDefault();
  $("#err").textContent = "";
  const resp = await fetch("/analyze", {method:"POST", headers:{"Content-Type":"application/json"},
                                       body: JSON.stringify({text: $("#text").value})});
  const data = await resp.json();
  if(!resp.ok){ $("#err").textContent = data.error; return; }
  $("#value").textContent = data.value ?? "(none)";
  $("#lexical").textContent = data.lexical ?? "(none)";
  $("#text").value = "";
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def resolve_port(cli_port: int | None = None, env: Mapping[str, str] | None = None) -> int:
    """--port wins; else $PORT if it is a valid port number; else the default port."""
    if cli_port is not None:
        return cli_port
    env = os.environ if env is None else env
    raw = env.get(CFG.PORT_ENV_VAR, "")
    if _DIGITS.fullmatch(raw) and 0 < int(raw) <= _MAX_PORT:
        return int(raw)
    return CFG.DEFAULT_PORT

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the word match HTTP service")
    ap.add_argument("--host", default=CFG.DEFAULT_HOST)
    ap.add_argument("--port", type=int, default=None, help=f"Defaults to ${CFG.PORT_ENV_VAR} or {CFG.DEFAULT_PORT}")
    ap.add_argument("--seed", type=int, default=CFG.RANDOM_SEED)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    global _engine
    _engine = Engine(seed=args.seed)
    port = resolve_port(args.port)
    print(f"Listening on port {port}")
    try:
        app.run(host=args.host, port=port, debug=args.verbose, threaded=True, use_reloader=False)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
