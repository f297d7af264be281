# src/e2e/test_frontend_lazy_engine_concurrent.py
import threading
import time

import pytest

import frontend.web as webmod
from frontend.web import app as flask_app
from wordmatch.engine import Engine


class SlowEngine(Engine):
    """Widens the window in which two first requests could both build an engine."""
    def __init__(self, *args, **kwargs):
        time.sleep(0.05)
        super().__init__(*args, **kwargs)


@pytest.mark.e2e
def test_concurrent_first_requests_share_one_engine(monkeypatch):
    monkeypatch.setattr(webmod, "Engine", SlowEngine)
    monkeypatch.setattr(webmod, "_engine", None)
    start = threading.Barrier(2)
    statuses = []

    def post(word):
        client = flask_app.test_client()
        start.wait()
        statuses.append(client.post("/analyze", json={"text": word}).status_code)

    threads = [threading.Thread(target=post, args=(w,)) for w in ("cat", "dog")]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    try:
        assert statuses == [200, 200]
        assert webmod._engine.stats()["words"] == 2
    finally:
        webmod._engine.shutdown()
