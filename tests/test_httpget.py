import io
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from handson.httpget import fetch, main

BODY = "hello body ✓".encode()
MISSING_BODY = b"missing"


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/":
            status, body = 200, BODY
        else:
            status, body = 404, MISSING_BODY
        self.send_response(status)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def base_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address
    try:
        yield f"http://{host}:{port}"
    finally:
        server.shutdown()
        server.server_close()
        thread.join()


def test_fetch_copies_body(base_url):
    out = io.BytesIO()
    copied = fetch(base_url + "/", out)
    assert out.getvalue() == BODY
    assert copied == len(BODY)


def test_fetch_copies_error_body(base_url):
    out = io.BytesIO()
    assert fetch(base_url + "/missing", out) == len(MISSING_BODY)
    assert out.getvalue() == MISSING_BODY


def test_fetch_unreachable_raises():
    with pytest.raises(OSError):
        fetch("http://127.0.0.1:1/", io.BytesIO())


def test_main_writes_body(base_url, capsysbinary):
    assert main([base_url + "/"]) == 0
    assert capsysbinary.readouterr().out == BODY


def test_main_without_url(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_main_reports_connection_error(capsys):
    assert main(["http://127.0.0.1:1/"]) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("Error:")
    assert captured.out == ""