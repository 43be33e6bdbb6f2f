import io
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from samplekit.fetch import fetch, main

BODY = b"hello from the test server\n" * 100
MISSING = b"nothing here\n"


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        found = self.path == "/"
        body = BODY if found else MISSING
        self.send_response(200 if found else 404)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture(scope="module")
def base_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


def test_fetch_copies_body(base_url):
    out = io.BytesIO()
    copied = fetch(base_url + "/", out)
    assert out.getvalue() == BODY
    assert copied == len(BODY)


def test_fetch_writes_every_destination(base_url):
    first, second = io.BytesIO(), io.BytesIO()
    fetch(base_url + "/", first, second)
    assert first.getvalue() == second.getvalue() == BODY


def test_fetch_copies_error_body(base_url):
    out = io.BytesIO()
    fetch(base_url + "/missing", out)
    assert out.getvalue() == MISSING


def test_main_saves_and_prints(base_url, tmp_path, capsysbinary):
    target = tmp_path / "page.txt"
    assert main([base_url + "/", str(target)]) == 0
    assert target.read_bytes() == BODY
    assert capsysbinary.readouterr().out == BODY


def test_main_reports_failure(capsys):
    assert main(["http://127.0.0.1:1/"]) == 1
    assert capsys.readouterr().err != ""