import json
from wsgiref.util import setup_testing_defaults

from samplekit import handlers


def serve(path, method="GET"):
    handlers.routes()
    environ = {}
    setup_testing_defaults(environ)
    environ.update(REQUEST_METHOD=method, PATH_INFO=path)
    captured = {}

    def start_response(status, headers, exc_info=None):
        captured["status"] = status
        captured["headers"] = dict(headers)

    body = b"".join(handlers.app(environ, start_response))
    return captured["status"], captured["headers"], body


def test_send_json_endpoint():
    status, headers, body = serve("/sendjson")
    assert status.startswith("200")
    user = json.loads(body)
    assert user["Name"] == "Bill"
    assert user["Email"] == "[email]"
    assert headers["Content-Type"] == "application/json"


def test_send_json_example_output():
    _, _, body = serve("/sendjson")
    user = json.loads(body)
    assert (user["Name"], user["Email"]) == ("Bill", "[email]")


def test_routes_register_send_json():
    table = handlers.routes()
    assert table["/sendjson"] is handlers.send_json


def test_unknown_path_is_not_found():
    status, _, body = serve("/nothing")
    assert status.startswith("404")
    assert body == b"404 page not found\n"