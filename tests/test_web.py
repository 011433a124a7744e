import io
import json
from wsgiref.util import setup_testing_defaults

from basekit import web


def make_environ(method="GET", query="", body=b"", content_type="", **extra):
    environ = {
        "REQUEST_METHOD": method,
        "QUERY_STRING": query,
        "wsgi.input": io.BytesIO(body),
        "CONTENT_LENGTH": str(len(body)),
        "CONTENT_TYPE": content_type,
    }
    environ.update(extra)
    setup_testing_defaults(environ)
    return environ


class Recorder:
    def __init__(self):
        self.status = None
        self.headers = None

    def __call__(self, status, headers):
        self.status = status
        self.headers = dict(headers)


def test_query_params():
    environ = make_environ(query="a=1&a=2&b=")
    assert web.query_params(environ) == {"a": ["1", "2"], "b": [""]}


def test_form_params_from_post_body():
    environ = make_environ(
        method="POST",
        body=b"name=alice&tag=x&tag=y",
        content_type="application/x-www-form-urlencoded",
    )
    assert web.form_params(environ) == {"name": ["alice"], "tag": ["x", "y"]}


def test_form_params_ignores_get_and_other_types():
    assert web.form_params(make_environ(query="a=1")) == {}
    environ = make_environ(method="POST", body=b"a=1", content_type="text/plain")
    assert web.form_params(environ) == {}


def test_json_params():
    environ = make_environ(method="POST", body=b'{"name":"alice","city":"x"}')
    assert web.json_params(environ) == {"name": "alice", "city": "x"}


def test_json_params_invalid_body():
    assert web.json_params(make_environ(method="POST", body=b"not json")) is None
    assert web.json_params(make_environ(method="POST", body=b"[1,2]")) is None
    assert web.json_params(make_environ(method="POST", body=b'{"n":1}')) is None


def test_request_headers_and_method():
    environ = make_environ(method="PUT", HTTP_ACCEPT_ENCODING="gzip, deflate")
    headers = web.request_headers(environ)
    assert headers["Accept-Encoding"] == "gzip, deflate"
    assert web.http_method(environ) == "PUT"


def test_success_response():
    recorder = Recorder()
    body = b"".join(web.success_response(recorder, {"id": 7}))
    assert recorder.status == "200 OK"
    assert recorder.headers["Content-Type"] == "application/json; charset=utf-8"
    assert recorder.headers["Content-Length"] == str(len(body))
    assert json.loads(body) == {"status": 1, "message": "success", "data": {"id": 7}}


def test_fail_response_and_field_order():
    recorder = Recorder()
    body = b"".join(web.fail_response(recorder, [1, 2]))
    assert json.loads(body) == {"status": 9999, "message": "fail", "data": [1, 2]}
    assert body.index(b'"status"') < body.index(b'"message"') < body.index(b'"data"')


def test_message_response_carries_message_as_data():
    recorder = Recorder()
    body = b"".join(web.message_response(recorder, "saved"))
    assert json.loads(body) == {"status": 1, "message": "success", "data": "saved"}


def test_none_data_is_omitted():
    recorder = Recorder()
    body = b"".join(web.success_response(recorder, None))
    assert "data" not in json.loads(body)


def test_html_characters_are_escaped():
    recorder = Recorder()
    body = b"".join(web.success_response(recorder, "<b>&"))
    assert b"<" not in body and b">" not in body and b"&" not in body
    assert json.loads(body)["data"] == "<b>&"


def test_custom_http_code():
    recorder = Recorder()
    web.json_response(recorder, 404, web.STATUS_FAIL, "fail", None)
    assert recorder.status.startswith("404 ")


def test_unencodable_data_gives_empty_body():
    recorder = Recorder()
    assert web.success_response(recorder, object()) == [b""]


def test_redirect():
    recorder = Recorder()
    assert web.redirect(recorder, "/login") == []
    assert recorder.status == "302 Found"
    assert recorder.headers == {"Location": "/login"}