"""Request parameter helpers and JSON responses for WSGI applications.

Response helpers call ``start_response`` and return the body as a list of
byte strings, ready to be returned from a WSGI application.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Optional
from urllib.parse import parse_qs

STATUS_SUCCESS = 1
STATUS_FAIL = 9999
ACCESS_TOKEN = "token"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"

_FORM_TYPE = "application/x-www-form-urlencoded"
_BODY_METHODS = {"POST", "PUT", "PATCH"}
_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}

_log = logging.getLogger(__name__)

StartResponse = Callable[..., Any]


def _encode(value: Any) -> str:
    text = json.dumps(value, ensure_ascii=False, separators=(",", ":"), sort_keys=True)
    for char, escape in _HTML_ESCAPES.items():
        text = text.replace(char, escape)
    return text


def _read_body(environ: dict[str, Any]) -> bytes:
    stream = environ.get("wsgi.input")
    if stream is None:
        return b""
    try:
        length = int(environ.get("CONTENT_LENGTH") or "")
    except ValueError:
        return stream.read()
    return stream.read(length) if length > 0 else b""


def query_params(environ: dict[str, Any]) -> dict[str, list[str]]:
    """Parameters of the query string, each name mapped to all its values."""
    return parse_qs(environ.get("QUERY_STRING", ""), keep_blank_values=True)


def form_params(environ: dict[str, Any]) -> dict[str, list[str]]:
    """URL-encoded form fields from the body of a POST, PUT or PATCH request."""
    if environ.get("REQUEST_METHOD", "GET").upper() not in _BODY_METHODS:
        return {}
    content_type = environ.get("CONTENT_TYPE", "").split(";", 1)[0].strip().lower()
    if content_type != _FORM_TYPE:
        return {}
    body = _read_body(environ).decode("utf-8", errors="replace")
    return parse_qs(body, keep_blank_values=True)


def json_params(environ: dict[str, Any]) -> Optional[dict[str, str]]:
    """The body as a JSON object of strings, or ``None`` if it is not one."""
    try:
        value = json.loads(_read_body(environ))
    except ValueError:
        return None
    if not isinstance(value, dict):
        return None
    if not all(isinstance(item, str) for item in value.values()):
        return None
    return value


def request_headers(environ: dict[str, Any]) -> dict[str, str]:
    """Request headers by canonical name, e.g. ``Accept-Encoding``."""
    headers = {}
    for key, value in environ.items():
        if key.startswith("HTTP_"):
            name = key[5:]
        elif key in ("CONTENT_TYPE", "CONTENT_LENGTH") and value:
            name = key
        else:
            continue
        headers["-".join(part.capitalize() for part in name.split("_"))] = value
    return headers


def http_method(environ: dict[str, Any]) -> str:
    """The request method."""
    return environ.get("REQUEST_METHOD", "GET")


def _status_line(code: int) -> str:
    try:
        return f"{code} {HTTPStatus(code).phrase}"
    except ValueError:
        return f"{code} "


@dataclass
class ResponseData:
    """The JSON envelope of every response; ``data`` is left out when None."""

    status: int
    message: str
    data: Any = None

    def to_json(self) -> bytes:
        parts = [f'"status":{int(self.status)}', f'"message":{_encode(self.message)}']
        if self.data is not None:
            parts.append(f'"data":{_encode(self.data)}')
        return ("{" + ",".join(parts) + "}").encode("utf-8")


def json_response(
    start_response: StartResponse,
    http_code: int,
    status: int,
    message: str,
    data: Any,
) -> list[bytes]:
    """Start a JSON response and return its body."""
    try:
        body = ResponseData(status, message, data).to_json()
    except (TypeError, ValueError) as exc:
        _log.error("cannot encode response: %s", exc)
        body = b""
    start_response(
        _status_line(http_code),
        [
            ("Content-Type", JSON_CONTENT_TYPE),
            ("Access-Token", ACCESS_TOKEN),
            ("Content-Length", str(len(body))),
        ],
    )
    return [body]


def success_response(start_response: StartResponse, data: Any) -> list[bytes]:
    return json_response(start_response, 200, STATUS_SUCCESS, "success", data)


def fail_response(start_response: StartResponse, data: Any) -> list[bytes]:
    return json_response(start_response, 200, STATUS_FAIL, "fail", data)


def message_response(start_response: StartResponse, message: str) -> list[bytes]:
    return json_response(start_response, 200, STATUS_SUCCESS, "success", message)


def redirect(start_response: StartResponse, url: str) -> list[bytes]:
    """Start a 302 redirect to ``url``."""
    start_response(_status_line(302), [("Location", url)])
    return []