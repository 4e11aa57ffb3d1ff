"""HTTP adapter: JSON endpoints for products and a small WSGI server."""

from __future__ import annotations

import json
import logging
import re
import time
from http import HTTPStatus
from typing import Any, Callable, Iterable
from wsgiref.simple_server import WSGIRequestHandler, make_server

from hexproducts.dto import ProductDTO

logger = logging.getLogger(__name__)

_HTML_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)

_JSON_HEADERS = [("Content-Type", "application/json")]


def _encode(value: Any) -> bytes:
    """Encode compactly, escaping HTML-sensitive characters inside strings."""
    text = json.dumps(value, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    for char, escaped in _HTML_ESCAPES:
        text = text.replace(char, escaped)
    return text.encode("utf-8")


def _number(value: Any) -> int | float:
    number = float(value)
    if number.is_integer() and abs(number) < 1e21:
        return int(number)
    return number


def _encode_product(product: Any) -> bytes:
    fields = {
        "ID": product.id,
        "Name": product.name,
        "Price": _number(product.price),
        "Status": product.status,
    }
    return _encode(fields) + b"\n"


def json_error(message: str) -> bytes:
    """Return ``{"message": ...}`` as compact JSON bytes."""
    return _encode({"message": message})


_Result = tuple[HTTPStatus, bytes]


def _product_reply(product: Any) -> _Result:
    try:
        return HTTPStatus.OK, _encode_product(product)
    except (ValueError, TypeError, AttributeError):
        return HTTPStatus.INTERNAL_SERVER_ERROR, b""


def _get_product(service: Any, product_id: str, _body: bytes) -> _Result:
    try:
        product = service.get(product_id)
    except Exception:
        return HTTPStatus.NOT_FOUND, b""
    return _product_reply(product)


def _change_status(action: str) -> Callable[[Any, str, bytes], _Result]:
    def handler(service: Any, product_id: str, _body: bytes) -> _Result:
        try:
            product = service.get(product_id)
        except Exception:
            return HTTPStatus.NOT_FOUND, b""
        try:
            result = getattr(service, action)(product)
        except Exception as exc:
            return HTTPStatus.INTERNAL_SERVER_ERROR, json_error(str(exc))
        return _product_reply(result)

    return handler


def _create_product(service: Any, _product_id: str, body: bytes) -> _Result:
    try:
        data = json.loads(body.decode("utf-8")) if body.strip() else None
        if data is None:
            raise ValueError("EOF")
        if isinstance(data, dict):
            data = {str(key).lower(): value for key, value in data.items()}
        dto = ProductDTO.from_dict(data)
    except (ValueError, UnicodeDecodeError) as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, json_error(str(exc))
    try:
        product = service.create(dto.name, dto.price)
    except Exception as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, json_error(str(exc))
    try:
        return HTTPStatus.OK, _encode_product(product)
    except (ValueError, TypeError, AttributeError) as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, json_error(str(exc))


_ROUTES = (
    (re.compile(r"/product/(?P<id>[^/]+)"), ("GET", "OPTIONS"), _get_product),
    (re.compile(r"/product"), ("POST", "OPTIONS"), _create_product),
    (re.compile(r"/product/(?P<id>[^/]+)/enable"), ("GET", "OPTIONS"), _change_status("enable")),
    (re.compile(r"/product/(?P<id>[^/]+)/disable"), ("GET", "OPTIONS"), _change_status("disable")),
)


def _read_body(environ: dict) -> bytes:
    try:
        length = int(environ.get("CONTENT_LENGTH") or 0)
    except ValueError:
        length = 0
    if length <= 0:
        return b""
    return environ["wsgi.input"].read(length)


def _dispatch(service: Any, environ: dict) -> tuple[HTTPStatus, list[tuple[str, str]], bytes]:
    method = environ.get("REQUEST_METHOD", "GET").upper()
    path = environ.get("PATH_INFO", "") or "/"
    method_mismatch = False
    for pattern, methods, handler in _ROUTES:
        match = pattern.fullmatch(path)
        if match is None:
            continue
        if method not in methods:
            method_mismatch = True
            continue
        status, body = handler(service, match.groupdict().get("id", ""), _read_body(environ))
        return status, list(_JSON_HEADERS), body
    if method_mismatch:
        return HTTPStatus.METHOD_NOT_ALLOWED, [], b""
    return (
        HTTPStatus.NOT_FOUND,
        [("Content-Type", "text/plain; charset=utf-8")],
        b"404 page not found\n",
    )


def make_app(service: Any) -> Callable[[dict, Callable], Iterable[bytes]]:
    """Return a WSGI application serving the product endpoints for ``service``."""

    def app(environ: dict, start_response: Callable) -> Iterable[bytes]:
        started = time.perf_counter()
        method = environ.get("REQUEST_METHOD", "GET")
        path = environ.get("PATH_INFO", "")
        logger.info("Started %s %s", method, path)
        status, headers, body = _dispatch(service, environ)
        headers.append(("Content-Length", str(len(body))))
        start_response(f"{status.value} {status.phrase}", headers)
        logger.info(
            "Completed %d %s in %.3fms",
            status.value,
            status.phrase,
            (time.perf_counter() - started) * 1000,
        )
        return [body]

    return app


class _RequestHandler(WSGIRequestHandler):
    timeout = 10

    def log_message(self, format: str, *args: Any) -> None:
        logger.debug(format, *args)


def serve(service: Any, host: str = "", port: int = 8080) -> None:
    """Serve the product endpoints until interrupted."""
    app = make_app(service)
    with make_server(host, port, app, handler_class=_RequestHandler) as server:
        server.serve_forever()