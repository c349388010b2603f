"""A minimal HTTP/1.1 GET over TLS that returns the response body."""

from __future__ import annotations

import socket
import ssl
from typing import BinaryIO

_STATUS_LIMIT = 32
_END_OF_HEADERS = b"\r\n\r\n"
_TIMEOUT_SECONDS = 10


class HttpError(Exception):
    """Raised when a request cannot be made or the response is not usable."""


def read_response(stream: BinaryIO) -> bytes:
    """Check the status line, skip the headers and return the body."""
    status = bytearray()
    while len(status) < _STATUS_LIMIT:
        char = stream.read(1)
        if not char or char == b"\r":
            break
        status += char
    line = status.decode("latin-1")
    if "200 OK" not in line:
        raise HttpError(f"Unexpected response: {line}")
    window = b""
    while window != _END_OF_HEADERS:
        char = stream.read(1)
        if not char:
            raise HttpError("Invalid response")
        window = (window + char)[-len(_END_OF_HEADERS):]
    return stream.read()


def http_get(host: str, path: str, port: int) -> bytes:
    """Fetch path from host over TLS without verifying the certificate."""
    request = (
        f"GET {path} HTTP/1.1\r\n"
        f"Host: {host}\r\n"
        "Connection: close\r\n"
        "\r\n"
    ).encode("latin-1")
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    try:
        with socket.create_connection((host, port), timeout=_TIMEOUT_SECONDS) as raw:
            with context.wrap_socket(raw, server_hostname=host) as conn:
                conn.sendall(request)
                with conn.makefile("rb") as stream:
                    return read_response(stream)
    except OSError as exc:
        raise HttpError("Connection failed") from exc