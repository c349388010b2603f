import io
import socket

import pytest

from pixelclock.httpclient import HttpError, http_get, read_response


def test_body_after_headers():
    stream = io.BytesIO(b"HTTP/1.1 200 OK\r\nContent-Type: application/json\r\n\r\n{\"a\": 1}")
    assert read_response(stream) == b'{"a": 1}'


def test_empty_body():
    stream = io.BytesIO(b"HTTP/1.1 200 OK\r\nServer: x\r\n\r\n")
    assert read_response(stream) == b""


def test_unexpected_status_raises():
    stream = io.BytesIO(b"HTTP/1.1 404 Not Found\r\n\r\n")
    with pytest.raises(HttpError, match="404 Not Found"):
        read_response(stream)


def test_missing_end_of_headers_raises():
    stream = io.BytesIO(b"HTTP/1.1 200 OK\r\nServer: x\r\n")
    with pytest.raises(HttpError, match="Invalid response"):
        read_response(stream)


def test_empty_stream_raises():
    with pytest.raises(HttpError):
        read_response(io.BytesIO(b""))


def test_connection_refused_raises():
    with socket.socket() as probe:
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]
    with pytest.raises(HttpError, match="Connection failed"):
        http_get("127.0.0.1", "/file.json", port)