import asyncio

import pytest

from pixelclock.settings import Settings
from pixelclock.webserver import SettingsServer, parse_request_line


@pytest.fixture
def server(tmp_path):
    return SettingsServer(
        tmp_path / "settings.json",
        settings_page="<html></html>",
        firmware_version="1.0",
        firmware_name="clock",
        clockface_name="face",
    )


def test_parse_request_line_with_query():
    request = parse_request_line("POST /set?wifiSsid=home HTTP/1.1\r\n")
    assert request.method == "POST"
    assert request.path == "/set"
    assert request.key == "wifiSsid"
    assert request.value == "home"


def test_parse_request_line_without_query():
    request = parse_request_line(b"GET /get HTTP/1.1\r\n")
    assert (request.method, request.path, request.key, request.value) == ("GET", "/get", "", "")


def test_parse_request_line_rejects_garbage():
    with pytest.raises(ValueError):
        parse_request_line("garbage\r\n")


def test_root_serves_page(server):
    response = server.process_request("GET", "/")
    assert response.startswith("HTTP/1.0 200 OK\r\nContent-Type: text/html\r\n\r\n")
    assert "<html></html>" in response


def test_set_display_bright_persists(server):
    response = server.process_request("POST", "/set", "displayBright", "50")
    assert response == "HTTP/1.0 204 No Content\r\n"
    assert Settings.load(server.settings_path).display_bright == 50
    assert server.restart_requested is False


def test_set_auto_bright(server):
    server.process_request("POST", "/set", "autoBright", "0010,0800")
    settings = Settings.load(server.settings_path)
    assert settings.auto_bright_min == 10
    assert settings.auto_bright_max == 800


def test_set_bool_and_text(server):
    server.process_request("POST", "/set", "swapBlueGreen", "1")
    server.process_request("POST", "/set", "timeZone", "Europe/Lisbon")
    server.process_request("POST", "/set", "wifiPwd", "password")
    settings = Settings.load(server.settings_path)
    assert settings.swap_blue_green is True
    assert settings.time_zone == "Europe/Lisbon"
    assert settings.wifi_pwd == "password"


def test_set_theme_requests_restart(server):
    server.process_request("POST", "/set", "selectedTheme", "2")
    assert Settings.load(server.settings_path).selected_theme == 2
    assert server.restart_requested is True


def test_restart(server):
    assert server.process_request("POST", "/restart") == "HTTP/1.0 204 No Content\r\n"
    assert server.restart_requested is True


def test_get_reports_settings(server):
    response = server.process_request("GET", "/get")
    assert response.startswith("HTTP/1.0 204 No Content\r\n")
    assert "X-displayBright: 32\r\n" in response
    assert "X-timeZone: America/Los_Angeles\r\n" in response
    assert "X-CW_FW_VERSION: 1.0\r\n" in response
    assert "X-CLOCKFACE_NAME: face\r\n" in response
    assert response.endswith("\r\n\r\n")


def test_settings_headers_order_and_secret_left_out(server):
    names = [name for name, _ in server.settings_headers()]
    assert names[0] == "displayBright"
    assert names[-1] == "CLOCKFACE_NAME"
    assert "wifiPwd" not in names


def test_read_pin(tmp_path):
    server = SettingsServer(tmp_path / "s.json", pin_reader=lambda pin: 1234)
    response = server.process_request("GET", "/read", "pin", "35")
    assert "X-pin: 1234\r\n" in response


def test_unknown_route_sends_nothing(server):
    assert server.process_request("GET", "/nowhere") == ""


class FakeWriter:
    def __init__(self):
        self.data = bytearray()
        self.closed = False

    def write(self, chunk):
        self.data += chunk

    async def drain(self):
        pass

    def close(self):
        self.closed = True

    async def wait_closed(self):
        pass


def test_handle_connection(server):
    async def run():
        reader = asyncio.StreamReader()
        reader.feed_data(b"POST /restart HTTP/1.1\r\nHost: clock\r\n\r\n")
        reader.feed_eof()
        writer = FakeWriter()
        await server.handle_connection(reader, writer)
        return writer

    writer = asyncio.run(run())
    assert bytes(writer.data) == b"HTTP/1.0 204 No Content\r\n"
    assert writer.closed
    assert server.restart_requested is True