import logging

import pytest

from gameboard.network import (
    CONNECT_POLL_SECONDS,
    NetworkManager,
    WsEvent,
    check_wifi_connection,
)


class FakeWiFi:
    def __init__(self, connect_after=0, ip="192.0.2.10"):
        self.connect_after = connect_after
        self.ip = ip
        self.begun = 0
        self.checks = 0
        self.disconnected = False

    def begin(self):
        self.begun += 1

    def is_connected(self):
        self.checks += 1
        return self.connect_after is not None and self.checks > self.connect_after

    def local_ip(self):
        return self.ip

    def disconnect(self):
        self.disconnected = True


class FakeWebSocket:
    def __init__(self):
        self.begins = []
        self.callback = None
        self.sent = []
        self.loops = 0

    def begin(self, host, port, path, protocol):
        self.begins.append((host, port, path, protocol))

    def on_event(self, callback):
        self.callback = callback

    def send_text(self, message):
        self.sent.append(message)

    def loop(self):
        self.loops += 1


@pytest.fixture
def sleeps():
    return []


def test_connect_success_records_address(sleeps):
    wifi = FakeWiFi(connect_after=0)
    manager = NetworkManager(wifi, FakeWebSocket(), sleeps.append)
    assert manager.connect() is True
    assert manager.connected is True
    assert manager.ip_address == "192.0.2.10"
    assert sleeps == []
    assert wifi.begun == 1


def test_connect_waits_between_polls(sleeps):
    manager = NetworkManager(FakeWiFi(connect_after=3), FakeWebSocket(), sleeps.append)
    assert manager.connect() is True
    assert sleeps == [CONNECT_POLL_SECONDS] * 3


def test_connect_gives_up_after_ten_polls(sleeps):
    manager = NetworkManager(FakeWiFi(connect_after=None), FakeWebSocket(), sleeps.append)
    assert manager.connect() is False
    assert manager.connected is False
    assert manager.ip_address == ""
    assert len(sleeps) == 10


def test_disconnect_clears_state(sleeps):
    wifi = FakeWiFi()
    manager = NetworkManager(wifi, FakeWebSocket(), sleeps.append)
    manager.connect()
    manager.disconnect()
    assert wifi.disconnected is True
    assert manager.connected is False
    assert manager.ip_address == ""


def test_websocket_needs_network(sleeps):
    socket = FakeWebSocket()
    manager = NetworkManager(FakeWiFi(), socket, sleeps.append)
    assert manager.connect_websocket() is False
    assert socket.begins == []


def test_websocket_begins_with_endpoint(sleeps):
    socket = FakeWebSocket()
    manager = NetworkManager(FakeWiFi(), socket, sleeps.append)
    manager.connect()
    assert manager.connect_websocket() is True
    assert socket.begins == [("localhost", 3000, "/ws", "ws")]


def test_websocket_without_client_fails(sleeps):
    manager = NetworkManager(FakeWiFi(), None, sleeps.append)
    manager.connect()
    assert manager.connect_websocket() is False


def test_registered_callback_tracks_connection(sleeps):
    socket = FakeWebSocket()
    manager = NetworkManager(FakeWiFi(), socket, sleeps.append)
    manager.connect()
    manager.connect_websocket()
    socket.callback(WsEvent.CONNECTED, b"")
    assert manager.websocket_connected is True
    socket.callback(WsEvent.DISCONNECTED, b"")
    assert manager.websocket_connected is False


def test_messages_only_sent_while_connected(sleeps):
    socket = FakeWebSocket()
    manager = NetworkManager(FakeWiFi(), socket, sleeps.append)
    manager.send_websocket_message("early")
    manager.handle_websocket_event(WsEvent.CONNECTED)
    manager.send_websocket_message("hi")
    manager.handle_websocket_event(WsEvent.DISCONNECTED)
    manager.send_websocket_message("late")
    assert socket.sent == ["hi"]


def test_other_events_leave_state(sleeps):
    manager = NetworkManager(FakeWiFi(), FakeWebSocket(), sleeps.append)
    manager.handle_websocket_event(WsEvent.CONNECTED)
    for event in (WsEvent.BIN, WsEvent.ERROR, WsEvent.FRAGMENT, WsEvent.FRAGMENT_FIN):
        manager.handle_websocket_event(event, b"\x00")
    assert manager.websocket_connected is True


def test_text_event_is_logged(sleeps, caplog):
    caplog.set_level(logging.INFO, logger="gameboard.network")
    manager = NetworkManager(FakeWiFi(), FakeWebSocket(), sleeps.append)
    manager.handle_websocket_event(WsEvent.TEXT, b"hello board")
    assert "hello board" in caplog.text


def test_loop_drives_client(sleeps):
    socket = FakeWebSocket()
    manager = NetworkManager(FakeWiFi(), socket, sleeps.append)
    manager.loop()
    manager.loop()
    assert socket.loops == 2


def test_check_wifi_connection_reports_result(sleeps):
    assert check_wifi_connection(FakeWiFi(connect_after=1), sleeps.append) is True
    assert sleeps == [CONNECT_POLL_SECONDS]
    assert check_wifi_connection(FakeWiFi(connect_after=None), lambda s: None) is False