"""Wi-Fi connection handling and a WebSocket session on top of it."""

from __future__ import annotations

import logging
import time
from enum import Enum, auto
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

CONNECT_ATTEMPTS = 10
CONNECT_POLL_SECONDS = 0.5

WS_HOST = "localhost"
WS_PORT = 3000
WS_PATH = "/ws"
WS_PROTOCOL = "ws"

Sleep = Callable[[float], None]


class WiFi(Protocol):
    """The Wi-Fi radio; credentials are the adapter's own business."""

    def begin(self) -> None: ...

    def is_connected(self) -> bool: ...

    def local_ip(self) -> str: ...

    def disconnect(self) -> None: ...


class WebSocket(Protocol):
    """A WebSocket client driven by an event callback."""

    def begin(self, host: str, port: int, path: str, protocol: str) -> None: ...

    def on_event(self, callback: Callable[[WsEvent, bytes | str], None]) -> None: ...

    def send_text(self, message: str) -> None: ...

    def loop(self) -> None: ...


class WsEvent(Enum):
    """Events a WebSocket client reports."""

    DISCONNECTED = auto()
    CONNECTED = auto()
    TEXT = auto()
    BIN = auto()
    ERROR = auto()
    FRAGMENT_TEXT_START = auto()
    FRAGMENT_BIN_START = auto()
    FRAGMENT = auto()
    FRAGMENT_FIN = auto()


def _wait_for_wifi(wifi: WiFi, sleep: Sleep) -> bool:
    wifi.begin()
    for _ in range(CONNECT_ATTEMPTS):
        if wifi.is_connected():
            break
        sleep(CONNECT_POLL_SECONDS)
    return wifi.is_connected()


def check_wifi_connection(wifi: WiFi, sleep: Sleep = time.sleep) -> bool:
    """Try to join the Wi-Fi network and report the outcome."""
    logger.info("Attempting WiFi connection...")
    if _wait_for_wifi(wifi, sleep):
        logger.info("WiFi connection successful! IP address: %s", wifi.local_ip())
        return True
    logger.warning("WiFi connection failed.")
    return False


class NetworkManager:
    """Keeps track of the Wi-Fi link and an optional WebSocket session."""

    def __init__(
        self,
        wifi: WiFi,
        websocket: WebSocket | None = None,
        sleep: Sleep = time.sleep,
    ) -> None:
        self._wifi = wifi
        self._websocket = websocket
        self._sleep = sleep
        self.connected = False
        self.ip_address = ""
        self.websocket_connected = False

    def connect(self) -> bool:
        """Join the Wi-Fi network; returns whether the link is up."""
        logger.info("Attempting network connection...")
        if _wait_for_wifi(self._wifi, self._sleep):
            self.connected = True
            self.ip_address = self._wifi.local_ip()
            logger.info("Network connection successful! IP address: %s", self.ip_address)
            return True
        self.connected = False
        logger.warning("Network connection failed.")
        return False

    def disconnect(self) -> None:
        self._wifi.disconnect()
        self.connected = False
        self.ip_address = ""

    def connect_websocket(self) -> bool:
        """Start the WebSocket session; needs the network to be up."""
        if not self.connected:
            logger.warning("Cannot connect WebSocket: Network not connected")
            return False
        if self._websocket is None:
            logger.warning("Cannot connect WebSocket: no client configured")
            return False
        self._websocket.begin(WS_HOST, WS_PORT, WS_PATH, WS_PROTOCOL)
        self._websocket.on_event(self.handle_websocket_event)
        logger.info("WebSocket connection initiated")
        return True

    def handle_websocket_event(self, event: WsEvent, payload: bytes | str = b"") -> None:
        if event is WsEvent.DISCONNECTED:
            self.websocket_connected = False
            logger.info("WebSocket disconnected")
        elif event is WsEvent.CONNECTED:
            self.websocket_connected = True
            logger.info("WebSocket connected")
        elif event is WsEvent.TEXT:
            text = payload.decode("utf-8", "replace") if isinstance(payload, bytes) else payload
            logger.info("Received text: %s", text)

    def send_websocket_message(self, message: str) -> None:
        """Send text if the session is open; otherwise drop it."""
        if self.websocket_connected and self._websocket is not None:
            self._websocket.send_text(message)

    def loop(self) -> None:
        if self._websocket is not None:
            self._websocket.loop()