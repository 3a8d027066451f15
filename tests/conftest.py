"""
pytest configuration and fixtures.
"""

import socket
import threading
from pathlib import Path
from typing import Dict, Generator, NamedTuple

import pytest

from rawhttpd import HTTPServer, ServerConfig


class RawResponse(NamedTuple):
    """A response split back into its wire parts."""
    status_line: str
    headers: Dict[str, str]
    body: bytes

    @property
    def status_code(self) -> int:
        return int(self.status_line.split(" ")[1])


def parse_raw_response(data: bytes) -> RawResponse:
    head, _, body = data.partition(b"\r\n\r\n")
    lines = head.decode("latin-1").split("\r\n")
    headers = {}
    for line in lines[1:]:
        key, value = line.split(":", 1)
        headers[key.strip()] = value.strip()
    return RawResponse(lines[0], headers, body)


def send_raw(port: int, payload: bytes, timeout: float = 5.0) -> bytes:
    """Send raw bytes to the server and read until it closes the connection."""
    with socket.create_connection(("127.0.0.1", port), timeout=timeout) as sock:
        sock.sendall(payload)
        chunks = []
        while True:
            chunk = sock.recv(4096)
            if not chunk:
                break
            chunks.append(chunk)
    return b"".join(chunks)


@pytest.fixture
def sample_get_request() -> bytes:
    """Sample HTTP GET request."""
    return (
        b"GET /user-agent HTTP/1.1\r\n"
        b"Host: localhost:4221\r\n"
        b"User-Agent: pytest\r\n"
        b"Accept: */*\r\n"
        b"\r\n"
    )


@pytest.fixture
def sample_post_request() -> bytes:
    """Sample HTTP POST request with a binary body."""
    body = b"\x00\x01binary\r\n\r\npayload\xff"
    length_line = f"Content-Length: {len(body)}\r\n".encode()
    return (
        b"POST /files/upload.bin HTTP/1.1\r\n"
        b"Host: localhost:4221\r\n"
        b"Content-Type: application/octet-stream\r\n"
        + length_line
        + b"\r\n"
        + body
    )


@pytest.fixture
def file_root(tmp_path: Path) -> Path:
    """Empty directory used as the static file root."""
    root = tmp_path / "files"
    root.mkdir()
    return root


@pytest.fixture
def config(file_root: Path) -> ServerConfig:
    """Test server configuration."""
    return ServerConfig(
        host="127.0.0.1",
        port=0,  # Let OS pick a free port
        directory=str(file_root),
        socket_timeout=5.0,
    )


class TestServer:
    """Test server helper that runs in a background thread."""

    __test__ = False

    def __init__(self, server: HTTPServer):
        self.server = server
        self._thread: threading.Thread = None

    @property
    def port(self) -> int:
        return self.server.server_address[1]

    def start(self):
        """Start server in background thread."""
        self._thread = threading.Thread(target=self.server.start, daemon=True)
        self._thread.start()
        if not self.server.wait_until_ready(timeout=5.0):
            raise RuntimeError("Server failed to start")

    def stop(self):
        """Stop the server."""
        self.server.stop()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=5.0)

    def request(self, payload: bytes) -> RawResponse:
        return parse_raw_response(send_raw(self.port, payload))


@pytest.fixture
def live_server(config: ServerConfig) -> Generator[TestServer, None, None]:
    """A running server on a free port, serving ``file_root``."""
    test_srv = TestServer(HTTPServer(config))
    test_srv.start()

    yield test_srv

    test_srv.stop()
