"""
Pytest configuration and shared fixtures
"""

import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from unittest.mock import Mock

import pytest

from httphelper import transport
from httphelper.config import Config


@pytest.fixture
def test_config():
    """Minimal test configuration"""
    return Config(
        {
            "transport": {"chunk_size": 4, "max_url_length": 64, "timeout": 5, "verify": True},
            "parser": {"default_port": 80, "supported_schemes": ["http", "https", "ftp"]},
            "logging": {"level": "WARNING"},
        }
    )


@pytest.fixture
def mock_http_client():
    """Mock HTTP client for testing"""
    return Mock()


@pytest.fixture
def make_response():
    """Factory for mock streamed responses"""

    def _make(chunks=(b"",), status_code=200):
        response = Mock()
        response.status_code = status_code
        response.iter_content.return_value = iter(list(chunks))
        return response

    return _make


@pytest.fixture(autouse=True)
def reset_transport():
    """Every test starts and ends with the transport torn down"""
    transport.cleanup()
    yield
    transport.cleanup()


class _RecordingHandler(BaseHTTPRequestHandler):
    """Answers every request with a short body and records what it received"""

    def _handle(self):
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length) if length else b""
        self.server.requests.append(
            {
                "method": self.command,
                "path": self.path,
                "headers": dict(self.headers),
                "body": body,
            }
        )

        if self.path.startswith("/stall") or self.path.startswith("/short"):
            # Promise 10 bytes, send 2; /stall then holds the connection open
            self.send_response(200)
            self.send_header("Content-Length", "10")
            self.end_headers()
            self.wfile.write(b"ab")
            self.wfile.flush()
            if self.path.startswith("/stall"):
                self.server.release.wait(timeout=10)
            return

        if self.path.startswith("/binary"):
            payload = b"\x00\x01\x00binary\x00"
        elif self.path.startswith("/empty"):
            payload = b""
        elif self.path.startswith("/missing"):
            self.send_response(404)
            self.send_header("Content-Length", "9")
            self.end_headers()
            self.wfile.write(b"not found")
            return
        elif self.command == "POST":
            payload = b'{"received": ' + str(len(body)).encode() + b"}"
        else:
            payload = b'{"hello": "world"}'

        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    do_GET = _handle
    do_POST = _handle

    def log_message(self, format, *args):
        pass


@pytest.fixture
def local_server():
    """HTTP server on 127.0.0.1; yields the server, recorded requests in .requests"""
    server = ThreadingHTTPServer(("127.0.0.1", 0), _RecordingHandler)
    server.requests = []
    server.release = threading.Event()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.release.set()
    server.shutdown()
    server.server_close()
    thread.join(timeout=5)


@pytest.fixture
def closed_port():
    """A loopback port nothing listens on"""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return port
