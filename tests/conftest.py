"""
Pytest fixtures for claude-usage-status tests.

Test imports use the src/claude_usage_status/ package via --import-mode=importlib
(see pyproject.toml).
"""

import json
import logging
import threading
from datetime import datetime, timezone
from http.server import BaseHTTPRequestHandler, HTTPServer
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from claude_usage_status.config.credentials import FileCredentialSource


# ═══════════════════════════════════════════════════════════════════════════════
# Path Constants
# ═══════════════════════════════════════════════════════════════════════════════

FIXTURES_DIR = Path(__file__).parent / "fixtures"
with open(FIXTURES_DIR / "api_responses.json") as f:
    FIXTURES = json.load(f)


# ═══════════════════════════════════════════════════════════════════════════════
# API Response Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def usage_normal():
    """Reference usage response (45% session, 78% weekly)."""
    return json.loads(json.dumps(FIXTURES["usage_normal"]))


@pytest.fixture
def usage_high():
    """High usage response with extra windows (85.2% session, 67.8% weekly)."""
    return json.loads(json.dumps(FIXTURES["usage_high"]))


@pytest.fixture
def usage_critical():
    """Critical usage response (98.7% session, 95.1% weekly)."""
    return json.loads(json.dumps(FIXTURES["usage_critical"]))


@pytest.fixture
def usage_empty():
    """Empty usage response (0% usage, no reset times)."""
    return json.loads(json.dumps(FIXTURES["usage_empty"]))


# ═══════════════════════════════════════════════════════════════════════════════
# Credentials Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def credentials_valid():
    """Valid credentials with access token."""
    return json.loads(json.dumps(FIXTURES["credentials_valid"]))


@pytest.fixture
def credentials_missing_token():
    """Credentials without access token."""
    return json.loads(json.dumps(FIXTURES["credentials_missing_token"]))


@pytest.fixture
def credentials_empty_token():
    """Credentials with a blank access token."""
    return json.loads(json.dumps(FIXTURES["credentials_empty_token"]))


@pytest.fixture
def tmp_credentials_file(tmp_path, credentials_valid):
    """Create temporary credentials file with owner-only permissions."""
    creds_file = tmp_path / ".credentials.json"
    creds_file.write_text(json.dumps(credentials_valid))
    creds_file.chmod(0o600)
    return creds_file


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    """Point Path.home() at an empty temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    return home


@pytest.fixture
def file_only_platform():
    """Make the running platform look like Linux (no Keychain fallback)."""
    with patch("claude_usage_status.config.credentials.platform.system", return_value="Linux"):
        yield


# ═══════════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


def _make_response(body, status=200):
    """Build a urlopen() context manager stand-in."""
    if not isinstance(body, bytes):
        body = json.dumps(body).encode()
    mock_response = MagicMock()
    mock_response.status = status
    mock_response.read.return_value = body
    mock_response.__enter__ = MagicMock(return_value=mock_response)
    mock_response.__exit__ = MagicMock(return_value=False)
    return mock_response


@pytest.fixture
def make_response():
    """Factory for fake urlopen() responses."""
    return _make_response


@pytest.fixture
def mock_urlopen():
    """Mock urlopen for API testing."""
    with patch("claude_usage_status.api.client.urlopen") as mock:
        yield mock


class StubUsageServer:
    """Local HTTP server answering every GET with a canned response."""

    def __init__(self, status=200, body=b""):
        self.status = status
        self.body = body
        self.requests = []
        stub = self

        class Handler(BaseHTTPRequestHandler):
            def do_GET(self):
                stub.requests.append({"path": self.path, "headers": dict(self.headers)})
                self.send_response(stub.status)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(stub.body)))
                self.end_headers()
                self.wfile.write(stub.body)

            def log_message(self, format, *args):
                pass

        self._server = HTTPServer(("127.0.0.1", 0), Handler)
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)

    @property
    def url(self):
        host, port = self._server.server_address[:2]
        return f"http://{host}:{port}/api/oauth/usage"

    def respond(self, body, status=200):
        if not isinstance(body, bytes):
            body = json.dumps(body).encode()
        self.body = body
        self.status = status

    def start(self):
        self._thread.start()

    def stop(self):
        self._server.shutdown()
        self._server.server_close()


@pytest.fixture
def usage_server(monkeypatch):
    """Running stub usage endpoint on 127.0.0.1."""
    # Keep any configured HTTP proxy away from the loopback server
    monkeypatch.setenv("no_proxy", "127.0.0.1,localhost")
    monkeypatch.setenv("NO_PROXY", "127.0.0.1,localhost")
    server = StubUsageServer()
    server.start()
    yield server
    server.stop()


@pytest.fixture
def file_sources(tmp_credentials_file):
    """Credential sources reading only the temporary credentials file."""
    return [FileCredentialSource(tmp_credentials_file)]


# ═══════════════════════════════════════════════════════════════════════════════
# Time Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def fixed_now():
    """Fixed datetime for reproducible tests."""
    return datetime(2026, 1, 9, 12, 45, 0, tzinfo=timezone.utc)


# ═══════════════════════════════════════════════════════════════════════════════
# Logging Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging() so caplog sees package records."""
    logger = logging.getLogger("claude_usage_status")
    yield
    logger.handlers[:] = []
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
