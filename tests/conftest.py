from __future__ import annotations

from pathlib import Path
import sys
from typing import Any

import pytest
import requests


# Ensure the repository root (parent of ./tests) is importable during pytest collection
# so `import jsondoc` works without an editable install.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


class FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """
    Minimal stand-in for requests.Session: serves canned responses by URL and
    records every call.
    """

    def __init__(self) -> None:
        self.responses: dict[str, FakeResponse | Exception] = {}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append((url, kwargs))
        resp = self.responses.get(url)
        if resp is None:
            return FakeResponse(b"Not Found", status_code=404)
        if isinstance(resp, Exception):
            raise resp
        return resp


class RecordingTransport:
    """Wraps a real transport and records reads/writes."""

    def __init__(self, inner: Any) -> None:
        self.inner = inner
        self.reads: list[str] = []
        self.writes: list[str] = []

    def read(self, location: str, *, is_url: bool) -> bytes:
        self.reads.append(location)
        return self.inner.read(location, is_url=is_url)

    def write(self, path: str, data: bytes) -> None:
        self.writes.append(path)
        self.inner.write(path, data)


@pytest.fixture
def doc_path(tmp_path: Path) -> Path:
    """A not-yet-existing document path inside a not-yet-existing directory."""
    return tmp_path / "data" / "nested" / "doc.json"


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def recording_transport(fake_session: FakeSession) -> RecordingTransport:
    from jsondoc import FileTransport

    return RecordingTransport(FileTransport(session=fake_session))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Tests never pick up JSONDOC_* settings from the developer's shell, and
    anything a test loads into the environment is removed afterwards.
    """
    for name in ("JSONDOC_REQUEST_TIMEOUT", "JSONDOC_INDENT", "JSONDOC_SORT_KEYS", "JSONDOC_DIR_MODE"):
        # setenv first so teardown restores the original (possibly absent) value.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
