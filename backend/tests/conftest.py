from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import pytest


def _ensure_backend_on_syspath() -> None:
    """
    Ensure the backend/ directory is importable as a top-level package root.

    This allows test modules to import:
      - common.*
      - routes.*
      - services.*
      - agents.*
    when running `pytest` from the repo root.
    """
    this_file = Path(__file__).resolve()
    backend_dir = this_file.parents[1]  # .../backend
    repo_root = backend_dir.parent

    b = str(backend_dir)
    r = str(repo_root)

    # Put backend/ first so "common" resolves to backend/common, etc.
    if b not in sys.path:
        sys.path.insert(0, b)

    if r not in sys.path:
        sys.path.append(r)


def _live_enabled(config: pytest.Config) -> bool:
    """
    Live tests are allowed when either:
      - RUN_LIVE_TESTS=1 is set, OR
      - pytest is run with --live
    """
    env_flag = os.getenv("RUN_LIVE_TESTS", "").strip()
    if env_flag == "1":
        return True
    return bool(getattr(config.option, "live", False))


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="Enable tests marked with @pytest.mark.live (network/keys required).",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "live: tests that hit the real Odds API (ODDS_API_KEY required)")


def pytest_runtest_setup(item: pytest.Item) -> None:
    """
    Auto-skip any test marked live unless live mode is enabled.
    """
    if item.get_closest_marker("live") is None:
        return

    if not _live_enabled(item.config):
        pytest.skip("Skipped live test (set RUN_LIVE_TESTS=1 or run `pytest --live` to enable).")


_ensure_backend_on_syspath()


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(
        self,
        payload: Any = None,
        status_code: int = 200,
        headers: Optional[Dict[str, str]] = None,
        text: Optional[str] = None,
        json_error: bool = False,
    ):
        self._payload = payload
        self.status_code = status_code
        self.headers = headers or {}
        self.text = text if text is not None else str(payload)
        self._json_error = json_error

    def json(self) -> Any:
        if self._json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


@pytest.fixture
def fake_upstream(monkeypatch):
    """
    Replace requests.get inside common.api_headers.

    Call with a FakeResponse or an exception instance; returns the list of
    recorded calls as dicts {url, params, timeout}.
    """
    from common import api_headers

    calls = []

    def install(outcome):
        def fake_get(url, params=None, timeout=None):
            calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
            if isinstance(outcome, BaseException):
                raise outcome
            return outcome

        monkeypatch.setattr(api_headers.requests, "get", fake_get)
        return calls

    return install


@pytest.fixture
def api_key(monkeypatch):
    from common import config_loader

    monkeypatch.setattr(config_loader, "ODDS_API_KEY", "test-secret-key")
    return "test-secret-key"


@pytest.fixture
def fake_response():
    return FakeResponse
