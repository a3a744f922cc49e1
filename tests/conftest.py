"""Shared pytest fixtures for BetterPrompts tests."""

import pytest
import sys
from pathlib import Path

import httpx

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from betterprompts.core.config import (  # noqa: E402
    EnhancementSettings,
    ProviderSettings,
    Settings,
    get_settings,
)
from betterprompts.core.types import (  # noqa: E402
    BackendAvailability,
    ContextFlags,
    EnhancementRequest,
    Intent,
    PromptContext,
)


ENV_KEYS = [
    "BP_ENHANCEMENT_MODE",
    "BP_MANUAL_PROVIDER",
    "BP_API_KEY",
    "BP_OLLAMA_ENDPOINT",
    "BP_OLLAMA_MODEL",
    "BP_PROVIDER_TIMEOUT",
    "BP_PROBE_TIMEOUT",
    "BP_AVAILABILITY_TTL",
    "BP_LOG_LEVEL",
    "BP_LOG_FORMAT",
]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Start every test from default settings."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# Sample requests for testing
@pytest.fixture
def bug_report():
    """The canonical broken-English bug report."""
    return "button not work when click"


@pytest.fixture
def code_context():
    """Context for a small Python file with a selection."""
    return PromptContext(
        file_name="app.py",
        file_path="/work/app.py",
        language="python",
        selected_code="def handler(event):\n    return None",
        project_structure="📁 src/\n  📄 app.py",
        git_status="M src/app.py",
        related_files=["./utils", "./models"],
    )


@pytest.fixture
def bug_request(bug_report):
    """A fix request with no context."""
    return EnhancementRequest(intent=Intent.FIX, user_input=bug_report)


@pytest.fixture
def all_flags():
    """Every context section enabled."""
    return ContextFlags(file=True, selection=True, project=True, git=True, related=True)


# Settings
@pytest.fixture
def make_settings():
    """
    Build explicit Settings.

    Provider keyword arguments use the environment aliases, e.g.
    make_settings("manual", BP_MANUAL_PROVIDER="openai", BP_API_KEY="sk-test").
    """
    def _make(mode="auto", **provider):
        return Settings(
            enhancement=EnhancementSettings(BP_ENHANCEMENT_MODE=mode),
            provider=ProviderSettings(**provider),
        )
    return _make


# Fake HTTP backends
class RecordingTransport:
    """
    Mock HTTP backend that records every request.

    `routes` maps a URL path to either an httpx.Response, a callable taking
    the request, or an exception instance to raise.
    """

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            raise httpx.ConnectError("connection refused", request=request)
        if isinstance(route, Exception):
            raise route
        if callable(route):
            return route(request)
        return route

    def paths(self):
        return [r.url.path for r in self.requests]

    def client(self):
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def transport():
    """A recording transport with no routes: every request is refused."""
    return RecordingTransport()


# Fake assistant detector
class StaticDetector:
    """Backend detector that always reports the same result."""

    def __init__(self, result=None):
        self.result = result or BackendAvailability.none()
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        return self.result

    def clear_cache(self):
        pass


@pytest.fixture
def no_assistant():
    """Detector that finds nothing."""
    return StaticDetector()


@pytest.fixture
def cursor_assistant():
    """Detector that finds Cursor."""
    return StaticDetector(BackendAvailability(
        provider="cursor",
        available=True,
        can_enhance=True,
        display_name="Cursor",
    ))


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    """A fake clock starting at t=1000."""
    return FakeClock()


@pytest.fixture
def make_transport():
    """Factory for recording transports with the given routes."""
    return RecordingTransport


@pytest.fixture
def make_detector():
    """Factory for static detectors."""
    return StaticDetector
