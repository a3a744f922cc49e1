"""Tests for AI assistant detection."""

import pytest
from betterprompts.detection import AssistantDetector
from betterprompts.enhancement import AvailabilityCache


def which_from(*installed):
    """Fake shutil.which that only finds the given executables."""
    def _which(name):
        return f"/usr/local/bin/{name}" if name in installed else None
    return _which


def make_detector(environ=None, installed=(), cache=None):
    return AssistantDetector(
        environ=environ if environ is not None else {},
        which=which_from(*installed),
        cache=cache,
    )


class TestCursor:
    """Tests for Cursor detection."""

    @pytest.mark.parametrize("environ", [
        {"TERM_PROGRAM": "cursor"},
        {"TERM_PROGRAM": "Cursor"},
        {"TERM_PROGRAM": "cursor-nightly"},
        {"CURSOR_TRACE_ID": "abc123"},
    ])
    def test_detected(self, environ):
        """Test the editor is found from its environment variables."""
        assert make_detector(environ).is_cursor()

    @pytest.mark.parametrize("environ", [
        {},
        {"TERM_PROGRAM": "vscode"},
        {"CURSOR_TRACE_ID": ""},
    ])
    def test_not_detected(self, environ):
        """Test other terminals are not mistaken for Cursor."""
        assert not make_detector(environ).is_cursor()


class TestClaudeCode:
    """Tests for Claude Code detection."""

    @pytest.mark.parametrize("installed", [("claude",), ("claude-code",)])
    def test_installed(self, installed):
        """Test either executable name counts."""
        assert make_detector(installed=installed).is_claude_code_installed()

    def test_not_installed(self):
        """Test nothing on PATH means not installed."""
        assert not make_detector(installed=("node",)).is_claude_code_installed()


class TestDetect:
    """Tests for the prioritized detection result."""

    @pytest.mark.asyncio
    async def test_cursor_wins(self):
        """Test Cursor takes priority over an installed Claude Code."""
        detector = make_detector({"TERM_PROGRAM": "cursor"}, installed=("claude",))
        result = await detector.detect()
        assert result.provider == "cursor"
        assert result.display_name == "Cursor"
        assert result.can_enhance is True

    @pytest.mark.asyncio
    async def test_claude_code(self):
        """Test Claude Code is reported when Cursor is absent."""
        result = await make_detector(installed=("claude-code",)).detect()
        assert result.provider == "claude-code"
        assert result.display_name == "Claude Code"
        assert result.available is True

    @pytest.mark.asyncio
    async def test_nothing(self):
        """Test the none result when nothing is found."""
        result = await make_detector().detect()
        assert result.provider == "none"
        assert result.can_enhance is False
        assert result.display_name == "None detected"

    @pytest.mark.asyncio
    async def test_callable(self):
        """Test the detector can be awaited directly."""
        result = await make_detector({"CURSOR_TRACE_ID": "x"})()
        assert result.provider == "cursor"

    def test_detect_all(self):
        """Test every assistant is listed in priority order."""
        detector = make_detector({"TERM_PROGRAM": "cursor"}, installed=("claude",))
        assert [r.provider for r in detector.detect_all()] == ["cursor", "claude-code"]
        assert make_detector().detect_all() == []


class TestCaching:
    """Tests for detection caching."""

    @pytest.mark.asyncio
    async def test_result_cached(self, clock):
        """Test environment changes are not seen until the TTL passes."""
        environ = {}
        detector = make_detector(environ, cache=AvailabilityCache(ttl=60, clock=clock))

        assert (await detector.detect()).provider == "none"
        environ["TERM_PROGRAM"] = "cursor"
        assert (await detector.detect()).provider == "none"

        clock.advance(60)
        assert (await detector.detect()).provider == "cursor"

    @pytest.mark.asyncio
    async def test_force_refresh_and_clear(self, clock):
        """Test both force_refresh and clear_cache bypass the cached value."""
        environ = {}
        detector = make_detector(environ, cache=AvailabilityCache(ttl=60, clock=clock))
        await detector.detect()

        environ["CURSOR_TRACE_ID"] = "1"
        assert (await detector.detect(force_refresh=True)).provider == "cursor"

        del environ["CURSOR_TRACE_ID"]
        detector.clear_cache()
        assert (await detector.detect()).provider == "none"

    def test_default_ttl_from_settings(self, monkeypatch):
        """Test the default cache uses the configured TTL."""
        monkeypatch.setenv("BP_AVAILABILITY_TTL", "5")
        assert AssistantDetector(environ={}).cache.ttl == 5.0
