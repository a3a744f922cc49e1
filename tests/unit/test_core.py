"""Tests for core module - types, exceptions, configuration and registry."""

import json
import logging

import pytest
from betterprompts.core.types import (
    Intent,
    EnhancementMode,
    PromptContext,
    ContextFlags,
    EnhancementRequest,
    EnhancedPrompt,
    BackendAvailability,
    make_preview,
)
from betterprompts.core.exceptions import (
    BetterPromptsError,
    ProviderError,
    ConfigurationError,
    TemplateError,
)
from betterprompts.core.config import Settings, get_settings, reload_settings
from betterprompts.core.log import JsonFormatter, configure_logging
from betterprompts.core.registry import Registry, provider_registry


class TestIntent:
    """Tests for the Intent enum."""

    def test_declaration_order(self):
        """Test intents are declared in tie-break order."""
        assert [i.value for i in Intent] == [
            "fix", "add", "change", "explain", "test", "review", "improve", "document"
        ]

    def test_from_value(self):
        """Test looking up an intent by value."""
        assert Intent("review") is Intent.REVIEW


class TestEnhancementMode:
    """Tests for the EnhancementMode enum."""

    def test_values(self):
        """Test the configuration values of each mode."""
        assert EnhancementMode("auto") is EnhancementMode.AUTO
        assert EnhancementMode("ruleOnly") is EnhancementMode.RULE_ONLY
        assert EnhancementMode("manual") is EnhancementMode.MANUAL

    def test_unknown_mode(self):
        """Test an unknown mode is rejected."""
        with pytest.raises(ValueError):
            EnhancementMode("hybrid")


class TestRequestTypes:
    """Tests for request value objects."""

    def test_context_defaults_empty(self):
        """Test every context field is optional."""
        ctx = PromptContext()
        assert ctx.file_name is None
        assert ctx.related_files is None

    def test_flags_default_off(self):
        """Test context flags default to False."""
        flags = ContextFlags()
        assert not any([flags.file, flags.selection, flags.project, flags.git, flags.related])

    def test_quick_flags(self):
        """Test quick flags enable file and selection only."""
        flags = ContextFlags.quick()
        assert flags.file and flags.selection
        assert not (flags.project or flags.git or flags.related)

    def test_request_defaults(self):
        """Test a request can be built from intent and input alone."""
        request = EnhancementRequest(intent=Intent.ADD, user_input="add a button")
        assert request.context == PromptContext()
        assert request.include == ContextFlags()

    def test_request_is_frozen(self):
        """Test requests cannot be mutated."""
        request = EnhancementRequest(intent=Intent.ADD, user_input="x")
        with pytest.raises(Exception):
            request.user_input = "y"


class TestPreview:
    """Tests for preview truncation."""

    def test_short_text_unchanged(self):
        """Test text at the limit is returned as-is."""
        text = "a" * 200
        assert make_preview(text) == text

    def test_long_text_truncated(self):
        """Test text over the limit is cut and marked."""
        preview = make_preview("b" * 250)
        assert len(preview) == 203
        assert preview.endswith("...")
        assert preview[:200] == "b" * 200

    def test_enhanced_prompt_from_text(self):
        """Test the preview is computed from the prompt."""
        result = EnhancedPrompt.from_text("c" * 300, was_ai_enhanced=True)
        assert result.preview == "c" * 200 + "..."
        assert result.was_ai_enhanced is True

    def test_enhanced_prompt_defaults_to_rules(self):
        """Test results default to not AI enhanced."""
        assert EnhancedPrompt.from_text("short").was_ai_enhanced is False


class TestBackendAvailability:
    """Tests for BackendAvailability."""

    def test_none(self):
        """Test the nothing-detected result."""
        result = BackendAvailability.none()
        assert result.provider == "none"
        assert result.available is False
        assert result.can_enhance is False
        assert result.display_name == "None detected"
        assert result.models == []

    def test_checked_at_set(self):
        """Test creation time is recorded."""
        assert BackendAvailability.none().checked_at > 0


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_base_error(self):
        """Test base error with details."""
        error = BetterPromptsError("Something failed", details={"key": "value"})
        assert error.message == "Something failed"
        assert error.details == {"key": "value"}
        assert "Something failed" in str(error)
        assert "key" in str(error)

    def test_error_with_cause(self):
        """Test the underlying cause is kept."""
        cause = ValueError("root")
        error = BetterPromptsError("Wrapped", cause=cause)
        assert error.cause is cause

    def test_provider_error(self):
        """Test ProviderError carries provider and status."""
        error = ProviderError("API error", provider="openai", status_code=500)
        assert error.provider == "openai"
        assert error.status_code == 500
        assert isinstance(error, BetterPromptsError)

    def test_configuration_error(self):
        """Test ConfigurationError carries the config key."""
        error = ConfigurationError("Bad value", config_key="manual_provider")
        assert error.config_key == "manual_provider"

    def test_template_error(self):
        """Test TemplateError carries the template name."""
        error = TemplateError("Missing", template_name="fix-bug")
        assert error.template_name == "fix-bug"


class TestSettings:
    """Tests for pydantic settings."""

    def test_defaults(self):
        """Test default configuration values."""
        settings = Settings()
        assert settings.enhancement.mode == "auto"
        assert settings.provider.manual_provider == "ollama"
        assert settings.provider.api_key is None
        assert settings.provider.ollama_endpoint == "http://localhost:11434"
        assert settings.provider.ollama_model == "llama3.2"
        assert settings.provider.timeout == 30.0
        assert settings.provider.probe_timeout == 2.0
        assert settings.provider.availability_ttl == 60.0

    def test_env_aliases(self, monkeypatch):
        """Test values are read from BP_ environment variables."""
        monkeypatch.setenv("BP_ENHANCEMENT_MODE", "manual")
        monkeypatch.setenv("BP_MANUAL_PROVIDER", "anthropic")
        monkeypatch.setenv("BP_API_KEY", "sk-test")
        settings = Settings()
        assert settings.enhancement.mode == "manual"
        assert settings.provider.manual_provider == "anthropic"
        assert settings.provider.api_key == "sk-test"

    def test_get_settings_cached(self):
        """Test get_settings returns the same instance."""
        assert get_settings() is get_settings()

    def test_reload_settings(self, monkeypatch):
        """Test reload picks up environment changes."""
        assert get_settings().enhancement.mode == "auto"
        monkeypatch.setenv("BP_ENHANCEMENT_MODE", "ruleOnly")
        assert get_settings().enhancement.mode == "auto"
        assert reload_settings().enhancement.mode == "ruleOnly"


class TestRegistry:
    """Tests for the generic registry and the provider registry."""

    def test_register_and_get(self):
        """Test registering and fetching by name and alias."""
        registry = Registry()
        assert registry.register("one", 1, aliases=["uno"]) == 1
        assert registry.get("one") == 1
        assert registry.get("uno") == 1
        assert registry.list_registered() == ["one"]

    def test_get_missing(self):
        """Test unknown names raise KeyError."""
        with pytest.raises(KeyError):
            Registry().get("missing")

    def test_builtin_providers(self):
        """Test the three providers are registered."""
        import betterprompts.providers  # noqa: F401
        assert set(provider_registry.list_registered()) >= {"openai", "anthropic", "ollama"}

    def test_unknown_provider(self):
        """Test an unknown provider is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            provider_registry.get_provider("gemini")
        assert exc_info.value.config_key == "manual_provider"

    def test_credentialed_providers_without_key(self):
        """Test only keyless providers are usable without an API key."""
        import betterprompts.providers  # noqa: F401
        assert provider_registry.get_credentialed_providers() == ["ollama"]

    def test_credentialed_providers_with_key(self, monkeypatch):
        """Test every provider is usable once a key is set."""
        import betterprompts.providers  # noqa: F401
        monkeypatch.setenv("BP_API_KEY", "sk-test")
        reload_settings()
        assert set(provider_registry.get_credentialed_providers()) == {"openai", "anthropic", "ollama"}


class TestLogging:
    """Tests for logging setup."""

    def test_json_formatter(self):
        """Test records become JSON objects."""
        record = logging.LogRecord("betterprompts.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None)
        payload = json.loads(JsonFormatter().format(record))
        assert payload["message"] == "hello world"
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "betterprompts.test"

    def test_configure_logging(self, monkeypatch):
        """Test the package logger follows the settings."""
        monkeypatch.setenv("BP_LOG_LEVEL", "debug")
        monkeypatch.setenv("BP_LOG_FORMAT", "json")
        configure_logging(reload_settings().logging)

        logger = logging.getLogger("betterprompts")
        try:
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 1
            assert isinstance(logger.handlers[0].formatter, JsonFormatter)
        finally:
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)
            logger.propagate = True
