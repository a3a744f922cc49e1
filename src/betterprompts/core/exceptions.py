"""Custom exceptions for the prompt enhancement system."""

from typing import Optional, Dict, Any


class BetterPromptsError(Exception):
    """Base exception for all BetterPrompts errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ProviderError(BetterPromptsError):
    """Error from an AI backend."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, details, cause)
        self.provider = provider
        self.status_code = status_code
        if provider:
            self.details["provider"] = provider
        if status_code:
            self.details["status_code"] = status_code


class ConfigurationError(BetterPromptsError):
    """Error in configuration."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, details, cause)
        self.config_key = config_key
        if config_key:
            self.details["config_key"] = config_key


class TemplateError(BetterPromptsError):
    """Error in template lookup or rendering."""

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, details, cause)
        self.template_name = template_name
        if template_name:
            self.details["template_name"] = template_name
