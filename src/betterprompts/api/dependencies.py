"""Shared dependencies for API routes."""

from fastapi import Request

from .. import BetterPrompts


def get_betterprompts(request: Request) -> BetterPrompts:
    """The app-wide BetterPrompts, so availability caches outlive a request."""
    return request.app.state.bp
