"""Async service layer."""

from .service import SearchService

__all__ = ["SearchService"]
