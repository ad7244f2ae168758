"""Outbound HTTP provider adapters."""

from src.infrastructure.providers.base_api_client import BaseAPIClient

__all__ = ["BaseAPIClient"]
