"""Security adapters (token signing)."""

from src.infrastructure.security.jwt_service import JWTService, parse_expiration

__all__ = ["JWTService", "parse_expiration"]
