"""Auth service adapter."""

from .client import IntrospectionTokenVerifier, MockTokenVerifier

__all__ = ["IntrospectionTokenVerifier", "MockTokenVerifier"]
