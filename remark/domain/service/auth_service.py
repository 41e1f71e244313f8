"""Authentication domain service."""

import logfire

from remark.domain.error import AuthenticationError
from remark.domain.value import Caller

from .base import Service


class TokenVerifier:
    """Generic token verification interface for the auth collaborator."""

    async def verify(self, token: str) -> Caller | None:
        """Resolve a bearer token to the caller it was issued to.

        Args:
            token: Raw bearer token

        Returns:
            The caller, or None when the token is not valid
        """
        raise NotImplementedError


class AuthService(Service):
    """Turns Authorization headers into callers."""

    def __init__(self, token_verifier: TokenVerifier) -> None:
        """Initialize auth service.

        Args:
            token_verifier: Token verification client
        """
        self.token_verifier = token_verifier

    async def authenticate(self, authorization: str | None) -> Caller:
        """Authenticate a request.

        Args:
            authorization: Value of the Authorization header

        Returns:
            Authenticated caller

        Raises:
            AuthenticationError: If the header is missing, malformed or rejected
        """
        if not authorization:
            raise AuthenticationError("Missing authorization header")

        scheme, _, token = authorization.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            raise AuthenticationError("Invalid authorization header format")

        caller = await self.token_verifier.verify(token.strip())
        if caller is None:
            logfire.warn("Token rejected")
            raise AuthenticationError("Token is not valid")
        return caller
