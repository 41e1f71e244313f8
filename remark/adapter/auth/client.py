"""Auth service client.

Validates bearer tokens through the auth service's introspection endpoint.
"""

import httpx
import logfire

from remark.adapter.error import AuthProviderError
from remark.domain.service.auth_service import TokenVerifier
from remark.domain.value import Caller


class IntrospectionTokenVerifier(TokenVerifier):
    """Token verifier backed by token introspection.

    Accepts both RFC 7662 style answers (``active``, ``sub``, space separated
    ``scope``) and the auth service's own shape (``valid``, ``user_id``,
    ``scopes`` list).
    """

    def __init__(
        self,
        introspection_url: str,
        client_id: str,
        client_secret: str,
        admin_scopes: list[str],
        timeout: float = 10.0,
    ) -> None:
        """Initialize token verifier.

        Args:
            introspection_url: Full introspection endpoint URL
            client_id: This service's client ID
            client_secret: This service's client secret
            admin_scopes: Scopes that make a caller an admin
            timeout: HTTP timeout in seconds
        """
        self.introspection_url = introspection_url
        self.client_id = client_id
        self.client_secret = client_secret
        self.admin_scopes = set(admin_scopes)
        self.timeout = timeout

    async def verify(self, token: str) -> Caller | None:
        """Introspect a token.

        Raises:
            AuthProviderError: If the auth service is unreachable or errors
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.introspection_url,
                    data={"token": token},
                    auth=(self.client_id, self.client_secret),
                )
        except httpx.HTTPError as e:
            logfire.error("Token introspection HTTP error", error=str(e))
            raise AuthProviderError(f"HTTP error during introspection: {e}")

        if response.status_code in (401, 403):
            return None
        if response.status_code != 200:
            logfire.error(
                "Token introspection failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise AuthProviderError(f"Introspection failed: {response.status_code}")

        result = response.json()
        if not (result.get("active") or result.get("valid")):
            return None

        user_id = result.get("sub") or result.get("user_id")
        if not user_id:
            return None

        scopes = result.get("scopes")
        if scopes is None:
            scopes = (result.get("scope") or "").split()

        return Caller(
            user_id=str(user_id),
            name=result.get("name") or result.get("username"),
            email=result.get("email"),
            is_admin=bool(self.admin_scopes.intersection(scopes)),
        )


class MockTokenVerifier(TokenVerifier):
    """Mock token verifier for testing.

    Tokens are taken at face value: ``admin:<id>`` is an admin, ``invalid``
    is rejected, anything else is the caller's user ID.
    """

    async def verify(self, token: str) -> Caller | None:
        """Resolve a mock token."""
        if token == "invalid":
            return None
        if token.startswith("admin:"):
            user_id = token.removeprefix("admin:")
            return Caller(user_id=user_id, name=f"Admin {user_id}", is_admin=True)
        return Caller(
            user_id=token, name=f"User {token}", email=f"{token}@example.com"
        )
