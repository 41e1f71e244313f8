"""Auth service providers."""

from dishka import Scope, provide

from remark.adapter.auth import IntrospectionTokenVerifier
from remark.config import Settings
from remark.domain.service import TokenVerifier
from remark.util.di.base import ProviderBase


class AuthProvider(ProviderBase):
    """Auth component base."""

    __mock_component__ = "auth"


class ProdAuthProvider(AuthProvider):
    """Production auth provider backed by token introspection."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_token_verifier(self, settings: Settings) -> TokenVerifier:
        """Provide token verifier.

        Returns:
            Verifier calling {service_url}{introspection_path}
        """
        auth = settings.auth
        return IntrospectionTokenVerifier(
            introspection_url=f"{auth.service_url.rstrip('/')}{auth.introspection_path}",
            client_id=auth.client_id,
            client_secret=auth.client_secret,
            admin_scopes=auth.admin_scopes,
        )
