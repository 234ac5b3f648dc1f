"""Mock identity platform providers for testing."""

from dishka import Scope, provide

from roster.adapter.identity import IdentityPlatformClient, MockIdentityPlatformClient
from roster.config import AuthSettings
from roster.util.di.infrastructure.identity import IdentityProvider


class MockIdentityProvider(IdentityProvider):
    """Mock identity provider using the in-memory platform client."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mock_identity_client(
        self, auth_settings: AuthSettings
    ) -> MockIdentityPlatformClient:
        """Provide the mock client under its own type, for test setup."""
        return MockIdentityPlatformClient(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_identity_client(
        self, client: MockIdentityPlatformClient
    ) -> IdentityPlatformClient:
        """Provide the mock client as the platform contract."""
        return client
