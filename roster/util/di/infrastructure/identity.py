"""Identity platform infrastructure providers."""

from dishka import Scope, provide

from roster.adapter.identity import IdentityPlatformClient, RealIdentityPlatformClient
from roster.config import Settings
from roster.util.di.base import ProviderBase
from roster.util.error import ConfigurationError
from roster.util.observability import instrument_httpx


class IdentityProvider(ProviderBase):
    """Identity platform component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity platform provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_client(self, settings: Settings) -> IdentityPlatformClient:
        """Provide identity platform client.

        Returns:
            GoTrue-compatible admin API client

        Raises:
            ConfigurationError: If the platform URL or service key is not configured
        """
        if not settings.identity.base_url:
            raise ConfigurationError("Identity platform base URL must be configured")
        if not settings.identity.service_key:
            raise ConfigurationError("Identity platform service key must be configured")
        if (
            settings.environment == "production"
            and settings.identity.service_key == "CHANGE_ME_IN_PRODUCTION"
        ):
            raise ConfigurationError("Identity platform service key must be overridden")

        instrument_httpx()
        return RealIdentityPlatformClient(
            base_url=settings.identity.base_url,
            service_key=settings.identity.service_key,
            timeout=settings.identity.timeout_seconds,
        )
