"""Identity platform client.

The identity platform owns credentials, sessions and invite emails. This
service only asks it to send invites, set a session's password and remove
identities. The production client speaks the GoTrue admin API.
"""

from abc import ABC, abstractmethod
from uuid import UUID, uuid4

import httpx
import logfire
from pydantic import BaseModel

from roster.adapter.error import ProviderError
from roster.config import AuthSettings
from roster.domain.value import IdentityId, IdentitySession
from roster.util.jwt import create_token

# Error codes GoTrue uses when the invitee already has an account
ALREADY_REGISTERED_CODES = frozenset({"email_exists", "user_already_exists"})


class IdentityPlatformError(ProviderError):
    """Identity platform request failed."""

    pass


class IdentityAlreadyRegisteredError(IdentityPlatformError):
    """The invitee already has a registered identity."""

    pass


class InviteDispatch(BaseModel):
    """Record of one invite email the platform was asked to send."""

    email: str
    redirect_to: str
    data: dict[str, str]


class IdentityPlatformClient(ABC):
    """Contract of the external identity platform."""

    @abstractmethod
    async def invite_user_by_email(
        self, email: str, redirect_to: str, data: dict[str, str]
    ) -> IdentityId:
        """Ask the platform to email an invite link.

        Args:
            email: Normalized invitee email
            redirect_to: Where the invite link lands after the platform
                establishes a session
            data: User metadata stored with the identity

        Returns:
            ID of the (possibly new) identity

        Raises:
            IdentityAlreadyRegisteredError: If the email already has an account
            IdentityPlatformError: If the platform rejects or fails the request
        """
        pass

    @abstractmethod
    async def update_password(self, session: IdentitySession, password: str) -> None:
        """Set the password of the session's identity.

        Raises:
            IdentityPlatformError: If the platform rejects or fails the request
        """
        pass

    @abstractmethod
    async def delete_identity(self, identity_id: IdentityId) -> None:
        """Remove an identity from the platform.

        Deleting an identity that no longer exists is not an error.

        Raises:
            IdentityPlatformError: If the platform fails the request
        """
        pass


class RealIdentityPlatformClient(IdentityPlatformClient):
    """GoTrue-compatible identity platform client."""

    def __init__(self, base_url: str, service_key: str, timeout: float = 30.0) -> None:
        """Initialize identity platform client.

        Args:
            base_url: Auth API base URL, e.g. ``https://<project>.supabase.co/auth/v1``
            service_key: Service role key for admin endpoints
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.service_key = service_key
        self.timeout = timeout

    def _admin_headers(self) -> dict[str, str]:
        return {
            "apikey": self.service_key,
            "Authorization": f"Bearer {self.service_key}",
        }

    async def invite_user_by_email(
        self, email: str, redirect_to: str, data: dict[str, str]
    ) -> IdentityId:
        """Send an invite email through ``POST /invite``."""
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    f"{self.base_url}/invite",
                    params={"redirect_to": redirect_to},
                    json={"email": email, "data": data},
                    headers=self._admin_headers(),
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Invite dispatch HTTP error", email=email, error=str(e))
            raise IdentityPlatformError(f"HTTP error during invite dispatch: {e}")

        if response.status_code in (400, 409, 422):
            body = _json_or_empty(response)
            error_code = body.get("error_code") or body.get("code")
            message = str(body.get("msg") or body.get("message") or response.text)
            if error_code in ALREADY_REGISTERED_CODES or "already been registered" in message:
                logfire.info("Invitee already registered", email=email)
                raise IdentityAlreadyRegisteredError(message)

        if response.status_code != 200:
            logfire.error(
                "Invite dispatch failed",
                email=email,
                status_code=response.status_code,
                error=response.text,
            )
            raise IdentityPlatformError(f"Invite dispatch failed: {response.status_code}")

        user = response.json()
        logfire.info("Invite dispatched", email=email, identity_id=user["id"])
        return IdentityId(UUID(user["id"]))

    async def update_password(self, session: IdentitySession, password: str) -> None:
        """Set the password through ``PUT /user`` with the session's own token."""
        if not session.access_token:
            raise IdentityPlatformError("Session has no access token")

        try:
            async with httpx.AsyncClient() as client:
                response = await client.put(
                    f"{self.base_url}/user",
                    json={"password": password},
                    headers={
                        "apikey": self.service_key,
                        "Authorization": f"Bearer {session.access_token}",
                    },
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Password update HTTP error", error=str(e))
            raise IdentityPlatformError(f"HTTP error during password update: {e}")

        if response.status_code != 200:
            logfire.error(
                "Password update failed",
                identity_id=str(session.identity_id),
                status_code=response.status_code,
            )
            raise IdentityPlatformError(f"Password update failed: {response.status_code}")

        logfire.info("Password updated", identity_id=str(session.identity_id))

    async def delete_identity(self, identity_id: IdentityId) -> None:
        """Delete the identity through ``DELETE /admin/users/{id}``."""
        try:
            async with httpx.AsyncClient() as client:
                response = await client.delete(
                    f"{self.base_url}/admin/users/{identity_id}",
                    headers=self._admin_headers(),
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error(
                "Identity delete HTTP error", identity_id=str(identity_id), error=str(e)
            )
            raise IdentityPlatformError(f"HTTP error during identity delete: {e}")

        if response.status_code == 404:
            logfire.info("Identity already absent", identity_id=str(identity_id))
            return

        if response.status_code not in (200, 204):
            logfire.error(
                "Identity delete failed",
                identity_id=str(identity_id),
                status_code=response.status_code,
            )
            raise IdentityPlatformError(f"Identity delete failed: {response.status_code}")

        logfire.info("Identity deleted", identity_id=str(identity_id))


def _json_or_empty(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


class MockIdentityPlatformClient(IdentityPlatformClient):
    """In-memory identity platform for testing.

    Keeps identities by email, records every invite dispatch and can mint
    access tokens the way the real platform does once an invitee follows
    their link.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize mock client.

        Args:
            auth_settings: Settings used to sign minted access tokens
        """
        self.auth_settings = auth_settings
        self.available = True  # Set False to simulate an outage
        self.dispatches: list[InviteDispatch] = []
        self.identities: dict[str, IdentityId] = {}
        self.passwords: dict[IdentityId, str] = {}

    def _check_available(self) -> None:
        if not self.available:
            raise IdentityPlatformError("Identity platform unavailable")

    async def invite_user_by_email(
        self, email: str, redirect_to: str, data: dict[str, str]
    ) -> IdentityId:
        """Record the dispatch and create the identity if it is new."""
        self._check_available()
        identity_id = self.identities.get(email)
        if identity_id and identity_id in self.passwords:
            raise IdentityAlreadyRegisteredError(
                "A user with this email address has already been registered"
            )
        if not identity_id:
            identity_id = IdentityId(uuid4())
            self.identities[email] = identity_id
        self.dispatches.append(
            InviteDispatch(email=email, redirect_to=redirect_to, data=data)
        )
        return identity_id

    async def update_password(self, session: IdentitySession, password: str) -> None:
        """Store the password for the session's identity."""
        self._check_available()
        if session.identity_id not in self.identities.values():
            raise IdentityPlatformError("User not found")
        self.passwords[session.identity_id] = password

    async def delete_identity(self, identity_id: IdentityId) -> None:
        """Forget the identity."""
        self._check_available()
        for email, known_id in list(self.identities.items()):
            if known_id == identity_id:
                del self.identities[email]
        self.passwords.pop(identity_id, None)

    def create_identity(self, email: str) -> IdentityId:
        """Create (or return) the identity for an email without an invite."""
        if email not in self.identities:
            self.identities[email] = IdentityId(uuid4())
        return self.identities[email]

    def sign_in(self, email: str, verified: bool = True) -> IdentitySession:
        """Establish a session for an email, as following an invite link does.

        Args:
            email: Identity email; the identity is created if unknown
            verified: Whether the token carries the email claim

        Returns:
            Session with a signed access token
        """
        identity_id = self.create_identity(email)
        claimed_email = email if verified else None
        token = create_token(str(identity_id), claimed_email, self.auth_settings)
        return IdentitySession(
            identity_id=identity_id, email=claimed_email, access_token=token
        )
