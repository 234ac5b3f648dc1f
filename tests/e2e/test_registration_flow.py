"""End-to-end tests for the invite, register and browse flow."""

import pytest

from roster.domain.value import Role
from tests.harness import create_api_fixture

api = create_api_fixture()


class TestRegistrationFlow:
    """An admin invites an alumna who registers and appears in the directory."""

    @pytest.mark.asyncio
    async def test_invite_to_directory(self, api):
        """Full happy path from invitation to directory entry."""
        client = api.client
        _, admin_headers = await api.sign_in("admin@example.org", Role.ADMIN, Role.MEMBER)

        # Admin invites Jane
        response = await client.post(
            "/invitations",
            json={
                "email": "Jane@Example.org",
                "full_name": "Jane Doe",
                "public_role": "alumni",
                "state": "CA",
                "organization": "Example Labs",
            },
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()["email"] == "jane@example.org"

        identity_client = await api.identity_client()
        assert [d.email for d in identity_client.dispatches] == ["jane@example.org"]

        # The frontend checks the invitation before showing the form
        response = await client.post("/invitations/verify", json={"email": "jane@example.org"})
        assert response.json() == {"exists": True}

        # Jane follows the link, sets a password and completes registration
        jane, jane_headers = await api.sign_in("jane@example.org")
        response = await client.post(
            "/auth/password", json={"password": "hunter22"}, headers=jane_headers
        )
        assert response.status_code == 200

        response = await client.post(
            "/invitations/complete",
            json={"email": "jane@example.org"},
            headers=jane_headers,
        )
        assert response.status_code == 200
        assert response.json() == {"success": True, "profile_id": str(jane.identity_id)}

        # The invitation is consumed
        response = await client.post("/invitations/verify", json={"email": "jane@example.org"})
        assert response.json() == {"exists": False}

        # Completing again is harmless
        response = await client.post(
            "/invitations/complete",
            json={"email": "jane@example.org"},
            headers=jane_headers,
        )
        assert response.status_code == 200

        # Jane is a member with her invited details
        response = await client.get("/auth/me", headers=jane_headers)
        me = response.json()
        assert me["roles"] == ["member"]
        assert me["profile"]["public_role"] == "alumni"
        assert me["profile"]["organization"] == "Example Labs"
        assert me["capabilities"]["can_invite"] is False

        # And listed in the directory
        response = await client.get("/profiles", headers=admin_headers)
        assert response.status_code == 200
        listing = response.json()
        assert listing["total"] == 1
        assert listing["profiles"][0]["email"] == "jane@example.org"

    @pytest.mark.asyncio
    async def test_reinvite_registered_member_refreshes_profile_at_once(self, api):
        """Re-inviting a registered member skips the email and updates the profile directly."""
        client = api.client
        _, admin_headers = await api.sign_in("admin@example.org", Role.ADMIN)
        invite = {"email": "jane@example.org", "full_name": "Jane Doe", "public_role": "alumni"}

        await client.post("/invitations", json=invite, headers=admin_headers)
        _, jane_headers = await api.sign_in("jane@example.org")
        await client.post("/auth/password", json={"password": "hunter22"}, headers=jane_headers)
        await client.post(
            "/invitations/complete", json={"email": "jane@example.org"}, headers=jane_headers
        )

        # Act
        response = await client.post(
            "/invitations",
            json={**invite, "public_role": "advisor"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()["already_registered"] is True

        # Assert
        response = await client.get("/auth/me", headers=jane_headers)
        assert response.json()["profile"]["public_role"] == "advisor"
        response = await client.post("/invitations/verify", json={"email": "jane@example.org"})
        assert response.json() == {"exists": False}

    @pytest.mark.asyncio
    async def test_dispatch_outage_returns_503_and_no_invitation(self, api):
        client = api.client
        _, admin_headers = await api.sign_in("admin@example.org", Role.ADMIN)
        identity_client = await api.identity_client()
        identity_client.available = False

        response = await client.post(
            "/invitations",
            json={"email": "jane@example.org", "full_name": "Jane Doe", "public_role": "alumni"},
            headers=admin_headers,
        )

        assert response.status_code == 503
        response = await client.post("/invitations/verify", json={"email": "jane@example.org"})
        assert response.json() == {"exists": False}
