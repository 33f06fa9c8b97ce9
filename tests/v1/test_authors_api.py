# tests/v1/test_authors_api.py
"""Tests for author listing and profile endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from blogdesk.core.security import create_access_token
from blogdesk.models import Author


class TestMyProfile:
    """GET/PUT/DELETE /api/v1/authors/me"""

    def test_get_profile(self, client: TestClient, test_author: Author, auth_headers: dict[str, str]) -> None:
        """The caller's profile is returned."""
        response = client.get("/api/v1/authors/me", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["id"] == test_author.id
        assert data["bio"] == "Mathematician"

    def test_get_profile_without_token(self, client: TestClient) -> None:
        """Missing credentials return 401."""
        response = client.get("/api/v1/authors/me")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["message"] == "Authentication required"

    def test_get_profile_bad_token(self, client: TestClient) -> None:
        """Garbage tokens return 401."""
        response = client.get("/api/v1/authors/me", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_token_for_deleted_author(self, client: TestClient) -> None:
        """Tokens for unknown authors return 401."""
        headers = {"Authorization": f"Bearer {create_access_token(424242, 'nobody')}"}
        response = client.get("/api/v1/authors/me", headers=headers)
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_update_profile(
        self,
        client: TestClient,
        test_author: Author,
        auth_headers: dict[str, str],
        db_session: Session,
    ) -> None:
        """Supplied fields change; omitted ones stay."""
        response = client.put(
            "/api/v1/authors/me",
            json={"first_name": "Augusta", "avatar_url": "https://img.example.com/ada.png"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["first_name"] == "Augusta"
        assert data["avatar_url"] == "https://img.example.com/ada.png"
        assert data["last_name"] == "Lovelace"
        assert data["bio"] == "Mathematician"

        db_session.refresh(test_author)
        assert test_author.first_name == "Augusta"

    def test_clear_bio(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """An empty bio clears it."""
        response = client.put("/api/v1/authors/me", json={"bio": ""}, headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"]["bio"] == ""

    def test_update_invalid_email(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Invalid emails are rejected."""
        response = client.put("/api/v1/authors/me", json={"email": "nope"}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "invalid email format"

    def test_update_overlong_avatar_url(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Avatar URLs wider than the column are rejected before the database sees them."""
        avatar_url = "https://example.com/" + "a" * 280
        response = client.put("/api/v1/authors/me", json={"avatar_url": avatar_url}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "avatar URL cannot exceed 255 characters"

    def test_update_nothing(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """An empty body returns 400."""
        response = client.put("/api/v1/authors/me", json={}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "No fields to update"

    def test_update_requires_token(self, client: TestClient) -> None:
        """Profile updates need authentication."""
        response = client.put("/api/v1/authors/me", json={"bio": "x"})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_delete_account(self, client: TestClient, test_author: Author, auth_headers: dict[str, str]) -> None:
        """Deleting returns the id and the token stops working."""
        response = client.delete("/api/v1/authors/me", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"] == {"deleted_id": test_author.id}
        assert client.get("/api/v1/authors/me", headers=auth_headers).status_code == status.HTTP_401_UNAUTHORIZED


class TestListAuthors:
    """GET /api/v1/authors"""

    def test_list_active_authors(self, client: TestClient, test_author: Author, make_author) -> None:
        """Inactive authors are hidden and the window is echoed."""
        make_author(is_active=False)

        response = client.get("/api/v1/authors", params={"limit": 5, "offset": 0})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert [a["id"] for a in data["authors"]] == [test_author.id]
        assert data["limit"] == 5
        assert data["offset"] == 0

    def test_list_clamps_window(self, client: TestClient) -> None:
        """Out-of-range limits fall back to 10 and negative offsets to 0."""
        response = client.get("/api/v1/authors", params={"limit": 0, "offset": -5})

        data = response.json()["data"]
        assert data["limit"] == 10
        assert data["offset"] == 0

    def test_list_non_numeric_window(self, client: TestClient) -> None:
        """Unparsable window values fall back to defaults."""
        response = client.get("/api/v1/authors?limit=abc&offset=zz")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["limit"] == 10
        assert data["offset"] == 0
