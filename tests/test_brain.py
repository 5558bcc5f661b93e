"""Shared brain API tests."""

from src.models.share_link import ShareLink


def test_enable_sharing_returns_hash(client, auth_headers):
    """Test enabling sharing returns an alphanumeric hash."""
    response = client.post("/api/v1/brain/share", headers=auth_headers, json={"share": True})
    assert response.status_code == 200
    share_hash = response.json()["hash"]
    assert len(share_hash) == 10
    assert share_hash.isalnum()


def test_enable_sharing_twice_returns_same_hash(client, auth_headers):
    """Test that enabling again reuses the existing hash."""
    first = client.post("/api/v1/brain/share", headers=auth_headers, json={"share": True})
    second = client.post("/api/v1/brain/share", headers=auth_headers, json={"share": True})
    assert first.json()["hash"] == second.json()["hash"]


def test_disable_sharing(client, db, auth_headers):
    """Test disabling sharing removes the link."""
    client.post("/api/v1/brain/share", headers=auth_headers, json={"share": True})

    response = client.post("/api/v1/brain/share", headers=auth_headers, json={"share": False})
    assert response.status_code == 200
    assert response.json() == {"message": "Removed link"}
    assert db.query(ShareLink).filter(ShareLink.user_id == auth_headers.user_id).count() == 0


def test_disable_sharing_without_link(client, auth_headers):
    """Test disabling is a no-op when sharing was never enabled."""
    response = client.post("/api/v1/brain/share", headers=auth_headers, json={"share": False})
    assert response.status_code == 200
    assert response.json() == {"message": "Removed link"}


def test_reenable_after_disable_gives_new_hash(client, auth_headers):
    """Test that revoking a link and sharing again issues a fresh hash."""
    first = client.post("/api/v1/brain/share", headers=auth_headers, json={"share": True})
    client.post("/api/v1/brain/share", headers=auth_headers, json={"share": False})
    second = client.post("/api/v1/brain/share", headers=auth_headers, json={"share": True})
    assert first.json()["hash"] != second.json()["hash"]


def test_share_requires_auth(client):
    """Test that toggling sharing needs a token."""
    response = client.post("/api/v1/brain/share", json={"share": True})
    assert response.status_code == 403


def test_share_missing_flag(client, auth_headers):
    """Test that the share flag is required."""
    response = client.post("/api/v1/brain/share", headers=auth_headers, json={})
    assert response.status_code == 400


def test_view_shared_brain(client, auth_headers, other_auth_headers):
    """Test the public view returns the owner's username and content only."""
    client.post(
        "/api/v1/content",
        headers=auth_headers,
        json={"link": "https://youtu.be/abc", "type": "youtube", "title": "Shared video"},
    )
    client.post(
        "/api/v1/content",
        headers=other_auth_headers,
        json={"link": "https://x.com/a/status/1", "type": "twitter", "title": "Not shared"},
    )
    share_hash = client.post(
        "/api/v1/brain/share", headers=auth_headers, json={"share": True}
    ).json()["hash"]

    # No auth headers: this is a public endpoint
    response = client.get(f"/api/v1/brain/{share_hash}")
    assert response.status_code == 200
    data = response.json()
    assert data["username"] == auth_headers.username
    assert [c["title"] for c in data["content"]] == ["Shared video"]


def test_view_shared_brain_empty(client, auth_headers):
    """Test a shared brain with no content."""
    share_hash = client.post(
        "/api/v1/brain/share", headers=auth_headers, json={"share": True}
    ).json()["hash"]

    response = client.get(f"/api/v1/brain/{share_hash}")
    assert response.status_code == 200
    assert response.json() == {"username": auth_headers.username, "content": []}


def test_view_unknown_hash(client):
    """Test an unknown hash is rejected."""
    response = client.get("/api/v1/brain/doesnotexist")
    assert response.status_code == 411
    assert response.json() == {"message": "Sorry incorrect input"}


def test_view_revoked_hash(client, auth_headers):
    """Test that a hash stops working once sharing is disabled."""
    share_hash = client.post(
        "/api/v1/brain/share", headers=auth_headers, json={"share": True}
    ).json()["hash"]
    client.post("/api/v1/brain/share", headers=auth_headers, json={"share": False})

    response = client.get(f"/api/v1/brain/{share_hash}")
    assert response.status_code == 411
    assert response.json()["message"] == "Sorry incorrect input"


def test_view_link_with_missing_owner(client, db):
    """Test a link whose owner row is gone reports an integrity error."""
    db.add(ShareLink(user_id=9999, hash="orphanhash"))
    db.commit()

    response = client.get("/api/v1/brain/orphanhash")
    assert response.status_code == 411
    assert response.json()["message"] == "user not found, error should ideally not happen"
