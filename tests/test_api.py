"""
Test API Endpoints
"""
import pytest
from fastapi import status


class TestHealthEndpoint:
    """Test health check endpoint"""

    def test_health_check(self, test_client):
        """Test /api/health endpoint returns OK"""
        response = test_client.get("/api/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "ok"
        assert data["database"]["status"] == "connected"

    def test_api_info(self, test_client):
        """Test /api-info endpoint"""
        response = test_client.get("/api-info")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == "RobotikHub Portal"
        assert "version" in data

    def test_docs_page_accessible(self, test_client):
        """Test API docs page is accessible"""
        response = test_client.get("/docs")

        assert response.status_code == status.HTTP_200_OK

    @pytest.mark.asyncio
    async def test_health_check_async(self, async_client):
        response = await async_client.get("/api/health")

        assert response.status_code == status.HTTP_200_OK


class TestErrorEnvelope:

    def test_not_found_carries_error_and_detail(self, test_client, admin_headers):
        response = test_client.delete("/api/gallery/999", headers=admin_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        body = response.json()
        assert set(body) == {"detail", "error"}
        assert body["error"] == body["detail"]

    def test_failed_login_message_under_error(self, test_client):
        response = test_client.post("/api/auth/login", json={"email": "x@x.com", "password": "salah"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "Email atau password tidak sesuai."

    def test_unknown_route_uses_same_envelope(self, test_client):
        response = test_client.get("/api/tidak-ada")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"] == "Not Found"

    def test_validation_error_is_400(self, test_client, admin_headers):
        response = test_client.patch(
            "/api/profile", json={"mission": "bukan list"}, headers=admin_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "mission" in response.json()["detail"]
        assert response.json()["error"] == response.json()["detail"]

    def test_upload_served_statically(self, test_client, admin_headers):
        photo = test_client.post(
            "/api/gallery",
            data={"title": "Robot"},
            files={"photo": ("robot.png", b"\x89PNG\r\n\x1a\n", "image/png")},
            headers=admin_headers
        ).json()

        response = test_client.get(photo["url"].replace("http://testserver", ""))

        assert response.status_code == status.HTTP_200_OK
        assert response.content == b"\x89PNG\r\n\x1a\n"
