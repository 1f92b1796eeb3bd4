"""
Pytest Configuration and Fixtures
"""
import os
import shutil
import tempfile

# Point the app at a throwaway SQLite database and uploads folder before
# anything from robotikhub is imported (settings are cached on first use).
_TEST_ROOT = tempfile.mkdtemp(prefix="robotikhub-test-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_ROOT, 'test.db')}"
os.environ["UPLOAD_DIR"] = os.path.join(_TEST_ROOT, "uploads")
os.environ["API_BASE_URL"] = "http://testserver"
os.environ["JWT_SECRET"] = "robotikhub-test-secret"
os.environ["MAX_UPLOAD_SIZE"] = str(1024 * 1024)

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport


@pytest.fixture(scope="session", autouse=True)
def fast_password_hashing():
    """Cheaper bcrypt rounds so registration-heavy tests stay quick"""
    from robotikhub.services import auth_service as auth_module

    auth_module.pwd_context.update(bcrypt__rounds=4)
    yield
    shutil.rmtree(_TEST_ROOT, ignore_errors=True)


@pytest.fixture(autouse=True)
def fresh_database():
    """Recreate every table (and the profile row) and empty the uploads folder"""
    from robotikhub.database import Base, engine, init_db
    from robotikhub.services.upload_service import upload_service

    Base.metadata.drop_all(bind=engine)
    init_db()
    upload_service.ensure_dir()
    for name in os.listdir(upload_service.upload_dir):
        os.remove(os.path.join(upload_service.upload_dir, name))
    yield


@pytest.fixture
def upload_dir():
    from robotikhub.services.upload_service import upload_service
    return upload_service.upload_dir


@pytest.fixture
def test_client():
    """Create test client for API testing"""
    from robotikhub.main import app

    with TestClient(app) as client:
        yield client


@pytest_asyncio.fixture
async def async_client():
    """Create async test client for async API testing"""
    from robotikhub.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver"
    ) as client:
        yield client


@pytest.fixture
def sample_user_data():
    """Sample member registration payload"""
    return {
        "name": "Budi Santoso",
        "email": "budi@robotik.id",
        "password": "rahasia123",
        "role": "ANGGOTA"
    }


@pytest.fixture
def register_and_login(test_client):
    """Register a user through the API and return (user, auth headers)"""
    def _register(name, email, password="secret123", role="ANGGOTA"):
        response = test_client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password, "role": role}
        )
        assert response.status_code == 201, response.text
        response = test_client.post("/api/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        data = response.json()
        return data["user"], {"Authorization": f"Bearer {data['token']}"}
    return _register


@pytest.fixture
def admin_headers(register_and_login):
    _, headers = register_and_login("Admin One", "admin1@x.com", role="ADMIN")
    return headers


@pytest.fixture
def member_headers(register_and_login):
    _, headers = register_and_login("Siti Anggota", "siti@x.com")
    return headers


@pytest.fixture
def admin_token():
    """Admin token minted directly (no database row needed)"""
    from robotikhub.services.auth_service import auth_service

    return auth_service.create_access_token(data={"sub": "1", "role": "ADMIN"})


@pytest.fixture
def user_token():
    """Regular member token"""
    from robotikhub.services.auth_service import auth_service

    return auth_service.create_access_token(data={"sub": "2", "role": "ANGGOTA"})
