"""
API Routes untuk Authentication + dependency Authorization Gate
"""
from fastapi import APIRouter, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from robotikhub.exceptions import AuthorizationError, ForbiddenError
from robotikhub.models import ROLE_ADMIN
from robotikhub.schemas import UserRegister, UserLogin, MessageResponse
from robotikhub.services.auth_service import auth_service

router = APIRouter(prefix="/api/auth", tags=["Authentication"])
security = HTTPBearer(auto_error=False)


# === Dependency untuk protected routes ===

async def get_current_user(credentials: HTTPAuthorizationCredentials = Depends(security)) -> dict:
    """Identitas (id, role) dari bearer token; 401 jika tidak ada atau tidak valid"""
    if not credentials:
        raise AuthorizationError("Unauthorized")
    return auth_service.identity_from_token(credentials.credentials)


async def require_admin(current_user: dict = Depends(get_current_user)) -> dict:
    """Hanya role ADMIN; 403 untuk anggota biasa"""
    if current_user["role"] != ROLE_ADMIN:
        raise ForbiddenError()
    return current_user


# === Routes ===

@router.post("/register", status_code=201, summary="Register User Baru")
async def register(data: UserRegister):
    """
    Register user baru.

    - **name**, **email**, **password**: wajib
    - **role**: ADMIN (maksimal 3 admin) atau ANGGOTA
    """
    user = auth_service.register(
        name=data.name,
        email=data.email,
        password=data.password,
        role=data.role
    )
    return {"message": "Akun berhasil dibuat! Silakan Login.", "user": user}


@router.post("/login", summary="Login")
async def login(data: UserLogin):
    """
    Login dan dapatkan access token.

    Returns user dan token yang berlaku 7 hari.
    """
    return auth_service.login(data.email, data.password)


@router.get("/me", summary="Get Current User")
async def get_me(current_user: dict = Depends(get_current_user)):
    """
    Get informasi user yang sedang login.

    Requires: Bearer token di header Authorization
    """
    return auth_service.get_user_by_id(current_user["id"])


@router.get("/verify", summary="Verify Token")
async def verify_token(current_user: dict = Depends(get_current_user)):
    """Verify apakah token masih valid"""
    return {"status": "valid", "user": current_user}


@router.post("/logout", response_model=MessageResponse, summary="Logout")
async def logout():
    """
    Logout user.

    Note: Token JWT stateless, logout dilakukan di client-side
    dengan menghapus token dari storage.
    """
    return {"status": "success", "message": "Logout berhasil. Hapus token dari client."}
