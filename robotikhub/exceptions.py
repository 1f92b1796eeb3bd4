"""
Error taxonomy untuk RobotikHub Portal.

Setiap error membawa HTTP status code; handler di main.py mengubahnya
menjadi response JSON ``{"detail": message, "error": message}``.
"""


class PortalError(Exception):
    """Base class untuk semua error aplikasi"""
    status_code = 500
    default_message = "Terjadi kesalahan pada server"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(PortalError):
    """Field wajib kosong atau format tidak valid"""
    status_code = 400
    default_message = "Data tidak valid"


class ConflictError(PortalError):
    """Email duplikat atau kuota admin penuh"""
    status_code = 400
    default_message = "Data sudah ada"


class AuthenticationError(PortalError):
    """Email atau password salah"""
    status_code = 401
    default_message = "Email atau password tidak sesuai."


class AuthorizationError(PortalError):
    """Token tidak ada, tidak valid, atau expired"""
    status_code = 401
    default_message = "Unauthorized"


class ForbiddenError(AuthorizationError):
    """Role tidak mencukupi"""
    status_code = 403
    default_message = "Admin only"


class NotFoundError(PortalError):
    status_code = 404
    default_message = "Not found"


class StorageError(PortalError):
    """Kegagalan database atau filesystem yang tidak terduga"""
    status_code = 500
    default_message = "Server error"
