"""
Response Shaper - ubah path upload relatif menjadi URL absolut
"""
import os
from typing import Optional

from robotikhub.config import get_settings

UPLOADS_SEGMENT = "uploads"


def public_url(path_or_url: Optional[str]) -> Optional[str]:
    """
    URL lengkap untuk file upload.

    Jika nilai sudah berupa URL absolut (http/https) dikembalikan apa adanya,
    misalnya link eksternal materi belajar.
    """
    if not path_or_url:
        return None
    if path_or_url.startswith(("http://", "https://")):
        return path_or_url
    base = get_settings().api_base_url.rstrip("/")
    filename = os.path.basename(path_or_url.replace("\\", "/"))
    return f"{base}/{UPLOADS_SEGMENT}/{filename}"


def format_date(value) -> str:
    """Tanggal (date/datetime/str) ke format YYYY-MM-DD"""
    if value is None:
        return ""
    if hasattr(value, "isoformat"):
        return value.isoformat()[:10]
    return str(value).split("T")[0]
