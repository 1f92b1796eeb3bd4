"""
Upload Manager - simpan dan hapus file upload (avatar, foto, dokumen)
"""
import logging
import os
import re
import time
import uuid
from typing import Optional

from robotikhub.config import get_settings
from robotikhub.exceptions import ValidationError, StorageError

logger = logging.getLogger(__name__)


def title_from(title: Optional[str], filename: Optional[str], fallback: str) -> str:
    """Judul eksplisit, atau nama file upload tanpa ekstensi"""
    if title and title.strip():
        return title.strip()
    if filename:
        stem = os.path.splitext(os.path.basename(filename))[0]
        if stem:
            return stem
    return fallback


class UploadService:
    """Satu file per request, disimpan di satu folder uploads"""

    def __init__(self, upload_dir: str = None, max_size: int = None):
        settings = get_settings()
        self.upload_dir = upload_dir or settings.upload_dir
        self.max_size = max_size or settings.max_upload_size

    def ensure_dir(self):
        os.makedirs(self.upload_dir, exist_ok=True)

    def safe_filename(self, original: Optional[str]) -> str:
        """Basename tanpa spasi dan karakter aneh"""
        name = os.path.basename((original or "file").replace("\\", "/"))
        name = re.sub(r"\s+", "_", name)
        name = re.sub(r"[^A-Za-z0-9._-]", "", name)
        return name or "file"

    def generate_filename(self, original: Optional[str]) -> str:
        """Nama unik: <timestamp ms>-<random>-<nama asli>"""
        timestamp = int(time.time() * 1000)
        unique_id = uuid.uuid4().hex[:8]
        return f"{timestamp}-{unique_id}-{self.safe_filename(original)}"

    def _check_size(self, content: bytes):
        if len(content) > self.max_size:
            limit_mb = self.max_size // (1024 * 1024)
            raise ValidationError(f"Ukuran file melebihi batas {limit_mb} MB.")

    async def read_upload(self, upload) -> Optional[bytes]:
        """
        Baca isi UploadFile paling banyak max_size + 1 byte.

        Raises ValidationError jika file melebihi batas; sisa stream tidak dibaca.
        """
        if upload is None:
            return None
        content = await upload.read(self.max_size + 1)
        self._check_size(content)
        return content

    def save(self, content: bytes, original_filename: Optional[str]) -> str:
        """
        Simpan isi file dan kembalikan referensi relatif (nama file).

        Raises ValidationError jika file kosong atau melebihi batas ukuran.
        """
        if not content:
            raise ValidationError("File kosong.")
        self._check_size(content)

        self.ensure_dir()
        filename = self.generate_filename(original_filename)
        try:
            with open(os.path.join(self.upload_dir, filename), "wb") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Failed to write upload {filename}: {e}")
            raise StorageError("Gagal menyimpan file.") from e
        logger.info(f"Stored upload {filename} ({len(content)} bytes)")
        return filename

    def path_for(self, reference: str) -> str:
        return os.path.join(self.upload_dir, os.path.basename(reference))

    def delete(self, reference: Optional[str]) -> bool:
        """Hapus file secara best-effort; error not-found/permission diabaikan"""
        if not reference:
            return False
        try:
            os.remove(self.path_for(reference))
            return True
        except OSError as e:
            logger.warning(f"Could not remove upload {reference}: {e}")
            return False


# Global instance
upload_service = UploadService()
