"""
Test Upload Manager and Response Shaper
"""
import os
from io import BytesIO
import pytest
from starlette.datastructures import UploadFile

from robotikhub.exceptions import ValidationError
from robotikhub.services.upload_service import UploadService, title_from
from robotikhub.shaping import public_url, format_date


@pytest.fixture
def service(tmp_path):
    return UploadService(upload_dir=str(tmp_path / "uploads"), max_size=10)


class TestUploadService:

    def test_generated_names_are_unique(self, service):
        names = {service.generate_filename("foto.jpg") for _ in range(50)}

        assert len(names) == 50
        assert all(name.endswith("-foto.jpg") for name in names)

    def test_safe_filename(self, service):
        assert service.safe_filename("../../etc/passwd") == "passwd"
        assert service.safe_filename("C:\\Users\\budi\\foto saya!.png") == "foto_saya.png"
        assert service.safe_filename(None) == "file"
        assert service.safe_filename("???") == "file"

    def test_save_and_delete(self, service):
        filename = service.save(b"12345", "a.txt")

        assert os.path.exists(service.path_for(filename))
        assert service.delete(filename) is True
        assert not os.path.exists(service.path_for(filename))

    def test_size_limit(self, service):
        with pytest.raises(ValidationError):
            service.save(b"x" * 11, "besar.bin")

    def test_empty_file_rejected(self, service):
        with pytest.raises(ValidationError):
            service.save(b"", "kosong.txt")

    def test_delete_missing_is_not_an_error(self, service):
        assert service.delete("123-abc-tidak-ada.jpg") is False
        assert service.delete(None) is False

    @pytest.mark.asyncio
    async def test_read_upload_stops_after_limit(self, service):
        upload = UploadFile(file=BytesIO(b"x" * 1000), filename="besar.bin")

        with pytest.raises(ValidationError):
            await service.read_upload(upload)
        assert upload.file.tell() == service.max_size + 1

    @pytest.mark.asyncio
    async def test_read_upload_within_limit(self, service):
        assert await service.read_upload(UploadFile(file=BytesIO(b"12345"), filename="a.txt")) == b"12345"
        assert await service.read_upload(None) is None


class TestTitleFrom:

    @pytest.mark.parametrize("title, filename, expected", [
        ("  Lomba  ", "x.jpg", "Lomba"),
        ("", "dokumentasi lomba.jpg", "dokumentasi lomba"),
        (None, None, "Untitled"),
        ("   ", "", "Untitled"),
    ])
    def test_title_from(self, title, filename, expected):
        assert title_from(title, filename, "Untitled") == expected


class TestShaping:

    def test_relative_reference_becomes_absolute(self):
        assert public_url("1700000000000-ab12cd34-foto.jpg") == \
            "http://testserver/uploads/1700000000000-ab12cd34-foto.jpg"

    def test_legacy_path_uses_basename(self):
        assert public_url("uploads\\lama\\foto.jpg") == "http://testserver/uploads/foto.jpg"

    def test_external_url_untouched(self):
        assert public_url("https://youtu.be/abc") == "https://youtu.be/abc"

    def test_empty_is_none(self):
        assert public_url(None) is None
        assert public_url("") is None

    def test_format_date(self):
        from datetime import date, datetime

        assert format_date(date(2025, 3, 1)) == "2025-03-01"
        assert format_date(datetime(2025, 3, 1, 8, 30)) == "2025-03-01"
        assert format_date("2025-03-01T08:30") == "2025-03-01"
        assert format_date(None) == ""
