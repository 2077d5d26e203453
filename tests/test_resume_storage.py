from pathlib import Path

import pytest

import placement_portal.services.resume_storage as rs
from placement_portal.core.errors import UpstreamFailure, ValidationError


def test_store_resume_writes_file_and_returns_public_path(monkeypatch, tmp_path):
    monkeypatch.setattr(rs.settings, "upload_dir", str(tmp_path))
    ref = rs.store_resume("student-1", "CV.PDF", b"%PDF-1.4 content")
    assert ref.startswith("/uploads/resumes/student-1/")
    assert ref.endswith(".pdf")
    stored = tmp_path / Path(ref.removeprefix("/uploads/"))
    assert stored.read_bytes() == b"%PDF-1.4 content"


@pytest.mark.parametrize(
    "filename, content, message",
    [
        ("cv.docx", b"%PDF-1.4", "File must be a PDF"),
        (None, b"%PDF-1.4", "File must be a PDF"),
        ("cv.pdf", b"MZ not a pdf", "Invalid PDF"),
    ],
)
def test_validate_resume_rejects_bad_uploads(filename, content, message):
    with pytest.raises(ValidationError) as exc:
        rs.validate_resume(filename, content)
    assert message in exc.value.detail
    assert exc.value.errors[0]["field"] == "resume"


def test_validate_resume_rejects_large_upload(monkeypatch):
    monkeypatch.setattr(rs.settings, "max_resume_upload_mb", 1)
    huge = b"%PDF" + (b"A" * (1024 * 1024 + 10))
    with pytest.raises(ValidationError) as exc:
        rs.validate_resume("cv.pdf", huge)
    assert "too large" in exc.value.detail


def test_store_resume_write_failure_is_upstream(monkeypatch, tmp_path):
    blocker = tmp_path / "blocked"
    blocker.write_text("not a directory")
    monkeypatch.setattr(rs.settings, "upload_dir", str(blocker))
    with pytest.raises(UpstreamFailure):
        rs.store_resume("student-1", "cv.pdf", b"%PDF-1.4")
