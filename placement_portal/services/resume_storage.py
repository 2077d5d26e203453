import logging
from pathlib import Path

from placement_portal.config import settings
from placement_portal.core.errors import UpstreamFailure, ValidationError
from placement_portal.core.security import generate_id

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "/uploads"


def validate_resume(filename: str | None, content: bytes) -> None:
    if not filename or not filename.lower().endswith(".pdf"):
        raise ValidationError.for_field("resume", "File must be a PDF (.pdf)")
    max_bytes = settings.max_resume_upload_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise ValidationError.for_field("resume", f"File too large. Max allowed is {settings.max_resume_upload_mb}MB.")
    # Reject disguised uploads
    if not content.startswith(b"%PDF"):
        raise ValidationError.for_field("resume", "Invalid PDF file content.")


def store_resume(user_id: str, filename: str | None, content: bytes) -> str:
    """Persist a resume PDF and return the public reference stored on the profile."""
    validate_resume(filename, content)
    relative = Path("resumes") / user_id / f"{generate_id()}.pdf"
    target = Path(settings.upload_dir) / relative
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
    except OSError as e:
        logger.exception("Failed to store resume for user=%s: %s", user_id, e)
        raise UpstreamFailure("Resume upload failed") from e
    logger.info("Stored resume for user=%s at %s (%d bytes)", user_id, target, len(content))
    return f"{PUBLIC_PREFIX}/{relative.as_posix()}"
