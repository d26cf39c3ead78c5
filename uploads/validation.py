"""
Upload Validation

Checks uploaded teaching materials before they are analyzed. Sizes are in
bytes; limits reflect low-bandwidth school environments.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

MB = 1024 * 1024

MAX_FILE_SIZE = 10 * MB
LARGE_IMAGE_SIZE = 5 * MB
LARGE_DOCUMENT_SIZE = 8 * MB
MAX_AUDIO_SIZE = 15 * MB

ALLOWED_TYPES = [
    "image/jpeg", "image/png", "image/gif", "image/webp",
    "application/pdf", "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "text/plain", "audio/mpeg", "audio/wav", "audio/webm",
]


class FileValidationResult(BaseModel):
    is_valid: bool
    error: Optional[str] = None
    warnings: List[str] = Field(default_factory=list)


def validate_basic_file(file_name: str, content_type: str, size: int) -> FileValidationResult:
    if size == 0:
        return FileValidationResult(is_valid=False, error=f'File "{file_name}" appears to be empty or corrupted')

    if size > MAX_FILE_SIZE:
        return FileValidationResult(
            is_valid=False,
            error=f"File size {size / MB:.1f}MB exceeds 10MB limit",
        )

    if content_type not in ALLOWED_TYPES:
        return FileValidationResult(
            is_valid=False,
            error=(
                f'File type "{content_type}" not supported. Please use: Images (JPG, PNG, GIF, WebP), '
                "Documents (PDF, Word, Text), or Audio (MP3, WAV, WebM)"
            ),
        )

    return FileValidationResult(is_valid=True)


def validate_educational_file(file_name: str, content_type: str, size: int) -> FileValidationResult:
    """
    Validate an upload for classroom use.

    Basic checks (empty, size, type) run first; then per-kind rules may
    reject the file or attach warnings.
    """
    basic = validate_basic_file(file_name, content_type, size)
    if not basic.is_valid:
        return basic

    warnings: List[str] = []

    if content_type.startswith("image/"):
        if "inappropriate" in file_name.lower():
            return FileValidationResult(
                is_valid=False,
                error="File name suggests inappropriate content for educational use",
            )
        if size > LARGE_IMAGE_SIZE:
            warnings.append("Large image files may take longer to process in classroom settings")

    if "pdf" in content_type or "word" in content_type:
        if size > LARGE_DOCUMENT_SIZE:
            warnings.append("Large documents may be difficult to process on mobile devices commonly used in Indian schools")

    if content_type.startswith("audio/"):
        if size > MAX_AUDIO_SIZE:
            return FileValidationResult(
                is_valid=False,
                error="Audio files over 15MB may not work well in low-bandwidth school environments",
            )
        warnings.append("Ensure audio is clear and appropriate for classroom playback")

    return FileValidationResult(is_valid=True, warnings=warnings)
