"""Response models for the JSON file endpoints."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel

from filehub.core.listing import FileDescriptor


class FileInfo(BaseModel):
    """One entry of a namespace listing."""
    name: str
    extension: str
    size: int  # bytes
    created_at: datetime
    modified_at: datetime
    uploaded_by: str
    edited_by: str

    @classmethod
    def from_descriptor(cls, d: FileDescriptor) -> "FileInfo":
        return cls(
            name=d.name,
            extension=d.extension,
            size=d.size_bytes,
            created_at=d.created_at,
            modified_at=d.modified_at,
            uploaded_by=d.uploaded_by,
            edited_by=d.edited_by,
        )


class FileListResponse(BaseModel):
    """Listing plus the sort/filter that were applied."""
    sort: str
    filter: str
    files: list[FileInfo]


class UploadResponse(BaseModel):
    success: bool = True


class ConflictResponse(BaseModel):
    exists: bool = True
    name: str


class PreviewResponse(BaseModel):
    type: Literal["image", "text", "unsupported"]
    base64: Optional[str] = None
    mime: Optional[str] = None
    text: Optional[str] = None
