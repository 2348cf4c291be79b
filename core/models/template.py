# =============================================================================
# core/models/template.py - Downloadable Template Schemas
# =============================================================================

from enum import Enum

from pydantic import Field

from .base import CamelModel, RecordModel


class TemplateFileType(str, Enum):
    PDF = "pdf"
    DOCX = "docx"
    XLSX = "xlsx"


class TemplateCreate(CamelModel):
    """Internal create payload, built after the file has been stored."""
    title: str = Field(..., min_length=1, max_length=300)
    description: str = ""
    filename: str
    file_url: str
    file_type: TemplateFileType
    is_published: bool = False


class TemplateUploadForm(CamelModel):
    """Text fields accompanying a multipart template upload."""
    title: str = Field(..., min_length=1, max_length=300)
    description: str = Field(default="", max_length=5000)
    file_type: TemplateFileType
    is_published: bool = False


class TemplatePublishUpdate(CamelModel):
    is_published: bool


class Template(RecordModel):
    """A stored template."""
    title: str
    description: str = ""
    filename: str
    file_url: str
    file_type: TemplateFileType
    is_published: bool = False
