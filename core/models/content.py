# =============================================================================
# core/models/content.py - Content Item Schemas
# =============================================================================
# Content items are the news posts, videos and gallery entries shown on the
# public site. Only items with is_published=True are listed publicly.
#
# Items created through the upload endpoint carry the generated `filename`
# and a /storage/... URL: `image_url` for news, `file_url` for everything else.
# =============================================================================

from enum import Enum

from pydantic import Field, field_validator

from .base import CamelModel, RecordModel, reject_null


class ContentType(str, Enum):
    """Kinds of content item."""
    NEWS = "news"
    VIDEO = "video"
    GALLERY = "gallery"


class ContentItemCreate(CamelModel):
    """
    Admin JSON create body.

    Example:
        {
            "type": "news",
            "title": "We are hiring",
            "description": "Twenty open roles this quarter",
            "imageUrl": "/storage/content/1718000000000-42.png",
            "isPublished": true
        }
    """

    type: ContentType = ContentType.NEWS
    title: str = Field(..., min_length=1, max_length=300)
    description: str = Field(default="", max_length=10000)
    url: str | None = None
    image_url: str | None = None
    file_url: str | None = None
    filename: str | None = None
    category: str | None = Field(default=None, max_length=100)
    is_favourite: bool = False
    is_published: bool = False


class ContentItemUpdate(CamelModel):
    """Admin partial update body; only sent fields are written."""
    type: ContentType | None = None
    title: str | None = Field(default=None, min_length=1, max_length=300)
    description: str | None = Field(default=None, max_length=10000)
    url: str | None = None
    image_url: str | None = None
    file_url: str | None = None
    category: str | None = Field(default=None, max_length=100)
    is_favourite: bool | None = None
    is_published: bool | None = None

    check_not_null = field_validator(
        "type", "title", "description", "is_favourite", "is_published"
    )(reject_null)


class ContentUploadForm(CamelModel):
    """Text fields accompanying a multipart content upload."""
    type: ContentType = ContentType.NEWS
    title: str = Field(..., min_length=1, max_length=300)
    description: str = Field(default="", max_length=10000)
    category: str | None = Field(default=None, max_length=100)
    is_favourite: bool = False
    is_published: bool = False


class ContentItem(RecordModel):
    """A stored content item."""
    type: ContentType
    title: str
    description: str = ""
    url: str | None = None
    image_url: str | None = None
    file_url: str | None = None
    filename: str | None = None
    category: str | None = None
    is_favourite: bool = False
    is_published: bool = False

    @property
    def stored_object_url(self) -> str | None:
        """The /storage URL of the uploaded asset backing this item, if any."""
        for candidate in (self.url, self.image_url, self.file_url):
            if candidate and candidate.startswith(("/storage/", "/objects/")):
                return candidate
        return None
