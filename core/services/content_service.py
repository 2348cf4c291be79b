# =============================================================================
# core/services/content_service.py - Content Item Persistence
# =============================================================================

from core.models.content import (
    ContentItem,
    ContentItemCreate,
    ContentItemUpdate,
    ContentType,
)
from core.services.base import TableService


class ContentService(TableService[ContentItem]):
    """News posts, videos and gallery entries."""

    table = "content_items"
    record_model = ContentItem

    def list_published(self, content_type: ContentType | None = None) -> list[ContentItem]:
        """
        List items visible on the public site.

        Args:
            content_type: Optional filter on the item type
        """
        filters: dict = {"is_published": True}
        if content_type:
            filters["type"] = content_type.value
        return self._select(filters)

    def create(self, data: ContentItemCreate) -> ContentItem:
        return self._insert(data.to_row())

    def update(self, item_id: int, data: ContentItemUpdate) -> ContentItem | None:
        return self._update(item_id, data.to_row(partial=True))

    def delete(self, item_id: int) -> ContentItem | None:
        """Delete an item, returning the removed row (None if it didn't exist)."""
        return self._delete(item_id)
