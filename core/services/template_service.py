# =============================================================================
# core/services/template_service.py - Downloadable Template Persistence
# =============================================================================

from core.models.template import Template, TemplateCreate
from core.services.base import TableService


class TemplateService(TableService[Template]):

    table = "templates"
    record_model = Template

    def list_published(self) -> list[Template]:
        return self._select({"is_published": True})

    def list_all(self) -> list[Template]:
        return self._select()

    def create(self, data: TemplateCreate) -> Template:
        return self._insert(data.to_row())

    def update_status(self, template_id: int, is_published: bool) -> Template | None:
        return self._update(template_id, {"is_published": is_published})

    def delete(self, template_id: int) -> Template | None:
        return self._delete(template_id)
