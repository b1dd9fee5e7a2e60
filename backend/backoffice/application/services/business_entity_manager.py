"""Manager for client and supplier entities."""

import csv
import io
from datetime import date

from backoffice.application.interfaces import Row
from backoffice.application.schemas import BusinessEntityDraft
from backoffice.application.services.entity_detail_manager import (
    EntityAddressManager,
    EntityContactManager,
)
from backoffice.application.services.record_manager import RecordManager
from backoffice.domain.entities import BusinessEntity

EXPORT_HEADER = ("Tipo", "Nome", "Documento", "Email", "Telefone", "Status")


class BusinessEntityManager(RecordManager[BusinessEntity, BusinessEntityDraft]):
    """Entities filtered by type; each one opens its own address and contact lists."""

    relation = "entities"
    record_label = "entity"
    draft_type = BusinessEntityDraft
    text_fields = ("name", "document", "email", "phone")
    status_field = "type"

    def to_record(self, row: Row) -> BusinessEntity:
        return BusinessEntity.from_row(row)

    def addresses(self, entity_id: str) -> EntityAddressManager:
        return EntityAddressManager(self._gateway, entity_id)

    def contacts(self, entity_id: str) -> EntityContactManager:
        return EntityContactManager(self._gateway, entity_id)

    def export_csv(self) -> str:
        """CSV of the currently visible entities, in list order."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(EXPORT_HEADER)
        for entity in self.visible_records:
            writer.writerow((
                entity.type,
                entity.name,
                entity.document or "",
                entity.email or "",
                entity.phone or "",
                entity.status,
            ))
        return buffer.getvalue()

    @staticmethod
    def export_filename(day: date | None = None) -> str:
        return f"entidades_{(day or date.today()).isoformat()}.csv"
