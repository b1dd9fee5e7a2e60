"""Managers for the addresses and contacts of one business entity."""

from typing import Any, TypeVar

from backoffice.application.interfaces import DataGateway, Row
from backoffice.application.schemas import EntityAddressDraft, EntityContactDraft, FormDraft
from backoffice.application.services.record_manager import RecordManager
from backoffice.domain.entities import EntityAddress, EntityContact

R = TypeVar("R")
D = TypeVar("D", bound=FormDraft)


class EntityDetailManager(RecordManager[R, D]):
    """Lists only the rows of ``entity_id`` and binds saved rows to it.

    Primary rows come first.
    """

    order_by = "is_primary"
    descending = True

    def __init__(self, gateway: DataGateway, entity_id: str):
        super().__init__(gateway)
        self.entity_id = entity_id

    @property
    def scope(self) -> dict[str, Any]:
        return {"entity_id": self.entity_id}


class EntityAddressManager(EntityDetailManager[EntityAddress, EntityAddressDraft]):
    relation = "entity_addresses"
    record_label = "address"
    draft_type = EntityAddressDraft
    text_fields = ("street", "city", "state")
    status_field = "address_type"

    def to_record(self, row: Row) -> EntityAddress:
        return EntityAddress.from_row(row)


class EntityContactManager(EntityDetailManager[EntityContact, EntityContactDraft]):
    relation = "entity_contacts"
    record_label = "contact"
    draft_type = EntityContactDraft
    text_fields = ("name", "role", "email")

    def to_record(self, row: Row) -> EntityContact:
        return EntityContact.from_row(row)
