"""Manager for projects and their active-client picker."""

from backoffice.application.interfaces import DataGateway, Join, Row
from backoffice.application.schemas import ProjectDraft
from backoffice.application.services.record_manager import RecordManager
from backoffice.domain.entities import EntityType, Project
from backoffice.domain.references import ReferenceOption


class ProjectManager(RecordManager[Project, ProjectDraft]):
    relation = "projects"
    record_label = "project"
    draft_type = ProjectDraft
    text_fields = ("name", "client_name")
    joins = (Join("client", "entities", "client_id", ("name",)),)

    def __init__(self, gateway: DataGateway, default_currency: str = "BRL"):
        super().__init__(gateway)
        self._default_currency = default_currency
        self.client_options: tuple[ReferenceOption, ...] = ()

    def to_record(self, row: Row) -> Project:
        return Project.from_row(row)

    def new_draft(self) -> ProjectDraft:
        return ProjectDraft(currency=self._default_currency)

    async def load_references(self) -> None:
        self.client_options = await self._fetch_options(
            "entities",
            lambda row: row["name"],
            filters={"type": EntityType.CLIENT.value, "status": "active"},
        )
