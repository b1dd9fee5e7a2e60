"""Manager for hourly billing rates."""

from backoffice.application.interfaces import DataGateway, Join, Row
from backoffice.application.schemas import HourlyRateDraft
from backoffice.application.services.record_manager import RecordManager
from backoffice.domain.entities import HourlyRate, ProjectStatus
from backoffice.domain.references import ReferenceOption


class HourlyRateManager(RecordManager[HourlyRate, HourlyRateDraft]):
    """Rates searchable by position, team or project name; filtered by currency."""

    relation = "hourly_rates"
    record_label = "rate"
    draft_type = HourlyRateDraft
    text_fields = ("position", "team", "project_name")
    status_field = "currency"
    joins = (Join("project", "projects", "project_id", ("name",)),)

    def __init__(self, gateway: DataGateway, default_currency: str = "BRL"):
        super().__init__(gateway)
        self._default_currency = default_currency
        self.project_options: tuple[ReferenceOption, ...] = ()

    def to_record(self, row: Row) -> HourlyRate:
        return HourlyRate.from_row(row)

    def new_draft(self) -> HourlyRateDraft:
        return HourlyRateDraft(currency=self._default_currency)

    async def load_references(self) -> None:
        self.project_options = await self._fetch_options(
            "projects",
            lambda row: row["name"],
            filters={"status": ProjectStatus.ACTIVE.value},
        )
