"""FastAPI dependency injection and manager wiring."""

from backoffice.application.interfaces import DataGateway
from backoffice.application.services import (
    BusinessEntityManager,
    CostCenterManager,
    HourlyRateManager,
    ProjectManager,
    RecordManager,
    UserManager,
)
from backoffice.config import get_settings
from backoffice.infrastructure.database.session import async_session_factory
from backoffice.infrastructure.gateway import HttpDataGateway, SQLAlchemyDataGateway


def get_data_gateway() -> DataGateway:
    """Provides the database-backed gateway used by the relation endpoints."""
    return SQLAlchemyDataGateway(async_session_factory)


def get_remote_gateway() -> HttpDataGateway:
    """Gateway for console clients talking to a running backoffice server."""
    settings = get_settings()
    return HttpDataGateway(settings.gateway_base_url, timeout=settings.gateway_timeout)


def build_managers(gateway: DataGateway | None = None) -> dict[str, RecordManager]:
    """One manager per back-office screen, sharing a single gateway.

    Defaults to the remote HTTP gateway configured in settings.
    """
    gateway = gateway or get_remote_gateway()
    currency = get_settings().default_currency
    return {
        "cost_centers": CostCenterManager(gateway),
        "entities": BusinessEntityManager(gateway),
        "projects": ProjectManager(gateway, default_currency=currency),
        "rates": HourlyRateManager(gateway, default_currency=currency),
        "users": UserManager(gateway),
    }
