from .http_gateway import HttpDataGateway
from .sqlalchemy_gateway import SQLAlchemyDataGateway

__all__ = ["HttpDataGateway", "SQLAlchemyDataGateway"]
