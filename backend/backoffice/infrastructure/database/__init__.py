from .base import Base
from .session import engine, async_session_factory
from .models import RELATION_MODELS

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "RELATION_MODELS",
]
