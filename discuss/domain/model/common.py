"""Shared base for domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def utcnow() -> datetime:
    """Timezone-aware now; every stored instant is UTC."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Frozen entity; changes go through ``model_copy(update=...)``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
