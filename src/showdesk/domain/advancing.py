"""Domain models for advancing sessions."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AdvancingSession:
    """Represents a logistics collaboration session for a show."""

    id: str
    org_id: str
    show_id: str
    title: str
    created_at: datetime
    expires_at: datetime | None = None
