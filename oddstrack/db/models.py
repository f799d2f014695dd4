from datetime import datetime, timezone

from sqlmodel import SQLModel, Field

from oddstrack.core.validation import to_number


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Observation(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    owner: str = Field(index=True)
    value: str  # canonical, e.g. '2.45x'
    recorded_at: datetime = Field(default_factory=utcnow, index=True)
    source: str = "manual"  # 'screenshot' | 'manual'

    @property
    def number(self) -> float:
        return to_number(self.value)
