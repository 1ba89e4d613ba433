import datetime as dt

from sqlalchemy import Column, DateTime, String, Text

from .db import Base


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class Task(Base):
    __tablename__ = "tasks"

    id = Column(String(64), primary_key=True, index=True)
    title = Column(Text, nullable=True)
    description = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)

    def to_document(self) -> dict:
        created_at = self.created_at.isoformat() if self.created_at else None
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "created_at": created_at,
        }
