"""
Webinar table.

Key design decisions:
- String primary key: ids come from the IdGenerator port, not the database
- `version` column backs the conditional UPDATE in the repository
- Seat bounds are repeated as a CHECK constraint as the last line of defence
"""

from sqlalchemy import CheckConstraint, Column, DateTime, Index, Integer, String

from webinar_api.db.base import Base, TimestampMixin


class WebinarModel(Base, TimestampMixin):
    __tablename__ = "webinars"

    id = Column(String(64), primary_key=True)
    organizer_id = Column(String(64), nullable=False)
    title = Column(String(255), nullable=False)
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)
    seats = Column(Integer, nullable=False)

    version = Column(Integer, nullable=False, default=1)

    __table_args__ = (
        CheckConstraint("seats >= 1 AND seats <= 1000", name="check_webinar_seats_bounds"),
        Index("ix_webinars_organizer_id", "organizer_id"),
        Index("ix_webinars_start_date", "start_date"),
    )

    def __repr__(self) -> str:
        return f"<Webinar(id={self.id}, title={self.title}, seats={self.seats}, v{self.version})>"
