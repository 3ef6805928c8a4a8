"""SQLAlchemy ORM model for student applications."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from intered.infrastructure.database.base import Base


class ApplicationModel(Base):
    """ORM model: maps to the 'applications' table."""

    __tablename__ = "applications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False
    )
    university_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("universities.id", ondelete="CASCADE"), nullable=False
    )
    program_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("programs.id", ondelete="CASCADE"), nullable=False
    )
    agent_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("agents.id", ondelete="SET NULL"), nullable=True
    )
    stage: Mapped[str] = mapped_column(String(40), nullable=False, default="document_collection")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="in_progress")
    intake_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    application_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    decision_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_high_priority: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_applications_stage", "stage"),
        Index("ix_applications_student", "student_id"),
        Index("ix_applications_university", "university_id"),
        Index("ix_applications_program", "program_id"),
    )

    def __repr__(self) -> str:
        return f"<ApplicationModel(id={self.id}, student_id={self.student_id}, stage='{self.stage}')>"
