# app/models/timetable_entry.py
import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, SmallInteger, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.course import Course
from app.models.faculty import Faculty
from app.models.room import Room
from app.models.timestamps import utcnow

class TimetableEntry(Base):
    __tablename__ = "timetable_entries"

    # um slot só pode ser usado uma vez no horário inteiro (ver engine.is_occupied)
    __table_args__ = (UniqueConstraint("time_slot_id", name="uq_timetable_entries_time_slot_id"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    course_id: Mapped[str] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True
    )
    faculty_id: Mapped[str] = mapped_column(
        ForeignKey("faculty.id", ondelete="CASCADE"), nullable=False, index=True
    )
    room_id: Mapped[str] = mapped_column(
        ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # 1..40, ver app/core/timeslots.py
    time_slot_id: Mapped[int] = mapped_column(SmallInteger, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

    course: Mapped[Course] = relationship()
    faculty: Mapped[Faculty] = relationship()
    room: Mapped[Room] = relationship()
