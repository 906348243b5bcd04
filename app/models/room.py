import uuid
from datetime import datetime

from sqlalchemy import BigInteger, Boolean, DateTime, Integer, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.timestamps import next_position, utcnow

class Room(Base):
    __tablename__ = "rooms"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    name: Mapped[str] = mapped_column(String(120), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)

    building: Mapped[str | None] = mapped_column(String(120), nullable=True)
    floor: Mapped[int | None] = mapped_column(SmallInteger, nullable=True)

    # só informativo, o gerador não olha pra isso
    has_projector: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)
    has_computers: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

    # ordem de cadastro = ordem que o gerador percorre
    position: Mapped[int] = mapped_column(BigInteger, nullable=False, default=next_position, index=True)
