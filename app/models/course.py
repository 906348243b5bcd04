import uuid
from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, SmallInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.timestamps import next_position, utcnow

class Course(Base):
    __tablename__ = "courses"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    name: Mapped[str] = mapped_column(String(120), nullable=False)

    # prefixo do code (2 letras) é usado pra achar professor do departamento
    code: Mapped[str] = mapped_column(String(30), nullable=False, index=True)

    enrollment: Mapped[int] = mapped_column(Integer, nullable=False)
    duration_hours: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=1)

    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

    # ordem de cadastro = ordem que o gerador percorre
    position: Mapped[int] = mapped_column(BigInteger, nullable=False, default=next_position, index=True)
