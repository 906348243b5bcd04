import uuid
from datetime import datetime

from sqlalchemy import BigInteger, JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.models.timestamps import next_position, utcnow

class Faculty(Base):
    __tablename__ = "faculty"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    name: Mapped[str] = mapped_column(String(120), nullable=False)
    email: Mapped[str] = mapped_column(String(120), nullable=False, index=True)

    department: Mapped[str | None] = mapped_column(String(120), nullable=True)

    # lista de tags livres, ex: ["Machine Learning", "Algebra"]
    specializations: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

    # ordem de cadastro = ordem que o gerador percorre
    position: Mapped[int] = mapped_column(BigInteger, nullable=False, default=next_position, index=True)
