"""Exercise catalog model - one row per owner and normalized exercise name."""

from __future__ import annotations

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from liftlog.db.base import Base


class ExerciseCatalogEntry(Base):
    """Recently used exercise. Overwritten on every log (last write wins);
    updated_at is an advisory recency pointer, not a source of truth."""

    __tablename__ = "exercises"

    owner_id: Mapped[str] = mapped_column(String(100), primary_key=True)
    exercise_norm: Mapped[str] = mapped_column(String(255), primary_key=True)
    exercise_name: Mapped[str] = mapped_column(String(255), nullable=False)
    updated_at: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)  # epoch ms
