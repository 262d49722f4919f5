"""WorkoutEntry and WorkoutSet models."""

from __future__ import annotations

from sqlalchemy import BigInteger, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from liftlog.db.base import Base


class WorkoutEntry(Base):
    """One logged exercise session. Written once, never updated.

    Logical key is (owner_id, exercise_norm, workout_date, created_at); history
    queries read the (owner_id, exercise_norm) partition newest first.
    Derived metrics are stored alongside and never recomputed.
    """

    __tablename__ = "workout_entries"
    __table_args__ = (
        Index(
            "ix_workout_entries_owner_exercise_date",
            "owner_id",
            "exercise_norm",
            "workout_date",
            "created_at",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner_id: Mapped[str] = mapped_column(String(100), nullable=False)
    exercise_name: Mapped[str] = mapped_column(String(255), nullable=False)
    exercise_norm: Mapped[str] = mapped_column(String(255), nullable=False)
    workout_date: Mapped[str] = mapped_column(String(10), nullable=False)  # YYYY-MM-DD
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)  # epoch ms

    top_set_weight: Mapped[float] = mapped_column(Numeric(8, 2, asdecimal=False), nullable=False)
    top_set_reps: Mapped[int] = mapped_column(Integer, nullable=False)
    est1rm: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)

    sets: Mapped[list["WorkoutSet"]] = relationship(
        "WorkoutSet",
        back_populates="entry",
        cascade="all, delete-orphan",
        order_by="WorkoutSet.set_number",
    )


class WorkoutSet(Base):
    """One set within an entry: 1-based number, reps and weight (2 decimals)."""

    __tablename__ = "workout_sets"
    __table_args__ = (Index("ix_workout_sets_entry_id", "entry_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    entry_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("workout_entries.id", ondelete="CASCADE"), nullable=False
    )
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[float] = mapped_column(Numeric(8, 2, asdecimal=False), nullable=False)

    entry: Mapped["WorkoutEntry"] = relationship("WorkoutEntry", back_populates="sets")
