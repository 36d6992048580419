# app/db/models/airplane.py
from __future__ import annotations
from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from app.db.mixins import Base, CreatedUpdatedMixin


class Airplane(CreatedUpdatedMixin, Base):
    __tablename__ = "airplanes"
    # never hand out an id again after rows are deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Airplane id={self.id} name={self.name!r}>"
