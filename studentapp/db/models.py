"""SQLAlchemy models for the student records table."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String

from .session import Base


class Student(Base):
    __tablename__ = "students"
    # AUTOINCREMENT keeps SQLite from handing out a deleted max id again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    course = Column(String(255), nullable=False)
    age = Column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Student id={self.id} full_name={self.full_name!r}>"
