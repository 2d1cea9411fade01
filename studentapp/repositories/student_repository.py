"""Data access for student records backed by SQLAlchemy."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import sessionmaker

from studentapp.db.models import Student
from studentapp.db.session import session_scope
from studentapp.schemas.student import NewStudentInput, StudentUpdateInput


class StudentRepository:
    """CRUD helpers wrapping a SQLAlchemy session factory."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def list_all(self) -> list[Student]:
        with session_scope(self._session_factory) as session:
            stmt = select(Student).order_by(Student.id)
            return list(session.execute(stmt).scalars().all())

    def find_by_id(self, student_id: int) -> Optional[Student]:
        with session_scope(self._session_factory) as session:
            return session.get(Student, student_id)

    def create(self, data: NewStudentInput) -> Student:
        entity = Student(
            full_name=data.full_name,
            email=data.email,
            course=data.course,
            age=data.age,
        )
        with session_scope(self._session_factory) as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def update(self, data: StudentUpdateInput) -> Optional[Student]:
        with session_scope(self._session_factory) as session:
            entity = session.get(Student, data.id)
            if not entity:
                return None
            entity.full_name = data.full_name
            entity.email = data.email
            entity.course = data.course
            entity.age = data.age
            session.commit()
            session.refresh(entity)
            return entity

    def delete(self, student_id: int) -> bool:
        with session_scope(self._session_factory) as session:
            result = session.execute(delete(Student).where(Student.id == student_id))
            session.commit()
            return bool(result.rowcount)
