"""Student record use cases (list, create, edit, delete)."""

from __future__ import annotations

import logging

from studentapp.db.models import Student as StudentEntity
from studentapp.repositories.student_repository import StudentRepository
from studentapp.schemas.student import NewStudentInput, Student, StudentUpdateInput

logger = logging.getLogger(__name__)


class StudentError(Exception):
    """Base exception for student workflows."""


class StudentNotFoundError(StudentError):
    """Raised when no record matches the requested id."""

    def __init__(self, student_id: int) -> None:
        super().__init__(f"Student {student_id} not found")
        self.student_id = student_id


def _entity_to_student(entity: StudentEntity) -> Student:
    return Student.model_validate(entity)


class StudentService:
    """Thin façade mapping each use case onto one repository call."""

    def __init__(self, repository: StudentRepository) -> None:
        self.repository = repository

    def list_students(self) -> list[Student]:
        return [_entity_to_student(entity) for entity in self.repository.list_all()]

    def get_student(self, student_id: int) -> Student | None:
        entity = self.repository.find_by_id(student_id)
        return _entity_to_student(entity) if entity else None

    def require_student(self, student_id: int) -> Student:
        student = self.get_student(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return student

    def create_student(self, data: NewStudentInput) -> Student:
        entity = self.repository.create(data)
        logger.info("student created id=%s", entity.id)
        return _entity_to_student(entity)

    def update_student(self, data: StudentUpdateInput) -> Student | None:
        entity = self.repository.update(data)
        if entity is None:
            # unknown ids are ignored, the caller still redirects to the list
            logger.warning("student update ignored, id=%s does not exist", data.id)
            return None
        logger.info("student updated id=%s", entity.id)
        return _entity_to_student(entity)

    def delete_student(self, student_id: int) -> bool:
        removed = self.repository.delete(student_id)
        if removed:
            logger.info("student deleted id=%s", student_id)
        else:
            logger.info("student delete skipped, id=%s does not exist", student_id)
        return removed
