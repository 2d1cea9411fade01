"""Typed inputs and records passed between routers, services and repositories."""

from .student import NewStudentInput, Student, StudentUpdateInput

__all__ = ["NewStudentInput", "Student", "StudentUpdateInput"]
