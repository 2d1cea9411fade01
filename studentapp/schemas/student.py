from pydantic import BaseModel, ConfigDict


class NewStudentInput(BaseModel):
    full_name: str
    email: str
    course: str
    age: int


class StudentUpdateInput(NewStudentInput):
    id: int


class Student(NewStudentInput):
    id: int

    model_config = ConfigDict(from_attributes=True)
