#!/usr/bin/env python3
"""
Add a student record directly to the database named by DATABASE_URL.

Usage:
  python scripts/add_student.py --name "Ann Lee" --email ann@example.com --course Math --age 20
"""
from __future__ import annotations

import argparse

from studentapp.core.config import get_settings
from studentapp.db.create_tables import create_all
from studentapp.db.session import build_engine, build_sessionmaker
from studentapp.repositories.student_repository import StudentRepository
from studentapp.schemas.student import NewStudentInput


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a student record")
    ap.add_argument("--name", required=True, help="Full name (ex.: 'Ann Lee')")
    ap.add_argument("--email", required=True, help="Email address")
    ap.add_argument("--course", required=True, help="Course name")
    ap.add_argument("--age", required=True, type=int, help="Age in years")
    args = ap.parse_args()

    settings = get_settings()
    engine = build_engine(settings.database_url, echo=settings.db_echo)
    create_all(engine)
    repo = StudentRepository(build_sessionmaker(engine))

    student = repo.create(
        NewStudentInput(full_name=args.name, email=args.email, course=args.course, age=args.age)
    )
    print("OK: student added")
    print(f"  Id: {student.id}")
    print(f"  Name: {student.full_name}")
    print(f"  Email: {student.email}")
    print(f"  Course: {student.course}")
    print(f"  Age: {student.age}")


if __name__ == "__main__":
    main()
