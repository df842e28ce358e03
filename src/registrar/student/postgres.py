from pathlib import Path
from typing import List, Optional

import psycopg
from psycopg.errors import CheckViolation, DataError, NotNullViolation, UniqueViolation

from registrar import db
from registrar.student.errors import ValidationError
from registrar.student.model import Student, StudentStats
from registrar.student.repository import StudentRepository

SCHEMA_FILE = Path(__file__).resolve().parents[1] / "migrations" / "001_initial_schema.sql"


def _like_pattern(query: str) -> str:
    """Build an ILIKE pattern that treats the query as a literal substring."""
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _rejected(error: psycopg.Error) -> ValidationError:
    """Report a constraint or data error from the database as a validation failure."""
    detail = error.diag.message_primary or str(error)
    return ValidationError(f"Student rejected by database: {detail}")


class PostgresStudentRepository(StudentRepository):
    """
    Repository for the students table.
    Encapsulates all SQL for student records.

    The schema repeats the store's invariants (non-blank fields, age range,
    case-insensitive unique email); violations surface as ValidationError.
    """

    backend_name = "postgres"

    def create_table(self, schema_file: Path = SCHEMA_FILE) -> None:
        """Apply the students schema. Safe to run repeatedly."""
        db.execute_script(schema_file.read_text())

    def insert(self, student: Student) -> Student:
        try:
            row = db.fetch_one(
                """
                INSERT INTO students (name, email, age, course)
                VALUES (%s, %s, %s, %s)
                RETURNING *
                """,
                (student.name, student.email, student.age, student.course),
            )
        except UniqueViolation as e:
            raise ValidationError("Student with this email already exists") from e
        except (CheckViolation, NotNullViolation, DataError) as e:
            raise _rejected(e) from e
        return Student.from_row(row)

    def get_by_id(self, student_id: int) -> Optional[Student]:
        row = db.fetch_one("SELECT * FROM students WHERE id = %s", (student_id,))
        return Student.from_row(row) if row else None

    def list(self) -> List[Student]:
        return [Student.from_row(r) for r in db.fetch_all("SELECT * FROM students")]

    def replace(self, student: Student) -> bool:
        try:
            rowcount = db.execute(
                """
                UPDATE students
                SET name = %s, email = %s, age = %s, course = %s
                WHERE id = %s
                """,
                (student.name, student.email, student.age, student.course, student.id),
            )
        except UniqueViolation as e:
            raise ValidationError("Another student with this email already exists") from e
        except (CheckViolation, NotNullViolation, DataError) as e:
            raise _rejected(e) from e
        return rowcount > 0

    def remove(self, student_id: int) -> bool:
        return db.execute("DELETE FROM students WHERE id = %s", (student_id,)) > 0

    def reset(self) -> None:
        db.execute("TRUNCATE students RESTART IDENTITY")

    def find_by_email(self, email: str) -> Optional[Student]:
        row = db.fetch_one(
            "SELECT * FROM students WHERE lower(email) = lower(%s)",
            (email.strip(),),
        )
        return Student.from_row(row) if row else None

    def search_by_name(self, query: str) -> List[Student]:
        rows = db.fetch_all(
            "SELECT * FROM students WHERE name ILIKE %s",
            (_like_pattern(query),),
        )
        return [Student.from_row(r) for r in rows]

    def filter_by_course(self, query: str) -> List[Student]:
        rows = db.fetch_all(
            "SELECT * FROM students WHERE course ILIKE %s",
            (_like_pattern(query),),
        )
        return [Student.from_row(r) for r in rows]

    def statistics(self) -> StudentStats:
        rows = db.fetch_all(
            """
            SELECT course, COUNT(*) AS students, SUM(age) AS total_age
            FROM students
            GROUP BY course
            """
        )
        total = sum(r["students"] for r in rows)
        total_age = sum(r["total_age"] for r in rows)
        return StudentStats(
            total_count=total,
            average_age=float(total_age) / total if total else 0.0,
            course_distribution={r["course"]: r["students"] for r in rows},
        )

    def count(self) -> int:
        row = db.fetch_one("SELECT COUNT(*) AS total FROM students")
        return row["total"]
