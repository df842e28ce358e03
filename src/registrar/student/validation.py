"""Field rules for student records, applied by the store for every backend."""

from dataclasses import replace

from registrar.student.errors import ValidationError
from registrar.student.model import Student

MIN_AGE = 1
MAX_AGE = 150

# Column widths of the students table
MAX_NAME = 100
MAX_EMAIL = 100
MAX_COURSE = 50


def normalize_email(email: str) -> str:
    """Key used for case-insensitive email uniqueness."""
    return email.strip().lower()


def validate_student(student: Student | None) -> Student:
    """
    Check a student's fields and return a copy with string fields trimmed.

    Email is only required to contain "@" and "."; no stricter format
    check is applied.

    Raises:
        ValidationError: on the first violated rule
    """
    if student is None:
        raise ValidationError("Student cannot be null")

    name = (student.name or "").strip()
    email = (student.email or "").strip()
    course = (student.course or "").strip()

    if not name:
        raise ValidationError("Student name is required")
    if not email:
        raise ValidationError("Student email is required")
    if "@" not in email or "." not in email:
        raise ValidationError("Please enter a valid email address!")
    if isinstance(student.age, bool) or not isinstance(student.age, int):
        raise ValidationError("Student age must be a whole number")
    if not MIN_AGE <= student.age <= MAX_AGE:
        raise ValidationError(f"Please enter a valid age ({MIN_AGE}-{MAX_AGE})!")
    if not course:
        raise ValidationError("Student course is required")
    if len(name) > MAX_NAME:
        raise ValidationError(f"Student name must be at most {MAX_NAME} characters")
    if len(email) > MAX_EMAIL:
        raise ValidationError(f"Student email must be at most {MAX_EMAIL} characters")
    if len(course) > MAX_COURSE:
        raise ValidationError(f"Student course must be at most {MAX_COURSE} characters")

    return replace(student, name=name, email=email, course=course)
