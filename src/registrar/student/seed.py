"""Sample students loaded into a fresh store."""

import logging

from registrar.student.errors import ValidationError
from registrar.student.model import Student
from registrar.student.store import StudentStore

logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    Student(name="Aarav Sharma", email="aarav.sharma@email.com", age=20, course="Computer Science"),
    Student(name="Priya Patel", email="priya.patel@email.com", age=21, course="Electrical Engineering"),
    Student(name="Rohan Singh", email="rohan.singh@email.com", age=22, course="Mechanical Engineering"),
    Student(name="Neha Gupta", email="neha.gupta@email.com", age=19, course="Business Administration"),
    Student(name="Vikram Joshi", email="vikram.joshi@email.com", age=23, course="Civil Engineering"),
]

SAMPLE_COURSES = [s.course for s in SAMPLE_STUDENTS]


def seed_store(store: StudentStore) -> int:
    """Add the sample students, skipping any already present. Returns the number added."""
    added = 0
    for student in SAMPLE_STUDENTS:
        try:
            store.add(student)
        except ValidationError as e:
            logger.info("Skipping sample %s: %s", student.email, e.message)
            continue
        added += 1
    return added
