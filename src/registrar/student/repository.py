from abc import ABC, abstractmethod
from typing import List, Optional

from registrar.student.model import Student, StudentStats
from registrar.student.validation import normalize_email


class StudentRepository(ABC):
    """
    Data access for student records.

    Repositories only store and fetch; field rules and email uniqueness
    are enforced once, by StudentStore, for every backend. Query helpers
    default to a linear scan over list() and may be overridden by
    backends that can push the work down.
    """

    backend_name = "abstract"

    @abstractmethod
    def insert(self, student: Student) -> Student:
        """Store a new student, returning it with its assigned id."""

    @abstractmethod
    def get_by_id(self, student_id: int) -> Optional[Student]:
        """Get a student by ID."""

    @abstractmethod
    def list(self) -> List[Student]:
        """List all students, in no particular order."""

    @abstractmethod
    def replace(self, student: Student) -> bool:
        """Overwrite the stored student with the same id. False if absent."""

    @abstractmethod
    def remove(self, student_id: int) -> bool:
        """Remove a student. False if absent."""

    @abstractmethod
    def reset(self) -> None:
        """Remove every student and restart id assignment at 1."""

    def find_by_email(self, email: str) -> Optional[Student]:
        """Get the student whose email matches, ignoring case."""
        key = normalize_email(email)
        for student in self.list():
            if normalize_email(student.email) == key:
                return student
        return None

    def search_by_name(self, query: str) -> List[Student]:
        term = query.lower()
        return [s for s in self.list() if term in s.name.lower()]

    def filter_by_course(self, query: str) -> List[Student]:
        term = query.lower()
        return [s for s in self.list() if term in s.course.lower()]

    def statistics(self) -> StudentStats:
        return StudentStats.from_students(self.list())

    def count(self) -> int:
        return len(self.list())
