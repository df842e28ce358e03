import logging
import threading
from dataclasses import replace
from typing import List, Optional

from registrar.student.errors import NotFoundError, ValidationError
from registrar.student.model import Student, StudentStats
from registrar.student.repository import StudentRepository
from registrar.student.validation import validate_student

logger = logging.getLogger(__name__)


class StudentStore:
    """
    CRUD and query operations over one student repository.

    Mutations raise ValidationError or NotFoundError so callers can report
    them. Reads never raise: an unexpected backend failure is logged and
    an empty or zeroed result is returned instead.
    """

    def __init__(self, repository: StudentRepository):
        self.repository = repository
        # Serializes uniqueness checks with the write that follows them
        self._lock = threading.RLock()

    @property
    def backend_name(self) -> str:
        return self.repository.backend_name

    # Mutations

    def add(self, student: Student) -> int:
        """Validate and store a new student. Returns the assigned id."""
        try:
            candidate = validate_student(student)
            with self._lock:
                if self.repository.find_by_email(candidate.email) is not None:
                    raise ValidationError("Student with this email already exists")
                stored = self.repository.insert(replace(candidate, id=0))
        except ValidationError as e:
            logger.warning("Rejected new student: %s", e.message)
            raise

        logger.info("Added student %s (%s)", stored.id, stored.name)
        return stored.id

    def update(self, student: Student) -> None:
        """Replace the stored student with the same id, all fields at once."""
        if student is None:
            raise ValidationError("Student cannot be null")

        try:
            with self._lock:
                if self.repository.get_by_id(student.id) is None:
                    raise NotFoundError(student.id)

                candidate = validate_student(student)
                existing = self.repository.find_by_email(candidate.email)
                if existing is not None and existing.id != candidate.id:
                    raise ValidationError("Another student with this email already exists")

                if not self.repository.replace(candidate):
                    raise NotFoundError(candidate.id)
        except (ValidationError, NotFoundError) as e:
            logger.warning("Rejected update of student %s: %s", student.id, e.message)
            raise

        logger.info("Updated student %s", student.id)

    def delete(self, student_id: int) -> None:
        with self._lock:
            if not self.repository.remove(student_id):
                logger.warning("Cannot delete unknown student %s", student_id)
                raise NotFoundError(student_id)

        logger.info("Deleted student %s", student_id)

    def clear(self) -> None:
        """Remove every student and restart ids at 1."""
        with self._lock:
            self.repository.reset()
        logger.info("Cleared all students")

    # Reads

    def get_all(self) -> List[Student]:
        try:
            return self.repository.list()
        except Exception:
            logger.exception("Error retrieving students")
            return []

    def get_by_id(self, student_id: int) -> Optional[Student]:
        try:
            return self.repository.get_by_id(student_id)
        except Exception:
            logger.exception("Error getting student %s", student_id)
            return None

    def search_by_name(self, query: str) -> List[Student]:
        """Case-insensitive substring match on name."""
        try:
            return self.repository.search_by_name(query)
        except Exception:
            logger.exception("Error searching students by name %r", query)
            return []

    def filter_by_course(self, query: str) -> List[Student]:
        """Case-insensitive substring match on course."""
        try:
            return self.repository.filter_by_course(query)
        except Exception:
            logger.exception("Error filtering students by course %r", query)
            return []

    def statistics(self) -> StudentStats:
        try:
            return self.repository.statistics()
        except Exception:
            logger.exception("Error calculating statistics")
            return StudentStats()

    def count(self) -> int:
        try:
            return self.repository.count()
        except Exception:
            logger.exception("Error counting students")
            return 0
