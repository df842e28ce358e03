from typing import List, Optional

from registrar.student.errors import NotFoundError, StudentError
from registrar.student.model import Student, StudentStats
from registrar.student.result import Err, Ok, Result
from registrar.student.store import StudentStore


class StudentService:
    """
    Call boundary used by the web and terminal front ends.

    Mutations return Ok/Err results rather than raising, so each front end
    decides how to present a failure. Reads pass straight through to the
    store, which never raises.
    """

    def __init__(self, store: StudentStore):
        self.store = store

    def add(self, name: str, email: str, age: int, course: str) -> Result[int]:
        try:
            return Ok(self.store.add(Student(name=name, email=email, age=age, course=course)))
        except StudentError as e:
            return Err.from_exception(e)

    def update(
        self, student_id: int, name: str, email: str, age: int, course: str
    ) -> Result[Student]:
        try:
            self.store.update(
                Student(id=student_id, name=name, email=email, age=age, course=course)
            )
        except StudentError as e:
            return Err.from_exception(e)
        # Re-read so the caller sees the trimmed, stored values
        student = self.store.get_by_id(student_id)
        if student is None:
            return Err.from_exception(NotFoundError(student_id))
        return Ok(student)

    def delete(self, student_id: int) -> Result[int]:
        try:
            self.store.delete(student_id)
        except StudentError as e:
            return Err.from_exception(e)
        return Ok(student_id)

    def get_all(self) -> List[Student]:
        return sorted(self.store.get_all(), key=lambda s: s.id)

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self.store.get_by_id(student_id)

    def search_by_name(self, query: str) -> List[Student]:
        return sorted(self.store.search_by_name(query), key=lambda s: s.id)

    def filter_by_course(self, query: str) -> List[Student]:
        return sorted(self.store.filter_by_course(query), key=lambda s: s.id)

    def statistics(self) -> StudentStats:
        return self.store.statistics()

    def clear(self) -> None:
        self.store.clear()

    def count(self) -> int:
        return self.store.count()

    def courses(self) -> List[str]:
        """Distinct courses currently stored, alphabetically."""
        return sorted(self.store.statistics().course_distribution)
