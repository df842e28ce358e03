import threading
from dataclasses import replace
from typing import Dict, List, Optional

from registrar.student.model import Student
from registrar.student.repository import StudentRepository


class IdSequence:
    """Monotonic id generator. Ids are never handed out twice until reset."""

    def __init__(self, start: int = 1):
        self._start = start
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def reset(self) -> None:
        with self._lock:
            self._next = self._start


class InMemoryStudentRepository(StudentRepository):
    """
    Process-local repository backed by a dict keyed by id.

    Students are frozen dataclasses, so handing them out never exposes
    the internal mapping; list() returns a fresh list each call.
    """

    backend_name = "memory"

    def __init__(self):
        self._students: Dict[int, Student] = {}
        self._ids = IdSequence()
        self._lock = threading.Lock()

    def insert(self, student: Student) -> Student:
        stored = replace(student, id=self._ids.next())
        with self._lock:
            self._students[stored.id] = stored
        return stored

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self._students.get(student_id)

    def list(self) -> List[Student]:
        with self._lock:
            return list(self._students.values())

    def replace(self, student: Student) -> bool:
        with self._lock:
            if student.id not in self._students:
                return False
            self._students[student.id] = student
            return True

    def remove(self, student_id: int) -> bool:
        with self._lock:
            return self._students.pop(student_id, None) is not None

    def reset(self) -> None:
        with self._lock:
            self._students.clear()
            self._ids.reset()

    def count(self) -> int:
        return len(self._students)
