"""Error kinds reported by student store mutations."""


class StudentError(Exception):
    """Base class for recoverable student store errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StudentError):
    """Input violates a required-field, format, range or uniqueness rule."""


class NotFoundError(StudentError):
    """An operation referenced a student id that is not stored."""

    def __init__(self, student_id: int):
        super().__init__(f"Student not found with ID: {student_id}")
        self.student_id = student_id
