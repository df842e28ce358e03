"""
Student

This module provides the student record store, its backends and the
service used by the front ends.
"""

from registrar.student.errors import NotFoundError, StudentError, ValidationError
from registrar.student.factory import create_store
from registrar.student.model import Student, StudentStats
from registrar.student.result import Err, ErrorKind, Ok
from registrar.student.service import StudentService
from registrar.student.store import StudentStore

__all__ = [
    "Err",
    "ErrorKind",
    "NotFoundError",
    "Ok",
    "Student",
    "StudentError",
    "StudentService",
    "StudentStats",
    "StudentStore",
    "ValidationError",
    "create_store",
]
