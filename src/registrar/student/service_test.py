"""
Tests for StudentService result values.

Run with: pytest src/registrar/student/service_test.py -v
"""
from unittest.mock import patch

import pytest

from registrar.student import Err, ErrorKind, Ok, Student
from registrar.student.errors import NotFoundError, StudentError, ValidationError


class TestAdd:
    """Tests for StudentService.add()"""

    def test_add_returns_ok_with_id(self, service):
        result = service.add("Asha Rao", "asha@example.com", 22, "Biology")

        assert result == Ok(6)
        assert service.get_by_id(6).name == "Asha Rao"

    def test_duplicate_email_returns_validation_err(self, service):
        result = service.add("Another Aarav", "AARAV.SHARMA@email.com", 22, "Biology")

        assert isinstance(result, Err)
        assert result.kind is ErrorKind.VALIDATION
        assert "already exists" in result.message
        assert service.count() == 5

    def test_out_of_range_age_returns_validation_err(self, service):
        result = service.add("Asha Rao", "asha@example.com", 200, "Biology")

        assert result.ok is False
        assert result.kind is ErrorKind.VALIDATION


class TestUpdate:
    """Tests for StudentService.update()"""

    def test_update_returns_stored_student(self, service):
        result = service.update(2, "Priya P", "priya.patel@email.com", 22, "Electrical Engineering")

        assert result.ok
        assert result.value == Student(
            id=2, name="Priya P", email="priya.patel@email.com", age=22, course="Electrical Engineering"
        )

    def test_record_gone_after_update_returns_not_found(self, service):
        with patch.object(service.store, "get_by_id", return_value=None):
            result = service.update(2, "Priya P", "priya.patel@email.com", 22, "EE")

        assert result == Err(ErrorKind.NOT_FOUND, "Student not found with ID: 2")

    def test_unknown_id_returns_not_found(self, service):
        result = service.update(99, "Ghost", "ghost@example.com", 30, "None")

        assert result == Err(ErrorKind.NOT_FOUND, "Student not found with ID: 99")


class TestDelete:
    """Tests for StudentService.delete()"""

    def test_delete_returns_ok(self, service):
        assert service.delete(3) == Ok(3)
        assert service.get_by_id(3) is None
        assert service.count() == 4

    def test_unknown_id_returns_not_found(self, service):
        result = service.delete(42)

        assert result.kind is ErrorKind.NOT_FOUND


class TestQueries:
    def test_get_all_sorted_by_id(self, service):
        assert [s.id for s in service.get_all()] == [1, 2, 3, 4, 5]

    def test_search_by_name(self, service):
        assert [s.name for s in service.search_by_name("SH")] == ["Aarav Sharma", "Vikram Joshi"]

    def test_filter_by_course(self, service):
        assert [s.id for s in service.filter_by_course("engineering")] == [2, 3, 5]

    def test_courses(self, service):
        assert service.courses() == [
            "Business Administration",
            "Civil Engineering",
            "Computer Science",
            "Electrical Engineering",
            "Mechanical Engineering",
        ]

    def test_statistics(self, service):
        stats = service.statistics()

        assert stats.total_count == 5
        assert stats.average_age == 21.0

    def test_clear(self, service):
        service.clear()

        assert service.get_all() == []
        assert service.add("Asha Rao", "asha@example.com", 22, "Biology") == Ok(1)


class TestErrFromException:
    @pytest.mark.parametrize("exc,kind", [
        (NotFoundError(5), ErrorKind.NOT_FOUND),
        (ValidationError("bad email"), ErrorKind.VALIDATION),
    ])
    def test_maps_kind(self, exc, kind):
        assert Err.from_exception(exc).kind is kind

    def test_unknown_error_type_raises(self):
        with pytest.raises(TypeError):
            Err.from_exception(StudentError("plain"))
