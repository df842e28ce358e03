import pytest

from registrar.student.errors import ValidationError
from registrar.student.model import Student
from registrar.student.validation import normalize_email, validate_student


class TestValidateStudent:
    def test_returns_trimmed_copy(self):
        student = Student(id=3, name=" Ana ", email=" ana@uni.edu ", age=19, course=" Art ")

        result = validate_student(student)

        assert result == Student(id=3, name="Ana", email="ana@uni.edu", age=19, course="Art")

    @pytest.mark.parametrize("email", ["a@b.c", "first.last@host", "@.", "x.y@z"])
    def test_email_only_needs_at_and_dot(self, email):
        assert validate_student(Student(name="Ana", email=email, age=19, course="Art")).email == email

    @pytest.mark.parametrize("age", ["20", 20.0, True, None])
    def test_non_integer_age_rejected(self, age):
        with pytest.raises(ValidationError, match="whole number"):
            validate_student(Student(name="Ana", email="ana@uni.edu", age=age, course="Art"))

    def test_none_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            validate_student(Student(name=None, email="ana@uni.edu", age=19, course="Art"))


def test_normalize_email():
    assert normalize_email("  Ana@Uni.EDU ") == "ana@uni.edu"


class TestFieldLengths:
    @pytest.mark.parametrize("field,limit", [("name", 100), ("email", 100), ("course", 50)])
    def test_longest_allowed_value_accepted(self, field, limit):
        fields = {"name": "Ana", "email": "ana@uni.edu", "age": 19, "course": "Art"}
        fields[field] = "a@b." + "x" * (limit - 4) if field == "email" else "x" * limit

        assert len(getattr(validate_student(Student(**fields)), field)) == limit

    @pytest.mark.parametrize("field,limit", [("name", 100), ("email", 100), ("course", 50)])
    def test_over_length_rejected(self, field, limit):
        fields = {"name": "Ana", "email": "ana@uni.edu", "age": 19, "course": "Art"}
        fields[field] = "a@b." + "x" * (limit - 3) if field == "email" else "x" * (limit + 1)

        with pytest.raises(ValidationError, match=f"{field} must be at most {limit} characters"):
            validate_student(Student(**fields))

    def test_length_measured_after_trim(self):
        student = Student(name="  " + "x" * 100 + "  ", email="ana@uni.edu", age=19, course="Art")

        assert validate_student(student).name == "x" * 100
