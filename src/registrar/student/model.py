from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class Student:
    """One student's stored attributes. ``id == 0`` means not yet assigned."""

    name: str
    email: str
    age: int
    course: str
    id: int = 0

    @classmethod
    def from_row(cls, row: dict) -> "Student":
        return cls(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            age=row["age"],
            course=row["course"],
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class StudentStats:
    total_count: int = 0
    average_age: float = 0.0
    course_distribution: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_students(cls, students: list[Student]) -> "StudentStats":
        """Compute totals in a single pass over the records."""
        total_age = 0
        distribution: dict[str, int] = {}
        for student in students:
            total_age += student.age
            distribution[student.course] = distribution.get(student.course, 0) + 1

        count = len(students)
        return cls(
            total_count=count,
            average_age=total_age / count if count else 0.0,
            course_distribution=distribution,
        )

    def to_dict(self) -> dict:
        return asdict(self)
