"""Create the students table and load the sample students into PostgreSQL."""
from registrar.config import config
from registrar.log import configure_logging
from registrar.student.postgres import PostgresStudentRepository
from registrar.student.seed import SAMPLE_STUDENTS, seed_store
from registrar.student.store import StudentStore


def main():
    configure_logging(config.log_level)

    repository = PostgresStudentRepository()
    repository.create_table()
    print("Students table ready")

    added = seed_store(StudentStore(repository))
    print(f"Seeded {added} of {len(SAMPLE_STUDENTS)} sample students")


if __name__ == "__main__":
    main()
