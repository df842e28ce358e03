import logging

from registrar.config import Config
from registrar.student.memory import InMemoryStudentRepository
from registrar.student.postgres import PostgresStudentRepository
from registrar.student.repository import StudentRepository
from registrar.student.seed import seed_store
from registrar.student.store import StudentStore

logger = logging.getLogger(__name__)


class RepositoryFactory:
    """Maps backend names to repository classes."""

    _repositories = {
        "memory": InMemoryStudentRepository,
        "postgres": PostgresStudentRepository,
    }

    @classmethod
    def create(cls, backend: str) -> StudentRepository:
        if backend not in cls._repositories:
            raise ValueError(
                f"Unknown backend: {backend}. Valid: {cls.get_supported_backends()}"
            )
        return cls._repositories[backend]()

    @classmethod
    def register(cls, name: str, repository_class) -> None:
        if not issubclass(repository_class, StudentRepository):
            raise ValueError("Repository class must subclass StudentRepository")
        cls._repositories[name] = repository_class
        logger.info("Registered student backend: %s", name)

    @classmethod
    def get_supported_backends(cls) -> list:
        return list(cls._repositories.keys())


def create_store(config: Config) -> StudentStore:
    """
    Build the student store for the configured backend.

    The PostgreSQL backend gets its table created first. Seeding only
    fills in sample students whose emails are not already stored.
    """
    repository = RepositoryFactory.create(config.backend)
    if isinstance(repository, PostgresStudentRepository):
        if not config.database_url:
            raise ValueError("DATABASE_URL is required for the postgres backend")
        repository.create_table()

    store = StudentStore(repository)
    if config.seed_sample_data:
        added = seed_store(store)
        logger.info("Seeded %d sample students", added)

    logger.info("Student store ready (backend=%s)", store.backend_name)
    return store
