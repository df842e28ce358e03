import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load the appropriate .env file on module import
env = os.environ.get("REGISTRAR_ENV", "development").lower()
env_file = f".env.{env}"
if os.path.exists(env_file):
    load_dotenv(env_file)
else:
    # Fall back to the default .env file
    load_dotenv()

BACKENDS = ("memory", "postgres")


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    environment: str
    backend: str
    database_url: str | None
    seed_sample_data: bool
    log_level: str
    secret_key: str

    @classmethod
    def from_env(cls) -> "Config":
        backend = os.environ.get("REGISTRAR_BACKEND", "memory").lower()
        if backend not in BACKENDS:
            raise ValueError(f"Unknown backend: {backend}. Valid: {list(BACKENDS)}")

        return cls(
            environment=env,
            backend=backend,
            database_url=os.environ.get("DATABASE_URL"),
            seed_sample_data=_as_bool(os.environ.get("REGISTRAR_SEED", "true")),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            secret_key=os.environ.get("SECRET_KEY", "registrar-dev"),
        )


config = Config.from_env()
