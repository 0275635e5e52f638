from dataclasses import dataclass
import os

from dotenv import load_dotenv

load_dotenv()

MEMORY_DATABASE = ":memory:"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    database: str
    port: int
    username: str
    data_dir: str = "data"
    log_level: str = "WARNING"
    page_size: int = 10

    @property
    def db_path(self) -> str:
        if self.database == MEMORY_DATABASE or self.database.endswith(".db"):
            return self.database
        return os.path.join(self.data_dir, f"{self.database}.db")


def get_settings(database: str, port: int, username: str) -> Settings:
    if not database:
        raise ValueError("database name must not be empty")
    if not username:
        raise ValueError("database username must not be empty")

    page_size = os.getenv("MESSENGER_PAGE_SIZE", "10")
    try:
        page_size = int(page_size)
    except ValueError:
        raise ValueError(f"MESSENGER_PAGE_SIZE must be an integer, got {page_size!r}") from None
    if page_size < 1:
        raise ValueError("MESSENGER_PAGE_SIZE must be positive")

    log_level = os.getenv("MESSENGER_LOG_LEVEL", "WARNING").upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"MESSENGER_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")

    return Settings(
        database=database,
        port=port,
        username=username,
        data_dir=os.getenv("MESSENGER_DATA_DIR", "data"),
        log_level=log_level,
        page_size=page_size,
    )
