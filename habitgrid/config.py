import os
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]
load_dotenv(ROOT_DIR / ".env")


def _default_data_dir() -> Path:
    return Path(os.getenv("HABITGRID_DATA_DIR", str(Path.home() / ".habitgrid"))).expanduser()


class Settings:
    DATA_DIR: Path = _default_data_dir()
    DATABASE_URL: str = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR / 'habits.db'}")
    SQL_ECHO: bool = os.getenv("SQL_ECHO", "0") == "1"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    LOG_FILE: str = os.getenv("LOG_FILE", "").strip()
    STRICT_NOT_FOUND: bool = os.getenv("STRICT_NOT_FOUND", "0") == "1"
    API_HOST: str = os.getenv("API_HOST", "127.0.0.1").strip()
    API_PORT: int = int(os.getenv("API_PORT", "8765"))
    CORS_ORIGINS: list[str] = [
        item.strip()
        for item in os.getenv("CORS_ORIGINS", "*").split(",")
        if item.strip()
    ]


settings = Settings()
