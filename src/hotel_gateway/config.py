"""Environment-driven configuration settings."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    """Application settings with local-development defaults."""

    database_path: str = "hotel_gateway.db"
    jwt_secret: str = "top_secret"
    log_level: str = "INFO"
    log_file: str | None = None
    cors_origins: list[str] = field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"]
    )
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables (and a .env file if present)."""
        load_dotenv()

        defaults = cls()
        cors_raw = os.getenv("CORS_ORIGINS")
        return cls(
            database_path=os.getenv("DATABASE_PATH", defaults.database_path),
            jwt_secret=os.getenv("JWT_SECRET", defaults.jwt_secret),
            log_level=os.getenv("LOG_LEVEL", defaults.log_level),
            log_file=os.getenv("LOG_FILE") or None,
            cors_origins=_split_origins(cors_raw) if cors_raw else defaults.cors_origins,
            host=os.getenv("HOST", defaults.host),
            port=int(os.getenv("PORT", str(defaults.port))),
        )
