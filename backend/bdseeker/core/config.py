import logging
import re
from datetime import timedelta
from typing import List, Optional
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

logger = logging.getLogger(__name__)

DEFAULT_JWT_SECRET = "your-secret-key"
DEFAULT_DB_PASSWORD = "postgres"

_DURATION_PART_RE = re.compile(r"(\d+(?:\.\d+)?)(ms|h|m|s)")
_DURATION_UNITS = {"h": 3600.0, "m": 60.0, "s": 1.0, "ms": 0.001}


def parse_duration(value: str) -> timedelta:
    """Parse a Go-style duration string such as ``24h``, ``1h30m`` or ``90s``.

    A bare number is read as seconds. Raises ValueError on anything else.
    """
    s = (value or "").strip()
    if not s:
        raise ValueError("empty duration")
    if re.fullmatch(r"\d+(?:\.\d+)?", s):
        return timedelta(seconds=float(s))
    pos = 0
    total = 0.0
    for m in _DURATION_PART_RE.finditer(s):
        if m.start() != pos:
            raise ValueError(f"invalid duration: {value!r}")
        total += float(m.group(1)) * _DURATION_UNITS[m.group(2)]
        pos = m.end()
    if pos != len(s):
        raise ValueError(f"invalid duration: {value!r}")
    return timedelta(seconds=total)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Load env from backend/.env regardless of CWD
        env_file=str(Path(__file__).resolve().parents[2] / ".env"),
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = Field(default="bdSeeker API", alias="APP_NAME")
    env: str = Field(default="development", alias="ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    database_url: Optional[str] = Field(default=None, alias="DATABASE_URL")
    # Used to assemble the connection URL when DATABASE_URL is unset.
    db_host: str = Field(default="localhost", alias="DB_HOST")
    db_port: int = Field(default=5432, alias="DB_PORT")
    db_user: str = Field(default="postgres", alias="DB_USER")
    db_password: str = Field(default=DEFAULT_DB_PASSWORD, alias="DB_PASSWORD")
    db_name: str = Field(default="bdseeker", alias="DB_NAME")
    db_sslmode: str = Field(default="disable", alias="DB_SSLMODE")

    jwt_secret: str = Field(default=DEFAULT_JWT_SECRET, alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_expiry: str = Field(default="24h", alias="JWT_EXPIRY")
    # Kept for parity with deployed env files; no endpoint issues refresh tokens.
    jwt_refresh_expiry: str = Field(default="168h", alias="JWT_REFRESH_EXPIRY")

    cookie_secure: bool = Field(default=False, alias="COOKIE_SECURE")
    cors_origins_raw: Optional[str] = Field(default=None, alias="CORS_ORIGINS", description="Comma separated list of allowed CORS origins")

    # Seed admin (dev/demo convenience)
    seed_admin_email: str = Field(default="admin@bdseeker.com", alias="SEED_ADMIN_EMAIL")
    seed_admin_password: str = Field(default="admin123", alias="SEED_ADMIN_PASSWORD")
    seed_on_startup: bool = Field(default=True, alias="SEED_ON_STARTUP")

    def _parse_list(self, v: Optional[str]) -> List[str]:
        if v is None:
            return []
        return [e.strip() for e in v.split(",") if e.strip()]

    @property
    def is_production(self) -> bool:
        return self.env.lower() in {"prod", "production"}

    @property
    def sqlalchemy_database_url(self) -> str:
        """DATABASE_URL as given, otherwise a postgres URL built from the DB_* parts."""
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
            query={"sslmode": self.db_sslmode},
        ).render_as_string(hide_password=False)

    @property
    def access_token_ttl(self) -> timedelta:
        return parse_duration(self.jwt_expiry)

    @property
    def refresh_token_ttl(self) -> timedelta:
        return parse_duration(self.jwt_refresh_expiry)

    @property
    def cors_origins(self) -> List[str]:
        items = self._parse_list(self.cors_origins_raw)
        if not items:
            return ["http://localhost:3000", "http://127.0.0.1:3000"]
        return items

    def validate_for_startup(self) -> None:
        """Refuse to boot with unsafe defaults in production."""
        if self.is_production and self.jwt_secret == DEFAULT_JWT_SECRET:
            raise RuntimeError("JWT_SECRET must be set in production environment")
        if self.is_production and make_url(self.sqlalchemy_database_url).password == DEFAULT_DB_PASSWORD:
            logger.warning("Using default database password in production is not recommended")
        # Fail fast on unparseable durations rather than on first login.
        parse_duration(self.jwt_expiry)
        parse_duration(self.jwt_refresh_expiry)


def get_settings() -> Settings:
    return Settings()  # type: ignore
