from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from bdseeker.core.config import Settings
from bdseeker.core.security import PasswordHasher, TokenService
from bdseeker.db.session import build_engine, build_session_factory


@dataclass
class AppContext:
    """Process-wide collaborators, built once at startup and passed explicitly.

    Routes reach it through ``request.app.state.context``; nothing imports a
    module-level settings object or engine.
    """

    settings: Settings
    engine: Engine
    session_factory: sessionmaker[Session]
    hasher: PasswordHasher
    tokens: TokenService

    @classmethod
    def from_settings(cls, settings: Settings, engine: Optional[Engine] = None) -> "AppContext":
        settings.validate_for_startup()
        engine = engine or build_engine(settings.sqlalchemy_database_url)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=build_session_factory(engine),
            hasher=PasswordHasher(),
            tokens=TokenService(settings.jwt_secret, settings.access_token_ttl, settings.jwt_algorithm),
        )

    def close(self) -> None:
        self.engine.dispose()
