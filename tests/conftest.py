"""Shared fixtures: an application bound to a throwaway SQLite database."""

from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from app.config import Settings  # noqa: E402
from app.infrastructure.database import initialize_database  # noqa: E402
from app.infrastructure.models import (  # noqa: E402
    ChurchModel,
    DioceseModel,
    ForaneModel,
    BookingModel,
    RoleModel,
    ServiceModel,
    ServiceSplitModel,
    UserModel,
)
from main import create_app  # noqa: E402

ROLE_IDS = {"ADMIN": 1, "PRIEST": 2, "MEMBER": 3}


class DirectoryBuilder:
    """Insert hierarchy rows with explicit ids so tests read like the data."""

    def __init__(self, session) -> None:
        self.session = session
        for name, role_id in ROLE_IDS.items():
            session.add(RoleModel(id=role_id, name=name))
        session.commit()

    def diocese(self, diocese_id: int, name: str | None = None) -> "DirectoryBuilder":
        self.session.add(DioceseModel(id=diocese_id, name=name or f"Diocese {diocese_id}"))
        self.session.commit()
        return self

    def forane(self, forane_id: int, diocese_id: int) -> "DirectoryBuilder":
        self.session.add(
            ForaneModel(id=forane_id, diocese_id=diocese_id, name=f"Forane {forane_id}")
        )
        self.session.commit()
        return self

    def church(self, church_id: int, forane_id: int, name: str | None = None) -> "DirectoryBuilder":
        self.session.add(
            ChurchModel(id=church_id, forane_id=forane_id, name=name or f"Church {church_id}")
        )
        self.session.commit()
        return self

    def user(
        self,
        user_id: int,
        *,
        church_id: int | None = None,
        role: str = "MEMBER",
        is_active: bool = True,
    ) -> "DirectoryBuilder":
        self.session.add(
            UserModel(
                id=user_id,
                role_id=ROLE_IDS[role],
                church_id=church_id,
                name=f"User {user_id}",
                email=f"user{user_id}@example.com",
                password_hash="not-a-real-hash",
                is_active=is_active,
            )
        )
        self.session.commit()
        return self

    def service(
        self,
        service_id: int,
        *,
        church_id: int,
        amount_paise: int,
        splits: dict[str, str] | None = None,
    ) -> "DirectoryBuilder":
        """Add a service; ``splits`` maps beneficiary type to percentage."""

        self.session.add(
            ServiceModel(
                id=service_id,
                church_id=church_id,
                name=f"Service {service_id}",
                amount_paise=amount_paise,
                splits=[
                    ServiceSplitModel(beneficiary_type=kind, percentage=Decimal(pct))
                    for kind, pct in (splits or {}).items()
                ],
            )
        )
        self.session.commit()
        return self

    def booking(
        self,
        booking_id: int,
        *,
        service_id: int,
        parishioner_id: int,
        church_id: int,
        amount_paise: int,
    ) -> "DirectoryBuilder":
        self.session.add(
            BookingModel(
                id=booking_id,
                service_id=service_id,
                parishioner_id=parishioner_id,
                church_id=church_id,
                amount_paise=amount_paise,
                created_by=parishioner_id,
            )
        )
        self.session.commit()
        return self


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'church_test.db'}",
        log_level="WARNING",
    )


@pytest.fixture()
def app(settings: Settings):
    application = create_app(settings)
    initialize_database(application.state.engine)
    yield application
    application.state.engine.dispose()


@pytest.fixture()
def db_session(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def directory(db_session) -> DirectoryBuilder:
    """Roles plus an empty hierarchy, ready to be filled by the test."""

    return DirectoryBuilder(db_session)


@pytest.fixture()
def diocese_example(directory: DirectoryBuilder) -> DirectoryBuilder:
    """Diocese 2 → foranes 10, 11 → churches 5, 6 and 8 → users 1-4.

    User 50 is the sender: an administrator in diocese 3 (forane 12, church 9),
    and user 60 is an inactive member of church 9.
    """

    (
        directory.diocese(2)
        .diocese(3)
        .forane(10, diocese_id=2)
        .forane(11, diocese_id=2)
        .forane(12, diocese_id=3)
        .church(5, forane_id=10)
        .church(6, forane_id=10)
        .church(8, forane_id=11)
        .church(9, forane_id=12)
        .user(1, church_id=5)
        .user(2, church_id=5, role="PRIEST")
        .user(3, church_id=6)
        .user(4, church_id=8, role="PRIEST")
        .user(50, church_id=9, role="ADMIN")
        .user(60, church_id=9, is_active=False)
    )
    return directory


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
