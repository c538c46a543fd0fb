"""Utility script to seed roles, a diocese/forane/church and an administrator."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.users.create_user import create_user
from app.config import get_settings
from app.domain.exceptions import ChurchManagementError
from app.infrastructure.database import (
    build_engine,
    create_session_factory,
    initialize_database,
)
from app.infrastructure.models import ChurchModel, DioceseModel, ForaneModel, RoleModel

DEFAULT_ROLES = ("ADMIN", "PRIEST", "MEMBER")


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the seed."""

    parser = argparse.ArgumentParser(
        description="Seed the church directory with its first records.",
    )
    parser.add_argument("--diocese", default="Default Diocese", help="Diocese name")
    parser.add_argument("--forane", default="Default Forane", help="Forane name")
    parser.add_argument("--church", default="Default Church", help="Church name")
    parser.add_argument("--name", default="Administrator", help="Administrator name")
    parser.add_argument(
        "--email", default="admin@example.com", help="Administrator email"
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Administrator password. Prompted for when omitted.",
    )
    return parser.parse_args()


def _get_or_create(session, model, **fields):
    instance = session.query(model).filter_by(**fields).first()
    if instance is None:
        instance = model(**fields)
        session.add(instance)
        session.flush()
    return instance


def main() -> None:
    """Create the seed rows; existing rows with the same names are reused."""

    args = parse_args()

    password = args.password or getpass("Administrator password: ")
    if not password:
        raise SystemExit("No password provided.")

    engine = build_engine(get_settings())
    initialize_database(engine)
    session = create_session_factory(engine)()
    try:
        roles = {name: _get_or_create(session, RoleModel, name=name) for name in DEFAULT_ROLES}
        diocese = _get_or_create(session, DioceseModel, name=args.diocese)
        forane = _get_or_create(
            session, ForaneModel, name=args.forane, diocese_id=diocese.id
        )
        church = _get_or_create(session, ChurchModel, name=args.church, forane_id=forane.id)
        session.commit()

        user = create_user(
            session,
            name=args.name,
            email=args.email,
            password=password,
            role_id=roles["ADMIN"].id,
            church_id=church.id,
        )
    except ChurchManagementError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the administrator: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while seeding: {exc}") from exc
    else:
        print(
            "Directory seeded:\n"
            f"  Diocese: {diocese.name} (id {diocese.id})\n"
            f"  Forane: {forane.name} (id {forane.id})\n"
            f"  Church: {church.name} (id {church.id})\n"
            f"  Administrator: {user.email} (id {user.id})"
        )
    finally:
        session.close()
        engine.dispose()


if __name__ == "__main__":
    main()
