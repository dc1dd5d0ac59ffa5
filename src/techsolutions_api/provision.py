"""
techsolutions_api.provision

Create an admin user from the command line.

Usage:
    python -m techsolutions_api.provision --email admin@example.com --full-name "Site Admin"

The password is prompted for (twice) and never accepted as an argument.
"""

from __future__ import annotations

import argparse
import asyncio
import getpass
import sys

from techsolutions_api.auth.passwords import hash_password
from techsolutions_api.db.init_db import init_db
from techsolutions_api.db.repositories.users import UserRepo
from techsolutions_api.db.session import create_engine, create_sessionmaker
from techsolutions_api.settings import Settings, get_settings

MIN_PASSWORD_LENGTH = 8


async def create_admin(
    *,
    settings: Settings,
    email: str,
    password: str,
    full_name: str | None,
    role: str,
) -> int:
    engine = create_engine(settings.database_url)
    try:
        if settings.env in ("dev", "test"):
            await init_db(engine)
        async with create_sessionmaker(engine)() as session:
            users = UserRepo(session)
            if await users.get_by_email(email) is not None:
                raise ValueError(f"user {email!r} already exists")
            user = await users.create(
                email=email,
                password_hash=hash_password(password),
                full_name=full_name,
                role=role,
            )
            await session.commit()
            return user.id
    finally:
        await engine.dispose()


def _read_password() -> str:
    password = getpass.getpass("Password: ")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"password must be at least {MIN_PASSWORD_LENGTH} characters")
    if getpass.getpass("Confirm password: ") != password:
        raise ValueError("passwords do not match")
    return password


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an admin user.")
    parser.add_argument("--email", required=True)
    parser.add_argument("--full-name", default=None)
    parser.add_argument("--role", default="Admin")
    args = parser.parse_args(argv)

    email = args.email.strip()
    try:
        password = _read_password()
        user_id = asyncio.run(
            create_admin(
                settings=get_settings(),
                email=email,
                password=password,
                full_name=args.full_name,
                role=args.role,
            )
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"created user {user_id} ({email})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
