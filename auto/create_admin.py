#!/usr/bin/env python3
"""
Create Admin User Script.

Creates a super-admin account directly in the database. Admin endpoints
under ``/sa`` are only reachable with a token issued to such an account.

Usage:
    python auto/create_admin.py
    python auto/create_admin.py --login admin --email admin@example.com --password Secret123

Environment Variables:
    ADMIN_LOGIN: Admin login (default: admin)
    ADMIN_EMAIL: Admin email (default: admin@example.com)
    ADMIN_PASSWORD: Admin password (default: auto-generated)
"""

from argparse import ArgumentParser, Namespace
from asyncio import run as asyncio_run
from os import environ
from secrets import token_urlsafe
from sys import exit as sys_exit

from pydantic import ValidationError as SchemaValidationError

from blogapp.auth.permissions import ADMIN_ROLE
from blogapp.db.database import close_db, init_db, transaction
from blogapp.errors import ValidationError
from blogapp.repositories import UserRepository
from blogapp.schemas import UserCreate, UserView
from blogapp.services import UserService


def generate_password() -> str:
    """Return a random password that satisfies the 6..20 length rule."""
    return token_urlsafe(12)[:16]


def parse_args() -> Namespace:
    parser = ArgumentParser(description="Create a super-admin user in the database.")
    parser.add_argument(
        "-l",
        "--login",
        default=environ.get("ADMIN_LOGIN", "admin"),
        help="Admin login (default: admin or ADMIN_LOGIN env var)",
    )
    parser.add_argument(
        "-e",
        "--email",
        default=environ.get("ADMIN_EMAIL", "admin@example.com"),
        help="Admin email (default: admin@example.com or ADMIN_EMAIL env var)",
    )
    parser.add_argument(
        "-p",
        "--password",
        default=environ.get("ADMIN_PASSWORD"),
        help="Admin password (default: auto-generated or ADMIN_PASSWORD env var)",
    )
    return parser.parse_args()


async def create_admin_user(data: UserCreate) -> UserView:
    """
    Persist an admin account.

    Raises
    ------
    ValidationError
        If the login or email is already taken.
    """
    await init_db()
    try:
        async with transaction() as session:
            return await UserService(UserRepository(session)).create(data, role=ADMIN_ROLE)
    finally:
        await close_db()


async def main() -> int:
    args = parse_args()
    generated = args.password is None
    password = generate_password() if generated else args.password

    try:
        data = UserCreate(login=args.login, email=args.email, password=password)
    except SchemaValidationError as e:
        for error in e.errors():
            print(f"❌ {'.'.join(str(p) for p in error['loc'])}: {error['msg']}")
        return 1

    try:
        admin = await create_admin_user(data)
    except ValidationError as e:
        print(f"\n❌ Error: {e.detail}")
        return 1

    print("\n✅ Admin user created successfully!")
    print(f"   ID:    {admin.id}")
    print(f"   Login: {admin.login}")
    print(f"   Email: {admin.email}")
    if generated:
        print(f"   Password: {password}")
        print("\n⚠️  NOTE: This password was auto-generated. Save it now!")
    print("\nYou can now login with:")
    print("  curl -X POST 'http://localhost:8000/auth/login' \\")
    print("    -H 'Content-Type: application/json' \\")
    print(f"    -d '{{\"loginOrEmail\": \"{admin.login}\", \"password\": \"...\"}}'")
    return 0


if __name__ == "__main__":
    sys_exit(asyncio_run(main()))
