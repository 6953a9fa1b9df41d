"""
Create a user (e.g. the first admin; most routes are admin-only). Run from project root:
  python -m app.scripts.create_user EMAIL PASSWORD [role] [--firstname NAME] [--lastname NAME]
Example:
  python -m app.scripts.create_user admin@example.com your-secure-password ADMIN
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.core.security import (
    EMAIL_MAX_LEN,
    EMAIL_MIN_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    hash_password,
)
from app.models.user import Role, User


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a StayEase user account.")
    parser.add_argument("email", help=f"Login email ({EMAIL_MIN_LEN}-{EMAIL_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument(
        "role",
        nargs="?",
        default=Role.CUSTOMER.value,
        choices=[r.value for r in Role],
        type=str.upper,
    )
    parser.add_argument("--firstname", default=None)
    parser.add_argument("--lastname", default=None)
    args = parser.parse_args(argv)

    email = args.email.strip()
    if not (EMAIL_MIN_LEN <= len(email) <= EMAIL_MAX_LEN):
        print("Invalid email length.", file=sys.stderr)
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.email == email).first()
        if existing:
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        user = User(
            firstname=args.firstname,
            lastname=args.lastname,
            email=email,
            password_hash=hash_password(args.password),
            role=Role(args.role),
        )
        db.add(user)
        db.commit()
        print(f"Created user '{email}' with role '{args.role}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
