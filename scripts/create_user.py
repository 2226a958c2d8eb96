#!/usr/bin/env python3
"""Script to create users (including admins) directly in the database."""

import sys
from pathlib import Path

# Add parent directory to path so we can import workshophub modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from workshophub.core.database import SessionLocal
from workshophub.core.exceptions import WorkshopHubError
from workshophub.core.roles import Role
from workshophub.models import registry  # noqa: F401
from workshophub.models.user import User
from workshophub.users.crud import UserCRUD


def create_user(name: str, email: str, password: str, role: Role = Role.PARTICIPANT) -> User:
    """Create a new user in the database."""
    db = SessionLocal()
    try:
        user = UserCRUD.create(
            db,
            name=name,
            email=email,
            password=password,
            role=role,
            allow_admin=True,
        )
    except WorkshopHubError as e:
        db.rollback()
        print(f"❌ Could not create user: {e.message}")
        sys.exit(1)
    finally:
        db.close()

    print("✅ User created successfully!")
    print(f"   Name: {user.name}")
    print(f"   Email: {user.email}")
    print(f"   Role: {user.role.value}")
    return user


def main():
    """Main entry point for the script."""
    if len(sys.argv) < 4:
        print("Usage: python create_user.py <name> <email> <password> [role]")
        print("\nExample:")
        print("  python create_user.py 'Site Admin' admin@example.com 'S3cure-pass' admin")
        print("  python create_user.py 'Ada L.' ada@example.com 'S3cure-pass' instructor")
        print("\nRoles: " + ", ".join(r.value for r in Role))
        sys.exit(1)

    name, email, password = sys.argv[1:4]
    role_name = sys.argv[4] if len(sys.argv) > 4 else Role.PARTICIPANT.value

    try:
        role = Role(role_name)
    except ValueError:
        print(f"❌ Invalid role '{role_name}'. Must be one of: " + ", ".join(r.value for r in Role))
        sys.exit(1)

    create_user(name=name, email=email, password=password, role=role)


if __name__ == "__main__":
    main()
