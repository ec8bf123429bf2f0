"""
Promote a user to admin by email, or create a new admin account.
Usage:
  python -m jobboard.scripts.create_admin user@example.com
  python -m jobboard.scripts.create_admin admin@example.com "Site Admin" <password>
"""
import sys

from jobboard.database import SessionLocal, init_db
from jobboard.models.enums import UserRole
from jobboard.repos.user_repo import create, get_by_email, set_role


def main():
    if len(sys.argv) not in (2, 4):
        print("Usage: python -m jobboard.scripts.create_admin <email> [<name> <password>]")
        sys.exit(1)
    email = sys.argv[1].strip()
    init_db()
    db = SessionLocal()
    try:
        user = get_by_email(db, email)
        if user:
            set_role(db, user.id, UserRole.ADMIN.value)
            print(f"Promoted {email} to admin.")
            return
        if len(sys.argv) == 2:
            print(f"User not found: {email}")
            sys.exit(1)
        name, password = sys.argv[2].strip(), sys.argv[3]
        if len(password) < 6:
            print("Password must be at least 6 characters")
            sys.exit(1)
        create(db, name, email, password, role=UserRole.ADMIN.value)
        print(f"Created admin {email}.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
