"""
Provision a user and print a bearer token for it.

Users normally come from the identity provider; this is for local testing
against the API docs.

Usage:
    python scripts/create_user.py someone@example.com "Some One"
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlmodel import Session

from app.core.security import create_access_token
from app.db.repositories.user import UserRepository
from app.db.session import engine
from app.models.user import User

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("email")
    parser.add_argument("full_name", nargs="?")
    args = parser.parse_args()

    with Session(engine) as session:
        repository = UserRepository(session)
        user = repository.get_by_email(args.email)
        if user is None:
            user = repository.create(User(email=args.email, full_name=args.full_name))
            print(f"Created user {user.id}")
        else:
            print(f"User {user.id} already exists")

    print(create_access_token({ "sub": str(user.id) }))
