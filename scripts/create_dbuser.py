"""Create a login account.

Usage: python scripts/create_dbuser.py <username> <password>
"""

import sys
import os

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tinysensor.config import get_settings
from tinysensor.infrastructure.database import Base, SessionLocal, engine
from tinysensor.domain.models.db_user import DbUser
from tinysensor.domain.schemas.db_user import DbUserWrite
from tinysensor.infrastructure.repositories.db_user_repository import SQLAlchemyDbUserRepository
from tinysensor.application.validators import validate_db_user
from tinysensor.application.services.db_user_service import register_db_user


def create(username: str, password: str) -> int:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        repo = SQLAlchemyDbUserRepository(db, DbUser)
        dto = DbUserWrite(username=username, password=password)
        violations = validate_db_user(dto, repo.username_exists, get_settings().ENFORCE_PASSWORD_POLICY)
        if violations:
            for field, code in violations:
                print(f"Rejected: {field} ({code})")
            return 1

        db_user = register_db_user(repo, dto)
        print(f"Created DbUser '{db_user.username}' with id {db_user.id}")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(2)
    sys.exit(create(sys.argv[1], sys.argv[2]))
