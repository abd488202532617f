"""Database account model — maps to the 'dbusers' table.

Accounts in this table are the only identities allowed to log in. Passwords are
stored and compared as plaintext.
"""

from sqlalchemy import Column, Integer, String

from tinysensor.infrastructure.database import Base


class DbUser(Base):
    __tablename__ = "dbusers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(32), unique=True, nullable=False, index=True)
    password = Column(String(32), nullable=False)

    def __repr__(self):
        return f"<DbUser {self.username}>"
