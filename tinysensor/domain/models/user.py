"""User domain model — maps to the 'users' table."""

from sqlalchemy import Column, Integer, String

from tinysensor.infrastructure.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    firstname = Column(String(60), nullable=True)
    lastname = Column(String(50), nullable=True, index=True)
    email = Column(String(256), unique=True, nullable=False)
    address = Column(String(255), nullable=True)
    image_url = Column("image", String(512), nullable=True)

    def __repr__(self):
        return f"<User {self.id} - {self.email}>"
