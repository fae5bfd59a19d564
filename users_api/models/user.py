# File: users_api/models/user.py

"""
User model.

The only entity in the store. The NOT NULL constraints on name, email and
address are the sole validation the service performs on incoming data.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from users_api.models.base import Base


class User(Base):
    __tablename__ = "users"
    # ids are never reused, even after the highest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r}, email={self.email!r})"
