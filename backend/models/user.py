"""
User model for authentication.
Accounts are identified by e-mail and sign in with a password.
"""

from sqlalchemy import Column, Integer, String, DateTime
from database.connection import Base, utcnow


class User(Base):
    """
    User model for storing authentication information.

    Attributes:
        id: Primary key, auto-incremented
        email: Unique e-mail used to sign in
        password_hash: Bcrypt hashed password
        created_at: Timestamp of account creation
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
