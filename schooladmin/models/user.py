from datetime import datetime
from sqlalchemy import Column, String, DateTime
from schooladmin.database import Base

ROLES = ("admin", "teacher", "student")

class User(Base):
    """
    Principal: login identity with a role.
    Not linked to the Teacher/Student business rows.
    """
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=True)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False)  # admin | teacher | student

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
