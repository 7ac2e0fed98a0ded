from sqlalchemy import Column, String
from .base import Base, BaseEntity


class UserEntity(Base, BaseEntity):
    __tablename__ = "users"

    user_id = Column(String, primary_key=True)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    username = Column(String(100), nullable=False)
    role = Column(String(20), nullable=False, default="user")
